"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_registry
from main import app
from services.chat_session import ChatSession
from services.session_registry import SessionRegistry
from services.skill_catalog import SkillCatalog, default_catalog


@pytest.fixture
def catalog() -> SkillCatalog:
    return default_catalog()


@pytest.fixture
def small_catalog() -> SkillCatalog:
    """Three-role catalog for tests that need hand-checkable numbers."""
    return SkillCatalog.from_mapping({
        "Pythonista": {
            "skills": ["python", "django", "flask", "pandas"],
            "description": "Writes Python.",
        },
        "Web Dev": {
            "skills": ["javascript", "html", "css", "python"],
            "description": "Builds websites.",
        },
        "Octo": {
            "skills": ["go", "rust", "zig", "nim", "ada", "lua", "elm", "perl"],
            "description": "Eight skills, one of each.",
        },
    })


@pytest.fixture
def session(catalog) -> ChatSession:
    return ChatSession("conn-1", catalog)


@pytest.fixture
def registry(catalog) -> SessionRegistry:
    return SessionRegistry(catalog, max_message_length=200)


@pytest.fixture
def client(registry):
    app.dependency_overrides[get_registry] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()
