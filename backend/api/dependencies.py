"""Shared dependencies for API routes."""

import logging

from config import settings
from services.session_registry import SessionRegistry
from services.skill_catalog import SkillCatalog, default_catalog, load_catalog

logger = logging.getLogger(__name__)

_catalog: SkillCatalog | None = None
_registry: SessionRegistry | None = None


def get_catalog() -> SkillCatalog:
    global _catalog
    if _catalog is None:
        if settings.skill_catalog_path:
            _catalog = load_catalog(settings.skill_catalog_path)
        else:
            _catalog = default_catalog()
            logger.info("Using built-in skill catalog (%d roles)", len(_catalog))
    return _catalog


def get_registry() -> SessionRegistry:
    global _registry
    if _registry is None:
        _registry = SessionRegistry(
            get_catalog(),
            max_recommendations=settings.max_recommendations,
            max_message_length=settings.max_message_length,
        )
    return _registry
