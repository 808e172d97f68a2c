"""Role -> required-skills catalog used by the chat engine.

The catalog is built once at startup and shared read-only by every session.
It can be loaded from a YAML document of the form::

    Data Analyst:
      description: Analyze data to help businesses make informed decisions.
      skills: [python, sql, excel]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping

import yaml

logger = logging.getLogger(__name__)


class UnknownRole(KeyError):
    """Raised when a role name is not present in the catalog."""


class CatalogError(ValueError):
    """Raised when catalog data is malformed."""


@dataclass(frozen=True)
class RoleProfile:
    name: str
    required_skills: tuple[str, ...]
    description: str


class SkillCatalog:
    """Immutable, ordered mapping of role name to :class:`RoleProfile`.

    Iteration follows insertion order, which the recommender uses as its
    tie-break between roles with equal match counts.
    """

    def __init__(self, roles: list[RoleProfile]) -> None:
        profiles: dict[str, RoleProfile] = {}
        for role in roles:
            if role.name in profiles:
                raise CatalogError(f"Duplicate role: {role.name}")
            if not role.required_skills:
                raise CatalogError(f"Role has no required skills: {role.name}")
            profiles[role.name] = role
        self._roles = profiles

        skills: dict[str, None] = {}
        for role in profiles.values():
            for skill in role.required_skills:
                skills.setdefault(skill, None)
        self._skills = tuple(skills)

    @classmethod
    def from_mapping(cls, data: Mapping) -> "SkillCatalog":
        """Build a catalog from ``{role: {"skills": [...], "description": str}}``."""
        if not isinstance(data, Mapping) or not data:
            raise CatalogError("Catalog must be a non-empty mapping of roles")

        roles = []
        for name, entry in data.items():
            if not isinstance(entry, Mapping):
                raise CatalogError(f"Role entry must be a mapping: {name}")
            skills = entry.get("skills")
            description = entry.get("description", "")
            if not isinstance(skills, list) or not all(isinstance(s, str) for s in skills):
                raise CatalogError(f"Role skills must be a list of strings: {name}")
            if not isinstance(description, str):
                raise CatalogError(f"Role description must be a string: {name}")
            roles.append(
                RoleProfile(
                    name=str(name),
                    required_skills=tuple(s.strip() for s in skills if s.strip()),
                    description=description.strip(),
                )
            )
        return cls(roles)

    def __iter__(self) -> Iterator[RoleProfile]:
        return iter(self._roles.values())

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, role: object) -> bool:
        return role in self._roles

    @property
    def role_names(self) -> list[str]:
        return list(self._roles)

    def get(self, role: str) -> RoleProfile:
        try:
            return self._roles[role]
        except KeyError:
            raise UnknownRole(role) from None

    def required_skills(self, role: str) -> tuple[str, ...]:
        return self.get(role).required_skills

    def description(self, role: str) -> str:
        return self.get(role).description

    def all_skills(self) -> tuple[str, ...]:
        """Every distinct required skill across all roles, first-seen order."""
        return self._skills


def load_catalog(path: str | Path) -> SkillCatalog:
    """Load a catalog from a YAML file."""
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    catalog = SkillCatalog.from_mapping(data)
    logger.info("Loaded skill catalog from %s (%d roles)", path, len(catalog))
    return catalog


# ---------------------------------------------------------------------------
# Built-in catalog
# ---------------------------------------------------------------------------
DEFAULT_ROLES: dict[str, dict] = {
    "Data Analyst": {
        "skills": [
            "python", "sql", "excel", "tableau", "powerbi", "r",
            "statistics", "data analysis",
        ],
        "description": (
            "Analyze data to help businesses make informed decisions. Work with "
            "databases, create reports, and identify trends."
        ),
    },
    "Frontend Developer": {
        "skills": [
            "javascript", "react", "vue", "angular", "html", "css",
            "typescript", "frontend",
        ],
        "description": (
            "Build user interfaces and interactive web applications. Focus on "
            "creating responsive and accessible user experiences."
        ),
    },
    "Backend Developer": {
        "skills": [
            "python", "java", "nodejs", "express", "django", "flask", "sql",
            "mongodb", "backend",
        ],
        "description": (
            "Develop server-side logic and APIs. Handle database operations and "
            "business logic implementation."
        ),
    },
    "Full Stack Developer": {
        "skills": [
            "javascript", "react", "vue", "angular", "nodejs", "express",
            "python", "django", "sql", "mongodb",
        ],
        "description": (
            "Work on both frontend and backend development. End-to-end "
            "application development and deployment."
        ),
    },
    "DevOps Engineer": {
        "skills": [
            "docker", "kubernetes", "aws", "azure", "jenkins", "git", "linux",
            "ci/cd",
        ],
        "description": (
            "Manage infrastructure, deployment pipelines, and system "
            "reliability. Bridge development and operations."
        ),
    },
    "Mobile Developer": {
        "skills": [
            "react native", "flutter", "swift", "kotlin", "android", "ios",
            "mobile",
        ],
        "description": (
            "Create mobile applications for iOS and Android platforms. Focus on "
            "mobile-specific user experiences."
        ),
    },
    "Data Scientist": {
        "skills": [
            "python", "r", "machine learning", "deep learning", "tensorflow",
            "pytorch", "statistics",
        ],
        "description": (
            "Apply statistical analysis and machine learning to solve complex "
            "business problems."
        ),
    },
    "UI/UX Designer": {
        "skills": [
            "figma", "adobe xd", "sketch", "photoshop", "illustrator",
            "design", "prototyping",
        ],
        "description": (
            "Design user interfaces and user experiences. Create wireframes, "
            "prototypes, and design systems."
        ),
    },
    "Product Manager": {
        "skills": [
            "agile", "scrum", "product management", "user research",
            "analytics", "strategy",
        ],
        "description": (
            "Lead product development from conception to launch. Coordinate "
            "between stakeholders and development teams."
        ),
    },
    "QA Engineer": {
        "skills": [
            "selenium", "cypress", "jest", "testing", "quality assurance",
            "automation",
        ],
        "description": "Ensure software quality through testing and quality assurance processes.",
    },
    "Vue Developer": {
        "skills": [
            "vue", "javascript", "vuex", "pinia", "composition api",
            "options api", "frontend",
        ],
        "description": (
            "Specialize in Vue.js development. Build modern, reactive web "
            "applications using Vue ecosystem."
        ),
    },
    "Software Engineer": {
        "skills": [
            "python", "java", "javascript", "c++", "c#", "algorithms",
            "data structures", "software development",
        ],
        "description": (
            "Design, develop, and maintain software applications. Solve complex "
            "technical problems."
        ),
    },
}


def default_catalog() -> SkillCatalog:
    return SkillCatalog.from_mapping(DEFAULT_ROLES)
