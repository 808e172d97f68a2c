"""Rank catalog roles against a session's accumulated skills.

Two matching rules are in play:

- Inclusion and ordering use an exact, case-insensitive match count.
- The displayed ``match_score`` uses a looser rule where a required skill
  counts if any known skill contains it or is contained by it.

A role can therefore score higher than its match count alone suggests.
"""

import logging
from collections.abc import Iterable

from models.responses import Recommendation
from services.skill_catalog import RoleProfile, SkillCatalog

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 3


def match_count(role: RoleProfile, known_skills: set[str]) -> int:
    """Number of required skills present exactly (lower-cased) in known_skills."""
    return sum(1 for skill in role.required_skills if skill.lower() in known_skills)


def _fuzzy_matches(skill: str, known_skills: Iterable[str]) -> bool:
    skill = skill.lower()
    return any(known in skill or skill in known for known in known_skills)


def match_score(role: RoleProfile, known_skills: set[str]) -> int:
    """Percentage (0-100) of required skills with a substring match either way.

    Rounds half up.
    """
    total = len(role.required_skills)
    if total == 0:
        return 0
    matched = sum(1 for skill in role.required_skills if _fuzzy_matches(skill, known_skills))
    return (200 * matched + total) // (2 * total)


def rank(
    known_skills: set[str],
    catalog: SkillCatalog,
    limit: int = DEFAULT_LIMIT,
) -> list[Recommendation]:
    """Top ``limit`` roles by exact match count, scored with ``match_score``.

    Roles with no exact match are excluded. Ties keep catalog order.
    """
    counts = [(role, match_count(role, known_skills)) for role in catalog]
    counts = [(role, n) for role, n in counts if n > 0]
    counts.sort(key=lambda item: item[1], reverse=True)

    recommendations = [
        Recommendation(
            title=role.name,
            description=role.description,
            match_score=match_score(role, known_skills),
        )
        for role, _ in counts[:limit]
    ]
    logger.debug(
        "Ranked %d/%d roles for %d skills",
        len(recommendations), len(catalog), len(known_skills),
    )
    return recommendations
