"""Keyword skill extraction against the role catalog.

Matching is plain substring containment on the lower-cased text. There is no
tokenization or word-boundary check, so short skills match inside longer
words ("r" matches "react", "java" matches "javascript").
"""

import logging

from services.skill_catalog import SkillCatalog

logger = logging.getLogger(__name__)


def normalize_skill(skill: str) -> str:
    """Normalize a skill string for storage and comparison."""
    return skill.lower().strip()


def extract_skills(text: str, catalog: SkillCatalog) -> set[str]:
    """Return every catalog skill mentioned anywhere in ``text``.

    Skills are returned in their canonical catalog casing; a skill required by
    several roles appears once.
    """
    text_lower = text.lower()
    found = {skill for skill in catalog.all_skills() if skill.lower() in text_lower}
    logger.debug("Extracted %d skills from %d chars", len(found), len(text))
    return found
