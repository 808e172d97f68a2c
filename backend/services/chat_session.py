"""Per-connection conversation state for the job recommendation chat."""

import enum
import logging
import threading

from models.responses import ChatResponse
from services import recommender
from services.skill_catalog import SkillCatalog
from services.skill_extractor import extract_skills, normalize_skill

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Hello! I'm your job recommendation assistant. Tell me about your skills, "
    "programming languages, or tools you're familiar with, and I'll suggest "
    "relevant job opportunities for you."
)
NEED_MORE_INFO_MESSAGE = (
    "I don't have enough information about your skills yet. Could you tell me "
    "more about your technical background, programming languages, or tools "
    "you're familiar with?"
)
RESET_MESSAGE = "Conversation reset! Tell me about your skills again."
RECOMMENDATION_PREFIX = "Based on your skills, you might be interested in: "


class SessionState(str, enum.Enum):
    FRESH = "fresh"
    ENGAGED = "engaged"


def welcome_reply() -> ChatResponse:
    return ChatResponse(message=WELCOME_MESSAGE)


class ChatSession:
    """Accumulated skills for one connection.

    ``lock`` serializes turns; the registry also takes it on disconnect so a
    session is never closed mid-turn.
    """

    def __init__(
        self,
        connection_id: str,
        catalog: SkillCatalog,
        max_recommendations: int = recommender.DEFAULT_LIMIT,
    ) -> None:
        self.connection_id = connection_id
        self.catalog = catalog
        self.max_recommendations = max_recommendations
        self.known_skills: set[str] = set()
        self.lock = threading.Lock()
        self.closed = False

    @property
    def state(self) -> SessionState:
        return SessionState.ENGAGED if self.known_skills else SessionState.FRESH

    def add_skills(self, skills: set[str]) -> set[str]:
        """Record skills, returning the ones not previously known."""
        normalized = {normalize_skill(s) for s in skills}
        new = normalized - self.known_skills
        self.known_skills |= new
        return new

    def ingest(self, text: str) -> ChatResponse:
        new = self.add_skills(extract_skills(text, self.catalog))
        if new:
            logger.info(
                "Session %s learned %d skills (%d total)",
                self.connection_id, len(new), len(self.known_skills),
            )

        recommendations = recommender.rank(
            self.known_skills, self.catalog, limit=self.max_recommendations
        )
        skills = sorted(self.known_skills)

        if not recommendations:
            return ChatResponse(message=NEED_MORE_INFO_MESSAGE, skills=skills)

        titles = [r.title for r in recommendations]
        message = RECOMMENDATION_PREFIX + (titles[0] if len(titles) == 1 else ", ".join(titles))
        return ChatResponse(message=message, recommendations=recommendations, skills=skills)

    def reset(self) -> ChatResponse:
        self.known_skills.clear()
        logger.info("Session %s reset", self.connection_id)
        return ChatResponse(message=RESET_MESSAGE)
