"""Connection registry: one ChatSession per live connection.

The registry map is guarded by a single lock. Each session's own lock is held
for the duration of a turn, and ``on_disconnect`` takes it before marking the
session closed, so disconnect waits for an in-flight turn and any later
message for that connection is dropped.
"""

import logging
import threading

from models.requests import ResetCommand
from models.responses import ChatResponse, OutboundMessage
from services import recommender
from services.chat_session import ChatSession, welcome_reply
from services.protocol import ProtocolError, decode_inbound, error_reply
from services.skill_catalog import SkillCatalog

logger = logging.getLogger(__name__)


class SessionRegistry:
    def __init__(
        self,
        catalog: SkillCatalog,
        max_recommendations: int = recommender.DEFAULT_LIMIT,
        max_message_length: int | None = None,
    ) -> None:
        self.catalog = catalog
        self.max_recommendations = max_recommendations
        self.max_message_length = max_message_length
        self._sessions: dict[str, ChatSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, connection_id: object) -> bool:
        with self._lock:
            return connection_id in self._sessions

    def get(self, connection_id: str) -> ChatSession | None:
        with self._lock:
            return self._sessions.get(connection_id)

    def on_connect(self, connection_id: str) -> ChatResponse:
        """Create a fresh session and return the welcome frame to send."""
        session = ChatSession(connection_id, self.catalog, self.max_recommendations)
        with self._lock:
            if connection_id in self._sessions:
                raise ValueError(f"Connection already registered: {connection_id}")
            self._sessions[connection_id] = session
            active = len(self._sessions)
        logger.info("Client connected: %s (%d active)", connection_id, active)
        return welcome_reply()

    def on_message(self, connection_id: str, raw: str | bytes) -> OutboundMessage | None:
        """Handle one inbound frame.

        Returns the frame to send back, or None when the connection has no
        live session.
        """
        session = self.get(connection_id)
        if session is None:
            logger.debug("Dropping frame for unknown connection %s", connection_id)
            return None

        try:
            message = decode_inbound(raw, self.max_message_length)
        except ProtocolError as e:
            logger.warning("Protocol error on %s: %s", connection_id, e)
            return error_reply()

        with session.lock:
            if session.closed:
                return None
            if isinstance(message, ResetCommand):
                return session.reset()
            return session.ingest(message.content)

    def on_disconnect(self, connection_id: str) -> None:
        with self._lock:
            session = self._sessions.pop(connection_id, None)
            active = len(self._sessions)
        if session is None:
            return
        with session.lock:
            session.closed = True
        logger.info("Client disconnected: %s (%d active)", connection_id, active)
