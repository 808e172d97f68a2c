import logging
import uuid

from fastapi import APIRouter, Depends, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_registry
from config import settings
from models.responses import HealthResponse
from services.protocol import encode_outbound
from services.session_registry import SessionRegistry

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/", response_class=PlainTextResponse)
async def index():
    return "Job Recommendation Chat Server is running"


@router.get("/health", response_model=HealthResponse)
@limiter.limit(settings.health_rate_limit)
async def health(request: Request, registry: SessionRegistry = Depends(get_registry)):
    return HealthResponse(
        status="ok",
        active_sessions=len(registry),
        roles=len(registry.catalog),
    )


@router.websocket("/")
@router.websocket("/ws")
async def chat(websocket: WebSocket, registry: SessionRegistry = Depends(get_registry)):
    await websocket.accept()
    connection_id = uuid.uuid4().hex

    try:
        await websocket.send_text(encode_outbound(registry.on_connect(connection_id)))
        while True:
            frame = await websocket.receive()
            if frame["type"] == "websocket.disconnect":
                break
            raw = frame.get("text")
            if raw is None:
                raw = frame.get("bytes") or b""

            reply = registry.on_message(connection_id, raw)
            if reply is not None:
                await websocket.send_text(encode_outbound(reply))
    except WebSocketDisconnect:
        pass
    except Exception as e:
        # Send/receive failure: drop the session, the client can reconnect
        logger.error("WebSocket error on %s: %s", connection_id, e)
    finally:
        registry.on_disconnect(connection_id)
