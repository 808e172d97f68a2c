"""JSON codec for chat frames."""

import json

from pydantic import ValidationError

from models.requests import InboundMessage, UserMessage, inbound_adapter
from models.responses import ErrorResponse, OutboundMessage

ERROR_MESSAGE = "Sorry, I encountered an error processing your message. Please try again."


class ProtocolError(ValueError):
    """Inbound frame could not be decoded into a known message."""


def _replace_lone_surrogates(value):
    # JSON allows "\ud800" escapes; pydantic rejects unpaired surrogates
    if isinstance(value, str):
        return value.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    return value


def decode_inbound(raw: str | bytes, max_length: int | None = None) -> InboundMessage:
    """Parse a raw frame into a ``UserMessage`` or ``ResetCommand``.

    Raises ProtocolError for malformed JSON, unknown or missing ``type``,
    or a missing or non-string ``content``. When max_length is set, longer
    content is rejected as well.
    """
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise ProtocolError(f"Malformed JSON: {e}") from e

    if isinstance(data, dict):
        data = {
            _replace_lone_surrogates(k): _replace_lone_surrogates(v)
            for k, v in data.items()
        }

    try:
        message = inbound_adapter.validate_python(data)
    except ValidationError as e:
        raise ProtocolError(f"Invalid frame: {e.error_count()} validation error(s)") from e

    if (
        max_length is not None
        and isinstance(message, UserMessage)
        and len(message.content) > max_length
    ):
        raise ProtocolError(f"Message too long (max {max_length} chars)")
    return message


def encode_outbound(message: OutboundMessage) -> str:
    return message.model_dump_json(by_alias=True)


def error_reply() -> ErrorResponse:
    return ErrorResponse(message=ERROR_MESSAGE)
