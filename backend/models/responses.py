from typing import Literal

from pydantic import BaseModel, Field


class Recommendation(BaseModel):
    title: str
    description: str = ""
    match_score: int = Field(0, ge=0, le=100, serialization_alias="matchScore")


class ChatResponse(BaseModel):
    """Reply frame for welcome, reset and every user turn."""
    type: Literal["response"] = "response"
    message: str
    recommendations: list[Recommendation] = []
    skills: list[str] = []


class ErrorResponse(BaseModel):
    type: Literal["error"] = "error"
    message: str


OutboundMessage = ChatResponse | ErrorResponse


class HealthResponse(BaseModel):
    status: str = "ok"
    active_sessions: int = 0
    roles: int = 0
