"""Inbound chat frames: a tagged union on the ``type`` field."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


class UserMessage(BaseModel):
    type: Literal["user_message"]
    content: str = Field(..., description="Free-text message from the user")


class ResetCommand(BaseModel):
    type: Literal["reset"]


InboundMessage = Annotated[Union[UserMessage, ResetCommand], Field(discriminator="type")]

inbound_adapter: TypeAdapter[InboundMessage] = TypeAdapter(InboundMessage)
