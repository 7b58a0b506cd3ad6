"""Chat Schemas — request/response models for the chat endpoints.

Invariants:
    - ChatCreate.title only has to be a string here: trimming and the length
      rule belong to ChatService (InvalidInputError → 400)
    - ChatDetailResponse serializes the attached messages under the "message" key

Design Decisions:
    - from_attributes: responses are validated straight from ORM objects
    - validation_alias="messages": ORM relationship name differs from the wire key
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from chat_api.schemas.message import MessageResponse


class ChatCreate(BaseModel):
    """Chat creation payload."""
    title: str


class ChatResponse(BaseModel):
    """Chat without messages — returned by POST /api/chats."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    created_at: datetime


class ChatDetailResponse(ChatResponse):
    """Chat with its newest messages — returned by GET /api/chats/{id}."""
    message: list[MessageResponse] = Field(
        default_factory=list, validation_alias="messages",
    )
