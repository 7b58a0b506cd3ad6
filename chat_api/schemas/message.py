"""Message Schemas — Pydantic models with field-level validation for message endpoints.

Invariants:
    - MessageCreate.text: stripped, 1-5000 chars AFTER stripping
    - A rejected text never reaches MessageService (400 from the validation handler)

Design Decisions:
    - field_validator reuses core.validation.normalize_text: one rule, two call sites
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from chat_api.core.errors import InvalidInputError
from chat_api.core.validation import normalize_text


class MessageCreate(BaseModel):
    """Message creation — validates text emptiness and length after trimming."""
    text: str

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        try:
            return normalize_text(v)
        except InvalidInputError as e:
            raise ValueError(e.message) from e


class MessageResponse(BaseModel):
    """Message response — public-facing message data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    chat_id: int
    text: str
    created_at: datetime
