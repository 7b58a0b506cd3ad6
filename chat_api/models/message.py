"""Message ORM — persists a single text entry of a chat.

Invariants:
    - Always belongs to a Chat (chat_id FK, ON DELETE CASCADE)
    - text is trimmed, non-empty, at most 5000 characters (checked before insert)
    - Never updated after insert

Design Decisions:
    - Text column over String(5000): length is an application rule, not a storage one
    - chat_id indexed: every read is "newest messages of one chat"
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chat_api.db.base import Base


class Message(Base):
    """Message entity — one text entry in a chat."""
    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    chat_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("chats.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    chat: Mapped["Chat"] = relationship(
        "Chat", back_populates="messages", lazy="raise",
    )
