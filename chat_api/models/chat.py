"""Chat ORM — persists the aggregate root that owns messages.

Invariants:
    - id is an integer primary key assigned by the database
    - title is non-nullable, at most 200 characters (checked in the service)
    - Deleting a chat deletes its messages (ON DELETE CASCADE on messages.chat_id)

Design Decisions:
    - passive_deletes=True: the database cascade removes messages, the ORM never
      loads them just to delete them
    - lazy="raise": messages are attached explicitly by ChatRepository.get_by_id
      (bounded, newest-first), an accidental full lazy load fails loudly instead
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chat_api.db.base import Base


class Chat(Base):
    """Chat aggregate root — owns all its Messages."""
    __tablename__ = "chats"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    messages: Mapped[list["Message"]] = relationship(
        "Message", back_populates="chat",
        cascade="all, delete-orphan", passive_deletes=True,
        lazy="raise",
    )
