"""Message Repository — SQLAlchemy persistence for messages scoped by chat.

Invariants:
    - create() relies on the chat_id foreign key; a missing chat surfaces as StorageError
    - list_by_chat() is newest-first (created_at DESC, id DESC) and at most `limit`
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chat_api.core.domain_types import ChatId
from chat_api.infrastructure.database import storage_errors
from chat_api.models.message import Message


class SqlMessageRepository:
    """Message persistence bound to one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, chat_id: ChatId, text: str) -> Message:
        message = Message(chat_id=chat_id, text=text)
        async with storage_errors(self.db, "insert message", "Message"):
            self.db.add(message)
            await self.db.commit()
            await self.db.refresh(message)
        return message

    async def list_by_chat(self, chat_id: ChatId, limit: int) -> list[Message]:
        async with storage_errors(self.db, "select messages"):
            result = await self.db.scalars(
                select(Message)
                .where(Message.chat_id == chat_id)
                .order_by(Message.created_at.desc(), Message.id.desc())
                .limit(limit)
            )
            return list(result.all())
