"""Chat Repository — SQLAlchemy persistence for the Chat aggregate root.

Invariants:
    - get_by_id / delete raise NotFoundError when no row matches
    - Attached messages are newest-first (id DESC) and at most `limit`
    - exists() never materializes a Chat
    - Each write is a single statement committed on its own

Design Decisions:
    - Messages attached with set_committed_value: the relationship stays lazy="raise"
      and the slice is loaded by one bounded query
    - delete() is a bulk DELETE: rowcount detects the missing row, the database
      cascade removes messages without loading them
"""

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import set_committed_value

from chat_api.core.domain_types import ChatId, DEFAULT_MESSAGE_LIMIT
from chat_api.core.errors import ErrorContext, NotFoundError
from chat_api.infrastructure.database import storage_errors
from chat_api.models.chat import Chat
from chat_api.models.message import Message


class SqlChatRepository:
    """Chat persistence bound to one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, title: str) -> Chat:
        chat = Chat(title=title)
        async with storage_errors(self.db, "insert chat", "Chat"):
            self.db.add(chat)
            await self.db.commit()
            await self.db.refresh(chat)
        return chat

    async def get_by_id(
        self,
        chat_id: ChatId,
        include_messages: bool = False,
        limit: int = DEFAULT_MESSAGE_LIMIT,
    ) -> Chat:
        async with storage_errors(self.db, "select chat"):
            chat = await self.db.scalar(select(Chat).where(Chat.id == chat_id))
            if chat is None:
                raise NotFoundError(
                    "Chat", chat_id, ErrorContext(chat_id=chat_id),
                )
            if include_messages:
                result = await self.db.scalars(
                    select(Message)
                    .where(Message.chat_id == chat_id)
                    .order_by(Message.id.desc())
                    .limit(limit)
                )
                set_committed_value(chat, "messages", list(result.all()))
        return chat

    async def delete(self, chat_id: ChatId) -> None:
        async with storage_errors(self.db, "delete chat"):
            result = await self.db.execute(
                delete(Chat).where(Chat.id == chat_id),
            )
            if result.rowcount == 0:
                await self.db.rollback()
                raise NotFoundError(
                    "Chat", chat_id, ErrorContext(chat_id=chat_id),
                )
            await self.db.commit()

    async def exists(self, chat_id: ChatId) -> bool:
        async with storage_errors(self.db, "select chat"):
            found = await self.db.scalar(
                select(exists().where(Chat.id == chat_id)),
            )
        return bool(found)
