"""Chat Service — chat-level rules between the HTTP layer and persistence.

Invariants:
    - Titles are trimmed and 1..200 characters before any write
    - get_chat() always passes a clamped limit (1..100) to the repository
    - validate_chat_exists() raises NotFoundError or returns None, nothing else

Design Decisions:
    - Repository injected through __init__: services never touch a global DB handle
    - validate_chat_exists() is the only contract MessageService depends on
"""

import logging

from chat_api.core.domain_types import ChatId
from chat_api.core.errors import ErrorContext, NotFoundError
from chat_api.core.repository_protocols import ChatLike, ChatRepository
from chat_api.core.validation import clamp_limit, normalize_title

logger = logging.getLogger(__name__)


class ChatService:
    """Create, read and delete chats."""

    def __init__(self, chat_repo: ChatRepository):
        self.chat_repo = chat_repo

    async def create_chat(self, title: str) -> ChatLike:
        title = normalize_title(title)
        chat = await self.chat_repo.create(title)
        logger.info(f"Chat {chat.id} created", extra={"chat_id": chat.id})
        return chat

    async def get_chat(self, chat_id: ChatId, limit: int) -> ChatLike:
        """Chat with its newest messages, at most `limit` after clamping."""
        return await self.chat_repo.get_by_id(
            chat_id, include_messages=True, limit=clamp_limit(limit),
        )

    async def delete_chat(self, chat_id: ChatId) -> None:
        await self.chat_repo.delete(chat_id)
        logger.info(f"Chat {chat_id} deleted", extra={"chat_id": chat_id})

    async def validate_chat_exists(self, chat_id: ChatId) -> None:
        if not await self.chat_repo.exists(chat_id):
            raise NotFoundError("Chat", chat_id, ErrorContext(chat_id=chat_id))
