"""Message Service — message-level rules, gated on the parent chat existing.

Invariants:
    - Chat existence is checked BEFORE text validation and before any write
    - Text is trimmed and 1..5000 characters when it reaches the repository
    - list_messages() passes a clamped limit (1..100)

Design Decisions:
    - Depends on ChatService.validate_chat_exists, not on ChatRepository: the
      existence rule has a single owner
    - Length re-checked here even though the request schema checks it: the
      service is also called from tests and scripts without the HTTP boundary
"""

import logging

from chat_api.core.domain_types import ChatId
from chat_api.core.repository_protocols import MessageLike, MessageRepository
from chat_api.core.validation import clamp_limit, normalize_text
from chat_api.services.chat_service import ChatService

logger = logging.getLogger(__name__)


class MessageService:
    """Append messages to chats and list the most recent ones."""

    def __init__(self, message_repo: MessageRepository, chat_service: ChatService):
        self.message_repo = message_repo
        self.chat_service = chat_service

    async def create_message(self, chat_id: ChatId, text: str) -> MessageLike:
        await self.chat_service.validate_chat_exists(chat_id)
        text = normalize_text(text)
        message = await self.message_repo.create(chat_id, text)
        logger.info(
            f"Message {message.id} added to chat {chat_id}",
            extra={"chat_id": chat_id, "message_id": message.id},
        )
        return message

    async def list_messages(self, chat_id: ChatId, limit: int) -> list[MessageLike]:
        await self.chat_service.validate_chat_exists(chat_id)
        return await self.message_repo.list_by_chat(chat_id, clamp_limit(limit))
