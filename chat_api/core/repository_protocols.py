"""Boundary Protocols — contracts between services and persistence.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy
    - Implementations (chat_api/db/) provided via dependency injection
    - Lookups that miss raise NotFoundError; storage failures raise StorageError

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, services await them inside the
      request task (cancellation propagates into the pending DB call)
"""

from datetime import datetime
from typing import Protocol

from chat_api.core.domain_types import ChatId, MessageId


class MessageLike(Protocol):
    """Structural contract for Message objects returned by repositories."""
    id: MessageId
    chat_id: ChatId
    text: str
    created_at: datetime


class ChatLike(Protocol):
    """Structural contract for Chat objects returned by repositories."""
    id: ChatId
    title: str
    created_at: datetime


class ChatRepository(Protocol):
    """Contract for chat persistence."""
    async def create(self, title: str) -> ChatLike: ...
    async def get_by_id(
        self, chat_id: ChatId, include_messages: bool = False, limit: int = 20,
    ) -> ChatLike: ...
    async def delete(self, chat_id: ChatId) -> None: ...
    async def exists(self, chat_id: ChatId) -> bool: ...


class MessageRepository(Protocol):
    """Contract for message persistence."""
    async def create(self, chat_id: ChatId, text: str) -> MessageLike: ...
    async def list_by_chat(
        self, chat_id: ChatId, limit: int,
    ) -> list[MessageLike]: ...
