"""Service Providers — FastAPI dependencies wiring session → repository → service.

Invariants:
    - One AsyncSession per request, shared by every repository of that request
    - Services are built per request; no service holds state between requests

Design Decisions:
    - Plain Depends chain over a DI container: two services, explicit is enough
    - {chat_id} arrives as a raw string and is parsed by parse_path_id, so a
      malformed id is an InvalidInputError (400) and never a coerced int
"""

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from chat_api.core.domain_types import ChatId
from chat_api.core.validation import parse_path_id
from chat_api.db.chat_repository import SqlChatRepository
from chat_api.db.message_repository import SqlMessageRepository
from chat_api.infrastructure.database import get_db
from chat_api.services.chat_service import ChatService
from chat_api.services.message_service import MessageService


def get_chat_service(db: AsyncSession = Depends(get_db)) -> ChatService:
    return ChatService(SqlChatRepository(db))


def get_message_service(
    db: AsyncSession = Depends(get_db),
    chat_service: ChatService = Depends(get_chat_service),
) -> MessageService:
    return MessageService(SqlMessageRepository(db), chat_service)


def get_chat_id(chat_id: str = Path()) -> ChatId:
    return ChatId(parse_path_id(chat_id))
