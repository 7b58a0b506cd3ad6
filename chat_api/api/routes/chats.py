"""Chat Routes — create, read and delete chats.

Invariants:
    - Path ids are plain positive 32-bit decimal ints; anything else is a 400 (get_chat_id)
    - ?limit= never fails the request: malformed or non-positive → 20, above 100 → 100
    - GET maps every domain failure to 404 (a chat that cannot be read is reported missing)

Design Decisions:
    - Thin routes delegate to ChatService; error → status mapping lives in
      api/error_handlers.py via ChatApiError.http_status
    - limit declared as str: a typed int query param would turn ?limit=abc into a 400
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from chat_api.api.dependencies import get_chat_id, get_chat_service
from chat_api.core.domain_types import ChatId
from chat_api.core.errors import ChatApiError, ErrorContext, NotFoundError
from chat_api.core.validation import parse_limit
from chat_api.schemas.chat import ChatCreate, ChatDetailResponse, ChatResponse
from chat_api.services.chat_service import ChatService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/chats", tags=["chats"])


@router.post(
    "", response_model=ChatResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_chat(
    body: ChatCreate, service: ChatService = Depends(get_chat_service),
):
    """Create a new chat."""
    chat = await service.create_chat(body.title)
    return ChatResponse.model_validate(chat)


@router.get("/{chat_id}", response_model=ChatDetailResponse)
async def get_chat(
    chat_id: ChatId = Depends(get_chat_id),
    limit: str | None = Query(None),
    service: ChatService = Depends(get_chat_service),
):
    """Get a chat with its newest messages."""
    parsed_limit = parse_limit(limit)
    try:
        chat = await service.get_chat(chat_id, parsed_limit)
    except NotFoundError:
        raise
    except ChatApiError as e:
        logger.warning(
            f"Chat {chat_id} unreadable: {e.message}",
            extra={"chat_id": chat_id, "error_code": e.code},
        )
        raise NotFoundError(
            "Chat", chat_id, ErrorContext(chat_id=chat_id),
        ) from e
    return ChatDetailResponse.model_validate(chat)


@router.delete("/{chat_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_chat(
    chat_id: ChatId = Depends(get_chat_id),
    service: ChatService = Depends(get_chat_service),
):
    """Delete a chat and, by cascade, all its messages."""
    await service.delete_chat(chat_id)
