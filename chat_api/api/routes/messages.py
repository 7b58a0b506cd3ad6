"""Message Routes — append messages to a chat and list the newest ones.

Invariants:
    - Body text is trimmed and length-checked by MessageCreate before the service runs
    - Missing chat → 404, bad id / bad JSON / bad text → 400, storage failure → 500
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from chat_api.api.dependencies import get_chat_id, get_message_service
from chat_api.core.domain_types import ChatId
from chat_api.core.validation import parse_limit
from chat_api.schemas.message import MessageCreate, MessageResponse
from chat_api.services.message_service import MessageService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/chats/{chat_id}/messages", tags=["messages"])


@router.post(
    "", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_message(
    body: MessageCreate,
    chat_id: ChatId = Depends(get_chat_id),
    service: MessageService = Depends(get_message_service),
):
    """Append a message to an existing chat."""
    message = await service.create_message(chat_id, body.text)
    return MessageResponse.model_validate(message)


@router.get("", response_model=list[MessageResponse])
async def list_messages(
    chat_id: ChatId = Depends(get_chat_id),
    limit: str | None = Query(None),
    service: MessageService = Depends(get_message_service),
):
    """List the newest messages of a chat."""
    messages = await service.list_messages(chat_id, parse_limit(limit))
    return [MessageResponse.model_validate(m) for m in messages]
