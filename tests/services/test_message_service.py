"""Tests for MessageService — chat gating, text rules, storage isolation."""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from chat_api.core.domain_types import ChatId
from chat_api.core.errors import InvalidInputError, NotFoundError, StorageError
from chat_api.services.chat_service import ChatService
from chat_api.services.message_service import MessageService


@pytest.fixture
def chat_repo():
    repo = AsyncMock()
    repo.exists.return_value = True
    return repo


@pytest.fixture
def message_repo():
    repo = AsyncMock()
    repo.create.side_effect = lambda chat_id, text: SimpleNamespace(
        id=1, chat_id=chat_id, text=text, created_at=datetime.now(timezone.utc),
    )
    return repo


@pytest.fixture
def service(chat_repo, message_repo):
    return MessageService(message_repo, ChatService(chat_repo))


async def test_create_message_trims_text(service, message_repo):
    message = await service.create_message(ChatId(1), "  hi  ")
    message_repo.create.assert_awaited_once_with(1, "hi")
    assert message.text == "hi"


async def test_create_message_missing_chat_never_reaches_storage(
    service, chat_repo, message_repo,
):
    chat_repo.exists.return_value = False
    with pytest.raises(NotFoundError):
        await service.create_message(ChatId(999), "hello")
    message_repo.create.assert_not_awaited()


async def test_missing_chat_checked_before_text(service, chat_repo):
    chat_repo.exists.return_value = False
    with pytest.raises(NotFoundError):
        await service.create_message(ChatId(999), "   ")


async def test_create_message_whitespace_only_rejected(service, message_repo):
    with pytest.raises(InvalidInputError):
        await service.create_message(ChatId(1), "     ")
    message_repo.create.assert_not_awaited()


async def test_create_message_over_5000_chars_rejected(service, message_repo):
    with pytest.raises(InvalidInputError):
        await service.create_message(ChatId(1), "x" * 5001)
    message_repo.create.assert_not_awaited()


async def test_create_message_storage_error_propagates(service, message_repo):
    message_repo.create.side_effect = StorageError(
        "Integrity constraint violated", "insert message",
    )
    with pytest.raises(StorageError):
        await service.create_message(ChatId(1), "hello")


async def test_list_messages_clamps_limit(service, message_repo):
    message_repo.list_by_chat.return_value = []
    await service.list_messages(ChatId(1), 0)
    message_repo.list_by_chat.assert_awaited_once_with(1, 20)


async def test_list_messages_missing_chat(service, chat_repo, message_repo):
    chat_repo.exists.return_value = False
    with pytest.raises(NotFoundError):
        await service.list_messages(ChatId(5), 10)
    message_repo.list_by_chat.assert_not_awaited()
