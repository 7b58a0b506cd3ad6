"""Chat routes — status codes, body shapes, limit handling, id parsing.

Invariants:
    - POST /api/chats → 201 {id, title, created_at}; blank/too-long title → 400
    - GET /api/chats/{id} → 200 with newest-first "message" list, any failure → 404
    - DELETE /api/chats/{id} → 204 and cascade; missing → 404
    - Non-positive / non-numeric / oversized ids → 400
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, select

from chat_api.api.dependencies import get_chat_service
from chat_api.core.errors import AlreadyExistsError, StorageError
from chat_api.main import app
from chat_api.models.message import Message
from chat_api.services.chat_service import ChatService


@pytest.fixture
def failing_chat_repo():
    """Override ChatService with a repository whose calls are scripted per test."""
    repo = AsyncMock()
    app.dependency_overrides[get_chat_service] = lambda: ChatService(repo)
    yield repo
    app.dependency_overrides.pop(get_chat_service, None)


# --- POST /api/chats ----------------------------------------------------------

async def test_create_chat_returns_201(client):
    res = await client.post("/api/chats", json={"title": "  Release plan  "})
    assert res.status_code == 201
    body = res.json()
    assert body["title"] == "Release plan"
    assert isinstance(body["id"], int)
    assert "created_at" in body
    assert "message" not in body


async def test_create_chat_assigns_fresh_ids(client):
    first = (await client.post("/api/chats", json={"title": "A"})).json()
    second = (await client.post("/api/chats", json={"title": "B"})).json()
    assert first["id"] != second["id"]


@pytest.mark.parametrize("title", ["", "    "])
async def test_create_chat_blank_title_is_400(client, title):
    res = await client.post("/api/chats", json={"title": title})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_INPUT"


async def test_create_chat_title_over_200_chars_is_400(client):
    res = await client.post("/api/chats", json={"title": "t" * 201})
    assert res.status_code == 400


async def test_create_chat_invalid_json_is_400(client):
    res = await client.post(
        "/api/chats", content="not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_create_chat_missing_title_is_400(client):
    res = await client.post("/api/chats", json={"name": "x"})
    assert res.status_code == 400


async def test_create_chat_conflict_is_409(client, failing_chat_repo):
    failing_chat_repo.create.side_effect = AlreadyExistsError("Chat")
    res = await client.post("/api/chats", json={"title": "Existing"})
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "ALREADY_EXISTS"


async def test_create_chat_storage_error_is_500(client, failing_chat_repo):
    failing_chat_repo.create.side_effect = StorageError("Database driver error", "insert chat")
    res = await client.post("/api/chats", json={"title": "Chat"})
    assert res.status_code == 500


async def test_list_chats_method_not_allowed(client):
    res = await client.get("/api/chats")
    assert res.status_code == 405


# --- GET /api/chats/{id} ------------------------------------------------------

async def test_get_chat_returns_messages_newest_first(client, seed_chat, seed_messages):
    res = await client.get(f"/api/chats/{seed_chat.id}")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == seed_chat.id
    assert body["title"] == "Seeded chat"
    texts = [m["text"] for m in body["message"]]
    assert len(texts) == 20
    assert texts[0] == "m30"
    assert texts[-1] == "m11"


async def test_get_chat_without_messages_has_empty_list(client, seed_chat):
    res = await client.get(f"/api/chats/{seed_chat.id}")
    assert res.status_code == 200
    assert res.json()["message"] == []


@pytest.mark.parametrize("query,expected", [
    ("limit=5", 5), ("limit=0", 20), ("limit=-3", 20),
    ("limit=abc", 20), ("limit=500", 30), ("", 20),
    ("limit=5_0", 20), ("limit=%205", 20), ("limit=%2B5", 5),
])
async def test_get_chat_limit_handling(client, seed_chat, seed_messages, query, expected):
    res = await client.get(f"/api/chats/{seed_chat.id}?{query}")
    assert res.status_code == 200
    assert len(res.json()["message"]) == expected


async def test_get_chat_limit_capped_at_100(client, failing_chat_repo):
    failing_chat_repo.get_by_id.side_effect = StorageError("x", "select chat")
    await client.get("/api/chats/1?limit=500")
    failing_chat_repo.get_by_id.assert_awaited_once_with(
        1, include_messages=True, limit=100,
    )


async def test_get_missing_chat_is_404(client):
    res = await client.get("/api/chats/999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_get_chat_storage_error_reported_as_404(client, failing_chat_repo):
    failing_chat_repo.get_by_id.side_effect = StorageError(
        "Connection or operational error", "select chat",
    )
    res = await client.get("/api/chats/1")
    assert res.status_code == 404


@pytest.mark.parametrize("chat_id", [
    "abc", "0", "-1", "1.5", "99999999999", "2147483648",
    "1.0", "1_0", "+1", "01", "%201",
])
async def test_get_chat_bad_id_is_400(client, seed_chat, chat_id):
    res = await client.get(f"/api/chats/{chat_id}")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_INPUT"


async def test_post_on_chat_path_not_allowed(client, seed_chat):
    res = await client.post(f"/api/chats/{seed_chat.id}", json={})
    assert res.status_code == 405


# --- DELETE /api/chats/{id} ---------------------------------------------------

async def test_delete_chat_returns_204(client, seed_chat):
    res = await client.delete(f"/api/chats/{seed_chat.id}")
    assert res.status_code == 204
    assert res.content == b""


async def test_delete_chat_cascades_and_then_404(client, seed_chat, seed_messages, test_db):
    await client.delete(f"/api/chats/{seed_chat.id}")

    res = await client.get(f"/api/chats/{seed_chat.id}")
    assert res.status_code == 404
    remaining = await test_db.scalar(
        select(func.count()).select_from(Message)
        .where(Message.chat_id == seed_chat.id),
    )
    assert remaining == 0


async def test_delete_missing_chat_is_404(client):
    res = await client.delete("/api/chats/999")
    assert res.status_code == 404


async def test_delete_bad_id_is_400(client):
    res = await client.delete("/api/chats/abc")
    assert res.status_code == 400
