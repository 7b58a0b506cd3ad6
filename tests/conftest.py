"""Root conftest — shared test configuration, async DB and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys ON
    - get_db dependency overridden to use the test session factory
    - db_manager patched for code that bypasses get_db (readiness probe)

Design Decisions:
    - SQLite in-memory: fast, no external dependency; PRAGMA foreign_keys makes
      ON DELETE CASCADE behave as on PostgreSQL
    - Lifespan is not run by ASGITransport: the fixtures own DB setup
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from chat_api.db.base import Base  # noqa: E402
from chat_api.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
import chat_api.infrastructure.database as db_module  # noqa: E402
from chat_api.main import app  # noqa: E402
from chat_api.models.chat import Chat  # noqa: E402
from chat_api.models.message import Message  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_chat(test_db):
    """Insert a chat directly into the test DB."""
    chat = Chat(title="Seeded chat")
    test_db.add(chat)
    await test_db.commit()
    await test_db.refresh(chat)
    return chat


@pytest.fixture
async def seed_messages(test_db, seed_chat):
    """Insert 30 messages ("m1".."m30") into the seeded chat, oldest first."""
    messages = []
    for i in range(1, 31):
        message = Message(chat_id=seed_chat.id, text=f"m{i}")
        test_db.add(message)
        await test_db.flush()
        messages.append(message)
    await test_db.commit()
    return messages
