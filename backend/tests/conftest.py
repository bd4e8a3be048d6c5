"""Test configuration and shared fixtures."""

from __future__ import annotations

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from todo_app.core.config import settings
from todo_app.db.models import Base
from todo_app.db.session import session_scope
from todo_app.persistence import PgPersistence, SessionPersistence
from todo_app.repositories.users import create_user

USER_PASSWORDS = {"alice": "wonderland", "bob": "builder"}


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Cheapest bcrypt cost so hashing doesn't dominate the run."""
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """File-backed SQLite database with the full schema and foreign keys on."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'todos.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def registered_users(session_factory):
    async with session_scope(session_factory) as db:
        for username, password in USER_PASSWORDS.items():
            await create_user(db, username=username, password=password)
    return USER_PASSWORDS


@pytest.fixture
def alice(session_factory, registered_users) -> PgPersistence:
    return PgPersistence({"username": "alice"}, session_factory=session_factory)


@pytest.fixture
def bob(session_factory, registered_users) -> PgPersistence:
    return PgPersistence({"username": "bob"}, session_factory=session_factory)


@pytest.fixture
def web_session() -> dict:
    return {"username": "alice"}


@pytest.fixture
def in_memory(web_session) -> SessionPersistence:
    return SessionPersistence(web_session)
