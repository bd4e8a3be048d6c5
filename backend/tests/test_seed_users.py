"""Tests for the seed-users script and the users repository."""

import pytest

from scripts.seed_users import seed
from todo_app.db.session import session_scope
from todo_app.persistence import PgPersistence
from todo_app.persistence.seed_data import SEED_USERS
from todo_app.repositories.users import create_user, get_password_hash, get_user_by_username


@pytest.mark.asyncio
async def test_seed_is_idempotent(session_factory):
    assert await seed(session_factory) == len(SEED_USERS)
    assert await seed(session_factory) == 0


@pytest.mark.asyncio
async def test_seeded_users_can_log_in(session_factory):
    await seed(session_factory)
    persistence = PgPersistence({}, session_factory=session_factory)

    for user in SEED_USERS:
        assert await persistence.authenticate_user(user["username"], user["password"]) is True


@pytest.mark.asyncio
async def test_passwords_are_stored_hashed(session_factory):
    await seed(session_factory)

    async with session_scope(session_factory) as db:
        user = await get_user_by_username(db, "admin")
        stored = await get_password_hash(db, "admin")
        missing = await get_password_hash(db, "nobody")

    assert user is not None
    assert stored == user.password
    assert stored != "secret"
    assert stored.startswith("$2")
    assert missing is None


@pytest.mark.asyncio
async def test_usernames_are_stored_as_given(session_factory):
    async with session_scope(session_factory) as db:
        await create_user(db, username=" spaced ", password="pw")

    async with session_scope(session_factory) as db:
        user = await get_user_by_username(db, " spaced ")
        stored = await get_password_hash(db, " spaced ")

    assert user is not None
    assert user.username == " spaced "
    assert stored == user.password
