"""
User repository containing all data-access operations for the users table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.security import hash_password
from todo_app.db.models.user import User


async def create_user(
    db: AsyncSession,
    *,
    username: str,
    password: str,
) -> User:
    """Create a new user with a hashed password."""
    user = User(
        username=username,
        password=hash_password(password),
    )
    db.add(user)
    await db.flush()
    return user


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    """Fetch a user by exact username."""
    stmt = select(User).where(User.username == username)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def get_password_hash(db: AsyncSession, username: str) -> str | None:
    """Return only the stored bcrypt hash for `username`, or None."""
    stmt = select(User.password).where(User.username == username)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()
