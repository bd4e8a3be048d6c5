"""
Password hashing helpers (bcrypt).
"""

from __future__ import annotations

import asyncio

import bcrypt

from todo_app.core.config import settings


def hash_password(password: str) -> str:
    """Return a bcrypt hash for `password`."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode(), salt).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored hash.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())
    except ValueError:
        return False


async def check_password(plain_password: str, hashed_password: str) -> bool:
    """`verify_password` run in a worker thread so the event loop keeps going."""
    return await asyncio.to_thread(verify_password, plain_password, hashed_password)
