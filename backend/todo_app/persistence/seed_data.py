"""
Default dataset for a fresh in-memory session, plus the seed accounts.

`SEED_TODO_LISTS` is never handed out directly; SessionPersistence stores
a deep copy of it. `SEED_USERS` holds plaintext passwords that are only
ever used hashed (see `seed_credentials` and `scripts/seed_users.py`).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from todo_app.core.security import hash_password
from todo_app.persistence.ids import next_id


def _todo(title: str, done: bool = False) -> dict[str, Any]:
    return {"id": next_id(), "title": title, "done": done}


def _todo_list(title: str, todos: list[dict[str, Any]]) -> dict[str, Any]:
    return {"id": next_id(), "title": title, "todos": todos}


SEED_TODO_LISTS: list[dict[str, Any]] = [
    _todo_list("Work Todos", [
        _todo("Get coffee", done=True),
        _todo("Chat with co-workers", done=True),
        _todo("Duck out of meeting"),
    ]),
    _todo_list("Home Todos", [
        _todo("Feed the cats", done=True),
        _todo("Go to bed", done=True),
        _todo("Buy milk", done=True),
        _todo("Water the plants", done=True),
    ]),
    _todo_list("Additional Todos", []),
    _todo_list("social todos", [
        _todo("Go to Libby's birthday party"),
    ]),
]

SEED_USERS: list[dict[str, str]] = [
    {"username": "admin", "password": "secret"},
    {"username": "developer", "password": "letmein"},
]


@lru_cache(maxsize=1)
def seed_credentials() -> dict[str, str]:
    """username -> bcrypt hash for every seed user (hashed once per process)."""
    return {user["username"]: hash_password(user["password"]) for user in SEED_USERS}
