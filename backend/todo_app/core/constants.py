"""Shared constants and enums used across the application."""

from enum import StrEnum


class PersistenceBackend(StrEnum):
    """Storage strategies a session can be bound to."""

    POSTGRES = "pg"
    SESSION = "session"


# Session keys. `username` is read, `todo_lists` is owned by SessionPersistence.
SESSION_USERNAME_KEY = "username"
SESSION_TODO_LISTS_KEY = "todo_lists"

# ── Unique-constraint signatures ─────────────
PG_UNIQUE_VIOLATION = "23505"
SQLITE_UNIQUE_VIOLATION = "SQLITE_CONSTRAINT_UNIQUE"
UNIQUE_VIOLATION_MESSAGES = (
    "duplicate key value violates unique constraint",
    "UNIQUE constraint failed",
)
