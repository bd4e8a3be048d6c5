"""
Persistence package — two interchangeable storage strategies for todo lists.

    PgPersistence       relational database, scoped by username
    SessionPersistence  in-memory, stored in the caller's session mapping

Pick one per session with `create_persistence`; both satisfy
`TodoPersistence`.
"""

from __future__ import annotations

from typing import Any, MutableMapping

from todo_app.core.config import settings
from todo_app.core.constants import PersistenceBackend
from todo_app.persistence.base import TodoDict, TodoListDict, TodoPersistence
from todo_app.persistence.errors import PersistenceError, UnknownBackendError
from todo_app.persistence.pg import PgPersistence
from todo_app.persistence.session import SessionPersistence


def create_persistence(
    session: MutableMapping[str, Any],
    backend: str | None = None,
    **options: Any,
) -> TodoPersistence:
    """
    Build the strategy named by `backend` (default: settings.PERSISTENCE_BACKEND).

    Extra keyword options go to the strategy's constructor, e.g.
    `session_factory=` for PgPersistence or `credentials=` for
    SessionPersistence.
    """
    name = backend if backend is not None else settings.PERSISTENCE_BACKEND
    try:
        kind = PersistenceBackend(name)
    except ValueError:
        raise UnknownBackendError(str(name)) from None

    if kind is PersistenceBackend.POSTGRES:
        return PgPersistence(session, **options)
    return SessionPersistence(session, **options)


__all__ = [
    "PersistenceError",
    "PgPersistence",
    "SessionPersistence",
    "TodoDict",
    "TodoListDict",
    "TodoPersistence",
    "UnknownBackendError",
    "create_persistence",
]
