"""
SessionPersistence — todo lists kept inside the caller's session mapping.

The whole dataset for one user lives under `session["todo_lists"]`.
Mutations work on the live structures; every value handed back to a
caller is a deep copy, so callers can never edit stored state through
a returned reference. Methods are coroutines only to share the
TodoPersistence contract; none of them suspends.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping

from todo_app.core.constants import SESSION_TODO_LISTS_KEY, SESSION_USERNAME_KEY
from todo_app.core.logging import get_logger
from todo_app.core.security import check_password
from todo_app.persistence import sorting
from todo_app.persistence.base import TodoDict, TodoListDict
from todo_app.persistence.copying import deep_copy
from todo_app.persistence.ids import advance_past, next_id
from todo_app.persistence.seed_data import SEED_TODO_LISTS, seed_credentials

logger = get_logger(__name__)


def _largest_id(todo_lists: list[TodoListDict]) -> int:
    ids = [todo_list["id"] for todo_list in todo_lists]
    ids.extend(todo["id"] for todo_list in todo_lists for todo in todo_list["todos"])
    return max(ids, default=0)


class SessionPersistence:
    """
    In-memory strategy bound to one session.

    Session fields:
        username    — read at construction (for logging only)
        todo_lists  — owned: created from the seed data when missing or None,
                      then mutated in place for the session's lifetime

    Args:
        session: Externally owned mutable mapping (e.g. a web session).
        credentials: username -> bcrypt hash used by `authenticate_user`.
                     Defaults to the hashed seed users.
    """

    def __init__(
        self,
        session: MutableMapping[str, Any],
        *,
        credentials: Mapping[str, str] | None = None,
    ) -> None:
        if session.get(SESSION_TODO_LISTS_KEY) is None:
            session[SESSION_TODO_LISTS_KEY] = deep_copy(SEED_TODO_LISTS)
        self._todo_lists: list[TodoListDict] = session[SESSION_TODO_LISTS_KEY]
        self._credentials = credentials
        self.username: str | None = session.get(SESSION_USERNAME_KEY)

        # Data may predate this process; keep new ids clear of it.
        advance_past(_largest_id(self._todo_lists))

    # ─── Authentication ──────────────────────────────

    async def authenticate_user(self, username: str, password: str) -> bool:
        credentials = self._credentials if self._credentials is not None else seed_credentials()
        hashed_password = credentials.get(username)

        if hashed_password is None or not await check_password(password, hashed_password):
            logger.info("Authentication failed", username=username)
            return False
        return True

    # ─── Predicates ──────────────────────────────────

    def is_done_todo_list(self, todo_list: TodoListDict) -> bool:
        return sorting.is_done_todo_list(todo_list)

    def has_undone_todos(self, todo_list: TodoListDict) -> bool:
        return sorting.has_undone_todos(todo_list)

    def is_unique_constraint_violation(self, error: BaseException) -> bool:
        """No constraints are simulated in memory."""
        return False

    # ─── Queries (return copies) ─────────────────────

    async def sorted_todo_lists(self) -> list[TodoListDict]:
        todo_lists = deep_copy(self._todo_lists)
        undone = [todo_list for todo_list in todo_lists if not self.is_done_todo_list(todo_list)]
        done = [todo_list for todo_list in todo_lists if self.is_done_todo_list(todo_list)]
        return sorting.sort_todo_lists(undone, done)

    async def sorted_todos(self, todo_list: TodoListDict) -> list[TodoDict]:
        return deep_copy(sorting.sort_todos(todo_list["todos"]))

    async def load_todo_list(self, todo_list_id: int) -> TodoListDict | None:
        return deep_copy(self._find_todo_list(todo_list_id))

    async def load_todo(self, todo_list_id: int, todo_id: int) -> TodoDict | None:
        return deep_copy(self._find_todo(todo_list_id, todo_id))

    async def exists_todo_list_title(self, title: str) -> bool:
        return any(todo_list["title"] == title for todo_list in self._todo_lists)

    # ─── Mutations (live references) ─────────────────

    async def create_todo_list(self, title: str) -> bool:
        self._todo_lists.append({"id": next_id(), "title": title, "todos": []})
        logger.info("Todo list created", username=self.username, title=title)
        return True

    async def toggle_done_todo(self, todo_list_id: int, todo_id: int) -> bool:
        todo = self._find_todo(todo_list_id, todo_id)
        if todo is None:
            return False

        todo["done"] = not todo["done"]
        return True

    async def delete_todo(self, todo_list_id: int, todo_id: int) -> bool:
        todo_list = self._find_todo_list(todo_list_id)
        if todo_list is None:
            return False

        for index, todo in enumerate(todo_list["todos"]):
            if todo["id"] == todo_id:
                del todo_list["todos"][index]
                return True
        return False

    async def complete_all_todos(self, todo_list_id: int) -> bool:
        todo_list = self._find_todo_list(todo_list_id)
        if todo_list is None:
            return False

        for todo in todo_list["todos"]:
            todo["done"] = True
        return True

    async def create_new_todo(self, todo_list_id: int, title: str) -> bool:
        todo_list = self._find_todo_list(todo_list_id)
        if todo_list is None:
            return False

        todo_list["todos"].append({"id": next_id(), "title": title, "done": False})
        return True

    async def delete_todo_list(self, todo_list_id: int) -> bool:
        for index, todo_list in enumerate(self._todo_lists):
            if todo_list["id"] == todo_list_id:
                del self._todo_lists[index]
                logger.info("Todo list deleted", username=self.username, todo_list_id=todo_list_id)
                return True
        return False

    async def set_todo_list_title(self, todo_list_id: int, title: str) -> bool:
        todo_list = self._find_todo_list(todo_list_id)
        if todo_list is None:
            return False

        todo_list["title"] = title
        return True

    # ─── Lookups (live references, never returned) ───

    def _find_todo_list(self, todo_list_id: int) -> TodoListDict | None:
        return next(
            (todo_list for todo_list in self._todo_lists if todo_list["id"] == todo_list_id),
            None,
        )

    def _find_todo(self, todo_list_id: int, todo_id: int) -> TodoDict | None:
        todo_list = self._find_todo_list(todo_list_id)
        if todo_list is None:
            return None
        return next((todo for todo in todo_list["todos"] if todo["id"] == todo_id), None)
