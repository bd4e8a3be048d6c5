"""
PgPersistence — todo lists stored in the relational database.

Every statement is filtered by the username bound at construction, so one
user can never read or change another user's rows. Each call runs on its
own connection (see `todo_app.db.session.run_query`); loading a list, or
all lists, fires the list query and the todo query concurrently and joins
the two result sets in memory instead of asking the database for a join.
"""

from __future__ import annotations

import asyncio
import re
from collections import defaultdict
from typing import Any, MutableMapping

from sqlalchemy import delete, func, insert, literal, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql.base import Executable

from todo_app.core.constants import (
    PG_UNIQUE_VIOLATION,
    SESSION_USERNAME_KEY,
    SQLITE_UNIQUE_VIOLATION,
    UNIQUE_VIOLATION_MESSAGES,
)
from todo_app.core.logging import get_logger
from todo_app.core.security import check_password
from todo_app.db.models import Todo, TodoList
from todo_app.db.session import QueryResult, run_query, session_scope
from todo_app.persistence import sorting
from todo_app.persistence.base import TodoDict, TodoListDict
from todo_app.repositories import users as user_repository

logger = get_logger(__name__)

todolists = TodoList.__table__
todos = Todo.__table__

_TODO_LIST_COLUMNS = (todolists.c.id, todolists.c.title)
_TODO_COLUMNS = (todos.c.id, todos.c.todolist_id, todos.c.title, todos.c.done)

_UNIQUE_VIOLATION_RE = re.compile(
    "|".join(re.escape(message) for message in UNIQUE_VIOLATION_MESSAGES)
)


def is_unique_constraint_violation(error: BaseException) -> bool:
    """
    Does `error` report a UNIQUE constraint violation?

    Structured data on the wrapped DBAPI error wins: SQLSTATE 23505
    (asyncpg / psycopg) or SQLite's extended error name. The message
    is only matched when the driver exposes neither.
    """
    orig = getattr(error, "orig", None)
    if orig is not None:
        code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
        if code is not None:
            return code == PG_UNIQUE_VIOLATION
        error_name = getattr(orig, "sqlite_errorname", None)
        if error_name is not None:
            return error_name == SQLITE_UNIQUE_VIOLATION
    return _UNIQUE_VIOLATION_RE.search(str(error)) is not None


class PgPersistence:
    """
    Relational strategy for one user's todo lists.

    Session fields:
        username   — read once at construction; scopes every query
    Nothing is written back to the session.
    """

    def __init__(
        self,
        session: MutableMapping[str, Any],
        *,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
    ) -> None:
        self.username: str | None = session.get(SESSION_USERNAME_KEY)
        self._session_factory = session_factory

    async def _query(self, statement: Executable) -> QueryResult:
        return await run_query(statement, self._session_factory)

    async def _query_pair(
        self, first: Executable, second: Executable
    ) -> tuple[QueryResult, QueryResult]:
        """Run two statements concurrently; a failure cancels the other before raising."""
        try:
            async with asyncio.TaskGroup() as group:
                first_task = group.create_task(self._query(first))
                second_task = group.create_task(self._query(second))
        except ExceptionGroup as group_error:
            raise group_error.exceptions[0] from None
        return first_task.result(), second_task.result()

    # ─── Authentication ──────────────────────────────

    async def authenticate_user(self, username: str, password: str) -> bool:
        """True iff `username` exists and `password` matches its stored hash."""
        async with session_scope(self._session_factory) as db:
            hashed_password = await user_repository.get_password_hash(db, username)

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
        return is_unique_constraint_violation(error)

    # ─── Queries ─────────────────────────────────────

    async def sorted_todo_lists(self) -> list[TodoListDict]:
        """
        All of the user's lists, undone before done, each group ordered by
        lower-cased title. Embedded todos are not sorted.
        """
        all_lists = (
            select(*_TODO_LIST_COLUMNS)
            .where(todolists.c.username == self.username)
            .order_by(func.lower(todolists.c.title).asc())
        )
        all_todos = select(*_TODO_COLUMNS).where(todos.c.username == self.username)

        result_lists, result_todos = await self._query_pair(all_lists, all_todos)

        todos_by_list: dict[int, list[TodoDict]] = defaultdict(list)
        for todo in result_todos.rows:
            todos_by_list[todo["todolist_id"]].append(todo)

        todo_lists = [
            {**todo_list, "todos": todos_by_list.get(todo_list["id"], [])}
            for todo_list in result_lists.rows
        ]
        return sorting.partition_todo_lists(todo_lists)

    async def sorted_todos(self, todo_list: TodoListDict) -> list[TodoDict]:
        """Todos of `todo_list`, open before finished, then by lower-cased title."""
        stmt = (
            select(*_TODO_COLUMNS)
            .where(
                todos.c.todolist_id == todo_list["id"],
                todos.c.username == self.username,
            )
            .order_by(todos.c.done.asc(), func.lower(todos.c.title).asc())
        )
        result = await self._query(stmt)
        return result.rows

    async def load_todo_list(self, todo_list_id: int) -> TodoListDict | None:
        """The list with its (unsorted) todos, or None if the user has no such list."""
        find_list = select(*_TODO_LIST_COLUMNS).where(
            todolists.c.id == todo_list_id,
            todolists.c.username == self.username,
        )
        find_todos = select(*_TODO_COLUMNS).where(
            todos.c.todolist_id == todo_list_id,
            todos.c.username == self.username,
        )

        result_list, result_todos = await self._query_pair(find_list, find_todos)

        if not result_list.rows:
            return None
        return {**result_list.rows[0], "todos": result_todos.rows}

    async def load_todo(self, todo_list_id: int, todo_id: int) -> TodoDict | None:
        stmt = select(*_TODO_COLUMNS).where(
            todos.c.todolist_id == todo_list_id,
            todos.c.id == todo_id,
            todos.c.username == self.username,
        )
        result = await self._query(stmt)
        return result.rows[0] if result.rows else None

    async def exists_todo_list_title(self, title: str) -> bool:
        """Exact-title match among this user's lists."""
        stmt = (
            select(todolists.c.id)
            .where(todolists.c.title == title, todolists.c.username == self.username)
            .limit(1)
        )
        result = await self._query(stmt)
        return result.row_count > 0

    # ─── Mutations ───────────────────────────────────

    async def create_todo_list(self, title: str) -> bool:
        stmt = insert(todolists).values(title=title, username=self.username)
        result = await self._query(stmt)
        logger.info("Todo list created", username=self.username, title=title)
        return result.row_count > 0

    async def toggle_done_todo(self, todo_list_id: int, todo_id: int) -> bool:
        stmt = (
            update(todos)
            .where(
                todos.c.todolist_id == todo_list_id,
                todos.c.id == todo_id,
                todos.c.username == self.username,
            )
            .values(done=~todos.c.done)
        )
        result = await self._query(stmt)
        return result.row_count > 0

    async def delete_todo(self, todo_list_id: int, todo_id: int) -> bool:
        stmt = delete(todos).where(
            todos.c.todolist_id == todo_list_id,
            todos.c.id == todo_id,
            todos.c.username == self.username,
        )
        result = await self._query(stmt)
        return result.row_count > 0

    async def complete_all_todos(self, todo_list_id: int) -> bool:
        """
        Mark every todo of the list done. False when nothing was updated,
        which covers a missing list and a list without todos.
        """
        stmt = (
            update(todos)
            .where(todos.c.todolist_id == todo_list_id, todos.c.username == self.username)
            .values(done=True)
        )
        result = await self._query(stmt)
        return result.row_count > 0

    async def create_new_todo(self, todo_list_id: int, title: str) -> bool:
        """
        Append a todo to one of the user's lists.

        The row is copied out of the owning list, so a missing or foreign
        list inserts nothing. A title already used in the list is reported
        as False; every other store error propagates.
        """
        owning_list = select(
            todolists.c.id, literal(title), literal(self.username)
        ).where(
            todolists.c.id == todo_list_id,
            todolists.c.username == self.username,
        )
        stmt = insert(todos).from_select(["todolist_id", "title", "username"], owning_list)

        try:
            result = await self._query(stmt)
        except IntegrityError as exc:
            if not self.is_unique_constraint_violation(exc):
                raise
            logger.warning(
                "Duplicate todo title rejected",
                username=self.username,
                todo_list_id=todo_list_id,
                title=title,
            )
            return False
        return result.row_count > 0

    async def delete_todo_list(self, todo_list_id: int) -> bool:
        """Remove the list; its todos go with it (ON DELETE CASCADE)."""
        stmt = delete(todolists).where(
            todolists.c.id == todo_list_id,
            todolists.c.username == self.username,
        )
        result = await self._query(stmt)
        if result.row_count > 0:
            logger.info("Todo list deleted", username=self.username, todo_list_id=todo_list_id)
            return True
        return False

    async def set_todo_list_title(self, todo_list_id: int, title: str) -> bool:
        stmt = (
            update(todolists)
            .where(todolists.c.id == todo_list_id, todolists.c.username == self.username)
            .values(title=title)
        )
        result = await self._query(stmt)
        return result.row_count > 0
