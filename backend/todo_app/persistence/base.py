"""
The contract every persistence strategy implements.

Strategies are selected at construction time (see `create_persistence`)
and share no base class; `TodoPersistence` only describes the shape.
Every operation is scoped to the username bound from the session.

Failure signalling:
    - not found          -> None / False, never an exception
    - duplicate todo     -> False (relational strategy only)
    - any other error    -> propagated unchanged
"""

from __future__ import annotations

from typing import Protocol, TypedDict, runtime_checkable


class TodoDict(TypedDict):
    id: int
    title: str
    done: bool


class TodoListDict(TypedDict):
    id: int
    title: str
    todos: list[TodoDict]


@runtime_checkable
class TodoPersistence(Protocol):
    """CRUD and query operations over one user's todo lists."""

    async def authenticate_user(self, username: str, password: str) -> bool: ...

    async def create_todo_list(self, title: str) -> bool: ...

    async def sorted_todo_lists(self) -> list[TodoListDict]: ...

    async def sorted_todos(self, todo_list: TodoListDict) -> list[TodoDict]: ...

    async def load_todo_list(self, todo_list_id: int) -> TodoListDict | None: ...

    async def load_todo(self, todo_list_id: int, todo_id: int) -> TodoDict | None: ...

    async def toggle_done_todo(self, todo_list_id: int, todo_id: int) -> bool: ...

    async def delete_todo(self, todo_list_id: int, todo_id: int) -> bool: ...

    async def complete_all_todos(self, todo_list_id: int) -> bool: ...

    async def create_new_todo(self, todo_list_id: int, title: str) -> bool: ...

    async def delete_todo_list(self, todo_list_id: int) -> bool: ...

    async def set_todo_list_title(self, todo_list_id: int, title: str) -> bool: ...

    async def exists_todo_list_title(self, title: str) -> bool: ...

    def is_done_todo_list(self, todo_list: TodoListDict) -> bool: ...

    def has_undone_todos(self, todo_list: TodoListDict) -> bool: ...

    def is_unique_constraint_violation(self, error: BaseException) -> bool: ...
