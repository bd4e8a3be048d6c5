"""
Ordering and partitioning rules shared by both persistence strategies.

Completion status is the primary key (incomplete first) and the
case-insensitive title the secondary one. For todo lists the
"done list" predicate decides completion; for todos the `done` flag.
All sorts are stable.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence


def is_done_todo_list(todo_list: Mapping[str, Any]) -> bool:
    """A list is done when it has at least one todo and every todo is done."""
    todos = todo_list["todos"]
    return len(todos) > 0 and all(todo["done"] for todo in todos)


def has_undone_todos(todo_list: Mapping[str, Any]) -> bool:
    """True when at least one todo in the list is still open."""
    return any(not todo["done"] for todo in todo_list["todos"])


def sort_by_title(items: Iterable[Mapping[str, Any]]) -> list:
    """Stable, case-insensitive sort on the `title` key."""
    return sorted(items, key=lambda item: item["title"].lower())


def partition_todo_lists(todo_lists: Sequence[Mapping[str, Any]]) -> list:
    """Undone lists followed by done lists, keeping the input order within each group."""
    undone = [todo_list for todo_list in todo_lists if not is_done_todo_list(todo_list)]
    done = [todo_list for todo_list in todo_lists if is_done_todo_list(todo_list)]
    return undone + done


def sort_todo_lists(
    undone: Iterable[Mapping[str, Any]],
    done: Iterable[Mapping[str, Any]],
) -> list:
    """Sort each partition by title and put the undone lists first."""
    return sort_by_title(undone) + sort_by_title(done)


def sort_todos(todos: Sequence[Mapping[str, Any]]) -> list:
    """Open todos before finished ones, each group ordered by title."""
    undone = [todo for todo in todos if not todo["done"]]
    done = [todo for todo in todos if todo["done"]]
    return sort_by_title(undone) + sort_by_title(done)
