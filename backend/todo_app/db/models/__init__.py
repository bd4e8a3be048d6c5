"""
Models package — re-exports Base and all models.

Import models here so Alembic's `target_metadata = Base.metadata`
picks up every table automatically.

When adding a new model:
    1. Create `todo_app/db/models/<table_name>.py`
    2. Import it here
"""

from todo_app.db.models.base import Base
from todo_app.db.models.todo import Todo
from todo_app.db.models.todo_list import TodoList
from todo_app.db.models.user import User

__all__ = [
    "Base",
    "Todo",
    "TodoList",
    "User",
]
