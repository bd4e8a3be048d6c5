"""
TodoList — a named collection of todos owned by one user.

Title uniqueness is NOT a table constraint; callers check
`exists_todo_list_title` before insert/rename.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from todo_app.db.models.base import Base

class TodoList(Base):
    __tablename__ = "todolists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    username: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<TodoList id={self.id} {self.title!r} user={self.username}>"
