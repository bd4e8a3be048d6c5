"""
Todo — one unit of work inside a TodoList.

`username` is denormalised from the parent list so every query can be
scoped by owner without a join. Titles are unique per list.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, UniqueConstraint, false
from sqlalchemy.orm import Mapped, mapped_column

from todo_app.db.models.base import Base

class Todo(Base):
    __tablename__ = "todos"
    __table_args__ = (
        UniqueConstraint("todolist_id", "title", name="todos_todolist_id_title_key"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    todolist_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("todolists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    done: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    username: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Todo id={self.id} list={self.todolist_id} {self.title!r} done={self.done}>"
