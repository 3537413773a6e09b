"""Todo ORM model.

One table, ``Todos``, with the column names the service has always used
(``Id``, ``Title``, ``IsComplete``).
"""

from sqlalchemy import Boolean, Integer, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from todo_store.db import Base

# Range of a SQLite INTEGER column
MIN_TODO_ID = -(2**63)
MAX_TODO_ID = 2**63 - 1


class Todo(Base):
    """ORM model for a todo item.

    Attributes:
        id: Primary key, assigned by the store. Never reused.
        title: Item text. Nullable in storage; required by the API.
        is_complete: Completion flag.
    """

    __tablename__ = "Todos"
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        "Id", Integer, primary_key=True, autoincrement=True
    )
    title: Mapped[str | None] = mapped_column("Title", Text, nullable=True)
    is_complete: Mapped[bool] = mapped_column(
        "IsComplete", Boolean, nullable=False, default=False, server_default=false()
    )

    def __repr__(self) -> str:
        """Return string representation of Todo."""
        return (
            f"<Todo(id={self.id}, title={self.title!r}, "
            f"is_complete={self.is_complete})>"
        )


__all__ = ["MAX_TODO_ID", "MIN_TODO_ID", "Todo"]
