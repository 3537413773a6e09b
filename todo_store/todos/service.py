"""Todo service for CRUD operations.

Every function takes an explicit SQLAlchemy session and touches at most
one row (or one read query). Transaction boundaries belong to the caller.
"""

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from todo_store.todos.models import MAX_TODO_ID, MIN_TODO_ID, Todo
from todo_store.todos.schema import TodoCreate, TodoSchema

logger = logging.getLogger(__name__)


class TodoNotFoundError(Exception):
    """Raised when no todo has the requested id."""

    def __init__(self, todo_id: int) -> None:
        self.todo_id = todo_id
        super().__init__(f"Todo not found: {todo_id}")


def todo_to_schema(todo: Todo) -> TodoSchema:
    """Convert a Todo ORM model to a TodoSchema.

    Args:
        todo: Todo ORM instance.

    Returns:
        TodoSchema instance.
    """
    return TodoSchema(id=todo.id, title=todo.title, is_complete=todo.is_complete)


def list_todos(session: Session) -> Sequence[Todo]:
    """List all todos in store order.

    Args:
        session: Database session.

    Returns:
        All Todo rows.
    """
    todos = session.execute(select(Todo)).scalars().all()
    logger.info("Found %d records", len(todos))
    return todos


def get_todo_or_none(session: Session, todo_id: int) -> Todo | None:
    """Get a todo by id.

    Args:
        session: Database session.
        todo_id: Todo id.

    Returns:
        The Todo, or None if no row has that id. Ids outside the
        store's integer range cannot exist and also give None.
    """
    if not MIN_TODO_ID <= todo_id <= MAX_TODO_ID:
        return None
    return session.get(Todo, todo_id)


def get_todo(session: Session, todo_id: int) -> Todo:
    """Get a todo by id.

    Args:
        session: Database session.
        todo_id: Todo id.

    Returns:
        The Todo.

    Raises:
        TodoNotFoundError: If no row has that id.
    """
    todo = get_todo_or_none(session, todo_id)
    if todo is None:
        raise TodoNotFoundError(todo_id)
    return todo


def create_todo(session: Session, data: TodoCreate) -> Todo:
    """Persist a new todo.

    The row is flushed so the store-assigned id is available on return.

    Args:
        session: Database session.
        data: Validated creation payload.

    Returns:
        The persisted Todo including its id.
    """
    todo = Todo(title=data.title, is_complete=data.is_complete)
    session.add(todo)
    session.flush()
    logger.debug("Created todo %d", todo.id)
    return todo


def delete_todo(session: Session, todo_id: int) -> Todo:
    """Delete a todo by id.

    Args:
        session: Database session.
        todo_id: Todo id.

    Returns:
        The deleted Todo with its last-known values.

    Raises:
        TodoNotFoundError: If no row has that id.
    """
    todo = get_todo(session, todo_id)
    session.delete(todo)
    session.flush()
    logger.debug("Deleted todo %d", todo_id)
    return todo


__all__ = [
    "TodoNotFoundError",
    "create_todo",
    "delete_todo",
    "get_todo",
    "get_todo_or_none",
    "list_todos",
    "todo_to_schema",
]
