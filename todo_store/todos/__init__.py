"""Todo module.

This module handles:
- The Todo ORM model
- JSON schema for the HTTP contract
- CRUD service functions
"""

from todo_store.todos.models import Todo
from todo_store.todos.schema import TITLE_REQUIRED_MESSAGE, TodoCreate, TodoSchema
from todo_store.todos.service import (
    TodoNotFoundError,
    create_todo,
    delete_todo,
    get_todo,
    get_todo_or_none,
    list_todos,
    todo_to_schema,
)

__all__ = [
    # Models
    "Todo",
    # Schema
    "TITLE_REQUIRED_MESSAGE",
    "TodoCreate",
    "TodoSchema",
    # Service functions
    "TodoNotFoundError",
    "create_todo",
    "delete_todo",
    "get_todo",
    "get_todo_or_none",
    "list_todos",
    "todo_to_schema",
]
