"""Todo endpoints.

- GET /api/todos - List todos
- GET /api/todos/{id} - Get todo by id
- POST /api/todos - Create todo
- DELETE /todos/{id} - Delete todo

Delete lives outside the /api prefix; clients depend on that path.
"""

from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Path, Response, status

from todo_store.todos.models import MAX_TODO_ID, MIN_TODO_ID
from todo_store.todos.schema import TodoCreate, TodoSchema
from todo_store.todos.service import (
    TodoNotFoundError,
    create_todo,
    delete_todo,
    get_todo_or_none,
    list_todos,
    todo_to_schema,
)
from web.deps import DbSession

router = APIRouter()

# Ids beyond the store's 64-bit INTEGER range are rejected as invalid input
TodoId = Annotated[int, Path(ge=MIN_TODO_ID, le=MAX_TODO_ID, description="Todo id")]

_NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"description": "No todo has this id"},
}
_VALIDATION_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"description": "Validation problem"},
}


def _dump(todo: TodoSchema) -> dict[str, Any]:
    return todo.model_dump(by_alias=True)


@router.get("/api/todos", response_model=list[TodoSchema])
def list_todos_endpoint(db: DbSession) -> list[dict[str, Any]]:
    """List all todos.

    Args:
        db: Database session.

    Returns:
        All todos, in store order.
    """
    return [_dump(todo_to_schema(t)) for t in list_todos(db)]


@router.get(
    "/api/todos/{todo_id}",
    response_model=TodoSchema,
    responses=_NOT_FOUND_RESPONSE,
)
def get_todo_endpoint(todo_id: TodoId, db: DbSession) -> dict[str, Any]:
    """Get a todo by id.

    Raises:
        HTTPException: If no todo has this id.
    """
    todo = get_todo_or_none(db, todo_id)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _dump(todo_to_schema(todo))


@router.post(
    "/api/todos",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoSchema,
    responses=_VALIDATION_RESPONSE,
)
def create_todo_endpoint(
    todo_data: TodoCreate, response: Response, db: DbSession
) -> dict[str, Any]:
    """Create a todo.

    The Location header points at the todo's path under /todos.

    Args:
        todo_data: Creation payload.
        response: Outgoing response, for the Location header.
        db: Database session.

    Returns:
        The persisted todo including its assigned id.
    """
    todo = create_todo(db, todo_data)
    db.commit()
    response.headers["Location"] = f"/todos/{todo.id}"
    return _dump(todo_to_schema(todo))


@router.delete(
    "/todos/{todo_id}",
    response_model=TodoSchema,
    responses=_NOT_FOUND_RESPONSE,
)
def delete_todo_endpoint(todo_id: TodoId, db: DbSession) -> dict[str, Any]:
    """Delete a todo.

    Returns:
        The deleted todo's last-known value.

    Raises:
        HTTPException: If no todo has this id.
    """
    try:
        todo = delete_todo(db, todo_id)
        db.commit()
    except TodoNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from None
    return _dump(todo_to_schema(todo))
