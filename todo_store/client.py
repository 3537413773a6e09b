"""HTTP client for a running Todo Store service.

Thin wrapper over httpx that speaks the service's JSON contract and maps
error statuses onto exceptions.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from todo_store.todos.schema import TodoSchema
from todo_store.todos.service import TodoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class TodoClientError(Exception):
    """Raised when the service cannot be reached or answers unexpectedly."""


class TodoValidationError(TodoClientError):
    """Raised when the service rejects a payload.

    Attributes:
        errors: Validation messages keyed by field name.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        summary = "; ".join(
            f"{field}: {' '.join(messages)}" for field, messages in errors.items()
        )
        super().__init__(f"Validation failed: {summary}")


class TodoClient:
    """Client for the Todo Store HTTP API.

    Args:
        base_url: Origin of the service, e.g. ``http://127.0.0.1:5000``.
        client: Optional httpx client to reuse. A client passed in is
            not closed by this object.
        timeout: Request timeout in seconds for an owned client.
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> TodoClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client if this object created it."""
        if self._owns_client:
            self._client.close()

    def _request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            return self._client.request(method, url, json=json)
        except httpx.TimeoutException as e:
            raise TodoClientError(f"Timeout talking to {url}: {e}") from e
        except httpx.RequestError as e:
            raise TodoClientError(f"Request to {url} failed: {e}") from e

    @staticmethod
    def _check(response: httpx.Response, todo_id: int | None = None) -> None:
        if response.status_code == 404 and todo_id is not None:
            raise TodoNotFoundError(todo_id)
        if response.status_code == 400:
            try:
                errors = response.json().get("errors") or {}
            except ValueError:
                errors = {}
            raise TodoValidationError(errors)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TodoClientError(
                f"HTTP {response.status_code} from {response.request.url}"
            ) from e

    def list(self) -> list[TodoSchema]:
        """List all todos."""
        response = self._request("GET", "/api/todos")
        self._check(response)
        return [TodoSchema.model_validate(item) for item in response.json()]

    def get(self, todo_id: int) -> TodoSchema:
        """Get a todo by id.

        Raises:
            TodoNotFoundError: If no todo has this id.
        """
        response = self._request("GET", f"/api/todos/{todo_id}")
        self._check(response, todo_id)
        return TodoSchema.model_validate(response.json())

    def create(self, title: str, is_complete: bool = False) -> TodoSchema:
        """Create a todo.

        Raises:
            TodoValidationError: If the service rejects the payload.
        """
        response = self._request(
            "POST", "/api/todos", json={"title": title, "isComplete": is_complete}
        )
        self._check(response)
        return TodoSchema.model_validate(response.json())

    def delete(self, todo_id: int) -> TodoSchema:
        """Delete a todo and return its last-known value.

        Raises:
            TodoNotFoundError: If no todo has this id.
        """
        response = self._request("DELETE", f"/todos/{todo_id}")
        self._check(response, todo_id)
        return TodoSchema.model_validate(response.json())


__all__ = ["TodoClient", "TodoClientError", "TodoValidationError"]
