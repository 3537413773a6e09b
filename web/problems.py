"""Problem documents (RFC 9457) and the app-wide exception handlers.

Three kinds of failure reach the client:
- request validation failures become a 400 validation problem with an
  ``errors`` map keyed by JSON field name
- HTTP exceptions raised by routes (404 for unknown ids) become a plain
  problem document with the matching status
- anything else becomes a generic 500 problem; in the development
  environment the exception type and message are included as ``detail``
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"
VALIDATION_TITLE = "One or more validation errors occurred."
SERVER_ERROR_TITLE = "An error occurred while processing your request."
SERVER_ERROR_DETAIL = "An error occurred."

# RFC 9110 section links used as the problem "type"
_TYPE_URIS = {
    400: "https://tools.ietf.org/html/rfc9110#section-15.5.1",
    404: "https://tools.ietf.org/html/rfc9110#section-15.5.5",
    500: "https://tools.ietf.org/html/rfc9110#section-15.6.1",
}


def problem(
    status: int,
    title: str | None = None,
    detail: str | None = None,
    **extra: Any,
) -> JSONResponse:
    """Build a problem+json response.

    Args:
        status: HTTP status code.
        title: Short summary; defaults to the status phrase.
        detail: Optional human-readable explanation.
        **extra: Extension members added to the document.

    Returns:
        JSONResponse with the problem document.
    """
    body: dict[str, Any] = {
        "type": _TYPE_URIS.get(status, "about:blank"),
        "title": title or HTTPStatus(status).phrase,
        "status": status,
    }
    if detail is not None:
        body["detail"] = detail
    body.update(extra)
    return JSONResponse(body, status_code=status, media_type=PROBLEM_MEDIA_TYPE)


def validation_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group validation messages by the offending JSON field.

    Errors that do not point at a single field (malformed JSON, a missing
    body) are grouped under ``$``.
    """
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())[1:]]
        key = "$" if not loc or err.get("type") == "json_invalid" else ".".join(loc)
        message = str(err.get("msg", "Invalid value")).removeprefix("Value error, ")
        errors.setdefault(key, []).append(message)
    return errors


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer request validation failures with a 400 validation problem."""
    return problem(400, VALIDATION_TITLE, errors=validation_errors(exc))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Answer HTTP exceptions with a problem document."""
    detail = exc.detail if isinstance(exc.detail, str) else None
    if detail == HTTPStatus(exc.status_code).phrase:
        detail = None
    response = problem(exc.status_code, detail=detail)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer unhandled exceptions with a generic 500 problem."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    settings = getattr(request.app.state, "settings", None)
    if settings is not None and settings.is_development:
        return problem(500, SERVER_ERROR_TITLE, f"{type(exc).__name__}: {exc}")
    return problem(500, SERVER_ERROR_TITLE, SERVER_ERROR_DETAIL)


def install_exception_handlers(app: FastAPI) -> None:
    """Register the problem-document handlers on an application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "PROBLEM_MEDIA_TYPE",
    "SERVER_ERROR_DETAIL",
    "SERVER_ERROR_TITLE",
    "VALIDATION_TITLE",
    "install_exception_handlers",
    "problem",
    "validation_errors",
]
