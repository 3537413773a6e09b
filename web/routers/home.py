"""Root greeting and the generic error endpoint."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from web.problems import SERVER_ERROR_DETAIL, SERVER_ERROR_TITLE, problem

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    """Root endpoint.

    Returns:
        Plain-text greeting.
    """
    return "Hello World!"


@router.get("/error", include_in_schema=False)
def error() -> JSONResponse:
    """Generic server error document."""
    return problem(500, SERVER_ERROR_TITLE, SERVER_ERROR_DETAIL)
