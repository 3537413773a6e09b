"""Health check endpoint."""

from fastapi import APIRouter
from sqlalchemy import text

from todo_store import __version__
from web.deps import DbSession

router = APIRouter()


@router.get("/health")
def health(db: DbSession) -> dict[str, str]:
    """Health check endpoint.

    Runs a trivial query so an unreachable store surfaces as a 500.

    Returns:
        Health status with version.
    """
    db.execute(text("SELECT 1"))
    return {"status": "ok", "version": __version__}
