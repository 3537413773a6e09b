"""FastAPI application factory and main app.

This module creates the FastAPI application with all routers, the
problem-document exception handlers, and the static files for the
client shell.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from todo_store import __version__
from todo_store.config import Settings, get_settings
from todo_store.db import ensure_db, get_engine, get_session_factory
from todo_store.logging_config import configure_logging
from web.problems import install_exception_handlers
from web.routers import health, home, shell, todos
from web.routers.shell import STATIC_DIR

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager.

    Brings the database schema up to date before serving requests and
    disposes of the engine on shutdown.
    """
    settings: Settings = app.state.settings
    engine = get_engine(settings.db_url)
    ensure_db(engine, logger)
    app.state.session_factory = get_session_factory(engine)
    try:
        yield
    finally:
        engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app with. Loaded from the
            environment if not provided.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Todo Store API",
        description="HTTP API for listing, reading, creating and deleting todos",
        version=__version__,
        lifespan=lifespan,
    )
    application.state.settings = settings

    install_exception_handlers(application)

    application.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # Include routers
    application.include_router(home.router, tags=["home"])
    application.include_router(health.router, tags=["health"])
    application.include_router(todos.router, tags=["todos"])
    application.include_router(shell.router, tags=["shell"])

    return application


# Create the default application instance
app = create_app()
