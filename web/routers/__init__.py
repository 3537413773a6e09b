"""Router modules for FastAPI web API."""

from web.routers import health, home, shell, todos

__all__ = ["health", "home", "shell", "todos"]
