"""FastAPI web application for the Todo Store.

This package provides the HTTP API and the browser client shell.
All store logic is delegated to core modules in todo_store/.
"""

from web.app import app, create_app

__all__ = ["app", "create_app"]
