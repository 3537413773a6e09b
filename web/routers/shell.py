"""Browser client shell.

Serves the page that hosts the root UI component. The page's script talks
to the JSON API on the page's own origin; nothing is rendered server-side
beyond the mount point.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from todo_store import __version__

router = APIRouter()

WEB_DIR = Path(__file__).resolve().parent.parent
STATIC_DIR = WEB_DIR / "static"

templates = Jinja2Templates(directory=str(WEB_DIR / "templates"))


@router.get("/app", response_class=HTMLResponse, name="client_shell")
def client_shell(request: Request) -> HTMLResponse:
    """Render the page hosting the root component at ``#app``."""
    return templates.TemplateResponse(
        request=request,
        name="index.html",
        context={"version": __version__, "mount_selector": "#app"},
    )
