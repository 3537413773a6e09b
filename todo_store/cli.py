"""Thin CLI wrapper for todo_store.

This module provides the command-line interface using Typer.
Serving is delegated to the web app; the todos commands talk to a
running service through TodoClient.
"""

import json
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.table import Table

from todo_store import __version__
from todo_store.client import TodoClient, TodoClientError
from todo_store.config import get_settings, print_settings_json
from todo_store.todos.service import TodoNotFoundError

app = typer.Typer(
    name="todo-store",
    help="Todo Store - serve and manage a single-table todo list",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"todo-store version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Todo Store - serve and manage a single-table todo list."""


@app.command()
def config(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show effective configuration."""
    settings = get_settings()
    if json_output:
        console.print(print_settings_json(settings))
    else:
        console.print("[bold]Effective Configuration:[/bold]")
        console.print()
        console.print(f"  Database URL:  {settings.db_url}")
        console.print(f"  Environment:   {settings.environment}")
        console.print(f"  Listen on:     {settings.host}:{settings.port}")
        console.print(f"  Log level:     {settings.log_level}")


@app.command("init-db")
def init_db() -> None:
    """Create the database schema if it does not exist yet."""
    from todo_store.db import ensure_db, get_engine
    from todo_store.logging_config import configure_logging

    settings = get_settings()
    configure_logging(settings.log_level)
    engine = get_engine(settings.db_url)
    try:
        ensure_db(engine)
    finally:
        engine.dispose()
    console.print(f"[green]Database ready:[/green] {settings.db_url}")


@app.command()
def serve(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Address to bind (default from settings)"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to bind (default from settings)"),
    ] = None,
    reload: Annotated[
        bool,
        typer.Option("--reload", help="Reload on code changes (development)"),
    ] = False,
) -> None:
    """Run the HTTP service."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "web.app:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


todos_app = typer.Typer(help="Manage todos on a running service")
app.add_typer(todos_app, name="todos")

UrlOption = Annotated[
    str | None,
    typer.Option("--url", "-u", help="Service origin (default http://HOST:PORT)"),
]


def _client(url: str | None) -> TodoClient:
    if url is None:
        settings = get_settings()
        url = f"http://{settings.host}:{settings.port}"
    return TodoClient(url)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code=1)


@todos_app.command("list")
def todos_list(
    url: UrlOption = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """List all todos."""
    try:
        with _client(url) as client:
            todos = client.list()
    except TodoClientError as e:
        _fail(str(e))

    if json_output:
        console.print(json.dumps([t.model_dump(by_alias=True) for t in todos], indent=2))
        return

    if not todos:
        console.print("No todos found.")
        return

    table = Table(title="Todos")
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Done")
    for todo in todos:
        table.add_row(str(todo.id), todo.title or "", "yes" if todo.is_complete else "")
    console.print(table)


@todos_app.command("show")
def todos_show(
    todo_id: Annotated[int, typer.Argument(help="Todo ID")],
    url: UrlOption = None,
) -> None:
    """Show a single todo as JSON."""
    try:
        with _client(url) as client:
            todo = client.get(todo_id)
    except (TodoNotFoundError, TodoClientError) as e:
        _fail(str(e))
    console.print(todo.model_dump_json(by_alias=True, indent=2))


@todos_app.command("add")
def todos_add(
    title: Annotated[str, typer.Argument(help="Todo title")],
    complete: Annotated[
        bool,
        typer.Option("--complete", help="Mark the new todo as complete"),
    ] = False,
    url: UrlOption = None,
) -> None:
    """Create a todo."""
    try:
        with _client(url) as client:
            todo = client.create(title, is_complete=complete)
    except TodoClientError as e:
        _fail(str(e))
    console.print(f"[green]Created todo {todo.id}:[/green] {todo.title}")


@todos_app.command("delete")
def todos_delete(
    todo_id: Annotated[int, typer.Argument(help="Todo ID")],
    url: UrlOption = None,
) -> None:
    """Delete a todo."""
    try:
        with _client(url) as client:
            todo = client.delete(todo_id)
    except (TodoNotFoundError, TodoClientError) as e:
        _fail(str(e))
    console.print(f"[green]Deleted todo {todo.id}:[/green] {todo.title}")


if __name__ == "__main__":
    app()
