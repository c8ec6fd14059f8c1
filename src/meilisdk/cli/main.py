"""Main CLI (Typer).

Commands:
- `indexes`: list/get/create/update/delete/ensure
- `dumps`: create/status
- `doctor`: diagnostics and user config
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from meilisdk.cli import doctor
from meilisdk.cli.ui_components import build_dump_panel, build_indexes_table, format_error
from meilisdk.client import Client
from meilisdk.core.config import ClientSettings
from meilisdk.core.errors import MeiliSearchError

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Manage indexes and dumps of a Meilisearch instance.")
indexes_app = typer.Typer(no_args_is_help=True, help="Index lifecycle.")
dumps_app = typer.Typer(no_args_is_help=True, help="Dump jobs.")

app.add_typer(indexes_app, name="indexes")
app.add_typer(dumps_app, name="dumps")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _client(ctx: typer.Context) -> Client:
    return ctx.ensure_object(Client)


def _call(fn: Callable[[], T]) -> T:
    """Run a client call, turning client errors into exit code 1."""

    try:
        return fn()
    except MeiliSearchError as exc:
        _err_console.print(format_error(exc))
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    host_url: Optional[str] = typer.Option(None, "--host-url", help="Instance base URL (overrides MEILI_HOST_URL)."),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="API key (overrides MEILI_API_KEY)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    configure_logging(verbose)
    if isinstance(ctx.obj, Client):
        return

    overrides: dict[str, str] = {}
    if host_url:
        overrides["host_url"] = host_url
    if api_key:
        overrides["api_key"] = api_key
    try:
        settings = ClientSettings(**overrides)
    except ValidationError as exc:
        _err_console.print(format_error(MeiliSearchError(f"Invalid configuration: {exc}")))
        raise typer.Exit(code=1) from exc
    ctx.obj = Client(settings)


@indexes_app.command("list")
def list_indexes(ctx: typer.Context) -> None:
    """List every index of the instance."""

    indexes = _call(_client(ctx).get_indexes)
    _console.print(build_indexes_table(indexes))


@indexes_app.command("get")
def get_index(ctx: typer.Context, uid: str) -> None:
    index = _call(lambda: _client(ctx).get_index(uid))
    _console.print(build_indexes_table([index]))


@indexes_app.command("create")
def create_index(
    ctx: typer.Context,
    uid: str,
    primary_key: Optional[str] = typer.Option(None, "--primary-key", "-p"),
) -> None:
    index = _call(lambda: _client(ctx).create_index(uid, primary_key))
    _console.print(f"[green]Created index[/green] {index.uid}")


@indexes_app.command("update")
def update_index(
    ctx: typer.Context,
    uid: str,
    primary_key: str = typer.Option(..., "--primary-key", "-p"),
) -> None:
    index = _call(lambda: _client(ctx).update_index(uid, primary_key))
    _console.print(build_indexes_table([index]))


@indexes_app.command("delete")
def delete_index(
    ctx: typer.Context,
    uid: str,
    if_exists: bool = typer.Option(False, "--if-exists", help="Do not fail when the index is missing."),
) -> None:
    client = _client(ctx)
    if if_exists:
        deleted = _call(lambda: client.delete_index_if_exists(uid))
        if not deleted:
            _console.print(f"[yellow]Index {uid} does not exist[/yellow]")
            return
    else:
        _call(lambda: client.delete_index(uid))
    _console.print(f"[green]Deleted index[/green] {uid}")


@indexes_app.command("ensure")
def ensure_index(
    ctx: typer.Context,
    uid: str,
    primary_key: Optional[str] = typer.Option(None, "--primary-key", "-p"),
) -> None:
    """Get the index, creating it if the server reports it missing."""

    index = _call(lambda: _client(ctx).get_or_create_index(uid, primary_key))
    _console.print(build_indexes_table([index]))


@dumps_app.command("create")
def create_dump(ctx: typer.Context) -> None:
    dump = _call(_client(ctx).create_dump)
    _console.print(build_dump_panel(dump))


@dumps_app.command("status")
def dump_status(ctx: typer.Context, uid: str) -> None:
    dump = _call(lambda: _client(ctx).get_dump_status(uid))
    _console.print(build_dump_panel(dump))


def run() -> None:
    app()
