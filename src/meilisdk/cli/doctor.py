"""Doctor command for connection diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from meilisdk.client import Client
from meilisdk.core.config import write_user_env_vars
from meilisdk.core.errors import MeiliSearchApiError, MeiliSearchError

app = typer.Typer(no_args_is_help=True, help="Connection diagnostics and configuration checks.")

_console = Console()


def _check_connection(client: Client) -> tuple[bool, str]:
    try:
        indexes = client.get_indexes()
    except MeiliSearchApiError as exc:
        return False, f"{exc.error_code}: {exc.message}"
    except MeiliSearchError as exc:
        return False, str(exc)
    return True, f"{len(indexes)} index(es)"


@app.command()
def run(ctx: typer.Context) -> None:
    """Show the effective configuration and check the instance is reachable."""

    client = ctx.ensure_object(Client)
    settings = client.settings

    table = Table(title="meilisdk Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Host URL", "OK", settings.host_url)
    if settings.api_key:
        table.add_row("API key", "OK", "X-Meili-API-Key header set")
    else:
        table.add_row("API key", "OPTIONAL", "No key set -> only works on unprotected instances")

    ok, detail = _check_connection(client)
    table.add_row("Connection", "OK" if ok else "FAIL", detail)

    _console.print(table)
    if not ok:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores host and key in the user config .env)."""

    host_url = typer.prompt("Host URL", default="http://localhost:7700", show_default=True).strip()
    api_key = typer.prompt("API key (empty for none)", default="", show_default=False, hide_input=True).strip()

    if not host_url:
        raise typer.BadParameter("host URL is required")

    env_path = write_user_env_vars(
        {
            "MEILI_HOST_URL": host_url,
            "MEILI_API_KEY": api_key or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
