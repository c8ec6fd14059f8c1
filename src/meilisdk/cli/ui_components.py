"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Tables/panels are shared by several commands.
"""

from __future__ import annotations

from typing import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from meilisdk.core.domain import Dump, DumpStatus, Index
from meilisdk.core.errors import MeiliSearchApiError, MeiliSearchError

_DUMP_STYLES = {
    DumpStatus.IN_PROGRESS: "yellow",
    DumpStatus.PROCESSING: "yellow",
    DumpStatus.FAILED: "red",
    DumpStatus.DONE: "green",
}


def build_indexes_table(indexes: Iterable[Index]) -> Table:
    table = Table(title="Indexes")
    table.add_column("UID", style="cyan", no_wrap=True)
    table.add_column("Primary key", style="white")
    table.add_column("Created", style="dim")
    table.add_column("Updated", style="dim")
    for index in indexes:
        table.add_row(
            index.uid,
            index.primary_key or "-",
            index.created_at.isoformat() if index.created_at else "-",
            index.updated_at.isoformat() if index.updated_at else "-",
        )
    return table


def build_dump_panel(dump: Dump) -> Panel:
    body = Text()
    body.append("uid: ", style="bold")
    body.append(f"{dump.uid}\n")
    body.append("status: ", style="bold")
    body.append(dump.status.value, style=_DUMP_STYLES.get(dump.status, "white"))
    return Panel(body, title=Text("Dump", style="bold magenta"), border_style="magenta")


def format_error(exc: MeiliSearchError) -> Text:
    """One-line rendering of a client error for stderr."""

    if isinstance(exc, MeiliSearchApiError):
        text = Text.assemble(("Error ", "bold red"), (f"[{exc.error_code}] ", "red"), exc.message)
        if exc.error_link:
            text.append(f"\n{exc.error_link}", style="dim")
        return text
    return Text.assemble(("Error ", "bold red"), str(exc))
