from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from workflow.domain.models import SomeRecord


def print_records(records: Sequence[SomeRecord], console: Optional[Console] = None) -> None:
    """
    Render records as a rich table, in construction order.
    """
    console = console or Console()

    if not records:
        console.print("[yellow]No records to display.[/yellow]")
        return

    title = "Workflow Records"
    # rich wraps the title to the table width, so keep the table at least as wide
    table = Table(
        title=title,
        box=box.ROUNDED,
        caption=f"{len(records)} record(s)",
        min_width=len(title) + 4,
    )
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="magenta")

    for index, record in enumerate(records, start=1):
        table.add_row(str(index), str(record.value))

    console.print(table)


__all__ = ["print_records"]
