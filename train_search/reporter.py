from __future__ import annotations

import json
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from train_search.domain.models import Criterion, TrainRecord


def render_json(records: Sequence[TrainRecord]) -> str:
    """
    Render records as indented JSON mirroring the dataset schema.

    One-space indentation, camelCase keys, `HH:MM:SS` times.
    """
    return json.dumps([record.to_payload() for record in records], indent=1)


def print_json_results(records: Sequence[TrainRecord], console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(
        render_json(records), style="green", markup=False, emoji=False, highlight=False, soft_wrap=True
    )


def print_results(
    records: List[TrainRecord],
    criterion: Optional[Criterion] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Render search results as a rich table, in the order given.
    """
    console = console or Console()

    if not records:
        console.print("[yellow]No trains found.[/yellow]")
        return

    title = "Train Search Results"
    caption = f"Sorted by {criterion.value} (ascending)" if criterion else None

    table = Table(title=title, box=box.ROUNDED, caption=caption)

    table.add_column("#", justify="right", style="dim")
    table.add_column("Train", justify="right", style="cyan", no_wrap=True)
    table.add_column("From", justify="right", style="magenta")
    table.add_column("To", justify="right", style="magenta")
    table.add_column("Departure", justify="right", style="green")
    table.add_column("Arrival", justify="right", style="green")
    table.add_column("Price", justify="right", style="bold yellow")

    for rank, record in enumerate(records, start=1):
        table.add_row(
            str(rank),
            str(record.train_id),
            str(record.departure_station_id),
            str(record.arrival_station_id),
            str(record.departure_time),
            str(record.arrival_time),
            f"{record.price:,.2f}",
        )

    console.print(table)


__all__ = ["print_json_results", "print_results", "render_json"]
