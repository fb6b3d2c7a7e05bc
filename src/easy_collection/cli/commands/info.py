"""Info command implementation."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from easy_collection.cli.loader import DocumentError, load_collection

console = Console()
err_console = Console(stderr=True)


def show_info(*, path: Path, json_output: bool) -> None:
    """Execute info command.

    Args:
        path: JSON document to inspect.
        json_output: Output raw JSON.
    """
    try:
        collection = load_collection(path)
    except DocumentError as err:
        err_console.print(f"[red]✗[/red] {err}")
        raise SystemExit(1) from None

    summary = {
        "count": collection.count(),
        "is_list": collection.is_list(),
        "first_key": collection.first_key(),
        "last_key": collection.last_key(),
    }

    if json_output:
        console.print_json(json.dumps(summary))
        return

    table = Table(title=path.name, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for field, value in summary.items():
        table.add_row(field, json.dumps(value))
    console.print(table)
