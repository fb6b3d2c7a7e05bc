"""Show command implementation."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from easy_collection.cli.loader import DocumentError, load_collection

console = Console()
err_console = Console(stderr=True)


def _descending(a: object, b: object) -> int:
    return (b > a) - (b < a)  # type: ignore[operator]


def show_collection(
    *,
    path: Path,
    sort: bool,
    descending: bool,
    truthy: bool,
    keys_only: bool,
    values_only: bool,
) -> None:
    """Execute show command.

    Args:
        path: JSON document to display.
        sort: Sort entries by value, ascending.
        descending: Sort entries by value, descending.
        truthy: Drop entries with falsy values.
        keys_only: Show only the keys, re-indexed.
        values_only: Show only the values, re-indexed.
    """
    if keys_only and values_only:
        err_console.print("[red]✗[/red] --keys and --values are mutually exclusive.")
        raise SystemExit(1)

    try:
        collection = load_collection(path)
    except DocumentError as err:
        err_console.print(f"[red]✗[/red] {err}")
        raise SystemExit(1) from None

    if truthy:
        collection = collection.filter()

    if sort or descending:
        try:
            collection = collection.sorted(_descending if descending else None)
        except TypeError as err:
            err_console.print(f"[red]✗[/red] Cannot sort values: {err}")
            raise SystemExit(1) from None

    if keys_only:
        collection = collection.keys()
    elif values_only:
        collection = collection.values()

    table = Table(title=path.name)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in collection:
        table.add_row(json.dumps(key), json.dumps(value, ensure_ascii=False))
    console.print(table)
