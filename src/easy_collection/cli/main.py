"""Main CLI entry point using Typer.

This module defines the top-level CLI commands:
- easy-collection show: Print a JSON document as a collection table
- easy-collection info: Summarize a JSON document as a collection
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003 - Typer requires runtime access
from typing import Annotated

import structlog
import typer
from rich.console import Console

from easy_collection import __version__
from easy_collection.config import get_settings

app = typer.Typer(
    name="easy-collection",
    help="easy-collection - inspect JSON documents as ordered collections",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"easy-collection {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
) -> None:
    """easy-collection - inspect JSON documents as ordered collections.

    Use 'easy-collection COMMAND --help' for information on specific commands.
    """
    level = logging.DEBUG if verbose else logging.getLevelName(get_settings().log_level)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


@app.command()
def show(
    path: Annotated[Path, typer.Argument(help="JSON document to display.")],
    sort: Annotated[
        bool,
        typer.Option("--sort", "-s", help="Sort entries by value."),
    ] = False,
    desc: Annotated[
        bool,
        typer.Option("--desc", help="Sort entries by value, descending."),
    ] = False,
    truthy: Annotated[
        bool,
        typer.Option("--truthy", help="Drop entries with empty or false values."),
    ] = False,
    keys: Annotated[
        bool,
        typer.Option("--keys", help="Show only the keys."),
    ] = False,
    values: Annotated[
        bool,
        typer.Option("--values", help="Show only the values."),
    ] = False,
) -> None:
    """Print a JSON document as a key/value table.

    Objects keep their keys; arrays are keyed by position.

    Examples:
        easy-collection show data.json

        easy-collection show data.json --sort --truthy

        easy-collection show data.json --keys
    """
    from easy_collection.cli.commands.show import show_collection  # noqa: PLC0415

    show_collection(
        path=path,
        sort=sort,
        descending=desc,
        truthy=truthy,
        keys_only=keys,
        values_only=values,
    )


@app.command()
def info(
    path: Annotated[Path, typer.Argument(help="JSON document to inspect.")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output raw JSON."),
    ] = False,
) -> None:
    """Summarize a JSON document: entry count, list shape, first and last key.

    Examples:
        easy-collection info data.json

        easy-collection info data.json --json
    """
    from easy_collection.cli.commands.info import show_info  # noqa: PLC0415

    show_info(path=path, json_output=json_output)


if __name__ == "__main__":
    app()
