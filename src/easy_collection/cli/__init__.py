"""CLI module."""

from __future__ import annotations

from easy_collection.cli.main import app

__all__ = ["app"]
