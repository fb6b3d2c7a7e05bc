"""Load JSON documents into collections."""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from easy_collection.collection import Collection

logger = structlog.get_logger()


class DocumentError(Exception):
    """Raised when a document cannot be read as a collection."""


def load_collection(path: Path) -> Collection[int | str, object]:
    """Read a JSON document as a collection.

    Objects keep their (string) keys, arrays are keyed by position and any
    other JSON value becomes a one-element list.

    Raises:
        DocumentError: If the file is missing, is not UTF-8 or is not valid JSON.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read {path}: {exc.strerror or exc}"
        raise DocumentError(msg) from exc
    except UnicodeDecodeError as exc:
        msg = f"Cannot decode {path} as UTF-8: {exc.reason} at byte {exc.start}"
        raise DocumentError(msg) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path}: {exc.msg} (line {exc.lineno}, column {exc.colno})"
        raise DocumentError(msg) from exc

    if isinstance(data, dict | list):
        collection: Collection[int | str, object] = Collection(data)
    else:
        collection = Collection([data])

    logger.debug("document_loaded", path=str(path), count=collection.count())
    return collection
