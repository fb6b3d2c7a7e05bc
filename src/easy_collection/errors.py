"""Exceptions raised by the collection API."""

from __future__ import annotations


class CollectionError(Exception):
    """Base class for errors raised by easy_collection."""


class KeyNotFoundError(CollectionError, KeyError):
    """Raised when a key is looked up that the collection does not hold."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key {self.key!r} does not exist in the collection"


class PreconditionViolationError(CollectionError, ValueError):
    """Raised when an operation's precondition on the collection is not met."""
