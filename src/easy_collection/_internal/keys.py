"""Validation for collection keys.

Keys are restricted to ``int`` and ``str``. ``bool`` is an ``int`` subclass in
Python but is rejected, as are floats and ``None``.
"""

from __future__ import annotations

ArrayKey = int | str


def is_array_key(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, int | str)


def validate_key(value: object) -> ArrayKey:
    """Return ``value`` unchanged if it is a valid key, raise ``TypeError`` otherwise."""
    if not is_array_key(value):
        msg = f"Invalid collection key: {value!r} (must be int or str, got {type(value).__name__})"
        raise TypeError(msg)
    return value  # type: ignore[return-value]


def next_index(keys: list[ArrayKey]) -> int:
    """Return one past the largest integer key, or 0 when there is none."""
    int_keys = [k for k in keys if isinstance(k, int)]
    if not int_keys:
        return 0
    return max(int_keys) + 1
