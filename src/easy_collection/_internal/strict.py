"""Strict (non-coercing) equality.

Scalars compare by exact type and value, so ``1``, ``1.0`` and ``True`` are
all distinct. Lists, tuples and dicts compare structurally with the same rules
applied to their items (dicts are order-sensitive). Everything else compares by
identity.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, cast

_SCALAR_TYPES = (int, float, complex, str, bytes, bool, type(None))


def strict_equals(left: object, right: object) -> bool:
    if left is right:
        return not (isinstance(left, float) and left != left)
    if type(left) is not type(right):
        return False
    if isinstance(left, _SCALAR_TYPES):
        return left == right
    if isinstance(left, list | tuple):
        other = cast("list[Any] | tuple[Any, ...]", right)
        return len(left) == len(other) and all(
            strict_equals(a, b) for a, b in zip(left, other, strict=True)
        )
    if isinstance(left, dict):
        other_map = cast("dict[Any, Any]", right)
        if len(left) != len(other_map):
            return False
        return all(
            strict_equals(lk, rk) and strict_equals(lv, rv)
            for (lk, lv), (rk, rv) in zip(left.items(), other_map.items(), strict=True)
        )
    return False


def strict_index(items: Iterable[tuple[object, object]], needle: object) -> tuple[bool, object]:
    """Find the first ``(key, value)`` pair whose value strictly equals ``needle``.

    Returns ``(found, key)``.
    """
    for key, value in items:
        if strict_equals(value, needle):
            return True, key
    return False, None
