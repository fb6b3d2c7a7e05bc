"""Ordered keyed collection.

``Collection`` wraps an insertion-ordered ``dict`` whose keys are ``int`` or
``str`` and adds the helpers plain dicts lack: strict membership tests,
filter/map/reduce, value sorting that keeps keys attached, and list-style
appends.

Example:
    >>> from easy_collection import Collection
    >>> c = Collection(["b", "a"])
    >>> c.add("c").sort().to_dict()
    {1: 'a', 0: 'b', 2: 'c'}
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

import structlog

from easy_collection._internal.keys import ArrayKey, is_array_key, next_index, validate_key
from easy_collection._internal.strict import strict_equals, strict_index
from easy_collection.config import AddPolicy, get_settings
from easy_collection.errors import KeyNotFoundError, PreconditionViolationError

logger = structlog.get_logger()

K = TypeVar("K", bound=ArrayKey)
V = TypeVar("V")
U = TypeVar("U")
R = TypeVar("R")

Comparator = Callable[[Any, Any], int]

_NOT_A_LIST_MSG = (
    "Cannot add an element to a collection which is not a list. Use Collection.set instead"
)


class Collection(Generic[K, V]):
    """An ordered mapping of ``int``/``str`` keys to values.

    Sources passed to the constructor keep their keys when they are a
    ``Mapping`` or another ``Collection``; any other iterable is keyed by
    position starting at 0.

    Args:
        elements: Initial contents.
        add_policy: Whether ``add`` is restricted to list-shaped collections.
            Defaults to the configured ``add_policy`` setting.
    """

    __slots__ = ("_elements", "_add_policy")

    def __init__(
        self,
        elements: Mapping[K, V] | Iterable[V] = (),
        *,
        add_policy: AddPolicy | str | None = None,
    ) -> None:
        if add_policy is None:
            add_policy = get_settings().add_policy
        self._add_policy = AddPolicy(add_policy)
        self._elements: dict[K, V] = {}

        pairs: Iterable[tuple[Any, V]]
        if isinstance(elements, Collection):
            pairs = elements._elements.items()
        elif isinstance(elements, Mapping):
            pairs = elements.items()
        else:
            pairs = enumerate(elements)

        for key, value in pairs:
            self._elements[validate_key(key)] = value  # type: ignore[index]

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[K, V]],
        *,
        add_policy: AddPolicy | str | None = None,
    ) -> Collection[K, V]:
        """Build a collection from explicit ``(key, value)`` pairs.

        Later pairs overwrite earlier ones with the same key, keeping the
        position of the first occurrence.
        """
        collection: Collection[K, V] = cls(add_policy=add_policy)
        for key, value in pairs:
            collection.set(key, value)
        return collection

    @property
    def add_policy(self) -> AddPolicy:
        return self._add_policy

    def _derive(self, elements: Mapping[Any, Any] | Iterable[Any]) -> Collection[Any, Any]:
        return Collection(elements, add_policy=self._add_policy)

    # Core accessors

    def get(self, key: K) -> V:
        """Return the element stored under ``key``.

        Raises:
            KeyNotFoundError: If the key is not present.
        """
        if not self.contains_key(key):
            raise KeyNotFoundError(key)
        return self._elements[key]

    def set(self, key: K, element: V) -> Collection[K, V]:
        """Store ``element`` under ``key``.

        An existing key keeps its position, a new key is appended at the end.
        """
        self._elements[validate_key(key)] = element  # type: ignore[index]
        return self

    def add(self, *elements: V) -> Collection[K, V]:
        """Append elements under the next free integer keys.

        Raises:
            PreconditionViolationError: If the add policy is ``LIST_ONLY`` and
                the collection is not a list.
        """
        if self._add_policy is AddPolicy.LIST_ONLY and not self.is_list():
            logger.debug(
                "add_rejected",
                policy=self._add_policy.value,
                count=len(self._elements),
                first_key=self.first_key(),
            )
            raise PreconditionViolationError(_NOT_A_LIST_MSG)

        index = next_index(list(self._elements))
        for element in elements:
            self._elements[index] = element  # type: ignore[index]
            index += 1
        return self

    def remove(self, key: K) -> V | None:
        """Remove the element under ``key`` and return it, or ``None`` if absent."""
        if not self.contains_key(key):
            return None
        return self._elements.pop(key)

    def remove_element(self, element: V) -> bool:
        """Remove the first entry strictly equal to ``element``.

        Returns:
            Whether an entry was removed.
        """
        found, key = strict_index(self._elements.items(), element)
        if not found:
            return False
        del self._elements[key]  # type: ignore[arg-type]
        return True

    def clear(self) -> Collection[K, V]:
        self._elements = {}
        return self

    # Queries

    def keys(self) -> Collection[int, K]:
        """Return a new list-shaped collection of this collection's keys."""
        return self._derive(list(self._elements))

    def values(self) -> Collection[int, V]:
        """Return a new list-shaped collection of this collection's values."""
        return self._derive(list(self._elements.values()))

    def first_key(self) -> K | None:
        return next(iter(self._elements), None)

    def last_key(self) -> K | None:
        return next(reversed(self._elements), None)

    def first(self) -> V | None:
        """Return the first element, or ``None`` when empty."""
        key = self.first_key()
        if key is None:
            return None
        return self._elements[key]

    def last(self) -> V | None:
        """Return the last element, or ``None`` when empty."""
        key = self.last_key()
        if key is None:
            return None
        return self._elements[key]

    def key(self, element: V) -> K | None:
        """Return the key of the first entry strictly equal to ``element``.

        ``None`` is returned when no entry matches; it can never be a valid key.
        """
        _, key = strict_index(self._elements.items(), element)
        return key  # type: ignore[return-value]

    def contains(self, element: V) -> bool:
        """Return whether an entry strictly equal to ``element`` exists."""
        return any(strict_equals(value, element) for value in self._elements.values())

    def contains_key(self, key: object) -> bool:
        return is_array_key(key) and key in self._elements

    def is_empty(self) -> bool:
        return not self._elements

    def is_list(self) -> bool:
        """Return whether the keys are exactly ``0..n-1`` in order."""
        return all(
            isinstance(key, int) and key == index for index, key in enumerate(self._elements)
        )

    def count(self) -> int:
        return len(self._elements)

    # Higher-order helpers

    def find(self, predicate: Callable[[V], object]) -> V | None:
        """Return the first element passing ``predicate``, or ``None``."""
        for element in self._elements.values():
            if predicate(element):
                return element
        return None

    def filter(self, predicate: Callable[[V, K], object] | None = None) -> Collection[K, V]:
        """Return a new collection of the entries passing ``predicate(value, key)``.

        Without a predicate, falsy values are dropped. Keys are preserved.
        """
        if predicate is None:
            return self._derive({k: v for k, v in self._elements.items() if v})
        return self._derive({k: v for k, v in self._elements.items() if predicate(v, k)})

    def map(self, callback: Callable[[V, K], U]) -> Collection[K, U]:
        """Return a new collection with each value replaced by ``callback(value, key)``."""
        return self._derive({k: callback(v, k) for k, v in self._elements.items()})

    def reduce(self, callback: Callable[[R, V], R], initial: R | None = None) -> R | None:
        """Fold the values left to right, starting from ``initial``."""
        return functools.reduce(callback, self._elements.values(), initial)  # type: ignore[arg-type]

    def some(self, predicate: Callable[[V, K], object]) -> bool:
        return any(predicate(v, k) for k, v in self._elements.items())

    def every(self, predicate: Callable[[V, K], object]) -> bool:
        return all(predicate(v, k) for k, v in self._elements.items())

    # Sorting

    def sort(self, comparator: Comparator | None = None) -> Collection[K, V]:
        """Sort the collection in place by value, keeping keys attached.

        Without a comparator values are ordered with ``<``. A comparator takes
        two values and returns a negative, zero or positive number. The sort is
        stable.
        """
        items = list(self._elements.items())
        if comparator is None:
            items.sort(key=lambda item: item[1])
        else:
            items.sort(key=functools.cmp_to_key(lambda a, b: comparator(a[1], b[1])))
        self._elements = dict(items)
        return self

    def sorted(self, comparator: Comparator | None = None) -> Collection[K, V]:
        """Return a sorted copy, leaving this collection untouched."""
        return self._derive(self._elements).sort(comparator)

    def usort(self, comparator: Comparator) -> Collection[K, V]:
        """Return a copy sorted with ``comparator``."""
        return self.sorted(comparator)

    # Export and protocols

    def to_dict(self) -> dict[K, V]:
        """Return the contents as a plain dict in current order."""
        return dict(self._elements)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return iter(list(self._elements.items()))

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K | None, element: V) -> None:
        if key is None:
            self.add(element)
            return
        self.set(key, element)

    def __delitem__(self, key: K) -> None:
        self.remove(key)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return list(self._elements.items()) == list(other._elements.items())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elements!r})"
