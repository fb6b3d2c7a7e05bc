"""easy_collection - an ordered keyed collection for Python.

Example:
    >>> from easy_collection import Collection
    >>> people = Collection({"ada": 36, "alan": 41})
    >>> people.filter(lambda age, name: age > 40).to_dict()
    {'alan': 41}
"""

from __future__ import annotations

from easy_collection.collection import Collection
from easy_collection.config import AddPolicy, CollectionSettings, get_settings
from easy_collection.errors import CollectionError, KeyNotFoundError, PreconditionViolationError

__version__ = "0.1.0"

__all__ = [
    "AddPolicy",
    "Collection",
    "CollectionError",
    "CollectionSettings",
    "KeyNotFoundError",
    "PreconditionViolationError",
    "__version__",
    "get_settings",
]
