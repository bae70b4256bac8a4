"""Generic in-memory keyed store."""

import logging
from typing import Callable, Generic, Iterator, Optional, TypeVar

from recordkeep.domain.errors import (
    DuplicateKeyError,
    NotFoundError,
    ValidationError,
    duplicate_key,
    key_not_found,
)

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class KeyedStore(Generic[K, V]):
    """Mapping from a unique key to a value.

    The key of each value is derived with the injected ``key_func``, so any
    record type can be stored without a common base class. Keys are unique:
    adding a value whose key is already present is rejected, never
    overwritten. Values may not be None, so ``find_first`` returning None
    always means no match.
    """

    def __init__(self, key_func: Callable[[V], K], name: str = "item"):
        """Initialize an empty store.

        Args:
            key_func: Function returning the identity key of a value
            name: Human-readable name of the stored record type, used in errors
        """
        self.name = name
        self._key_func = key_func
        self._items: dict[K, V] = {}

    def key_of(self, item: V) -> K:
        """Return the key the store uses for ``item``."""
        return self._key_func(item)

    def add(self, item: V) -> K:
        """Insert a new value.

        Returns:
            Key of the inserted value

        Raises:
            ValidationError: If item is None
            DuplicateKeyError: If a value with the same key already exists
        """
        if item is None:
            raise ValidationError(f"Cannot store None as a {self.name}")
        key = self._key_func(item)
        if key in self._items:
            logger.warning("Rejected duplicate %s key %r", self.name, key)
            raise DuplicateKeyError(duplicate_key(self.name, key), key=key, store=self.name)
        self._items[key] = item
        logger.debug("Added %s %r", self.name, key)
        return key

    def get(self, key: K) -> V:
        """Return the value stored under ``key``.

        Raises:
            NotFoundError: If the key is absent
        """
        try:
            return self._items[key]
        except KeyError:
            raise NotFoundError(key_not_found(self.name, key), key=key, store=self.name) from None

    def update(self, item: V) -> None:
        """Replace the value stored under the key of ``item``.

        Raises:
            NotFoundError: If no value with that key exists
        """
        key = self._key_func(item)
        if key not in self._items:
            raise NotFoundError(key_not_found(self.name, key), key=key, store=self.name)
        self._items[key] = item
        logger.debug("Updated %s %r", self.name, key)

    def remove(self, key: K) -> None:
        """Delete the value stored under ``key``.

        Raises:
            NotFoundError: If the key is absent
        """
        if key not in self._items:
            raise NotFoundError(key_not_found(self.name, key), key=key, store=self.name)
        del self._items[key]
        logger.debug("Removed %s %r", self.name, key)

    def get_all(self) -> list[V]:
        """Return a new list holding every stored value.

        Callers must not rely on the order of the returned values.
        """
        return list(self._items.values())

    def find_first(self, predicate: Callable[[V], bool]) -> Optional[V]:
        """Return the first value matching ``predicate``, or None if none does."""
        for item in self._items.values():
            if predicate(item):
                return item
        return None

    def keys(self) -> list[K]:
        """Return a new list of the stored keys."""
        return list(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[V]:
        return iter(self.get_all())

    def __repr__(self) -> str:
        return f"KeyedStore(name={self.name!r}, size={len(self._items)})"
