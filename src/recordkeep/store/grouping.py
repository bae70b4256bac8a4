"""One-to-many index derived from a flat collection."""

import logging
from typing import Callable, Generic, Hashable, Iterable, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class GroupingIndex(Generic[K, V]):
    """Groups records by a foreign key.

    The index is a derived view with no authority over its source. Whenever
    the source changes it must be rebuilt with ``build``; there is no
    incremental insert.
    """

    def __init__(self):
        self._groups: dict[K, list[V]] = {}

    def build(self, items: Iterable[V], key_func: Callable[[V], K]) -> None:
        """Discard the current content and regroup ``items`` by ``key_func``.

        Items sharing a key keep their relative order from ``items``.
        """
        groups: dict[K, list[V]] = {}
        count = 0
        for item in items:
            groups.setdefault(key_func(item), []).append(item)
            count += 1
        self._groups = groups
        logger.debug("Built grouping index: %d items in %d groups", count, len(groups))

    def lookup(self, key: K) -> list[V]:
        """Return the items grouped under ``key``, or an empty list if unseen."""
        return list(self._groups.get(key, ()))

    def keys(self) -> list[K]:
        """Return the keys observed during the last build."""
        return list(self._groups)

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __len__(self) -> int:
        return len(self._groups)
