"""In-memory storage layer for recordkeep."""

from recordkeep.store.keyed import KeyedStore
from recordkeep.store.grouping import GroupingIndex

__all__ = ["KeyedStore", "GroupingIndex"]
