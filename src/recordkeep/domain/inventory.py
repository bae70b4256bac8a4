"""Inventory store with stock quantity rules."""

import logging
from dataclasses import dataclass, replace
from typing import Generic, Optional, TypeVar

from recordkeep.domain.entities import ElectronicItem, GroceryItem, InventoryItem
from recordkeep.domain.errors import DomainError, InvalidQuantityError, negative_quantity
from recordkeep.store.keyed import KeyedStore

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=InventoryItem)


@dataclass(frozen=True)
class StockAdjustment:
    """Outcome of a best-effort stock increase."""

    item_id: int
    succeeded: bool
    quantity: Optional[int]
    message: str


class InventoryStore(KeyedStore[int, T], Generic[T]):
    """Keyed store of inventory items, keyed by item id."""

    def __init__(self, name: str = "item"):
        super().__init__(key_func=lambda item: item.id, name=name)

    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        """Set the on-hand quantity of an item.

        The quantity is validated before the item is looked up, so a negative
        quantity for an unknown id reports InvalidQuantityError.

        Raises:
            InvalidQuantityError: If new_quantity is negative
            NotFoundError: If the item does not exist
        """
        if new_quantity < 0:
            raise InvalidQuantityError(negative_quantity(new_quantity), quantity=new_quantity)
        item = self.get(item_id)
        self.update(replace(item, quantity=new_quantity))

    def increase_stock(self, item_id: int, delta: int) -> StockAdjustment:
        """Add ``delta`` units to an item.

        Failures are not raised: they are logged and reported in the
        returned StockAdjustment.
        """
        try:
            item = self.get(item_id)
            new_quantity = item.quantity + delta
            self.update_quantity(item_id, new_quantity)
        except DomainError as e:
            logger.warning("Stock increase for %s %r failed: %s", self.name, item_id, e)
            return StockAdjustment(item_id=item_id, succeeded=False, quantity=None, message=str(e))

        return StockAdjustment(
            item_id=item_id,
            succeeded=True,
            quantity=new_quantity,
            message=f"Stock of '{item.name}' increased by {delta} to {new_quantity}",
        )

    def total_quantity(self) -> int:
        """Return the sum of on-hand units over all items."""
        return sum(item.quantity for item in self.get_all())


def create_electronics_store() -> InventoryStore[ElectronicItem]:
    """Create an inventory store for electronic items."""
    return InventoryStore(name="electronic item")


def create_grocery_store() -> InventoryStore[GroceryItem]:
    """Create an inventory store for grocery items."""
    return InventoryStore(name="grocery item")
