"""Domain model entities for recordkeep.

These are pure data classes representing the records held by the stores and
ledgers. They are frozen: the only way to change a stored record is to
replace it through an explicit store update.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Union
from uuid import UUID

from recordkeep.domain.errors import (
    InvalidQuantityError,
    ValidationError,
    negative_quantity,
    non_finite_amount,
)


@dataclass(frozen=True)
class Transaction:
    """Monetary transaction entity."""

    id: UUID
    timestamp: datetime
    amount: Decimal
    category: str

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Transaction amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(non_finite_amount(self.amount))


@dataclass(frozen=True)
class AccountSnapshot:
    """Read-only view of an account balance at a point in time."""

    account_number: str
    balance: Decimal
    policy: str


@dataclass(frozen=True)
class Patient:
    """Patient reference data."""

    id: int
    name: str
    age: int
    gender: str


@dataclass(frozen=True)
class Prescription:
    """Prescription issued to a patient."""

    id: int
    patient_id: int
    medication: str
    issued_on: date


@dataclass(frozen=True)
class ElectronicItem:
    """Electronic inventory item."""

    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __post_init__(self):
        if self.quantity < 0:
            raise InvalidQuantityError(negative_quantity(self.quantity), quantity=self.quantity)


@dataclass(frozen=True)
class GroceryItem:
    """Grocery inventory item."""

    id: int
    name: str
    quantity: int
    expires_on: date

    def __post_init__(self):
        if self.quantity < 0:
            raise InvalidQuantityError(negative_quantity(self.quantity), quantity=self.quantity)

    def is_expired(self, on: date) -> bool:
        """Return True if the item is past its expiry date on the given day."""
        return on > self.expires_on


InventoryItem = Union[ElectronicItem, GroceryItem]
