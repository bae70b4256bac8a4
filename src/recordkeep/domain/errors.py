"""Shared domain error messages and error types."""

from typing import Any


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested key is not present in a store."""

    def __init__(self, message: str, key: Any = None, store: str | None = None):
        super().__init__(message)
        self.key = key
        self.store = store


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DuplicateKeyError(ConflictError):
    """An entry with the same key already exists; the store is unchanged."""

    def __init__(self, message: str, key: Any = None, store: str | None = None):
        super().__init__(message)
        self.key = key
        self.store = store


class InvalidQuantityError(ValidationError):
    """A stock quantity below zero was requested."""

    def __init__(self, message: str, quantity: int | None = None):
        super().__init__(message)
        self.quantity = quantity


def duplicate_key(store: str, key: Any) -> str:
    """Return message for an insert that collides with an existing key."""
    return f"{store.capitalize()} with key {key!r} already exists"


def key_not_found(store: str, key: Any) -> str:
    """Return message for a missing key."""
    return f"{store.capitalize()} with key {key!r} not found"


def negative_quantity(quantity: int) -> str:
    """Return message for a negative stock quantity."""
    return f"Quantity cannot be negative (got {quantity})"


def float_amount(value: float) -> str:
    """Return message for a binary float passed where a Decimal is required."""
    return f"Amount {value!r} is a float; use Decimal, int or a string instead"


def non_finite_amount(value: object) -> str:
    """Return message for a NaN or infinite amount."""
    return f"Amount '{value}' is not a finite number"
