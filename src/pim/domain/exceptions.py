"""Domain-level exceptions.

Every failure a store operation can report is a subclass of DomainException
so the CLI layer can catch them uniformly and display ``Error: <message>``.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """The persisted state could not be read or written."""


# --- Validation failures ------------------------------------------------------


class DuplicateIdError(ValidationError):

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Item with ID '{record_id}' already exists")
        self.record_id = record_id


class InvalidPriceError(ValidationError):

    def __init__(self, price: object = None) -> None:
        super().__init__("Price must be greater than zero")
        self.price = price


class InvalidQuantityError(ValidationError):

    def __init__(self, quantity: object = None) -> None:
        super().__init__("Quantity cannot be negative")
        self.quantity = quantity


class ExpiredOnEntryError(ValidationError):

    def __init__(self, expiry_date: date) -> None:
        super().__init__(
            f"Cannot add expired item (expiry {expiry_date.isoformat()})"
        )
        self.expiry_date = expiry_date


class InsufficientQuantityError(ValidationError):
    """Raised when a consumption would take the quantity below zero.

    The message always reports the current quantity so the caller can
    show the user how much is actually left.
    """

    def __init__(self, record_id: str, current_quantity: int, delta: int) -> None:
        super().__init__(
            f"Not enough stock for '{record_id}'. "
            f"Current quantity: {current_quantity}"
        )
        self.record_id = record_id
        self.current_quantity = current_quantity
        self.delta = delta


# --- Lookup failures ----------------------------------------------------------


class RecordNotFoundError(EntityNotFoundError):

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Item with ID '{record_id}' not found")
        self.record_id = record_id


# --- Persistence failures -----------------------------------------------------


class PersistenceWriteFailedError(PersistenceError):

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Error saving inventory to {path}: {reason}")
        self.path = path
        self.reason = reason


class PersistenceLoadFailedError(PersistenceError):

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Error loading inventory from {path}: {reason}")
        self.path = path
        self.reason = reason
