"""StockRecord entity: one tracked perishable stock-keeping unit."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from pim.domain.exceptions import (
    ExpiredOnEntryError,
    InsufficientQuantityError,
    InvalidPriceError,
    InvalidQuantityError,
)
from pim.domain.model.value_objects import Money


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class StockRecord:
    """A tracked item: price, quantity on hand and expiry date.

    Use the ``StockRecord.create()`` factory for new items; it enforces
    the entry rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted items that have expired since
    they were added.

    Invariants:
    - ``unit_price`` is strictly positive
    - ``quantity`` is never negative
    """

    id: str
    name: str
    unit_price: Money
    quantity: int
    expiry_date: date

    # --- Factory (used for NEW records only) ----------------------------------

    @staticmethod
    def create(
        record_id: str,
        name: str,
        unit_price: Money,
        quantity: int,
        expiry_date: date,
        today: date,
    ) -> StockRecord:
        """Create a new record, checking price, quantity then expiry."""
        if not unit_price.is_positive:
            raise InvalidPriceError(unit_price.amount)
        if not _is_int(quantity) or quantity < 0:
            raise InvalidQuantityError(quantity)
        if expiry_date < today:
            raise ExpiredOnEntryError(expiry_date)
        return StockRecord(
            id=record_id,
            name=name,
            unit_price=unit_price,
            quantity=quantity,
            expiry_date=expiry_date,
        )

    # --- Mutations ------------------------------------------------------------

    def adjust_quantity(self, delta: int) -> None:
        """Restock (positive delta) or consume (negative delta)."""
        if not _is_int(delta):
            raise InvalidQuantityError(delta)
        new_quantity = self.quantity + delta
        if new_quantity < 0:
            raise InsufficientQuantityError(self.id, self.quantity, delta)
        self.quantity = new_quantity

    def update_price(self, new_price: Money) -> None:
        if not new_price.is_positive:
            raise InvalidPriceError(new_price.amount)
        self.unit_price = new_price

    # --- Derived values -------------------------------------------------------

    def is_expired(self, today: date) -> bool:
        return self.expiry_date < today

    def days_until_expiry(self, today: date) -> int:
        """Whole days left; negative once the item has expired."""
        return (self.expiry_date - today).days

    @property
    def total_value(self) -> Money:
        return self.unit_price * self.quantity
