"""Domain service: the record store.

Owns the mapping from item ID to StockRecord for the lifetime of the
process.  Every mutation is validated in full before the map is touched,
and every successful mutation is followed by a full snapshot save.
Queries never save.

A failed save is reported to the caller but the in-memory change stays
applied; memory and disk may differ until the next successful save.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from decimal import Decimal

from pim.domain.exceptions import (
    DuplicateIdError,
    InvalidPriceError,
    PersistenceLoadFailedError,
    PersistenceWriteFailedError,
    RecordNotFoundError,
)
from pim.domain.model.record import StockRecord
from pim.domain.model.value_objects import Money
from pim.domain.repository.record_repository import RecordRepository

logger = logging.getLogger(__name__)

PriceInput = str | float | int | Decimal


class RecordStore:

    def __init__(
        self,
        repository: RecordRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = repository
        self._today = today
        self._records: dict[str, StockRecord] = {}
        self.load_warning: str | None = None
        self._load()

    # --- Mutations ------------------------------------------------------------

    def add(
        self,
        record_id: str,
        name: str,
        unit_price: PriceInput,
        quantity: int,
        expiry_date: date,
    ) -> StockRecord:
        """Insert a new record and persist.

        Checks run in a fixed order (duplicate ID, price, quantity,
        expiry) so callers can rely on which error wins when several
        inputs are bad at once.
        """
        if record_id in self._records:
            raise DuplicateIdError(record_id)

        record = StockRecord.create(
            record_id=record_id,
            name=name,
            unit_price=Money.of(unit_price),
            quantity=quantity,
            expiry_date=expiry_date,
            today=self._today(),
        )

        self._records[record_id] = record
        logger.info("Added item %s (%s)", record_id, name)
        self.save()
        return record

    def adjust_quantity(self, record_id: str, delta: int) -> StockRecord:
        record = self.get(record_id)
        record.adjust_quantity(delta)
        logger.info("Updated quantity for %s: %d", record_id, record.quantity)
        self.save()
        return record

    def set_price(self, record_id: str, new_price: PriceInput) -> StockRecord:
        # Price is validated before the lookup.
        price = Money.of(new_price)
        if not price.is_positive:
            raise InvalidPriceError(price.amount)

        record = self.get(record_id)
        record.update_price(price)
        logger.info("Updated price for %s: %s", record_id, price)
        self.save()
        return record

    def remove(self, record_id: str) -> StockRecord:
        record = self.get(record_id)
        del self._records[record_id]
        logger.info("Removed item %s (%s)", record_id, record.name)
        self.save()
        return record

    # --- Queries --------------------------------------------------------------

    def get(self, record_id: str) -> StockRecord:
        record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return record

    def list_all(self) -> list[StockRecord]:
        """All records by name (case-sensitive code-point order), then ID."""
        return sorted(self._records.values(), key=lambda r: (r.name, r.id))

    def find_expiring_within(self, days: int) -> list[StockRecord]:
        """Unexpired records whose expiry falls strictly before today + days.

        Soonest first.  A record expiring exactly on ``today + days`` is
        outside the window.
        """
        # Compared as day counts; today + days may fall outside the date range.
        today = self._today()
        matches = [
            r for r in self._records.values()
            if not r.is_expired(today) and r.days_until_expiry(today) < days
        ]
        return sorted(matches, key=lambda r: (r.expiry_date, r.id))

    def find_expired(self) -> list[StockRecord]:
        """Expired records, most overdue first."""
        today = self._today()
        matches = [r for r in self._records.values() if r.is_expired(today)]
        return sorted(matches, key=lambda r: (r.expiry_date, r.id))

    def total_inventory_value(self) -> Money:
        total = Money.zero()
        for record in self._records.values():
            total = total + record.total_value
        return total

    def search_by_name(self, keyword: str) -> list[StockRecord]:
        """Case-insensitive substring match on name.

        Results come back in store order (insertion order, or file order
        after a load); they are deliberately not sorted.
        """
        needle = keyword.casefold()
        return [r for r in self._records.values() if needle in r.name.casefold()]

    def today(self) -> date:
        return self._today()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    # --- Persistence ----------------------------------------------------------

    def save(self) -> None:
        """Write a full snapshot of the current records."""
        try:
            self._repository.save_all(list(self._records.values()))
        except PersistenceWriteFailedError:
            logger.error("Save failed; in-memory state now differs from disk")
            raise

    def _load(self) -> None:
        try:
            records = self._repository.load_all()
        except PersistenceLoadFailedError as exc:
            logger.warning("%s; starting with an empty inventory", exc)
            self.load_warning = str(exc)
            return
        self._records = {r.id: r for r in records}
        logger.info("Loaded %d items", len(self._records))
