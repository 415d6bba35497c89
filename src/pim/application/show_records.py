"""Application services: read-only views over the record store (queries).

None of these handlers mutate the store or trigger a save.
"""

from __future__ import annotations

from datetime import date

from pim.application.dto import ListingDTO, RecordDTO
from pim.domain.model.record import StockRecord
from pim.domain.service.record_store import RecordStore


def to_dto(record: StockRecord, today: date) -> RecordDTO:
    if record.is_expired(today):
        status = "EXPIRED"
    else:
        status = f"{record.days_until_expiry(today)} days left"
    return RecordDTO(
        id=record.id,
        name=record.name,
        unit_price=str(record.unit_price),
        quantity=record.quantity,
        expiry_date=record.expiry_date.isoformat(),
        status=status,
    )


class ShowRecordHandler:

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def handle(self, record_id: str) -> RecordDTO:
        return to_dto(self._store.get(record_id), self._store.today())


class ListRecordsHandler:

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def handle(self) -> ListingDTO:
        today = self._store.today()
        items = [to_dto(r, today) for r in self._store.list_all()]
        return ListingDTO(
            items=items,
            item_count=len(items),
            total_value=str(self._store.total_inventory_value()),
        )


class SearchRecordsHandler:

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def handle(self, keyword: str) -> list[RecordDTO]:
        today = self._store.today()
        return [to_dto(r, today) for r in self._store.search_by_name(keyword)]


class ExpiringRecordsHandler:

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def handle(self, days: int) -> list[RecordDTO]:
        today = self._store.today()
        return [to_dto(r, today) for r in self._store.find_expiring_within(days)]


class ExpiredRecordsHandler:

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def handle(self) -> list[RecordDTO]:
        today = self._store.today()
        return [to_dto(r, today) for r in self._store.find_expired()]
