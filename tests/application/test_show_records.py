"""Tests for the read-only query use cases."""

from datetime import date, timedelta

import pytest

from pim.application.show_records import (
    ExpiredRecordsHandler,
    ExpiringRecordsHandler,
    ListRecordsHandler,
    SearchRecordsHandler,
    ShowRecordHandler,
    to_dto,
)
from pim.domain.exceptions import RecordNotFoundError
from pim.domain.model.record import StockRecord
from pim.domain.model.value_objects import Money
from pim.domain.service.record_store import RecordStore
from tests.fakes import FakeRecordRepository

TODAY = date(2026, 10, 18)


def _store() -> RecordStore:
    records = [
        StockRecord("P1", "Whole Milk", Money.of("2.5"), 10, TODAY + timedelta(days=5)),
        StockRecord("P2", "Bread", Money.of("1.99"), 3, TODAY + timedelta(days=1)),
        StockRecord("P3", "Yogurt", Money.of("0.80"), 6, TODAY - timedelta(days=2)),
    ]
    return RecordStore(FakeRecordRepository(records), today=lambda: TODAY)


class TestToDto:

    def test_fresh_item(self):
        record = StockRecord("P1", "Milk", Money.of("2.5"), 10, TODAY + timedelta(days=5))
        dto = to_dto(record, TODAY)
        assert dto.unit_price == "$2.50"
        assert dto.expiry_date == "2026-10-23"
        assert dto.status == "5 days left"

    def test_expiring_today(self):
        record = StockRecord("P1", "Milk", Money.of("1"), 1, TODAY)
        assert to_dto(record, TODAY).status == "0 days left"

    def test_expired_item(self):
        record = StockRecord("P1", "Milk", Money.of("1"), 1, TODAY - timedelta(days=1))
        assert to_dto(record, TODAY).status == "EXPIRED"


class TestHandlers:

    def test_show(self):
        dto = ShowRecordHandler(_store()).handle("P2")
        assert dto.name == "Bread"
        assert dto.status == "1 days left"

    def test_show_unknown(self):
        with pytest.raises(RecordNotFoundError):
            ShowRecordHandler(_store()).handle("P9")

    def test_list_has_totals(self):
        listing = ListRecordsHandler(_store()).handle()
        assert [i.name for i in listing.items] == ["Bread", "Whole Milk", "Yogurt"]
        assert listing.item_count == 3
        # 25.00 + 5.97 + 4.80
        assert listing.total_value == "$35.77"

    def test_list_empty(self):
        store = RecordStore(FakeRecordRepository(), today=lambda: TODAY)
        listing = ListRecordsHandler(store).handle()
        assert listing.items == []
        assert listing.total_value == "$0.00"

    def test_search(self):
        results = SearchRecordsHandler(_store()).handle("milk")
        assert [r.id for r in results] == ["P1"]

    def test_expiring(self):
        results = ExpiringRecordsHandler(_store()).handle(7)
        assert [r.id for r in results] == ["P2", "P1"]

    def test_expired(self):
        results = ExpiredRecordsHandler(_store()).handle()
        assert [r.id for r in results] == ["P3"]
        assert results[0].status == "EXPIRED"
