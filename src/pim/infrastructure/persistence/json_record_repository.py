"""JSON-file-backed implementation of RecordRepository."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pim.domain.exceptions import (
    PersistenceLoadFailedError,
    PersistenceWriteFailedError,
)
from pim.domain.model.record import StockRecord
from pim.domain.model.value_objects import Money
from pim.domain.repository.record_repository import RecordRepository

logger = logging.getLogger(__name__)


class JsonRecordRepository(RecordRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- RecordRepository interface -------------------------------------------

    def load_all(self) -> list[StockRecord]:
        if not self._file_path.exists():
            logger.info(
                "No inventory file at %s; starting with an empty inventory",
                self._file_path,
            )
            return []

        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceLoadFailedError(self._file_path, str(exc)) from exc
        except json.JSONDecodeError as exc:
            raise PersistenceLoadFailedError(
                self._file_path, f"invalid JSON ({exc})"
            ) from exc
        except RecursionError as exc:
            raise PersistenceLoadFailedError(
                self._file_path, "invalid JSON (nested too deeply)"
            ) from exc

        if not isinstance(raw, list):
            raise PersistenceLoadFailedError(
                self._file_path, "expected a list of items"
            )

        records: list[StockRecord] = []
        seen: set[str] = set()
        for index, item in enumerate(raw):
            record = self._to_domain(item, index)
            if record.id in seen:
                raise PersistenceLoadFailedError(
                    self._file_path, f"duplicate item ID '{record.id}'"
                )
            seen.add(record.id)
            records.append(record)

        logger.debug("Loaded %d items from %s", len(records), self._file_path)
        return records

    def save_all(self, records: list[StockRecord]) -> None:
        payload = json.dumps([self._to_raw(r) for r in records], indent=2) + "\n"
        try:
            self._write_atomic(payload)
        except OSError as exc:
            raise PersistenceWriteFailedError(self._file_path, str(exc)) from exc
        logger.debug("Saved %d items to %s", len(records), self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: StockRecord) -> dict:
        return {
            "id": record.id,
            "name": record.name,
            "unit_price": str(record.unit_price.amount),
            "quantity": record.quantity,
            "expiry_date": record.expiry_date.isoformat(),
        }

    def _to_domain(self, raw: object, index: int) -> StockRecord:
        """Rebuild a record, rejecting anything that breaks an invariant.

        Expiry is not checked: items are allowed to expire while stored.
        """
        try:
            if not isinstance(raw, dict):
                raise TypeError("not an object")
            record_id = raw["id"]
            name = raw["name"]
            quantity = raw["quantity"]
            if not isinstance(record_id, str) or not isinstance(name, str):
                raise TypeError("id and name must be strings")
            if not isinstance(quantity, int) or isinstance(quantity, bool):
                raise TypeError("quantity must be an integer")
            if not isinstance(raw["unit_price"], str):
                raise TypeError("unit_price must be a decimal string")
            unit_price = Money(Decimal(raw["unit_price"]))
            expiry_date = date.fromisoformat(raw["expiry_date"])
        except KeyError as exc:
            raise PersistenceLoadFailedError(
                self._file_path, f"item {index}: missing field {exc}"
            ) from exc
        except (TypeError, ValueError, InvalidOperation) as exc:
            raise PersistenceLoadFailedError(
                self._file_path, f"item {index}: {exc}"
            ) from exc

        if not unit_price.amount.is_finite() or not unit_price.is_positive:
            raise PersistenceLoadFailedError(
                self._file_path, f"item {index}: price must be greater than zero"
            )
        if quantity < 0:
            raise PersistenceLoadFailedError(
                self._file_path, f"item {index}: quantity cannot be negative"
            )

        return StockRecord(
            id=record_id,
            name=name,
            unit_price=unit_price,
            quantity=quantity,
            expiry_date=expiry_date,
        )

    # --- File helpers ---------------------------------------------------------

    def _write_atomic(self, payload: str) -> None:
        """Write to a sibling temp file, then rename it over the target."""
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=str(self._file_path.parent),
            prefix=f".{self._file_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            try:
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            except OSError:
                tmp.close()
                tmp_path.unlink(missing_ok=True)
                raise
        try:
            tmp_path.replace(self._file_path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
