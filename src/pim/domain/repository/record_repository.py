"""Abstract persistence target for the record store.

Defined in the domain layer so the domain never depends on
infrastructure.  The store always reads and writes the *whole* record
set: one load at startup, one full snapshot after every mutation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pim.domain.model.record import StockRecord


class RecordRepository(ABC):

    @abstractmethod
    def load_all(self) -> list[StockRecord]:
        """Return every persisted record, or an empty list if none exist.

        Raises PersistenceLoadFailedError if persisted state exists but
        cannot be read or is structurally invalid.
        """

    @abstractmethod
    def save_all(self, records: list[StockRecord]) -> None:
        """Replace the persisted state with *records*.

        Raises PersistenceWriteFailedError if the write fails.  A reader
        must never observe a partially written snapshot.
        """
