"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from pim.domain.service.record_store import RecordStore
from pim.infrastructure.persistence.json_record_repository import (
    JsonRecordRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_DATA_FILE = _DATA_DIR / "inventory.json"


def record_repository(data_file: Path | None = None) -> JsonRecordRepository:
    return JsonRecordRepository(data_file or DEFAULT_DATA_FILE)


def record_store(data_file: Path | None = None) -> RecordStore:
    return RecordStore(record_repository(data_file))
