"""Per-invocation CLI state shared by every command via ``click.pass_obj``."""

from __future__ import annotations

from pathlib import Path

import click

from pim.domain.service.record_store import RecordStore
from pim.infrastructure.bootstrap import record_store


class AppContext:
    """Builds the record store on first use.

    Loading is deferred so ``--help`` never touches the data file.  A
    failed load is surfaced once, on stderr, as soon as the store exists.
    """

    def __init__(self, data_file: Path | None) -> None:
        self.data_file = data_file
        self._store: RecordStore | None = None

    @property
    def store(self) -> RecordStore:
        if self._store is None:
            self._store = record_store(self.data_file)
            if self._store.load_warning:
                click.echo(f"Warning: {self._store.load_warning}", err=True)
        return self._store
