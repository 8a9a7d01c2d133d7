"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from tracker.infrastructure.export.csv_order_exporter import CsvOrderExporter
from tracker.infrastructure.persistence.sqlite_store import (
    SqliteOrderRepository,
    SqliteStore,
    init_store,
)

# Resolved against the current working directory at open time.
DB_PATH = Path("timhortons_tracker.db")


def open_store() -> SqliteStore:
    return init_store(DB_PATH)


def order_repository(store: SqliteStore) -> SqliteOrderRepository:
    return SqliteOrderRepository(store)


def order_exporter() -> CsvOrderExporter:
    return CsvOrderExporter()
