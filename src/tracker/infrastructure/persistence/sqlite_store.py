"""SQLite-backed order store and its OrderRepository implementation."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from tracker.domain.exceptions import DataShapeError, StoreError
from tracker.domain.model.order import Order
from tracker.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

_SCHEMA = """
    CREATE TABLE IF NOT EXISTS orders (
        id INTEGER PRIMARY KEY,
        item_name TEXT NOT NULL,
        quantity INTEGER NOT NULL,
        price REAL NOT NULL,
        date TEXT NOT NULL
    )
"""


class SqliteStore:
    """Owns the single connection used for one CLI invocation."""

    def __init__(self, connection: sqlite3.Connection, path: Path) -> None:
        self.connection = connection
        self.path = path

    def close(self) -> None:
        self.connection.close()

    def __enter__(self) -> SqliteStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def init_store(path: Path) -> SqliteStore:
    """Open (creating if absent) the store at *path* and ensure the table.

    Safe to call on every start; existing rows are left alone.
    """
    try:
        conn = sqlite3.connect(path)
    except sqlite3.Error as exc:
        raise StoreError(f"Failed to connect to database {path}: {exc}") from exc

    try:
        with conn:
            conn.execute(_SCHEMA)
    except sqlite3.Error as exc:
        conn.close()
        raise StoreError(f"Failed to create orders table in {path}: {exc}") from exc

    logger.debug("Opened order store at %s", path)
    return SqliteStore(conn, path)


class SqliteOrderRepository(OrderRepository):

    def __init__(self, store: SqliteStore) -> None:
        self._conn = store.connection

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT INTO orders (item_name, quantity, price, date) VALUES (?, ?, ?, ?)",
                    (order.item_name, order.quantity, order.price, order.date),
                )
        except (sqlite3.Error, OverflowError, UnicodeEncodeError) as exc:
            raise StoreError(f"Failed to add order: {exc}") from exc

    def daily_total(self, date: str) -> float:
        try:
            row = self._conn.execute(
                "SELECT SUM(quantity * price) FROM orders WHERE date = ?",
                (date,),
            ).fetchone()
        except (sqlite3.Error, UnicodeEncodeError) as exc:
            raise StoreError(f"Failed to compute total for {date}: {exc}") from exc
        # SUM over no rows is NULL
        return float(row[0]) if row[0] is not None else 0.0

    def list_all(self) -> list[Order]:
        try:
            rows = self._conn.execute(
                "SELECT item_name, quantity, price, date FROM orders"
            ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"Failed to query orders: {exc}") from exc
        return [self._to_domain(row) for row in rows]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: tuple) -> Order:
        item_name, quantity, price, date = row
        if (
            not isinstance(item_name, str)
            or not isinstance(quantity, int)
            or not isinstance(price, (int, float))
            or not isinstance(date, str)
        ):
            raise DataShapeError(f"Stored row {row!r} cannot be read as an order")
        return Order(item_name=item_name, quantity=quantity, price=float(price), date=date)
