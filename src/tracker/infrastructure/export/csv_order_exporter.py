"""CSV implementation of OrderExporter."""

from __future__ import annotations

import csv
from dataclasses import asdict
from pathlib import Path
from typing import Iterable

from tracker.domain.exceptions import ExportError
from tracker.domain.export.order_exporter import OrderExporter
from tracker.domain.model.order import Order

FIELDNAMES = ("item_name", "quantity", "price", "date")


class CsvOrderExporter(OrderExporter):
    """Writes one header line, then one line per order.

    Numbers use the csv module's default rendering, so prices are not
    padded to two decimals the way the console output is.
    """

    def export(self, orders: Iterable[Order], filepath: Path) -> int:
        count = 0
        try:
            with filepath.open("w", encoding="utf-8", newline="") as fh:
                writer = csv.DictWriter(fh, fieldnames=FIELDNAMES, lineterminator="\n")
                writer.writeheader()
                for order in orders:
                    writer.writerow(asdict(order))
                    count += 1
        except (OSError, UnicodeEncodeError) as exc:
            # A partially written file is left in place.
            raise ExportError(f"Failed to write {filepath}: {exc}") from exc
        return count
