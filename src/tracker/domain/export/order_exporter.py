"""Abstract exporter for Order records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable

from tracker.domain.model.order import Order


class OrderExporter(ABC):

    @abstractmethod
    def export(self, orders: Iterable[Order], filepath: Path) -> int:
        """Write *orders* to *filepath*, replacing it. Return the row count."""
