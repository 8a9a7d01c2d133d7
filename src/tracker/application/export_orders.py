"""Application service: Export Orders use case."""

from __future__ import annotations

import logging
from pathlib import Path

from tracker.application.dto import ExportResultDTO
from tracker.domain.export.order_exporter import OrderExporter
from tracker.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ExportOrdersHandler:

    def __init__(self, order_repo: OrderRepository, exporter: OrderExporter) -> None:
        self._order_repo = order_repo
        self._exporter = exporter

    def handle(self, filepath: str) -> ExportResultDTO:
        """Write every stored order to *filepath*, overwriting it."""
        orders = self._order_repo.list_all()
        count = self._exporter.export(orders, Path(filepath))
        logger.debug("Exported %d orders to %s", count, filepath)
        return ExportResultDTO(filepath=filepath, row_count=count)
