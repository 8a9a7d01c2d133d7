"""Application service: Daily Total use case (query)."""

from __future__ import annotations

from datetime import date

from tracker.application.dates import Clock, resolve_date
from tracker.application.dto import DailyTotalDTO
from tracker.domain.repository.order_repository import OrderRepository


class DailyTotalHandler:

    def __init__(self, order_repo: OrderRepository, today: Clock = date.today) -> None:
        self._order_repo = order_repo
        self._today = today

    def handle(self, query_date: str | None = None) -> DailyTotalDTO:
        """Sum what was spent on *query_date* (today if omitted).

        The date is matched as a plain string, so ``2024-3-1`` does not
        find orders stored as ``2024-03-01``.
        """
        resolved = resolve_date(query_date, self._today)
        return DailyTotalDTO(date=resolved, total=self._order_repo.daily_total(resolved))
