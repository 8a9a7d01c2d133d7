"""Application service: Add Order use case."""

from __future__ import annotations

import logging
from datetime import date

from tracker.application.dates import Clock, resolve_date
from tracker.domain.model.order import Order
from tracker.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class AddOrderHandler:

    def __init__(self, order_repo: OrderRepository, today: Clock = date.today) -> None:
        self._order_repo = order_repo
        self._today = today

    def handle(
        self,
        item: str,
        quantity: int,
        price: float,
        order_date: str | None = None,
    ) -> Order:
        """Record a purchase. A missing date means today."""
        order = Order(
            item_name=item,
            quantity=quantity,
            price=price,
            date=resolve_date(order_date, self._today),
        )
        self._order_repo.add(order)
        logger.debug("Added order %r", order)
        return order
