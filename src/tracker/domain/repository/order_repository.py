"""Abstract repository for Order records.

Defined in the domain layer so the domain never depends on
infrastructure. There is deliberately no update or delete: an order,
once added, stays as it was written.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tracker.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order."""

    @abstractmethod
    def daily_total(self, date: str) -> float:
        """Return the sum of quantity * price for orders on *date*, or 0.0."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every stored order in store order."""
