"""Order entity — one recorded purchase.

Orders are written once and never changed, so the dataclass is frozen.
The store-assigned row id is an infrastructure detail and is not part
of the entity.
"""

from __future__ import annotations

from dataclasses import dataclass

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class Order:
    """A single purchase: what, how many, at what unit price, on which day.

    ``date`` is kept verbatim. It is expected to look like ``YYYY-MM-DD``
    but nothing checks that, and daily totals match it by exact string
    equality.
    """

    item_name: str
    quantity: int
    price: float
    date: str

    @property
    def total_cost(self) -> float:
        return self.quantity * self.price
