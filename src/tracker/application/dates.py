"""Default-date resolution shared by the add and daily-total use cases."""

from __future__ import annotations

from datetime import date
from typing import Callable

from tracker.domain.model.order import DATE_FORMAT

Clock = Callable[[], date]


def resolve_date(value: str | None, today: Clock = date.today) -> str:
    """Return *value* untouched, or today's local date when it is None."""
    if value is None:
        return today().strftime(DATE_FORMAT)
    return value
