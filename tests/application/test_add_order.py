"""Tests for the AddOrder use case.

Uses in-memory fake repositories — no file I/O.
"""

from datetime import date

from tracker.application.add_order import AddOrderHandler
from tracker.domain.model.order import Order
from tests.fakes import FakeOrderRepository


def _fixed_today() -> date:
    return date(2024, 7, 9)


def _setup() -> tuple[AddOrderHandler, FakeOrderRepository]:
    repo = FakeOrderRepository()
    return AddOrderHandler(repo, today=_fixed_today), repo


class TestAddOrder:

    def test_persists_order_with_given_fields(self):
        handler, repo = _setup()
        handler.handle("Coffee", 1, 2.10, "2024-03-01")
        assert repo.list_all() == [Order("Coffee", 1, 2.10, "2024-03-01")]

    def test_returns_the_saved_order(self):
        handler, _ = _setup()
        order = handler.handle("Donut", 3, 1.25, "2024-01-05")
        assert order.item_name == "Donut"
        assert order.date == "2024-01-05"

    def test_missing_date_defaults_to_today(self):
        handler, repo = _setup()
        order = handler.handle("Timbits", 10, 0.25)
        assert order.date == "2024-07-09"
        assert repo.list_all()[0].date == "2024-07-09"

    def test_date_is_not_normalized(self):
        handler, _ = _setup()
        assert handler.handle("Tea", 1, 1.5, "2024-3-1").date == "2024-3-1"

    def test_each_call_adds_one_record(self):
        handler, repo = _setup()
        handler.handle("Coffee", 1, 2.10, "2024-03-01")
        handler.handle("Coffee", 1, 2.10, "2024-03-01")
        assert len(repo.list_all()) == 2
