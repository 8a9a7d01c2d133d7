"""CLI commands for orders."""

from __future__ import annotations

import click

from tracker.application.add_order import AddOrderHandler
from tracker.application.daily_total import DailyTotalHandler
from tracker.application.export_orders import ExportOrdersHandler
from tracker.infrastructure.bootstrap import (
    open_store,
    order_exporter,
    order_repository,
)

# Quantities are stored as unsigned 32-bit counts.
MAX_QUANTITY = 2**32 - 1


@click.command("add")
@click.argument("item")
@click.argument("quantity", type=click.IntRange(min=0, max=MAX_QUANTITY))
@click.argument("price", type=float)
@click.argument("order_date", metavar="[DATE]", required=False)
def order_add(item: str, quantity: int, price: float, order_date: str | None) -> None:
    """Add a new order. DATE defaults to today (YYYY-MM-DD)."""
    with open_store() as store:
        handler = AddOrderHandler(order_repo=order_repository(store))
        order = handler.handle(item, quantity, price, order_date)

    click.echo(
        f"Order added: {order.item_name} x{order.quantity} @ ${order.price:.2f} on {order.date}"
    )


@click.command("daily-total")
@click.argument("query_date", metavar="[DATE]", required=False)
def daily_total(query_date: str | None) -> None:
    """View total expenses for a specific day (default: today)."""
    with open_store() as store:
        handler = DailyTotalHandler(order_repo=order_repository(store))
        dto = handler.handle(query_date)

    click.echo(f"Total for {dto.date}: ${dto.total:.2f}")


@click.command("export")
@click.argument("filepath")
def order_export(filepath: str) -> None:
    """Export all orders to a CSV file."""
    with open_store() as store:
        handler = ExportOrdersHandler(
            order_repo=order_repository(store),
            exporter=order_exporter(),
        )
        result = handler.handle(filepath)

    click.echo(f"Orders exported to {result.filepath}")
