import logging

import click

from tracker.domain.exceptions import TrackerException
from tracker.infrastructure.cli.order_commands import (
    daily_total,
    order_add,
    order_export,
)

logger = logging.getLogger(__name__)


class TrackerGroup(click.Group):
    """Command group that turns tracker errors into a clean CLI failure.

    This is the single place where internal errors meet the process
    exit code: click prints ``Error: <message>`` and exits with 1.
    """

    def invoke(self, ctx: click.Context) -> object:
        try:
            return super().invoke(ctx)
        except TrackerException as exc:
            logger.debug("Command failed", exc_info=True)
            raise click.ClickException(str(exc)) from exc


@click.group(cls=TrackerGroup)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Tim Hortons Tracker — track your daily Tim Hortons expenses."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(order_add)
cli.add_command(daily_total)
cli.add_command(order_export)
