import logging
from pathlib import Path

import click

from pim.infrastructure.cli.context import AppContext
from pim.infrastructure.cli.query_commands import (
    record_expired,
    record_expiring,
    record_list,
    record_search,
    record_show,
    record_value,
)
from pim.infrastructure.cli.record_commands import (
    record_add,
    record_adjust,
    record_price,
    record_remove,
)
from pim.infrastructure.cli.shell import shell

_LOG_LEVELS = {0: logging.ERROR, 1: logging.INFO}


def _configure_logging(verbosity: int) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS.get(verbosity, logging.DEBUG),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="PIM_DATA_FILE",
    default=None,
    help="Inventory JSON file (default: data/inventory.json in the project root).",
)
@click.option("-v", "--verbose", count=True, help="-v for INFO logs, -vv for DEBUG.")
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, verbose: int) -> None:
    """PIM: Perishable Inventory Manager"""
    _configure_logging(verbose)
    ctx.obj = AppContext(data_file)


# Register subcommands
cli.add_command(record_add)
cli.add_command(record_adjust)
cli.add_command(record_price)
cli.add_command(record_remove)
cli.add_command(record_show)
cli.add_command(record_list)
cli.add_command(record_search)
cli.add_command(record_expiring)
cli.add_command(record_expired)
cli.add_command(record_value)
cli.add_command(shell)
