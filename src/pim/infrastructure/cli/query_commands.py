"""CLI commands that only read the inventory."""

from __future__ import annotations

import click

from pim.application.show_records import (
    ExpiredRecordsHandler,
    ExpiringRecordsHandler,
    ListRecordsHandler,
    SearchRecordsHandler,
    ShowRecordHandler,
)
from pim.domain.exceptions import DomainException
from pim.infrastructure.cli.context import AppContext
from pim.infrastructure.cli.formatting import echo_listing, echo_table, format_line


@click.command("show")
@click.option("--id", "record_id", required=True, help="Item ID to display.")
@click.pass_obj
def record_show(app: AppContext, record_id: str) -> None:
    """Show a single item."""
    try:
        dto = ShowRecordHandler(app.store).handle(record_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(format_line(dto))


@click.command("list")
@click.pass_obj
def record_list(app: AppContext) -> None:
    """List every item, sorted by name, with totals."""
    echo_listing(ListRecordsHandler(app.store).handle())


@click.command("search")
@click.argument("keyword")
@click.pass_obj
def record_search(app: AppContext, keyword: str) -> None:
    """Find items whose name contains KEYWORD (case-insensitive)."""
    results = SearchRecordsHandler(app.store).handle(keyword)

    if not results:
        click.echo(f"No items found matching: {keyword}")
        return
    echo_table(results, title=f"SEARCH RESULTS FOR: {keyword}")


@click.command("expiring")
@click.option("--days", required=True, type=int, help="Size of the window in days.")
@click.pass_obj
def record_expiring(app: AppContext, days: int) -> None:
    """List unexpired items that expire within DAYS, soonest first."""
    results = ExpiringRecordsHandler(app.store).handle(days)

    if not results:
        click.echo(f"No items expiring within the next {days} days.")
        return
    echo_table(results, title=f"ITEMS EXPIRING WITHIN {days} DAYS")


@click.command("expired")
@click.pass_obj
def record_expired(app: AppContext) -> None:
    """List expired items, most overdue first."""
    results = ExpiredRecordsHandler(app.store).handle()

    if not results:
        click.echo("No expired items found.")
        return
    echo_table(results, title="EXPIRED ITEMS")


@click.command("value")
@click.pass_obj
def record_value(app: AppContext) -> None:
    """Show the total value of the inventory."""
    click.echo(f"Total Value: {app.store.total_inventory_value()}")
