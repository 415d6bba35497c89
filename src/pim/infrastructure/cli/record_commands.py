"""CLI commands that change the inventory."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import click

from pim.application.show_records import ShowRecordHandler
from pim.domain.exceptions import DomainException
from pim.infrastructure.cli.context import AppContext
from pim.infrastructure.cli.formatting import DECIMAL, EXPIRY_DATE, format_line


@click.command("add")
@click.option("--id", "record_id", required=True, help="Item ID.")
@click.option("--name", required=True, help="Item name.")
@click.option("--price", required=True, type=DECIMAL, help="Unit price (e.g. 2.50).")
@click.option("--quantity", required=True, type=int, help="Quantity on hand.")
@click.option("--expiry", required=True, type=EXPIRY_DATE, help="Expiry date (YYYY-MM-DD).")
@click.pass_obj
def record_add(
    app: AppContext,
    record_id: str,
    name: str,
    price: Decimal,
    quantity: int,
    expiry: datetime,
) -> None:
    """Add a new item to the inventory."""
    try:
        record = app.store.add(record_id, name, price, quantity, expiry.date())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item added: {record.name}")


@click.command("adjust")
@click.option("--id", "record_id", required=True, help="Item ID.")
@click.option(
    "--delta",
    required=True,
    type=int,
    help="Quantity change: positive to restock, negative to consume.",
)
@click.pass_obj
def record_adjust(app: AppContext, record_id: str, delta: int) -> None:
    """Restock or consume an item."""
    try:
        record = app.store.adjust_quantity(record_id, delta)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Updated quantity for {record.name}: {record.quantity}")


@click.command("price")
@click.option("--id", "record_id", required=True, help="Item ID.")
@click.option("--price", required=True, type=DECIMAL, help="New unit price (e.g. 2.99).")
@click.pass_obj
def record_price(app: AppContext, record_id: str, price: Decimal) -> None:
    """Change an item's unit price."""
    try:
        record = app.store.set_price(record_id, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Updated price for {record.name}: {record.unit_price}")


@click.command("remove")
@click.option("--id", "record_id", required=True, help="Item ID.")
@click.option("--yes", "-y", is_flag=True, default=False, help="Skip confirmation.")
@click.pass_obj
def record_remove(app: AppContext, record_id: str, yes: bool) -> None:
    """Remove an item from the inventory."""
    try:
        dto = ShowRecordHandler(app.store).handle(record_id)
        if not yes:
            click.echo(f"Item to remove: {format_line(dto)}")
            if not click.confirm("Are you sure you want to remove this item?"):
                click.echo("Item removal cancelled.")
                return
        record = app.store.remove(record_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed item: {record.name}")
