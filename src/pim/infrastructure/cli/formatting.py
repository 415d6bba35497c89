"""Console rendering and input parameter types shared by the CLI."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from pim.application.dto import ListingDTO, RecordDTO

TABLE_HEADER = "ID    | Name                 | Price     | Qty   | Expiry     | Status"
TABLE_SEPARATOR = "-" * 78

DATE_FORMAT = "%Y-%m-%d"


class DecimalParamType(click.ParamType):
    """Parses a decimal number; sign and range are the store's business."""

    name = "decimal"

    def convert(self, value, param, ctx) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid number.", param, ctx)
        if not result.is_finite():
            self.fail(f"{value!r} is not a valid number.", param, ctx)
        return result


DECIMAL = DecimalParamType()
EXPIRY_DATE = click.DateTime(formats=[DATE_FORMAT])


def format_line(dto: RecordDTO) -> str:
    return (
        f"{dto.id:<5} | {dto.name:<20} | {dto.unit_price:<9} | "
        f"{dto.quantity:<5} | {dto.expiry_date:<10} | {dto.status}"
    )


def echo_table(items: list[RecordDTO], title: str | None = None) -> None:
    if title:
        click.echo(f"\n==== {title} ====")
    click.echo(TABLE_HEADER)
    click.echo(TABLE_SEPARATOR)
    for dto in items:
        click.echo(format_line(dto))


def echo_listing(listing: ListingDTO) -> None:
    if not listing.items:
        click.echo("Inventory is empty.")
        return
    echo_table(listing.items, title="CURRENT INVENTORY")
    click.echo(TABLE_SEPARATOR)
    click.echo(f"Total Items: {listing.item_count}")
    click.echo(f"Total Value: {listing.total_value}")
