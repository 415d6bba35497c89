"""Interactive menu shell over the record store.

The shell only parses input into typed values (``click.prompt`` re-asks
until the syntax is right) and renders results.  Whether a value is
acceptable, e.g. a positive price, is decided by the store alone.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

import click

from pim.application.show_records import (
    ExpiredRecordsHandler,
    ExpiringRecordsHandler,
    ListRecordsHandler,
    SearchRecordsHandler,
    ShowRecordHandler,
)
from pim.domain.exceptions import DomainException
from pim.domain.service.record_store import RecordStore
from pim.infrastructure.cli.context import AppContext
from pim.infrastructure.cli.formatting import (
    DECIMAL,
    EXPIRY_DATE,
    echo_listing,
    echo_table,
    format_line,
)

MENU = """
==== INVENTORY MANAGEMENT SYSTEM ====
1. Add new item
2. Update item quantity
3. Update item price
4. Remove item
5. View all items
6. Search items by name
7. View items expiring soon
8. View expired items
0. Exit"""


class ShellSession:
    """One interactive session: owns the prompt loop, holds no item data."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_item,
            2: self.update_quantity,
            3: self.update_price,
            4: self.remove_item,
            5: self.view_all,
            6: self.search,
            7: self.view_expiring,
            8: self.view_expired,
        }

    def run(self) -> None:
        while True:
            click.echo(MENU)
            choice = click.prompt("Enter your choice", type=int)
            if choice == 0:
                click.echo("Thank you for using the Inventory Management System!")
                return

            action = self._actions.get(choice)
            if action is None:
                click.echo("Invalid choice. Please try again.")
                continue
            try:
                action()
            except DomainException as exc:
                click.echo(f"Error: {exc}")

            click.pause("\nPress Enter to continue...")

    # --- Mutating workflows ---------------------------------------------------

    def add_item(self) -> None:
        click.echo("\n-- Add New Item --")
        record_id = click.prompt("Enter item ID").strip()
        name = click.prompt("Enter item name").strip()
        price: Decimal = click.prompt("Enter price", type=DECIMAL)
        quantity: int = click.prompt("Enter quantity", type=int)
        expiry = click.prompt("Enter expiry date (YYYY-MM-DD)", type=EXPIRY_DATE)

        record = self._store.add(record_id, name, price, quantity, expiry.date())
        click.echo(f"Item added: {record.name}")

    def update_quantity(self) -> None:
        click.echo("\n-- Update Item Quantity --")
        record_id = self._prompt_existing("Enter item ID")

        click.echo("Enter quantity change:")
        click.echo("(positive number to add, negative number to remove)")
        delta: int = click.prompt("Quantity change", type=int)

        record = self._store.adjust_quantity(record_id, delta)
        click.echo(f"Updated quantity for {record.name}: {record.quantity}")

    def update_price(self) -> None:
        click.echo("\n-- Update Item Price --")
        record_id = self._prompt_existing("Enter item ID")
        price: Decimal = click.prompt("Enter new price", type=DECIMAL)

        record = self._store.set_price(record_id, price)
        click.echo(f"Updated price for {record.name}: {record.unit_price}")

    def remove_item(self) -> None:
        click.echo("\n-- Remove Item --")
        record_id = self._prompt_existing("Enter item ID to remove", label="Item to remove")

        if click.confirm("Are you sure you want to remove this item?"):
            record = self._store.remove(record_id)
            click.echo(f"Removed item: {record.name}")
        else:
            click.echo("Item removal cancelled.")

    # --- Read-only workflows --------------------------------------------------

    def view_all(self) -> None:
        echo_listing(ListRecordsHandler(self._store).handle())

    def search(self) -> None:
        click.echo("\n-- Search Items --")
        keyword = click.prompt("Enter search keyword").strip()
        results = SearchRecordsHandler(self._store).handle(keyword)
        if not results:
            click.echo(f"No items found matching: {keyword}")
        else:
            echo_table(results, title=f"SEARCH RESULTS FOR: {keyword}")

    def view_expiring(self) -> None:
        click.echo("\n-- Items Expiring Soon --")
        days: int = click.prompt("Enter number of days to check", type=int)
        results = ExpiringRecordsHandler(self._store).handle(days)
        if not results:
            click.echo(f"No items expiring within the next {days} days.")
        else:
            echo_table(results, title=f"ITEMS EXPIRING WITHIN {days} DAYS")

    def view_expired(self) -> None:
        click.echo("\n-- Expired Items --")
        results = ExpiredRecordsHandler(self._store).handle()
        if not results:
            click.echo("No expired items found.")
        else:
            echo_table(results, title="EXPIRED ITEMS")

    # --- Internal helpers -----------------------------------------------------

    def _prompt_existing(self, text: str, label: str = "Current item") -> str:
        """Ask for an ID and show the item, failing early if it is unknown."""
        record_id = click.prompt(text).strip()
        dto = ShowRecordHandler(self._store).handle(record_id)
        click.echo(f"{label}: {format_line(dto)}")
        return record_id


@click.command("shell")
@click.pass_obj
def shell(app: AppContext) -> None:
    """Run the interactive menu."""
    ShellSession(app.store).run()
