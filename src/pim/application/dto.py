"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry already-formatted values from the application layer to the
CLI so rendering code never touches domain objects or the clock.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RecordDTO:
    """A single item as displayed to the user."""

    id: str
    name: str
    unit_price: str  # formatted, e.g. "$2.50"
    quantity: int
    expiry_date: str  # YYYY-MM-DD
    status: str  # "EXPIRED" or "<n> days left"


@dataclass(frozen=True)
class ListingDTO:
    """A full listing with its footer totals."""

    items: list[RecordDTO]
    item_count: int
    total_value: str
