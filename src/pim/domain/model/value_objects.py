"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from pim.domain.exceptions import InvalidPriceError

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Monetary amount.

    Uses Decimal so prices round-trip through persistence exactly and
    valuations do not pick up floating-point noise.  Sign rules are not
    enforced here: a price must be positive, a valuation may be zero, and
    the entity that holds the amount decides which applies.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        # Half-up, the way prices are usually printed.
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, self.amount.adjusted() + 3)
            cents = self.amount.quantize(_CENT, rounding=ROUND_HALF_UP)
        return f"${cents}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce user or file input to Money.

        Floats go through ``str()`` first so ``2.5`` becomes ``Decimal("2.5")``
        rather than its binary expansion.  Anything that is not a finite
        number is reported as an invalid price.
        """
        if isinstance(amount, bool):
            raise InvalidPriceError(amount)
        try:
            value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise InvalidPriceError(amount) from exc
        if not value.is_finite():
            raise InvalidPriceError(amount)
        return Money(value)
