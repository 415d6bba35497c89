"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pim.domain.exceptions import InvalidPriceError
from pim.domain.model.value_objects import Money


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(TypeError, match="must be a Decimal"):
            Money(10.5)  # type: ignore[arg-type]

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_from_float_uses_shortest_repr(self):
        assert Money.of(2.5).amount == Decimal("2.5")
        assert Money.of(0.1).amount == Decimal("0.1")

    def test_of_factory_keeps_decimal_as_is(self):
        value = Decimal("3.14159")
        assert Money.of(value).amount is value

    def test_of_allows_zero_and_negative(self):
        # Sign rules belong to the entity holding the amount.
        assert Money.of("0").amount == Decimal("0")
        assert Money.of("-1").amount == Decimal("-1")

    @pytest.mark.parametrize("bad", ["abc", "", "NaN", "Infinity", True])
    def test_of_rejects_non_numbers(self, bad):
        with pytest.raises(InvalidPriceError, match="greater than zero"):
            Money.of(bad)

    def test_is_positive(self):
        assert Money.of("0.01").is_positive
        assert not Money.of("0").is_positive
        assert not Money.of("-5").is_positive

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError, match="only multiply Money by int"):
            Money.of("7.50") * 1.5  # type: ignore[operator]

    def test_zero(self):
        assert Money.zero().amount == Decimal("0")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_str_rounds_half_up(self):
        assert str(Money.of("2.665")) == "$2.67"
        assert str(Money.of("2.675")) == "$2.68"
        assert str(Money.of("2.664")) == "$2.66"

    def test_str_of_very_large_amount(self):
        amount = "1" + "0" * 40
        assert str(Money.of(amount)) == f"${amount}.00"
