"""
test_rounding.py — Rounding strategies
"""

from decimal import Decimal

import pytest

from centum import RoundingMode
from centum.rounding import apply_rounding, round_to_increment, shift


class TestApplyRounding:

    @pytest.mark.parametrize("mode, value, expected", [
        (RoundingMode.HALF_UP, "2.5", "3"),
        (RoundingMode.HALF_UP, "-2.5", "-3"),
        (RoundingMode.HALF_UP, "2.4999", "2"),
        (RoundingMode.HALF_EVEN, "2.5", "2"),
        (RoundingMode.HALF_EVEN, "3.5", "4"),
        (RoundingMode.DOWN, "2.9", "2"),
        (RoundingMode.DOWN, "-2.9", "-2"),
        (RoundingMode.UP, "2.1", "3"),
        (RoundingMode.UP, "-2.1", "-3"),
        (RoundingMode.HALF_DOWN, "2.5", "2"),
        (RoundingMode.HALF_DOWN, "2.51", "3"),
    ])
    def test_modes_to_integer(self, mode, value, expected):
        assert apply_rounding(Decimal(value), mode) == Decimal(expected)

    def test_default_mode_is_half_up(self):
        assert apply_rounding(Decimal("0.5")) == 1

    def test_places(self):
        assert apply_rounding(Decimal("320.00000000000006"), places=4) == Decimal("320.0000")
        assert apply_rounding(Decimal("100.49999"), places=4) == Decimal("100.5000")

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            apply_rounding(Decimal("1"), "half_up")

    def test_beyond_default_context_precision(self):
        assert apply_rounding(Decimal("1" + "0" * 30 + ".5")) == Decimal(10**30 + 1)
        assert apply_rounding(Decimal(10**24), places=4) == Decimal(10**24)


class TestRoundToIncrement:

    @pytest.mark.parametrize("value, increment, expected", [
        ("1.23", "0.05", "1.25"),
        ("1.22", "0.05", "1.20"),
        ("1.225", "0.05", "1.25"),
        ("1.275", "0.05", "1.30"),
        ("-1.23", "0.05", "-1.25"),
        ("12.49", "0.5", "12.5"),
        ("1.23", "0.01", "1.23"),
    ])
    def test_cash_rounding(self, value, increment, expected):
        assert round_to_increment(Decimal(value), Decimal(increment)) == Decimal(expected)

    def test_mode_is_applied(self):
        assert round_to_increment(Decimal("1.25"), Decimal("0.5"), RoundingMode.HALF_EVEN) == Decimal("1.0")
        assert round_to_increment(Decimal("1.25"), Decimal("0.5"), RoundingMode.HALF_UP) == Decimal("1.5")

    def test_non_positive_increment(self):
        with pytest.raises(ValueError):
            round_to_increment(Decimal("1"), Decimal("0"))

    def test_large_value(self):
        value = Decimal("1" + "0" * 30 + ".03")
        assert round_to_increment(value, Decimal("0.05")) == Decimal("1" + "0" * 30 + ".05")


class TestShift:

    def test_moves_the_decimal_point(self):
        assert shift(Decimal("1.5"), 2) == Decimal(150)
        assert shift(Decimal(199), -2) == Decimal("1.99")
        assert shift(Decimal(0), 5) == 0

    def test_never_rounds(self):
        digits = "1234567890" * 4
        assert shift(Decimal(digits), -2) == Decimal(digits[:-2] + "." + digits[-2:])
