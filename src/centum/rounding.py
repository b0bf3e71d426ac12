"""
rounding.py — Rounding policy for scaled currency values

================================================================================
WHERE ROUNDING HAPPENS
================================================================================

1. PARSING (intermediate)
   After scaling by 10^precision the working number is rounded to 4 decimal
   places, always HALF_UP. This absorbs the representation noise of binary
   floats (3.2 * 100 -> 320.00000000000006) before the final rounding.

2. PARSING (final)
   The scaled number is rounded to an integer with the configured mode.

3. STRING CONVERSION
   The amount is re-quantized to the configured increment
   (round(value / increment) * increment) with the configured mode.

Every rounding goes through apply_rounding(), on Decimal values only.

Amounts are unbounded. Each quantize runs in a local decimal context wide
enough for the operand, so large amounts or high precisions never hit
the 28-digit default of the decimal module. Scaling by a power of ten is
done with shift(), which moves the exponent and never rounds.

================================================================================
"""

from __future__ import annotations

from decimal import (
    Decimal,
    ROUND_DOWN,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    localcontext,
)
from enum import Enum

__all__ = [
    "RoundingMode",
    "apply_rounding",
    "round_to_increment",
    "shift",
    "NOISE_PLACES",
]

#: Decimal places kept by the intermediate rounding step of the parser.
NOISE_PLACES = 4


class RoundingMode(Enum):
    """
    Rounding strategies.

    - HALF_UP: commercial rounding, ties away from zero (0.5 -> 1, -0.5 -> -1)
    - HALF_EVEN: banker's rounding, minimises statistical bias
    - DOWN: always toward zero (truncation)
    - UP: always away from zero
    - HALF_DOWN: ties toward zero (0.5 -> 0)
    """
    HALF_UP = "half_up"
    HALF_EVEN = "half_even"
    DOWN = "down"
    UP = "up"
    HALF_DOWN = "half_down"


_STRATEGIES = {
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
    RoundingMode.DOWN: ROUND_DOWN,
    RoundingMode.UP: ROUND_UP,
    RoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
}


def shift(value: Decimal, places: int) -> Decimal:
    """Exact ``value * 10**places`` for a finite Decimal."""
    sign, digits, exponent = value.as_tuple()
    return Decimal((sign, digits, exponent + places))


def apply_rounding(value: Decimal, mode: RoundingMode = RoundingMode.HALF_UP, places: int = 0) -> Decimal:
    """Round *value* to *places* decimal places using *mode*."""
    strategy = _STRATEGIES.get(mode)
    if strategy is None:
        raise ValueError(f"Unknown rounding mode: {mode}")

    with localcontext() as ctx:
        # integer digits + kept places + one guard digit
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=strategy)


def round_to_increment(value: Decimal, increment: Decimal, mode: RoundingMode = RoundingMode.HALF_UP) -> Decimal:
    """
    Re-quantize *value* to a multiple of *increment*.

    Example: 1.23 with increment 0.05 -> 1.25 (cash rounding).
    """
    if increment <= 0:
        raise ValueError(f"increment must be > 0, got: {increment}")

    with localcontext() as ctx:
        # whole steps stay exact, with the default precision left for the fraction
        ctx.prec += max(0, value.adjusted() - increment.adjusted()) + len(increment.as_tuple().digits)
        steps = apply_rounding(value / increment, mode)
        return steps * increment
