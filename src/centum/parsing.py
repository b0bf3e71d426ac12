"""
parsing.py — Normalisation of heterogeneous input into scaled integers

================================================================================
ALGORITHM
================================================================================

    classify(value)              -> Numeric | Text | ScaledInput | Unsupported
    working number (Decimal)     <- one handler per variant
    * scale, round to 4 places   (skipped when from_cents)
    round to integer             (skipped when use_rounding=False)

The input type is resolved ONCE at the boundary by classify(); parse()
then dispatches on the variant with a closed handler table.

Text input follows the accounting conventions of printed amounts:

    "(1.99)"     -> -1.99      parentheses mean negative
    "$1,234.50"  -> 1234.50    everything but digits, "-" and the decimal
                               character is dropped
    "1.234,50"   -> 1234.50    with decimal=","
    ""           -> 0

================================================================================
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal, localcontext
from numbers import Integral, Number, Rational, Real
from typing import Protocol, Union, runtime_checkable

from .errors import InvalidInput
from .log import get_logger
from .rounding import NOISE_PLACES, RoundingMode, apply_rounding, shift
from .settings import Settings

__all__ = [
    "ScaledValue",
    "Numeric",
    "Text",
    "ScaledInput",
    "Unsupported",
    "ParseInput",
    "classify",
    "normalize_text",
    "parse",
]

logger = get_logger(__name__)

_PARENTHESES = re.compile(r"\((.*)\)")
_LEADING_NUMBER = re.compile(r"-?[0-9]*(?:\.[0-9]*)?")


@runtime_checkable
class ScaledValue(Protocol):
    """Anything exposing a scaled integer and its settings (a currency value)."""
    scaled_amount: int
    settings: Settings


# ==============================================================================
# INPUT VARIANTS
# ==============================================================================

@dataclass(frozen=True, slots=True)
class Numeric:
    value: Decimal


@dataclass(frozen=True, slots=True)
class Text:
    value: str


@dataclass(frozen=True, slots=True)
class ScaledInput:
    value: ScaledValue


@dataclass(frozen=True, slots=True)
class Unsupported:
    value: object


ParseInput = Union[Numeric, Text, ScaledInput, Unsupported]


def classify(value: object) -> ParseInput:
    """
    Resolve the input type of *value*.

    Numbers are matched on the ``numbers`` ABCs, so integer and rational
    types from other libraries (numpy scalars, Fraction) parse like the
    builtins. bool, None, complex and non-finite floats are Unsupported.
    """
    if isinstance(value, ScaledValue):
        return ScaledInput(value)
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, bool) or not isinstance(value, Number):
        return Unsupported(value)

    if isinstance(value, Decimal):
        return Numeric(value) if value.is_finite() else Unsupported(value)
    if isinstance(value, Integral):
        return Numeric(Decimal(int(value)))
    if isinstance(value, Rational):
        return Numeric(_ratio(int(value.numerator), int(value.denominator)))
    if isinstance(value, Real):
        number = float(value)
        return Numeric(Decimal(repr(number))) if math.isfinite(number) else Unsupported(value)

    return Unsupported(value)


def _ratio(numerator: int, denominator: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec += max(0, len(str(abs(numerator))) - len(str(denominator)))
        return Decimal(numerator) / Decimal(denominator)


def normalize_text(text: str, decimal: str = ".") -> Decimal:
    """
    Turn a printed amount into a Decimal.

    Only the leading numeric run of the cleaned text is read, so stray
    minus signs or repeated decimal characters past it are ignored.
    """
    cleaned = _PARENTHESES.sub(r"-\1", text)
    cleaned = re.sub(rf"[^\-0-9{re.escape(decimal)}]", "", cleaned)
    cleaned = cleaned.replace(decimal, ".")

    number = _LEADING_NUMBER.match(cleaned).group(0)
    if not any(c.isdigit() for c in number):
        return Decimal(0)

    return Decimal(number.rstrip("."))


# ==============================================================================
# PARSER
# ==============================================================================

def _from_numeric(item: Numeric, settings: Settings) -> Decimal:
    return item.value


def _from_text(item: Text, settings: Settings) -> Decimal:
    return normalize_text(item.value, settings.decimal)


def _from_scaled(item: ScaledInput, settings: Settings) -> Decimal:
    other = item.value
    return shift(Decimal(other.scaled_amount), -other.settings.precision)


def _from_unsupported(item: Unsupported, settings: Settings) -> Decimal:
    if settings.error_on_invalid:
        logger.warning("unsupported_input_rejected", input_type=type(item.value).__name__)
        raise InvalidInput(item.value)

    logger.debug("unsupported_input_zeroed", input_type=type(item.value).__name__)
    return Decimal(0)


_HANDLERS = {
    Numeric: _from_numeric,
    Text: _from_text,
    ScaledInput: _from_scaled,
    Unsupported: _from_unsupported,
}


def parse(value: object, settings: Settings, use_rounding: bool = True) -> int | Decimal:
    """
    Convert *value* to the scaled representation of *settings*.

    Args:
        value: number, text, or another currency value
        settings: resolved settings of the receiving value
        use_rounding: round to an integer (False keeps the fractional part,
            used when extracting multiplication/division factors)

    Returns:
        int when use_rounding, otherwise the unrounded Decimal

    Raises:
        InvalidInput: unsupported input with ``error_on_invalid`` set
    """
    item = classify(value)

    # A value declared as already scaled is taken verbatim
    if isinstance(item, ScaledInput) and settings.from_cents:
        return item.value.scaled_amount

    number = _HANDLERS[type(item)](item, settings)

    if not settings.from_cents:
        number = apply_rounding(shift(number, settings.precision), RoundingMode.HALF_UP, NOISE_PLACES)

    if use_rounding:
        return int(apply_rounding(number, settings.rounding))
    return number
