"""
settings.py — Resolved configuration for currency values

A Settings instance is built once per value (merging caller options over
DEFAULT_SETTINGS) and threaded through every value derived from it. It is
immutable: changing a setting means resolving a new instance.

    >>> s = resolve_settings({"precision": 3, "useVedic": True})
    >>> s.scale
    1000
    >>> s.grouping
    <Grouping.VEDIC: (3, 2)>
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .log import get_logger
from .rounding import RoundingMode

__all__ = [
    "Grouping",
    "Settings",
    "DEFAULT_SETTINGS",
    "resolve_settings",
]

logger = get_logger(__name__)


# ==============================================================================
# DIGIT GROUPING
# ==============================================================================

class Grouping(Enum):
    """
    Digit grouping conventions for the integer part of a formatted amount.

    Value is (first group size, size of every following group), counted
    from the right:

    - STANDARD: 1,234,567
    - VEDIC (Indian numbering): 12,34,567
    """
    STANDARD = (3, 3)
    VEDIC = (3, 2)

    def __init__(self, first: int, rest: int):
        self.first = first
        self.rest = rest

    def apply(self, digits: str, separator: str) -> str:
        """Insert *separator* between the digit groups of *digits*."""
        if len(digits) <= self.first:
            return digits

        head, groups = digits[:-self.first], [digits[-self.first:]]
        while len(head) > self.rest:
            groups.append(head[-self.rest:])
            head = head[:-self.rest]
        groups.append(head)

        return separator.join(reversed(groups))


# ==============================================================================
# SETTINGS
# ==============================================================================

# camelCase keys accepted for compatibility with option maps written for
# other currency libraries
_ALIASES = {
    "errorOnInvalid": "error_on_invalid",
    "negativePattern": "negative_pattern",
    "fromCents": "from_cents",
    "useVedic": "use_vedic",
}


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Configuration bundle of a currency value.

    Fields:
        symbol            currency symbol, replaces ``!`` in the patterns
        separator         thousands-group separator
        decimal           decimal-point character, for input and output
        error_on_invalid  raise InvalidInput on unsupported input instead of using zero
        precision         fractional digits retained (scale = 10**precision)
        pattern           display template for non-negative amounts (``#`` = number)
        negative_pattern  display template for negative amounts
        format            formatter strategy or ``callable(value, settings) -> str``
        from_cents        raw input is already in smallest units
        use_vedic         Indian digit grouping
        increment         rounding quantum of the string conversion (None = 1/scale)
        rounding          final rounding mode of the parser and the string conversion
        extras            unknown option keys, preserved but ignored
    """
    symbol: str = "$"
    separator: str = ","
    decimal: str = "."
    error_on_invalid: bool = False
    precision: int = 2
    pattern: str = "!#"
    negative_pattern: str = "-!#"
    format: Any = None
    from_cents: bool = False
    use_vedic: bool = False
    increment: Optional[Decimal] = None
    rounding: RoundingMode = RoundingMode.HALF_UP
    extras: Mapping[str, Any] = field(default_factory=dict, compare=False)
    scale: int = field(init=False, repr=False)

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"precision must be a non-negative int, got: {self.precision!r}")
        if self.precision < 0:
            raise ValueError(f"precision must be a non-negative int, got: {self.precision}")

        object.__setattr__(self, "scale", 10 ** self.precision)

        if not isinstance(self.decimal, str) or not self.decimal:
            raise ValueError(f"decimal must be a non-empty string, got: {self.decimal!r}")

        if self.increment is not None:
            increment = _to_decimal(self.increment)
            if increment <= 0:
                raise ValueError(f"increment must be > 0, got: {self.increment!r}")
            object.__setattr__(self, "increment", increment)

        if not isinstance(self.rounding, RoundingMode):
            object.__setattr__(self, "rounding", RoundingMode(self.rounding))

        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    @property
    def effective_increment(self) -> Decimal:
        """The configured increment, or the smallest unit (1 / scale)."""
        if self.increment is not None:
            return self.increment
        return Decimal(1).scaleb(-self.precision)

    @property
    def grouping(self) -> Grouping:
        return Grouping.VEDIC if self.use_vedic else Grouping.STANDARD


DEFAULT_SETTINGS = Settings()

_OPTION_NAMES = frozenset(f.name for f in fields(Settings) if f.init) - {"extras"}


def resolve_settings(
    options: Mapping[str, Any] | Settings | None = None,
    base: Settings = DEFAULT_SETTINGS,
    **overrides: Any,
) -> Settings:
    """
    Merge caller options over *base*.

    *options* may be a mapping, or an already resolved Settings instance
    (returned as-is unless keyword overrides are given too). Keyword
    arguments win over *options*. Unknown keys land in ``extras``.

    Raises:
        ValueError: if the merged precision, increment or decimal character is invalid
    """
    if isinstance(options, Settings):
        if not overrides:
            return options
        base, options = options, None

    merged: dict[str, Any] = dict(options or {})
    merged.update(overrides)
    if not merged:
        return base

    known: dict[str, Any] = {}
    extras = dict(base.extras)
    for key, value in merged.items():
        name = _ALIASES.get(key, key)
        if name in _OPTION_NAMES:
            known[name] = value
        else:
            extras[key] = value

    unknown = sorted(set(extras) - set(base.extras))
    if unknown:
        logger.debug("unknown_settings_preserved", keys=unknown)

    return replace(base, extras=extras, **known)
