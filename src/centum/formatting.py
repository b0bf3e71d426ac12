"""
formatting.py — Display strings for currency values

The formatter is a strategy object with a single method:

    format(value, settings) -> str

DefaultFormatter groups the integer digits, joins the fractional digits
with the configured decimal character and substitutes the result into
``pattern`` / ``negative_pattern`` (``!`` = symbol, ``#`` = number).

A plain ``callable(value, settings)`` is accepted wherever a formatter is,
and is wrapped in FunctionFormatter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Protocol, runtime_checkable

from .settings import Settings, resolve_settings

if TYPE_CHECKING:
    from .currency import Currency

__all__ = [
    "Formatter",
    "DefaultFormatter",
    "FunctionFormatter",
    "DEFAULT_FORMATTER",
    "as_formatter",
    "format_currency",
]

SYMBOL_PLACEHOLDER = "!"
NUMBER_PLACEHOLDER = "#"


@runtime_checkable
class Formatter(Protocol):
    def format(self, value: Currency, settings: Settings) -> str:
        ...


class DefaultFormatter:
    """Grouping + pattern substitution."""

    def format(self, value: Currency, settings: Settings) -> str:
        digits, _, fraction = value.to_string_repr().lstrip("-").partition(".")

        number = settings.grouping.apply(digits, settings.separator)
        if fraction:
            number = f"{number}{settings.decimal}{fraction}"

        pattern = settings.pattern if value.scaled_amount >= 0 else settings.negative_pattern
        return substitute(pattern, settings.symbol, number)

    def __repr__(self) -> str:
        return "DefaultFormatter()"


@dataclass(frozen=True)
class FunctionFormatter:
    """Adapter for ``callable(value, settings) -> str``."""
    func: Callable[[Any, Settings], str]

    def format(self, value: Currency, settings: Settings) -> str:
        return self.func(value, settings)


DEFAULT_FORMATTER = DefaultFormatter()


def substitute(pattern: str, symbol: str, number: str) -> str:
    """Replace the placeholders of *pattern* in a single pass.

    A symbol containing ``#`` is never itself substituted.
    """
    return "".join(
        symbol if char == SYMBOL_PLACEHOLDER else number if char == NUMBER_PLACEHOLDER else char
        for char in pattern
    )


def is_strategy(obj: Any) -> bool:
    # str has a .format method of its own
    if obj is None or isinstance(obj, (str, Mapping, Settings)):
        return False
    return isinstance(obj, Formatter) or callable(obj)


def as_formatter(obj: Any) -> Formatter:
    """
    Return *obj* as a formatter strategy.

    Raises:
        TypeError: if *obj* is neither a formatter nor callable
    """
    if is_strategy(obj):
        return obj if isinstance(obj, Formatter) else FunctionFormatter(obj)
    raise TypeError(f"Expected a formatter or callable(value, settings), got: {type(obj).__name__}")


def format_currency(value: Currency, options: Any = None, **overrides: Any) -> str:
    """
    Format *value* for display.

    1. *options* is a formatter or callable: delegate to it with the
       value's own settings.
    2. Otherwise merge *options* (mapping) and *overrides* over the value's
       settings; if the merged settings carry a ``format`` strategy,
       delegate to it.
    3. Otherwise use DefaultFormatter.
    """
    if is_strategy(options):
        return as_formatter(options).format(value, value.settings)

    settings = value.settings
    if options is not None or overrides:
        settings = resolve_settings(options, base=value.settings, **overrides)

    formatter = DEFAULT_FORMATTER if settings.format is None else as_formatter(settings.format)
    return formatter.format(value, settings)
