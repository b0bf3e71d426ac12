"""
currency.py — Fixed-point currency value

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   An integer count of smallest units (cents for precision=2). The scaled
   integer is the single source of truth; `amount` is a derived view.

2. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance, so values
   are safe to share between threads without locking.

3. RE-QUANTIZATION
   Every arithmetic result is passed back through the parser and rounded
   onto the integer grid. Rounding error cannot build up silently over a
   chain of operations.

4. EXACT DISTRIBUTION
   distribute(n) returns n parts whose scaled amounts sum exactly to the
   original scaled amount.

================================================================================
ARITHMETIC
================================================================================

add / subtract
    The operand is parsed to the receiver's scale and combined in the
    integer domain, then rebuilt through the parser.

multiply / divide
    The operand is a plain factor: a currency operand contributes its
    `amount`; anything else is parsed without the final rounding and
    unscaled. The product is computed in Decimal and rebuilt through the
    parser. multiply(x).divide(x) is the identity within one smallest
    unit: the intermediate result is rounded once.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Any, Mapping, Union

from .errors import DivisionByZero
from .formatting import format_currency
from .log import get_logger
from .parsing import parse
from .rounding import apply_rounding, round_to_increment, shift
from .settings import DEFAULT_SETTINGS, Settings, resolve_settings

__all__ = [
    "Currency",
    "make",
    "currency",
    "json_default",
]

logger = get_logger(__name__)

Options = Union[Mapping[str, Any], Settings, None]


@dataclass(frozen=True, slots=True)
class Currency:
    """
    Currency value backed by an integer of smallest units.

    USAGE:
        price = Currency.of("$1,234.50")
        price.add("0.50").format()          # '$1,235.00'
        [str(p) for p in Currency.of(1).distribute(3)]
        # ['0.34', '0.33', '0.33']

    SERIALIZATION:
        str(value) is the plain fixed-point string ('1234.50'), float(value)
        and to_number() the numeric view for JSON, to_dict()/from_dict()
        the lossless form {"scaled_amount": int, "precision": int}.
    """
    scaled_amount: int
    settings: Settings = DEFAULT_SETTINGS

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, value: Any = 0, options: Options = None, **overrides: Any) -> Currency:
        """
        Build a value from a number, text, or another value.

        Raises:
            InvalidInput: unsupported input with ``error_on_invalid`` set
            ValueError: invalid precision or increment in the options
        """
        settings = resolve_settings(options, **overrides)
        return cls(parse(value, settings), settings)

    @classmethod
    def of_scaled(cls, scaled_amount: int, settings: Settings = DEFAULT_SETTINGS) -> Currency:
        """Build a value from a scaled integer. No parsing, no rounding."""
        return cls(int(scaled_amount), settings)

    @classmethod
    def zero(cls, settings: Settings = DEFAULT_SETTINGS) -> Currency:
        return cls(0, settings)

    def _rebuild_scaled(self, scaled_amount: int) -> Currency:
        places = 0 if self.settings.from_cents else self.settings.precision
        return Currency.of(shift(Decimal(scaled_amount), -places), self.settings)

    def _rebuild_amount(self, amount: Decimal) -> Currency:
        if self.settings.from_cents:
            amount = shift(amount, self.settings.precision)
        return Currency.of(amount, self.settings)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def amount(self) -> Decimal:
        """Exact amount in major units (scaled_amount / scale)."""
        return shift(Decimal(self.scaled_amount), -self.settings.precision)

    @property
    def precision(self) -> int:
        return self.settings.precision

    def dollars(self) -> int:
        """Integer part of the amount, truncated toward zero."""
        sign = -1 if self.scaled_amount < 0 else 1
        return sign * (abs(self.scaled_amount) // self.settings.scale)

    def cents(self) -> int:
        """Fractional part in smallest units, with the sign of the amount."""
        sign = -1 if self.scaled_amount < 0 else 1
        return sign * (abs(self.scaled_amount) % self.settings.scale)

    def is_zero(self) -> bool:
        return self.scaled_amount == 0

    def is_positive(self) -> bool:
        return self.scaled_amount > 0

    def is_negative(self) -> bool:
        return self.scaled_amount < 0

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Any) -> Currency:
        return self._rebuild_scaled(self.scaled_amount + parse(other, self.settings))

    def subtract(self, other: Any) -> Currency:
        return self._rebuild_scaled(self.scaled_amount - parse(other, self.settings))

    def _factor(self, other: Any) -> Decimal:
        if isinstance(other, Currency):
            return other.amount

        factor = parse(other, self.settings, use_rounding=False)
        if self.settings.from_cents:
            return Decimal(factor)
        return shift(factor, -self.settings.precision)

    def multiply(self, factor: Any) -> Currency:
        amount, value = self.amount, self._factor(factor)
        with localcontext() as ctx:
            # room for the exact product
            ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + len(value.as_tuple().digits))
            product = amount * value
        return self._rebuild_amount(product)

    def divide(self, divisor: Any) -> Currency:
        """
        Divide by a number, text, or another value.

        Raises:
            DivisionByZero: the divisor is zero (0, "0", or a zero value)
        """
        value = self._factor(divisor)
        if value == 0:
            logger.warning("division_by_zero", divisor=repr(divisor))
            raise DivisionByZero(divisor)

        with localcontext() as ctx:
            ctx.prec += max(0, self.amount.adjusted() - value.adjusted())
            quotient = self.amount / value
        return self._rebuild_amount(quotient)

    # -------------------------------------------------------------------------
    # Distribution
    # -------------------------------------------------------------------------

    def distribute(self, count: int) -> list[Currency]:
        """
        Split the amount into *count* parts with an EXACT sum.

        Each part gets the share rounded toward zero; the leftover smallest
        units go one at a time to the first parts, with the sign of the
        amount.

            Currency.of(1).distribute(3)   -> 0.34, 0.33, 0.33
            Currency.of(-1).distribute(3)  -> -0.34, -0.33, -0.33

        Raises:
            ValueError: if count <= 0
            TypeError: if count is not an integer
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, got: {type(count).__name__}")
        if count <= 0:
            raise ValueError(f"count must be > 0, got: {count}")

        total = self.scaled_amount
        split = abs(total) // count
        pennies = abs(total) - split * count
        sign = -1 if total < 0 else 1

        return [
            Currency.of_scaled(sign * (split + (1 if i < pennies else 0)), self.settings)
            for i in range(count)
        ]

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def format(self, options: Any = None, **overrides: Any) -> str:
        """
        Display string, e.g. '$1,234.50'.

        *options* may be a formatter (or ``callable(value, settings)``)
        which then does all the work, or a mapping merged over the value's
        settings.
        """
        return format_currency(self, options, **overrides)

    def to_string_repr(self) -> str:
        """
        Plain fixed-point string: no grouping, '.' as decimal point, exactly
        `precision` fractional digits, rounded to the configured increment.
        """
        rounded = round_to_increment(self.amount, self.settings.effective_increment, self.settings.rounding)
        if rounded == 0:
            rounded = abs(rounded)
        return f"{apply_rounding(rounded, self.settings.rounding, self.settings.precision):f}"

    def to_number(self) -> float:
        """Numeric view for structured serialization."""
        return float(self.amount)

    def to_dict(self) -> dict:
        """
        Lossless form for persistence: {"scaled_amount": int, "precision": int}.

        Display settings are not persisted.
        """
        return {
            "scaled_amount": self.scaled_amount,
            "precision": self.settings.precision,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], options: Options = None, **overrides: Any) -> Currency:
        """Rebuild a value from to_dict() output. The stored precision wins."""
        settings = resolve_settings(options, **overrides)
        if settings.precision != data["precision"]:
            settings = resolve_settings(settings, precision=data["precision"])
        return cls.of_scaled(data["scaled_amount"], settings)

    def __str__(self) -> str:
        return self.to_string_repr()

    def __repr__(self) -> str:
        return f"Currency('{self.to_string_repr()}')"

    def __float__(self) -> float:
        return self.to_number()

    def __int__(self) -> int:
        return self.dollars()

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> Currency:
        return self.add(other)

    def __radd__(self, other: Any) -> Currency:
        return self.add(other)

    def __sub__(self, other: Any) -> Currency:
        return self.subtract(other)

    def __rsub__(self, other: Any) -> Currency:
        return Currency.of(other, self.settings).subtract(self)

    def __mul__(self, factor: Any) -> Currency:
        return self.multiply(factor)

    def __rmul__(self, factor: Any) -> Currency:
        return self.multiply(factor)

    def __truediv__(self, divisor: Any) -> Currency:
        return self.divide(divisor)

    def __neg__(self) -> Currency:
        return Currency.of_scaled(-self.scaled_amount, self.settings)

    def __abs__(self) -> Currency:
        return Currency.of_scaled(abs(self.scaled_amount), self.settings)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def _amount_of(self, other: Any) -> Decimal:
        # values of another precision compare exactly, not after rescaling
        if isinstance(other, Currency):
            return other.amount
        return shift(Decimal(parse(other, self.settings)), -self.settings.precision)

    def __lt__(self, other: Any) -> bool:
        return self.amount < self._amount_of(other)

    def __le__(self, other: Any) -> bool:
        return self.amount <= self._amount_of(other)

    def __gt__(self, other: Any) -> bool:
        return self.amount > self._amount_of(other)

    def __ge__(self, other: Any) -> bool:
        return self.amount >= self._amount_of(other)


def make(value: Any = 0, options: Options = None, **overrides: Any) -> Currency:
    """Entry point: ``make("$1,234.50", {"precision": 2})``."""
    return Currency.of(value, options, **overrides)


currency = make


def json_default(obj: Any) -> float:
    """
    ``json.dumps(default=json_default)`` hook.

        >>> json.dumps({"total": make("12.50")}, default=json_default)
        '{"total": 12.5}'
    """
    if isinstance(obj, Currency):
        return obj.to_number()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
