"""
centum — Fixed-point currency values

Exact monetary amounts backed by an integer count of smallest units:
parsing of numbers and printed amounts, arithmetic that re-quantizes at
every step, distribution without lost pennies, and locale-style
formatting.

================================================================================
QUICK START
================================================================================

Basic usage:

    from centum import make

    price = make("$1,234.50")
    price.add(0.1).add(0.2)          # Currency('1234.80'), no float drift
    price.format()                   # '$1,234.50'
    make("(1.99)").format()          # '-$1.99'

Distribute without losing pennies:

    parts = make(100).distribute(3)  # 33.34, 33.33, 33.33
    sum(parts) == make(100)          # True

Locale-style settings:

    euro = {"symbol": "€", "separator": ".", "decimal": ",", "pattern": "# !"}
    make("1.234,56", euro).format()  # '1.234,56 €'
    make(1234567, use_vedic=True, symbol="₹").format()
    # '₹12,34,567.00'

Serialization:

    str(price)                       # '1234.50'
    json.dumps({"p": price}, default=json_default)   # '{"p": 1234.5}'

================================================================================
"""

from .currency import (
    Currency,
    make,
    currency,
    json_default,
)
from .errors import (
    CurrencyError,
    InvalidInput,
    DivisionByZero,
)
from .formatting import (
    Formatter,
    DefaultFormatter,
    FunctionFormatter,
)
from .rounding import RoundingMode
from .settings import (
    Grouping,
    Settings,
    DEFAULT_SETTINGS,
    resolve_settings,
)

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Value
    "Currency",
    "make",
    "currency",
    "json_default",
    # Errors
    "CurrencyError",
    "InvalidInput",
    "DivisionByZero",
    # Formatting
    "Formatter",
    "DefaultFormatter",
    "FunctionFormatter",
    # Settings
    "RoundingMode",
    "Grouping",
    "Settings",
    "DEFAULT_SETTINGS",
    "resolve_settings",
]
