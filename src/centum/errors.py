"""
Exception types for centum.

Dependency-free, importable from every module of the package.
"""

__all__ = [
    "CurrencyError",
    "InvalidInput",
    "DivisionByZero",
]


class CurrencyError(Exception):
    """Base class for errors raised by currency values."""
    pass


class InvalidInput(CurrencyError, TypeError):
    """Raised when the input cannot be parsed and ``error_on_invalid`` is set.

    Attributes
    ----------
    value : Any
        The rejected input, kept for context.
    """

    def __init__(self, value):
        super().__init__(
            f"Invalid input: {type(value).__name__} {value!r} is not a number, text or currency value"
        )
        self.value = value


class DivisionByZero(CurrencyError, ZeroDivisionError):
    """Raised when ``divide`` receives a divisor whose value is zero."""

    def __init__(self, divisor):
        super().__init__(f"Division by zero: divisor {divisor!r}")
        self.divisor = divisor
