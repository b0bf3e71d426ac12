#!/usr/bin/env python3
"""
budget_split.py — Splitting a yearly budget without losing cents

================================================================================
THE BUG
================================================================================

    >>> 2026.0 / 12 * 12
    2025.9999999999998

IEEE 754 floating point working exactly as designed. Money is not a float.

================================================================================
THE FIX
================================================================================

    from centum import make

    budget = make(2026)
    monthly = budget.distribute(12)
    assert sum(monthly) == budget

The value is an integer count of cents. distribute() hands out the
leftover cents one at a time, so the parts always add up.

================================================================================
"""

import json

from centum import json_default, make
from centum.log import get_logger, setup_logging

logger = get_logger(__name__)


def demonstrate_bug():
    print("=" * 60)
    print("THE BUG")
    print("=" * 60)
    result = 2026.0 / 12 * 12
    print(f">>> 2026.0 / 12 * 12\n{result}")
    print(f"Expected 2026.0, off by {2026.0 - result}")
    print()


def demonstrate_solution():
    print("=" * 60)
    print("THE SOLUTION")
    print("=" * 60)

    budget = make(2026, symbol="€", separator=".", decimal=",", pattern="# !", negative_pattern="-# !")
    monthly = budget.distribute(12)

    for i, part in enumerate(monthly, 1):
        print(f"  Month {i:2d}: {part.format()}")

    total = sum(monthly)
    print(f"Sum of parts: {total.format()}")
    print(f"Equal?        {total == budget}")
    logger.info("budget_split", total=str(total), parts=len(monthly))
    print()


def demonstrate_parsing():
    print("=" * 60)
    print("PARSING AND FORMATTING")
    print("=" * 60)

    for text in ["$1,234.50", "(1.99)", "USD 12", "abc"]:
        value = make(text)
        print(f"  {text!r:>12} -> {value.format():>12}  str={value}")

    print(f"  Vedic: {make(1234567, symbol='₹', use_vedic=True).format()}")
    print(f"  Cash rounding: {make(1.23, increment=0.05).format()}")
    print(f"  JSON: {json.dumps({'total': make('12.50')}, default=json_default)}")
    print()


if __name__ == "__main__":
    setup_logging("INFO")
    demonstrate_bug()
    demonstrate_solution()
    demonstrate_parsing()
