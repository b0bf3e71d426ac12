"""
test_formatting.py — Display formatting of currency values
"""

import pytest

from centum import DefaultFormatter, FunctionFormatter, make, resolve_settings
from centum.formatting import as_formatter, format_currency, substitute


class Bracketed:
    """Formatter strategy used by the tests."""

    def format(self, value, settings):
        return f"[{settings.symbol}{value}]"


class TestDefaultFormatter:

    def test_positive(self):
        assert make(1234.5).format() == "$1,234.50"

    def test_negative_uses_negative_pattern(self):
        assert make(-1234.5).format() == "-$1,234.50"

    def test_zero_is_non_negative(self):
        assert make(0).format() == "$0.00"

    def test_small_amounts(self):
        assert make(0.05).format() == "$0.05"
        assert make(-0.05).format() == "-$0.05"

    def test_vedic_grouping(self):
        assert make(1234567, use_vedic=True).format() == "$12,34,567.00"
        assert make(1234567).format() == "$1,234,567.00"

    def test_precision_zero_has_no_decimal_part(self):
        assert make(1234, precision=0).format() == "$1,234"

    def test_precision_three(self):
        assert make(1234.5678, precision=3).format() == "$1,234.568"

    def test_locale_settings(self, euro_settings):
        assert make("1.234,56", euro_settings).format() == "1.234,56 €"
        assert make("-1.234,56", euro_settings).format() == "-1.234,56 €"

    def test_accounting_negative_pattern(self):
        assert make("(5)", negative_pattern="(!#)").format() == "($5.00)"

    def test_increment_applies_to_display(self):
        assert make(1.23, increment=0.05).format() == "$1.25"

    def test_repeated_placeholders(self):
        assert make(1, pattern="! # !").format() == "$ 1.00 $"

    def test_symbol_containing_number_placeholder(self):
        assert make(1, symbol="#").format() == "#1.00"


class TestFormatOverrides:

    def test_mapping_is_merged_over_settings(self):
        v = make(1234.5)
        assert v.format({"symbol": "€", "pattern": "# !"}) == "1,234.50 €"
        assert v.format() == "$1,234.50"

    def test_keyword_overrides(self):
        assert make(1234.5).format(separator=" ") == "$1 234.50"

    def test_camel_case_override(self):
        assert make(1234567).format({"useVedic": True}) == "$12,34,567.00"

    def test_callable_receives_value_and_settings(self):
        v = make(1, symbol="€")
        assert v.format(lambda value, settings: f"{value.scaled_amount} {settings.symbol}") == "100 €"

    def test_callable_gets_own_settings(self):
        v = make(1)
        assert v.format(lambda value, settings: settings is value.settings) is True

    def test_formatter_object(self):
        assert make(1).format(Bracketed()) == "[$1.00]"

    def test_format_setting_callable(self):
        assert make(1, format=lambda value, settings: "custom").format() == "custom"

    def test_format_setting_strategy(self):
        assert make(2, format=Bracketed(), symbol="£").format() == "[£2.00]"

    def test_format_setting_in_override(self):
        assert make(1).format({"format": lambda value, settings: settings.symbol, "symbol": "¥"}) == "¥"

    def test_unusable_format_setting(self):
        with pytest.raises(TypeError):
            make(1, format=42).format()

    def test_format_currency_function(self):
        assert format_currency(make(-2)) == "-$2.00"


class TestStrategies:

    def test_as_formatter_wraps_callables(self):
        func = lambda value, settings: "x"
        assert as_formatter(func) == FunctionFormatter(func)

    def test_as_formatter_keeps_strategies(self):
        strategy = DefaultFormatter()
        assert as_formatter(strategy) is strategy

    @pytest.mark.parametrize("obj", ["!#", None, 1, {"symbol": "$"}], ids=repr)
    def test_as_formatter_rejects(self, obj):
        with pytest.raises(TypeError):
            as_formatter(obj)

    def test_settings_are_not_a_strategy(self):
        with pytest.raises(TypeError):
            as_formatter(resolve_settings())

    def test_substitute(self):
        assert substitute("!#", "$", "1.00") == "$1.00"
        assert substitute("# !", "€", "1,00") == "1,00 €"
        assert substitute("plain", "$", "1") == "plain"
