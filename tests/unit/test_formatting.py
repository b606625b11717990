"""Tests for display formatting."""

import pytest

from yadecimal import FormatConfig, d0, d2, d4, d6
from yadecimal.formatting import apply_template, group_digits


@pytest.mark.parametrize(
    "expected,actual",
    [
        ("1", lambda: d0(1).format()),
        ("123", lambda: d0(123).format()),
        ("123,456", lambda: d0(123456).format()),
        ("12,345,678", lambda: d0(12345678).format()),
        ("$1", lambda: d0(1).format(None, ".", ",", "$")),
        ("$123", lambda: d0(123).format(None, ".", ",", "$")),
        ("$123,456", lambda: d0(123456).format(None, ".", ",", "$")),
        ("$12,345,678", lambda: d0(12345678).format(None, ".", ",", "$")),
        ("-1", lambda: d0(-1).format()),
        ("-123", lambda: d0(-123).format()),
        ("-123,456", lambda: d0(-123456).format()),
        ("-12,345,678", lambda: d0(-12345678).format()),
        ("-$1", lambda: d0(-1).format(None, ".", ",", "$")),
        ("-$123", lambda: d0(-123).format(None, ".", ",", "$")),
        ("-$123,456", lambda: d0(-123456).format(None, ".", ",", "$")),
        ("-$12,345,678", lambda: d0(-12345678).format(None, ".", ",", "$")),
        ("1.90", lambda: d2(1.9).format()),
        ("123.90", lambda: d2(123.9).format()),
        ("123,456.90", lambda: d2(123456.9).format()),
        ("12,345,678.90", lambda: d2(12345678.9).format()),
        ("$1.90", lambda: d2(1.9).format(None, ".", ",", "$")),
        ("$123.90", lambda: d2(123.9).format(None, ".", ",", "$")),
        ("$123,456.90", lambda: d2(123456.9).format(None, ".", ",", "$")),
        ("$12,345,678.90", lambda: d2(12345678.9).format(None, ".", ",", "$")),
        ("-1.90", lambda: d2(-1.9).format()),
        ("-123.90", lambda: d2(-123.9).format()),
        ("-123,456.90", lambda: d2(-123456.9).format()),
        ("-12,345,678.90", lambda: d2(-12345678.9).format()),
        ("-$1.90", lambda: d2(-1.9).format(None, ".", ",", "$")),
        ("-$123.90", lambda: d2(-123.9).format(None, ".", ",", "$")),
        ("-$123,456.90", lambda: d2(-123456.9).format(None, ".", ",", "$")),
        ("-$12,345,678.90", lambda: d2(-12345678.9).format(None, ".", ",", "$")),
        ("-$1,812,933.9472", lambda: d4(-1812933.9472).format(None, ".", ",", "$")),
    ],
)
def test_format_creates_correct_strings(expected, actual):
    """Each call renders the expected text."""
    assert actual() == expected


class TestFormatOptions:
    """Tests for format() arguments and configuration."""

    def test_precision_override_truncates(self):
        """An explicit precision drops digits before grouping."""
        assert d6("1234.5678").format(2) == "1,234.56"

    def test_zero_precision_has_no_decimal_point(self):
        """Precision zero renders no decimal point."""
        assert d6("1234.5678").format(0) == "1,234"

    def test_separators(self):
        """Custom decimal point and thousands separator."""
        assert d2(1234567.5).format(decimal_point=",", thousands_separator=".") == "1.234.567,50"

    def test_no_grouping(self):
        """An empty thousands separator disables grouping."""
        assert d2(1234567.5).format(thousands_separator="") == "1234567.50"

    def test_zero_uses_zero_format(self):
        """Zero picks zero_format when one is given."""
        assert d2(0).format(zero_format="--") == "--"
        assert d2(0).format(currency_symbol="$") == "$0.00"

    def test_value_truncated_to_zero_uses_zero_format(self):
        """-0.001 renders as 0.00, which is zero, not negative."""
        assert d6("-0.001").format(2, zero_format="nil") == "nil"
        assert d6("-0.001").format(2) == "0.00"

    def test_accounting_negative_format(self):
        """Negative amounts in parentheses."""
        result = d2(-5).format(currency_symbol="$", negative_format="({currency}{value})")
        assert result == "($5.00)"

    def test_positive_format(self):
        """A template for positive values."""
        assert d2(5).format(currency_symbol="$", positive_format="+{currency}{value}") == "+$5.00"

    def test_config(self):
        """A FormatConfig supplies every default."""
        config = FormatConfig(
            decimal_point=",",
            thousands_separator=" ",
            currency_symbol="EUR",
            positive_format="{value} {currency}",
            negative_format="-{value} {currency}",
        )
        assert d2(1234.5).format(config=config) == "1 234,50 EUR"
        assert d2(-1234.5).format(config=config) == "-1 234,50 EUR"

    def test_arguments_override_config(self):
        """Explicit arguments win over the config."""
        config = FormatConfig(currency_symbol="EUR", positive_format="{value} {currency}")
        assert d2(1).format(currency_symbol="CHF", config=config) == "1.00 CHF"


class TestHelpers:
    """Tests for the formatting building blocks."""

    @pytest.mark.parametrize(
        "digits,expected",
        [
            ("1", "1"),
            ("123", "123"),
            ("1234", "1,234"),
            ("123456", "123,456"),
            ("12345678", "12,345,678"),
        ],
    )
    def test_group_digits(self, digits, expected):
        """Whole-number digits are grouped in threes from the right."""
        assert group_digits(digits, ",") == expected

    def test_apply_template_leaves_other_braces(self):
        """Only {currency} and {value} are substituted."""
        assert apply_template("{x} {currency}{value}", "$", "1") == "{x} $1"
