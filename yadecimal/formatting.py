"""Rendering of decimal strings for display."""

from __future__ import annotations

from yadecimal.config import FormatConfig
from yadecimal.constants import GROUP_SIZE


def group_digits(digits: str, separator: str) -> str:
    """Insert `separator` between groups of three digits, from the right.

    Examples:
        group_digits("12345678", ",") -> "12,345,678"
        group_digits("123", ",") -> "123"
    """
    head = len(digits) % GROUP_SIZE or GROUP_SIZE
    groups = [digits[:head]]
    groups.extend(digits[i : i + GROUP_SIZE] for i in range(head, len(digits), GROUP_SIZE))
    return separator.join(groups)


def apply_template(template: str, currency: str, value: str) -> str:
    """Substitute the ``{currency}`` and ``{value}`` placeholders.

    Other braces in the template are left alone.
    """
    return template.replace("{currency}", currency).replace("{value}", value)


def format_decimal_string(text: str, config: FormatConfig) -> str:
    """Format a canonical decimal string (as produced by render()).

    The sign is stripped and chosen by template: negative values use
    ``negative_format``, values that are all zero digits use ``zero_format``.
    """
    negative = text.startswith("-")
    unsigned = text.lstrip("-")
    integer, _, fraction = unsigned.partition(".")

    number = group_digits(integer, config.thousands_separator)
    if fraction:
        number = f"{number}{config.decimal_point}{fraction}"

    if not unsigned.strip("0."):
        template = config.zero_format
    elif negative:
        template = config.negative_format
    else:
        template = config.positive_format
    return apply_template(template, config.currency_symbol, number)
