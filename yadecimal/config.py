"""Formatting configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatConfig:
    """Presentation settings for DecimalValue.format().

    Templates use two placeholders: ``{currency}`` for the currency symbol
    and ``{value}`` for the unsigned, grouped number. The sign is part of
    the template, so accounting styles such as ``"({currency}{value})"`` are
    a matter of configuration.

    Attributes:
        decimal_point: Separator between integer and fraction digits
        thousands_separator: Inserted between groups of three integer digits
        currency_symbol: Substituted for ``{currency}``
        positive_format: Template for values above zero
        negative_format: Template for values below zero
        zero_format: Template for values that render as zero
    """

    decimal_point: str = "."
    thousands_separator: str = ","
    currency_symbol: str = ""

    positive_format: str = "{currency}{value}"
    negative_format: str = "-{currency}{value}"
    zero_format: str = "{currency}{value}"


# Default configuration instance
DEFAULT_FORMAT_CONFIG = FormatConfig()
