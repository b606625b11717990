"""Numeric constants shared across the package.

Centralizes precision defaults and currency parameters.
"""

# Number of fractional digits a value carries when none is requested
DEFAULT_PRECISION = 6

# Currency conversion
CENTS_PER_DOLLAR = 100
CURRENCY_PRECISION = 2  # whole cents

# Percentage helpers divide by this
PERCENT = 100

# Digits per thousands group when formatting
GROUP_SIZE = 3
