"""Scaled-integer decimal arithmetic.

This module is the shared engine behind DecimalValue and MutableDecimalValue.
A decimal with precision p is stored as an integer count of 10^-p units:
123.45 at precision 2 is stored as 12345, at precision 6 as 123450000.

All operations are exact on Python integers and truncate toward zero when a
result has to be expressed at fewer digits, matching fixed-point decimal
libraries that drop digits rather than round them.
"""

from __future__ import annotations

import math
import re
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_DOWN, Context, Decimal
from typing import Any, NamedTuple, Protocol, runtime_checkable

from yadecimal.constants import DEFAULT_PRECISION
from yadecimal.errors import ConversionError, DivisionByZero

__all__ = [
    # Types
    "ScaledUnits",
    "SupportsScaledUnits",
    # Conversion
    "normalize",
    "parse",
    "render",
    "rescale",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "compare",
    # Rounding
    "round_half_away",
    "floor",
    "ceil",
]

# Optional sign, then "12", "12.", "12.34" or ".34" (ASCII digits only)
_DECIMAL_TEXT = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")

# Wide enough that scaleb and to_integral_value never round. Decimal <-> int
# conversion does not go through str, so the int string-length limit does not
# apply.
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_DOWN)


class ScaledUnits(NamedTuple):
    """An integer amount of 10^-scale units."""

    units: int
    scale: int

    def rescale(self, scale: int) -> ScaledUnits:
        """Re-express at another scale, truncating dropped digits."""
        return ScaledUnits(rescale(self.units, self.scale, scale), scale)

    def __str__(self) -> str:
        return render(self.units, self.scale)


@runtime_checkable
class SupportsScaledUnits(Protocol):
    """Anything that can hand over its fixed-point representation directly."""

    def scaled_units(self) -> ScaledUnits: ...


# =============================================================================
# Conversion
# =============================================================================


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero.

    Python's // rounds toward negative infinity, which would round negative
    amounts away from zero when digits are dropped.

    Examples:
        Python: -7 // 2 = -4
        _trunc_div(-7, 2) = -3
    """
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def rescale(units: int, from_scale: int, to_scale: int) -> int:
    """Re-express a unit count at another scale.

    Growing the scale pads with zero digits; shrinking it truncates toward
    zero.
    """
    if to_scale >= from_scale:
        return units * 10 ** (to_scale - from_scale)
    return _trunc_div(units, 10 ** (from_scale - to_scale))


def _units_from_decimal(d: Decimal, scale: int) -> int:
    """Convert a finite Decimal to units, truncating toward zero.

    Decimal.quantize is bounded by the default context precision (28
    digits); shifting and truncating in _EXACT works for any magnitude.
    """
    shifted = d.scaleb(scale, context=_EXACT)
    return int(shifted.to_integral_value(rounding=ROUND_DOWN, context=_EXACT))


def _parse_text(text: str, scale: int) -> int:
    stripped = text.strip()
    if not _DECIMAL_TEXT.match(stripped):
        raise ValueError(f"Not a decimal number: {text!r}")
    return _units_from_decimal(Decimal(stripped), scale)


def parse(mixed: Any, scale: int = DEFAULT_PRECISION) -> ScaledUnits:
    """Convert a heterogeneous input to units at the given scale.

    Accepts bool, int, float, str, decimal.Decimal and any object exposing
    scaled_units() (DecimalValue, MutableDecimalValue).

    Raises:
        ConversionError: If the input is not a finite decimal number. The
            original input is attached and the parse failure chained.
    """
    scale = max(0, scale)

    if isinstance(mixed, SupportsScaledUnits):
        return mixed.scaled_units().rescale(scale)

    try:
        # bool before int: bool is an int subclass
        if isinstance(mixed, bool):
            units = (1 if mixed else 0) * 10**scale
        elif isinstance(mixed, int):
            units = mixed * 10**scale
        elif isinstance(mixed, float):
            if not math.isfinite(mixed):
                raise ValueError(f"Non-finite float: {mixed!r}")
            # repr() is the shortest string that round-trips: 0.1 -> "0.1"
            units = _units_from_decimal(Decimal(repr(mixed)), scale)
        elif isinstance(mixed, Decimal):
            if not mixed.is_finite():
                raise ValueError(f"Non-finite Decimal: {mixed}")
            units = _units_from_decimal(mixed, scale)
        elif isinstance(mixed, str):
            units = _parse_text(mixed, scale)
        else:
            raise TypeError(f"Unsupported type for decimal conversion: {type(mixed).__name__}")
    except (ValueError, TypeError) as err:
        raise ConversionError(f"Cannot convert {mixed!r} to a decimal: {err}", value=mixed) from err

    return ScaledUnits(units, scale)


def render(units: int, scale: int) -> str:
    """Render units as a decimal string with exactly `scale` fractional digits.

    Zero never carries a sign. Goes through Decimal rather than str(int) so
    values of any length render.
    """
    return format(Decimal(units).scaleb(-scale, context=_EXACT), "f")


def normalize(mixed: Any, scale: int = DEFAULT_PRECISION) -> str:
    """Convert an input to its canonical decimal string at the given scale.

    Examples:
        normalize("123.456789123") -> "123.456789"
        normalize(True, 2) -> "1.00"
        normalize(-1.5, 0) -> "-1"
    """
    return str(parse(mixed, scale))


# =============================================================================
# Arithmetic (both operands at the same scale)
# =============================================================================


def add(a: int, b: int) -> int:
    return a + b


def sub(a: int, b: int) -> int:
    return a - b


def mul(a: int, b: int, scale: int) -> int:
    """Multiply, truncating the double-scale product back to `scale`."""
    return _trunc_div(a * b, 10**scale)


def div(a: int, b: int, scale: int, divisor: Any = None) -> int:
    """Divide, truncating the quotient toward zero at `scale`.

    Args:
        a: Dividend units
        b: Divisor units
        scale: Scale shared by both operands and the result
        divisor: Original divisor input, reported if it is zero

    Raises:
        DivisionByZero: If b is zero
    """
    if b == 0:
        raise DivisionByZero(f"Division by zero: {render(a, scale)} / {divisor!r}", value=divisor)
    return _trunc_div(a * 10**scale, b)


def mod(a: int, b: int, divisor: Any = None) -> int:
    """Remainder of truncated division; takes the sign of the dividend.

    Raises:
        DivisionByZero: If b is zero
    """
    if b == 0:
        raise DivisionByZero(f"Modulus by zero: {divisor!r}", value=divisor)
    return a - b * _trunc_div(a, b)


def compare(a: ScaledUnits, b: ScaledUnits) -> int:
    """Three-way comparison at the finer of the two scales.

    Returns:
        -1, 0 or 1 as a is less than, equal to or greater than b
    """
    scale = max(a.scale, b.scale)
    left = rescale(a.units, a.scale, scale)
    right = rescale(b.units, b.scale, scale)
    return (left > right) - (left < right)


# =============================================================================
# Rounding
# =============================================================================


def round_half_away(units: int, scale: int, digits: int = 0) -> int:
    """Round to `digits` fractional digits, half away from zero.

    The result is still expressed at `scale`; only the digits beyond
    `digits` are zeroed. A negative `digits` rounds to tens, hundreds, etc.

    Examples (scale 6):
        123.111111, digits=3 -> 123.111000
        2.5, digits=0 -> 3.000000
        -2.5, digits=0 -> -3.000000
    """
    if digits >= scale:
        return units
    factor = 10 ** (scale - digits)
    quotient, remainder = divmod(abs(units), factor)
    # remainder >= factor / 2 exactly when the first dropped digit is >= 5
    if remainder * 2 >= factor:
        quotient += 1
    magnitude = quotient * factor
    return -magnitude if units < 0 else magnitude


def floor(units: int, scale: int) -> int:
    """Largest whole number <= the value, at `scale`."""
    one = 10**scale
    return (units // one) * one


def ceil(units: int, scale: int) -> int:
    """Smallest whole number >= the value, at `scale`."""
    one = 10**scale
    return -((-units) // one) * one
