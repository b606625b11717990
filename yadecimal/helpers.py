"""Precision-named shortcuts for creating decimal values.

d2("19.99") is DecimalValue.from_("19.99", 2); the ``pc`` variants read a
percentage and divide it by 100 at the same precision, so d4pc("12.5") is
0.1250.
"""

from typing import Any

from yadecimal.constants import PERCENT
from yadecimal.value import DecimalValue

__all__ = ["d0", "d1", "d2", "d3", "d4", "d5", "d6", "d7", "d8", "d2pc", "d4pc", "d6pc"]


def d0(value: Any = "0") -> DecimalValue:
    """Decimal with 0 decimal places."""
    return DecimalValue.from_(value, 0)


def d1(value: Any = "0") -> DecimalValue:
    """Decimal with 1 decimal place."""
    return DecimalValue.from_(value, 1)


def d2(value: Any = "0") -> DecimalValue:
    """Decimal with 2 decimal places."""
    return DecimalValue.from_(value, 2)


def d2pc(percentage: Any = "0") -> DecimalValue:
    """Percentage as a fraction with 2 decimal places: d2pc(50) == 0.5."""
    return DecimalValue.from_(percentage, 2).divided_by(PERCENT)


def d3(value: Any = "0") -> DecimalValue:
    """Decimal with 3 decimal places."""
    return DecimalValue.from_(value, 3)


def d4(value: Any = "0") -> DecimalValue:
    """Decimal with 4 decimal places."""
    return DecimalValue.from_(value, 4)


def d4pc(percentage: Any = "0") -> DecimalValue:
    """Percentage as a fraction with 4 decimal places: d4pc(50) == 0.5."""
    return DecimalValue.from_(percentage, 4).divided_by(PERCENT)


def d5(value: Any = "0") -> DecimalValue:
    """Decimal with 5 decimal places."""
    return DecimalValue.from_(value, 5)


def d6(value: Any = "0") -> DecimalValue:
    """Decimal with 6 decimal places."""
    return DecimalValue.from_(value, 6)


def d6pc(percentage: Any = "0") -> DecimalValue:
    """Percentage as a fraction with 6 decimal places: d6pc(50) == 0.5."""
    return DecimalValue.from_(percentage, 6).divided_by(PERCENT)


def d7(value: Any = "0") -> DecimalValue:
    """Decimal with 7 decimal places."""
    return DecimalValue.from_(value, 7)


def d8(value: Any = "0") -> DecimalValue:
    """Decimal with 8 decimal places."""
    return DecimalValue.from_(value, 8)
