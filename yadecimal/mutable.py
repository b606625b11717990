"""Mutable decimal accumulator.

MutableDecimalValue shares DecimalValue's representation and conversion
rules but updates itself in place, for loops that would otherwise allocate a
new value per step:

    total = MutableDecimalValue.from_("0", 2)
    for line in lines:
        total.add(line.amount)
    invoice_total = total.freeze()

Instances carry no locking; do not share one between concurrent writers.
"""

from __future__ import annotations

from typing import Any

from yadecimal import fixed_point
from yadecimal.constants import DEFAULT_PRECISION
from yadecimal.fixed_point import ScaledUnits, SupportsScaledUnits
from yadecimal.value import _NUMERIC_OPERANDS, DecimalValue


class MutableDecimalValue:
    """Decimal accumulator with in-place add/sub/mul/div.

    add/sub/mul/div convert their operand at this value's precision, update
    the stored digits and return the same instance so calls can be chained.
    plus/minus/times/divided_by and the rounding methods return a new
    accumulator instead. Formatting lives on DecimalValue; use freeze().
    """

    __slots__ = ("_units", "_precision")
    __hash__ = None  # type: ignore[assignment]  # Unhashable since it mutates

    def __init__(self, value: Any = "0", precision: int = DEFAULT_PRECISION) -> None:
        self._precision = max(0, precision)
        self._units = fixed_point.parse(value, self._precision).units

    @classmethod
    def from_(cls, mixed: Any, precision: int | None = None) -> MutableDecimalValue:
        """Create an accumulator from any input DecimalValue.from_() accepts."""
        frozen = DecimalValue.from_(mixed, precision)
        instance = cls.__new__(cls)
        instance._units, instance._precision = frozen.scaled_units()
        return instance

    def scaled_units(self) -> ScaledUnits:
        return ScaledUnits(self._units, self._precision)

    @property
    def precision(self) -> int:
        return self._precision

    def value(self, precision: int | None = None) -> str:
        return self.freeze().value(precision)

    def freeze(self) -> DecimalValue:
        """Snapshot the current value as an immutable DecimalValue."""
        return DecimalValue.from_(self)

    def copy(self, precision: int | None = None) -> MutableDecimalValue:
        """An independent accumulator with the same value."""
        return MutableDecimalValue.from_(self, precision)

    def json_serialize(self) -> dict[str, Any]:
        return self.freeze().json_serialize()

    def __str__(self) -> str:
        return self.value()

    def __repr__(self) -> str:
        return f"MutableDecimalValue('{self.value()}', precision={self._precision})"

    # --- In-place arithmetic ---

    def _operand(self, value: Any) -> int:
        return fixed_point.parse(value, self._precision).units

    def add(self, value: Any) -> MutableDecimalValue:
        self._units = fixed_point.add(self._units, self._operand(value))
        return self

    def sub(self, value: Any) -> MutableDecimalValue:
        self._units = fixed_point.sub(self._units, self._operand(value))
        return self

    def mul(self, factor: Any) -> MutableDecimalValue:
        self._units = fixed_point.mul(self._units, self._operand(factor), self._precision)
        return self

    def div(self, divisor: Any) -> MutableDecimalValue:
        """Divide in place.

        Raises:
            DivisionByZero: If `divisor` normalizes to zero; the value is
                left unchanged
        """
        self._units = fixed_point.div(self._units, self._operand(divisor), self._precision, divisor=divisor)
        return self

    def __iadd__(self, other: object) -> MutableDecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other: object) -> MutableDecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self.sub(other)

    def __imul__(self, other: object) -> MutableDecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self.mul(other)

    def __itruediv__(self, other: object) -> MutableDecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self.div(other)

    # --- Read-only operations ---
    #
    # These leave the accumulator untouched and return a new, independent
    # MutableDecimalValue at this precision, computed by the DecimalValue
    # method of the same name.

    def plus(self, value: Any) -> MutableDecimalValue:
        return MutableDecimalValue.from_(self.freeze().plus(value))

    def minus(self, value: Any) -> MutableDecimalValue:
        return MutableDecimalValue.from_(self.freeze().minus(value))

    def times(self, factor: Any) -> MutableDecimalValue:
        return MutableDecimalValue.from_(self.freeze().times(factor))

    def divided_by(self, divisor: Any) -> MutableDecimalValue:
        """Quotient as a new accumulator.

        Raises:
            DivisionByZero: If `divisor` normalizes to zero
        """
        return MutableDecimalValue.from_(self.freeze().divided_by(divisor))

    def modulus(self, divisor: Any) -> MutableDecimalValue:
        return MutableDecimalValue.from_(self.freeze().modulus(divisor))

    def min(self, value: Any) -> MutableDecimalValue:
        return MutableDecimalValue.from_(self.freeze().min(value))

    def max(self, value: Any) -> MutableDecimalValue:
        return MutableDecimalValue.from_(self.freeze().max(value))

    def clamp(self, lower: Any, upper: Any) -> MutableDecimalValue:
        """Limit to [lower, upper]; `upper` wins when lower > upper."""
        return MutableDecimalValue.from_(self.freeze().clamp(lower, upper))

    def round(self, precision: int = 0) -> MutableDecimalValue:
        return MutableDecimalValue.from_(self.freeze().round(precision))

    def floor(self) -> MutableDecimalValue:
        return MutableDecimalValue.from_(self.freeze().floor())

    def ceil(self) -> MutableDecimalValue:
        return MutableDecimalValue.from_(self.freeze().ceil())

    def is_integer(self) -> bool:
        return self.freeze().is_integer()

    # --- Comparison (same rules as DecimalValue) ---

    def equals(self, value: Any) -> bool:
        return self.freeze().equals(value)

    def not_equals(self, value: Any) -> bool:
        return self.freeze().not_equals(value)

    def less_than(self, value: Any) -> bool:
        return self.freeze().less_than(value)

    def less_than_or_equal(self, value: Any) -> bool:
        return self.freeze().less_than_or_equal(value)

    def greater_than(self, value: Any) -> bool:
        return self.freeze().greater_than(value)

    def greater_than_or_equal(self, value: Any) -> bool:
        return self.freeze().greater_than_or_equal(value)

    def __eq__(self, other: object) -> bool:
        return self.freeze().__eq__(other)

    def __lt__(self, other: object) -> bool:
        return self.freeze().__lt__(other)

    def __le__(self, other: object) -> bool:
        return self.freeze().__le__(other)

    def __gt__(self, other: object) -> bool:
        return self.freeze().__gt__(other)

    def __ge__(self, other: object) -> bool:
        return self.freeze().__ge__(other)

    def __bool__(self) -> bool:
        return self._units != 0
