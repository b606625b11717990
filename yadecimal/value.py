"""Immutable fixed-point decimal value.

DecimalValue stores a signed amount with a fixed number of fractional digits
(its precision, default 6). Arithmetic never goes through binary floating
point: values are scaled integers and results are truncated to the receiver's
precision.

Usage:
    from yadecimal import DecimalValue

    price = DecimalValue.from_("123.456")       # 123.456000
    total = price.times(3).plus("0.5")          # 370.868000
    total.round(2).format(currency_symbol="$")  # "$370.870000"
    total.json_serialize()                      # {"value": "370.868000", "precision": 6}
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from yadecimal import fixed_point
from yadecimal.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from yadecimal.constants import CENTS_PER_DOLLAR, CURRENCY_PRECISION, DEFAULT_PRECISION
from yadecimal.errors import ConversionError
from yadecimal.fixed_point import ScaledUnits, SupportsScaledUnits
from yadecimal.formatting import format_decimal_string
from yadecimal.models import DecimalRecord

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

    from yadecimal.mutable import MutableDecimalValue

logger = structlog.get_logger()

# Operand types accepted by the Python operators (+, ==, < ...). The named
# methods (plus, equals, ...) additionally accept decimal strings.
_NUMERIC_OPERANDS = (int, float, Decimal, SupportsScaledUnits)


class DecimalValue:
    """Immutable decimal with a fixed number of fractional digits.

    All binary operations convert the right-hand operand at the receiver's
    precision and return a new DecimalValue at that precision. Comparisons
    against another decimal value use the finer of the two precisions.

    Attributes:
        precision: Number of fractional digits (read-only)
    """

    __slots__ = ("_units", "_precision")
    _units: int
    _precision: int

    def __init__(self, value: Any = "0", precision: int = DEFAULT_PRECISION) -> None:
        """Create a value, truncating or padding it to `precision` digits.

        Raises:
            ConversionError: If `value` is not a decimal number
        """
        precision = max(0, precision)
        object.__setattr__(self, "_units", fixed_point.parse(value, precision).units)
        object.__setattr__(self, "_precision", precision)

    @classmethod
    def _from_units(cls, units: int, precision: int) -> DecimalValue:
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_units", units)
        object.__setattr__(instance, "_precision", precision)
        return instance

    # --- Construction ---

    @classmethod
    def from_(cls, mixed: Any, precision: int | None = None) -> DecimalValue:
        """Create a DecimalValue from any supported input.

        A decimal value input is rescaled directly, keeping its own precision
        when none is requested. Anything else is parsed at `precision`
        (default 6).

        Raises:
            ConversionError: If `mixed` is not a decimal number
        """
        if isinstance(mixed, SupportsScaledUnits):
            scaled = mixed.scaled_units()
            target = scaled.scale if precision is None else max(0, precision)
            return cls._from_units(scaled.rescale(target).units, target)
        return cls(mixed, DEFAULT_PRECISION if precision is None else precision)

    @classmethod
    def from_no_throw(cls, mixed: Any, precision: int | None = None) -> DecimalValue:
        """Like from_(), but unconvertible input yields zero instead of raising."""
        try:
            return cls.from_(mixed, precision)
        except ConversionError as err:
            logger.warning(
                "decimal_conversion_failed",
                raw_value=repr(mixed),
                error=str(err),
                using_default="0",
                precision=precision,
            )
            return cls(0, DEFAULT_PRECISION if precision is None else precision)

    @classmethod
    def from_json(cls, json: Any, precision: int | None = None) -> DecimalValue:
        """Rebuild a value from its JSON form.

        Args:
            json: A ``{"value", "precision"}`` mapping, a DecimalRecord, an
                object with ``value``/``precision`` attributes, or a bare
                scalar (handled by from_())
            precision: Overrides the record's precision when given

        Raises:
            ConversionError: If the record is malformed or the scalar is not
                a decimal number
        """
        if isinstance(json, (str, int, float, Decimal, SupportsScaledUnits)):
            return cls.from_(json, precision)

        if isinstance(json, DecimalRecord):
            record = json
        elif isinstance(json, Mapping):
            record = _validate_record(json)
        elif hasattr(json, "value") and hasattr(json, "precision"):
            record = _validate_record(json, from_attributes=True)
        else:
            return cls.from_(json, precision)

        return cls(record.value, record.precision if precision is None else precision)

    # --- Representation ---

    def scaled_units(self) -> ScaledUnits:
        """The raw fixed-point representation."""
        return ScaledUnits(self._units, self._precision)

    @property
    def precision(self) -> int:
        """Number of fractional digits."""
        return self._precision

    def value(self, precision: int | None = None) -> str:
        """The decimal string, optionally re-expressed at another precision.

        Re-expressing at a lower precision truncates.
        """
        if precision is None:
            return fixed_point.render(self._units, self._precision)
        precision = max(0, precision)
        return fixed_point.render(fixed_point.rescale(self._units, self._precision, precision), precision)

    def value_trimmed(self, precision: int | None = None) -> str:
        """The decimal string without trailing fractional zeros.

        For display only; serialization always uses the exact digits.

        Examples:
            "123.450000" -> "123.45"
            "100.000000" -> "100"
        """
        text = self.value(precision)
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    def copy(self, precision: int | None = None) -> DecimalValue:
        """Copy, optionally at another precision."""
        return DecimalValue.from_(self, precision)

    def to_precision(self, precision: int) -> DecimalValue:
        return self.copy(max(0, precision))

    def to_mutable(self) -> MutableDecimalValue:
        """An accumulator starting from this value."""
        from yadecimal.mutable import MutableDecimalValue

        return MutableDecimalValue.from_(self)

    def __str__(self) -> str:
        return self.value()

    def __repr__(self) -> str:
        return f"DecimalValue('{self.value()}', precision={self._precision})"

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"DecimalValue is immutable (cannot set {name!r})")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"DecimalValue is immutable (cannot delete {name!r})")

    def __reduce__(self) -> tuple[Any, ...]:
        return (DecimalValue, (self.value(), self._precision))

    def __copy__(self) -> DecimalValue:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> DecimalValue:
        return self

    # --- Arithmetic ---

    def _operand(self, value: Any) -> int:
        """Units of `value` at this precision."""
        return fixed_point.parse(value, self._precision).units

    def _new(self, units: int) -> DecimalValue:
        return DecimalValue._from_units(units, self._precision)

    def plus(self, value: Any) -> DecimalValue:
        return self._new(fixed_point.add(self._units, self._operand(value)))

    def minus(self, value: Any) -> DecimalValue:
        return self._new(fixed_point.sub(self._units, self._operand(value)))

    def times(self, factor: Any) -> DecimalValue:
        return self._new(fixed_point.mul(self._units, self._operand(factor), self._precision))

    def divided_by(self, divisor: Any) -> DecimalValue:
        """Divide, truncating the quotient at this precision.

        Raises:
            DivisionByZero: If `divisor` normalizes to zero at this precision
        """
        units = fixed_point.div(self._units, self._operand(divisor), self._precision, divisor=divisor)
        return self._new(units)

    over = divided_by

    def modulus(self, divisor: Any) -> DecimalValue:
        """Remainder of truncated division; takes the sign of this value.

        Raises:
            DivisionByZero: If `divisor` normalizes to zero at this precision
        """
        return self._new(fixed_point.mod(self._units, self._operand(divisor), divisor=divisor))

    def reciprocal(self) -> DecimalValue:
        """1 / self.

        Raises:
            DivisionByZero: If this value is zero
        """
        one = 10**self._precision
        return self._new(fixed_point.div(one, self._units, self._precision, divisor=self))

    def negated(self) -> DecimalValue:
        return self._new(-self._units)

    def absolute(self) -> DecimalValue:
        return self._new(abs(self._units))

    def __add__(self, other: object) -> DecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self.plus(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> DecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other: object) -> DecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self._new(fixed_point.sub(self._operand(other), self._units))

    def __mul__(self, other: object) -> DecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self.times(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> DecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self.divided_by(other)

    def __rtruediv__(self, other: object) -> DecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self._new(fixed_point.div(self._operand(other), self._units, self._precision, divisor=self))

    def __mod__(self, other: object) -> DecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self.modulus(other)

    def __rmod__(self, other: object) -> DecimalValue:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self._new(fixed_point.mod(self._operand(other), self._units, divisor=self))

    def __neg__(self) -> DecimalValue:
        return self.negated()

    def __pos__(self) -> DecimalValue:
        return self

    def __abs__(self) -> DecimalValue:
        return self.absolute()

    # --- Comparison ---

    def _compare(self, value: Any) -> int:
        if isinstance(value, SupportsScaledUnits):
            other = value.scaled_units()
        else:
            other = fixed_point.parse(value, self._precision)
        return fixed_point.compare(self.scaled_units(), other)

    def equals(self, value: Any) -> bool:
        return self._compare(value) == 0

    def not_equals(self, value: Any) -> bool:
        return self._compare(value) != 0

    def less_than(self, value: Any) -> bool:
        return self._compare(value) < 0

    def less_than_or_equal(self, value: Any) -> bool:
        return self._compare(value) <= 0

    def greater_than(self, value: Any) -> bool:
        return self._compare(value) > 0

    def greater_than_or_equal(self, value: Any) -> bool:
        return self._compare(value) >= 0

    def min(self, value: Any) -> DecimalValue:
        """The smaller of self and `value`, at this precision."""
        other = self._operand(value)
        return self._new(self._units if self._units < other else other)

    def max(self, value: Any) -> DecimalValue:
        """The larger of self and `value`, at this precision."""
        other = self._operand(value)
        return self._new(self._units if self._units > other else other)

    def clamp(self, lower: Any, upper: Any) -> DecimalValue:
        """Limit to [lower, upper].

        The lower bound is applied first, so when lower > upper the result
        is `upper`.
        """
        return self.max(lower).min(upper)

    def _exact_compare(self, other: Any) -> int:
        """Three-way comparison against the operand's exact value.

        Unlike _compare, float and Decimal operands are not truncated to this
        precision first: DecimalValue("0.1") is not equal to the float 0.1.

        Raises:
            TypeError: If `other` is NaN or infinite
        """
        if isinstance(other, SupportsScaledUnits):
            return fixed_point.compare(self.scaled_units(), other.scaled_units())
        try:
            exact = Fraction(other)
        except (ValueError, OverflowError) as err:
            raise TypeError(f"Cannot order DecimalValue against {other!r}") from err
        own = Fraction(self._units, 10**self._precision)
        return (own > exact) - (own < exact)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        try:
            return self._exact_compare(other) == 0
        except TypeError:
            # NaN and infinities equal nothing
            return False

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self._exact_compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self._exact_compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self._exact_compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, _NUMERIC_OPERANDS):
            return NotImplemented
        return self._exact_compare(other) >= 0

    def __hash__(self) -> int:
        # Consistent with __eq__: equal values at different precisions hash
        # alike, as do equal ints, floats and Decimals
        return hash(Fraction(self._units, 10**self._precision))

    # --- Rounding ---

    def round(self, precision: int = 0) -> DecimalValue:
        """Round half away from zero to `precision` digits.

        The result keeps this value's precision; digits beyond `precision`
        become zero.
        """
        return self._new(fixed_point.round_half_away(self._units, self._precision, precision))

    def floor(self) -> DecimalValue:
        """Round toward negative infinity to a whole number."""
        return self._new(fixed_point.floor(self._units, self._precision))

    def ceil(self) -> DecimalValue:
        """Round toward positive infinity to a whole number."""
        return self._new(fixed_point.ceil(self._units, self._precision))

    def is_integer(self) -> bool:
        return self.equals(self.floor())

    def __round__(self, ndigits: int | None = None) -> DecimalValue | int:
        if ndigits is None:
            return self.round(0).to_integer()
        return self.round(ndigits)

    def __floor__(self) -> int:
        return self.floor().to_integer()

    def __ceil__(self) -> int:
        return self.ceil().to_integer()

    def __trunc__(self) -> int:
        return self.to_integer()

    # --- Inspection ---

    def is_positive(self) -> bool:
        return self._units > 0

    def is_negative(self) -> bool:
        return self._units < 0

    def is_zero(self) -> bool:
        return self._units == 0

    def is_zero_or_positive(self) -> bool:
        return self._units >= 0

    def is_zero_or_negative(self) -> bool:
        return self._units <= 0

    def is_non_zero(self) -> bool:
        return self._units != 0

    def __bool__(self) -> bool:
        return self._units != 0

    # --- Conversion ---

    def to_integer(self) -> int:
        """Whole part, truncated toward zero."""
        return fixed_point.rescale(self._units, self._precision, 0)

    def to_float(self) -> float:
        """Nearest float. Lossy; for interop only."""
        return float(self.value())

    def to_decimal(self) -> Decimal:
        """Exact stdlib Decimal."""
        return Decimal(self.value())

    def __int__(self) -> int:
        return self.to_integer()

    def __float__(self) -> float:
        return self.to_float()

    def dollars_to_cents(self) -> str:
        """Whole cents as a digit string: "128.49" -> "12849".

        Digits below one cent are truncated. dollars_to_cents() and
        cents_to_dollars() are exact inverses only for values that sit on
        whole-cent boundaries; callers are responsible for that.
        """
        return self.times(CENTS_PER_DOLLAR).value(0)

    def cents_to_dollars(self) -> str:
        """Dollars with two fraction digits: "12849" -> "128.49"."""
        working = self.to_precision(max(self._precision, CURRENCY_PRECISION))
        return working.divided_by(CENTS_PER_DOLLAR).value(CURRENCY_PRECISION)

    # --- Formatting ---

    def format(
        self,
        precision: int | None = None,
        decimal_point: str | None = None,
        thousands_separator: str | None = None,
        currency_symbol: str | None = None,
        positive_format: str | None = None,
        negative_format: str | None = None,
        zero_format: str | None = None,
        *,
        config: FormatConfig | None = None,
    ) -> str:
        """Render for display with digit grouping and sign templates.

        Arguments left as None fall back to `config` (default
        DEFAULT_FORMAT_CONFIG). See FormatConfig for the template syntax.

        Examples:
            DecimalValue(12345678, 0).format() -> "12,345,678"
            DecimalValue(-1, 0).format(None, ".", ",", "$") -> "-$1"
        """
        overrides = {
            "decimal_point": decimal_point,
            "thousands_separator": thousands_separator,
            "currency_symbol": currency_symbol,
            "positive_format": positive_format,
            "negative_format": negative_format,
            "zero_format": zero_format,
        }
        config = dataclasses.replace(
            config or DEFAULT_FORMAT_CONFIG,
            **{key: setting for key, setting in overrides.items() if setting is not None},
        )
        return format_decimal_string(self.value(precision), config)

    # --- Serialization ---

    def to_record(self) -> DecimalRecord:
        return DecimalRecord(value=self.value(), precision=self._precision)

    def json_serialize(self) -> dict[str, Any]:
        """The wire form: ``{"value": <exact digits>, "precision": <int>}``."""
        return self.to_record().model_dump()

    def to_json(self) -> str:
        return self.to_record().model_dump_json()

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        """Allow DecimalValue as a pydantic field type.

        Input goes through from_json(); output is the wire record.
        """
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls.from_json,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda v: v.json_serialize()),
        )


def _validate_record(data: Any, from_attributes: bool = False) -> DecimalRecord:
    """Validate a wire record, reporting failures as ConversionError."""
    try:
        return DecimalRecord.model_validate(data, from_attributes=from_attributes)
    except ValidationError as err:
        raise ConversionError(f"Invalid decimal record: {data!r}", value=data) from err
