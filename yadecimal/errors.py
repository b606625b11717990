"""Errors raised by decimal conversion and arithmetic."""

from __future__ import annotations

from typing import Any


class ConversionError(ValueError):
    """A value could not be interpreted as a decimal number.

    Attributes:
        value: The original offending input, kept for diagnostics
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value

    @property
    def cause(self) -> BaseException | None:
        """The underlying parse failure, if one was chained."""
        return self.__cause__


class DivisionByZero(ConversionError, ZeroDivisionError):
    """Division or modulus by a value that normalizes to zero.

    The offending divisor is available as ``value``.
    """

    @property
    def divisor(self) -> Any:
        return self.value
