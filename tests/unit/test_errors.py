"""Tests for the error hierarchy."""

from yadecimal import ConversionError, DivisionByZero


class TestConversionError:
    """Tests for ConversionError."""

    def test_is_value_error(self):
        """Callers catching ValueError also catch conversion failures."""
        assert issubclass(ConversionError, ValueError)

    def test_carries_input(self):
        """The offending input is kept on the error."""
        error = ConversionError("bad input", value={"a": 1})
        assert str(error) == "bad input"
        assert error.value == {"a": 1}
        assert error.cause is None

    def test_cause_is_chained_exception(self):
        """cause mirrors the exception given to raise ... from."""
        try:
            try:
                int("x")
            except ValueError as err:
                raise ConversionError("bad input", value="x") from err
        except ConversionError as error:
            assert isinstance(error.cause, ValueError)


class TestDivisionByZero:
    """Tests for DivisionByZero."""

    def test_hierarchy(self):
        """Division by zero is a conversion failure and a ZeroDivisionError."""
        assert issubclass(DivisionByZero, ConversionError)
        assert issubclass(DivisionByZero, ZeroDivisionError)

    def test_divisor(self):
        """divisor is the original input that normalized to zero."""
        error = DivisionByZero("Division by zero", value="0.00")
        assert error.divisor == "0.00"
        assert error.value == "0.00"
