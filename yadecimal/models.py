"""Pydantic model for the decimal JSON wire format.

The only persisted/exchanged representation of a decimal is:

    {"value": "-1234.560000", "precision": 6}

where ``value`` carries exactly ``precision`` fractional digits.
"""

from typing import Annotated

from pydantic import BaseModel, Field

# Signed decimal string, plain notation
DecimalString = Annotated[str, Field(pattern=r"^[+-]?[0-9]+(\.[0-9]+)?$")]


class DecimalRecord(BaseModel):
    """Serialized form of a DecimalValue."""

    value: DecimalString = Field(description="Decimal digits, exactly `precision` after the point")
    precision: int = Field(ge=0, description="Number of fractional digits")

    model_config = {"frozen": True}
