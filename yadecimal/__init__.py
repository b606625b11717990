"""Fixed-precision decimal values with exact arithmetic and a JSON wire format."""

from yadecimal.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from yadecimal.constants import DEFAULT_PRECISION
from yadecimal.errors import ConversionError, DivisionByZero
from yadecimal.fixed_point import normalize
from yadecimal.helpers import d0, d1, d2, d2pc, d3, d4, d4pc, d5, d6, d6pc, d7, d8
from yadecimal.models import DecimalRecord
from yadecimal.mutable import MutableDecimalValue
from yadecimal.value import DecimalValue

__version__ = "0.1.0"
__all__ = [
    # Types
    "DecimalValue",
    "MutableDecimalValue",
    "DecimalRecord",
    # Errors
    "ConversionError",
    "DivisionByZero",
    # Configuration
    "DEFAULT_PRECISION",
    "DEFAULT_FORMAT_CONFIG",
    "FormatConfig",
    # Functions
    "normalize",
    "d0",
    "d1",
    "d2",
    "d3",
    "d4",
    "d5",
    "d6",
    "d7",
    "d8",
    "d2pc",
    "d4pc",
    "d6pc",
    "__version__",
]
