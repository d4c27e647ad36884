"""Exact Decimal128 decimal arithmetic."""

from decimal128.config import DEFAULT_CONFIG, DecimalConfig
from decimal128.errors import DecimalError, DecimalRangeError, DecimalSyntaxError, DecimalTypeError
from decimal128.options import FormatOptions
from decimal128.rational import ExactRational
from decimal128.reducer import Kind
from decimal128.rounding import RoundingMode
from decimal128.value import DecimalValue

__version__ = "0.1.0"
__all__ = [
    "DecimalValue",
    "ExactRational",
    "RoundingMode",
    "Kind",
    "FormatOptions",
    "DecimalConfig",
    "DEFAULT_CONFIG",
    "DecimalError",
    "DecimalSyntaxError",
    "DecimalRangeError",
    "DecimalTypeError",
    "__version__",
]
