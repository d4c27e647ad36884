"""Error types raised by the decimal128 package.

Every error is raised synchronously at the point of misuse. Each class also
derives from the matching builtin so callers can catch either:

- DecimalSyntaxError (ValueError): malformed numeric literal text
- DecimalRangeError (ValueError): argument outside its documented domain
- DecimalTypeError (TypeError): wrong argument shape, implicit coercion
"""

from __future__ import annotations

__all__ = [
    "DecimalError",
    "DecimalSyntaxError",
    "DecimalRangeError",
    "DecimalTypeError",
]


class DecimalError(Exception):
    """Base class for decimal128 errors."""

    pass


class DecimalSyntaxError(DecimalError, ValueError):
    """Numeric literal could not be parsed."""

    pass


class DecimalRangeError(DecimalError, ValueError):
    """Argument or operand is outside the supported domain.

    Raised for negative or non-integer digit counts, unknown rounding modes,
    scales too large to process, and operations that are undefined on NaN
    or Infinity (exponent, mantissa, integer conversion, ...).
    """

    pass


class DecimalTypeError(DecimalError, TypeError):
    """Argument has the wrong type, or implicit numeric coercion was attempted."""

    pass
