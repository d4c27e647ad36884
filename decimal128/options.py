"""Formatting options accepted by to_fixed, to_precision and to_exponential.

Options are given as a mapping (``{"digits": 4}``) or a ``FormatOptions``
instance. Only ``digits`` is recognised; any other key is ignored.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, ValidationError

from decimal128.errors import DecimalRangeError, DecimalTypeError

__all__ = [
    "FormatOptions",
    "coerce_format_options",
    "validate_digit_count",
]


def validate_digit_count(value: Any) -> int | None:
    """Validate a digit count.

    Args:
        value: Non-negative integer, an integral float, ``math.inf`` or None

    Returns:
        The digit count as int, or None for "unbounded" (None or +inf)

    Raises:
        ValueError: If value is negative, fractional, NaN or not a number
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("Digit count must be a number, got bool")
    if isinstance(value, float):
        if value == math.inf:
            return None
        if not value.is_integer():
            raise ValueError(f"Digit count must be an integer: {value}")
        value = int(value)
    if not isinstance(value, int):
        raise ValueError(f"Digit count must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Digit count cannot be negative: {value}")
    return value


# Non-negative digit count, None meaning "natural" / unbounded
DigitCount = Annotated[
    int | None,
    BeforeValidator(validate_digit_count),
    Field(description="Number of digits, None for the natural count"),
]


class FormatOptions(BaseModel):
    """Options for the fixed, precision and exponential renderers."""

    model_config = {"frozen": True, "extra": "ignore"}

    digits: DigitCount = None


def coerce_format_options(options: Any = None, digits: Any = None) -> FormatOptions:
    """Turn the user-facing options argument into FormatOptions.

    Args:
        options: None, a mapping or a FormatOptions instance
        digits: Keyword shorthand for ``{"digits": digits}``

    Returns:
        Validated FormatOptions

    Raises:
        DecimalTypeError: If options is not a mapping, or both options and
            digits are given
        DecimalRangeError: If the digit count is invalid
    """
    if options is not None and digits is not None:
        raise DecimalTypeError("Pass either an options mapping or digits, not both")
    if options is None:
        options = {} if digits is None else {"digits": digits}

    if isinstance(options, FormatOptions):
        return options
    if not isinstance(options, Mapping):
        raise DecimalTypeError(f"Format options must be a mapping, got {type(options).__name__}")

    try:
        return FormatOptions.model_validate(dict(options))
    except ValidationError as err:
        message = err.errors()[0]["msg"]
        raise DecimalRangeError(f"Invalid format options: {message}") from err
