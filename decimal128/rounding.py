"""Rounding modes and the rounding decision procedure.

The decision procedure works on a non-negative truncation triple
(quotient, remainder, divisor), i.e. a value ``quotient + remainder/divisor``
with ``0 <= remainder < divisor``. Negative values are never rounded
directly: callers round the magnitude with the mirrored mode and negate the
result, so the table below only has to be right for one direction.
"""

from __future__ import annotations

from enum import Enum

from decimal128.errors import DecimalRangeError

__all__ = [
    "RoundingMode",
    "DEFAULT_ROUNDING_MODE",
    "parse_rounding_mode",
    "round_quotient",
]


class RoundingMode(str, Enum):
    """The five supported rounding modes."""

    CEIL = "ceil"
    FLOOR = "floor"
    TRUNC = "trunc"
    HALF_EXPAND = "halfExpand"
    HALF_EVEN = "halfEven"

    def mirrored(self) -> RoundingMode:
        """Mode to apply to the magnitude of a negative value.

        floor and ceil swap, every other mode is symmetric around zero.
        """
        if self is RoundingMode.CEIL:
            return RoundingMode.FLOOR
        if self is RoundingMode.FLOOR:
            return RoundingMode.CEIL
        return self


DEFAULT_ROUNDING_MODE = RoundingMode.HALF_EVEN


def parse_rounding_mode(value: RoundingMode | str | None) -> RoundingMode:
    """Resolve a rounding mode given by value or by name.

    Args:
        value: A RoundingMode, one of its names ("halfEven", "ceil", ...),
            or None for the default mode

    Returns:
        The matching RoundingMode

    Raises:
        DecimalRangeError: If the name is not a supported rounding mode
    """
    if value is None:
        return DEFAULT_ROUNDING_MODE
    if isinstance(value, RoundingMode):
        return value
    if isinstance(value, str):
        try:
            return RoundingMode(value)
        except ValueError:
            pass
    raise DecimalRangeError(f"Unsupported rounding mode: {value!r}")


def round_quotient(quotient: int, remainder: int, divisor: int, mode: RoundingMode) -> int:
    """Pick floor or floor + 1 for a non-negative truncation triple.

    Args:
        quotient: Integer part (floor) of the value, non-negative
        remainder: Fractional numerator, 0 <= remainder < divisor
        divisor: Fractional denominator, positive
        mode: Rounding mode to apply

    Returns:
        The rounded integer

    Examples:
        round_quotient(2, 1, 2, RoundingMode.HALF_EVEN) == 2   # 2.5
        round_quotient(3, 1, 2, RoundingMode.HALF_EVEN) == 4   # 3.5
        round_quotient(0, 1, 2, RoundingMode.HALF_EXPAND) == 1  # 0.5
    """
    if remainder == 0:
        return quotient

    if mode is RoundingMode.FLOOR or mode is RoundingMode.TRUNC:
        return quotient
    if mode is RoundingMode.CEIL:
        return quotient + 1

    # Half modes: compare the fractional part against exactly one half
    twice = 2 * remainder
    if twice > divisor:
        return quotient + 1
    if twice < divisor:
        return quotient
    if mode is RoundingMode.HALF_EXPAND:
        return quotient + 1
    # HALF_EVEN: exact tie goes to the even neighbour
    return quotient + (quotient & 1)
