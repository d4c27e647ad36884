"""String renderers for finite decimal values.

These helpers work on plain pieces (a sign, a string of significant digits
and the adjusted exponent of the first digit) so they can be shared by
``DecimalValue`` and ``ExactRational`` without importing either.
"""

from __future__ import annotations

from decimal128.rounding import RoundingMode, round_quotient

__all__ = [
    "pad_fraction",
    "render_plain",
    "render_exponential",
    "render_zero",
    "round_significant",
]


def pad_fraction(body: str, places: int) -> str:
    """Right-pad the fractional part of a plain decimal string to ``places``."""
    if places == 0:
        return body
    point = body.find(".")
    if point < 0:
        return body + "." + "0" * places
    missing = places - (len(body) - point - 1)
    return body + "0" * missing


def render_plain(negative: bool, digits: str, adjusted: int) -> str:
    """Plain notation for 0.d1d2... * 10**(adjusted + 1).

    Every digit given is printed, so trailing zeros in ``digits`` are kept.

    Examples:
        render_plain(False, "123", 0)   == "1.23"
        render_plain(False, "123", 4)   == "12300"
        render_plain(True, "5", -3)     == "-0.005"
    """
    sign = "-" if negative else ""
    count = len(digits)
    if adjusted < 0:
        return f"{sign}0.{'0' * (-adjusted - 1)}{digits}"
    if adjusted + 1 >= count:
        return f"{sign}{digits}{'0' * (adjusted + 1 - count)}"
    return f"{sign}{digits[: adjusted + 1]}.{digits[adjusted + 1 :]}"


def render_exponential(negative: bool, digits: str, adjusted: int) -> str:
    """Exponential notation d.ddd...e+N / e-N.

    Examples:
        render_exponential(False, "42", 1)   == "4.2e+1"
        render_exponential(True, "1", -7)    == "-1e-7"
    """
    sign = "-" if negative else ""
    fraction = f".{digits[1:]}" if len(digits) > 1 else ""
    exponent_sign = "+" if adjusted >= 0 else "-"
    return f"{sign}{digits[0]}{fraction}e{exponent_sign}{abs(adjusted)}"


def render_zero(negative: bool, fraction_digits: int, exponential: bool = False) -> str:
    """Zero with a fixed number of fractional zeros, optionally with e+0."""
    sign = "-" if negative else ""
    body = pad_fraction("0", fraction_digits)
    if exponential:
        return f"{sign}{body}e+0"
    return f"{sign}{body}"


def round_significant(
    digits: str,
    precision: int,
    negative: bool,
    mode: RoundingMode,
) -> tuple[str, int]:
    """Round a significant-digit string to ``precision`` digits.

    Shorter inputs are padded with zeros. When rounding carries out of the
    top digit (999 -> 1000) the digits become 100... and the returned shift
    is 1, meaning the adjusted exponent grows by one.

    Args:
        digits: Significant digits, first digit non-zero
        precision: Number of digits wanted (>= 1)
        negative: Sign of the value, mirrors floor/ceil
        mode: Rounding mode

    Returns:
        Tuple (rounded digits, exponent shift)
    """
    if precision >= len(digits):
        return digits + "0" * (precision - len(digits)), 0

    divisor = 10 ** (len(digits) - precision)
    quotient, remainder = divmod(int(digits), divisor)
    rounded = round_quotient(quotient, remainder, divisor, mode.mirrored() if negative else mode)
    if rounded == 10**precision:
        return "1" + "0" * (precision - 1), 1
    return str(rounded), 0
