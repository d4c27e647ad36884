"""Exact rational numbers with an explicit sign.

ExactRational is a reduced fraction of two arbitrary-precision integers. The
sign is stored as a separate boolean and the numerator is always
non-negative, which lets the fraction represent negative zero when a caller
needs it. Instances are immutable; every operation builds a new value.

Decimal strings are produced on demand by long division (see
``decimal_digits``), so a value such as 1/3 can be rendered to any digit
length without ever materialising its infinite expansion. Big integers are
never passed through ``str()``: CPython refuses to convert integers with
more than a few thousand digits, and Decimal128 values reach 6145 digits.

Usage pattern:
    from decimal128.rational import ExactRational

    a = ExactRational.from_string("0.1")
    b = ExactRational.from_string("0.2")
    (a + b).to_fixed()        # "0.3"
    ExactRational(1, 3).to_fixed(5)   # "0.33333"
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from math import gcd

from decimal128.constants import MAX_SCALE_EXPONENT
from decimal128.errors import DecimalRangeError, DecimalSyntaxError, DecimalTypeError
from decimal128.formatting import pad_fraction
from decimal128.rounding import DEFAULT_ROUNDING_MODE, RoundingMode, round_quotient

__all__ = [
    "ExactRational",
    "decimal_digits",
    "digit_count",
    "parse_literal",
]

# Digit runs may contain single underscores between two digits ("1_000")
_DIGIT_RUN = r"[0-9](?:_?[0-9])*"

_LITERAL_RE = re.compile(
    rf"(?P<sign>[+-])?"
    rf"(?:(?P<int>{_DIGIT_RUN})(?:\.(?P<frac>{_DIGIT_RUN})?)?|\.(?P<frac_only>{_DIGIT_RUN}))"
    rf"(?:[eE](?P<exp>[+-]?[0-9]+))?"
)

# int() refuses longer digit strings on current CPython, so convert in chunks
_INT_CHUNK = 1000
_INT_STR_LIMIT = 10**_INT_CHUNK

_DIGIT_CHARS = "0123456789"


# =============================================================================
# Integer helpers
# =============================================================================


def _digits_to_int(digits: str) -> int:
    """Convert a string of ASCII digits of any length to an int."""
    if len(digits) <= _INT_CHUNK:
        return int(digits)
    value = 0
    for start in range(0, len(digits), _INT_CHUNK):
        chunk = digits[start : start + _INT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def digit_count(n: int) -> int:
    """Number of decimal digits of a non-negative integer (1 for zero).

    Uses the bit length to get a lower bound, then corrects upward, so it
    works for integers of any size.
    """
    if n < 10:
        return 1
    # 30102999566 / 10**11 is slightly below log10(2), so 10**count <= n holds
    count = ((n.bit_length() - 1) * 30102999566) // 10**11
    while n >= 10 ** (count + 1):
        count += 1
    return count + 1


def _floor_log10(numerator: int, denominator: int) -> int:
    """floor(log10(numerator / denominator)) for positive integers.

    With a digits in the numerator and b in the denominator the quotient lies
    in (10**(a-b-1), 10**(a-b+1)), so the answer is a-b or a-b-1.
    """
    estimate = digit_count(numerator) - digit_count(denominator)
    if estimate >= 0:
        reached = numerator >= denominator * 10**estimate
    else:
        reached = numerator * 10**-estimate >= denominator
    return estimate if reached else estimate - 1


def _int_str(n: int) -> str:
    """Decimal string of a non-negative integer of any size."""
    if n < _INT_STR_LIMIT:
        return str(n)
    return "".join(decimal_digits(n, 1))


# =============================================================================
# Digit emission
# =============================================================================


def decimal_digits(numerator: int, denominator: int, limit: int | None = None) -> Iterator[str]:
    """Lazily yield the decimal expansion of numerator / denominator.

    This is plain long division. Integer digits come first (a single "0"
    when the value is below one). The first time the running dividend drops
    below the divisor after the integer part, a "." marker is yielded; each
    further step multiplies the dividend by ten and yields one fractional
    digit. The stream ends when the remainder reaches zero (terminating
    expansion) or when ``limit`` fractional digits have been produced.

    The generator only keeps the remainder, the divisor and whether the
    point has been emitted; call this function again to restart.

    Args:
        numerator: Non-negative dividend
        denominator: Positive divisor
        limit: Maximum number of fractional digits, None for no limit
            (only safe for terminating expansions)

    Yields:
        Single-character strings: "0".."9" or "."
    """
    if numerator >= denominator:
        places = _floor_log10(numerator, denominator)
        divisor = denominator * 10**places
        while True:
            digit, numerator = divmod(numerator, divisor)
            yield _DIGIT_CHARS[digit]
            if places == 0:
                break
            divisor //= 10
            places -= 1
    else:
        yield "0"

    emitted = 0
    point_emitted = False
    while numerator and (limit is None or emitted < limit):
        if not point_emitted:
            yield "."
            point_emitted = True
        numerator *= 10
        digit, numerator = divmod(numerator, denominator)
        yield _DIGIT_CHARS[digit]
        emitted += 1


# =============================================================================
# Literal parsing
# =============================================================================


def parse_literal(text: str) -> tuple[bool, int, int]:
    """Split a decimal literal into (negative, coefficient, exponent).

    Grammar: optional "+" or "-", digits with an optional single ".", at
    least one digit overall, optional "e"/"E" exponent with optional sign.
    Underscores are accepted strictly between two digits and ignored.

    Args:
        text: Literal such as "-123.45", "1_000", "4.2E+9" or ".5"

    Returns:
        Tuple (negative, coefficient, exponent) with
        value = (-1)**negative * coefficient * 10**exponent

    Raises:
        DecimalTypeError: If text is not a string
        DecimalSyntaxError: If text is not a valid literal
    """
    if not isinstance(text, str):
        raise DecimalTypeError(f"Decimal literal must be str, got {type(text).__name__}")

    match = _LITERAL_RE.fullmatch(text)
    if match is None:
        raise DecimalSyntaxError(f"Invalid decimal literal: {text!r}")

    integer_part = (match.group("int") or "").replace("_", "")
    fraction_part = (match.group("frac") or match.group("frac_only") or "").replace("_", "")
    exponent_text = match.group("exp")

    coefficient = _digits_to_int(integer_part + fraction_part)
    exponent = -len(fraction_part)
    if exponent_text is not None:
        sign = -1 if exponent_text.startswith("-") else 1
        exponent += sign * _digits_to_int(exponent_text.lstrip("+-"))

    return match.group("sign") == "-", coefficient, exponent


# =============================================================================
# ExactRational
# =============================================================================


class ExactRational:
    """Reduced fraction with an explicit sign.

    Invariants: denominator > 0, numerator >= 0, and
    gcd(numerator, denominator) == 1. The sign lives in ``negative``, so
    ``ExactRational(0, negative=True)`` is a negative zero.

    Attributes:
        numerator: Non-negative numerator (read-only)
        denominator: Positive denominator (read-only)
        negative: True if the value carries a minus sign (read-only)
    """

    __slots__ = ("_negative", "_numerator", "_denominator")
    _negative: bool
    _numerator: int
    _denominator: int

    def __init__(self, numerator: int, denominator: int = 1, *, negative: bool = False) -> None:
        """Create a reduced fraction.

        The signs of numerator and denominator are folded into ``negative``.

        Args:
            numerator: Integer numerator, any sign
            denominator: Integer denominator, any sign, non-zero
            negative: Extra sign flag (XOR-ed with the operand signs)

        Raises:
            DecimalTypeError: If numerator or denominator is not an int
            DecimalRangeError: If denominator is zero
        """
        for part in (numerator, denominator):
            if isinstance(part, bool) or not isinstance(part, int):
                raise DecimalTypeError(f"ExactRational requires int, got {type(part).__name__}")
        if denominator == 0:
            raise DecimalRangeError("ExactRational denominator must be non-zero")

        negative = bool(negative) ^ (numerator < 0) ^ (denominator < 0)
        numerator, denominator = abs(numerator), abs(denominator)
        divisor = gcd(numerator, denominator)
        self._negative = negative
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor

    @classmethod
    def _from_reduced(cls, negative: bool, numerator: int, denominator: int) -> ExactRational:
        """Build from parts already known to satisfy the invariants."""
        result = object.__new__(cls)
        result._negative = negative
        result._numerator = numerator
        result._denominator = denominator
        return result

    @classmethod
    def from_int(cls, value: int) -> ExactRational:
        """Create from an integer.

        Raises:
            DecimalTypeError: If value is not an int
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecimalTypeError(f"ExactRational.from_int requires int, got {type(value).__name__}")
        return cls._from_reduced(value < 0, abs(value), 1)

    @classmethod
    def from_string(cls, text: str) -> ExactRational:
        """Parse a decimal literal exactly.

        Raises:
            DecimalSyntaxError: If text is not a valid literal
            DecimalRangeError: If the exponent is too large to process
        """
        negative, coefficient, exponent = parse_literal(text)
        if coefficient == 0:
            return cls._from_reduced(negative, 0, 1)
        return cls._from_reduced(negative, coefficient, 1).scale10(exponent)

    # --- Accessors ---

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def negative(self) -> bool:
        return self._negative

    def _signed_numerator(self) -> int:
        return -self._numerator if self._negative else self._numerator

    def __repr__(self) -> str:
        return f"ExactRational({self})"

    def __str__(self) -> str:
        sign = "-" if self._negative else ""
        if self._denominator == 1:
            return f"{sign}{_int_str(self._numerator)}"
        return f"{sign}{_int_str(self._numerator)}/{_int_str(self._denominator)}"

    def __hash__(self) -> int:
        # Integers compare equal to int, so they must hash like int
        if self._denominator == 1:
            return hash(self._signed_numerator())
        return hash((self._signed_numerator(), self._denominator))

    # --- Predicates ---

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_integer(self) -> bool:
        return self._denominator == 1

    def is_terminating(self) -> bool:
        """True if the decimal expansion is finite (denominator is 2^a * 5^b)."""
        denominator = self._denominator
        for factor in (2, 5):
            while denominator % factor == 0:
                denominator //= factor
        return denominator == 1

    # --- Arithmetic ---

    def add(self, other: ExactRational) -> ExactRational:
        """Exact sum. A zero result is positive."""
        return ExactRational(
            self._signed_numerator() * other._denominator + other._signed_numerator() * self._denominator,
            self._denominator * other._denominator,
        )

    def subtract(self, other: ExactRational) -> ExactRational:
        """Exact difference. A zero result is positive."""
        return ExactRational(
            self._signed_numerator() * other._denominator - other._signed_numerator() * self._denominator,
            self._denominator * other._denominator,
        )

    def multiply(self, other: ExactRational) -> ExactRational:
        """Exact product; the sign is the XOR of the operand signs."""
        return ExactRational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
            negative=self._negative ^ other._negative,
        )

    def divide(self, other: ExactRational) -> ExactRational:
        """Exact quotient.

        Raises:
            DecimalRangeError: If other is zero
        """
        if other._numerator == 0:
            raise DecimalRangeError(f"Division by zero: {self} / {other}")
        return ExactRational(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
            negative=self._negative ^ other._negative,
        )

    def scale10(self, n: int) -> ExactRational:
        """Multiply by 10**n exactly.

        Raises:
            DecimalTypeError: If n is not an int
            DecimalRangeError: If |n| exceeds MAX_SCALE_EXPONENT
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise DecimalTypeError(f"scale10 requires int, got {type(n).__name__}")
        if abs(n) > MAX_SCALE_EXPONENT:
            raise DecimalRangeError(f"Scale 10**{n} is too large to process")
        if n >= 0:
            return ExactRational(self._numerator * 10**n, self._denominator, negative=self._negative)
        return ExactRational(self._numerator, self._denominator * 10**-n, negative=self._negative)

    def negate(self) -> ExactRational:
        """Flip the sign (zero included)."""
        return ExactRational._from_reduced(not self._negative, self._numerator, self._denominator)

    def abs(self) -> ExactRational:
        if not self._negative:
            return self
        return ExactRational._from_reduced(False, self._numerator, self._denominator)

    def compare(self, other: ExactRational) -> int:
        """Total order: -1, 0 or 1. Negative and positive zero compare equal."""
        lhs = self._signed_numerator() * other._denominator
        rhs = other._signed_numerator() * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    def ilog10(self) -> int:
        """Position of the most significant decimal digit of the magnitude.

        Raises:
            DecimalRangeError: If the value is zero
        """
        if self._numerator == 0:
            raise DecimalRangeError("ilog10 of zero is undefined")
        return _floor_log10(self._numerator, self._denominator)

    # --- Rounding ---

    def round_positive(self, mode: RoundingMode) -> int:
        """Round a non-negative value to an integer.

        Raises:
            DecimalRangeError: If the value is negative
        """
        if self._negative and self._numerator != 0:
            raise DecimalRangeError(f"round_positive requires a non-negative value, got {self}")
        quotient, remainder = divmod(self._numerator, self._denominator)
        return round_quotient(quotient, remainder, self._denominator, mode)

    def round_integer(self, mode: RoundingMode) -> int:
        """Round to a signed integer, mirroring the mode for negative values.

        The sign of a result that rounds to zero is lost; callers that care
        about negative zero check ``negative`` themselves.
        """
        if self._negative:
            return -self.abs().round_positive(mode.mirrored())
        return self.round_positive(mode)

    # --- Formatting ---

    def digits(self, limit: int | None = None) -> Iterator[str]:
        """Lazy digit stream of the magnitude (see ``decimal_digits``)."""
        return decimal_digits(self._numerator, self._denominator, limit)

    def to_fixed(self, digits: int | None = None, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> str:
        """Render in plain notation.

        Args:
            digits: Number of fractional digits (rounded with ``mode`` and
                zero-padded), or None for the exact terminating expansion
            mode: Rounding mode used when digits are cut off

        Returns:
            Plain decimal string, "-" prefixed for negative values

        Raises:
            DecimalRangeError: If digits is None and the expansion does not
                terminate, or digits is negative or too large
            DecimalTypeError: If digits is not an int
        """
        sign = "-" if self._negative else ""
        if digits is None:
            if not self.is_terminating():
                raise DecimalRangeError(f"{self} has no finite decimal expansion")
            return sign + "".join(self.digits())

        if isinstance(digits, bool) or not isinstance(digits, int):
            raise DecimalTypeError(f"digits must be int, got {type(digits).__name__}")
        if digits < 0:
            raise DecimalRangeError(f"digits must be non-negative, got {digits}")

        effective_mode = mode.mirrored() if self._negative else mode
        rounded = self.abs().scale10(digits).round_positive(effective_mode)
        body = "".join(decimal_digits(rounded, 10**digits, digits))
        return sign + pad_fraction(body, digits)

    # --- Operators ---

    def __add__(self, other: ExactRational | int) -> ExactRational:
        return self.add(_coerce(other))

    def __radd__(self, other: int) -> ExactRational:
        return _coerce(other).add(self)

    def __sub__(self, other: ExactRational | int) -> ExactRational:
        return self.subtract(_coerce(other))

    def __rsub__(self, other: int) -> ExactRational:
        return _coerce(other).subtract(self)

    def __mul__(self, other: ExactRational | int) -> ExactRational:
        return self.multiply(_coerce(other))

    def __rmul__(self, other: int) -> ExactRational:
        return _coerce(other).multiply(self)

    def __truediv__(self, other: ExactRational | int) -> ExactRational:
        return self.divide(_coerce(other))

    def __rtruediv__(self, other: int) -> ExactRational:
        return _coerce(other).divide(self)

    def __neg__(self) -> ExactRational:
        return self.negate()

    def __abs__(self) -> ExactRational:
        return self.abs()

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (ExactRational, int)) and not isinstance(other, bool):
            return self.compare(_coerce(other)) == 0
        return NotImplemented

    def __lt__(self, other: ExactRational | int) -> bool:
        return self.compare(_coerce(other)) < 0

    def __le__(self, other: ExactRational | int) -> bool:
        return self.compare(_coerce(other)) <= 0

    def __gt__(self, other: ExactRational | int) -> bool:
        return self.compare(_coerce(other)) > 0

    def __ge__(self, other: ExactRational | int) -> bool:
        return self.compare(_coerce(other)) >= 0


def _coerce(value: ExactRational | int) -> ExactRational:
    """Accept an ExactRational or an int operand."""
    if isinstance(value, ExactRational):
        return value
    return ExactRational.from_int(value)
