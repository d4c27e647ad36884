"""DecimalValue: an exact IEEE-754 Decimal128 number.

A DecimalValue is one of four kinds: NaN, signed Infinity, signed zero, or a
finite non-zero value with at most 34 significant digits. Arithmetic is done
exactly on rationals; the exact result then passes through the reducer,
which applies the rounding mode, overflow and underflow rules.

Usage pattern:
    from decimal128 import DecimalValue

    a = DecimalValue("0.1")
    b = DecimalValue("0.2")
    str(a + b)                                   # "0.3"
    DecimalValue(1).divide(3).to_fixed(digits=4)  # "0.3333"
    DecimalValue("123.456").round(0, "ceil")     # DecimalValue('124')

Values are immutable; every operation returns a new value (or an operand
that is already the answer).
"""

from __future__ import annotations

import math
from typing import Any

from decimal128.config import DEFAULT_CONFIG, DecimalConfig
from decimal128.constants import (
    INFINITY_TOKEN,
    MAX_FRACTION_DIGITS,
    NAN_TOKEN,
    NEGATIVE_INFINITY_TOKEN,
    NORMAL_EXPONENT_MIN,
)
from decimal128.errors import DecimalRangeError, DecimalTypeError
from decimal128.formatting import (
    pad_fraction,
    render_exponential,
    render_plain,
    render_zero,
    round_significant,
)
from decimal128.options import coerce_format_options
from decimal128.rational import ExactRational, parse_literal
from decimal128.reducer import Cohort, Kind, Reduced, reduce, reduce_decimal
from decimal128.rounding import RoundingMode, parse_rounding_mode

__all__ = ["DecimalValue"]

# Accepted by the named arithmetic methods; operators take DecimalValue | int
Operand = Any


def _resolve_mode(rounding_mode: RoundingMode | str | None) -> RoundingMode:
    if rounding_mode is None:
        return DEFAULT_CONFIG.rounding_mode
    return parse_rounding_mode(rounding_mode)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class DecimalValue:
    """Decimal128 number with exact arithmetic.

    Construction accepts a decimal literal string (``"-1.5E+3"``, ``"1_000"``,
    ``"NaN"``, ``"Infinity"``, ``"-Infinity"``), an int, a finite float
    (converted through its shortest repr) or another DecimalValue.

    Attributes:
        kind: The Kind tag (NAN, INFINITY, ZERO or FINITE)
    """

    __slots__ = ("_kind", "_negative", "_cohort", "_rational")
    _kind: Kind
    _negative: bool
    _cohort: Cohort | None
    _rational: ExactRational | None

    def __init__(
        self,
        value: DecimalValue | str | int | float,
        *,
        rounding_mode: RoundingMode | str | None = None,
    ) -> None:
        """Create a DecimalValue.

        Args:
            value: Literal string, int, finite float, or DecimalValue to copy
            rounding_mode: Mode used if the value needs more than 34 digits

        Raises:
            DecimalSyntaxError: If a string is not a valid literal
            DecimalRangeError: If a float is NaN or infinite, or the rounding
                mode is unknown
            DecimalTypeError: For any other argument type
        """
        mode = _resolve_mode(rounding_mode)

        if isinstance(value, DecimalValue):
            self._kind = value._kind
            self._negative = value._negative
            self._cohort = value._cohort
            self._rational = value._rational
            return

        if isinstance(value, bool):
            raise DecimalTypeError("DecimalValue cannot be built from bool")
        if isinstance(value, str):
            reduced = _parse(value, mode)
        elif isinstance(value, int):
            reduced = reduce_decimal(value < 0, abs(value), 0, mode)
        elif isinstance(value, float):
            reduced = _from_float(value, mode)
        else:
            raise DecimalTypeError(f"DecimalValue requires str, int or float, got {type(value).__name__}")
        self._assign(reduced)

    def _assign(self, reduced: Reduced) -> None:
        self._kind = reduced.kind
        self._negative = reduced.negative
        self._cohort = reduced.cohort
        if reduced.cohort is not None:
            self._rational = reduced.cohort.normalized().to_rational()
        elif reduced.kind is Kind.ZERO:
            self._rational = ExactRational(0, negative=reduced.negative)
        else:
            self._rational = None

    @classmethod
    def _from_reduced(cls, reduced: Reduced) -> DecimalValue:
        result = object.__new__(cls)
        result._assign(reduced)
        return result

    @classmethod
    def from_rational(
        cls,
        value: ExactRational,
        rounding_mode: RoundingMode | str | None = None,
    ) -> DecimalValue:
        """Reduce an exact rational into the Decimal128 domain."""
        return cls._from_reduced(reduce(value, _resolve_mode(rounding_mode)))

    @classmethod
    def nan(cls) -> DecimalValue:
        return cls._from_reduced(Reduced.nan())

    @classmethod
    def infinity(cls, negative: bool = False) -> DecimalValue:
        return cls._from_reduced(Reduced.infinity(negative))

    @classmethod
    def zero(cls, negative: bool = False) -> DecimalValue:
        return cls._from_reduced(Reduced.zero(negative))

    # --- Accessors ---

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def rational(self) -> ExactRational | None:
        """Exact value, or None for NaN and Infinity."""
        return self._rational

    def _exact(self) -> ExactRational:
        if self._rational is None:
            raise DecimalRangeError(f"{self.to_string()} has no exact value")
        return self._rational

    def _finite_cohort(self) -> Cohort:
        if self._cohort is None:
            raise DecimalRangeError(f"{self.to_string()} has no coefficient and exponent")
        return self._cohort

    def __repr__(self) -> str:
        return f"DecimalValue('{self.to_string()}')"

    def __str__(self) -> str:
        return self.to_string()

    def __hash__(self) -> int:
        if self._kind is Kind.NAN:
            return hash(Kind.NAN)
        if self._kind is Kind.INFINITY:
            return hash((Kind.INFINITY, self._negative))
        return hash(self._exact())

    # --- Predicates ---

    def is_nan(self) -> bool:
        return self._kind is Kind.NAN

    def is_finite(self) -> bool:
        """True for zero and finite non-zero values."""
        return self._kind is Kind.ZERO or self._kind is Kind.FINITE

    def is_infinite(self) -> bool:
        return self._kind is Kind.INFINITY

    def is_zero(self) -> bool:
        return self._kind is Kind.ZERO

    def is_negative(self) -> bool:
        """Sign bit; True for -0 and -Infinity, False for NaN."""
        return self._negative

    # --- Arithmetic ---

    def add(self, other: Operand, *, rounding_mode: RoundingMode | str | None = None) -> DecimalValue:
        """Sum, rounded into the Decimal128 domain.

        An exact zero sum of non-zero operands is +0; two zeros give -0
        only when both are negative.
        """
        other = _coerce(other)
        mode = _resolve_mode(rounding_mode)
        if self._kind is Kind.NAN or other._kind is Kind.NAN:
            return DecimalValue.nan()
        if self._kind is Kind.INFINITY:
            if other._kind is Kind.INFINITY and other._negative != self._negative:
                return DecimalValue.nan()
            return self
        if other._kind is Kind.INFINITY:
            return other
        if self._kind is Kind.ZERO and other._kind is Kind.ZERO:
            return DecimalValue.zero(self._negative and other._negative)

        total = self._exact().add(other._exact())
        if total.is_zero():
            return DecimalValue.zero()
        return DecimalValue.from_rational(total, mode)

    def subtract(self, other: Operand, *, rounding_mode: RoundingMode | str | None = None) -> DecimalValue:
        """Difference, rounded into the Decimal128 domain.

        An exact zero difference takes the sign of the minuend.
        """
        other = _coerce(other)
        mode = _resolve_mode(rounding_mode)
        if self._kind is Kind.NAN or other._kind is Kind.NAN:
            return DecimalValue.nan()
        if self._kind is Kind.INFINITY:
            if other._kind is Kind.INFINITY and other._negative == self._negative:
                return DecimalValue.nan()
            return self
        if other._kind is Kind.INFINITY:
            return other.negate()

        difference = self._exact().subtract(other._exact())
        if difference.is_zero():
            return DecimalValue.zero(self._negative)
        return DecimalValue.from_rational(difference, mode)

    def multiply(self, other: Operand, *, rounding_mode: RoundingMode | str | None = None) -> DecimalValue:
        """Product; the sign is the XOR of the operand signs. 0 * Infinity is NaN."""
        other = _coerce(other)
        mode = _resolve_mode(rounding_mode)
        if self._kind is Kind.NAN or other._kind is Kind.NAN:
            return DecimalValue.nan()

        negative = self._negative ^ other._negative
        if self._kind is Kind.INFINITY or other._kind is Kind.INFINITY:
            if self._kind is Kind.ZERO or other._kind is Kind.ZERO:
                return DecimalValue.nan()
            return DecimalValue.infinity(negative)
        if self._kind is Kind.ZERO or other._kind is Kind.ZERO:
            return DecimalValue.zero(negative)

        return DecimalValue.from_rational(self._exact().multiply(other._exact()), mode)

    def divide(self, other: Operand, *, rounding_mode: RoundingMode | str | None = None) -> DecimalValue:
        """Quotient, rounded into the Decimal128 domain.

        Division by zero (of any value, Infinity included) is NaN, as is
        Infinity / Infinity. A finite value divided by Infinity is a zero
        carrying the XOR of the signs.
        """
        other = _coerce(other)
        mode = _resolve_mode(rounding_mode)
        if self._kind is Kind.NAN or other._kind is Kind.NAN:
            return DecimalValue.nan()
        if other._kind is Kind.ZERO:
            return DecimalValue.nan()

        negative = self._negative ^ other._negative
        if self._kind is Kind.INFINITY:
            if other._kind is Kind.INFINITY:
                return DecimalValue.nan()
            return DecimalValue.infinity(negative)
        if other._kind is Kind.INFINITY or self._kind is Kind.ZERO:
            return DecimalValue.zero(negative)

        return DecimalValue.from_rational(self._exact().divide(other._exact()), mode)

    def remainder(self, other: Operand, *, rounding_mode: RoundingMode | str | None = None) -> DecimalValue:
        """Truncated remainder: self - trunc(self / other) * other.

        Each step is a DecimalValue operation, so the quotient and product
        are rounded to 34 digits along the way.
        """
        other = _coerce(other)
        mode = _resolve_mode(rounding_mode)
        if self._kind is Kind.NAN or other._kind is Kind.NAN:
            return DecimalValue.nan()
        if other._kind is Kind.ZERO or self._kind is Kind.INFINITY:
            return DecimalValue.nan()
        if other._kind is Kind.INFINITY or self._kind is Kind.ZERO:
            return self

        quotient = self.divide(other, rounding_mode=mode).round(0, RoundingMode.TRUNC)
        return self.subtract(quotient.multiply(other, rounding_mode=mode), rounding_mode=mode)

    def negate(self) -> DecimalValue:
        """Flip the sign. NaN stays NaN."""
        if self._kind is Kind.NAN:
            return self
        if self._kind is Kind.INFINITY:
            return DecimalValue.infinity(not self._negative)
        if self._kind is Kind.ZERO:
            return DecimalValue.zero(not self._negative)
        return DecimalValue._from_reduced(Reduced.finite(self._finite_cohort().negate()))

    def abs(self) -> DecimalValue:
        if self._negative:
            return self.negate()
        return self

    def scale10(self, n: int, *, rounding_mode: RoundingMode | str | None = None) -> DecimalValue:
        """Multiply by 10**n, rounding if the result leaves the domain.

        Raises:
            DecimalTypeError: If n is not an int
            DecimalRangeError: If the value is NaN or Infinity
        """
        if not _is_int(n):
            raise DecimalTypeError(f"scale10 requires int, got {type(n).__name__}")
        self._require_finite("scale10")
        mode = _resolve_mode(rounding_mode)
        if self._kind is Kind.ZERO:
            return self
        cohort = self._finite_cohort()
        return DecimalValue._from_reduced(
            reduce_decimal(cohort.negative, cohort.coefficient, cohort.exponent + n, mode)
        )

    def round(
        self,
        fraction_digits: int = 0,
        rounding_mode: RoundingMode | str | None = None,
    ) -> DecimalValue:
        """Round to ``fraction_digits`` digits after the decimal point.

        A result that rounds to zero keeps the sign of the input
        (``-0.5`` truncated is ``-0``). NaN, Infinity and zero are returned
        unchanged.

        Args:
            fraction_digits: Digits to keep after the point, 0 <= n < 2**53
            rounding_mode: Mode name or RoundingMode (default halfEven)

        Raises:
            DecimalRangeError: If fraction_digits is negative, too large or
                not an integer, or the rounding mode is unknown
        """
        if not _is_int(fraction_digits):
            raise DecimalRangeError(f"Fraction digits must be an integer, got {fraction_digits!r}")
        if fraction_digits < 0 or fraction_digits > MAX_FRACTION_DIGITS:
            raise DecimalRangeError(f"Fraction digits out of range: {fraction_digits}")
        mode = _resolve_mode(rounding_mode)

        if self._kind is not Kind.FINITE:
            return self
        # Already has no more than fraction_digits digits after the point
        if self._finite_cohort().normalized().exponent >= -fraction_digits:
            return self

        integer = self._exact().scale10(fraction_digits).round_integer(mode)
        if integer == 0:
            return DecimalValue.zero(self._negative)
        return DecimalValue.from_rational(ExactRational.from_int(integer).scale10(-fraction_digits), mode)

    # --- Comparison ---

    def compare(self, other: Operand) -> int | float:
        """Three-way comparison.

        Returns:
            -1, 0 or 1, or ``math.nan`` if either operand is NaN.
            -0 and +0 compare equal.
        """
        other = _coerce(other)
        if self._kind is Kind.NAN or other._kind is Kind.NAN:
            return math.nan
        if self._kind is Kind.INFINITY or other._kind is Kind.INFINITY:
            lhs, rhs = self._infinity_rank(), other._infinity_rank()
            if lhs != rhs:
                return -1 if lhs < rhs else 1
            if lhs != 0:
                return 0
        return self._exact().compare(other._exact())

    def _infinity_rank(self) -> int:
        if self._kind is not Kind.INFINITY:
            return 0
        return -1 if self._negative else 1

    def equals(self, other: Operand) -> bool:
        return self.compare(other) == 0

    def not_equals(self, other: Operand) -> bool:
        """True if the values differ; False whenever either is NaN."""
        result = self.compare(other)
        return not math.isnan(result) and result != 0

    def less_than(self, other: Operand) -> bool:
        return self.compare(other) < 0

    def less_than_or_equal(self, other: Operand) -> bool:
        return self.compare(other) <= 0

    def greater_than(self, other: Operand) -> bool:
        return self.compare(other) > 0

    def greater_than_or_equal(self, other: Operand) -> bool:
        return self.compare(other) >= 0

    # --- Formatting ---

    def to_string(self, config: DecimalConfig = DEFAULT_CONFIG) -> str:
        """Canonical string.

        Plain notation while the adjusted exponent lies in the configured
        band ([-40, 20] by default), exponential notation otherwise.
        Trailing zeros never appear.
        """
        special = self._special_string()
        if special is not None:
            return special
        if self._kind is Kind.ZERO:
            return "-0" if self._negative else "0"

        cohort = self._finite_cohort().normalized()
        adjusted = cohort.adjusted_exponent
        if config.plain_exponent_min <= adjusted <= config.plain_exponent_max:
            return self._exact().to_fixed()
        return render_exponential(self._negative, cohort.digits, adjusted)

    def _special_string(self) -> str | None:
        if self._kind is Kind.NAN:
            return NAN_TOKEN
        if self._kind is Kind.INFINITY:
            return NEGATIVE_INFINITY_TOKEN if self._negative else INFINITY_TOKEN
        return None

    def to_fixed(self, options: Any = None, *, digits: Any = None, config: DecimalConfig = DEFAULT_CONFIG) -> str:
        """Plain notation with a fixed number of fractional digits.

        Args:
            options: Mapping or FormatOptions with ``digits``
            digits: Shorthand for ``options={"digits": digits}``; None or
                ``math.inf`` renders the exact value
            config: Supplies the rounding mode for dropped digits

        Examples:
            DecimalValue("123.456").to_fixed(digits=4)   # "123.4560"
            DecimalValue("1.25").to_fixed(digits=1)      # "1.2"
        """
        count = coerce_format_options(options, digits).digits
        special = self._special_string()
        if special is not None:
            return special

        exact = self._exact()
        if count is None:
            return exact.to_fixed()
        if self._kind is Kind.ZERO or self._finite_cohort().normalized().exponent >= -count:
            # Exact already, only padding needed
            return pad_fraction(exact.to_fixed(), count)
        return exact.to_fixed(count, config.rounding_mode)

    def to_precision(self, options: Any = None, *, digits: Any = None, config: DecimalConfig = DEFAULT_CONFIG) -> str:
        """Render with ``digits`` significant digits.

        Exponential notation is used when the adjusted exponent of the
        rounded value is below -6 or not smaller than ``digits``. Zero is
        always plain ("0", "0.0", ...).

        Raises:
            DecimalRangeError: If digits is zero, negative or not an integer
        """
        precision = coerce_format_options(options, digits).digits
        if precision == 0:
            raise DecimalRangeError("Precision must be at least 1")
        special = self._special_string()
        if special is not None:
            return special
        if self._kind is Kind.ZERO:
            return render_zero(self._negative, 0 if precision is None else precision - 1)

        cohort = self._finite_cohort().normalized()
        if precision is None:
            precision = len(cohort.digits)
        rounded, shift = round_significant(cohort.digits, precision, self._negative, config.rounding_mode)
        adjusted = cohort.adjusted_exponent + shift
        if adjusted < config.precision_exponent_min or adjusted >= precision:
            return render_exponential(self._negative, rounded, adjusted)
        return render_plain(self._negative, rounded, adjusted)

    def to_exponential(
        self, options: Any = None, *, digits: Any = None, config: DecimalConfig = DEFAULT_CONFIG
    ) -> str:
        """Exponential notation with ``digits`` digits after the leading one.

        Without a digit count every significant digit is printed.

        Examples:
            DecimalValue(42).to_exponential()            # "4.2e+1"
            DecimalValue("123.456").to_exponential(digits=2)  # "1.23e+2"

        Raises:
            DecimalRangeError: If digits is zero, negative or not an integer
        """
        fraction_digits = coerce_format_options(options, digits).digits
        if fraction_digits == 0:
            raise DecimalRangeError("Exponential notation needs at least one fractional digit")
        special = self._special_string()
        if special is not None:
            return special
        if self._kind is Kind.ZERO:
            return render_zero(self._negative, fraction_digits or 0, exponential=True)

        cohort = self._finite_cohort().normalized()
        precision = len(cohort.digits) if fraction_digits is None else fraction_digits + 1
        rounded, shift = round_significant(cohort.digits, precision, self._negative, config.rounding_mode)
        return render_exponential(self._negative, rounded, cohort.adjusted_exponent + shift)

    # --- Introspection ---

    def _require_finite(self, operation: str) -> None:
        if self._kind is Kind.NAN:
            raise DecimalRangeError(f"Cannot compute {operation} of NaN")
        if self._kind is Kind.INFINITY:
            raise DecimalRangeError(f"Cannot compute {operation} of Infinity")

    def exponent(self) -> int:
        """Adjusted exponent, clamped below at -6143 (zero reports -6143).

        Raises:
            DecimalRangeError: For NaN and Infinity
        """
        self._require_finite("exponent")
        if self._kind is Kind.ZERO:
            return NORMAL_EXPONENT_MIN
        return max(self._finite_cohort().adjusted_exponent, NORMAL_EXPONENT_MIN)

    def mantissa(self) -> DecimalValue:
        """The value scaled into [1, 10), sign kept (-123.456 -> -1.23456).

        Raises:
            DecimalRangeError: For zero, NaN and Infinity
        """
        self._require_finite("mantissa")
        if self._kind is Kind.ZERO:
            raise DecimalRangeError("Zero does not have a mantissa")
        adjusted = self._finite_cohort().adjusted_exponent
        return DecimalValue.from_rational(self._exact().scale10(-adjusted))

    def significand(self) -> int:
        """Coefficient with trailing zeros removed (1000 -> 1, zero -> 0)."""
        self._require_finite("significand")
        if self._kind is Kind.ZERO:
            return 0
        return self._finite_cohort().normalized().coefficient

    def scaled_significand(self) -> int:
        """Coefficient as stored by the reducer (34 digits for normal values)."""
        self._require_finite("scaled significand")
        if self._kind is Kind.ZERO:
            return 0
        return self._finite_cohort().coefficient

    def is_normal(self) -> bool:
        """True if the adjusted exponent is at least -6143.

        Raises:
            DecimalRangeError: For zero, NaN and Infinity
        """
        self._require_finite("normality")
        if self._kind is Kind.ZERO:
            raise DecimalRangeError("Zero is neither normal nor subnormal")
        return self._finite_cohort().adjusted_exponent >= NORMAL_EXPONENT_MIN

    def is_subnormal(self) -> bool:
        """True if the adjusted exponent is below -6143; False for zero."""
        self._require_finite("subnormality")
        if self._kind is Kind.ZERO:
            return False
        return self._finite_cohort().adjusted_exponent < NORMAL_EXPONENT_MIN

    def to_int(self) -> int:
        """Exact integer value.

        Raises:
            DecimalRangeError: If the value is not an integer, NaN or Infinity
        """
        self._require_finite("integer value")
        exact = self._exact()
        if not exact.is_integer():
            raise DecimalRangeError(f"{self} is not an integer")
        return -exact.numerator if exact.negative else exact.numerator

    # --- Operators ---

    def __add__(self, other: DecimalValue | int) -> DecimalValue:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: int) -> DecimalValue:
        if not _is_operator_operand(other):
            return NotImplemented
        return _coerce(other).add(self)

    def __sub__(self, other: DecimalValue | int) -> DecimalValue:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: int) -> DecimalValue:
        if not _is_operator_operand(other):
            return NotImplemented
        return _coerce(other).subtract(self)

    def __mul__(self, other: DecimalValue | int) -> DecimalValue:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: int) -> DecimalValue:
        if not _is_operator_operand(other):
            return NotImplemented
        return _coerce(other).multiply(self)

    def __truediv__(self, other: DecimalValue | int) -> DecimalValue:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: int) -> DecimalValue:
        if not _is_operator_operand(other):
            return NotImplemented
        return _coerce(other).divide(self)

    def __mod__(self, other: DecimalValue | int) -> DecimalValue:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.remainder(other)

    def __rmod__(self, other: int) -> DecimalValue:
        if not _is_operator_operand(other):
            return NotImplemented
        return _coerce(other).remainder(self)

    def __neg__(self) -> DecimalValue:
        return self.negate()

    def __pos__(self) -> DecimalValue:
        return self

    def __abs__(self) -> DecimalValue:
        return self.abs()

    def __bool__(self) -> bool:
        return self._kind is not Kind.ZERO

    def __float__(self) -> float:
        raise DecimalTypeError("DecimalValue does not convert implicitly to float")

    def __int__(self) -> int:
        raise DecimalTypeError("DecimalValue does not convert implicitly to int; use to_int()")

    def __eq__(self, other: object) -> bool:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.not_equals(other)

    def __lt__(self, other: DecimalValue | int) -> bool:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: DecimalValue | int) -> bool:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other: DecimalValue | int) -> bool:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: DecimalValue | int) -> bool:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.greater_than_or_equal(other)


# =============================================================================
# Helpers
# =============================================================================


def _parse(text: str, mode: RoundingMode) -> Reduced:
    if text == NAN_TOKEN:
        return Reduced.nan()
    if text == INFINITY_TOKEN:
        return Reduced.infinity()
    if text == NEGATIVE_INFINITY_TOKEN:
        return Reduced.infinity(negative=True)
    negative, coefficient, exponent = parse_literal(text)
    return reduce_decimal(negative, coefficient, exponent, mode)


def _from_float(value: float, mode: RoundingMode) -> Reduced:
    if not math.isfinite(value):
        raise DecimalRangeError(f"DecimalValue cannot be built from non-finite float {value!r}")
    if value == 0:
        return Reduced.zero(math.copysign(1.0, value) < 0)
    negative, coefficient, exponent = parse_literal(repr(value))
    return reduce_decimal(negative, coefficient, exponent, mode)


def _is_operator_operand(value: object) -> bool:
    return isinstance(value, DecimalValue) or _is_int(value)


def _coerce(value: Operand) -> DecimalValue:
    """Accept a DecimalValue, an int or a literal string as an operand.

    Raises:
        DecimalTypeError: For any other type
    """
    if isinstance(value, DecimalValue):
        return value
    if _is_int(value) or isinstance(value, str):
        return DecimalValue(value)
    raise DecimalTypeError(f"Unsupported operand type: {type(value).__name__}")
