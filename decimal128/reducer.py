"""Reduction of exact values into the Decimal128 domain.

Every finite result (parsed literals and arithmetic alike) passes through
``reduce``, which is the only place where precision loss, overflow and
underflow are decided:

1. Zero is returned as a signed zero.
2. A negative value is reduced as its magnitude with the mirrored rounding
   mode (floor <-> ceil) and negated back, so one rounding table serves
   both signs.
3. For a positive value with adjusted exponent e, the target scale is
   te = max(e - 33, -6176): 34 significant digits, or fewer for subnormals.
4. The value is scaled by 10**-te and rounded to an integer coefficient.
5. A coefficient of exactly 10**34 (carry out of the top digit) becomes
   10**33 with te + 1.
6. te > 6111 overflows to Infinity; a zero coefficient underflows to zero.
7. Otherwise the result is the cohort coefficient * 10**te.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from decimal128.constants import (
    COEFFICIENT_LIMIT,
    EXPONENT_MAX,
    EXPONENT_MIN,
    MAX_SIGNIFICANT_DIGITS,
    MIN_FULL_COEFFICIENT,
    NORMAL_EXPONENT_MAX,
)
from decimal128.rational import ExactRational, digit_count
from decimal128.rounding import DEFAULT_ROUNDING_MODE, RoundingMode

__all__ = [
    "Kind",
    "Cohort",
    "Reduced",
    "reduce",
    "reduce_decimal",
]

logger = structlog.get_logger()


class Kind(Enum):
    """The four cases of a Decimal128 value."""

    NAN = "nan"
    INFINITY = "infinity"
    ZERO = "zero"
    FINITE = "finite"


@dataclass(frozen=True)
class Cohort:
    """A finite non-zero value written as coefficient * 10**exponent.

    Attributes:
        coefficient: Positive integer with at most 34 digits
        exponent: Power of ten applied to the coefficient (the quantum)
        negative: Sign of the value
    """

    coefficient: int
    exponent: int
    negative: bool = False

    @property
    def digits(self) -> str:
        """Coefficient digits as a string (at most 34 characters)."""
        return str(self.coefficient)

    @property
    def adjusted_exponent(self) -> int:
        """Power-of-ten position of the most significant digit."""
        return self.exponent + len(self.digits) - 1

    def normalized(self) -> Cohort:
        """Same value with trailing zeros moved from coefficient to exponent."""
        coefficient, exponent = self.coefficient, self.exponent
        while coefficient % 10 == 0:
            coefficient //= 10
            exponent += 1
        return Cohort(coefficient, exponent, self.negative)

    def negate(self) -> Cohort:
        return Cohort(self.coefficient, self.exponent, not self.negative)

    def to_rational(self) -> ExactRational:
        return ExactRational(self.coefficient, negative=self.negative).scale10(self.exponent)


@dataclass(frozen=True)
class Reduced:
    """Outcome of a reduction: one of the four value kinds.

    Examples:
        Reduced.zero(negative=True)        # -0
        Reduced.infinity()                 # +Infinity
        Reduced.finite(Cohort(12, -1))     # 1.2
    """

    kind: Kind
    negative: bool = False
    cohort: Cohort | None = None

    @classmethod
    def nan(cls) -> Reduced:
        return cls(kind=Kind.NAN)

    @classmethod
    def infinity(cls, negative: bool = False) -> Reduced:
        return cls(kind=Kind.INFINITY, negative=negative)

    @classmethod
    def zero(cls, negative: bool = False) -> Reduced:
        return cls(kind=Kind.ZERO, negative=negative)

    @classmethod
    def finite(cls, cohort: Cohort) -> Reduced:
        return cls(kind=Kind.FINITE, negative=cohort.negative, cohort=cohort)

    def negated(self) -> Reduced:
        """Flip the sign; NaN stays NaN."""
        if self.kind is Kind.NAN:
            return self
        if self.cohort is not None:
            return Reduced.finite(self.cohort.negate())
        return Reduced(kind=self.kind, negative=not self.negative)


def reduce(value: ExactRational, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Reduced:
    """Force an exact value into the Decimal128 domain.

    Args:
        value: Any exact rational
        mode: Rounding mode applied when digits must be dropped

    Returns:
        Signed zero, signed Infinity, or a finite cohort with at most 34
        digits and exponent in [-6176, 6111]
    """
    if value.is_zero():
        return Reduced.zero(value.negative)

    if value.negative:
        return reduce(value.negate(), mode.mirrored()).negated()

    adjusted = value.ilog10()
    if adjusted > NORMAL_EXPONENT_MAX:
        # te = adjusted - 33 > 6111 whatever the rounding does
        logger.debug("decimal128_overflow", adjusted_exponent=adjusted, rounding_mode=mode.value)
        return Reduced.infinity()

    exponent = max(adjusted - (MAX_SIGNIFICANT_DIGITS - 1), EXPONENT_MIN)
    coefficient = value.scale10(-exponent).round_positive(mode)

    if coefficient == COEFFICIENT_LIMIT:
        exponent += 1
        coefficient = MIN_FULL_COEFFICIENT

    if exponent > EXPONENT_MAX:
        logger.debug("decimal128_overflow", adjusted_exponent=adjusted, rounding_mode=mode.value)
        return Reduced.infinity()

    if coefficient == 0:
        logger.debug("decimal128_underflow", adjusted_exponent=adjusted, rounding_mode=mode.value)
        return Reduced.zero()

    return Reduced.finite(Cohort(coefficient, exponent))


def reduce_decimal(
    negative: bool,
    coefficient: int,
    exponent: int,
    mode: RoundingMode = DEFAULT_ROUNDING_MODE,
) -> Reduced:
    """Reduce the value (-1)**negative * coefficient * 10**exponent.

    Exponents far outside the domain are handled without building the
    corresponding power of ten: anything above the largest finite magnitude
    overflows directly, and anything below a tenth of the smallest subnormal
    quantum is replaced by 10**(EXPONENT_MIN - 2), which every rounding mode
    treats the same way (zero, or one quantum for ceil). Coefficients longer
    than 36 digits are cut to their 35 leading digits plus a sticky digit
    that is 1 when anything nonzero was dropped; the rounding position is
    never past the 35th digit, so every mode rounds the same way.

    Args:
        negative: Sign of the value
        coefficient: Non-negative integer coefficient (any length)
        exponent: Power of ten (any size)
        mode: Rounding mode

    Returns:
        The reduced value
    """
    if coefficient == 0:
        return Reduced.zero(negative)

    count = digit_count(coefficient)
    adjusted = exponent + count - 1
    if adjusted > NORMAL_EXPONENT_MAX:
        logger.debug("decimal128_overflow", adjusted_exponent=adjusted, rounding_mode=mode.value)
        return Reduced.infinity(negative)
    if adjusted < EXPONENT_MIN - 1:
        coefficient, exponent = 1, EXPONENT_MIN - 2
    elif count > MAX_SIGNIFICANT_DIGITS + 2:
        # Keep 35 leading digits plus a sticky digit for anything dropped
        dropped = count - (MAX_SIGNIFICANT_DIGITS + 1)
        head, tail = divmod(coefficient, 10**dropped)
        coefficient = head * 10 + (1 if tail else 0)
        exponent += dropped - 1

    return reduce(ExactRational(coefficient, negative=negative).scale10(exponent), mode)
