"""Tests for ExactRational and literal parsing."""

import pytest

from decimal128.errors import DecimalRangeError, DecimalSyntaxError, DecimalTypeError
from decimal128.rational import ExactRational, decimal_digits, digit_count, parse_literal
from decimal128.rounding import RoundingMode


class TestParseLiteral:
    """Tests for parse_literal."""

    def test_integer(self):
        """Plain integers have exponent zero."""
        assert parse_literal("42") == (False, 42, 0)

    def test_fraction(self):
        """Fraction digits lower the exponent."""
        assert parse_literal("-1.20") == (True, 120, -2)

    def test_exponent(self):
        """Exponents add to the fraction exponent."""
        assert parse_literal("4.2E+9") == (False, 42, 8)
        assert parse_literal("4.2e-9") == (False, 42, -10)

    def test_leading_point(self):
        """A literal may start with the decimal point."""
        assert parse_literal(".5") == (False, 5, -1)
        assert parse_literal("-.5") == (True, 5, -1)

    def test_underscores(self):
        """Underscores between digits are ignored."""
        assert parse_literal("1_000.000_1") == (False, 10000001, -4)

    def test_long_literal(self):
        """Literals longer than the int() digit limit parse exactly."""
        negative, coefficient, exponent = parse_literal("1" + "0" * 5000)
        assert coefficient == 10**5000
        assert exponent == 0

    @pytest.mark.parametrize(
        "text",
        ["", " 42", "42 ", ".", "+.", "-.", "+", "-", "howdy", "1__0", "_1", "1_", "1e", "1.2.3", "0x10", "NaN8275"],
    )
    def test_invalid(self, text):
        """Malformed literals raise DecimalSyntaxError."""
        with pytest.raises(DecimalSyntaxError):
            parse_literal(text)

    def test_not_a_string(self):
        """Non-string input raises DecimalTypeError."""
        with pytest.raises(DecimalTypeError):
            parse_literal(42)  # type: ignore


class TestDigitCount:
    """Tests for digit_count."""

    def test_small(self):
        """Single digits, including zero."""
        assert digit_count(0) == 1
        assert digit_count(9) == 1

    def test_powers_of_ten(self):
        """Boundaries around powers of ten."""
        for k in (1, 2, 33, 34, 6144, 10000):
            assert digit_count(10**k - 1) == k
            assert digit_count(10**k) == k + 1


class TestDecimalDigits:
    """Tests for the lazy digit stream."""

    def test_terminating(self):
        """Terminating expansions stop at the last digit."""
        assert "".join(decimal_digits(328, 100)) == "3.28"

    def test_below_one(self):
        """Values below one start with a zero."""
        assert "".join(decimal_digits(1, 8)) == "0.125"

    def test_integer(self):
        """Integers emit no point."""
        assert "".join(decimal_digits(1200, 1)) == "1200"

    def test_limit(self):
        """Non-terminating expansions stop at the limit."""
        assert "".join(decimal_digits(1, 3, 5)) == "0.33333"

    def test_is_lazy(self):
        """Only the requested digits are computed."""
        stream = decimal_digits(1, 3)
        assert [next(stream) for _ in range(4)] == ["0", ".", "3", "3"]


class TestExactRationalConstruction:
    """Tests for ExactRational construction."""

    def test_reduced(self):
        """Fractions are reduced by their gcd."""
        r = ExactRational(6, 4)
        assert (r.numerator, r.denominator) == (3, 2)

    def test_sign_folding(self):
        """Operand signs fold into the negative flag."""
        assert ExactRational(-1, 2).negative
        assert not ExactRational(-1, -2).negative
        assert ExactRational(1, 2, negative=True).negative

    def test_negative_zero(self):
        """Negative zero is representable."""
        z = ExactRational(0, negative=True)
        assert z.is_zero()
        assert z.negative

    def test_zero_denominator(self):
        """Zero denominator is a range error."""
        with pytest.raises(DecimalRangeError):
            ExactRational(1, 0)

    def test_invalid_type(self):
        """Non-integer parts are rejected."""
        with pytest.raises(DecimalTypeError):
            ExactRational(1.5)  # type: ignore
        with pytest.raises(DecimalTypeError):
            ExactRational(True)  # type: ignore

    def test_from_string(self):
        """Literals parse exactly."""
        assert ExactRational.from_string("1.25") == ExactRational(5, 4)
        assert ExactRational.from_string("-0").negative

    def test_from_int(self):
        """Integers keep their sign."""
        assert ExactRational.from_int(-7) == -7


class TestExactRationalArithmetic:
    """Tests for exact arithmetic."""

    def test_add(self):
        """0.1 + 0.2 is exactly 0.3."""
        total = ExactRational.from_string("0.1") + ExactRational.from_string("0.2")
        assert total == ExactRational.from_string("0.3")

    def test_zero_sum_is_positive(self):
        """An exact zero sum is positive."""
        assert not (ExactRational(1) + ExactRational(-1)).negative
        assert not (ExactRational(-1) - ExactRational(-1)).negative

    def test_multiply_sign(self):
        """Product sign is the XOR of the operand signs."""
        assert (ExactRational(-2) * ExactRational(3)) == -6
        assert (ExactRational(0, negative=True) * ExactRational(3)).negative

    def test_divide(self):
        """Division is exact."""
        assert ExactRational(41, 10) / ExactRational(125, 100) == ExactRational(328, 100)

    def test_divide_by_zero(self):
        """Division by zero is a range error."""
        with pytest.raises(DecimalRangeError):
            ExactRational(1) / ExactRational(0)

    def test_scale10(self):
        """scale10 multiplies by a power of ten."""
        assert ExactRational(5).scale10(3) == 5000
        assert ExactRational(5).scale10(-1) == ExactRational(1, 2)

    def test_scale10_limits(self):
        """Excessive scales and non-int scales are rejected."""
        with pytest.raises(DecimalRangeError):
            ExactRational(1).scale10(10**6)
        with pytest.raises(DecimalTypeError):
            ExactRational(1).scale10(1.5)  # type: ignore

    def test_compare(self):
        """compare gives a total order with -0 == 0."""
        assert ExactRational(1, 3).compare(ExactRational(1, 2)) == -1
        assert ExactRational(0, negative=True).compare(ExactRational(0)) == 0
        assert ExactRational(-1).compare(ExactRational(-2)) == 1

    def test_ilog10(self):
        """ilog10 is the position of the leading digit."""
        assert ExactRational(999).ilog10() == 2
        assert ExactRational(1000).ilog10() == 3
        assert ExactRational(1, 1000).ilog10() == -3
        assert ExactRational(999, 1000).ilog10() == -1

    def test_ilog10_zero(self):
        """ilog10 of zero is undefined."""
        with pytest.raises(DecimalRangeError):
            ExactRational(0).ilog10()

    def test_hash_matches_int(self):
        """Integer-valued rationals hash like int."""
        assert hash(ExactRational(10, 2)) == hash(5)


class TestExactRationalRounding:
    """Tests for rounding to integers."""

    def test_round_positive(self):
        """round_positive applies the mode to non-negative values."""
        assert ExactRational(5, 2).round_positive(RoundingMode.HALF_EVEN) == 2
        assert ExactRational(5, 2).round_positive(RoundingMode.HALF_EXPAND) == 3
        assert ExactRational(21, 10).round_positive(RoundingMode.CEIL) == 3

    def test_round_positive_rejects_negative(self):
        """Negative values are a range error."""
        with pytest.raises(DecimalRangeError):
            ExactRational(-1, 2).round_positive(RoundingMode.FLOOR)

    def test_round_integer_mirrors(self):
        """Negative values round with the mirrored mode."""
        assert ExactRational(-21, 10).round_integer(RoundingMode.FLOOR) == -3
        assert ExactRational(-21, 10).round_integer(RoundingMode.CEIL) == -2
        assert ExactRational(-5, 2).round_integer(RoundingMode.HALF_EVEN) == -2


class TestExactRationalToFixed:
    """Tests for plain rendering."""

    def test_exact(self):
        """None renders the full terminating expansion."""
        assert ExactRational.from_string("-123.456").to_fixed() == "-123.456"

    def test_non_terminating(self):
        """None on a non-terminating value is a range error."""
        with pytest.raises(DecimalRangeError):
            ExactRational(1, 3).to_fixed()

    def test_rounded(self):
        """Digit counts round and pad."""
        assert ExactRational(1, 3).to_fixed(5) == "0.33333"
        assert ExactRational(2, 3).to_fixed(2) == "0.67"
        assert ExactRational(42).to_fixed(1) == "42.0"

    def test_negative_mirrors_mode(self):
        """floor on a negative value rounds away from zero."""
        assert ExactRational(-1, 3).to_fixed(1, RoundingMode.FLOOR) == "-0.4"

    def test_invalid_digits(self):
        """Negative digit counts are rejected."""
        with pytest.raises(DecimalRangeError):
            ExactRational(1).to_fixed(-1)

    def test_huge_integer(self):
        """Integers beyond the str() digit limit still render."""
        assert ExactRational(10**6000).to_fixed() == "1" + "0" * 6000
