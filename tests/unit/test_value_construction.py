"""Tests for DecimalValue construction."""

import math

import pytest

from decimal128 import DecimalValue, Kind, RoundingMode
from decimal128.errors import DecimalRangeError, DecimalSyntaxError, DecimalTypeError


class TestConstructFromString:
    """Tests for construction from literal strings."""

    def test_normalizes_trailing_zeros(self):
        """Trailing zeros are dropped."""
        assert str(DecimalValue("1.20")) == "1.2"
        assert str(DecimalValue("1000")) == "1000"
        assert str(DecimalValue("00")) == "0"

    def test_negative_zero(self):
        """Negative zero is preserved."""
        d = DecimalValue("-0.0")
        assert d.is_zero()
        assert d.is_negative()
        assert str(d) == "-0"

    def test_leading_plus(self):
        """A leading plus sign is accepted."""
        assert str(DecimalValue("+42")) == "42"

    def test_underscores(self):
        """Underscores between digits are ignored."""
        assert str(DecimalValue("1_000.5")) == "1000.5"

    def test_exponent(self):
        """Exponents are applied."""
        assert str(DecimalValue("4.2E+3")) == "4200"
        assert str(DecimalValue("4.2e-3")) == "0.0042"

    def test_special_tokens(self):
        """NaN, Infinity and -Infinity are recognised."""
        assert DecimalValue("NaN").is_nan()
        assert DecimalValue("Infinity").kind is Kind.INFINITY
        assert DecimalValue("-Infinity").is_negative()

    @pytest.mark.parametrize(
        "text",
        [
            "",
            " 42",
            ".",
            "+.",
            "-.",
            "+",
            "-",
            "howdy",
            "NaN8275",
            "-NaN",
            "nan",
            "inf",
            "-inf",
            "infinity",
            "+Infinity",
            "INFINITY",
        ],
    )
    def test_syntax_errors(self, text):
        """Malformed literals and misspelled tokens raise DecimalSyntaxError."""
        with pytest.raises(DecimalSyntaxError):
            DecimalValue(text)


class TestConstructRounding:
    """Tests for rounding on construction."""

    def test_34_digits_half_even(self):
        """A tie at the 35th digit goes to the even neighbour."""
        d = DecimalValue("1234567890123456789012345678901234.5")
        assert d.to_fixed() == "1234567890123456789012345678901234"

    def test_more_digits_than_storable(self):
        """Digits beyond the 34th are rounded away."""
        d = DecimalValue("123456789123456789123456789123456789")
        assert d.to_fixed(digits=math.inf) == "123456789123456789123456789123456800"

    def test_rounding_mode_argument(self):
        """The rounding mode applies to construction."""
        text = "1234567890123456789012345678901234.1"
        assert DecimalValue(text, rounding_mode="ceil").to_fixed() == "1234567890123456789012345678901235"
        assert DecimalValue(text, rounding_mode=RoundingMode.FLOOR).to_fixed() == "1234567890123456789012345678901234"

    def test_unknown_rounding_mode(self):
        """An unknown rounding mode is a range error."""
        with pytest.raises(DecimalRangeError):
            DecimalValue("1", rounding_mode="cool")

    def test_huge_exponent_overflows(self):
        """An exponent far beyond the domain gives Infinity."""
        assert str(DecimalValue("123E100000")) == "Infinity"
        assert str(DecimalValue("-123E100000")) == "-Infinity"

    def test_tiny_exponent_underflows(self):
        """An exponent far below the domain gives zero."""
        assert str(DecimalValue("123E-100000")) == "0"
        assert str(DecimalValue("-123E-100000")) == "-0"

    def test_long_fraction(self):
        """More than 100000 fractional digits still round to 34 digits."""
        text = "1." + "0" * 100_001 + "1"
        assert str(DecimalValue(text)) == "1"
        assert str(DecimalValue(text, rounding_mode="ceil")) == "1." + "0" * 32 + "1"
        assert str(DecimalValue("-" + text, rounding_mode="floor")) == "-1." + "0" * 32 + "1"

    def test_long_fraction_tie(self):
        """A tie followed by many zeros stays a tie; a late nonzero digit breaks it."""
        tie = "1." + "0" * 33 + "5" + "0" * 100_000
        assert str(DecimalValue(tie)) == "1"
        assert str(DecimalValue(tie + "1")) == "1." + "0" * 32 + "1"

    def test_long_coefficient_with_exponent(self):
        """A long coefficient scaled back by its exponent is exact."""
        assert str(DecimalValue("1" + "0" * 100_001 + "E-100001")) == "1"

    def test_largest_exponent(self):
        """123E+6112 is still finite."""
        assert str(DecimalValue("123E+6112")) == "1.23e+6114"

    def test_overflow_boundary(self):
        """1E+6145 overflows while 1E+6144 does not."""
        assert str(DecimalValue("1E+6144")) == "1e+6144"
        assert str(DecimalValue("1E+6145")) == "Infinity"


class TestConstructFromNumbers:
    """Tests for construction from int, float and DecimalValue."""

    def test_from_int(self):
        """Integers convert exactly."""
        assert str(DecimalValue(42)) == "42"
        assert str(DecimalValue(-42)) == "-42"

    def test_from_big_int(self):
        """Integers longer than 34 digits are rounded."""
        d = DecimalValue(123456789012345678901234567890123456789)
        assert str(d) == "1.234567890123456789012345678901235e+38"

    def test_from_float(self):
        """Floats convert through their shortest repr."""
        assert str(DecimalValue(0.1)) == "0.1"
        assert str(DecimalValue(-1.5)) == "-1.5"
        assert str(DecimalValue(1e16)) == "10000000000000000"

    def test_from_negative_zero_float(self):
        """-0.0 becomes negative zero."""
        assert str(DecimalValue(-0.0)) == "-0"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_float(self, value):
        """NaN and infinite floats are a range error."""
        with pytest.raises(DecimalRangeError):
            DecimalValue(value)

    def test_copy(self):
        """A DecimalValue copies another."""
        original = DecimalValue("-1.5")
        assert DecimalValue(original) == original

    @pytest.mark.parametrize("value", [True, None, [1], {"a": 1}, b"1"])
    def test_invalid_type(self, value):
        """Other types are rejected."""
        with pytest.raises(DecimalTypeError):
            DecimalValue(value)  # type: ignore
