"""Tests for formatting options."""

import math

import pytest
from pydantic import ValidationError

from decimal128.errors import DecimalRangeError, DecimalTypeError
from decimal128.options import FormatOptions, coerce_format_options, validate_digit_count


class TestValidateDigitCount:
    """Tests for validate_digit_count."""

    def test_valid(self):
        """Non-negative integers pass through."""
        assert validate_digit_count(0) == 0
        assert validate_digit_count(12) == 12

    def test_unbounded(self):
        """None and +inf mean unbounded."""
        assert validate_digit_count(None) is None
        assert validate_digit_count(math.inf) is None

    def test_integral_float(self):
        """Integral floats are accepted."""
        assert validate_digit_count(3.0) == 3

    @pytest.mark.parametrize("value", [-1, 1.5, -math.inf, math.nan, "3", True, [1]])
    def test_invalid(self, value):
        """Everything else is rejected."""
        with pytest.raises(ValueError):
            validate_digit_count(value)


class TestFormatOptions:
    """Tests for the FormatOptions model."""

    def test_default(self):
        """digits defaults to None."""
        assert FormatOptions().digits is None

    def test_extra_ignored(self):
        """Unknown keys are dropped."""
        options = FormatOptions.model_validate({"digits": 2, "style": "x"})
        assert options.digits == 2

    def test_frozen(self):
        """Options are immutable."""
        options = FormatOptions(digits=2)
        with pytest.raises(ValidationError):
            options.digits = 3  # type: ignore

    def test_invalid(self):
        """Invalid digit counts fail validation."""
        with pytest.raises(ValidationError):
            FormatOptions(digits=-1)


class TestCoerceFormatOptions:
    """Tests for coerce_format_options."""

    def test_none(self):
        """No options means default options."""
        assert coerce_format_options() == FormatOptions()

    def test_mapping(self):
        """Mappings are validated."""
        assert coerce_format_options({"digits": 4}).digits == 4

    def test_instance(self):
        """FormatOptions instances pass through."""
        options = FormatOptions(digits=1)
        assert coerce_format_options(options) is options

    def test_digits_shorthand(self):
        """digits= builds options."""
        assert coerce_format_options(digits=5).digits == 5

    def test_invalid_is_range_error(self):
        """Validation errors become DecimalRangeError."""
        with pytest.raises(DecimalRangeError) as exc_info:
            coerce_format_options({"digits": 1.5})
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_non_mapping_is_type_error(self):
        """Non-mapping options are a type error."""
        with pytest.raises(DecimalTypeError):
            coerce_format_options("flab")

    def test_both_is_type_error(self):
        """Options and digits together are a type error."""
        with pytest.raises(DecimalTypeError):
            coerce_format_options({"digits": 1}, digits=1)
