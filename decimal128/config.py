"""Configuration for decimal arithmetic and formatting."""

from dataclasses import dataclass

from decimal128.constants import PLAIN_EXPONENT_MAX, PLAIN_EXPONENT_MIN, PRECISION_EXPONENT_MIN
from decimal128.rounding import DEFAULT_ROUNDING_MODE, RoundingMode


@dataclass(frozen=True)
class DecimalConfig:
    """Defaults shared by DecimalValue operations.

    Attributes:
        rounding_mode: Mode used when an operation is not given one
            (default: halfEven)
        plain_exponent_min: Smallest adjusted exponent that to_string()
            renders in plain notation (default: -40)
        plain_exponent_max: Largest adjusted exponent that to_string()
            renders in plain notation (default: 20)
        precision_exponent_min: to_precision() switches to exponential
            notation below this adjusted exponent (default: -6)
    """

    rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE

    # Notation thresholds
    plain_exponent_min: int = PLAIN_EXPONENT_MIN
    plain_exponent_max: int = PLAIN_EXPONENT_MAX
    precision_exponent_min: int = PRECISION_EXPONENT_MIN


# Default configuration instance
DEFAULT_CONFIG = DecimalConfig()
