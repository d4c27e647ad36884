"""Decimal128 domain parameters.

Centralizes the IEEE-754-2008 Decimal128 limits and the formatting
thresholds shared by the reducer and the public value type.
"""

# Maximum number of significant digits in a coefficient
MAX_SIGNIFICANT_DIGITS = 34

# Smallest coefficient that needs all 34 digits, and the first one that
# overflows them (used for the carry-out correction after rounding)
MIN_FULL_COEFFICIENT = 10 ** (MAX_SIGNIFICANT_DIGITS - 1)
COEFFICIENT_LIMIT = 10**MAX_SIGNIFICANT_DIGITS

# Adjusted exponent (position of the most significant digit) for normal values
NORMAL_EXPONENT_MIN = -6143
NORMAL_EXPONENT_MAX = 6144

# Internal scale (exponent of the cohort) bounds
# EXPONENT_MIN = NORMAL_EXPONENT_MIN - (MAX_SIGNIFICANT_DIGITS - 1)  # subnormal floor
# EXPONENT_MAX = NORMAL_EXPONENT_MAX - (MAX_SIGNIFICANT_DIGITS - 1)
EXPONENT_MIN = -6176
EXPONENT_MAX = 6111

# Largest fractional digit count accepted by round() (2^53 - 1)
MAX_FRACTION_DIGITS = 2**53 - 1

# Largest |n| accepted by the exact ExactRational.scale10
MAX_SCALE_EXPONENT = 100_000

# to_string() renders plain notation while the adjusted exponent lies in
# [PLAIN_EXPONENT_MIN, PLAIN_EXPONENT_MAX], exponential notation otherwise
PLAIN_EXPONENT_MAX = 20
PLAIN_EXPONENT_MIN = -(MAX_SIGNIFICANT_DIGITS + 6)

# to_precision() switches to exponential notation below this adjusted exponent
PRECISION_EXPONENT_MIN = -6

# Special value spellings (case-sensitive)
NAN_TOKEN = "NaN"
INFINITY_TOKEN = "Infinity"
NEGATIVE_INFINITY_TOKEN = "-Infinity"
