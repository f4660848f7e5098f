"""
Core math modules для graphmath

Скалярные соглашения и размерно-независимые формулы, общие для всех
векторных и матричных модулей.
"""

from graphmath.core.math import kernels

# Numerical Safeguards
from graphmath.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ROUND_DIGITS_MAX,
    ROUND_DIGITS_MIN,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    is_close,
    is_zero,
    # Safe reciprocal
    reciprocal_or_none,
    # Rounding
    round_half_away,
    # Validation
    validate_digits,
    validate_in_range,
)

__all__ = [
    # Kernels
    "kernels",
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "ROUND_DIGITS_MAX",
    "ROUND_DIGITS_MIN",
    # NaN/Inf checks
    "is_valid_float",
    # Epsilon comparisons
    "is_close",
    "is_zero",
    # Safe reciprocal
    "reciprocal_or_none",
    # Rounding
    "round_half_away",
    # Validation
    "validate_digits",
    "validate_in_range",
]
