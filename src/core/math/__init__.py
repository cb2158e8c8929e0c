"""
Core math modules для tetration-core

Комплексная арифметика и численные примитивы с IEEE-754 семантикой.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Validity / comparisons
    is_close,
    is_valid_float,
    # Validation
    validate_finite,
)

# Complex Ops
from src.core.math.complex_ops import (
    MAX_SAFE_INTEGER,
    TWO_PI,
    Complex,
    ComplexLike,
    PowerRequest,
    complex_abs,
    complex_is_close,
    complex_pow,
    complex_sub,
    fast_pow,
    random_int,
    resolve_int_range,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Functions
    "is_close",
    "is_valid_float",
    "validate_finite",
    # Complex Ops — Constants
    "MAX_SAFE_INTEGER",
    "TWO_PI",
    # Complex Ops — Types
    "Complex",
    "ComplexLike",
    "PowerRequest",
    # Complex Ops — Functions
    "complex_abs",
    "complex_is_close",
    "complex_pow",
    "complex_sub",
    "fast_pow",
    "random_int",
    "resolve_int_range",
]
