"""
Core math modules для contfrac

Численные пороги и целочисленные примитивы цепных дробей.
"""

# Numerical Safeguards
from contfrac.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_APPROX_EQUAL,
    EPS_DIVISION,
    EPS_STABILITY,
    # Configuration
    DEFAULT_MAX_TERMS,
    INT64_MAX,
    INT64_MIN,
    # Float checks
    approximately_equal_floats,
    is_effectively_zero,
    is_valid_float,
    # Validation
    validate_finite,
    validate_int64,
    validate_term_count,
)

# Euclid
from contfrac.core.math.euclid import (
    compute_convergent,
    euclidean_quotients,
    gcd,
    trunc_divmod,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_APPROX_EQUAL",
    "EPS_DIVISION",
    "EPS_STABILITY",
    # Numerical Safeguards — Configuration
    "DEFAULT_MAX_TERMS",
    "INT64_MAX",
    "INT64_MIN",
    # Numerical Safeguards — Float checks
    "approximately_equal_floats",
    "is_effectively_zero",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_int64",
    "validate_term_count",
    # Euclid
    "compute_convergent",
    "euclidean_quotients",
    "gcd",
    "trunc_divmod",
]
