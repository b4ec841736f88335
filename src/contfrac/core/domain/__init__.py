"""
Domain models and value objects.

Contains the continued-fraction value type, its coefficient record,
the periodic expansion view, and the error hierarchy.
"""

from contfrac.core.domain.coefficient import Coefficient
from contfrac.core.domain.continued_fraction import ContinuedFraction, approximately_equal
from contfrac.core.domain.errors import (
    ContinuedFractionError,
    ConvergentIndexError,
    DivisionByZeroError,
    ErrorKind,
    InvalidArgumentError,
    InvalidFormatError,
)
from contfrac.core.domain.expansion import PeriodicExpansion
from contfrac.core.domain.normalization import is_canonical, normalize

__all__ = [
    # Value types
    "Coefficient",
    "ContinuedFraction",
    "PeriodicExpansion",
    # Normalization
    "normalize",
    "is_canonical",
    # Helpers
    "approximately_equal",
    # Errors
    "ErrorKind",
    "ContinuedFractionError",
    "InvalidFormatError",
    "InvalidArgumentError",
    "ConvergentIndexError",
    "DivisionByZeroError",
]
