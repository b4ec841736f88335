"""
contfrac — цепные дроби [a0; a1, a2, ...]

Конечные и периодические цепные дроби: построение из целых, списков,
строк, рациональных чисел и float, подходящие дроби, текстовая нотация,
приближённая арифметика и генераторы констант (√n, e, π).
"""

from contfrac.core.constants import (
    PI_LITERAL,
    e_coefficients,
    e_continued_fraction,
    pi_continued_fraction,
    sqrt_continued_fraction,
    sqrt_expansion,
)
from contfrac.core.domain import (
    Coefficient,
    ContinuedFraction,
    ContinuedFractionError,
    ConvergentIndexError,
    DivisionByZeroError,
    ErrorKind,
    InvalidArgumentError,
    InvalidFormatError,
    PeriodicExpansion,
    approximately_equal,
)
from contfrac.core.math import gcd
from contfrac.core.notation import format_coefficients, parse_coefficients
from contfrac.core.streams import read_continued_fraction, write_continued_fraction

__version__ = "1.0.0"

__all__ = [
    # Value types
    "ContinuedFraction",
    "Coefficient",
    "PeriodicExpansion",
    # Constants
    "PI_LITERAL",
    "sqrt_continued_fraction",
    "sqrt_expansion",
    "e_continued_fraction",
    "e_coefficients",
    "pi_continued_fraction",
    # Helpers
    "gcd",
    "approximately_equal",
    # Notation
    "format_coefficients",
    "parse_coefficients",
    "read_continued_fraction",
    "write_continued_fraction",
    # Errors
    "ErrorKind",
    "ContinuedFractionError",
    "InvalidFormatError",
    "InvalidArgumentError",
    "ConvergentIndexError",
    "DivisionByZeroError",
]
