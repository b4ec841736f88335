"""
Constants — Цепные дроби известных констант

- √n: периодическое разложение квадратного корня
- e: замкнутая формула [2; 1, 2, 1, 1, 4, 1, 1, 6, ...]
- π: разложение фиксированного десятичного приближения через from_double

ФОРМУЛЫ (√n):
    m_0 = 0, d_0 = 1, a_0 = floor(√n)
    m_{k+1} = d_k * a_k - m_k
    d_{k+1} = (n - m_{k+1}^2) / d_k
    a_{k+1} = floor((a_0 + m_{k+1}) / d_{k+1})

Период считается завершённым, когда a_k == 2 * a_0.
"""

import math
from typing import Final

from contfrac.core.domain.continued_fraction import ContinuedFraction
from contfrac.core.domain.errors import InvalidArgumentError
from contfrac.core.domain.expansion import PeriodicExpansion
from contfrac.core.math.numerical_safeguards import DEFAULT_MAX_TERMS, validate_term_count

# Точность π ограничена точностью этого литерала (и float), а не формулой
PI_LITERAL: Final[float] = 3.14159265358979323846


def _check_terms(max_terms: int) -> None:
    try:
        validate_term_count(max_terms, "max_terms")
    except ValueError as e:
        raise InvalidArgumentError(str(e)) from e


def sqrt_expansion(n: int, max_terms: int = DEFAULT_MAX_TERMS) -> PeriodicExpansion:
    """
    Сырое разложение √n: prefix=(a0,), period=сгенерированные коэффициенты.

    Результат не нормализуется. Для точного квадрата period=None.

    Args:
        n: Подкоренное выражение (>= 0)
        max_terms: Максимальное число генерируемых коэффициентов после a0

    Returns:
        PeriodicExpansion

    Raises:
        InvalidArgumentError: Если n < 0 или max_terms < 0

    Examples:
        >>> sqrt_expansion(7)
        PeriodicExpansion(prefix=(2,), period=(1, 1, 1, 4))
    """
    if n < 0:
        raise InvalidArgumentError(f"Cannot take the square root of a negative number: {n}")
    _check_terms(max_terms)

    a0 = math.isqrt(n)
    if a0 * a0 == n:
        return PeriodicExpansion(prefix=(a0,), period=None)

    period = []
    m, d, a = 0, 1, a0
    for _ in range(max_terms):
        m = d * a - m
        d = (n - m * m) // d
        a = (a0 + m) // d
        period.append(a)

        if a == 2 * a0:
            break

    return PeriodicExpansion(prefix=(a0,), period=tuple(period) or None)


def sqrt_continued_fraction(n: int, max_terms: int = DEFAULT_MAX_TERMS) -> ContinuedFraction:
    """
    Цепная дробь √n.

    Для точного квадрата возвращается одиночный коэффициент √n.
    Иначе коэффициенты после a0 становятся периодом через create_periodic.

    Args:
        n: Подкоренное выражение (>= 0)
        max_terms: Максимальное число генерируемых коэффициентов после a0

    Returns:
        ContinuedFraction

    Raises:
        InvalidArgumentError: Если n < 0 или max_terms < 0

    Examples:
        >>> str(sqrt_continued_fraction(2))
        '[1; (2)]'
        >>> str(sqrt_continued_fraction(16))
        '[4]'
    """
    expansion = sqrt_expansion(n, max_terms)
    if expansion.period is None:
        return ContinuedFraction(expansion.prefix[0])

    return ContinuedFraction.create_periodic(expansion.prefix, expansion.period)


def e_coefficients(max_terms: int = DEFAULT_MAX_TERMS) -> list[int]:
    """
    Первые max_terms коэффициентов e: [2, 1, 2, 1, 1, 4, 1, 1, 6, ...].

    Коэффициент с индексом i >= 1 равен 2 * (i + 1) / 3 при i % 3 == 2,
    иначе 1. a0 = 2 выдаётся всегда.

    Args:
        max_terms: Общее число коэффициентов (включая a0)

    Returns:
        Список коэффициентов (не нормализован)
    """
    _check_terms(max_terms)

    coefficients = [2]
    for i in range(1, max_terms):
        if i % 3 == 2:
            coefficients.append(2 * ((i + 1) // 3))
        else:
            coefficients.append(1)
    return coefficients


def e_continued_fraction(max_terms: int = DEFAULT_MAX_TERMS) -> ContinuedFraction:
    """
    Цепная дробь числа e из e_coefficients(max_terms).

    Args:
        max_terms: Общее число коэффициентов (включая a0)

    Returns:
        ContinuedFraction (нормализованная)
    """
    return ContinuedFraction(e_coefficients(max_terms))


def pi_continued_fraction(max_terms: int = DEFAULT_MAX_TERMS) -> ContinuedFraction:
    """
    Цепная дробь π из десятичного приближения PI_LITERAL.

    Args:
        max_terms: Максимальное число коэффициентов (>= 1)

    Returns:
        ContinuedFraction
    """
    return ContinuedFraction.from_double(PI_LITERAL, max_terms)
