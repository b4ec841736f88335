"""
Numerical Safeguards — Epsilon-параметры и защита float-вычислений

Модуль собирает все численные пороги, которыми пользуется цепная дробь:
- Порог остановки разложения float → коэффициенты (from_double)
- Порог "деления на ноль" для приближённой арифметики
- Толерантность для approximately_equal
- Диапазон знакового 64-битного коэффициента

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в разложение (ValueError на входе)
2. Деление на значение с |x| < EPS_DIVISION никогда не выполняется
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог численной устойчивости для from_double:
# если |дробная часть| < EPS_STABILITY, разложение останавливается
EPS_STABILITY: Final[float] = 1e-12

# Минимальный допустимый |делитель| для приближённого деления цепных дробей
EPS_DIVISION: Final[float] = 1e-15

# Толерантность по умолчанию для approximately_equal
EPS_APPROX_EQUAL: Final[float] = 1e-12

# Число членов разложения по умолчанию для from_double и генераторов констант
DEFAULT_MAX_TERMS: Final[int] = 20

# =============================================================================
# ДИАПАЗОН КОЭФФИЦИЕНТОВ
# =============================================================================

# Границы проверяются только на входе (конструкторы, парсер, JSON контракт)
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ВАЛИДАЦИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_effectively_zero(value: float, eps: float = EPS_DIVISION) -> bool:
    """
    Проверка, что значение неотличимо от нуля для деления.

    Args:
        value: Проверяемое значение
        eps: Порог (default: EPS_DIVISION)

    Returns:
        True если abs(value) < eps

    Examples:
        >>> is_effectively_zero(0.0)
        True
        >>> is_effectively_zero(1e-16)
        True
        >>> is_effectively_zero(1e-15)
        False
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    return abs(value) < eps


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение является конечным float.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_int64(value: int, name: str) -> None:
    """
    Валидация, что целое укладывается в знаковый 64-битный диапазон.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value вне [INT64_MIN, INT64_MAX]
    """
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(
            f"{name} must fit into a signed 64-bit integer "
            f"[{INT64_MIN}, {INT64_MAX}], got {value}"
        )


def validate_term_count(value: int, name: str) -> None:
    """
    Валидация числа членов разложения (max_terms).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value отрицательное
    """
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def approximately_equal_floats(
    a: float,
    b: float,
    epsilon: float = EPS_APPROX_EQUAL,
) -> bool:
    """
    Строгое сравнение двух float с абсолютной толерантностью.

    Алгоритм:
        abs(a - b) < epsilon

    Args:
        a: Первое значение
        b: Второе значение
        epsilon: Абсолютная толерантность (default: EPS_APPROX_EQUAL)

    Returns:
        True если разница строго меньше epsilon

    Examples:
        >>> approximately_equal_floats(1.0, 1.0 + 1e-13)
        True
        >>> approximately_equal_floats(1.0, 1.1)
        False
    """
    return abs(a - b) < epsilon
