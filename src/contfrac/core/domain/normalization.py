"""
Normalization — Каноническая форма последовательности коэффициентов

Алгоритм:
1. Удаление нулевых коэффициентов с индексом > 0 (a0 не трогается)
2. Слияние "a, 1, b" → "a + b" слева направо с повторной проверкой позиции
3. Маркер периода — структурная граница: он не выступает в роли "1",
   не поглощается правым операндом слияния и сохраняется на левом
4. Маркер периода единственный: все последующие маркеры снимаются

Одиночная 1 в конце последовательности сохраняется (для неё нет правого соседа).
Нормализация идемпотентна.
"""

import logging
from typing import Iterable

from contfrac.core.domain.coefficient import Coefficient
from contfrac.core.domain.errors import InvalidArgumentError
from contfrac.core.math.numerical_safeguards import validate_int64

logger = logging.getLogger(__name__)


def _is_mergeable_one(coefficient: Coefficient) -> bool:
    return (
        coefficient.magnitude == 1
        and not coefficient.is_negative
        and not coefficient.is_periodic_marker
    )


def _same_sequence(a: list[Coefficient], b: list[Coefficient]) -> bool:
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def _drop_zeros(coefficients: list[Coefficient]) -> list[Coefficient]:
    return [coefficients[0]] + [c for c in coefficients[1:] if c.magnitude != 0]


def _single_marker(coefficients: list[Coefficient]) -> list[Coefficient]:
    result = []
    seen_marker = False
    for coefficient in coefficients:
        if coefficient.is_periodic_marker:
            if seen_marker:
                coefficient = coefficient.as_plain()
            seen_marker = True
        result.append(coefficient)
    return result


def _merge_ones(coefficients: list[Coefficient]) -> list[Coefficient]:
    result = list(coefficients)
    i = 0
    while i + 2 < len(result):
        middle = result[i + 1]
        right = result[i + 2]
        if _is_mergeable_one(middle) and not right.is_periodic_marker:
            left = result[i]
            total = left.signed_value + right.signed_value
            try:
                validate_int64(total, "merged coefficient")
            except ValueError as e:
                raise InvalidArgumentError(str(e)) from e
            merged = Coefficient.of(total, periodic=left.is_periodic_marker)
            result[i : i + 3] = [merged]
            # позиция i проверяется повторно
            continue
        i += 1
    return result


def normalize(coefficients: Iterable[Coefficient]) -> list[Coefficient]:
    """
    Приведение последовательности коэффициентов к канонической форме.

    Args:
        coefficients: Произвольная непустая последовательность коэффициентов

    Returns:
        Новый список в канонической форме

    Raises:
        InvalidArgumentError: Если последовательность пуста или сумма слияния
            не укладывается в signed 64-bit

    Examples:
        >>> [c.signed_value for c in normalize([Coefficient.of(v) for v in (1, 1, 2)])]
        [3]
        >>> [c.signed_value for c in normalize([Coefficient.of(v) for v in (3, 0, 7)])]
        [3, 7]
    """
    items = list(coefficients)
    if not items:
        raise InvalidArgumentError("coefficient sequence must contain at least a0")

    result = items
    while True:
        # слияние может дать новый 0 или новую внутреннюю 1 левее позиции i
        step = _merge_ones(_single_marker(_drop_zeros(result)))
        if _same_sequence(step, result):
            break
        result = step

    if len(result) != len(items):
        logger.debug("normalized %d coefficients down to %d", len(items), len(result))

    return result


def is_canonical(coefficients: Iterable[Coefficient]) -> bool:
    """
    Проверка, что последовательность уже в канонической форме.

    Args:
        coefficients: Последовательность коэффициентов

    Returns:
        True если normalize() не изменит последовательность
    """
    items = list(coefficients)
    if not items:
        return False
    return _same_sequence(normalize(items), items)
