"""
Euclid — Целочисленные примитивы цепных дробей

- Деление с усечением к нулю (семантика знаковых 64-битных целых)
- НОД по алгоритму Евклида
- Разложение рационального числа p/q в последовательность частных
- Рекуррентное вычисление подходящих дробей p_n/q_n

ФОРМУЛЫ:
    p_{-1} = 1, p_0 = a_0, p_i = a_i * p_{i-1} + p_{i-2}
    q_{-1} = 0, q_0 = 1,   q_i = a_i * q_{i-1} + q_{i-2}

Для индексов за пределами хранимой последовательности a_i берётся по модулю
её длины (периодическая дробь "прокручивает" свой хранимый период).
"""

from typing import Sequence


def trunc_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Частное и остаток с усечением к нулю.

    В отличие от встроенного divmod (floor), знак остатка совпадает со знаком
    делимого, как у знаковых машинных целых.

    Args:
        numerator: Делимое
        denominator: Делитель (не ноль)

    Returns:
        (quotient, remainder), где numerator == quotient * denominator + remainder

    Examples:
        >>> trunc_divmod(7, 3)
        (2, 1)
        >>> trunc_divmod(-7, 3)
        (-2, -1)
        >>> trunc_divmod(7, -3)
        (-2, 1)
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient, numerator - quotient * denominator


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Args:
        a: Первое число
        b: Второе число

    Returns:
        Неотрицательный НОД; gcd(0, 0) == 0

    Examples:
        >>> gcd(48, 18)
        6
        >>> gcd(-48, 18)
        6
    """
    while b != 0:
        a, b = b, a % b
    return abs(a)


def euclidean_quotients(numerator: int, denominator: int) -> list[int]:
    """
    Последовательность частных алгоритма Евклида для numerator/denominator.

    Частные — коэффициенты простой цепной дроби рационального числа.

    Args:
        numerator: Числитель
        denominator: Знаменатель (не ноль)

    Returns:
        Список частных [a0, a1, ...]

    Raises:
        ValueError: Если denominator == 0

    Examples:
        >>> euclidean_quotients(355, 113)
        [3, 7, 16]
        >>> euclidean_quotients(-7, 3)
        [-2, -3]
    """
    if denominator == 0:
        raise ValueError("denominator must be non-zero")

    quotients = []
    n, d = numerator, denominator
    while d != 0:
        q, r = trunc_divmod(n, d)
        quotients.append(q)
        n, d = d, r
    return quotients


def compute_convergent(coefficients: Sequence[int], n: int) -> tuple[int, int]:
    """
    n-я подходящая дробь по рекуррентным формулам.

    Границы не проверяются: индекс коэффициента берётся по модулю длины.

    Args:
        coefficients: Непустая последовательность знаковых коэффициентов
        n: Номер подходящей дроби (>= 0)

    Returns:
        (numerator, denominator)

    Examples:
        >>> compute_convergent([3, 7, 15, 1], 1)
        (22, 7)
        >>> compute_convergent([3, 7, 15, 1], 3)
        (355, 113)
    """
    size = len(coefficients)
    prev_num, prev_den = 1, 0
    curr_num, curr_den = coefficients[0], 1

    for i in range(1, n + 1):
        a = coefficients[i % size]
        prev_num, curr_num = curr_num, a * curr_num + prev_num
        prev_den, curr_den = curr_den, a * curr_den + prev_den

    return curr_num, curr_den
