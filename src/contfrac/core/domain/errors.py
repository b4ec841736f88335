"""
Errors — Иерархия исключений цепных дробей

Каждое исключение несёт ErrorKind, поэтому вызывающий код может различать
категории ошибки либо по типу исключения, либо по полю kind:
- INVALID_FORMAT: строка не соответствует нотации "[a0; a1; ...]"
- INVALID_ARGUMENT: нулевой знаменатель, отрицательный radicand, NaN/Inf и т.п.
- OUT_OF_RANGE: индекс подходящей дроби за пределами конечной дроби
- ARITHMETIC: деление на значение, неотличимое от нуля

Каждый подкласс также наследует соответствующее встроенное исключение
(ValueError / IndexError / ZeroDivisionError).
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Категория ошибки цепной дроби"""

    INVALID_FORMAT = "invalid_format"
    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"
    ARITHMETIC = "arithmetic"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContinuedFractionError(Exception):
    """Базовое исключение для всех ошибок цепных дробей."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidFormatError(ContinuedFractionError, ValueError):
    """
    Строка не разбирается как цепная дробь.

    Возникает при отсутствии обёртки "[...]", нечитаемом целом или
    коэффициенте вне signed 64-bit диапазона.
    """

    kind = ErrorKind.INVALID_FORMAT


class InvalidArgumentError(ContinuedFractionError, ValueError):
    """Недопустимый аргумент конструктора или генератора констант."""

    kind = ErrorKind.INVALID_ARGUMENT


class ConvergentIndexError(ContinuedFractionError, IndexError):
    """Запрошена подходящая дробь за пределами конечной дроби."""

    kind = ErrorKind.OUT_OF_RANGE


class DivisionByZeroError(ContinuedFractionError, ZeroDivisionError):
    """Делитель приближённо равен нулю (|x| < EPS_DIVISION)."""

    kind = ErrorKind.ARITHMETIC
