"""
ContinuedFraction — Цепная дробь [a0; a1, a2, ...]

    a0 + 1/(a1 + 1/(a2 + ...))

Поддерживает конечные и периодические дроби, построение из целых,
списков, строк, рациональных чисел и float, точное структурное
равенство и приближённое (float) упорядочивание.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательность коэффициентов никогда не пуста (очищенная дробь — [0])
2. Любая мутация проходит через normalize() и сбрасывает кэш значения
3. is_periodic() ⇔ есть маркер периода; is_finite() ⇔ not is_periodic()
4. Кэш to_double() защищён блокировкой (безопасен при конкурентном чтении)

ПРИБЛИЖЕНИЯ (сохраняются намеренно):
- Арифметика выполняется через float и from_double, а не точными алгоритмами
- to_double() сворачивает только хранимые коэффициенты, период не разворачивается
- == сравнивает структуру, < > сравнивают float: две различные
  последовательности могут быть ни <, ни >, но при этом !=
"""

import logging
import math
import threading
from typing import Iterator, Optional, Sequence, Union

from contfrac.core.domain.coefficient import Coefficient
from contfrac.core.domain.errors import (
    ConvergentIndexError,
    DivisionByZeroError,
    InvalidArgumentError,
)
from contfrac.core.domain.expansion import PeriodicExpansion
from contfrac.core.domain.normalization import normalize
from contfrac.core.math.euclid import compute_convergent, euclidean_quotients
from contfrac.core.math.numerical_safeguards import (
    DEFAULT_MAX_TERMS,
    EPS_APPROX_EQUAL,
    EPS_STABILITY,
    approximately_equal_floats,
    is_effectively_zero,
    validate_finite,
    validate_int64,
)
from contfrac.core.notation import format_coefficients, parse_coefficients

logger = logging.getLogger(__name__)

Operand = Union["ContinuedFraction", int, float]


def _wrap(values: Sequence[int]) -> list[Coefficient]:
    coefficients = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(
                f"coefficients must be integers, got {type(value).__name__}: {value!r}"
            )
        try:
            validate_int64(value, "coefficient")
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e
        coefficients.append(Coefficient.of(value))
    return coefficients


class ContinuedFraction:
    """
    Цепная дробь с канонической последовательностью коэффициентов.

    Конструктор принимает:
    - None: дробь [0]
    - int: одиночный коэффициент (значение кэшируется сразу)
    - list/tuple целых: коэффициенты, затем нормализация
    - str: текстовая нотация "[a0; a1; ...]"
    - ContinuedFraction: независимая копия
    """

    # изменяемый тип со структурным равенством
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        value: Union[None, int, str, Sequence[int], "ContinuedFraction"] = None,
    ) -> None:
        self._coefficients: list[Coefficient] = [Coefficient.of(0)]
        self._is_finite = True
        self._is_periodic = False
        self._cache_lock = threading.Lock()
        self._cached_value: Optional[float] = None

        if value is None:
            return
        if isinstance(value, bool):
            raise InvalidArgumentError("Cannot build a continued fraction from bool")
        if isinstance(value, ContinuedFraction):
            self._adopt(value)
        elif isinstance(value, int):
            try:
                validate_int64(value, "value")
            except ValueError as e:
                raise InvalidArgumentError(str(e)) from e
            self._coefficients = [Coefficient.of(value)]
            self._cached_value = float(value)
        elif isinstance(value, str):
            self.parse(value)
        elif isinstance(value, (list, tuple)):
            self.set_coefficients(value)
        else:
            raise InvalidArgumentError(
                f"Cannot build a continued fraction from {type(value).__name__}"
            )

    # =========================================================================
    # ВНУТРЕННЕЕ СОСТОЯНИЕ
    # =========================================================================

    def _apply(self, coefficients: list[Coefficient]) -> None:
        """Единая точка мутации: нормализация, флаги, сброс кэша."""
        if not coefficients:
            coefficients = [Coefficient.of(0)]
        self._coefficients = normalize(coefficients)
        self._is_periodic = any(c.is_periodic_marker for c in self._coefficients)
        self._is_finite = not self._is_periodic
        self._invalidate_cache()

    def _adopt(self, other: "ContinuedFraction") -> None:
        with other._cache_lock:
            cached = other._cached_value
        self._coefficients = list(other._coefficients)
        self._is_finite = other._is_finite
        self._is_periodic = other._is_periodic
        with self._cache_lock:
            self._cached_value = cached

    def _invalidate_cache(self) -> None:
        with self._cache_lock:
            self._cached_value = None

    def _evaluate(self) -> float:
        value = 0.0
        for coefficient in reversed(self._coefficients):
            if value == 0.0:
                # нулевое промежуточное значение начинает свёртку заново
                value = float(coefficient.signed_value)
            else:
                value = coefficient.signed_value + 1.0 / value
        return value

    def __getstate__(self) -> dict:
        return {"coefficients": self._coefficients, "cached_value": self._cached_value}

    def __setstate__(self, state: dict) -> None:
        self._cache_lock = threading.Lock()
        self._coefficients = list(state["coefficients"])
        self._is_periodic = any(c.is_periodic_marker for c in self._coefficients)
        self._is_finite = not self._is_periodic
        self._cached_value = state["cached_value"]

    def __copy__(self) -> "ContinuedFraction":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "ContinuedFraction":
        return self.copy()

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_rational(cls, numerator: int, denominator: int) -> "ContinuedFraction":
        """
        Цепная дробь рационального числа numerator/denominator.

        Алгоритм Евклида с делением с усечением к нулю: частные образуют
        коэффициенты, процесс продолжается с (denominator, remainder),
        пока остаток не станет нулём.

        Args:
            numerator: Числитель
            denominator: Знаменатель

        Returns:
            Новая ContinuedFraction

        Raises:
            InvalidArgumentError: Если denominator == 0

        Examples:
            >>> ContinuedFraction.from_rational(355, 113).get_coefficients()
            [3, 7, 16]
        """
        if denominator == 0:
            raise InvalidArgumentError("Denominator cannot be zero")

        return cls(euclidean_quotients(numerator, denominator))

    @classmethod
    def from_double(cls, value: float, max_terms: int = DEFAULT_MAX_TERMS) -> "ContinuedFraction":
        """
        Приближение float цепной дробью.

        На каждом шаге берётся floor как очередной коэффициент; если
        |дробная часть| < EPS_STABILITY, разложение останавливается,
        иначе value = 1 / дробная часть.

        Args:
            value: Конечное float значение
            max_terms: Максимальное число коэффициентов (>= 1)

        Returns:
            Новая ContinuedFraction

        Raises:
            InvalidArgumentError: Если value NaN/Inf или max_terms < 1
        """
        try:
            validate_finite(value, "value")
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e
        if max_terms < 1:
            raise InvalidArgumentError(f"max_terms must be >= 1, got {max_terms}")

        coefficients = []
        for _ in range(max_terms):
            integer_part = math.floor(value)
            coefficients.append(integer_part)

            fractional = value - integer_part
            if abs(fractional) < EPS_STABILITY:
                break

            value = 1.0 / fractional

        return cls(coefficients)

    @classmethod
    def create_periodic(
        cls,
        non_periodic: Sequence[int],
        periodic: Sequence[int] = (),
    ) -> "ContinuedFraction":
        """
        Периодическая цепная дробь [non_periodic...; (periodic...)].

        Первый элемент periodic помечается маркером периода.
        Пустой periodic даёт конечную дробь.

        Args:
            non_periodic: Непериодический префикс
            periodic: Повторяющийся хвост

        Returns:
            Новая ContinuedFraction
        """
        coefficients = _wrap(non_periodic)
        if periodic:
            tail = _wrap(periodic)
            coefficients.append(Coefficient.of(tail[0].signed_value, periodic=True))
            coefficients.extend(tail[1:])

        cf = cls()
        cf._apply(coefficients)
        return cf

    @classmethod
    def from_expansion(cls, expansion: PeriodicExpansion) -> "ContinuedFraction":
        """Построение из структурного представления (префикс + период)."""
        return cls.create_periodic(expansion.prefix, expansion.period or ())

    # =========================================================================
    # ИНСПЕКЦИЯ
    # =========================================================================

    def get_coefficients(self) -> list[int]:
        """Знаковые значения коэффициентов (маркер периода не передаётся)."""
        return [c.signed_value for c in self._coefficients]

    @property
    def coefficients(self) -> list[int]:
        return self.get_coefficients()

    @coefficients.setter
    def coefficients(self, values: Sequence[int]) -> None:
        self.set_coefficients(values)

    def coefficient_records(self) -> tuple[Coefficient, ...]:
        """Коэффициенты вместе с флагами знака и периода."""
        return tuple(self._coefficients)

    def expansion(self) -> PeriodicExpansion:
        """Разбиение на непериодический префикс и период."""
        return PeriodicExpansion.from_coefficients(self._coefficients)

    def size(self) -> int:
        return len(self._coefficients)

    def __len__(self) -> int:
        return len(self._coefficients)

    def __iter__(self) -> Iterator[int]:
        return iter(self.get_coefficients())

    def is_finite(self) -> bool:
        return self._is_finite

    def is_periodic(self) -> bool:
        return self._is_periodic

    def is_integer(self) -> bool:
        """True если дробь состоит из одного коэффициента."""
        return len(self._coefficients) == 1

    def convergent(self, n: int) -> tuple[int, int]:
        """
        n-я подходящая дробь (numerator, denominator).

        Для периодической дроби индексы за пределами хранимой
        последовательности берутся по модулю её длины.

        Args:
            n: Номер подходящей дроби

        Returns:
            (numerator, denominator)

        Raises:
            ConvergentIndexError: Если n < 0 или n >= size() у конечной дроби

        Examples:
            >>> ContinuedFraction.from_rational(355, 113).convergent(1)
            (22, 7)
        """
        if n < 0 or (self._is_finite and n >= len(self._coefficients)):
            raise ConvergentIndexError(
                f"Convergent index {n} out of range for size {len(self._coefficients)}"
            )
        return compute_convergent(self.get_coefficients(), n)

    def convergents(self, count: Optional[int] = None) -> Iterator[tuple[int, int]]:
        """
        Последовательные подходящие дроби.

        Args:
            count: Сколько подходящих дробей выдать (default: size())

        Yields:
            (numerator, denominator) для n = 0, 1, ..., count - 1
        """
        if count is None:
            count = len(self._coefficients)
        for n in range(count):
            yield self.convergent(n)

    def to_double(self) -> float:
        """
        Приближённое значение дроби (мемоизируется до следующей мутации).

        Свёртка от последнего коэффициента к первому: value = a_i + 1/value.
        Для периодической дроби сворачиваются только хранимые коэффициенты.
        """
        with self._cache_lock:
            if self._cached_value is None:
                self._cached_value = self._evaluate()
            return self._cached_value

    def __float__(self) -> float:
        return self.to_double()

    def to_string(self) -> str:
        return format_coefficients(self._coefficients)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ContinuedFraction({self.to_string()!r})"

    def copy(self) -> "ContinuedFraction":
        """Независимая копия."""
        return ContinuedFraction(self)

    # =========================================================================
    # МУТАЦИЯ
    # =========================================================================

    def set_coefficients(self, values: Sequence[int]) -> None:
        """Замена всех коэффициентов с последующей нормализацией."""
        self._apply(_wrap(values))

    def add_coefficient(self, value: int) -> None:
        """Добавление коэффициента в конец с последующей нормализацией."""
        self._apply(self._coefficients + _wrap([value]))

    def simplify(self) -> None:
        """Повторная нормализация."""
        self._apply(list(self._coefficients))

    def clear(self) -> None:
        """Сброс к [0]."""
        self._apply([Coefficient.of(0)])

    def parse(self, text: str) -> None:
        """
        Замена содержимого разобранной текстовой нотацией.

        ВНИМАНИЕ: последовательность очищается ДО проверки входа. При ошибке
        разбора дробь остаётся в очищенном состоянии [0], предыдущее
        значение не восстанавливается.

        Args:
            text: Строка вида "[a0; a1; ...]"

        Raises:
            InvalidFormatError: Если строка не разбирается
        """
        self.clear()
        self._apply(_wrap(parse_coefficients(text)))

    # =========================================================================
    # АРИФМЕТИКА (через float)
    # =========================================================================

    @staticmethod
    def _coerce(other: object) -> Optional["ContinuedFraction"]:
        if isinstance(other, ContinuedFraction):
            return other
        if isinstance(other, bool):
            return None
        if isinstance(other, int):
            return ContinuedFraction(other)
        if isinstance(other, float):
            return ContinuedFraction.from_double(other)
        return None

    @staticmethod
    def _divide(dividend: "ContinuedFraction", divisor: "ContinuedFraction") -> "ContinuedFraction":
        denominator = divisor.to_double()
        if is_effectively_zero(denominator):
            logger.debug("division guard tripped: divisor %s ~ %r", divisor, denominator)
            raise DivisionByZeroError("Division by zero")
        return ContinuedFraction.from_double(dividend.to_double() / denominator)

    def __add__(self, other: Operand) -> "ContinuedFraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ContinuedFraction.from_double(self.to_double() + rhs.to_double())

    def __radd__(self, other: Operand) -> "ContinuedFraction":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: Operand) -> "ContinuedFraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ContinuedFraction.from_double(self.to_double() - rhs.to_double())

    def __rsub__(self, other: Operand) -> "ContinuedFraction":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Operand) -> "ContinuedFraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ContinuedFraction.from_double(self.to_double() * rhs.to_double())

    def __rmul__(self, other: Operand) -> "ContinuedFraction":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: Operand) -> "ContinuedFraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._divide(self, rhs)

    def __rtruediv__(self, other: Operand) -> "ContinuedFraction":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._divide(lhs, self)

    def __iadd__(self, other: Operand) -> "ContinuedFraction":
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        self._adopt(result)
        return self

    def __isub__(self, other: Operand) -> "ContinuedFraction":
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        self._adopt(result)
        return self

    def __imul__(self, other: Operand) -> "ContinuedFraction":
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        self._adopt(result)
        return self

    def __itruediv__(self, other: Operand) -> "ContinuedFraction":
        result = self.__truediv__(other)
        if result is NotImplemented:
            return NotImplemented
        self._adopt(result)
        return self

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        """Точное структурное равенство: длина, значения и маркеры периода."""
        if not isinstance(other, ContinuedFraction):
            return NotImplemented
        if len(self._coefficients) != len(other._coefficients):
            return False
        return all(a == b for a, b in zip(self._coefficients, other._coefficients))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_double() < rhs.to_double()

    def __le__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_double() <= rhs.to_double()

    def __gt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_double() > rhs.to_double()

    def __ge__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_double() >= rhs.to_double()


# =============================================================================
# FREE HELPERS
# =============================================================================


def approximately_equal(
    a: ContinuedFraction,
    b: ContinuedFraction,
    epsilon: float = EPS_APPROX_EQUAL,
) -> bool:
    """
    Приближённое равенство по значениям to_double().

    Args:
        a: Первая дробь
        b: Вторая дробь
        epsilon: Абсолютная толерантность (default: EPS_APPROX_EQUAL)

    Returns:
        True если |a - b| < epsilon
    """
    return approximately_equal_floats(a.to_double(), b.to_double(), epsilon)
