"""
Notation — Текстовая нотация цепных дробей

Запись (точный формат):
    "[" a0 ("; " ai)* "]"
    перед коэффициентом-маркером периода пишется "; (" вместо "; ",
    а при наличии периода дробь закрывается ")]" вместо "]".

    [3; 7; 15; 1]        конечная дробь
    [1; (2)]             √2
    [3; 1; (2; 5)]       префикс + период

Чтение:
    Вход целиком обёрнут в "[...]". Содержимое — ведущее целое, затем
    пары <разделитель> <целое>, где разделитель ';' или ','. Разбор
    останавливается на первом символе, не являющемся разделителем, и на
    первом нечитаемом целом после разделителя.

ВАЖНО: чтение и запись несимметричны для периодических дробей. Парсер не
распознаёт скобки "(...)": строка периодической дроби читается только до
начала периода, "[1; 2; (3; 4)]" даёт [1, 2], маркер периода теряется.
"""

import logging
import re
from typing import Final, Optional, Sequence

from contfrac.core.domain.coefficient import Coefficient
from contfrac.core.domain.errors import InvalidFormatError
from contfrac.core.math.numerical_safeguards import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)

# =============================================================================
# ГРАММАТИКА
# =============================================================================

SEPARATOR: Final[str] = "; "
PERIOD_OPEN: Final[str] = "; ("
CLOSE: Final[str] = "]"
PERIOD_CLOSE: Final[str] = ")]"

_WRAPPED = re.compile(r"\[([^\[\]]+)\]")
_INTEGER = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_SEPARATOR_CHAR = re.compile(r"\s*(\S)", re.ASCII)
_INPUT_SEPARATORS: Final[frozenset[str]] = frozenset({";", ","})


# =============================================================================
# ЗАПИСЬ
# =============================================================================


def format_coefficients(coefficients: Sequence[Coefficient]) -> str:
    """
    Текстовое представление последовательности коэффициентов.

    Args:
        coefficients: Каноническая последовательность

    Returns:
        Строка вида "[a0; a1; (a2; a3)]"

    Examples:
        >>> format_coefficients([Coefficient.of(3), Coefficient.of(7)])
        '[3; 7]'
        >>> format_coefficients([Coefficient.of(1), Coefficient.of(2, periodic=True)])
        '[1; (2)]'
    """
    if not coefficients:
        return "[0]"

    parts = ["[", str(coefficients[0].signed_value)]
    for coefficient in coefficients[1:]:
        parts.append(PERIOD_OPEN if coefficient.is_periodic_marker else SEPARATOR)
        parts.append(str(coefficient.signed_value))

    periodic = any(c.is_periodic_marker for c in coefficients)
    parts.append(PERIOD_CLOSE if periodic else CLOSE)
    return "".join(parts)


# =============================================================================
# ЧТЕНИЕ
# =============================================================================


def _read_integer(content: str, pos: int) -> Optional[tuple[int, int]]:
    match = _INTEGER.match(content, pos)
    if match is None:
        return None

    value = int(match.group(1))
    if value < INT64_MIN or value > INT64_MAX:
        raise InvalidFormatError(f"Coefficient {value} does not fit into a signed 64-bit integer")
    return value, match.end()


def parse_coefficients(text: str) -> list[int]:
    """
    Разбор текстовой нотации в список знаковых коэффициентов.

    Результат не нормализован.

    Args:
        text: Строка вида "[a0; a1; ...]"

    Returns:
        Список коэффициентов в порядке следования

    Raises:
        InvalidFormatError: Нет обёртки "[...]", нечитаемый первый коэффициент
            или коэффициент вне signed 64-bit диапазона

    Examples:
        >>> parse_coefficients("[3; 7; 15; 1]")
        [3, 7, 15, 1]
        >>> parse_coefficients("[1; 2, 3]")
        [1, 2, 3]
        >>> parse_coefficients("[1; 2; (3; 4)]")
        [1, 2]
    """
    wrapped = _WRAPPED.fullmatch(text)
    if wrapped is None:
        logger.debug("rejected continued fraction notation: %r", text)
        raise InvalidFormatError(f"Invalid continued fraction format: {text!r}")

    content = wrapped.group(1)
    first = _read_integer(content, 0)
    if first is None:
        raise InvalidFormatError(f"Cannot read first coefficient: {text!r}")

    value, pos = first
    values = [value]

    while True:
        separator = _SEPARATOR_CHAR.match(content, pos)
        if separator is None or separator.group(1) not in _INPUT_SEPARATORS:
            break
        token = _read_integer(content, separator.end())
        if token is None:
            logger.debug("stopped reading %r before %r", text, content[separator.end() :])
            break
        value, pos = token
        values.append(value)

    return values
