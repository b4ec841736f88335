"""
Streams — Запись и чтение цепных дробей через абстрактные writer/reader

Writer — любой объект с методом write(str) (файл, io.StringIO, sys.stdout).
Reader — любой объект с методом readline() -> str.
"""

from typing import Optional, Protocol

from contfrac.core.domain.continued_fraction import ContinuedFraction


class TextWriter(Protocol):
    def write(self, text: str) -> object: ...


class TextReader(Protocol):
    def readline(self) -> str: ...


def write_continued_fraction(writer: TextWriter, cf: ContinuedFraction) -> None:
    """Запись текстовой нотации дроби (без перевода строки)."""
    writer.write(cf.to_string())


def read_continued_fraction(
    reader: TextReader,
    into: Optional[ContinuedFraction] = None,
) -> ContinuedFraction:
    """
    Чтение одной строки и разбор её как цепной дроби.

    Если передан into, разбор выполняется в существующий экземпляр
    (при ошибке он остаётся очищенным до [0], см. ContinuedFraction.parse).

    Args:
        reader: Источник строк
        into: Существующая дробь для заполнения (optional)

    Returns:
        Заполненная дробь (into или новый экземпляр)

    Raises:
        InvalidFormatError: Если строка не разбирается
    """
    line = reader.readline().rstrip("\r\n")
    target = into if into is not None else ContinuedFraction()
    target.parse(line)
    return target
