"""
JSON Contract — Сериализация цепных дробей

JSON представление проверяется по JSON Schema
(contracts/schema/continued_fraction.json) библиотекой jsonschema.

Формат:
    {
        "schema_version": "1",
        "coefficients": [1, 2],
        "periodic_start": 1,        # null для конечной дроби
        "notation": "[1; (2)]"      # optional, только для чтения человеком
    }

В отличие от текстовой нотации, JSON сохраняет период без потерь.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator

from contfrac.core.domain.continued_fraction import ContinuedFraction
from contfrac.core.domain.errors import InvalidArgumentError

SCHEMA_VERSION: Final[str] = "1"
SCHEMA_NAME: Final[str] = "continued_fraction"
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузка и кэширование JSON Schema файлов из каталога.

    Каждая схема читается с диска один раз и проверяется на соответствие
    мета-схеме Draft 2020-12.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Имя схемы без расширения ('continued_fraction')

        Returns:
            Схема как dict (тот же объект при повторных вызовах)

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self.schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# VALIDATOR
# =============================================================================


class ContinuedFractionValidator:
    """Проверка dict на соответствие контракту continued_fraction."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        self.schema = (loader or _default_loader()).load_schema(SCHEMA_NAME)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Все нарушения схемы, а не только первое."""
        return self._validator.iter_errors(data)


@lru_cache(maxsize=1)
def _default_loader() -> SchemaLoader:
    return SchemaLoader()


@lru_cache(maxsize=1)
def _default_validator() -> ContinuedFractionValidator:
    return ContinuedFractionValidator()


# =============================================================================
# CONVERSION
# =============================================================================


def validate_continued_fraction(data: Dict[str, Any]) -> None:
    """
    Валидация JSON представления цепной дроби.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _default_validator().validate(data)


def continued_fraction_to_dict(cf: ContinuedFraction) -> Dict[str, Any]:
    """
    JSON представление цепной дроби.

    Args:
        cf: Цепная дробь

    Returns:
        dict, соответствующий схеме continued_fraction
    """
    expansion = cf.expansion()
    return {
        "schema_version": SCHEMA_VERSION,
        "coefficients": cf.get_coefficients(),
        "periodic_start": len(expansion.prefix) if expansion.is_periodic else None,
        "notation": cf.to_string(),
    }


def continued_fraction_from_dict(data: Dict[str, Any]) -> ContinuedFraction:
    """
    Восстановление цепной дроби из JSON представления.

    Поле notation игнорируется: текстовая нотация теряет период при чтении,
    источником истины служат coefficients и periodic_start.

    Args:
        data: dict, соответствующий схеме continued_fraction

    Returns:
        Новая ContinuedFraction (нормализованная)

    Raises:
        ValidationError: Если данные не соответствуют схеме
        InvalidArgumentError: Если periodic_start вне последовательности
            или сумма слияния при нормализации выходит за signed 64-bit
    """
    validate_continued_fraction(data)

    coefficients = data["coefficients"]
    periodic_start = data["periodic_start"]

    if periodic_start is None:
        return ContinuedFraction(coefficients)

    if periodic_start >= len(coefficients):
        raise InvalidArgumentError(
            f"periodic_start {periodic_start} out of range for "
            f"{len(coefficients)} coefficients"
        )

    return ContinuedFraction.create_periodic(
        coefficients[:periodic_start], coefficients[periodic_start:]
    )
