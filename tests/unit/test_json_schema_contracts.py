"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON контракта цепной дроби:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (min/max/const/pattern)
- Сериализация ContinuedFraction → dict → ContinuedFraction
"""

import json

import pytest
from jsonschema import ValidationError

from contfrac import ContinuedFraction, InvalidArgumentError, sqrt_continued_fraction
from contfrac.core.contracts import (
    SCHEMA_NAME,
    SCHEMA_VERSION,
    ContinuedFractionValidator,
    SchemaLoader,
    continued_fraction_from_dict,
    continued_fraction_to_dict,
    validate_continued_fraction,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_finite():
    """Валидная конечная дробь 355/113."""
    return {
        "schema_version": "1",
        "coefficients": [3, 7, 15, 1],
        "periodic_start": None,
        "notation": "[3; 7; 15; 1]",
    }


@pytest.fixture
def valid_periodic():
    """Валидная периодическая дробь √7."""
    return {
        "schema_version": "1",
        "coefficients": [2, 2, 4],
        "periodic_start": 1,
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_schema():
    """Проверка загрузки схемы."""
    loader = SchemaLoader()
    schema = loader.load_schema("continued_fraction")

    assert schema["properties"]["schema_version"]["const"] == SCHEMA_VERSION
    assert set(schema["required"]) == {"schema_version", "coefficients", "periodic_start"}


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("continued_fraction")
    schema2 = loader.load_schema("continued_fraction")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_rejects_missing_directory(tmp_path):
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "absent")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Файл, не являющийся JSON Schema, отклоняется при загрузке."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
        SchemaLoader(tmp_path).load_schema("broken")


def test_validator_uses_given_loader(tmp_path):
    """Валидатор берёт схему из переданного загрузчика."""
    schema = {"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "object"}
    (tmp_path / SCHEMA_NAME).with_suffix(".json").write_text(json.dumps(schema), encoding="utf-8")

    validator = ContinuedFractionValidator(SchemaLoader(tmp_path))

    assert validator.schema == schema
    assert validator.is_valid({"anything": True})


# =============================================================================
# TESTS - VALIDATION
# =============================================================================


def test_validator_accepts_valid_data(valid_finite, valid_periodic):
    """Валидация правильных данных."""
    validator = ContinuedFractionValidator()
    validator.validate(valid_finite)  # Не должно выбросить исключение
    assert validator.is_valid(valid_finite)
    assert validator.is_valid(valid_periodic)


def test_validate_function(valid_finite):
    """Проверка функции validate_continued_fraction."""
    validate_continued_fraction(valid_finite)  # Не должно выбросить исключение


def test_rejects_missing_required_field(valid_finite):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_finite.copy()
    del data["periodic_start"]

    with pytest.raises(ValidationError) as exc_info:
        validate_continued_fraction(data)
    assert "'periodic_start' is a required property" in str(exc_info.value)


def test_rejects_empty_coefficients(valid_finite):
    """Хотя бы a0 обязателен."""
    data = valid_finite.copy()
    data["coefficients"] = []

    with pytest.raises(ValidationError):
        validate_continued_fraction(data)


def test_rejects_non_integer_coefficient(valid_finite):
    """Валидация отклоняет неправильный тип коэффициента."""
    data = valid_finite.copy()
    data["coefficients"] = [3, "7"]

    with pytest.raises(ValidationError) as exc_info:
        validate_continued_fraction(data)
    assert "is not of type 'integer'" in str(exc_info.value)


def test_rejects_coefficient_outside_int64(valid_finite):
    """Коэффициенты ограничены signed 64-bit диапазоном."""
    data = valid_finite.copy()
    data["coefficients"] = [3, 2**63]

    with pytest.raises(ValidationError):
        validate_continued_fraction(data)


def test_rejects_negative_periodic_start(valid_periodic):
    data = valid_periodic.copy()
    data["periodic_start"] = -1

    with pytest.raises(ValidationError):
        validate_continued_fraction(data)


def test_rejects_unknown_property(valid_finite):
    """additionalProperties: false"""
    data = valid_finite.copy()
    data["value"] = 3.14159

    with pytest.raises(ValidationError):
        validate_continued_fraction(data)


def test_rejects_wrong_schema_version(valid_finite):
    data = valid_finite.copy()
    data["schema_version"] = "2"

    with pytest.raises(ValidationError):
        validate_continued_fraction(data)


def test_rejects_malformed_notation(valid_finite):
    data = valid_finite.copy()
    data["notation"] = "3; 7; 15; 1"

    with pytest.raises(ValidationError):
        validate_continued_fraction(data)


def test_iter_errors_reports_all_violations(valid_finite):
    """Итератор возвращает все нарушения сразу."""
    data = valid_finite.copy()
    data["schema_version"] = "2"
    data["coefficients"] = []

    validator = ContinuedFractionValidator()
    errors = list(validator.iter_errors(data))

    assert len(errors) == 2
    assert not validator.is_valid(data)


# =============================================================================
# TESTS - SERIALIZATION
# =============================================================================


def test_periodic_to_dict():
    cf = ContinuedFraction.create_periodic([1], [2])

    assert continued_fraction_to_dict(cf) == {
        "schema_version": "1",
        "coefficients": [1, 2],
        "periodic_start": 1,
        "notation": "[1; (2)]",
    }


def test_finite_to_dict():
    data = continued_fraction_to_dict(ContinuedFraction.from_rational(355, 113))

    assert data["coefficients"] == [3, 7, 16]
    assert data["periodic_start"] is None


def test_to_dict_is_valid_contract():
    """Сериализованные данные проходят собственную схему."""
    for cf in (
        ContinuedFraction(),
        ContinuedFraction.from_rational(-7, 3),
        sqrt_continued_fraction(13),
        ContinuedFraction.create_periodic([], [5, 3]),
    ):
        validate_continued_fraction(continued_fraction_to_dict(cf))


def test_from_dict_restores_period(valid_periodic):
    cf = continued_fraction_from_dict(valid_periodic)

    assert cf == sqrt_continued_fraction(7)
    assert str(cf) == "[2; (2; 4)]"


def test_from_dict_finite(valid_finite):
    cf = continued_fraction_from_dict(valid_finite)

    assert cf.is_finite()
    assert cf.convergent(3) == (355, 113)


def test_from_dict_normalizes():
    """Входные коэффициенты приводятся к канонической форме."""
    cf = continued_fraction_from_dict(
        {"schema_version": "1", "coefficients": [1, 1, 2], "periodic_start": None}
    )
    assert cf.get_coefficients() == [3]


def test_from_dict_rejects_periodic_start_out_of_range(valid_periodic):
    data = valid_periodic.copy()
    data["periodic_start"] = 3

    with pytest.raises(InvalidArgumentError, match="out of range"):
        continued_fraction_from_dict(data)


def test_from_dict_merge_overflow_rejected():
    """Нормализация не выпускает сумму слияния за signed 64-bit."""
    data = {"schema_version": "1", "coefficients": [2**63 - 1, 1, 5], "periodic_start": None}

    with pytest.raises(InvalidArgumentError, match="signed 64-bit"):
        continued_fraction_from_dict(data)


def test_from_dict_validates_first(valid_finite):
    data = valid_finite.copy()
    data["coefficients"] = []

    with pytest.raises(ValidationError):
        continued_fraction_from_dict(data)


def test_json_text_roundtrip():
    """dict → JSON текст → dict → ContinuedFraction"""
    cf = ContinuedFraction.create_periodic([1, 2], [3, 4])

    text = json.dumps(continued_fraction_to_dict(cf))
    restored = continued_fraction_from_dict(json.loads(text))

    assert restored == cf
    assert restored.is_periodic()
