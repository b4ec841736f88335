"""
Тесты для текстовой нотации и потокового ввода/вывода

Проверяет:
1. Точный формат записи (включая периодическую часть)
2. Разбор: разделители, пробелы, знаки, остановка на постороннем символе
3. Ошибки формата
4. Несимметричность записи/чтения для периодических дробей
5. Очистку дроби при ошибке разбора
6. write_continued_fraction / read_continued_fraction
"""

import io

import pytest

from contfrac import (
    Coefficient,
    ContinuedFraction,
    ErrorKind,
    InvalidFormatError,
    format_coefficients,
    parse_coefficients,
    read_continued_fraction,
    sqrt_continued_fraction,
    write_continued_fraction,
)

# =============================================================================
# ЗАПИСЬ
# =============================================================================


class TestFormat:
    """Тесты записи"""

    def test_finite(self) -> None:
        assert ContinuedFraction([3, 7, 15, 1]).to_string() == "[3; 7; 15; 1]"

    def test_single_coefficient(self) -> None:
        assert ContinuedFraction().to_string() == "[0]"
        assert ContinuedFraction(-4).to_string() == "[-4]"

    def test_negative_coefficients(self) -> None:
        assert str(ContinuedFraction.from_rational(-7, 3)) == "[-2; -3]"

    def test_periodic(self) -> None:
        assert str(ContinuedFraction.create_periodic([1, 2], [3, 4])) == "[1; 2; (3; 4)]"
        assert str(ContinuedFraction.create_periodic([1], [2])) == "[1; (2)]"

    def test_period_starting_at_a0(self) -> None:
        """Маркер на a0 не получает "(", но закрывающая ")]" сохраняется"""
        assert str(ContinuedFraction.create_periodic([], [5, 3])) == "[5; 3)]"

    def test_format_coefficients_directly(self) -> None:
        assert format_coefficients([Coefficient.of(3), Coefficient.of(7)]) == "[3; 7]"
        assert format_coefficients([]) == "[0]"


# =============================================================================
# ЧТЕНИЕ
# =============================================================================


class TestParse:
    """Тесты разбора"""

    def test_semicolon_separated(self) -> None:
        assert parse_coefficients("[3; 7; 15; 1]") == [3, 7, 15, 1]

    def test_comma_separated(self) -> None:
        assert parse_coefficients("[1; 2, 3]") == [1, 2, 3]

    def test_whitespace_tolerated(self) -> None:
        assert parse_coefficients("[ 4 ; 5 ]") == [4, 5]
        assert parse_coefficients("[4;5]") == [4, 5]

    def test_signs(self) -> None:
        assert parse_coefficients("[-3; +2]") == [-3, 2]

    def test_stops_at_unknown_separator(self) -> None:
        """Разбор останавливается на символе, не являющемся разделителем"""
        assert parse_coefficients("[2 3]") == [2]

    def test_result_not_normalized(self) -> None:
        assert parse_coefficients("[1; 1; 2]") == [1, 1, 2]
        assert ContinuedFraction("[1; 1; 2]").get_coefficients() == [3]

    @pytest.mark.parametrize(
        "text",
        [
            "1; 2",
            "[1; 2",
            "1; 2]",
            "[]",
            " [1; 2]",
            "[1; 2]]",
            "[[1; 2]",
        ],
    )
    def test_missing_bracket_wrap(self, text) -> None:
        with pytest.raises(InvalidFormatError, match="Invalid continued fraction format"):
            parse_coefficients(text)

    @pytest.mark.parametrize("text", ["[abc]", "[ ]", "[; 2]"])
    def test_unreadable_first_integer(self, text) -> None:
        with pytest.raises(InvalidFormatError, match="first coefficient"):
            parse_coefficients(text)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("[1; x]", [1]),
            ("[1;]", [1]),
            ("[1; 2; ]", [1, 2]),
            ("[4, 5, +]", [4, 5]),
        ],
    )
    def test_unreadable_integer_after_separator_stops(self, text, expected) -> None:
        """Нечитаемое целое после разделителя завершает разбор без ошибки"""
        assert parse_coefficients(text) == expected

    @pytest.mark.parametrize("text", ["[\u0663; 2]", "[\uff11]"])
    def test_non_ascii_leading_digit_rejected(self, text) -> None:
        """Цифры других алфавитов не считаются целыми"""
        with pytest.raises(InvalidFormatError, match="first coefficient"):
            parse_coefficients(text)

    def test_non_ascii_digit_after_separator_stops(self) -> None:
        assert parse_coefficients("[1; \u0662]") == [1]

    def test_coefficient_outside_int64(self) -> None:
        with pytest.raises(InvalidFormatError, match="signed 64-bit"):
            parse_coefficients("[1; 9223372036854775808]")

    def test_error_kind(self) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            ContinuedFraction("oops")
        assert exc_info.value.kind == ErrorKind.INVALID_FORMAT
        assert isinstance(exc_info.value, ValueError)


class TestReadWriteAsymmetry:
    """Периодическая нотация читается только до начала периода"""

    def test_finite_roundtrip(self) -> None:
        cf = ContinuedFraction([3, 7, 15, 1])
        assert ContinuedFraction(cf.to_string()) == cf

    def test_periodic_notation_reads_prefix_only(self) -> None:
        """Разбор останавливается на "(": период и маркер теряются"""
        text = str(sqrt_continued_fraction(2))
        assert text == "[1; (2)]"
        restored = ContinuedFraction(text)
        assert restored.get_coefficients() == [1]
        assert restored.is_finite()
        assert restored != sqrt_continued_fraction(2)

    def test_periodic_with_prefix_reads_prefix_only(self) -> None:
        cf = ContinuedFraction.create_periodic([1, 2], [3, 4])
        assert str(cf) == "[1; 2; (3; 4)]"
        assert ContinuedFraction(str(cf)).get_coefficients() == [1, 2]

    def test_period_at_a0_reads_values_without_marker(self) -> None:
        """Символ ")" после последнего целого останавливает разбор"""
        assert parse_coefficients("[5; 3)]") == [5, 3]


class TestParseClearsFirst:
    """Дробь очищается до проверки входа"""

    def test_failed_parse_leaves_cleared_state(self) -> None:
        cf = ContinuedFraction([3, 7])
        with pytest.raises(InvalidFormatError):
            cf.parse("not a fraction")
        assert cf.get_coefficients() == [0]
        assert cf.to_double() == 0.0

    def test_successful_parse_replaces_content(self) -> None:
        cf = ContinuedFraction.create_periodic([1], [2])
        cf.parse("[4; 5]")
        assert cf.get_coefficients() == [4, 5]
        assert cf.is_finite()


# =============================================================================
# STREAMS
# =============================================================================


class TestStreams:
    """Тесты write_continued_fraction / read_continued_fraction"""

    def test_write(self) -> None:
        buffer = io.StringIO()
        write_continued_fraction(buffer, ContinuedFraction([3, 7]))
        assert buffer.getvalue() == "[3; 7]"

    def test_read_one_line(self) -> None:
        reader = io.StringIO("[3; 7]\n[1; 2]\n")
        first = read_continued_fraction(reader)
        second = read_continued_fraction(reader)
        assert first.get_coefficients() == [3, 7]
        assert second.get_coefficients() == [1, 2]

    def test_read_into_existing(self) -> None:
        target = ContinuedFraction(9)
        result = read_continued_fraction(io.StringIO("[2; 5]\r\n"), into=target)
        assert result is target
        assert target.get_coefficients() == [2, 5]

    def test_read_failure_clears_target(self) -> None:
        target = ContinuedFraction(9)
        with pytest.raises(InvalidFormatError):
            read_continued_fraction(io.StringIO("garbage\n"), into=target)
        assert target.get_coefficients() == [0]

    def test_write_then_read(self) -> None:
        buffer = io.StringIO()
        write_continued_fraction(buffer, ContinuedFraction.from_rational(355, 113))
        buffer.write("\n")
        buffer.seek(0)
        assert read_continued_fraction(buffer) == ContinuedFraction.from_rational(355, 113)
