"""
Тесты для parse_decimal

Проверяет:
1. Валидные формы: NaN, целые, дробные, научная нотация
2. Классификацию ошибок: EMPTY / INVALID / OVERFLOW / UNDERFLOW
3. Порядок классификации (первое нарушение)
4. Граничные случаи точности и экспоненты
5. Каноническую форму и идемпотентность (stdlib decimal как oracle)
6. Логирование ошибок
"""

import decimal as std_decimal
import logging

import pytest

from fast_decimal import (
    MAX_PRECISION,
    NAN,
    ZERO,
    DecimalParseError,
    ParseErrorKind,
    Sign,
    format_decimal,
    parse_decimal,
)


def assert_parse(s: str, expected: str) -> None:
    assert format_decimal(parse_decimal(s)) == expected, s


def assert_parse_error(s: str, kind: ParseErrorKind) -> None:
    with pytest.raises(DecimalParseError) as exc_info:
        parse_decimal(s)
    assert exc_info.value.kind == kind, s


def canonical_form(s: str) -> str:
    """Каноническая форма через stdlib decimal: без незначащих нулей и экспоненты"""
    with std_decimal.localcontext() as ctx:
        ctx.prec = 100
        value = std_decimal.Decimal(s)
        if value.is_zero():
            return "0"
        return f"{value.normalize():f}"


# =============================================================================
# ВАЛИДНЫЕ ФОРМЫ
# =============================================================================


class TestParseValid:
    """Тесты разбора валидных строк"""

    def test_nan(self) -> None:
        for s in ["NaN", "Nan", "NAN", "NAn", "naN", "nan", "nAN", "nAn", "   NaN   ", "\tnan\n"]:
            dec = parse_decimal(s)
            assert dec is NAN
            assert format_decimal(dec) == "NaN"

    def test_integer(self) -> None:
        assert_parse("0", "0")
        assert_parse("-0", "0")
        assert_parse("   -0   ", "0")
        assert_parse("00000.", "0")
        assert_parse("-00000.", "0")
        assert_parse("128", "128")
        assert_parse("-128", "-128")
        assert_parse("+128", "128")
        assert_parse("65536", "65536")
        assert_parse("-65536", "-65536")
        assert_parse("4294967296", "4294967296")
        assert_parse("-4294967296", "-4294967296")
        assert_parse("18446744073709551616", "18446744073709551616")
        assert_parse("-18446744073709551616", "-18446744073709551616")
        assert_parse("000000000123", "123")
        assert_parse("-000000000123", "-123")
        assert_parse("1000000000", "1000000000")

    def test_fraction(self) -> None:
        assert_parse("0.0", "0")
        assert_parse("-0.0", "0")
        assert_parse("   -0.0   ", "0")
        assert_parse(".0", "0")
        assert_parse(".00000", "0")
        assert_parse("-.0", "0")
        assert_parse("-.00000", "0")
        assert_parse("128.128", "128.128")
        assert_parse("-128.128", "-128.128")
        assert_parse("65536.65536", "65536.65536")
        assert_parse("-65536.65536", "-65536.65536")
        assert_parse("4294967296.4294967296", "4294967296.4294967296")
        assert_parse("-4294967296.4294967296", "-4294967296.4294967296")
        assert_parse("000000000123.000000000123", "123.000000000123")
        assert_parse("-000000000123.000000000123", "-123.000000000123")
        assert_parse(".5", "0.5")
        assert_parse("-.5", "-0.5")
        assert_parse("12.", "12")
        assert_parse("1.2300", "1.23")

    def test_scientific(self) -> None:
        assert_parse("0e0", "0")
        assert_parse("-0E-0", "0")
        assert_parse("0000000000E0000000000", "0")
        assert_parse("-0000000000E-0000000000", "0")
        assert_parse("00000000001e0000000000", "1")
        assert_parse("-00000000001e-0000000000", "-1")
        assert_parse("00000000001e00000000001", "10")
        assert_parse("-00000000001e-00000000001", "-0.1")
        assert_parse("1e10", "10000000000")
        assert_parse("-1e-10", "-0.0000000001")
        assert_parse("0000001.23456000e3", "1234.56")
        assert_parse("-0000001.23456000E-3", "-0.00123456")
        assert_parse("1.e5", "100000")
        assert_parse(".5e1", "5")
        assert_parse("1.5e+2", "150")

    def test_scale_counts_digits_shifted_past_point(self) -> None:
        """Цифры integral, сдвинутые отрицательной экспонентой за точку, выводятся"""
        assert_parse("150e-3", "0.150")
        assert_parse("100e-2", "1.00")

    def test_surrounding_whitespace(self) -> None:
        assert_parse(" \t\r\n12.5\x0c ", "12.5")

    def test_zero_is_canonical(self) -> None:
        """Любая запись нуля даёт канонический ZERO"""
        for s in ["0", "-0", "+0", ".0", "0.0e5", "-0.000e-99999", "0000", "0e10000000000"]:
            dec = parse_decimal(s)
            assert dec is ZERO, s
            assert dec.is_zero()
            assert dec.sign == Sign.POSITIVE
            assert dec.weight == 0
            assert dec.scale == 0

    def test_representation_fields(self) -> None:
        """Поля представления для 1234.56"""
        dec = parse_decimal("0000001.23456000e3")
        assert dec.sign == Sign.POSITIVE
        assert dec.weight == 0
        assert dec.scale == 2
        assert dec.ndigits == 2
        assert dec.digit_groups() == (1234, 560000000)

    def test_no_edge_zero_groups(self) -> None:
        """Крайние группы представления никогда не нулевые"""
        for s in [
            "1e10",
            "1000000000",
            "0.000000000123",
            "0.0000000000000000001",
            "123456789000000000",
            "-1e-100",
            "1.000000000000000001",
        ]:
            groups = parse_decimal(s).digit_groups()
            assert groups, s
            assert groups[0] != 0, s
            assert groups[-1] != 0, s


# =============================================================================
# ОШИБКИ
# =============================================================================


class TestParseErrors:
    """Тесты классификации ошибок"""

    def test_empty(self) -> None:
        for s in ["", "   ", "\t\n\r\x0c"]:
            assert_parse_error(s, ParseErrorKind.EMPTY)

    def test_invalid(self) -> None:
        for s in [
            "-",
            "   -   ",
            "-.",
            "- 1",
            "-NaN",
            "NaN.",
            "NaN1",
            "   NaN   .   ",
            "   NaN   1   ",
            ".",
            "   .   ",
            "e",
            "   e   ",
            "-e",
            "-1e",
            "1e1.1",
            "-1 e1",
            "   x   ",
            "1.2.3",
            "1,5",
            "1_000",
            "١٢",
            "1\x0b",
            "inf",
        ]:
            assert_parse_error(s, ParseErrorKind.INVALID)

    def test_overflow(self) -> None:
        for s in ["1e10000000000", "1e2147483648", "1e1000", "1.5E+0001000"]:
            assert_parse_error(s, ParseErrorKind.OVERFLOW)

    def test_underflow(self) -> None:
        for s in ["1e-2147483648", "1e-1000", "-1.5e-0001000"]:
            assert_parse_error(s, ParseErrorKind.UNDERFLOW)

    def test_error_message_and_text(self) -> None:
        with pytest.raises(DecimalParseError) as exc_info:
            parse_decimal("1e10000000000")
        assert exc_info.value.text == "1e10000000000"
        assert "numeric overflow" in str(exc_info.value)

        with pytest.raises(DecimalParseError, match="cannot parse number from empty string"):
            parse_decimal("  ")

        with pytest.raises(DecimalParseError, match="invalid number"):
            parse_decimal("x")

        with pytest.raises(DecimalParseError, match="numeric underflow"):
            parse_decimal("1e-1000")

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_decimal("abc")

    def test_non_str_rejected(self) -> None:
        with pytest.raises(TypeError):
            parse_decimal(b"1")  # type: ignore
        with pytest.raises(TypeError):
            parse_decimal(1)  # type: ignore


class TestClassificationOrder:
    """Классифицируется первое нарушение в порядке конвейера"""

    def test_exponent_before_trailing_garbage(self) -> None:
        assert_parse_error("1e1000x", ParseErrorKind.OVERFLOW)
        assert_parse_error("1e-1000 x", ParseErrorKind.UNDERFLOW)

    def test_trailing_garbage_before_precision(self) -> None:
        assert_parse_error("1" * 37 + "x", ParseErrorKind.INVALID)

    def test_trailing_garbage_after_zero(self) -> None:
        assert_parse_error("0e99999x", ParseErrorKind.INVALID)
        assert_parse_error("0.0 0", ParseErrorKind.INVALID)

    def test_exponent_before_precision(self) -> None:
        assert_parse_error("1" * 40 + "e1000", ParseErrorKind.OVERFLOW)
        assert_parse_error("1" * 40 + "e-1000", ParseErrorKind.UNDERFLOW)


# =============================================================================
# ГРАНИЧНЫЕ СЛУЧАИ
# =============================================================================


class TestBoundaries:
    """Граничные случаи точности и экспоненты"""

    def test_max_precision_accepted(self) -> None:
        digits = "123456789" * 4
        assert len(digits) == MAX_PRECISION
        assert_parse(digits, digits)
        assert_parse("-" + digits, "-" + digits)
        assert_parse("0000" + digits, digits)

    def test_max_precision_split_by_point(self) -> None:
        s = "123456789012345678.901234567890123456"
        assert_parse(s, s)
        assert_parse("." + "1" * 36, "0." + "1" * 36)

    def test_precision_exceeded_overflow(self) -> None:
        assert_parse_error("1" * 37, ParseErrorKind.OVERFLOW)
        assert_parse_error("1" * 18 + "." + "1" * 19, ParseErrorKind.OVERFLOW)
        assert_parse_error("-" + "9" * 37, ParseErrorKind.OVERFLOW)

    def test_single_zero_integral_counts_toward_precision(self) -> None:
        """Одиночный 0 перед точкой входит в число цифр"""
        assert_parse("0." + "1" * 35, "0." + "1" * 35)
        assert_parse_error("0." + "1" * 36, ParseErrorKind.OVERFLOW)

    def test_trimmed_zeros_do_not_count(self) -> None:
        """Обрезанные ведущие/хвостовые нули не входят в лимит"""
        s = "0" * 50 + "1" * 36 + "." + "0" * 50
        assert_parse(s, "1" * 36)

    def test_exponent_three_digits_accepted(self) -> None:
        assert_parse("1e999", "1" + "0" * 999)
        assert_parse("1e-999", "0." + "0" * 998 + "1")
        assert_parse("1e0000999", "1" + "0" * 999)

    def test_exponent_four_digits_rejected(self) -> None:
        assert_parse_error("1e1000", ParseErrorKind.OVERFLOW)
        assert_parse_error("1e-1000", ParseErrorKind.UNDERFLOW)

    def test_zero_accepts_any_exponent(self) -> None:
        for s in ["0e10000000000", "0e-10000000000", ".0e99999999999", "-0.000E+1234567"]:
            assert parse_decimal(s) is ZERO

    def test_extreme_weights(self) -> None:
        """Крайние веса при максимальной точности и экспоненте"""
        big = parse_decimal("9" * 36 + "e999")
        assert big.weight == (36 + 999 - 1) // 9
        small = parse_decimal("." + "0" * 35 + "1e-999")
        assert small.weight == -1035 // 9
        assert small.scale == 36 + 999


# =============================================================================
# СВОЙСТВА
# =============================================================================


def _valid_samples() -> list[str]:
    """Строки, последняя значащая цифра которых ненулевая"""
    samples = []
    for integral, fractional in [
        ("1", ""),
        ("12", "5"),
        ("123456789", "987654321"),
        ("", "000123"),
        ("0", "0000000001"),
        ("4703178999618078116505370421101", ""),
        ("99999999999999999", "9999999999999999999"),
    ]:
        for exponent in [-40, -19, -10, -9, -1, 0, 1, 8, 9, 17, 40]:
            for sign in ["", "-"]:
                samples.append(f"{sign}{integral}.{fractional}e{exponent}")
    return samples


def _fits_precision(text: str) -> bool:
    """Каноническая строка укладывается в MAX_PRECISION при повторном разборе"""
    integral, _, fractional = text.lstrip("-").partition(".")
    return len(integral) + len(fractional.rstrip("0")) <= MAX_PRECISION


class TestProperties:
    """Каноническая форма и идемпотентность"""

    def test_format_matches_canonical_form(self) -> None:
        for s in _valid_samples():
            assert format_decimal(parse_decimal(s)) == canonical_form(s), s

    def test_reparse_idempotent(self) -> None:
        """parse(format(parse(s))) == parse(s)"""
        for s in _valid_samples() + ["1e30", "1e-30", "NaN", "0"]:
            value = parse_decimal(s)
            if not _fits_precision(format_decimal(value)):
                continue
            again = parse_decimal(format_decimal(value))
            assert again == value, s
            assert format_decimal(again) == format_decimal(value), s


# =============================================================================
# LOGGING
# =============================================================================


class TestLogging:
    """Ошибки парсинга логируются на уровне DEBUG"""

    def test_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="fast_decimal.core.text.parser")
        with pytest.raises(DecimalParseError):
            parse_decimal("1e1000")
        assert "kind=overflow" in caplog.text
        assert "'1e1000'" in caplog.text

    def test_success_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="fast_decimal.core.text.parser")
        parse_decimal("1.5")
        assert caplog.records == []
