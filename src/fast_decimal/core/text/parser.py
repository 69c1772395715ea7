"""
Parser: текст → Decimal

Конвейер:
1. Отбрасывание ASCII пробелов вокруг строки (пустая строка → EMPTY)
2. NaN (без учёта регистра, после него только пробелы)
3. Грамматика: знак, integral, fractional, экспонента (tokenizer)
4. Хвост после грамматики: только пробелы
5. Нулевая десятичная часть → канонический ZERO
6. Лимит точности MAX_PRECISION
7. weight / scale и упаковка цифр в группы (digit_packing)
8. Проверка диапазонов и сборка Decimal

Классифицируется первое нарушение в порядке конвейера. Ошибка всегда
DecimalParseError; частично построенных значений не бывает.
"""

import logging

from fast_decimal.core.domain.decimal import NAN, ZERO, Decimal
from fast_decimal.core.domain.errors import DecimalParseError, ParseErrorKind
from fast_decimal.core.encoding import (
    MAX_DIGIT_GROUPS,
    MAX_PRECISION,
    SCALE_MAX,
    SCALE_MIN,
    WEIGHT_MAX,
    WEIGHT_MIN,
)
from fast_decimal.core.text.digit_packing import pack_digit_groups
from fast_decimal.core.text.tokenizer import (
    DecimalParts,
    eat_whitespaces,
    extract_nan,
    is_blank,
    split_decimal,
)

logger = logging.getLogger(__name__)


def build_decimal(parts: DecimalParts, text: str) -> Decimal:
    """
    Сборка Decimal из проверенных частей строки.

    Args:
        parts: Части числа после tokenizer
        text: Исходная строка для сообщения об ошибке

    Returns:
        Decimal (ZERO для нулевой десятичной части при любой экспоненте)

    Raises:
        DecimalParseError: OVERFLOW при превышении точности или диапазонов
    """
    if parts.is_zero():
        return ZERO

    integral = parts.integral
    fractional = parts.fractional

    if len(integral) + len(fractional) > MAX_PRECISION:
        raise DecimalParseError(ParseErrorKind.OVERFLOW, text)

    dec_weight = len(integral) + parts.exponent - 1
    dec_scale = max(0, len(fractional) - parts.exponent)

    packed = pack_digit_groups(integral + fractional, dec_weight)

    if len(packed.groups) > MAX_DIGIT_GROUPS:
        raise DecimalParseError(ParseErrorKind.OVERFLOW, text)

    if not WEIGHT_MIN <= packed.weight <= WEIGHT_MAX or not SCALE_MIN <= dec_scale <= SCALE_MAX:
        raise DecimalParseError(ParseErrorKind.OVERFLOW, text)

    return Decimal.from_raw_parts(
        sign=parts.sign,
        weight=packed.weight,
        scale=dec_scale,
        ndigits=len(packed.groups),
        digits=packed.groups,
    )


def _parse(text: str) -> Decimal:
    s = eat_whitespaces(text)
    if not s:
        raise DecimalParseError(ParseErrorKind.EMPTY, text)

    is_nan, s = extract_nan(s)
    if is_nan:
        if not is_blank(s):
            raise DecimalParseError(ParseErrorKind.INVALID, text)
        return NAN

    parts, s = split_decimal(s, text)
    if not is_blank(s):
        raise DecimalParseError(ParseErrorKind.INVALID, text)

    return build_decimal(parts, text)


def parse_decimal(text: str) -> Decimal:
    """
    Разбор десятичной строки в Decimal.

    Принимает целые, дробные, научную нотацию и NaN; пробелы вокруг
    строки игнорируются.

    Args:
        text: Десятичная строка

    Returns:
        Decimal (ZERO для любого нулевого значения, NAN для NaN)

    Raises:
        TypeError: Если text не str
        DecimalParseError: EMPTY / INVALID / OVERFLOW / UNDERFLOW

    Examples:
        >>> str(parse_decimal("0000001.23456000e3"))
        '1234.56'
        >>> parse_decimal("1e10000000000")
        Traceback (most recent call last):
        ...
        fast_decimal.core.domain.errors.DecimalParseError: numeric overflow: '1e10000000000'
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    try:
        return _parse(text)
    except DecimalParseError as e:
        logger.debug("decimal parse failed: kind=%s text=%r", e.kind.value, text)
        raise
