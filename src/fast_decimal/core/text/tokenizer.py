"""
Tokenizer: разбор грамматики десятичной строки

Грамматика (без окружающих пробелов и NaN):

    [+|-] digits* [. digits*] [(e|E) [+|-] digits+]

Разбиение выполняется без аллокации цифр: части возвращаются как срезы
исходной строки, остаток строки возвращается вызывающей стороне для
проверки хвоста.

Ошибки грамматики (INVALID) и экспоненты (OVERFLOW / UNDERFLOW)
поднимаются в момент обнаружения.
"""

from dataclasses import dataclass
from typing import Final

from fast_decimal.core.domain.errors import DecimalParseError, ParseErrorKind
from fast_decimal.core.encoding import MAX_EXPONENT_DIGITS, Sign

# ASCII whitespace: space, \t, \n, \x0c, \r (вертикальный таб не входит)
ASCII_WHITESPACE: Final[frozenset[str]] = frozenset(" \t\n\x0c\r")

ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# PARTS
# =============================================================================


@dataclass(frozen=True)
class DecimalParts:
    """
    Составные части десятичной строки.

    integral: цифры до точки, ведущие нули обрезаны (кроме одиночного "0")
    fractional: цифры после точки, хвостовые нули обрезаны
    exponent: десятичная экспонента (0 если отсутствует или число нулевое)
    """

    sign: Sign
    integral: str
    fractional: str
    exponent: int

    def is_zero(self) -> bool:
        """Десятичная часть нулевая (без учёта экспоненты)"""
        return self.integral in ("", "0") and not self.fractional


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def eat_whitespaces(s: str) -> str:
    """Отбрасывает ведущие ASCII пробелы"""
    i = 0
    while i < len(s) and s[i] in ASCII_WHITESPACE:
        i += 1
    return s[i:]


def is_blank(s: str) -> bool:
    """Строка пустая или состоит только из ASCII пробелов"""
    return all(c in ASCII_WHITESPACE for c in s)


def eat_digits(s: str) -> tuple[str, str]:
    """
    Отделяет максимальный префикс из ASCII цифр.

    Returns:
        (цифры, остаток)
    """
    i = 0
    while i < len(s) and s[i] in ASCII_DIGITS:
        i += 1
    return s[:i], s[i:]


def extract_sign(s: str) -> tuple[Sign, str]:
    """Отделяет необязательный знак; остаток не проверяется"""
    if s[:1] == "+":
        return Sign.POSITIVE, s[1:]
    if s[:1] == "-":
        return Sign.NEGATIVE, s[1:]
    return Sign.POSITIVE, s


def extract_nan(s: str) -> tuple[bool, str]:
    """
    Проверяет токен NaN (без учёта регистра) в начале строки.

    Returns:
        (найден ли NaN, остаток после токена)
    """
    if s[:3].lower() == "nan":
        return True, s[3:]
    return False, s


def extract_exponent(s: str, decimal_is_zero: bool, text: str) -> tuple[int, str]:
    """
    Разбор экспоненты после маркера e/E.

    Для нулевой десятичной части экспонента любой длины принимается и
    считается равной 0 (на ноль она не влияет).

    Args:
        s: Строка сразу после маркера e/E
        decimal_is_zero: Десятичная часть нулевая
        text: Исходная строка (для ошибки)

    Returns:
        (экспонента, остаток)

    Raises:
        DecimalParseError: INVALID если нет цифр экспоненты;
            OVERFLOW / UNDERFLOW если значащих цифр больше MAX_EXPONENT_DIGITS
    """
    sign, s = extract_sign(s)
    number, s = eat_digits(s)

    if not number:
        raise DecimalParseError(ParseErrorKind.INVALID, text)

    if decimal_is_zero:
        return 0, s

    number = number.lstrip("0")

    if len(number) > MAX_EXPONENT_DIGITS:
        if sign == Sign.NEGATIVE:
            raise DecimalParseError(ParseErrorKind.UNDERFLOW, text)
        raise DecimalParseError(ParseErrorKind.OVERFLOW, text)

    exponent = int(number) if number else 0
    return (-exponent if sign == Sign.NEGATIVE else exponent), s


# =============================================================================
# SPLIT
# =============================================================================


def split_decimal(s: str, text: str | None = None) -> tuple[DecimalParts, str]:
    """
    Проверяет грамматику и выделяет integral / fractional / exponent.

    Пробелы вокруг строки и NaN здесь не обрабатываются. Хвост после
    грамматики возвращается как есть.

    Args:
        s: Строка без ведущих пробелов
        text: Исходная строка для сообщения об ошибке (по умолчанию s)

    Returns:
        (части числа, остаток строки)

    Raises:
        DecimalParseError: INVALID при нарушении грамматики;
            OVERFLOW / UNDERFLOW при слишком длинной экспоненте

    Examples:
        >>> split_decimal("-001.2300e5 ")
        (DecimalParts(sign=<Sign.NEGATIVE: 'negative'>, integral='1', fractional='23', exponent=5), ' ')
    """
    text = s if text is None else text
    sign, s = extract_sign(s)

    if not s:
        raise DecimalParseError(ParseErrorKind.INVALID, text)

    integral, s = eat_digits(s)
    if len(integral) > 1:
        integral = integral.lstrip("0") or "0"

    fractional = ""
    exponent = 0

    head = s[:1]
    if head in ("e", "E"):
        if not integral:
            raise DecimalParseError(ParseErrorKind.INVALID, text)
        exponent, s = extract_exponent(s[1:], integral == "0", text)
    elif head == ".":
        fractional, s = eat_digits(s[1:])
        if not integral and not fractional:
            raise DecimalParseError(ParseErrorKind.INVALID, text)

        fractional = fractional.rstrip("0")

        if s[:1] in ("e", "E"):
            decimal_is_zero = integral in ("", "0") and not fractional
            exponent, s = extract_exponent(s[1:], decimal_is_zero, text)
    elif not integral:
        raise DecimalParseError(ParseErrorKind.INVALID, text)

    return DecimalParts(sign=sign, integral=integral, fractional=fractional, exponent=exponent), s
