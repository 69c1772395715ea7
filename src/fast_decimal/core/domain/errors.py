"""
Ошибки парсинга Decimal

Четыре взаимоисключающих вида ошибки. Парсер классифицирует первое
встреченное нарушение и никогда не возвращает частично построенное значение.
"""

from enum import Enum


class ParseErrorKind(str, Enum):
    """Вид ошибки парсинга"""

    EMPTY = "empty"
    INVALID = "invalid"
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"


_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.EMPTY: "cannot parse number from empty string",
    ParseErrorKind.INVALID: "invalid number",
    ParseErrorKind.OVERFLOW: "numeric overflow",
    ParseErrorKind.UNDERFLOW: "numeric underflow",
}


class DecimalParseError(ValueError):
    """
    Строка не может быть разобрана как Decimal.

    Attributes:
        kind: Вид ошибки (EMPTY / INVALID / OVERFLOW / UNDERFLOW)
        text: Исходная строка
    """

    def __init__(self, kind: ParseErrorKind, text: str) -> None:
        self.kind = kind
        self.text = text
        super().__init__(f"{_MESSAGES[kind]}: {text!r}")
