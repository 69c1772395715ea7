"""
fast_decimal: десятичное число фиксированной ёмкости

Точная base-10 семантика без binary floating-point:
- parse_decimal: текст → Decimal (целые, дробные, научная нотация, NaN)
- compare: полный порядок по digit-group представлению
- format_decimal: Decimal → каноническая десятичная строка
"""

from fast_decimal.core.domain import (
    NAN,
    ZERO,
    Decimal,
    DecimalParseError,
    ParseErrorKind,
)
from fast_decimal.core.encoding import MAX_PRECISION, Sign
from fast_decimal.core.math import Ordering, compare, compare_abs
from fast_decimal.core.text.formatter import format_decimal
from fast_decimal.core.text.parser import parse_decimal

__all__ = [
    # Types
    "Decimal",
    "Sign",
    "Ordering",
    # Constants
    "ZERO",
    "NAN",
    "MAX_PRECISION",
    # Errors
    "DecimalParseError",
    "ParseErrorKind",
    # Functions
    "parse_decimal",
    "format_decimal",
    "compare",
    "compare_abs",
]
