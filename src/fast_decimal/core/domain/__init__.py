"""
Domain models and value objects.

Contains the Decimal value type, its process-wide constants and the parse error taxonomy.
"""

from fast_decimal.core.domain.decimal import NAN, ZERO, Decimal
from fast_decimal.core.domain.errors import DecimalParseError, ParseErrorKind

__all__ = [
    # Decimal model
    "Decimal",
    "ZERO",
    "NAN",
    # Errors
    "DecimalParseError",
    "ParseErrorKind",
]
