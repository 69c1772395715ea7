"""
Core math modules для fast_decimal

Сравнение значений по digit-group представлению.
"""

from fast_decimal.core.math.comparison import Ordering, compare, compare_abs

__all__ = [
    "Ordering",
    "compare",
    "compare_abs",
]
