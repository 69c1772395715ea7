"""
Comparison: полный порядок на Decimal без декодирования в текст

Сравнение работает только по digit-group представлению:
- Знак и ноль решаются по тегу знака и ndigits
- Модуль сравнивается по группам, выровненным по weight
- scale (display-атрибут) в сравнении не участвует

NaN: NaN == NaN, NaN больше любого не-NaN значения.
Это не IEEE-754 семантика: порядок остаётся полным, NaN сортируется в конец.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fast_decimal.core.domain.decimal import Decimal


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Результат трёхстороннего сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> Ordering:
        """Ordering для сравнения с переставленными аргументами"""
        return Ordering(-self.value)


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_abs(a: Decimal, b: Decimal) -> Ordering:
    """
    Сравнение абсолютных значений a и b.

    Алгоритм:
    1. Группы старше первой общей позиции (есть только с одной стороны):
       любая ненулевая решает результат
    2. Выровненные группы сравниваются попарно, первое различие решает
    3. Оставшиеся группы с любой стороны: ненулевая решает результат

    Args:
        a: Левый операнд (не NaN)
        b: Правый операнд (не NaN)

    Returns:
        Ordering для |a| относительно |b|
    """
    a_digits = a.digit_groups()
    b_digits = b.digit_groups()
    a_weight = a.weight
    b_weight = b.weight

    i1 = 0
    i2 = 0

    # Группы до первой общей позиции
    while a_weight > b_weight and i1 < len(a_digits):
        if a_digits[i1] != 0:
            return Ordering.GREATER
        i1 += 1
        a_weight -= 1

    while b_weight > a_weight and i2 < len(b_digits):
        if b_digits[i2] != 0:
            return Ordering.LESS
        i2 += 1
        b_weight -= 1

    # Здесь либо веса совпали, либо у одной из сторон закончились группы
    if a_weight == b_weight:
        while i1 < len(a_digits) and i2 < len(b_digits):
            if a_digits[i1] != b_digits[i2]:
                return Ordering.GREATER if a_digits[i1] > b_digits[i2] else Ordering.LESS
            i1 += 1
            i2 += 1

    # Остаток: любая ненулевая группа означает, что эта сторона больше
    if any(a_digits[i1:]):
        return Ordering.GREATER
    if any(b_digits[i2:]):
        return Ordering.LESS

    return Ordering.EQUAL


# =============================================================================
# ПОЛНОЕ СРАВНЕНИЕ
# =============================================================================


def compare(a: Decimal, b: Decimal) -> Ordering:
    """
    Трёхстороннее сравнение двух Decimal.

    Порядок:
    - NaN == NaN, NaN > любого не-NaN
    - Ноль меньше любого положительного и больше любого отрицательного
    - Положительное > отрицательного
    - Одинаковый знак: сравнение модулей (инвертируется для отрицательных)

    Args:
        a: Левый операнд
        b: Правый операнд

    Returns:
        Ordering для a относительно b

    Examples:
        >>> compare(parse_decimal("1.0"), parse_decimal("1.00"))
        <Ordering.EQUAL: 0>
        >>> compare(parse_decimal("-1.2"), parse_decimal("-1.12"))
        <Ordering.LESS: -1>
    """
    if a.is_nan() or b.is_nan():
        if a.is_nan() and b.is_nan():
            return Ordering.EQUAL
        return Ordering.GREATER if a.is_nan() else Ordering.LESS

    if a.is_zero():
        if b.is_zero():
            return Ordering.EQUAL
        return Ordering.GREATER if b.is_sign_negative() else Ordering.LESS

    if b.is_zero():
        return Ordering.GREATER if a.is_sign_positive() else Ordering.LESS

    if a.is_sign_positive():
        if b.is_sign_negative():
            return Ordering.GREATER
        return compare_abs(a, b)

    if b.is_sign_positive():
        return Ordering.LESS

    # Оба отрицательные: больший модуль означает меньшее значение
    return compare_abs(a, b).reverse()
