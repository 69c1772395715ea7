"""
Formatter: каноническое текстовое представление Decimal

Выводит ровно scale цифр после точки. Последняя неполная группа
усекается (не округляется). Группы вне хранимого диапазона дают нули.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fast_decimal.core.encoding import DEC_DIGITS

if TYPE_CHECKING:
    from fast_decimal.core.domain.decimal import Decimal


NAN_TOKEN = "NaN"


def _group_at(groups: tuple[int, ...], index: int) -> int:
    """Группа по индексу; вне хранимого диапазона: 0"""
    if 0 <= index < len(groups):
        return groups[index]
    return 0


def format_decimal(value: Decimal) -> str:
    """
    Рендеринг Decimal в каноническую десятичную строку.

    Args:
        value: Значение для вывода

    Returns:
        "NaN" для NaN, "0" для нуля, иначе [-]integral[.fraction]
        с ровно value.scale цифрами после точки

    Examples:
        >>> format_decimal(parse_decimal("-00000000001e-00000000001"))
        '-0.1'
        >>> format_decimal(parse_decimal("0000001.23456000e3"))
        '1234.56'
    """
    if value.is_nan():
        return NAN_TOKEN

    if value.is_zero():
        return "0"

    groups = value.digit_groups()
    out: list[str] = []

    if value.is_sign_negative():
        out.append("-")

    # Цифры до точки
    if value.weight < 0:
        out.append("0")
    else:
        for d in range(value.weight + 1):
            dig = _group_at(groups, d)
            # Первая группа без ведущих нулей
            if d == 0:
                out.append(str(dig))
            else:
                out.append(f"{dig:0{DEC_DIGITS}d}")

    # Цифры после точки
    if value.scale > 0:
        out.append(".")
        d = value.weight + 1
        for pos in range(0, value.scale, DEC_DIGITS):
            dig = _group_at(groups, d)
            if pos + DEC_DIGITS <= value.scale:
                out.append(f"{dig:0{DEC_DIGITS}d}")
            else:
                # усечение последней группы
                width = value.scale - pos
                dig //= 10 ** (DEC_DIGITS - width)
                out.append(f"{dig:0{width}d}")
            d += 1

    return "".join(out)
