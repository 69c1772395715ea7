"""
Digit Packing: упаковка десятичных цифр в группы base 10^9

Двухфазное преобразование:
1. Pad: непрерывная строка цифр дополняется нулями слева и справа так,
   чтобы её границы совпали с границами 9-значных групп
2. Chunk: строка режется на группы по 9 цифр

Выравнивание задаётся одной формулой:

    weight      = floor(dec_weight / 9)
    leading_pad = (weight + 1) * 9 - (dec_weight + 1)

где dec_weight: десятичная экспонента старшей цифры строки (0 для единиц),
weight: индекс группы base 10^9, содержащей эту цифру.

После нарезки крайние нулевые группы отбрасываются: ведущие: с уменьшением
weight (значение сохраняется), хвостовые: только уменьшением числа групп.
"""

from dataclasses import dataclass

from fast_decimal.core.encoding import DEC_DIGITS


# =============================================================================
# ALIGNMENT
# =============================================================================


def group_weight(dec_weight: int) -> int:
    """
    Индекс группы base 10^9, содержащей цифру с десятичной экспонентой dec_weight.

    Целочисленное деление с округлением к минус бесконечности.

    Examples:
        >>> group_weight(0), group_weight(8), group_weight(9)
        (0, 0, 1)
        >>> group_weight(-1), group_weight(-9), group_weight(-10)
        (-1, -1, -2)
    """
    return dec_weight // DEC_DIGITS


def leading_pad(weight: int, dec_weight: int) -> int:
    """Число нулей перед старшей цифрой внутри её группы (0..8)"""
    return (weight + 1) * DEC_DIGITS - (dec_weight + 1)


# =============================================================================
# PAD / CHUNK
# =============================================================================


def pad_to_groups(run: str, weight: int, dec_weight: int) -> str:
    """
    Фаза 1: дополнение строки цифр нулями до границ групп.

    Args:
        run: Непрерывная строка десятичных цифр (integral + fractional)
        weight: Вес группы старшей цифры
        dec_weight: Десятичная экспонента старшей цифры

    Returns:
        Строка длиной кратной DEC_DIGITS
    """
    lead = leading_pad(weight, dec_weight)
    trail = -(lead + len(run)) % DEC_DIGITS
    return "0" * lead + run + "0" * trail


def chunk_groups(padded: str) -> list[int]:
    """Фаза 2: нарезка выровненной строки на 9-значные группы"""
    return [int(padded[i : i + DEC_DIGITS]) for i in range(0, len(padded), DEC_DIGITS)]


# =============================================================================
# PACK
# =============================================================================


@dataclass(frozen=True)
class PackedDigits:
    """Результат упаковки: вес старшей хранимой группы и сами группы"""

    weight: int
    groups: tuple[int, ...]


def pack_digit_groups(run: str, dec_weight: int) -> PackedDigits:
    """
    Упаковка строки цифр в группы base 10^9 с обрезкой крайних нулевых групп.

    Args:
        run: Строка десятичных цифр, старшая первой
        dec_weight: Десятичная экспонента первой цифры run

    Returns:
        PackedDigits; для строки из одних нулей groups пустой

    Examples:
        >>> pack_digit_groups("123456", 3)
        PackedDigits(weight=0, groups=(1234, 560000000))
        >>> pack_digit_groups("0001", 0)
        PackedDigits(weight=-1, groups=(1000000,))
    """
    weight = group_weight(dec_weight)
    groups = chunk_groups(pad_to_groups(run, weight, dec_weight))

    start = 0
    while start < len(groups) and groups[start] == 0:
        start += 1
        weight -= 1

    end = len(groups)
    while end > start and groups[end - 1] == 0:
        end -= 1

    return PackedDigits(weight=weight, groups=tuple(groups[start:end]))
