"""
Encoding: параметры digit-group представления

Единственный источник констант, определяющих формат хранения Decimal:
- Размер группы цифр (base 10^9, 9 десятичных цифр на группу)
- Ёмкость фиксированного буфера групп
- Лимиты точности и экспоненты парсера
- Допустимые диапазоны weight / scale

Все модули пакета берут лимиты только отсюда.
"""

from enum import Enum
from typing import Final


# =============================================================================
# DIGIT GROUPS
# =============================================================================

# Количество десятичных цифр в одной группе
DEC_DIGITS: Final[int] = 9

# Основание группы (10^DEC_DIGITS)
NBASE: Final[int] = 10**DEC_DIGITS

# Ёмкость буфера групп: 5 * 9 = 45 десятичных цифр
MAX_DIGIT_GROUPS: Final[int] = 5


# =============================================================================
# ЛИМИТЫ ПАРСЕРА
# =============================================================================

# Максимум значащих цифр (integral + fractional) во входной строке
MAX_PRECISION: Final[int] = 36

# Максимум значащих цифр экспоненты (после отбрасывания ведущих нулей)
MAX_EXPONENT_DIGITS: Final[int] = 3


# =============================================================================
# ДИАПАЗОНЫ ПОЛЕЙ
# =============================================================================

# weight хранится как signed 8-bit
WEIGHT_MIN: Final[int] = -128
WEIGHT_MAX: Final[int] = 127

# scale хранится как signed 16-bit (exponent до -999 даёт scale > 127)
SCALE_MIN: Final[int] = -32768
SCALE_MAX: Final[int] = 32767


# =============================================================================
# SIGN TAG
# =============================================================================


class Sign(str, Enum):
    """Знак значения; NaN кодируется отдельным тегом, без цифр"""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NAN = "nan"
