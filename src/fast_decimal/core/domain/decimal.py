"""
Decimal: digit-group представление десятичного числа

Immutable Pydantic модель фиксированного размера:
- sign: тег знака (POSITIVE / NEGATIVE / NAN)
- weight: base-10^9 экспонента старшей хранимой группы
- scale: число цифр после точки при выводе (display-атрибут)
- ndigits: число заполненных групп (0..5)
- digits: ровно 5 групп в [0, 10^9), старшая первой; позиции >= ndigits равны 0

Значение = sum(digits[i] * 10^(9 * (weight - i))) для i < ndigits.

ИНВАРИАНТЫ (обеспечиваются парсером, не конструктором):
1. Ноль: только ndigits == 0, POSITIVE, weight 0, scale 0
2. Крайние хранимые группы не бывают нулевыми
3. NaN: ndigits == 0 и тег NAN
"""

from collections.abc import Sequence
from typing import Annotated, Final

from pydantic import BaseModel, Field, field_validator

from fast_decimal.core.encoding import (
    MAX_DIGIT_GROUPS,
    NBASE,
    SCALE_MAX,
    SCALE_MIN,
    WEIGHT_MAX,
    WEIGHT_MIN,
    Sign,
)
from fast_decimal.core.math.comparison import Ordering, compare
from fast_decimal.core.text.formatter import format_decimal

DigitGroup = Annotated[int, Field(ge=0, lt=NBASE)]


# =============================================================================
# DECIMAL MODEL
# =============================================================================


class Decimal(BaseModel):
    """
    Десятичное число в digit-group кодировке.

    Immutable модель (frozen=True): создаётся парсером один раз и
    дальше только читается. Равенство и порядок: по значению (scale не
    учитывается), см. fast_decimal.core.math.comparison.
    """

    sign: Sign = Field(..., description="Тег знака (NaN кодируется знаком)")
    weight: int = Field(
        ..., ge=WEIGHT_MIN, le=WEIGHT_MAX, description="base-10^9 экспонента старшей группы"
    )
    scale: int = Field(
        ..., ge=SCALE_MIN, le=SCALE_MAX, description="Цифр после точки при выводе"
    )
    ndigits: int = Field(..., ge=0, le=MAX_DIGIT_GROUPS, description="Заполненных групп")
    digits: tuple[DigitGroup, ...] = Field(..., description="Группы base 10^9, старшая первой")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits_capacity(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Буфер групп всегда фиксированного размера"""
        if len(v) != MAX_DIGIT_GROUPS:
            raise ValueError(f"digits must hold exactly {MAX_DIGIT_GROUPS} groups, got {len(v)}")
        return v

    @classmethod
    def from_raw_parts(
        cls,
        sign: Sign,
        weight: int,
        scale: int,
        ndigits: int,
        digits: Sequence[int],
    ) -> "Decimal":
        """
        Сборка значения из уже нормализованных полей.

        Проверяются только структурные ограничения (диапазоны полей, размер
        буфера). Нормализацию (обрезка нулевых групп, канонический ноль)
        выполняет вызывающая сторона.

        Args:
            sign: Тег знака
            weight: Вес старшей группы
            scale: Display scale
            ndigits: Число заполненных групп
            digits: Заполненные группы (дополняются нулями до 5)

        Returns:
            Decimal

        Raises:
            pydantic.ValidationError: Если поля вне допустимых диапазонов
        """
        padded = tuple(digits) + (0,) * (MAX_DIGIT_GROUPS - len(digits))
        return cls(sign=sign, weight=weight, scale=scale, ndigits=ndigits, digits=padded)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_sign_positive(self) -> bool:
        return self.sign == Sign.POSITIVE

    def is_sign_negative(self) -> bool:
        return self.sign == Sign.NEGATIVE

    def is_nan(self) -> bool:
        return self.sign == Sign.NAN

    def is_zero(self) -> bool:
        """Ноль: нет групп и это не NaN"""
        return self.ndigits == 0 and self.sign != Sign.NAN

    def digit_groups(self) -> tuple[int, ...]:
        """Заполненные группы (digits[:ndigits])"""
        return self.digits[: self.ndigits]

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return format_decimal(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return compare(self, other) == Ordering.EQUAL

    def __hash__(self) -> int:
        # Для равных значений sign/weight/группы совпадают (канонические группы)
        return hash((self.sign, self.weight, self.digit_groups()))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return compare(self, other) == Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return compare(self, other) != Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return compare(self, other) == Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return compare(self, other) != Ordering.LESS


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO: Final[Decimal] = Decimal.from_raw_parts(Sign.POSITIVE, 0, 0, 0, ())

NAN: Final[Decimal] = Decimal.from_raw_parts(Sign.NAN, 0, 0, 0, ())
