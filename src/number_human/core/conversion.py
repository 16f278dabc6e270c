"""
Numeric Conversion: нормализация входных чисел в Decimal

Единственная точка входа чисел в систему. Каждый поддерживаемый тип
регистрирует собственную реализацию to_decimal:
- int      → Decimal(int), точно
- float    → Decimal(repr(float)), кратчайшее round-trip представление
- Decimal  → без изменений

Всё остальное (включая bool, str, None) → InvalidInputError.
NaN/Inf отклоняются для float и Decimal.
"""

from decimal import Decimal
from functools import singledispatch
from typing import Any

from number_human.core.math.decimal_ops import is_finite_decimal


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidInputError(TypeError, ValueError):
    """
    Значение не поддерживает Numeric Conversion.

    Наследует TypeError (неподдерживаемый тип) и ValueError (NaN/Inf),
    поэтому ловится любым из стандартных обработчиков.
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"number must be a float, integer or Decimal, was {value!r}"
        )


# =============================================================================
# TO_DECIMAL
# =============================================================================


@singledispatch
def to_decimal(value: Any) -> Decimal:
    """
    Конверсия числа в каноническое Decimal-представление.

    Args:
        value: int, float или Decimal

    Returns:
        Точное Decimal-значение

    Raises:
        InvalidInputError: Если тип не поддерживается или значение не конечно

    Examples:
        >>> to_decimal(1234)
        Decimal('1234')
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("1234")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidInputError: number must be a float, integer or Decimal, was '1234'
    """
    raise InvalidInputError(value)


@to_decimal.register
def _(value: bool) -> Decimal:
    raise InvalidInputError(value)


@to_decimal.register
def _(value: int) -> Decimal:
    return Decimal(value)


@to_decimal.register
def _(value: float) -> Decimal:
    # repr даёт кратчайшую строку, которая round-trip'ится в тот же float
    result = Decimal(repr(value))
    if not is_finite_decimal(result):
        raise InvalidInputError(value)
    return result


@to_decimal.register
def _(value: Decimal) -> Decimal:
    if not is_finite_decimal(value):
        raise InvalidInputError(value)
    return value


def is_convertible(value: Any) -> bool:
    """
    Проверка, поддерживает ли значение Numeric Conversion (без exception).
    """
    try:
        to_decimal(value)
    except InvalidInputError:
        return False
    return True
