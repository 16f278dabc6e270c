"""
Decimal Ops: точная десятичная арифметика

Модуль обеспечивает точность всех операций форматирования:
- Построение констант из точных строковых литералов
- Точное сравнение (без float и без epsilon)
- Точное деление в локальном контексте достаточной точности
- Округление ROUND_HALF_UP без InvalidOperation на больших числах
- Валидация конечности (NaN/Inf не допускаются)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не использует float
2. Глобальный decimal-контекст никогда не изменяется (только localcontext)
3. Локальный контекст не ограничивает экспоненту: Overflow невозможен
4. Все операции детерминированы и воспроизводимы
"""

from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, localcontext
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Минимальная точность контекста (совпадает с default context stdlib)
MIN_CONTEXT_PRECISION: Final[int] = 28

# Запас разрядов сверх длины операндов
PRECISION_HEADROOM: Final[int] = 4


# =============================================================================
# КОНСТАНТЫ
# =============================================================================


def D(literal: str) -> Decimal:
    """
    Построение точной Decimal-константы из строкового литерала.

    Допускает разделители "_" как в числовых литералах Python.

    Examples:
        >>> D("1_000_000")
        Decimal('1000000')
        >>> D("-1_0000_0000")
        Decimal('-100000000')
    """
    value = Decimal(literal.replace("_", ""))
    validate_finite(value, "literal")
    return value


# =============================================================================
# КОНТЕКСТ
# =============================================================================


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def _precision_for(*values: Decimal) -> int:
    """Точность, достаточная для точного результата над операндами."""
    widest = 0
    for value in values:
        # exponent учитывает хвостовые нули вида 1E+15
        exponent = value.as_tuple().exponent
        width = _digits(value) + (exponent if exponent > 0 else 0)
        widest = max(widest, width)
    return max(MIN_CONTEXT_PRECISION, widest + PRECISION_HEADROOM)


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def compare(a: Decimal, b: Decimal) -> int:
    """
    Точное сравнение двух Decimal.

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Examples:
        >>> compare(D("999999.999"), D("1000000"))
        -1
        >>> compare(D("1E+12"), D("1_000_000_000_000"))
        0
    """
    return int(a.compare(b))


def is_between(
    value: Decimal,
    low: Decimal | None,
    high: Decimal | None,
    *,
    low_inclusive: bool = True,
    high_inclusive: bool = False,
) -> bool:
    """
    Проверка попадания value в интервал.

    None в качестве границы означает отсутствие ограничения с этой стороны.

    Args:
        value: Проверяемое значение
        low: Нижняя граница (optional)
        high: Верхняя граница (optional)
        low_inclusive: Включать нижнюю границу (default: True)
        high_inclusive: Включать верхнюю границу (default: False)

    Returns:
        True если value внутри интервала

    Examples:
        >>> is_between(D("999"), D("999"), D("1000000"), low_inclusive=False)
        False
        >>> is_between(D("1000"), D("999"), D("1000000"), low_inclusive=False)
        True
    """
    if low is not None:
        lower = compare(value, low)
        if lower < 0 or (lower == 0 and not low_inclusive):
            return False

    if high is not None:
        upper = compare(value, high)
        if upper > 0 or (upper == 0 and not high_inclusive):
            return False

    return True


# =============================================================================
# ДЕЛЕНИЕ И ОКРУГЛЕНИЕ
# =============================================================================


def exact_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """
    Точное деление Decimal.

    Контекст расширяется до ширины операндов, поэтому деление на степень
    десяти никогда не теряет разряды (в отличие от default context prec=28).

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> exact_divide(D("1234"), D("1000"))
        Decimal('1.234')
        >>> exact_divide(D("-5000.0"), D("1000"))
        Decimal('-5.0')
    """
    if denominator.is_zero():
        raise ZeroDivisionError(f"division of {numerator} by zero")

    with localcontext() as ctx:
        ctx.prec = _precision_for(numerator, denominator)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return numerator / denominator


def round_half_up(value: Decimal, places: int) -> Decimal:
    """
    Округление до places знаков после запятой (ROUND_HALF_UP).

    Examples:
        >>> round_half_up(D("1.235"), 2)
        Decimal('1.24')
        >>> round_half_up(D("0.9995"), 2)
        Decimal('1.00')
        >>> round_half_up(D("98765.4321"), 0)
        Decimal('98765')
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = _precision_for(value) + places
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return value.quantize(quantum, rounding=ROUND_HALF_UP)


def absolute(value: Decimal) -> Decimal:
    """Абсолютное значение без округления контекстом."""
    return value.copy_abs()


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_finite_decimal(value: Decimal) -> bool:
    """
    Проверка, является ли Decimal конечным (не NaN, не Infinity).
    """
    return value.is_finite()


def validate_finite(value: Decimal, name: str) -> None:
    """
    Валидация, что значение конечно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN или Infinity
    """
    if not is_finite_decimal(value):
        raise ValueError(f"{name} must be a finite decimal (not NaN/Inf), got {value}")
