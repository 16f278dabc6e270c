"""
Delimited Formatter: группировка разрядов и фиксированная точность

number_to_delimited(1234567.891)                        → "1,234,567.89"
number_to_delimited(-1234)                               → "-1,234.00"
number_to_delimited(98765.4321, {"precision": 0})        → "98,765"
number_to_delimited(1234567.891, {"delimiter": ".", "separator": ","})
                                                         → "1.234.567,89"

Округление ROUND_HALF_UP по модулю, знак берётся из исходного числа.
"""

from decimal import Decimal
from typing import Any, Mapping

from number_human.config import get_settings
from number_human.core.contracts import InvalidOptionsError, validate_format_options
from number_human.core.conversion import to_decimal
from number_human.core.domain.options import FormatOptions
from number_human.core.math.decimal_ops import absolute, round_half_up

OptionsLike = FormatOptions | Mapping[str, Any] | None


# =============================================================================
# OPTIONS
# =============================================================================


def resolve_options(options: OptionsLike = None) -> FormatOptions:
    """
    Приведение пользовательских параметров к FormatOptions.

    - None → значения по умолчанию из Settings
    - FormatOptions → без изменений
    - Mapping → валидация контракта format_options и merge поверх Settings

    Raises:
        InvalidOptionsError: Если mapping нарушает контракт или тип не поддерживается
    """
    if options is None:
        return get_settings().format_options()

    if isinstance(options, FormatOptions):
        return options

    if isinstance(options, Mapping):
        validate_format_options(options)
        return get_settings().format_options().merged(options)

    raise InvalidOptionsError(
        f"options must be FormatOptions, a mapping or None, was {options!r}"
    )


# =============================================================================
# DELIMITED
# =============================================================================


def _delimit_integer(digits: str, delimiter: str) -> str:
    # Без int(): строки длиннее sys.get_int_max_str_digits() не конвертируются
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return delimiter.join(groups)


def format_delimited(value: Decimal, options: FormatOptions) -> str:
    """
    Форматирование уже конвертированного Decimal.

    Args:
        value: Конечное Decimal-значение
        options: Готовые параметры форматирования

    Returns:
        Строка с разделителями групп и фиксированной точностью
    """
    rounded = round_half_up(absolute(value), options.precision)
    integer_part, _, fraction = format(rounded, "f").partition(".")

    delimited = _delimit_integer(integer_part, options.delimiter)
    if options.precision > 0:
        delimited = f"{delimited}{options.separator}{fraction}"

    prefix = "-" if value < 0 else ""
    return prefix + delimited


def number_to_delimited(number: Any, options: OptionsLike = None) -> str:
    """
    Форматирование числа с разделителями групп разрядов.

    Args:
        number: int, float или Decimal
        options: FormatOptions, mapping {precision, delimiter, separator} или None

    Returns:
        Delimited-строка без подписи величины

    Raises:
        InvalidInputError: Если number не поддерживает Numeric Conversion
        InvalidOptionsError: Если options нарушают контракт format_options

    Examples:
        >>> number_to_delimited(1234567.891)
        '1,234,567.89'
        >>> number_to_delimited(98765.4321, {"precision": 0})
        '98,765'
    """
    value = to_decimal(number)
    return format_delimited(value, resolve_options(options))
