"""
number_human: человекочитаемое форматирование чисел

Delimited-числа, подписи величины (Thousand/Million/..., 万/亿)
и порядковые суффиксы. Все вычисления на Decimal, без float-артефактов.
"""

from number_human.config import Settings, get_settings
from number_human.core.contracts import InvalidOptionsError
from number_human.core.conversion import InvalidInputError, is_convertible, to_decimal
from number_human.core.domain import (
    FormatOptions,
    LabelStyle,
    Locale,
    MagnitudeTier,
    tiers_for_locale,
)
from number_human.formatters import (
    number_to_delimited,
    number_to_human,
    number_to_ordinal,
)

__all__ = [
    # Formatters
    "number_to_delimited",
    "number_to_human",
    "number_to_ordinal",
    # Conversion
    "InvalidInputError",
    "is_convertible",
    "to_decimal",
    # Domain
    "FormatOptions",
    "LabelStyle",
    "Locale",
    "MagnitudeTier",
    "tiers_for_locale",
    # Contracts
    "InvalidOptionsError",
    # Config
    "Settings",
    "get_settings",
]
