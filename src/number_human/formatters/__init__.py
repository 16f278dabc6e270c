"""
Formatters

Строковые представления чисел поверх core:
- delimit: группировка разрядов и фиксированная точность
- human: подписи величины (Thousand, Million, 万, 亿, ...)
- ordinal: порядковые суффиксы (st, nd, rd, th)
"""

from .delimit import format_delimited, number_to_delimited, resolve_options
from .human import number_to_human, scale_to_tier
from .ordinal import ORDINAL_SUFFIXES, TEEN_EXCEPTIONS, number_to_ordinal, ordinal_suffix

__all__ = [
    # Delimit
    "format_delimited",
    "number_to_delimited",
    "resolve_options",
    # Human
    "number_to_human",
    "scale_to_tier",
    # Ordinal
    "ORDINAL_SUFFIXES",
    "TEEN_EXCEPTIONS",
    "number_to_ordinal",
    "ordinal_suffix",
]
