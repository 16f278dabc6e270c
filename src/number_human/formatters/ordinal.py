"""
Ordinal Suffixer: number_to_ordinal

Добавление английского порядкового суффикса (st, nd, rd, th) к целому.
"""

from typing import Final

# Суффикс по последней цифре
ORDINAL_SUFFIXES: Final[tuple[str, ...]] = (
    "th", "st", "nd", "rd", "th", "th", "th", "th", "th", "th",
)

# Остатки по модулю 100, для которых всегда "th" (11th, 12th, 13th)
TEEN_EXCEPTIONS: Final[frozenset[int]] = frozenset({11, 12, 13})


def ordinal_suffix(number: int) -> str:
    """
    Порядковый суффикс для целого.

    Суффикс выбирается по модулю числа: Python % для отрицательных делимых
    даёт неотрицательный остаток (-1 % 10 == 9), что сломало бы таблицу.
    """
    magnitude = abs(number)
    if magnitude % 100 in TEEN_EXCEPTIONS:
        return "th"
    return ORDINAL_SUFFIXES[magnitude % 10]


def number_to_ordinal(number: int) -> str:
    """
    Целое с порядковым суффиксом.

    Args:
        number: Целое число (bool не принимается)

    Returns:
        Строка вида "442nd"

    Raises:
        TypeError: Если number не int

    Examples:
        >>> number_to_ordinal(3)
        '3rd'
        >>> number_to_ordinal(46)
        '46th'
        >>> number_to_ordinal(442)
        '442nd'
        >>> number_to_ordinal(4001)
        '4001st'
        >>> number_to_ordinal(-11)
        '-11th'
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"number_to_ordinal expects an integer, was {number!r}")

    return f"{number}{ordinal_suffix(number)}"
