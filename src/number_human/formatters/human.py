"""
Magnitude Scaler: number_to_human

Классификация числа по уровню величины, точное деление на делитель уровня,
форматирование частного через Delimited Formatter и добавление подписи.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все сравнения с порогами точные (Decimal), float не используется
2. Первое совпадение в таблице уровней выигрывает
3. |v| ≤ 999 (en_US) / |v| ≤ 9999 (zh_CN) → без подписи
4. Ровно 1e12 (en_US) → без масштабирования
5. Неизвестная локаль → английская таблица (не ошибка)
"""

import logging
from decimal import Decimal
from typing import Any

from number_human.config import get_settings
from number_human.core.conversion import to_decimal
from number_human.core.domain.tiers import (
    LabelStyle,
    Locale,
    MagnitudeTier,
    find_tier,
    tiers_for_locale,
)
from number_human.core.math.decimal_ops import exact_divide
from number_human.formatters.delimit import OptionsLike, format_delimited, resolve_options

logger = logging.getLogger(__name__)


def scale_to_tier(value: Decimal, tier: MagnitudeTier) -> Decimal:
    """
    Частное value / |unit_divisor| (точное деление).

    Examples:
        >>> from number_human.core.domain.tiers import ENGLISH_TIERS
        >>> scale_to_tier(Decimal("-5000"), ENGLISH_TIERS[3])
        Decimal('-5')
    """
    return exact_divide(value, tier.divisor)


def number_to_human(
    number: Any,
    options: OptionsLike = None,
    locale: "str | Locale | None" = None,
    *,
    label_style: "str | LabelStyle" = LabelStyle.LONG,
) -> str:
    """
    Форматирование числа с подписью величины.

    Args:
        number: int, float или Decimal
        options: Параметры Delimited Formatter (передаются без изменений)
        locale: "en_US" или "zh_CN"; прочие значения → en_US.
            None → Settings.locale (NUMBER_HUMAN_LOCALE, по умолчанию en_US)
        label_style: Стиль английских подписей: "long" (" Thousand") или "short" ("k")

    Returns:
        Строка вида "1.23 Thousand" / "1.23k" / "1.23万" / "123.00"

    Raises:
        InvalidInputError: Если number не поддерживает Numeric Conversion
        InvalidOptionsError: Если options нарушают контракт format_options
            или label_style не "long"/"short"

    Examples:
        >>> number_to_human(123)
        '123.00'
        >>> number_to_human(1234)
        '1.23 Thousand'
        >>> number_to_human(1234567890123456789)
        '1,234.57 Quadrillion'
        >>> number_to_human(12345, locale="zh_CN")
        '1.23万'
    """
    value = to_decimal(number)
    if locale is None:
        resolved_locale = get_settings().locale
    else:
        resolved_locale = Locale.resolve(locale)
        if resolved_locale.value != locale:
            logger.debug("Unknown locale %r, falling back to %s", locale, resolved_locale.value)

    format_options = resolve_options(options)
    tier = find_tier(value, tiers_for_locale(resolved_locale, label_style))

    if tier is None:
        return format_delimited(value, format_options)

    logger.debug("Value %s matched tier %r", value, tier.label)
    scaled = scale_to_tier(value, tier)
    return format_delimited(scaled, format_options) + tier.label
