"""
MagnitudeTier: таблицы уровней величины для number_to_human

Immutable Pydantic модели и упорядоченные таблицы уровней по локалям.
Пороговые константы строятся один раз при импорте из точных строковых
литералов; сравнение с ними только точное (Decimal).

Английская таблица (первое совпадение выигрывает):
    (-1e15, -1e12]  → ÷1e12  Trillion
    (-1e12, -1e9]   → ÷1e9   Billion
    (-1e9,  -1e6]   → ÷1e6   Million
    (-1e6,  -1e3]   → ÷1e3   Thousand
    (999,   1e6)    → ÷1e3   Thousand
    [1e6,   1e9)    → ÷1e6   Million
    [1e9,   1e12)   → ÷1e9   Billion
    (1e12,  1e15)   → ÷1e12  Trillion
    (-inf,  -1e15]  → ÷1e15  Quadrillion
    [1e15,  +inf)   → ÷1e15  Quadrillion

Ровно 1e12 не попадает ни в один уровень и выводится без масштабирования.

Китайская таблица:
    (-inf,  -1e8]   → ÷1e8   亿
    (-1e8,  -1e4]   → ÷1e4   万
    (9999,  1e8)    → ÷1e4   万
    [1e8,   +inf)   → ÷1e8   亿
"""

from decimal import Decimal
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field

from number_human.core.contracts.validators import InvalidOptionsError
from number_human.core.math.decimal_ops import D, absolute, is_between


# =============================================================================
# ENUMS
# =============================================================================


class Locale(str, Enum):
    """Поддерживаемые локали"""

    EN_US = "en_US"
    ZH_CN = "zh_CN"

    @classmethod
    def resolve(cls, value: "str | Locale | None") -> "Locale":
        """
        Локаль по идентификатору; неизвестные значения → EN_US.
        """
        try:
            return cls(value)
        except ValueError:
            return cls.EN_US


class LabelStyle(str, Enum):
    """Стиль подписей английской таблицы"""

    LONG = "long"  # " Thousand"
    SHORT = "short"  # "k"


# =============================================================================
# TIER MODEL
# =============================================================================


class MagnitudeTier(BaseModel):
    """
    Уровень величины: интервал, делитель и подпись.

    None в threshold_low/threshold_high означает неограниченный интервал.
    """

    threshold_low: Decimal | None = Field(None, description="Нижняя граница интервала")
    threshold_high: Decimal | None = Field(None, description="Верхняя граница интервала")
    low_inclusive: bool = Field(False, description="Нижняя граница включена")
    high_inclusive: bool = Field(False, description="Верхняя граница включена")
    unit_divisor: Decimal = Field(..., description="Делитель уровня (берётся по модулю)")
    label: str = Field(..., min_length=1, description="Подпись, добавляемая к числу")

    model_config = {"frozen": True}

    def matches(self, value: Decimal) -> bool:
        """Проверка попадания value в интервал уровня"""
        return is_between(
            value,
            self.threshold_low,
            self.threshold_high,
            low_inclusive=self.low_inclusive,
            high_inclusive=self.high_inclusive,
        )

    @property
    def divisor(self) -> Decimal:
        """Положительный делитель"""
        return absolute(self.unit_divisor)


# =============================================================================
# THRESHOLDS
# =============================================================================

THOUSAND: Final[Decimal] = D("1_000")
MILLION: Final[Decimal] = D("1_000_000")
BILLION: Final[Decimal] = D("1_000_000_000")
TRILLION: Final[Decimal] = D("1_000_000_000_000")
QUADRILLION: Final[Decimal] = D("1_000_000_000_000_000")

# Верхняя граница «мелких» положительных чисел
UNSCALED_MAX_EN: Final[Decimal] = D("999")

WAN: Final[Decimal] = D("1_0000")
YI: Final[Decimal] = D("1_0000_0000")
UNSCALED_MAX_ZH: Final[Decimal] = D("9999")

LONG_LABELS: Final[dict[str, str]] = {
    "k": " Thousand",
    "m": " Million",
    "b": " Billion",
    "t": " Trillion",
    "q": " Quadrillion",
}


# =============================================================================
# TABLES
# =============================================================================


def _english_table(style: LabelStyle) -> tuple[MagnitudeTier, ...]:
    def label(short: str) -> str:
        return short if style == LabelStyle.SHORT else LONG_LABELS[short]

    def negative(low: Decimal, high: Decimal, short: str) -> MagnitudeTier:
        # (-low, -high]
        return MagnitudeTier(
            threshold_low=-low,
            threshold_high=-high,
            high_inclusive=True,
            unit_divisor=-high,
            label=label(short),
        )

    return (
        negative(QUADRILLION, TRILLION, "t"),
        negative(TRILLION, BILLION, "b"),
        negative(BILLION, MILLION, "m"),
        negative(MILLION, THOUSAND, "k"),
        MagnitudeTier(
            threshold_low=UNSCALED_MAX_EN,
            threshold_high=MILLION,
            unit_divisor=THOUSAND,
            label=label("k"),
        ),
        MagnitudeTier(
            threshold_low=MILLION,
            threshold_high=BILLION,
            low_inclusive=True,
            unit_divisor=MILLION,
            label=label("m"),
        ),
        MagnitudeTier(
            threshold_low=BILLION,
            threshold_high=TRILLION,
            low_inclusive=True,
            unit_divisor=BILLION,
            label=label("b"),
        ),
        # Нижняя граница исключена: ровно 1e12 остаётся без масштабирования
        MagnitudeTier(
            threshold_low=TRILLION,
            threshold_high=QUADRILLION,
            unit_divisor=TRILLION,
            label=label("t"),
        ),
        MagnitudeTier(
            threshold_high=-QUADRILLION,
            high_inclusive=True,
            unit_divisor=-QUADRILLION,
            label=label("q"),
        ),
        MagnitudeTier(
            threshold_low=QUADRILLION,
            low_inclusive=True,
            unit_divisor=QUADRILLION,
            label=label("q"),
        ),
    )


ENGLISH_TIERS: Final[tuple[MagnitudeTier, ...]] = _english_table(LabelStyle.LONG)
ENGLISH_SHORT_TIERS: Final[tuple[MagnitudeTier, ...]] = _english_table(LabelStyle.SHORT)

CHINESE_TIERS: Final[tuple[MagnitudeTier, ...]] = (
    MagnitudeTier(
        threshold_high=-YI,
        high_inclusive=True,
        unit_divisor=-YI,
        label="亿",
    ),
    MagnitudeTier(
        threshold_low=-YI,
        threshold_high=-WAN,
        high_inclusive=True,
        unit_divisor=-WAN,
        label="万",
    ),
    MagnitudeTier(
        threshold_low=UNSCALED_MAX_ZH,
        threshold_high=YI,
        unit_divisor=WAN,
        label="万",
    ),
    MagnitudeTier(
        threshold_low=YI,
        low_inclusive=True,
        unit_divisor=YI,
        label="亿",
    ),
)


def tiers_for_locale(
    locale: "str | Locale | None",
    label_style: "str | LabelStyle" = LabelStyle.LONG,
) -> tuple[MagnitudeTier, ...]:
    """
    Упорядоченная таблица уровней для локали.

    Args:
        locale: Идентификатор локали (неизвестные → en_US)
        label_style: Стиль подписей английской таблицы (long/short)

    Returns:
        Кортеж MagnitudeTier в порядке проверки

    Raises:
        InvalidOptionsError: Если label_style не "long"/"short" (для любой локали)
    """
    try:
        style = LabelStyle(label_style)
    except ValueError as e:
        raise InvalidOptionsError(
            f"label_style must be 'long' or 'short', was {label_style!r}"
        ) from e

    if Locale.resolve(locale) == Locale.ZH_CN:
        return CHINESE_TIERS

    if style == LabelStyle.SHORT:
        return ENGLISH_SHORT_TIERS
    return ENGLISH_TIERS


def find_tier(
    value: Decimal, tiers: tuple[MagnitudeTier, ...]
) -> MagnitudeTier | None:
    """
    Первый уровень, интервал которого содержит value.

    Returns:
        MagnitudeTier или None (число выводится без масштабирования)
    """
    for tier in tiers:
        if tier.matches(value):
            return tier
    return None
