"""
Тесты для доменных моделей: FormatOptions, MagnitudeTier, Locale, таблицы уровней

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Порядок и границы таблиц уровней
4. Fallback локалей
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from number_human.core.contracts import InvalidOptionsError
from number_human.core.domain import (
    CHINESE_TIERS,
    ENGLISH_SHORT_TIERS,
    ENGLISH_TIERS,
    FormatOptions,
    LabelStyle,
    Locale,
    MagnitudeTier,
    find_tier,
    tiers_for_locale,
)


# =============================================================================
# FORMAT OPTIONS TESTS
# =============================================================================


class TestFormatOptions:
    """Тесты для модели FormatOptions"""

    def test_defaults(self) -> None:
        options = FormatOptions()
        assert options.precision == 2
        assert options.delimiter == ","
        assert options.separator == "."

    def test_negative_precision_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FormatOptions(precision=-1)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FormatOptions(unit="$")

    def test_immutability(self) -> None:
        options = FormatOptions()
        with pytest.raises(ValidationError):
            options.precision = 3

    def test_merged_returns_new_instance(self) -> None:
        base = FormatOptions()
        merged = base.merged({"precision": 0, "delimiter": " "})
        assert merged.precision == 0
        assert merged.delimiter == " "
        assert merged.separator == "."
        assert base.precision == 2

    def test_merged_empty_returns_self(self) -> None:
        base = FormatOptions()
        assert base.merged({}) is base


# =============================================================================
# LOCALE TESTS
# =============================================================================


class TestLocale:
    """Тесты для Locale.resolve"""

    def test_known_locales(self) -> None:
        assert Locale.resolve("en_US") == Locale.EN_US
        assert Locale.resolve("zh_CN") == Locale.ZH_CN
        assert Locale.resolve(Locale.ZH_CN) == Locale.ZH_CN

    @pytest.mark.parametrize("value", ["fr_FR", "zh_TW", "", "EN_US", None])
    def test_unknown_falls_back_to_english(self, value) -> None:
        assert Locale.resolve(value) == Locale.EN_US


# =============================================================================
# TIER TESTS
# =============================================================================


class TestMagnitudeTier:
    """Тесты для модели MagnitudeTier"""

    def test_divisor_is_absolute(self) -> None:
        tier = MagnitudeTier(
            threshold_low=Decimal("-1000000"),
            threshold_high=Decimal("-1000"),
            high_inclusive=True,
            unit_divisor=Decimal("-1000"),
            label="k",
        )
        assert tier.divisor == Decimal("1000")

    def test_empty_label_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MagnitudeTier(unit_divisor=Decimal("1000"), label="")

    def test_immutability(self) -> None:
        tier = ENGLISH_TIERS[0]
        with pytest.raises(ValidationError):
            tier.label = "x"

    def test_matches_bounds(self) -> None:
        thousand = ENGLISH_TIERS[4]
        assert not thousand.matches(Decimal("999"))
        assert thousand.matches(Decimal("999.001"))
        assert thousand.matches(Decimal("999999.999"))
        assert not thousand.matches(Decimal("1000000"))


class TestEnglishTable:
    """Порядок и границы английской таблицы"""

    def test_labels_in_order(self) -> None:
        labels = [tier.label for tier in ENGLISH_TIERS]
        assert labels == [
            " Trillion",
            " Billion",
            " Million",
            " Thousand",
            " Thousand",
            " Million",
            " Billion",
            " Trillion",
            " Quadrillion",
            " Quadrillion",
        ]

    def test_short_labels(self) -> None:
        labels = [tier.label for tier in ENGLISH_SHORT_TIERS]
        assert labels == ["t", "b", "m", "k", "k", "m", "b", "t", "q", "q"]

    @pytest.mark.parametrize(
        "value, label",
        [
            ("-1000", " Thousand"),
            ("-999999", " Thousand"),
            ("-1000000", " Million"),
            ("-1000000000", " Billion"),
            ("-1000000000000", " Trillion"),
            ("-999999999999999", " Trillion"),
            ("-1000000000000000", " Quadrillion"),
            ("1000", " Thousand"),
            ("1000000", " Million"),
            ("1000000000", " Billion"),
            ("1000000000001", " Trillion"),
            ("1000000000000000", " Quadrillion"),
        ],
    )
    def test_boundaries(self, value: str, label: str) -> None:
        tier = find_tier(Decimal(value), ENGLISH_TIERS)
        assert tier is not None
        assert tier.label == label

    @pytest.mark.parametrize(
        "value", ["0", "999", "-999", "-999.99", "999.0", "1000000000000"]
    )
    def test_unscaled_values(self, value: str) -> None:
        """|v| ≤ 999 и ровно 1e12 не попадают ни в один уровень"""
        assert find_tier(Decimal(value), ENGLISH_TIERS) is None


class TestChineseTable:
    """Границы китайской таблицы"""

    @pytest.mark.parametrize(
        "value, label",
        [
            ("10000", "万"),
            ("9999.5", "万"),
            ("99999999", "万"),
            ("100000000", "亿"),
            ("-10000", "万"),
            ("-99999999", "万"),
            ("-100000000", "亿"),
            ("-1E+20", "亿"),
        ],
    )
    def test_boundaries(self, value: str, label: str) -> None:
        tier = find_tier(Decimal(value), CHINESE_TIERS)
        assert tier is not None
        assert tier.label == label

    @pytest.mark.parametrize("value", ["9999", "0", "-9999", "-9999.99"])
    def test_unscaled_values(self, value: str) -> None:
        assert find_tier(Decimal(value), CHINESE_TIERS) is None


class TestTiersForLocale:
    def test_selection(self) -> None:
        assert tiers_for_locale("en_US") is ENGLISH_TIERS
        assert tiers_for_locale("zh_CN") is CHINESE_TIERS
        assert tiers_for_locale("de_DE") is ENGLISH_TIERS
        assert tiers_for_locale("en_US", LabelStyle.SHORT) is ENGLISH_SHORT_TIERS
        assert tiers_for_locale("zh_CN", "short") is CHINESE_TIERS

    @pytest.mark.parametrize("locale", ["en_US", "zh_CN"])
    def test_invalid_label_style(self, locale: str) -> None:
        """Неизвестный label_style → InvalidOptionsError с отклонённым значением"""
        with pytest.raises(
            InvalidOptionsError,
            match="label_style must be 'long' or 'short', was 'medium'",
        ):
            tiers_for_locale(locale, "medium")

    def test_invalid_label_style_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            tiers_for_locale("en_US", "medium")
