"""
Domain models and value objects.

Contains format options, locales and magnitude tier tables.
"""

from number_human.core.domain.options import (
    DEFAULT_DELIMITER,
    DEFAULT_PRECISION,
    DEFAULT_SEPARATOR,
    FormatOptions,
)
from number_human.core.domain.tiers import (
    CHINESE_TIERS,
    ENGLISH_SHORT_TIERS,
    ENGLISH_TIERS,
    LabelStyle,
    Locale,
    MagnitudeTier,
    find_tier,
    tiers_for_locale,
)

__all__ = [
    # Options
    "DEFAULT_PRECISION",
    "DEFAULT_DELIMITER",
    "DEFAULT_SEPARATOR",
    "FormatOptions",
    # Tiers
    "CHINESE_TIERS",
    "ENGLISH_TIERS",
    "ENGLISH_SHORT_TIERS",
    "LabelStyle",
    "Locale",
    "MagnitudeTier",
    "find_tier",
    "tiers_for_locale",
]
