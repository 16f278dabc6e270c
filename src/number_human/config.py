"""
Settings: значения форматирования по умолчанию из окружения

Переменные окружения (и .env):
    NUMBER_HUMAN_PRECISION  → precision (int ≥ 0, default 2)
    NUMBER_HUMAN_DELIMITER  → delimiter (default ",")
    NUMBER_HUMAN_SEPARATOR  → separator (default ".")
    NUMBER_HUMAN_LOCALE     → locale для number_to_human(locale=None) (default en_US)

Неизвестная локаль → en_US (не ошибка).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from number_human.core.domain.options import (
    DEFAULT_DELIMITER,
    DEFAULT_PRECISION,
    DEFAULT_SEPARATOR,
    FormatOptions,
)
from number_human.core.domain.tiers import Locale

logger = logging.getLogger(__name__)

ENV_PREFIX = "NUMBER_HUMAN_"


def _load_env(dotenv_path: Optional[Path] = None) -> None:
    """Однократная загрузка .env для процесса."""

    if getattr(_load_env, "_loaded", False):  # type: ignore[attr-defined]
        return

    load_dotenv(dotenv_path)
    setattr(_load_env, "_loaded", True)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Settings:
    """Значения по умолчанию процесса; options вызывающего накладываются поверх."""

    precision: int = DEFAULT_PRECISION
    delimiter: str = DEFAULT_DELIMITER
    separator: str = DEFAULT_SEPARATOR
    locale: Locale = Locale.EN_US

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Создание Settings с переопределениями из окружения.

        Raises:
            ValueError: Если NUMBER_HUMAN_PRECISION не целое или отрицательное
        """

        defaults = cls()
        raw_precision = os.getenv(f"{ENV_PREFIX}PRECISION", str(defaults.precision))
        try:
            precision = int(raw_precision)
        except ValueError as exc:
            raise ValueError(
                f"{ENV_PREFIX}PRECISION must be an integer, got {raw_precision!r}"
            ) from exc
        if precision < 0:
            raise ValueError(f"{ENV_PREFIX}PRECISION must be non-negative, got {precision}")

        return cls(
            precision=precision,
            delimiter=os.getenv(f"{ENV_PREFIX}DELIMITER", defaults.delimiter),
            separator=os.getenv(f"{ENV_PREFIX}SEPARATOR", defaults.separator),
            locale=Locale.resolve(os.getenv(f"{ENV_PREFIX}LOCALE", defaults.locale.value)),
        )

    def format_options(self) -> FormatOptions:
        """FormatOptions по умолчанию для этих Settings."""

        return FormatOptions(
            precision=self.precision,
            delimiter=self.delimiter,
            separator=self.separator,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Кэшированный экземпляр Settings (сброс: get_settings.cache_clear())."""

    _load_env()
    settings = Settings.from_env()
    logger.debug(
        "Settings initialised",
        extra={
            "precision": settings.precision,
            "delimiter": settings.delimiter,
            "separator": settings.separator,
            "locale": settings.locale.value,
        },
    )
    return settings
