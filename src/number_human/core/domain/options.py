"""
FormatOptions: параметры форматирования delimited-числа

Immutable Pydantic модель. Для Magnitude Scaler непрозрачна: передаётся
в Delimited Formatter без изменений.
"""

from typing import Any, Final, Mapping

from pydantic import BaseModel, Field


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_PRECISION: Final[int] = 2
DEFAULT_DELIMITER: Final[str] = ","
DEFAULT_SEPARATOR: Final[str] = "."


# =============================================================================
# FORMAT OPTIONS
# =============================================================================


class FormatOptions(BaseModel):
    """
    Параметры delimited-форматирования.

    - precision: количество знаков после separator
    - delimiter: разделитель групп разрядов целой части
    - separator: разделитель целой и дробной части
    """

    precision: int = Field(DEFAULT_PRECISION, ge=0, description="Знаков после запятой")
    delimiter: str = Field(DEFAULT_DELIMITER, description="Разделитель тысяч")
    separator: str = Field(DEFAULT_SEPARATOR, description="Десятичный разделитель")

    model_config = {"frozen": True, "extra": "forbid"}

    def merged(self, overrides: Mapping[str, Any]) -> "FormatOptions":
        """
        Новый экземпляр с заменой указанных полей.

        Args:
            overrides: Подмножество полей (precision/delimiter/separator)

        Returns:
            FormatOptions с применёнными overrides (self не изменяется)
        """
        if not overrides:
            return self
        return FormatOptions(**{**self.model_dump(), **dict(overrides)})
