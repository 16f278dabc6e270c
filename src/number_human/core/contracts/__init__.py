"""
Contract Validation Module

Модуль для валидации JSON контрактов number_human.
"""

from .validators import (
    ContractValidator,
    FormatOptionsValidator,
    InvalidOptionsError,
    SchemaLoader,
    validate_format_options,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FormatOptionsValidator",
    # Exceptions
    "InvalidOptionsError",
    # Functions
    "validate_format_options",
]
