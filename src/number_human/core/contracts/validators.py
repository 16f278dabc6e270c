"""
JSON Schema Contract Validators

Модуль для валидации пользовательских параметров форматирования согласно
формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- format_options.json (параметры delimited-форматирования)
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidOptionsError(ValueError):
    """
    Параметры форматирования не соответствуют контракту format_options.

    Исходная jsonschema.ValidationError доступна через __cause__.
    """

    pass


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем (package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'format_options')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема невалидна (meta-validation)
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(dict(data))


class FormatOptionsValidator(ContractValidator):
    """Валидатор для format_options контракта"""

    def __init__(self):
        super().__init__("format_options")


_FORMAT_OPTIONS_VALIDATOR = FormatOptionsValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_format_options(data: Mapping[str, Any]) -> None:
    """
    Валидация пользовательских параметров форматирования.

    Args:
        data: Подмножество {precision, delimiter, separator}

    Raises:
        InvalidOptionsError: Если данные не соответствуют схеме
    """
    try:
        _FORMAT_OPTIONS_VALIDATOR.validate(data)
    except ValidationError as e:
        raise InvalidOptionsError(f"Invalid format options {dict(data)!r}: {e.message}") from e
