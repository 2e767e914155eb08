"""
JSON Schema Contract Validators

Модуль для валидации константных токенов, которыми числа передаются
в слой выражений, и сериализованных контекстов округления.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- real_number.json   — вещественный токен {"type", "kind": "real", "value"}
- hyper_number.json  — гиперкомплексный токен {"type", "kind": "hyper", "dim", "components"}
- math_context.json  — контекст {"precision", "rounding"}
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'real_number')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
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
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class RealNumberValidator(ContractValidator):
    """Валидатор вещественного константного токена."""

    def __init__(self):
        super().__init__("real_number")


class HyperNumberValidator(ContractValidator):
    """
    Валидатор гиперкомплексного константного токена.

    Схема проверяет форму токена; согласованность dim с числом
    компонент проверяет HyperNumber.from_token.
    """

    def __init__(self):
        super().__init__("hyper_number")


class MathContextValidator(ContractValidator):
    """Валидатор сериализованного MathContext."""

    def __init__(self):
        super().__init__("math_context")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_real_number(data: Dict[str, Any]) -> None:
    """
    Валидация вещественного токена.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RealNumberValidator().validate(data)


def validate_hyper_number(data: Dict[str, Any]) -> None:
    """
    Валидация гиперкомплексного токена.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    HyperNumberValidator().validate(data)


def validate_math_context(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного контекста.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MathContextValidator().validate(data)
