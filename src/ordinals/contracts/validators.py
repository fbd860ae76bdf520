"""
JSON Schema Contract Validators

Модуль для валидации сериализованных порядковых чисел согласно
формальному JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схеме.

Схемы:
- ordinal.json (1-based integer >= 1; максимум задаётся шириной)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.ordinals.domain.ordinal import Ordinal

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'ordinal')

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

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class OrdinalContractValidator:
    """
    Валидатор для сериализованного порядкового числа заданной ширины.

    Базовая схема ordinal.json сужается максимумом ширины (kind.MAX);
    закэшированная схема загрузчика не изменяется.
    """

    def __init__(self, kind: type[Ordinal]):
        """
        Args:
            kind: Ширина (O8, O16, ...)
        """
        self.kind = kind
        self.schema = {**_SCHEMA_LOADER.load_schema("ordinal"), "maximum": kind.MAX}
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация 1-based значения против схемы ширины.

        Raises:
            ValidationError: Если data не int или вне 1..kind.MAX
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Все ошибки валидации (например, для сообщений пользователю)."""
        return self.validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_ordinal(data: Any, kind: type[Ordinal]) -> None:
    """
    Валидация сериализованного порядкового числа.

    Args:
        data: Данные для валидации (ожидается 1-based int)
        kind: Ширина (O8, O16, ...)

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OrdinalContractValidator(kind).validate(data)
