"""
JSON Schema Contract Validators

Модуль для валидации сериализованных значений BigInt согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema.

Схемы:
- bigint_state.json (знак + magnitude)

JSON Schema проверяет только форму данных. Нормализацию (старшее слово
ненулевое, положительный ноль) дополнительно проверяет
validate_bigint_state через Pydantic модель BigIntState.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.bigint_state import BigIntState


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Кэширующий загрузчик схем из contracts/schema/ (или заданного каталога)."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без .json; повторные вызовы берут её из кэша.

        Raises:
            FileNotFoundError: Нет файла схемы
            ValueError: Схема не проходит Draft 2020-12 meta-validation
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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Загрузчик по умолчанию для ContractValidator
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Draft202012Validator, привязанный к одной схеме из загрузчика."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class BigIntStateValidator(ContractValidator):
    """Валидатор для bigint_state контракта."""

    def __init__(self):
        super().__init__("bigint_state")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_bigint_state(data: Dict[str, Any]) -> BigIntState:
    """
    Полная валидация сериализованного BigInt.

    Сначала форма данных по JSON Schema, затем инварианты нормализации
    через BigIntState.

    Args:
        data: Данные для валидации (например, BigIntState.model_dump(mode="json"))

    Returns:
        Проверенный BigIntState

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если magnitude не нормализован
    """
    BigIntStateValidator().validate(data)
    return BigIntState.model_validate(data)
