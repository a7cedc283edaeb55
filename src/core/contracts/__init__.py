"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных значений BigInt.
"""

from .validators import (
    BigIntStateValidator,
    ContractValidator,
    SchemaLoader,
    validate_bigint_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntStateValidator",
    # Functions
    "validate_bigint_state",
]
