"""
Domain models and value objects.

Contains the sign enum and the serialized BigInt state model.
"""

from src.core.domain.sign import Sign
from src.core.domain.bigint_state import BigIntState

__all__ = [
    "Sign",
    "BigIntState",
]
