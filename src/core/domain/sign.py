"""
Sign: знак значения в sign-magnitude представлении
"""

from enum import Enum
from typing import Union


class Sign(str, Enum):
    """Знак BigInt (хранится отдельно от magnitude)"""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    @classmethod
    def coerce(cls, value: Union["Sign", bool]) -> "Sign":
        """
        Приведение знака к Sign.

        Принимает Sign или булевый флаг (True = неотрицательный).

        Raises:
            ValueError: Если значение не Sign и не bool
        """
        if isinstance(value, Sign):
            return value
        if isinstance(value, bool):
            return cls.POSITIVE if value else cls.NEGATIVE
        raise ValueError(f"sign must be Sign or bool, got {value!r}")

    @property
    def is_negative(self) -> bool:
        return self is Sign.NEGATIVE
