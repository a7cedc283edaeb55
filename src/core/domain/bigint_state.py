"""
BigIntState: сериализуемое состояние BigInt

Immutable Pydantic модель: знак + magnitude (список слов, младшее первым).
Используется для экспорта/импорта значений BigInt и проверяет те же
инварианты, что и сам движок.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.bigint.words import WORD_MAX
from src.core.domain.sign import Sign


# =============================================================================
# STATE MODEL
# =============================================================================


class BigIntState(BaseModel):
    """
    Сериализованное состояние BigInt.

    Immutable модель (frozen=True). Нормализация обязательна:
    magnitude без старших нулевых слов, ноль только положительный.
    """

    sign: Sign = Field(..., description="Знак значения")
    magnitude: List[int] = Field(
        ..., min_length=1, description="Слова magnitude, младшее первым"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("magnitude")
    @classmethod
    def validate_words(cls, v: List[int]) -> List[int]:
        """Каждое слово в [0, WORD_MAX], старшее слово ненулевое."""
        for index, word in enumerate(v):
            if word < 0 or word > WORD_MAX:
                raise ValueError(f"magnitude word {index} out of range: {word}")
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("magnitude has a most-significant zero word (not normalized)")
        return v

    @model_validator(mode="after")
    def validate_canonical_zero(self) -> "BigIntState":
        """Ноль имеет единственное представление: положительный [0]."""
        if self.magnitude == [0] and self.sign is Sign.NEGATIVE:
            raise ValueError("zero must have positive sign")
        return self

    @property
    def is_zero(self) -> bool:
        return self.magnitude == [0]
