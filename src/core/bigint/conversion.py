"""
Conversion: рендеринг magnitude в строку и обратно

Поддерживаемые основания:
- 10: повторное деление на десять через Division Core
- 2: каждое слово как WORD_BITS двоичных цифр, старшее слово первым,
  слова разделены пробелом

Разбор строк реализован только для основания 2. Десятичный разбор
намеренно не поддерживается (BigIntNotImplemented).

Мост к встроенному int (magnitude_from_int / magnitude_to_int) нужен только
для конструирования и экспорта значений, арифметика через него не идёт.
"""

import logging
from typing import Final, List, Sequence

from src.core.bigint.division import divide_by_word
from src.core.bigint.errors import BigIntNotImplemented, InvalidBigIntLiteral
from src.core.bigint.words import WORD_BITS, WORD_MASK, is_zero_magnitude, trim

logger = logging.getLogger(__name__)

# =============================================================================
# ОСНОВАНИЯ
# =============================================================================

DECIMAL_BASE: Final[int] = 10
BINARY_BASE: Final[int] = 2

# Основания, для которых есть собственный рендеринг
SUPPORTED_RENDER_BASES: Final[frozenset] = frozenset({BINARY_BASE, DECIMAL_BASE})

# Разделитель слов в двоичной записи
BINARY_WORD_SEPARATOR: Final[str] = " "


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def magnitude_to_binary(words: Sequence[int]) -> str:
    """
    Двоичная запись magnitude: по WORD_BITS цифр на слово.

    Examples:
        >>> magnitude_to_binary([5]).lstrip("0")
        '101'
    """
    return BINARY_WORD_SEPARATOR.join(
        format(word, f"0{WORD_BITS}b") for word in reversed(words)
    )


def magnitude_to_decimal(words: Sequence[int]) -> str:
    """
    Десятичная запись magnitude через повторное деление на 10.

    Examples:
        >>> magnitude_to_decimal([0, 1])
        '18446744073709551616'
    """
    if is_zero_magnitude(words):
        return "0"

    digits: List[str] = []
    buffer = list(words)
    while not is_zero_magnitude(buffer):
        buffer, digit = divide_by_word(buffer, DECIMAL_BASE)
        digits.append(chr(ord("0") + digit))

    digits.reverse()
    return "".join(digits)


def render_magnitude(words: Sequence[int], base: int = DECIMAL_BASE) -> str:
    """
    Рендеринг magnitude в заданном основании.

    Неподдерживаемое основание не ошибка: используется десятичная запись.
    """
    if base == BINARY_BASE:
        return magnitude_to_binary(words)
    if base != DECIMAL_BASE:
        logger.debug("base %s is not supported for rendering, using decimal", base)
    return magnitude_to_decimal(words)


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_binary_magnitude(text: str) -> List[int]:
    """
    Разбор двоичной записи в magnitude.

    Принимает вывод magnitude_to_binary, а также префикс 0b и
    разделители "_" / пробелы между цифрами.

    Raises:
        InvalidBigIntLiteral: Если строка пуста или содержит не 0/1
    """
    digits = text.strip()
    if digits[:2].lower() == "0b":
        digits = digits[2:]
    digits = digits.replace("_", "").replace(" ", "")

    if not digits:
        raise InvalidBigIntLiteral(f"empty binary literal: {text!r}")
    invalid = set(digits) - {"0", "1"}
    if invalid:
        raise InvalidBigIntLiteral(
            f"invalid binary digit(s) {''.join(sorted(invalid))!r} in {text!r}"
        )

    words: List[int] = []
    for end in range(len(digits), 0, -WORD_BITS):
        start = max(0, end - WORD_BITS)
        words.append(int(digits[start:end], 2))

    return trim(words)


def parse_magnitude(text: str, base: int) -> List[int]:
    """
    Разбор строки в magnitude.

    Raises:
        BigIntNotImplemented: Для любого основания кроме 2
        InvalidBigIntLiteral: Если двоичная запись некорректна
    """
    if base != BINARY_BASE:
        raise BigIntNotImplemented(
            f"construction from base-{base} text is not supported (only base 2)"
        )
    return parse_binary_magnitude(text)


# =============================================================================
# МОСТ К ВСТРОЕННОМУ INT
# =============================================================================


def magnitude_from_int(value: int) -> List[int]:
    """
    Разбиение неотрицательного int на слова (младшее первым).

    Raises:
        ValueError: Если value отрицательный
    """
    if value < 0:
        raise ValueError(f"magnitude cannot be negative: {value}")

    words: List[int] = []
    while value:
        words.append(value & WORD_MASK)
        value >>= WORD_BITS
    return trim(words)


def magnitude_to_int(words: Sequence[int]) -> int:
    """Сборка int из слов magnitude."""
    value = 0
    for word in reversed(words):
        value = (value << WORD_BITS) | word
    return value
