"""
Words: представление и нормализация magnitude

Magnitude хранится как список беззнаковых слов фиксированной ширины,
младшее слово первым ("little-endian" порядок слов).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Список слов никогда не пуст
2. Старшее слово ненулевое, кроме нуля: ноль это ровно [0]
3. Каждое слово в диапазоне [0, WORD_MAX]
4. Любая операция, которая может дать старшие нулевые слова, вызывает trim
"""

from typing import Final, List, Sequence

# =============================================================================
# ГЕОМЕТРИЯ СЛОВА
# =============================================================================

# Ширина слова в битах (константа сборки, не параметр экземпляра)
WORD_BITS: Final[int] = 64

# Маска слова: эмуляция беззнакового переполнения через & WORD_MASK
WORD_MASK: Final[int] = (1 << WORD_BITS) - 1

# Максимальное значение одного слова
WORD_MAX: Final[int] = WORD_MASK

# Старший бит слова
WORD_TOP_BIT: Final[int] = 1 << (WORD_BITS - 1)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def trim(words: List[int]) -> List[int]:
    """
    Удаление старших нулевых слов (in place).

    Оставляет ровно одно нулевое слово, если значение равно нулю.

    Args:
        words: Magnitude (изменяется на месте)

    Returns:
        Тот же список (для цепочек вызовов)

    Examples:
        >>> trim([5, 0, 0])
        [5]
        >>> trim([0, 0])
        [0]
    """
    while len(words) > 1 and words[-1] == 0:
        words.pop()
    if not words:
        words.append(0)
    return words


def resize_to_at_least(words: List[int], size: int) -> List[int]:
    """
    Дополнение нулевыми старшими словами до длины size (in place).

    Никогда не укорачивает список: уменьшение длины делает только trim.
    """
    if len(words) < size:
        words.extend([0] * (size - len(words)))
    return words


def validate_word(value: int) -> int:
    """
    Проверка, что значение помещается в одно слово.

    Raises:
        ValueError: Если значение не int или вне [0, WORD_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"word must be an int, got {type(value).__name__}")
    if value < 0 or value > WORD_MAX:
        raise ValueError(f"word {value} out of range [0, {WORD_MAX}]")
    return value


# =============================================================================
# ПОБИТОВАЯ АДРЕСАЦИЯ
# =============================================================================


def bit_width(words: Sequence[int]) -> int:
    """Текущая ширина magnitude в битах (WORD_BITS * число слов)."""
    return WORD_BITS * len(words)


def get_bit(words: Sequence[int], index: int) -> bool:
    """
    Чтение бита index: слово index // WORD_BITS, бит index % WORD_BITS.

    Биты за пределами текущей ширины читаются как 0.
    """
    term, offset = divmod(index, WORD_BITS)
    if term >= len(words):
        return False
    return bool((words[term] >> offset) & 1)


def set_bit(words: List[int], index: int, bit: bool) -> None:
    """
    Установка бита index в значение bit (in place).

    Raises:
        IndexError: Если бит за пределами текущей ширины
            (сначала нужно вызвать resize_to_at_least)
    """
    term, offset = divmod(index, WORD_BITS)
    if bit:
        words[term] |= 1 << offset
    else:
        words[term] &= ~(1 << offset) & WORD_MASK


# =============================================================================
# СРАВНЕНИЕ MAGNITUDE
# =============================================================================


def is_zero_magnitude(words: Sequence[int]) -> bool:
    """True если magnitude нормализованный ноль."""
    return len(words) == 1 and words[0] == 0


def compare_magnitudes(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Сравнение двух нормализованных magnitude.

    Более длинный magnitude больше; при равной длине решает первое
    несовпадающее слово, начиная со старшего.

    Returns:
        -1 если left < right, 0 если равны, 1 если left > right
    """
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    for index in range(len(left) - 1, -1, -1):
        if left[index] != right[index]:
            return -1 if left[index] < right[index] else 1
    return 0
