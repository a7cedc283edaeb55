"""
Bitwise & Shift Core: логика и сдвиги над magnitude

Все операции работают только с magnitude: знак хранится отдельно и
в побитовой логике не участвует (никакого дополнительного кода).

Два вида сдвига влево:
- shift_left: усекающий, ширина результата равна текущей ширине операнда,
  биты за старшим словом отбрасываются
- expand_left_shift: расширяющий, magnitude растёт (умножение на 2^n)
"""

from typing import Callable, List, Sequence

from src.core.bigint.words import (
    WORD_BITS,
    WORD_MASK,
    bit_width,
    trim,
)


# =============================================================================
# СДВИГИ
# =============================================================================


def _validate_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"negative shift count: {count}")


def shift_left(words: Sequence[int], count: int) -> List[int]:
    """
    Усекающий сдвиг влево в пределах текущей ширины.

    Сдвиг на ширину или больше даёт ноль.

    Raises:
        ValueError: Если count < 0
    """
    _validate_count(count)
    if count == 0:
        return list(words)
    if count >= bit_width(words):
        return [0]

    word_shift, bit_shift = divmod(count, WORD_BITS)
    result = [0] * len(words)

    for index in range(len(words) - 1, word_shift - 1, -1):
        source = index - word_shift
        value = (words[source] << bit_shift) & WORD_MASK
        if bit_shift and source > 0:
            value |= words[source - 1] >> (WORD_BITS - bit_shift)
        result[index] = value

    return trim(result)


def shift_right(words: Sequence[int], count: int) -> List[int]:
    """
    Сдвиг вправо: младшие биты отбрасываются.

    Raises:
        ValueError: Если count < 0
    """
    _validate_count(count)
    if count == 0:
        return list(words)
    if count >= bit_width(words):
        return [0]

    word_shift, bit_shift = divmod(count, WORD_BITS)
    result = [0] * len(words)

    for index in range(len(words) - word_shift):
        source = index + word_shift
        value = words[source] >> bit_shift
        if bit_shift and source + 1 < len(words):
            value |= (words[source + 1] << (WORD_BITS - bit_shift)) & WORD_MASK
        result[index] = value

    return trim(result)


def expand_left_shift(words: Sequence[int], count: int) -> List[int]:
    """
    Расширяющий сдвиг влево: magnitude растёт, переполнение не теряется.

    Эквивалентно умножению на 2^count.

    Raises:
        ValueError: Если count < 0

    Examples:
        >>> expand_left_shift([1], 64)
        [0, 1]
    """
    _validate_count(count)
    word_shift, bit_shift = divmod(count, WORD_BITS)
    result = [0] * word_shift
    carry = 0

    for word in words:
        result.append(((word << bit_shift) & WORD_MASK) | carry)
        carry = word >> (WORD_BITS - bit_shift) if bit_shift else 0

    if carry:
        result.append(carry)

    return trim(result)


# =============================================================================
# ЛОГИЧЕСКИЕ ОПЕРАЦИИ
# =============================================================================


def _combine(
    left: Sequence[int], right: Sequence[int], op: Callable[[int, int], int]
) -> List[int]:
    # Короткий операнд неявно дополняется нулями
    size = max(len(left), len(right))
    result = []
    for index in range(size):
        a = left[index] if index < len(left) else 0
        b = right[index] if index < len(right) else 0
        result.append(op(a, b) & WORD_MASK)
    return trim(result)


def and_magnitudes(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Побитовое И magnitude."""
    return _combine(left, right, lambda a, b: a & b)


def or_magnitudes(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Побитовое ИЛИ magnitude."""
    return _combine(left, right, lambda a, b: a | b)


def xor_magnitudes(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Побитовое исключающее ИЛИ magnitude."""
    return _combine(left, right, lambda a, b: a ^ b)


def complement_magnitude(words: Sequence[int]) -> List[int]:
    """
    Побитовое дополнение каждого слова в пределах текущей ширины.

    Это дополнение magnitude, а не представление отрицательного числа.

    Examples:
        >>> complement_magnitude([0]) == [0xFFFFFFFFFFFFFFFF]
        True
    """
    return trim([~word & WORD_MASK for word in words])
