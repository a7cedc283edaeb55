"""
Division Core: двоичное деление "в столбик" (restoring long division)

Общий алгоритм для частного и остатка. Проход идёт по битам делимого от
старшего к младшему:

    remainder = remainder << 1           (с ростом, если старший бит занят)
    remainder.bit[0] = dividend.bit[i]
    if remainder >= divisor:
        remainder -= divisor
        quotient.bit[i] = 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой делитель → DivisionByZero (никакого неопределённого результата)
2. Делитель 1 → частное = делимое, остаток = 0
3. |dividend| < |divisor| → частное 0, остаток = делимое
4. Знаки здесь не обрабатываются (truncated-конвенцию применяет BigInt)
"""

import logging
from typing import List, Sequence, Tuple

from src.core.bigint.additive import subtract_magnitudes
from src.core.bigint.bitwise import shift_left
from src.core.bigint.errors import DivisionByZero
from src.core.bigint.words import (
    WORD_BITS,
    bit_width,
    compare_magnitudes,
    get_bit,
    is_zero_magnitude,
    set_bit,
    trim,
)

logger = logging.getLogger(__name__)


def divide_magnitudes(
    dividend: Sequence[int], divisor: Sequence[int]
) -> Tuple[List[int], List[int]]:
    """
    Частное и остаток от деления magnitude.

    Args:
        dividend: Делимое (нормализованное)
        divisor: Делитель (нормализованный)

    Returns:
        (quotient, remainder), оба нормализованы

    Raises:
        DivisionByZero: Если делитель равен нулю

    Examples:
        >>> divide_magnitudes([5], [2])
        ([2], [1])
    """
    if is_zero_magnitude(divisor):
        logger.debug("division by zero requested (dividend words=%d)", len(dividend))
        raise DivisionByZero("division by zero")

    if len(divisor) == 1 and divisor[0] == 1:
        return list(dividend), [0]

    if compare_magnitudes(dividend, divisor) < 0:
        return [0], list(dividend)

    total_bits = bit_width(dividend)
    quotient = [0] * len(dividend)
    remainder = [0]

    for index in range(total_bits - 1, -1, -1):
        # Остаток может выйти за свои границы: расширяем до сдвига
        if get_bit(remainder, bit_width(remainder) - 1):
            remainder.append(0)
        remainder = shift_left(remainder, 1)

        if get_bit(dividend, index):
            set_bit(remainder, 0, True)

        if compare_magnitudes(remainder, divisor) >= 0:
            remainder = subtract_magnitudes(remainder, divisor)
            set_bit(quotient, index, True)

    return trim(quotient), trim(remainder)


def divide_by_word(dividend: Sequence[int], word: int) -> Tuple[List[int], int]:
    """
    Деление magnitude на одно слово через общий алгоритм.

    Используется при десятичном рендеринге (деление на 10).

    Returns:
        (quotient, remainder) где remainder помещается в одно слово
    """
    if word >> WORD_BITS:
        raise ValueError(f"divisor {word} does not fit in one word")
    quotient, remainder = divide_magnitudes(dividend, [word])
    return quotient, remainder[0]
