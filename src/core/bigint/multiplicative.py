"""
Multiplicative Core: умножение magnitude

Школьное умножение "сдвиг и сложение": для каждого установленного бита i
множителя к сумме прибавляется второй операнд, сдвинутый на i бит.
Длина результата ограничена len(left) + len(right) слов.
"""

from typing import List, Sequence

from src.core.bigint.additive import add_magnitudes
from src.core.bigint.bitwise import expand_left_shift
from src.core.bigint.words import bit_width, get_bit, is_zero_magnitude


def multiply_magnitudes(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """
    Произведение двух magnitude.

    Args:
        left: Множитель, по битам которого идёт цикл
        right: Множимое, которое сдвигается и накапливается

    Returns:
        Новый нормализованный magnitude
    """
    if is_zero_magnitude(left) or is_zero_magnitude(right):
        return [0]

    product: List[int] = [0] * (len(left) + len(right))

    for index in range(bit_width(left)):
        if not get_bit(left, index):
            continue
        product = add_magnitudes(product, expand_left_shift(right, index))

    return product
