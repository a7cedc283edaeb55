"""
Additive Core: сложение и вычитание magnitude

Пословное сложение с переносом и вычитание с заёмом. Переполнение слова
определяется через беззнаковый wraparound: если сумма по модулю 2^WORD_BITS
строго меньше слагаемого, был перенос.

Знаки здесь не обрабатываются: это делает BigInt.
"""

from typing import List, Sequence

from src.core.bigint.words import (
    WORD_MASK,
    compare_magnitudes,
    resize_to_at_least,
    trim,
)


def add_magnitudes(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """
    Сумма двух magnitude.

    Длины выравниваются, затем для каждой позиции вычисляется сумма слов
    с переносом. Перенос из старшего слова добавляет новое слово 1.

    Args:
        left: Первое слагаемое (не изменяется)
        right: Второе слагаемое (не изменяется)

    Returns:
        Новый нормализованный magnitude

    Examples:
        >>> add_magnitudes([0xFFFFFFFFFFFFFFFF], [1])
        [0, 1]
    """
    result = resize_to_at_least(list(left), len(right))
    carry = 0

    for index in range(len(result)):
        addend = right[index] if index < len(right) else 0
        if index >= len(right) and not carry:
            # Дальше только слова left без переноса: копия уже верна
            break

        partial = (result[index] + addend) & WORD_MASK
        carry_out = partial < addend
        total = (partial + carry) & WORD_MASK
        if total < partial:
            carry_out = True

        result[index] = total
        carry = 1 if carry_out else 0

    if carry:
        result.append(1)

    return trim(result)


def subtract_magnitudes(minuend: Sequence[int], subtrahend: Sequence[int]) -> List[int]:
    """
    Разность magnitude: minuend - subtrahend при |minuend| >= |subtrahend|.

    Вычитание от младшего слова к старшему с явным заёмом: заём возникает,
    когда слово уменьшаемого меньше слова вычитаемого с учётом входящего
    заёма.

    Args:
        minuend: Уменьшаемое (нормализованное)
        subtrahend: Вычитаемое (нормализованное)

    Returns:
        Новый нормализованный magnitude

    Raises:
        ValueError: Если minuend < subtrahend (magnitude ушёл бы в минус)
    """
    if compare_magnitudes(minuend, subtrahend) < 0:
        raise ValueError("minuend magnitude is smaller than subtrahend magnitude")

    result = list(minuend)
    borrow = 0

    for index in range(len(result)):
        if index >= len(subtrahend) and not borrow:
            break

        needed = (subtrahend[index] if index < len(subtrahend) else 0) + borrow
        word = result[index]
        result[index] = (word - needed) & WORD_MASK
        borrow = 1 if word < needed else 0

    return trim(result)
