"""
Тесты для Additive Core

Проверяет:
1. Перенос при сложении слов (в т.ч. добавление нового слова)
2. Заём при вычитании слов
3. Правила знаков для + и -
4. Быстрый и полный путь increment / decrement
"""

import pytest

from src.core.bigint import BigInt
from src.core.bigint.additive import add_magnitudes, subtract_magnitudes
from src.core.bigint.words import WORD_MAX
from src.core.domain import Sign

# =============================================================================
# MAGNITUDE
# =============================================================================


class TestAddMagnitudes:
    """Тесты для add_magnitudes"""

    def test_carry_appends_word(self) -> None:
        """Перенос из старшего слова добавляет слово 1"""
        assert add_magnitudes([WORD_MAX], [1]) == [0, 1]

    def test_carry_ripples(self) -> None:
        """Перенос проходит через несколько слов"""
        assert add_magnitudes([WORD_MAX, WORD_MAX], [1]) == [0, 0, 1]

    def test_shorter_left_operand(self) -> None:
        """Левый операнд короче правого"""
        assert add_magnitudes([1], [WORD_MAX, 5]) == [0, 6]

    def test_carry_in_and_carry_out(self) -> None:
        """Перенос на входе и выходе одной позиции"""
        assert add_magnitudes([WORD_MAX, 0], [WORD_MAX, WORD_MAX]) == [WORD_MAX - 1, 0, 1]

    def test_zero(self) -> None:
        assert add_magnitudes([0], [0]) == [0]

    def test_operands_not_mutated(self) -> None:
        """Операнды не изменяются"""
        left, right = [WORD_MAX], [1]
        add_magnitudes(left, right)
        assert left == [WORD_MAX]
        assert right == [1]


class TestSubtractMagnitudes:
    """Тесты для subtract_magnitudes"""

    def test_borrow_from_next_word(self) -> None:
        """Заём из следующего слова"""
        assert subtract_magnitudes([0, 1], [1]) == [WORD_MAX]

    def test_borrow_ripples(self) -> None:
        """Заём проходит через несколько слов"""
        assert subtract_magnitudes([0, 0, 1], [1]) == [WORD_MAX, WORD_MAX]

    def test_equal_gives_zero(self) -> None:
        """a - a = 0 (нормализованный)"""
        assert subtract_magnitudes([5, 7], [5, 7]) == [0]

    def test_negative_result_raises(self) -> None:
        """Уменьшаемое меньше вычитаемого"""
        with pytest.raises(ValueError, match="smaller than subtrahend"):
            subtract_magnitudes([3], [5])


# =============================================================================
# BIGINT: ЗНАКИ
# =============================================================================


SIGNED_PAIRS = [
    (5, 3),
    (3, 5),
    (-5, 3),
    (5, -3),
    (-5, -3),
    (-3, -5),
    (0, -7),
    (-7, 0),
    (2**64, -1),
    (-(2**64), 1),
    (2**64 - 1, 2**64 - 1),
    (-(2**128), 2**128 - 1),
    (2**200 + 12345, -(2**130)),
]


class TestBigIntAddition:
    """Тесты для BigInt.__add__"""

    def test_word_overflow_grows_magnitude(self) -> None:
        """from(0xFFFFFFFFFFFFFFFF) + from(1) → [0, 1]"""
        result = BigInt.from_word(0xFFFFFFFFFFFFFFFF) + BigInt.from_word(1)
        assert result.magnitude == (0, 1)
        assert result.sign is Sign.POSITIVE

    @pytest.mark.parametrize("a,b", SIGNED_PAIRS)
    def test_matches_int(self, a: int, b: int) -> None:
        """Результат совпадает с встроенным int для всех комбинаций знаков"""
        assert int(BigInt.from_int(a) + BigInt.from_int(b)) == a + b

    def test_differing_signs_take_larger_magnitude_sign(self) -> None:
        """Знак результата от операнда с большим magnitude"""
        assert (BigInt(3) + BigInt(5, sign=False)).sign is Sign.NEGATIVE
        assert (BigInt(5) + BigInt(3, sign=False)).sign is Sign.POSITIVE

    def test_reflected_word_operand(self) -> None:
        """word + BigInt"""
        result = 1 + BigInt(WORD_MAX)
        assert isinstance(result, BigInt)
        assert result.magnitude == (0, 1)

    def test_unsupported_operand_raises(self) -> None:
        with pytest.raises(TypeError):
            BigInt(1) + "1"  # type: ignore[operator]


class TestBigIntSubtraction:
    """Тесты для BigInt.__sub__"""

    @pytest.mark.parametrize("a,b", SIGNED_PAIRS)
    def test_matches_int(self, a: int, b: int) -> None:
        """Результат совпадает с встроенным int для всех комбинаций знаков"""
        assert int(BigInt.from_int(a) - BigInt.from_int(b)) == a - b

    def test_both_negative(self) -> None:
        """(-3) - (-5) = 2"""
        result = BigInt(3, sign=False) - BigInt(5, sign=False)
        assert result == 2
        assert result.sign is Sign.POSITIVE

    def test_crossing_zero(self) -> None:
        """3 - 5 = -2"""
        assert int(BigInt(3) - BigInt(5)) == -2

    def test_borrow_across_words(self) -> None:
        """2^64 - 1 = WORD_MAX"""
        result = BigInt.from_int(2**64) - 1
        assert result.magnitude == (WORD_MAX,)

    def test_reflected_int_operand(self) -> None:
        assert int(10 - BigInt(3)) == 7


# =============================================================================
# INCREMENT / DECREMENT
# =============================================================================


class TestIncrementDecrement:
    """Тесты для increment / decrement"""

    def test_increment_fast_path(self) -> None:
        """Младшее слово увеличивается на месте"""
        value = BigInt(41)
        assert value.increment() is value
        assert value == 42

    def test_increment_word_wraparound(self) -> None:
        """WORD_MAX + 1 идёт через полное сложение"""
        value = BigInt(WORD_MAX)
        value.increment()
        assert value.magnitude == (0, 1)

    def test_increment_negative_toward_zero(self) -> None:
        """-1 + 1 = 0, знак канонический"""
        value = BigInt(1, sign=False)
        value.increment()
        assert value == 0
        assert value.sign is Sign.POSITIVE

    def test_increment_negative_multiword(self) -> None:
        """-(2^64) + 1 через полное сложение"""
        value = BigInt.from_int(-(2**64))
        value.increment()
        assert int(value) == -(2**64) + 1

    def test_decrement_zero(self) -> None:
        """0 - 1 = -1"""
        value = BigInt()
        value.decrement()
        assert int(value) == -1

    def test_decrement_word_underflow(self) -> None:
        """2^64 - 1 через полное вычитание"""
        value = BigInt.from_int(2**64)
        value.decrement()
        assert value.magnitude == (WORD_MAX,)

    def test_decrement_negative_grows_magnitude(self) -> None:
        """-WORD_MAX - 1 = -(2^64)"""
        value = BigInt(WORD_MAX, sign=False)
        value.decrement()
        assert int(value) == -(2**64)

    def test_post_forms_return_previous_value(self) -> None:
        """Постфиксные формы возвращают копию прежнего значения"""
        value = BigInt(5)
        previous = value.post_increment()
        assert previous == 5
        assert value == 6

        previous = value.post_decrement()
        assert previous == 6
        assert value == 5
        assert previous is not value
