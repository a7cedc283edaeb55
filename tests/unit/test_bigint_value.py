"""
Тесты жизненного цикла значения BigInt

Проверяет:
1. Конструирование (zero, from_word, from_int) и валидацию аргументов
2. Копирование (глубокое) и перемещение (take)
3. In-place операторы: заменяют значение получателя целиком
4. Неизменность операндов бинарных операторов
5. Интроспекцию: sign, abs, magnitude
"""

import copy

import pytest

from src.core.bigint import BigInt
from src.core.bigint.words import WORD_MAX
from src.core.domain import Sign


class TestConstruction:
    """Тесты для конструкторов"""

    def test_default_is_zero(self) -> None:
        value = BigInt()
        assert value == 0
        assert value.magnitude == (0,)
        assert value.sign is Sign.POSITIVE
        assert not value

    def test_zero(self) -> None:
        assert BigInt.zero() == BigInt()

    def test_from_word_with_sign(self) -> None:
        assert int(BigInt.from_word(5, Sign.NEGATIVE)) == -5
        assert int(BigInt.from_word(5, sign=False)) == -5
        assert int(BigInt.from_word(WORD_MAX)) == WORD_MAX

    @pytest.mark.parametrize("word", [-1, WORD_MAX + 1])
    def test_word_out_of_range_raises(self, word: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            BigInt(word)

    def test_invalid_sign_raises(self) -> None:
        with pytest.raises(ValueError, match="sign must be"):
            BigInt(1, sign="negative")  # type: ignore[arg-type]

    def test_from_int(self) -> None:
        value = BigInt.from_int(-(2**64) - 2)
        assert value.sign is Sign.NEGATIVE
        assert value.magnitude == (2, 1)

    def test_from_int_rejects_non_int(self) -> None:
        with pytest.raises(ValueError, match="must be an int"):
            BigInt.from_int(1.5)  # type: ignore[arg-type]


class TestCopyAndMove:
    """Тесты для copy / take"""

    def test_copy_is_deep(self) -> None:
        original = BigInt.from_int(2**64 + 1)
        clone = original.copy()
        clone += 1
        assert original == BigInt.from_int(2**64 + 1)
        assert clone == BigInt.from_int(2**64 + 2)

    def test_copy_module(self) -> None:
        original = BigInt(7, sign=False)
        for clone in (copy.copy(original), copy.deepcopy(original)):
            assert clone == original
            assert clone is not original
            clone.increment()
            assert original == -7

    def test_take_moves_and_resets_source(self) -> None:
        """Источник после перемещения равен нулю"""
        source = BigInt.from_int(-(2**70))
        moved = source.take()
        assert int(moved) == -(2**70)
        assert source == 0
        assert source.sign is Sign.POSITIVE


class TestCompoundAssignment:
    """Тесты для in-place операторов"""

    @pytest.mark.parametrize(
        "apply,expected",
        [
            (lambda v: v.__iadd__(3), 15),
            (lambda v: v.__isub__(20), -8),
            (lambda v: v.__imul__(-2), -24),
            (lambda v: v.__ifloordiv__(5), 2),
            (lambda v: v.__itruediv__(5), 2),
            (lambda v: v.__imod__(5), 2),
            (lambda v: v.__ilshift__(64), 12 * 2**64),
            (lambda v: v.__irshift__(2), 3),
            (lambda v: v.__iand__(10), 8),
            (lambda v: v.__ior__(3), 15),
            (lambda v: v.__ixor__(6), 10),
        ],
    )
    def test_replaces_receiver_value(self, apply, expected: int) -> None:
        """Значение заменяется целиком, объект тот же"""
        value = BigInt(12)
        result = apply(value)
        assert result is value
        assert int(value) == expected

    def test_augmented_assignment_keeps_identity(self) -> None:
        value = BigInt(5)
        alias = value
        value += BigInt(3)
        value *= 2
        assert value is alias
        assert alias == 16

    def test_self_assignment(self) -> None:
        value = BigInt(WORD_MAX)
        value += value
        assert int(value) == 2 * WORD_MAX

    def test_division_by_zero_leaves_value(self) -> None:
        value = BigInt(9)
        with pytest.raises(ZeroDivisionError):
            value //= 0
        assert value == 9


class TestOperandsUnchanged:
    """Бинарные операторы не изменяют операнды"""

    def test_all_operators(self) -> None:
        a = BigInt.from_int(-(2**65) - 3)
        b = BigInt.from_int(2**64 + 11)
        snapshot = (a.magnitude, a.sign, b.magnitude, b.sign)

        results = [a + b, a - b, a * b, a // b, a % b, a & b, a | b, a ^ b]
        results += [~a, -a, a << 3, a >> 3, a.shift_left(3)]
        assert all(isinstance(result, BigInt) for result in results)

        assert (a.magnitude, a.sign, b.magnitude, b.sign) == snapshot


class TestIntrospection:
    """Тесты для sign / abs / magnitude"""

    def test_abs(self) -> None:
        value = BigInt(9, sign=False)
        assert value.abs() == 9
        assert abs(value) == 9
        assert value == -9

    def test_negation(self) -> None:
        value = BigInt.from_int(2**80)
        assert -(-value) == value
        assert (-value).is_negative

    def test_unary_plus_copies(self) -> None:
        value = BigInt(3)
        assert +value == value
        assert +value is not value

    def test_magnitude_is_immutable_snapshot(self) -> None:
        value = BigInt.from_int(2**64)
        words = value.magnitude
        assert isinstance(words, tuple)
        value.increment()
        assert words == (0, 1)
        assert value.magnitude == (1, 1)
