"""
BigInt: целое произвольной точности со знаком

Sign-magnitude представление: знак хранится отдельно, magnitude это
список 64-битных слов, младшее первым. Вся арифметика выполняется
пословно модулями additive / multiplicative / division / bitwise;
класс отвечает только за знаки, сравнение и протокол операторов Python.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Magnitude нормализован после каждой операции (trim)
2. Ноль всегда положительный: отрицательного нуля не существует
3. Бинарные операторы не изменяют операнды
4. Изменяют значение только in-place операторы (+=, -=, ...) и
   increment/decrement, заменяя значение целиком

КОНВЕНЦИИ:
- Деление усекающее (к нулю), остаток имеет знак делимого
  (в отличие от floor-деления встроенного int)
- << расширяющий сдвиг, shift_left() усекающий в пределах текущей ширины
- В побитовых операциях знак ведёт себя как отдельный бит:
  & → оба отрицательные, | → хотя бы один, ^ → ровно один, ~ → инверсия
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple, Union

from src.core.bigint.additive import add_magnitudes, subtract_magnitudes
from src.core.bigint.bitwise import (
    and_magnitudes,
    complement_magnitude,
    expand_left_shift,
    or_magnitudes,
    shift_left,
    shift_right,
    xor_magnitudes,
)
from src.core.bigint.conversion import (
    DECIMAL_BASE,
    magnitude_from_int,
    magnitude_to_int,
    parse_magnitude,
    render_magnitude,
)
from src.core.bigint.division import divide_magnitudes
from src.core.bigint.multiplicative import multiply_magnitudes
from src.core.bigint.words import (
    WORD_BITS,
    WORD_MAX,
    compare_magnitudes,
    is_zero_magnitude,
    trim,
    validate_word,
)
from src.core.domain.sign import Sign

if TYPE_CHECKING:
    from src.core.domain.bigint_state import BigIntState

SignLike = Union[Sign, bool]


class BigInt:
    """
    Целое произвольной точности со знаком.

    Examples:
        >>> BigInt(0xFFFFFFFFFFFFFFFF) + BigInt(1)
        BigInt(18446744073709551616)
        >>> BigInt(7, sign=False) // BigInt(2)
        BigInt(-3)
        >>> BigInt(7, sign=False) % BigInt(2)
        BigInt(-1)
    """

    __slots__ = ("_negative", "_words")

    WORD_BITS = WORD_BITS

    def __init__(self, word: int = 0, sign: SignLike = Sign.POSITIVE) -> None:
        """
        Значение из одного слова и явного знака.

        Args:
            word: Magnitude в пределах одного слова [0, WORD_MAX]
            sign: Sign или bool (True = неотрицательный)

        Raises:
            ValueError: Если word вне диапазона слова
        """
        validate_word(word)
        self._words: List[int] = [word]
        self._negative: bool = Sign.coerce(sign).is_negative and word != 0

    # =========================================================================
    # КОНСТРУИРОВАНИЕ
    # =========================================================================

    @classmethod
    def _from_parts(cls, negative: bool, words: List[int]) -> "BigInt":
        # Забирает владение списком words
        result = cls.__new__(cls)
        result._words = trim(words)
        result._negative = negative and not is_zero_magnitude(result._words)
        return result

    @classmethod
    def zero(cls) -> "BigInt":
        return cls()

    @classmethod
    def from_word(cls, word: int, sign: SignLike = Sign.POSITIVE) -> "BigInt":
        return cls(word, sign)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """
        Значение из встроенного int произвольного размера.

        Raises:
            ValueError: Если value не int
        """
        if not isinstance(value, int):
            raise ValueError(f"value must be an int, got {type(value).__name__}")
        return cls._from_parts(value < 0, magnitude_from_int(abs(value)))

    @classmethod
    def from_string(cls, text: str, base: int = DECIMAL_BASE) -> "BigInt":
        """
        Разбор строки (поддерживается только основание 2).

        Raises:
            BigIntNotImplemented: Для основания 10 и любого кроме 2
            InvalidBigIntLiteral: Если двоичная запись некорректна
        """
        body = text.strip()
        negative = body.startswith("-")
        if negative:
            body = body[1:]
        return cls._from_parts(negative, parse_magnitude(body, base))

    @classmethod
    def from_state(cls, state: Any) -> "BigInt":
        """
        Восстановление из BigIntState (или dict той же формы).

        Raises:
            pydantic.ValidationError: Если состояние не нормализовано
        """
        from src.core.domain.bigint_state import BigIntState

        if not isinstance(state, BigIntState):
            state = BigIntState.model_validate(state)
        return cls._from_parts(state.sign.is_negative, list(state.magnitude))

    def to_state(self) -> "BigIntState":
        """Экспорт в immutable BigIntState."""
        from src.core.domain.bigint_state import BigIntState

        return BigIntState(sign=self.sign, magnitude=list(self._words))

    def copy(self) -> "BigInt":
        """Глубокая копия (собственный список слов)."""
        return BigInt._from_parts(self._negative, list(self._words))

    def __copy__(self) -> "BigInt":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "BigInt":
        return self.copy()

    def take(self) -> "BigInt":
        """
        Перемещение: новое значение забирает слова, источник становится нулём.
        """
        moved = BigInt._from_parts(self._negative, self._words)
        self._words = [0]
        self._negative = False
        return moved

    def _assign(self, other: "BigInt") -> None:
        self._words = list(other._words)
        self._negative = other._negative

    # =========================================================================
    # ИНТРОСПЕКЦИЯ
    # =========================================================================

    @property
    def sign(self) -> Sign:
        return Sign.NEGATIVE if self._negative else Sign.POSITIVE

    @property
    def is_negative(self) -> bool:
        return self._negative

    @property
    def magnitude(self) -> Tuple[int, ...]:
        """Слова magnitude (копия, младшее первым)."""
        return tuple(self._words)

    def abs(self) -> "BigInt":
        return BigInt._from_parts(False, list(self._words))

    def fits_in_native_word(self) -> bool:
        """True если magnitude занимает ровно одно слово."""
        return len(self._words) == 1

    def to_word(self) -> int:
        """
        Сужающее приведение: младшее слово magnitude.

        Не проверяет переполнение: вызывать только после
        fits_in_native_word(). Знак не учитывается.
        """
        return self._words[0]

    def __int__(self) -> int:
        value = magnitude_to_int(self._words)
        return -value if self._negative else value

    def __bool__(self) -> bool:
        return not is_zero_magnitude(self._words)

    # =========================================================================
    # РЕНДЕРИНГ
    # =========================================================================

    def to_string(self, base: int = DECIMAL_BASE) -> str:
        """
        Строковая запись в основании 10 или 2.

        Любое другое основание даёт десятичную запись.
        """
        body = render_magnitude(self._words, base)
        return f"-{body}" if self._negative else body

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt({self.to_string()})"

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __neg__(self) -> "BigInt":
        return BigInt._from_parts(not self._negative, list(self._words))

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __abs__(self) -> "BigInt":
        return self.abs()

    def __add__(self, other: Any) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented

        if self._negative != other._negative:
            # a + (-b) = a - |b|;  (-a) + b = b - |a|
            if not self._negative:
                return self - other.abs()
            return other - self.abs()

        return BigInt._from_parts(self._negative, add_magnitudes(self._words, other._words))

    def __radd__(self, other: Any) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other + self

    def __sub__(self, other: Any) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented

        if self < other:
            return -(other - self)

        if self._negative != other._negative:
            # self >= other при разных знаках: self >= 0, other < 0
            return self + other.abs()

        if not self._negative:
            return BigInt._from_parts(
                False, subtract_magnitudes(self._words, other._words)
            )
        # Оба отрицательные и self >= other, значит |self| <= |other|
        return BigInt._from_parts(False, subtract_magnitudes(other._words, self._words))

    def __rsub__(self, other: Any) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: Any) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return BigInt._from_parts(
            self._negative != other._negative,
            multiply_magnitudes(self._words, other._words),
        )

    def __rmul__(self, other: Any) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other * self

    def _divide(self, other: "BigInt") -> Tuple["BigInt", "BigInt"]:
        quotient, remainder = divide_magnitudes(self._words, other._words)
        return (
            BigInt._from_parts(self._negative != other._negative, quotient),
            BigInt._from_parts(self._negative, remainder),
        )

    def __floordiv__(self, other: Any) -> "BigInt":
        """Усекающее деление (к нулю)."""
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._divide(other)[0]

    # Дробных значений нет: / это то же усекающее деление
    __truediv__ = __floordiv__

    def __rfloordiv__(self, other: Any) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other // self

    __rtruediv__ = __rfloordiv__

    def __mod__(self, other: Any) -> "BigInt":
        """Остаток по truncated-конвенции (знак делимого)."""
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._divide(other)[1]

    def __rmod__(self, other: Any) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other % self

    def __divmod__(self, other: Any) -> Tuple["BigInt", "BigInt"]:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._divide(other)

    def __rdivmod__(self, other: Any) -> Tuple["BigInt", "BigInt"]:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other._divide(self)

    def increment(self) -> "BigInt":
        """
        Префиксный инкремент (in place).

        Быстрый путь меняет младшее слово напрямую, если нет wraparound.
        """
        low = self._words[0]
        if not self._negative and low < WORD_MAX:
            self._words[0] = low + 1
        elif self._negative and low > 0:
            self._words[0] = low - 1
            self._negative = not is_zero_magnitude(self._words)
        else:
            self._assign(self + BigInt(1))
        return self

    def decrement(self) -> "BigInt":
        """Префиксный декремент (in place)."""
        low = self._words[0]
        if self._negative and low < WORD_MAX:
            self._words[0] = low + 1
        elif not self._negative and low > 0:
            self._words[0] = low - 1
        else:
            self._assign(self - BigInt(1))
        return self

    def post_increment(self) -> "BigInt":
        """Постфиксный инкремент: возвращает копию прежнего значения."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInt":
        """Постфиксный декремент: возвращает копию прежнего значения."""
        previous = self.copy()
        self.decrement()
        return previous

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, int) and 0 <= other <= WORD_MAX:
            # Быстрое сравнение со словом (проверки на 0 / 1)
            return not self._negative and len(self._words) == 1 and self._words[0] == other

        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._negative == other._negative and self._words == other._words

    def __lt__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented

        if self._negative != other._negative:
            return self._negative

        order = compare_magnitudes(self._words, other._words)
        return order > 0 if self._negative else order < 0

    def __le__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not (self == other) and not (self < other)

    def __ge__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not (self < other)

    # Изменяемый тип значения
    __hash__ = None  # type: ignore[assignment]

    # =========================================================================
    # ПОБИТОВЫЕ ОПЕРАЦИИ И СДВИГИ
    # =========================================================================

    def __and__(self, other: Any) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return BigInt._from_parts(
            self._negative and other._negative, and_magnitudes(self._words, other._words)
        )

    __rand__ = __and__

    def __or__(self, other: Any) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return BigInt._from_parts(
            self._negative or other._negative, or_magnitudes(self._words, other._words)
        )

    __ror__ = __or__

    def __xor__(self, other: Any) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return BigInt._from_parts(
            self._negative != other._negative, xor_magnitudes(self._words, other._words)
        )

    __rxor__ = __xor__

    def __invert__(self) -> "BigInt":
        """
        Дополнение magnitude в пределах текущей ширины, знак инвертируется.

        Это не дополнительный код: ~BigInt(0) == -(2**64 - 1),
        ~BigInt(5) == -(2**64 - 6).
        """
        return BigInt._from_parts(not self._negative, complement_magnitude(self._words))

    def expanded_left_shift(self, count: int) -> "BigInt":
        """Сдвиг влево с ростом magnitude (умножение на 2^count)."""
        return BigInt._from_parts(self._negative, expand_left_shift(self._words, count))

    def shift_left(self, count: int) -> "BigInt":
        """Усекающий сдвиг влево в пределах текущей ширины magnitude."""
        return BigInt._from_parts(self._negative, shift_left(self._words, count))

    def shift_right(self, count: int) -> "BigInt":
        """Сдвиг magnitude вправо (к нулю для отрицательных)."""
        return BigInt._from_parts(self._negative, shift_right(self._words, count))

    def __lshift__(self, count: Any) -> "BigInt":
        if not isinstance(count, int):
            return NotImplemented
        return self.expanded_left_shift(count)

    def __rshift__(self, count: Any) -> "BigInt":
        if not isinstance(count, int):
            return NotImplemented
        return self.shift_right(count)

    # =========================================================================
    # IN-PLACE ОПЕРАТОРЫ
    # =========================================================================

    def __iadd__(self, other: Any) -> "BigInt":
        self._assign(self + other)
        return self

    def __isub__(self, other: Any) -> "BigInt":
        self._assign(self - other)
        return self

    def __imul__(self, other: Any) -> "BigInt":
        self._assign(self * other)
        return self

    def __ifloordiv__(self, other: Any) -> "BigInt":
        self._assign(self // other)
        return self

    __itruediv__ = __ifloordiv__

    def __imod__(self, other: Any) -> "BigInt":
        self._assign(self % other)
        return self

    def __ilshift__(self, count: Any) -> "BigInt":
        self._assign(self << count)
        return self

    def __irshift__(self, count: Any) -> "BigInt":
        self._assign(self >> count)
        return self

    def __iand__(self, other: Any) -> "BigInt":
        self._assign(self & other)
        return self

    def __ior__(self, other: Any) -> "BigInt":
        self._assign(self | other)
        return self

    def __ixor__(self, other: Any) -> "BigInt":
        self._assign(self ^ other)
        return self


def _coerce(value: Any) -> Optional[BigInt]:
    """BigInt как есть, int через from_int, остальное None."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int):
        return BigInt.from_int(value)
    return None
