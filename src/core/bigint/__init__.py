"""
BigInt: целое произвольной точности со знаком

Sign-magnitude движок над 64-битными словами: сложение, вычитание,
умножение, усекающее деление, побитовая логика, сдвиги, сравнение,
рендеринг в основаниях 10 и 2.
"""

# Representation & Normalization
from src.core.bigint.words import (
    WORD_BITS,
    WORD_MASK,
    WORD_MAX,
    bit_width,
    compare_magnitudes,
    get_bit,
    is_zero_magnitude,
    resize_to_at_least,
    set_bit,
    trim,
    validate_word,
)

# Errors
from src.core.bigint.errors import (
    BigIntError,
    BigIntNotImplemented,
    DivisionByZero,
    InvalidBigIntLiteral,
)

# Arithmetic cores
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
from src.core.bigint.division import divide_by_word, divide_magnitudes
from src.core.bigint.multiplicative import multiply_magnitudes

# Conversion
from src.core.bigint.conversion import (
    BINARY_BASE,
    DECIMAL_BASE,
    SUPPORTED_RENDER_BASES,
    magnitude_from_int,
    magnitude_to_binary,
    magnitude_to_decimal,
    magnitude_to_int,
    parse_binary_magnitude,
    parse_magnitude,
    render_magnitude,
)

# Value type
from src.core.bigint.bigint import BigInt

__all__ = [
    # Words: constants
    "WORD_BITS",
    "WORD_MASK",
    "WORD_MAX",
    # Words: functions
    "bit_width",
    "compare_magnitudes",
    "get_bit",
    "is_zero_magnitude",
    "resize_to_at_least",
    "set_bit",
    "trim",
    "validate_word",
    # Errors
    "BigIntError",
    "BigIntNotImplemented",
    "DivisionByZero",
    "InvalidBigIntLiteral",
    # Additive / Multiplicative / Division
    "add_magnitudes",
    "subtract_magnitudes",
    "multiply_magnitudes",
    "divide_magnitudes",
    "divide_by_word",
    # Bitwise & Shift
    "and_magnitudes",
    "complement_magnitude",
    "expand_left_shift",
    "or_magnitudes",
    "shift_left",
    "shift_right",
    "xor_magnitudes",
    # Conversion
    "BINARY_BASE",
    "DECIMAL_BASE",
    "SUPPORTED_RENDER_BASES",
    "magnitude_from_int",
    "magnitude_to_binary",
    "magnitude_to_decimal",
    "magnitude_to_int",
    "parse_binary_magnitude",
    "parse_magnitude",
    "render_magnitude",
    # Value type
    "BigInt",
]
