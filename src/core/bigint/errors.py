"""
BigInt exceptions.

Все ошибки движка наследуют BigIntError. Конкретные классы дополнительно
наследуют встроенные исключения Python, чтобы вызывающий код мог ловить
привычные ZeroDivisionError / NotImplementedError / ValueError.
"""


class BigIntError(Exception):
    """Базовая ошибка арифметического движка BigInt."""

    pass


class DivisionByZero(BigIntError, ZeroDivisionError):
    """
    Деление или взятие остатка по нулевому делителю.

    Применяется к операторам /, //, %, divmod и их in-place формам.
    """

    pass


class BigIntNotImplemented(BigIntError, NotImplementedError):
    """
    Запрошенная операция не поддерживается движком.

    Конструирование из десятичной строки (и любого основания кроме 2)
    намеренно не реализовано: вместо тихого неверного значения
    поднимается это исключение.
    """

    pass


class InvalidBigIntLiteral(BigIntError, ValueError):
    """Строка не является корректной двоичной записью BigInt."""

    pass
