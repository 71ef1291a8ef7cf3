"""
Errors — Таксономия исключений tokenmath

Все ошибки локальные и синхронные: вычисление либо успешно, либо вход невалиден.
Повторов нет, ошибки никогда не проглатываются.

Иерархия:
- TokenMathError
    - BigintParseError       (вход не удалось интерпретировать как целое)
    - FractionParseError     (операнд дроби не распарсился, оригинал в __cause__)
    - TokenMismatchError     (операция требует одинаковых токенов)
    - DecimalPrecisionError  (запрошено больше знаков, чем у токена)
    - TokenAmountUnderflow   (сумма < 0, слой валидаторов)
    - TokenAmountOverflow    (сумма > максимума u64/u256, слой валидаторов)

Все конкретные ошибки также наследуют ValueError, поэтому существующий код,
ловящий ValueError, продолжает работать.
"""


class TokenMathError(Exception):
    """Базовое исключение tokenmath."""

    pass


class BigintParseError(TokenMathError, ValueError):
    """Значение не удалось привести к целому произвольной точности."""

    pass


class FractionParseError(TokenMathError, ValueError):
    """
    Операнд бинарной операции не удалось привести к Fraction.

    Сообщение всегда содержит исходное сообщение об ошибке парсинга.
    """

    pass


class TokenMismatchError(TokenMathError, ValueError):
    """
    Операция между суммами/ценами разных токенов.

    Args:
        operation: Имя операции ("add", "quote", ...)
        left: Строковое представление левого токена
        right: Строковое представление правого токена
    """

    def __init__(self, operation: str, left: object, right: object):
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(f"{operation} token mismatch: {left} != {right}")


class DecimalPrecisionError(TokenMathError, ValueError):
    """Запрошено больше знаков после запятой, чем поддерживает токен."""

    def __init__(self, requested: int, supported: int):
        self.requested = requested
        self.supported = supported
        super().__init__(
            f"Requested {requested} decimal places, token supports at most {supported}"
        )


class TokenAmountUnderflow(TokenMathError, ValueError):
    """Сумма токена должна быть неотрицательной."""

    def __init__(self, amount: int):
        self.amount = amount
        super().__init__(f"Token amount must be greater than zero: {amount}")


class TokenAmountOverflow(TokenMathError, ValueError):
    """Сумма токена выходит за пределы целого фиксированной ширины."""

    def __init__(self, type_name: str, amount: int):
        self.type_name = type_name
        self.amount = amount
        super().__init__(f"Token amount overflows {type_name}: {amount}")
