"""
Bigint — Адаптер целых произвольной точности

Единственная точка входа для приведения разнородных числовых входов к int:
- int (возвращается как есть)
- десятичные и 0x-шестнадцатеричные строки
- целочисленные float / Decimal и объекты с __index__
- legacy BN-объекты (структурно: wordSize == 26 у класса и список words)

Сам int Python уже является целым произвольной точности, поэтому здесь
нет никакой арифметики, только парсинг.
"""

import math
import re
from decimal import Decimal
from typing import Any, Final, Protocol, Union, runtime_checkable

from tokenmath.core.errors import BigintParseError

# Маркер размера слова legacy BN-объектов
BN_WORD_SIZE: Final[int] = 26

_HEX_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[+-]?0[xX]")


@runtime_checkable
class BNLike(Protocol):
    """Объект, структурно совместимый с legacy BN (words + wordSize)."""

    words: list[int]

    def __str__(self) -> str: ...


BigintIsh = Union[int, str, float, Decimal, BNLike]


def is_bn(value: Any) -> bool:
    """
    Проверка, является ли объект legacy BN.

    Проверка чисто структурная: объект не None, у его класса
    wordSize == BN_WORD_SIZE и атрибут words является списком.
    """
    return (
        value is not None
        and getattr(type(value), "wordSize", None) == BN_WORD_SIZE
        and isinstance(getattr(value, "words", None), list)
    )


def _parse_str(text: str, original: Any) -> int:
    cleaned = text.strip()
    if not cleaned:
        raise BigintParseError(f"Cannot convert empty string to a big integer: {original!r}")

    try:
        if _HEX_PATTERN.match(cleaned):
            return int(cleaned, 16)
        return int(cleaned, 10)
    except ValueError as e:
        raise BigintParseError(f"Cannot convert {original!r} to a big integer") from e


def parse_bigintish(value: BigintIsh) -> int:
    """
    Приведение BigintIsh к int.

    Args:
        value: int, строка, целочисленный float/Decimal, объект с __index__
            или legacy BN-объект

    Returns:
        Целое значение

    Raises:
        BigintParseError: Если значение нельзя интерпретировать как целое

    Examples:
        >>> parse_bigintish("1000")
        1000
        >>> parse_bigintish("0xff")
        255
        >>> parse_bigintish(10.0)
        10
    """
    if isinstance(value, bool):
        raise BigintParseError(f"Cannot convert boolean {value!r} to a big integer")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        return _parse_str(value, value)

    if is_bn(value):
        return _parse_str(str(value), value)

    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise BigintParseError(
                f"The number {value!r} cannot be converted to a big integer "
                f"because it is not an integer"
            )
        return int(value)

    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise BigintParseError(
                f"The number {value} cannot be converted to a big integer "
                f"because it is not an integer"
            )
        return int(value)

    if hasattr(value, "__index__"):
        return value.__index__()

    if value is None:
        raise BigintParseError("Cannot convert None to a big integer")

    return _parse_str(str(value), value)
