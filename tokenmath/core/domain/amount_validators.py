"""
Amount validators — проверки диапазона целых фиксированной ширины

Используются как validate-колбэк TokenAmount:
    TokenAmount(token, amount, validate=validate_u64)
"""

from typing import Final

from tokenmath.core.errors import TokenAmountOverflow, TokenAmountUnderflow

MAX_U64: Final[int] = 0xFFFF_FFFF_FFFF_FFFF
MAX_U256: Final[int] = 2**256 - 1


def _validate_range(value: int, type_name: str, max_value: int) -> None:
    if value < 0:
        raise TokenAmountUnderflow(value)
    if value > max_value:
        raise TokenAmountOverflow(type_name, value)


def validate_u64(value: int) -> None:
    """
    Проверка, что значение помещается в u64.

    Raises:
        TokenAmountUnderflow: Если value < 0
        TokenAmountOverflow: Если value > MAX_U64
    """
    _validate_range(value, "u64", MAX_U64)


def validate_u256(value: int) -> None:
    """
    Проверка, что значение помещается в u256.

    Raises:
        TokenAmountUnderflow: Если value < 0
        TokenAmountOverflow: Если value > MAX_U256
    """
    _validate_range(value, "u256", MAX_U256)
