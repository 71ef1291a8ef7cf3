"""
Юнит-тесты для форматирования сумм

Проверяет:
1. format_units (группировка, без хвостовых нулей, символ)
2. format_amount_exact / format_amount_fixed / format_amount_significant
3. ROUND_DOWN по умолчанию и DecimalPrecisionError
4. convert_amount_to_number
"""

import pytest

from tokenmath.core.domain.convert import convert_amount_to_number
from tokenmath.core.domain.format import (
    format_amount_exact,
    format_amount_fixed,
    format_amount_significant,
    format_units,
)
from tokenmath.core.domain.token import Token
from tokenmath.core.domain.token_amount import TokenAmount
from tokenmath.core.errors import DecimalPrecisionError
from tokenmath.core.math.decimal_format import NumberFormat, Rounding


@pytest.fixture
def usdc() -> Token:
    return Token(symbol="USDC", decimals=6)


def test_format_units(usdc: Token) -> None:
    """Группировка по 3 и без хвостовых нулей"""
    assert format_units(TokenAmount(usdc, 1_234_500000)) == "1,234.5 USDC"
    assert format_units(TokenAmount(usdc, 1_000_000_000000)) == "1,000,000 USDC"


def test_format_units_zero(usdc: Token) -> None:
    assert format_units(TokenAmount(usdc, 0)) == "0 USDC"


def test_format_amount_exact(usdc: Token) -> None:
    assert format_amount_exact(TokenAmount(usdc, 1_500000)) == "1.500000"
    assert format_amount_exact(TokenAmount(usdc, 1)) == "0.000001"


def test_format_amount_exact_with_format(usdc: Token) -> None:
    fmt = NumberFormat(decimal_separator=",", group_separator=" ", group_size=3)
    assert format_amount_exact(TokenAmount(usdc, 12_345_678901), fmt) == "12 345,678901"


def test_format_amount_fixed_defaults_to_token_decimals(usdc: Token) -> None:
    assert format_amount_fixed(TokenAmount(usdc, 1_999999)) == "1.999999"


def test_format_amount_fixed_rounds_down(usdc: Token) -> None:
    """По умолчанию сумма никогда не округляется вверх"""
    amount = TokenAmount(usdc, 1_999999)
    assert format_amount_fixed(amount, 2) == "1.99"
    assert format_amount_fixed(amount, 2, rounding=Rounding.ROUND_HALF_UP) == "2.00"


def test_format_amount_fixed_too_many_places(usdc: Token) -> None:
    with pytest.raises(DecimalPrecisionError) as exc_info:
        format_amount_fixed(TokenAmount(usdc, 1), 7)
    assert exc_info.value.requested == 7
    assert exc_info.value.supported == 6


def test_format_amount_significant(usdc: Token) -> None:
    amount = TokenAmount(usdc, 1_234_567891)
    assert format_amount_significant(amount) == "1234.56"
    assert format_amount_significant(amount, 3) == "1230"


def test_convert_amount_to_number(usdc: Token) -> None:
    assert convert_amount_to_number(TokenAmount(usdc, 1_500000)) == 1.5
    assert convert_amount_to_number(TokenAmount(usdc, 0)) == 0.0
