"""
Format — Рендеринг сумм и курсов

Обёртки над to_fixed / to_significant с учётом decimals токена.
Функции для сумм по умолчанию округляют вниз (ROUND_DOWN), чтобы никогда
не показывать больше, чем есть на балансе.
"""

from tokenmath.core.domain.price import Price
from tokenmath.core.domain.token_amount import TokenAmount
from tokenmath.core.errors import DecimalPrecisionError
from tokenmath.core.math.decimal_format import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_GROUP_SEPARATOR,
    NumberFormat,
    Rounding,
    strip_trailing_zeroes,
    to_fixed,
    to_significant,
)

_UNITS_FORMAT = NumberFormat(
    decimal_separator=DEFAULT_DECIMAL_SEPARATOR,
    group_separator=DEFAULT_GROUP_SEPARATOR,
    group_size=3,
)


# =============================================================================
# СУММЫ
# =============================================================================


def format_amount_exact(amount: TokenAmount, fmt: NumberFormat | None = None) -> str:
    """Сумма со всеми знаками токена, без потерь."""
    return to_fixed(amount, amount.token.decimals, fmt)


def format_units(amount: TokenAmount) -> str:
    """
    Сумма с группировкой, без хвостовых нулей, с символом токена.

    Не зависит от локали: всегда "," для групп и "." для дробной части.

    Examples:
        >>> format_units(TokenAmount(Token(symbol="USDC", decimals=6), 1_234_500000))
        '1,234.5 USDC'
    """
    text = strip_trailing_zeroes(format_amount_exact(amount, _UNITS_FORMAT))
    return f"{text} {amount.token.symbol}"


def format_amount_significant(
    amount: TokenAmount,
    significant_digits: int = 6,
    fmt: NumberFormat | None = None,
    rounding: Rounding = Rounding.ROUND_DOWN,
) -> str:
    return to_significant(amount, significant_digits, fmt, rounding)


def format_amount_fixed(
    amount: TokenAmount,
    decimal_places: int | None = None,
    fmt: NumberFormat | None = None,
    rounding: Rounding = Rounding.ROUND_DOWN,
) -> str:
    """
    Сумма с фиксированным количеством знаков.

    Args:
        amount: Сумма
        decimal_places: Количество знаков (default: decimals токена)
        fmt: Формат
        rounding: Политика округления (default: ROUND_DOWN)

    Raises:
        DecimalPrecisionError: Если decimal_places > decimals токена
    """
    decimals = amount.token.decimals
    if decimal_places is None:
        decimal_places = decimals
    if decimal_places > decimals:
        raise DecimalPrecisionError(decimal_places, decimals)
    return to_fixed(amount, decimal_places, fmt, rounding)


# =============================================================================
# КУРСЫ
# =============================================================================


def format_price_significant(
    price: Price,
    significant_digits: int = 6,
    fmt: NumberFormat | None = None,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
) -> str:
    return to_significant(price.adjusted, significant_digits, fmt, rounding)


def format_price_fixed(
    price: Price,
    decimal_places: int = 4,
    fmt: NumberFormat | None = None,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
) -> str:
    return to_fixed(price.adjusted, decimal_places, fmt, rounding)


def format_price_fixed_quote(
    price: Price,
    fmt: NumberFormat | None = None,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
) -> str:
    """Курс с количеством знаков quote currency."""
    return format_price_fixed(price, price.quote_currency.decimals, fmt, rounding)
