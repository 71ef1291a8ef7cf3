"""
Convert — lossy конверсия сумм и курсов во float

Только для отображения и приблизительных расчётов: точность не гарантируется.
"""

from tokenmath.core.domain.format import format_amount_exact
from tokenmath.core.domain.price import Price
from tokenmath.core.domain.token_amount import TokenAmount
from tokenmath.core.math.decimal_format import as_number


def convert_amount_to_number(amount: TokenAmount) -> float:
    """Сумма как float (через точную строку со всеми знаками токена)."""
    return float(format_amount_exact(amount))


def convert_price_to_number(price: Price) -> float:
    """Человекочитаемый курс (adjusted) как float."""
    return as_number(price.adjusted)
