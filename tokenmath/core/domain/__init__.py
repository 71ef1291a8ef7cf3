"""
Domain models and value objects.

Contains token-level entities like Token, TokenAmount, Price and their formatting.
"""

from tokenmath.core.domain.amount_validators import MAX_U64, MAX_U256, validate_u64, validate_u256
from tokenmath.core.domain.convert import convert_amount_to_number, convert_price_to_number
from tokenmath.core.domain.format import (
    format_amount_exact,
    format_amount_fixed,
    format_amount_significant,
    format_price_fixed,
    format_price_fixed_quote,
    format_price_significant,
    format_units,
)
from tokenmath.core.domain.multiplier import make_decimal_multiplier
from tokenmath.core.domain.price import Price
from tokenmath.core.domain.token import Token, TokenLike
from tokenmath.core.domain.token_amount import (
    AmountValidator,
    TokenAmount,
    parse_amount_from_string,
)

__all__ = [
    # Token
    "Token",
    "TokenLike",
    # TokenAmount
    "AmountValidator",
    "TokenAmount",
    "parse_amount_from_string",
    # Price
    "Price",
    # Multiplier cache
    "make_decimal_multiplier",
    # Range validators
    "MAX_U64",
    "MAX_U256",
    "validate_u64",
    "validate_u256",
    # Formatting
    "format_amount_exact",
    "format_amount_fixed",
    "format_amount_significant",
    "format_price_fixed",
    "format_price_fixed_quote",
    "format_price_significant",
    "format_units",
    # Conversion
    "convert_amount_to_number",
    "convert_price_to_number",
]
