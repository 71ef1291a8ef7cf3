"""
tokenmath — exact rational arithmetic for token amounts, prices and percents.

Public API re-exported from tokenmath.core.
"""

from tokenmath.core.domain import (
    Price,
    Token,
    TokenAmount,
    format_amount_exact,
    format_amount_fixed,
    format_amount_significant,
    format_price_fixed,
    format_price_fixed_quote,
    format_price_significant,
    format_units,
    parse_amount_from_string,
    validate_u64,
    validate_u256,
)
from tokenmath.core.errors import (
    BigintParseError,
    DecimalPrecisionError,
    FractionParseError,
    TokenAmountOverflow,
    TokenAmountUnderflow,
    TokenMathError,
    TokenMismatchError,
)
from tokenmath.core.math import (
    Fraction,
    NumberFormat,
    Percent,
    Rounding,
    as_number,
    parse_bigintish,
    percent_to_fixed,
    percent_to_significant,
    strip_trailing_zeroes,
    to_fixed,
    to_significant,
)

__all__ = [
    # Math
    "Fraction",
    "NumberFormat",
    "Percent",
    "Rounding",
    "as_number",
    "parse_bigintish",
    "percent_to_fixed",
    "percent_to_significant",
    "strip_trailing_zeroes",
    "to_fixed",
    "to_significant",
    # Domain
    "Price",
    "Token",
    "TokenAmount",
    "format_amount_exact",
    "format_amount_fixed",
    "format_amount_significant",
    "format_price_fixed",
    "format_price_fixed_quote",
    "format_price_significant",
    "format_units",
    "parse_amount_from_string",
    "validate_u64",
    "validate_u256",
    # Errors
    "BigintParseError",
    "DecimalPrecisionError",
    "FractionParseError",
    "TokenAmountOverflow",
    "TokenAmountUnderflow",
    "TokenMathError",
    "TokenMismatchError",
]
