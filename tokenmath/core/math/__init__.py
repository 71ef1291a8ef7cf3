"""
Core math modules для tokenmath

Точная рациональная арифметика и детерминированный десятичный рендеринг.
"""

# Bigint adapter
from tokenmath.core.math.bigint import (
    BN_WORD_SIZE,
    BigintIsh,
    BNLike,
    is_bn,
    parse_bigintish,
)

# Fraction engine
from tokenmath.core.math.fraction import (
    FROM_NUMBER_DEFAULT_DECIMALS,
    Fraction,
    FractionLike,
    Fractionish,
    parse_fraction,
    trunc_div,
    trunc_rem,
)

# Decimal formatter
from tokenmath.core.math.decimal_format import (
    AS_NUMBER_FALLBACK_DECIMALS,
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_GROUP_SEPARATOR,
    DEFAULT_NUMBER_FORMAT,
    NumberFormat,
    Rounding,
    as_number,
    round_div,
    strip_trailing_zeroes,
    to_fixed,
    to_significant,
)

# Percent
from tokenmath.core.math.percent import (
    BPS_DENOMINATOR,
    Percent,
    percent_to_fixed,
    percent_to_significant,
)

__all__ = [
    # Bigint — Constants
    "BN_WORD_SIZE",
    # Bigint — Types
    "BigintIsh",
    "BNLike",
    # Bigint — Functions
    "is_bn",
    "parse_bigintish",
    # Fraction — Constants
    "FROM_NUMBER_DEFAULT_DECIMALS",
    # Fraction — Types
    "Fraction",
    "FractionLike",
    "Fractionish",
    # Fraction — Functions
    "parse_fraction",
    "trunc_div",
    "trunc_rem",
    # Decimal Format — Constants
    "AS_NUMBER_FALLBACK_DECIMALS",
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_GROUP_SEPARATOR",
    "DEFAULT_NUMBER_FORMAT",
    # Decimal Format — Types
    "NumberFormat",
    "Rounding",
    # Decimal Format — Functions
    "as_number",
    "round_div",
    "strip_trailing_zeroes",
    "to_fixed",
    "to_significant",
    # Percent — Constants
    "BPS_DENOMINATOR",
    # Percent — Types
    "Percent",
    # Percent — Functions
    "percent_to_fixed",
    "percent_to_significant",
]
