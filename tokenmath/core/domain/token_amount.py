"""
TokenAmount — Количество токена в минимальных единицах

Значение суммы = raw / 10^token.decimals. TokenAmount — immutable value object
поверх движка Fraction: вся арифметика выполняется над Fraction, результат
заворачивается обратно через new(token, amount).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add / subtract / percent_of только между суммами одного токена (token.equals)
2. validate-колбэк вызывается до создания каждого экземпляра
3. new() сохраняет конкретный класс и validate-колбэк исходного экземпляра
4. scale / reduce_by теряют точность (усечение к нулю)
"""

import dataclasses
import warnings
from dataclasses import dataclass, field
from typing import Callable, Optional

from tokenmath.core.domain.multiplier import make_decimal_multiplier
from tokenmath.core.domain.token import TokenLike
from tokenmath.core.errors import BigintParseError, TokenMismatchError
from tokenmath.core.math.bigint import BigintIsh, parse_bigintish
from tokenmath.core.math.decimal_format import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_GROUP_SEPARATOR,
)
from tokenmath.core.math.fraction import Fraction, Fractionish, parse_fraction
from tokenmath.core.math.percent import Percent

AmountValidator = Callable[[int], None]


def parse_amount_from_string(
    token: TokenLike,
    ui_amount: str,
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR,
    group_separator: str = DEFAULT_GROUP_SEPARATOR,
) -> int:
    """
    Парсинг raw-суммы из человекочитаемой строки.

    Лишние знаки дробной части (больше token.decimals) отбрасываются.

    Args:
        token: Токен (определяет decimals)
        ui_amount: Строка вида "1,234.56"
        decimal_separator: Десятичный разделитель (default: ".")
        group_separator: Разделитель групп (default: ",")

    Returns:
        Сумма в минимальных единицах

    Raises:
        BigintParseError: Если строка не является числом

    Examples:
        >>> parse_amount_from_string(Token(symbol="USDC", decimals=6), "1,234.5")
        1234500000
    """
    text = ui_amount.strip()
    negative = text.startswith("-")
    if negative:
        text = text[1:]

    parts = text.split(decimal_separator)
    if len(parts) > 2:
        raise BigintParseError(f"Cannot parse token amount: {ui_amount!r}")

    whole_raw = parts[0].replace(group_separator, "")
    fraction_raw = parts[1] if len(parts) == 2 else ""
    if not whole_raw and not fraction_raw:
        raise BigintParseError(f"Cannot parse token amount: {ui_amount!r}")
    for digits in (whole_raw, fraction_raw):
        if digits and not (digits.isascii() and digits.isdigit()):
            raise BigintParseError(f"Cannot parse token amount: {ui_amount!r}")

    decimals = token.decimals
    whole = int(whole_raw) if whole_raw else 0
    fraction_digits = fraction_raw[:decimals].ljust(decimals, "0")
    fraction = int(fraction_digits) if fraction_digits else 0

    combined = whole * make_decimal_multiplier(decimals) + fraction
    return -combined if negative else combined


@dataclass(frozen=True)
class TokenAmount:
    """
    Количество токена.

    Args:
        token: Токен (TokenLike)
        raw: Сумма в минимальных единицах (BigintIsh)
        validate: Необязательная проверка raw (например, validate_u64)

    Examples:
        >>> btc = Token(symbol="BTC", decimals=8)
        >>> TokenAmount(btc, 1_50000000).add(TokenAmount(btc, 50000000)).raw
        200000000
    """

    token: TokenLike
    raw: int
    validate: Optional[AmountValidator] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        parsed = parse_bigintish(self.raw)
        if self.validate is not None:
            self.validate(parsed)
        object.__setattr__(self, "raw", parsed)

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    def new(self, token: TokenLike, amount: BigintIsh) -> "TokenAmount":
        """Новая сумма того же конкретного класса (с тем же validate)."""
        return dataclasses.replace(self, token=token, raw=amount)

    def with_amount(self, amount: BigintIsh) -> "TokenAmount":
        return self.new(self.token, amount)

    # -------------------------------------------------------------------------
    # Представление как дробь
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self.raw

    @property
    def denominator(self) -> int:
        return make_decimal_multiplier(self.token.decimals)

    @property
    def fraction(self) -> Fraction:
        """Значение суммы как Fraction (raw / 10^decimals)."""
        return Fraction(self.numerator, self.denominator)

    @property
    def as_fraction(self) -> Fraction:
        return self.fraction

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _require_same_token(self, other: "TokenAmount", operation: str) -> None:
        if not self.token.equals(other.token):
            raise TokenMismatchError(operation, self.token, other.token)

    def add(self, other: "TokenAmount") -> "TokenAmount":
        self._require_same_token(other, "add")
        return self.with_amount(self.raw + other.raw)

    def subtract(self, other: "TokenAmount") -> "TokenAmount":
        self._require_same_token(other, "subtract")
        return self.with_amount(self.raw - other.raw)

    def percent_of(self, other: "TokenAmount") -> Percent:
        """Эта сумма как доля другой суммы того же токена."""
        self._require_same_token(other, "percentOf")
        return Percent.from_fraction(self.fraction.divide(other.fraction))

    def divide_by(self, other: Fractionish) -> Percent:
        """Деление суммы на произвольную дробь, результат как Percent."""
        return Percent.from_fraction(self.fraction.divide(other))

    def scale(self, fraction: Fractionish) -> "TokenAmount":
        """
        Умножение суммы на дробь.

        ВНИМАНИЕ: теряет точность (результат усекается до целого raw).
        """
        return self.with_amount(parse_fraction(fraction).as_fraction.multiply(self.raw).quotient)

    def reduce_by(self, percent: Percent) -> "TokenAmount":
        """
        Уменьшение суммы на процент: scale(100% - percent).

        ВНИМАНИЕ: теряет точность.
        """
        return self.scale(Percent.ONE_HUNDRED.subtract(percent))

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def less_than(self, other: Fractionish) -> bool:
        return self.fraction.less_than(other)

    def equal_to(self, other: Fractionish) -> bool:
        return self.fraction.equal_to(other)

    def greater_than(self, other: Fractionish) -> bool:
        return self.fraction.greater_than(other)

    def compare_to(self, other: Fractionish) -> int:
        return self.fraction.compare_to(other)

    def is_zero(self) -> bool:
        return self.raw == 0

    def is_non_zero(self) -> bool:
        return not self.is_zero()

    def __add__(self, other: "TokenAmount") -> "TokenAmount":
        return self.add(other)

    def __sub__(self, other: "TokenAmount") -> "TokenAmount":
        return self.subtract(other)

    # -------------------------------------------------------------------------
    # DEPRECATED
    # -------------------------------------------------------------------------

    def divide_by_amount(self, other: "TokenAmount") -> Percent:
        """Deprecated: используйте percent_of."""
        warnings.warn(
            "divide_by_amount is deprecated, use percent_of", DeprecationWarning, stacklevel=2
        )
        return self.percent_of(other)

    def multiply_by(self, fraction: Fractionish) -> "TokenAmount":
        """Deprecated: используйте scale."""
        warnings.warn("multiply_by is deprecated, use scale", DeprecationWarning, stacklevel=2)
        return self.scale(fraction)
