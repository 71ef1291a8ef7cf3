"""
Price — Курс quote_currency за единицу base_currency

numerator и denominator задаются в raw-единицах:
- denominator: единицы base currency (1 BTC при 8 decimals = 1_00000000)
- numerator: единицы quote currency ($30k при 6 decimals = 30_000_000000)

scalar = 10^base_decimals / 10^quote_decimals пересчитывается при каждом
конструировании; adjusted = raw * scalar даёт человекочитаемый курс.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. multiply: self.quote_currency.equals(other.base_currency) (цепное правило курсов)
2. quote: token_amount.token.equals(self.base_currency)
3. quote усекает результат до целого raw (повторное котирование теряет дробную часть)
"""

import dataclasses
from dataclasses import dataclass, field

from tokenmath.core.domain.multiplier import make_decimal_multiplier
from tokenmath.core.domain.token import TokenLike
from tokenmath.core.domain.token_amount import TokenAmount
from tokenmath.core.errors import TokenMismatchError
from tokenmath.core.math.bigint import BigintIsh, parse_bigintish
from tokenmath.core.math.fraction import Fraction, Fractionish


@dataclass(frozen=True)
class Price:
    """
    Курс между двумя токенами.

    Examples:
        >>> btc = Token(symbol="BTC", decimals=8)
        >>> usd = Token(symbol="USD", decimals=6)
        >>> price = Price(btc, usd, 1_00000000, 30_000_000000)
        >>> price.quote(TokenAmount(btc, 2_00000000)).raw
        60000000000
    """

    base_currency: TokenLike
    quote_currency: TokenLike
    denominator: int
    numerator: int
    scalar: Fraction = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "denominator", parse_bigintish(self.denominator))
        object.__setattr__(self, "numerator", parse_bigintish(self.numerator))
        object.__setattr__(
            self,
            "scalar",
            Fraction(
                make_decimal_multiplier(self.base_currency.decimals),
                make_decimal_multiplier(self.quote_currency.decimals),
            ),
        )

    def new(
        self,
        base_currency: TokenLike,
        quote_currency: TokenLike,
        denominator: BigintIsh,
        numerator: BigintIsh,
    ) -> "Price":
        """Новый курс того же конкретного класса."""
        return dataclasses.replace(
            self,
            base_currency=base_currency,
            quote_currency=quote_currency,
            denominator=denominator,
            numerator=numerator,
        )

    @property
    def raw(self) -> Fraction:
        """Курс в raw-единицах (без учёта decimals)."""
        return Fraction(self.numerator, self.denominator)

    @property
    def as_fraction(self) -> Fraction:
        return self.raw

    @property
    def adjusted(self) -> Fraction:
        """Курс в человекочитаемых единицах (raw * scalar)."""
        return self.raw.multiply(self.scalar)

    def invert(self) -> "Price":
        """Обратный курс: base и quote меняются местами."""
        return self.new(
            self.quote_currency,
            self.base_currency,
            self.numerator,
            self.denominator,
        )

    def multiply(self, other: "Price") -> "Price":
        """
        Композиция курсов: (A→B) * (B→C) = (A→C).

        Raises:
            TokenMismatchError: Если self.quote_currency != other.base_currency
        """
        if not self.quote_currency.equals(other.base_currency):
            raise TokenMismatchError("multiply", self.quote_currency, other.base_currency)

        fraction = self.raw.multiply(other.raw)
        return self.new(
            self.base_currency,
            other.quote_currency,
            fraction.denominator,
            fraction.numerator,
        )

    def quote(self, token_amount: TokenAmount) -> TokenAmount:
        """
        Конвертация суммы base currency в сумму quote currency.

        Результат усекается до целого raw.

        Raises:
            TokenMismatchError: Если token_amount не в base currency
        """
        if not token_amount.token.equals(self.base_currency):
            raise TokenMismatchError("quote", token_amount.token, self.base_currency)

        return token_amount.new(
            self.quote_currency,
            self.raw.multiply(token_amount.raw).quotient,
        )

    # -------------------------------------------------------------------------
    # Сравнения (по raw-курсу)
    # -------------------------------------------------------------------------

    def less_than(self, other: Fractionish) -> bool:
        return self.raw.less_than(other)

    def equal_to(self, other: Fractionish) -> bool:
        return self.raw.equal_to(other)

    def greater_than(self, other: Fractionish) -> bool:
        return self.raw.greater_than(other)

    def compare_to(self, other: Fractionish) -> int:
        return self.raw.compare_to(other)
