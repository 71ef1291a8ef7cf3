"""
Percent — Доля, где 1/1 = 100%

Percent хранит ту же пару (numerator, denominator), что и Fraction, но является
отдельным типом: вся арифметика выполняется движком Fraction, а результат
заворачивается обратно в Percent. Percent(1, 100) == 1%, Percent(1) == 100%.

Рендеринг (percent_to_fixed / percent_to_significant) умножает значение на 100:
Percent(154, 10000) рендерится как "1.54".
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Final, Union

from tokenmath.core.contracts import validate_fraction_object, validate_percent_object
from tokenmath.core.math.bigint import BigintIsh, parse_bigintish
from tokenmath.core.math.decimal_format import (
    NumberFormat,
    Rounding,
    to_fixed,
    to_significant,
)
from tokenmath.core.math.fraction import (
    FROM_NUMBER_DEFAULT_DECIMALS,
    Fraction,
    FractionLike,
    Fractionish,
)

# Знаменатель basis points (1 bps = 1/10000)
BPS_DENOMINATOR: Final[int] = 10_000

_ONE_HUNDRED_FRACTION: Final[Fraction] = Fraction(100)


@dataclass(frozen=True)
class Percent:
    """
    Процент как неприводимая пара (numerator, denominator).

    Examples:
        >>> Percent(1, 100).add(Percent(2, 100))
        Percent(numerator=3, denominator=100)
        >>> Percent.from_bps(25)
        Percent(numerator=25, denominator=10000)
    """

    numerator: int
    denominator: int = 1

    ZERO: ClassVar["Percent"]
    ONE: ClassVar["Percent"]
    ONE_HUNDRED: ClassVar["Percent"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "numerator", parse_bigintish(self.numerator))
        object.__setattr__(self, "denominator", parse_bigintish(self.denominator))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_fraction(cls, fraction: FractionLike) -> "Percent":
        return Percent(fraction.numerator, fraction.denominator)

    @classmethod
    def from_bps(cls, bps: BigintIsh) -> "Percent":
        """Percent из basis points: bps / 10000."""
        return Percent(bps, BPS_DENOMINATOR)

    @classmethod
    def from_number(
        cls, number: float, decimals: int = FROM_NUMBER_DEFAULT_DECIMALS
    ) -> "Percent":
        """
        Парсинг Percent из float (100% == 1.0), с усечением вниз.

        См. Fraction.from_number.
        """
        return cls.from_fraction(Fraction.from_number(number, decimals))

    @classmethod
    def from_object(cls, other: Union["Percent", FractionLike, Mapping[str, Any]]) -> "Percent":
        """
        Приведение сериализованного представления к Percent.

        Dict с isPercent проверяется по схеме percent, иначе по схеме fraction.

        Raises:
            jsonschema.ValidationError: Если dict не соответствует схеме
        """
        if isinstance(other, Percent):
            return other
        if isinstance(other, Mapping):
            if other.get("isPercent") is not None:
                validate_percent_object(other)
            else:
                validate_fraction_object(other)
            return Percent(other["numeratorStr"], other["denominatorStr"])
        return cls.from_fraction(other)

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    @property
    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    @property
    def numerator_str(self) -> str:
        return str(self.numerator)

    @property
    def denominator_str(self) -> str:
        return str(self.denominator)

    def to_json(self) -> dict[str, Any]:
        """JSON-представление процента."""
        return {**self.as_fraction.to_json(), "isPercent": True}

    # -------------------------------------------------------------------------
    # Арифметика (движок Fraction + обратное заворачивание)
    # -------------------------------------------------------------------------

    def add(self, other: Fractionish) -> "Percent":
        return Percent.from_fraction(self.as_fraction.add(other))

    def subtract(self, other: Fractionish) -> "Percent":
        return Percent.from_fraction(self.as_fraction.subtract(other))

    def multiply(self, other: Fractionish) -> "Percent":
        return Percent.from_fraction(self.as_fraction.multiply(other))

    def divide(self, other: Fractionish) -> "Percent":
        return Percent.from_fraction(self.as_fraction.divide(other))

    def invert(self) -> "Percent":
        return Percent(self.denominator, self.numerator)

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def less_than(self, other: Fractionish) -> bool:
        return self.as_fraction.less_than(other)

    def equal_to(self, other: Fractionish) -> bool:
        return self.as_fraction.equal_to(other)

    def greater_than(self, other: Fractionish) -> bool:
        return self.as_fraction.greater_than(other)

    def compare_to(self, other: Fractionish) -> int:
        return self.as_fraction.compare_to(other)

    def is_zero(self) -> bool:
        return self.as_fraction.is_zero()

    def is_non_zero(self) -> bool:
        return not self.is_zero()

    def __add__(self, other: Fractionish) -> "Percent":
        return self.add(other)

    def __sub__(self, other: Fractionish) -> "Percent":
        return self.subtract(other)

    def __mul__(self, other: Fractionish) -> "Percent":
        return self.multiply(other)

    def __truediv__(self, other: Fractionish) -> "Percent":
        return self.divide(other)


Percent.ZERO = Percent(0)
Percent.ONE = Percent(1, 100)
Percent.ONE_HUNDRED = Percent(1)


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def percent_to_significant(
    percent: Percent,
    significant_digits: int = 5,
    fmt: NumberFormat | None = None,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
) -> str:
    """Значащие цифры процента, масштабированного на 100."""
    return to_significant(
        percent.as_fraction.multiply(_ONE_HUNDRED_FRACTION),
        significant_digits,
        fmt,
        rounding,
    )


def percent_to_fixed(
    percent: Percent,
    decimal_places: int = 2,
    fmt: NumberFormat | None = None,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
) -> str:
    """
    Фиксированное количество знаков процента, масштабированного на 100.

    Examples:
        >>> percent_to_fixed(Percent(154, 10_000), 2)
        '1.54'
    """
    return to_fixed(
        percent.as_fraction.multiply(_ONE_HUNDRED_FRACTION),
        decimal_places,
        fmt,
        rounding,
    )
