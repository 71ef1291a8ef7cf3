"""
Fraction — Точная рациональная арифметика

Дробь = пара (numerator, denominator) целых произвольной точности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Дробь никогда не сокращается: числитель и знаменатель хранятся как заданы
2. Сравнения только через перекрёстное умножение (a*d <op> c*b)
3. Нулевой знаменатель допустим при конструировании
4. Immutable: каждая операция возвращает новый экземпляр
5. quotient/remainder используют усечение к нулю (8/3 → 2, -8/3 → -2)

Оператор == структурный (тот же тип, те же числитель и знаменатель).
Равенство по значению: equal_to().
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Final, Protocol, Union, runtime_checkable

from tokenmath.core.contracts import validate_fraction_object
from tokenmath.core.errors import BigintParseError, FractionParseError
from tokenmath.core.math.bigint import BigintIsh, parse_bigintish

# Точность Fraction.from_number по умолчанию (знаков после запятой)
FROM_NUMBER_DEFAULT_DECIMALS: Final[int] = 10


@runtime_checkable
class FractionLike(Protocol):
    """Всё, что имеет целые numerator и denominator (Fraction, Percent, TokenAmount, Price, int)."""

    @property
    def numerator(self) -> int: ...

    @property
    def denominator(self) -> int: ...


Fractionish = Union["Fraction", FractionLike, BigintIsh]


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРИМИТИВЫ
# =============================================================================


def trunc_div(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Оператор // в Python округляет к минус бесконечности, поэтому
    для отрицательных операндов результат корректируется.

    Raises:
        ZeroDivisionError: Если b == 0
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_rem(a: int, b: int) -> int:
    """Остаток от усекающего деления (знак совпадает со знаком a)."""
    return a - b * trunc_div(a, b)


def parse_fraction(value: Fractionish) -> "Fraction":
    """
    Приведение операнда к Fraction.

    Args:
        value: Fraction, любой FractionLike или BigintIsh

    Returns:
        Fraction (тот же экземпляр, если value уже Fraction)

    Raises:
        FractionParseError: Если значение не удалось распарсить
    """
    if isinstance(value, Fraction):
        return value

    try:
        if isinstance(value, FractionLike) and not isinstance(value, bool):
            return Fraction(value.numerator, value.denominator)
        return Fraction(parse_bigintish(value))
    except BigintParseError as e:
        raise FractionParseError(f"Could not parse fraction: {e}") from e


# =============================================================================
# FRACTION
# =============================================================================


@dataclass(frozen=True)
class Fraction:
    """
    Число с целыми числителем и знаменателем.

    Args:
        numerator: Числитель (BigintIsh)
        denominator: Знаменатель (BigintIsh, default 1)

    Examples:
        >>> Fraction(1, 10).add(Fraction(4, 12))
        Fraction(numerator=52, denominator=120)
        >>> Fraction(8, 3).quotient
        2
    """

    numerator: int
    denominator: int = 1

    ZERO: ClassVar["Fraction"]
    ONE: ClassVar["Fraction"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "numerator", parse_bigintish(self.numerator))
        object.__setattr__(self, "denominator", parse_bigintish(self.denominator))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_number(
        cls, number: float, decimals: int = FROM_NUMBER_DEFAULT_DECIMALS
    ) -> "Fraction":
        """
        Парсинг Fraction из float.

        Значение усекается вниз (floor) до заданной точности:
        floor(number * 10^decimals) / 10^decimals.

        Args:
            number: Исходное значение
            decimals: Количество знаков точности (default: 10)

        Returns:
            Fraction со знаменателем 10^decimals

        Raises:
            ValueError: Если number NaN/Inf, decimals < 0 или
                number * 10^decimals не помещается во float

        Examples:
            >>> Fraction.from_number(10.001, 2)
            Fraction(numerator=1000, denominator=100)
        """
        if not math.isfinite(number):
            raise ValueError(f"number must be a valid float (not NaN/Inf), got {number}")
        if decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {decimals}")

        multiplier = 10**decimals
        try:
            scaled = number * multiplier
        except OverflowError as e:
            raise ValueError(f"decimals too large for float scaling, got {decimals}") from e
        if not math.isfinite(scaled):
            raise ValueError(f"number {number} scaled by 10^{decimals} overflows a float")

        return Fraction(math.floor(scaled), multiplier)

    @classmethod
    def from_object(cls, other: Union["Fraction", FractionLike, Mapping[str, Any]]) -> "Fraction":
        """
        Приведение сериализованного представления к Fraction.

        Args:
            other: Fraction (возвращается как есть), FractionLike или
                dict вида {"isFraction": true, "numeratorStr", "denominatorStr"}

        Raises:
            jsonschema.ValidationError: Если dict не соответствует схеме fraction
        """
        if isinstance(other, Fraction):
            return other
        if isinstance(other, Mapping):
            validate_fraction_object(other)
            return Fraction(other["numeratorStr"], other["denominatorStr"])
        return Fraction(other.numerator, other.denominator)

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    @property
    def numerator_str(self) -> str:
        return str(self.numerator)

    @property
    def denominator_str(self) -> str:
        return str(self.denominator)

    def to_json(self) -> dict[str, Any]:
        """JSON-представление дроби."""
        return {
            "isFraction": True,
            "numeratorStr": self.numerator_str,
            "denominatorStr": self.denominator_str,
        }

    # -------------------------------------------------------------------------
    # Деление с остатком
    # -------------------------------------------------------------------------

    @property
    def quotient(self) -> int:
        """Целая часть (усечение к нулю)."""
        return trunc_div(self.numerator, self.denominator)

    @property
    def remainder(self) -> "Fraction":
        """Остаток после целочисленного деления, над тем же знаменателем."""
        return Fraction(trunc_rem(self.numerator, self.denominator), self.denominator)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def invert(self) -> "Fraction":
        """Меняет местами числитель и знаменатель."""
        return Fraction(self.denominator, self.numerator)

    def add(self, other: Fractionish) -> "Fraction":
        parsed = parse_fraction(other)
        if self.denominator == parsed.denominator:
            return Fraction(self.numerator + parsed.numerator, self.denominator)
        return Fraction(
            self.numerator * parsed.denominator + parsed.numerator * self.denominator,
            self.denominator * parsed.denominator,
        )

    def subtract(self, other: Fractionish) -> "Fraction":
        parsed = parse_fraction(other)
        if self.denominator == parsed.denominator:
            return Fraction(self.numerator - parsed.numerator, self.denominator)
        return Fraction(
            self.numerator * parsed.denominator - parsed.numerator * self.denominator,
            self.denominator * parsed.denominator,
        )

    def multiply(self, other: Fractionish) -> "Fraction":
        parsed = parse_fraction(other)
        return Fraction(
            self.numerator * parsed.numerator,
            self.denominator * parsed.denominator,
        )

    def divide(self, other: Fractionish) -> "Fraction":
        """Деление на другую дробь (умножение на обратную)."""
        parsed = parse_fraction(other)
        return Fraction(
            self.numerator * parsed.denominator,
            self.denominator * parsed.numerator,
        )

    # -------------------------------------------------------------------------
    # Сравнения (перекрёстное умножение, без сокращения)
    # -------------------------------------------------------------------------

    def _cross(self, other: Fractionish) -> tuple[int, int]:
        parsed = parse_fraction(other)
        return (
            self.numerator * parsed.denominator,
            parsed.numerator * self.denominator,
        )

    def less_than(self, other: Fractionish) -> bool:
        left, right = self._cross(other)
        return left < right

    def equal_to(self, other: Fractionish) -> bool:
        left, right = self._cross(other)
        return left == right

    def greater_than(self, other: Fractionish) -> bool:
        left, right = self._cross(other)
        return left > right

    def compare_to(self, other: Fractionish) -> int:
        """
        Сравнение с другой дробью.

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other
        """
        if self.equal_to(other):
            return 0
        return 1 if self.greater_than(other) else -1

    # -------------------------------------------------------------------------
    # Утилиты
    # -------------------------------------------------------------------------

    @property
    def as_fraction(self) -> "Fraction":
        """Новая, равная по значению Fraction (никогда не тот же экземпляр)."""
        return Fraction(self.numerator, self.denominator)

    def is_zero(self) -> bool:
        """
        True если числитель равен нулю, а знаменатель нет.

        0/0 не считается нулём.
        """
        return self.numerator == 0 and self.denominator != 0

    def is_non_zero(self) -> bool:
        return not self.is_zero()

    def __add__(self, other: Fractionish) -> "Fraction":
        return self.add(other)

    def __sub__(self, other: Fractionish) -> "Fraction":
        return self.subtract(other)

    def __mul__(self, other: Fractionish) -> "Fraction":
        return self.multiply(other)

    def __truediv__(self, other: Fractionish) -> "Fraction":
        return self.divide(other)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


Fraction.ZERO = Fraction(0)
Fraction.ONE = Fraction(1)
