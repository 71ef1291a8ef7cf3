"""
Decimal Format — Точный рендеринг дробей в десятичные строки

Модуль переводит FractionLike в строку без участия float:
- to_fixed: ровно N знаков после разделителя
- to_significant: первые N значащих цифр (хвостовые нули дробной части отбрасываются)
- Детерминированное округление (Rounding) на целочисленной арифметике
- Группировка целой части (primary/secondary group size) и дробной части
- strip_trailing_zeroes: мягкая пост-обработка строк
- as_number: best-effort конверсия во float (lossy)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакого float в to_fixed/to_significant: результат точен для любой длины
2. Округление применяется ровно один раз, к точному значению n/d
3. Режимы округления симметричны относительно нуля (округляется модуль, знак сохраняется)
4. Отрицательный ноль не рендерится: -0.001 при 2 знаках даёт "0.00"
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final

from tokenmath.core.math.fraction import FractionLike

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ ФОРМАТА
# =============================================================================

DEFAULT_DECIMAL_SEPARATOR: Final[str] = "."

# Разделитель групп для человекочитаемого вывода (format_units и парсинг строк)
DEFAULT_GROUP_SEPARATOR: Final[str] = ","

# Количество знаков, которое to_fixed использует в fallback as_number
AS_NUMBER_FALLBACK_DECIMALS: Final[int] = 10


class Rounding(str, Enum):
    """Политика округления (симметрична относительно нуля)."""

    ROUND_DOWN = "round_down"  # к нулю (усечение)
    ROUND_HALF_UP = "round_half_up"  # к ближайшему, половина от нуля
    ROUND_HALF_EVEN = "round_half_even"  # к ближайшему, половина к чётному
    ROUND_UP = "round_up"  # от нуля


@dataclass(frozen=True)
class NumberFormat:
    """
    Конфигурация рендеринга числа.

    group_size == 0 отключает группировку целой части.
    secondary_group_size задаёт размер всех групп левее первой
    (например, 3 + 2 даёт "12,34,56,789").
    """

    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    group_separator: str = ""
    group_size: int = 0
    secondary_group_size: int = 0
    fraction_group_separator: str = ""
    fraction_group_size: int = 0

    def __post_init__(self) -> None:
        for name in ("group_size", "secondary_group_size", "fraction_group_size"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")


DEFAULT_NUMBER_FORMAT: Final[NumberFormat] = NumberFormat()


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_div(numerator: int, denominator: int, rounding: Rounding) -> int:
    """
    Точное деление numerator / denominator с округлением до целого.

    Args:
        numerator: Числитель
        denominator: Знаменатель (не ноль)
        rounding: Политика округления

    Returns:
        Округлённое частное

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> round_div(5, 2, Rounding.ROUND_HALF_UP)
        3
        >>> round_div(5, 2, Rounding.ROUND_HALF_EVEN)
        2
        >>> round_div(-7, 2, Rounding.ROUND_DOWN)
        -3
    """
    if denominator == 0:
        raise ZeroDivisionError("Division by zero")
    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    negative = numerator < 0
    q, r = divmod(abs(numerator), denominator)

    if r:
        if rounding == Rounding.ROUND_UP:
            q += 1
        elif rounding == Rounding.ROUND_HALF_UP:
            if 2 * r >= denominator:
                q += 1
        elif rounding == Rounding.ROUND_HALF_EVEN:
            if 2 * r > denominator or (2 * r == denominator and q % 2 == 1):
                q += 1

    return -q if negative else q


# =============================================================================
# ГРУППИРОВКА
# =============================================================================


def _group_integer(digits: str, fmt: NumberFormat) -> str:
    g1 = fmt.group_size
    g2 = fmt.secondary_group_size
    length = len(digits)

    if g2:
        g1, g2 = g2, g1
        length -= g2

    if g1 <= 0 or length <= 0:
        return digits

    i = length % g1 or g1
    grouped = digits[:i]
    while i < length:
        grouped += fmt.group_separator + digits[i : i + g1]
        i += g1
    if g2 > 0:
        grouped += fmt.group_separator + digits[i:]
    return grouped


def _group_fraction(digits: str, fmt: NumberFormat) -> str:
    size = fmt.fraction_group_size
    if size <= 0:
        return digits
    chunks = [digits[i : i + size] for i in range(0, len(digits), size)]
    return fmt.fraction_group_separator.join(chunks)


def _render(negative: bool, int_digits: str, frac_digits: str, fmt: NumberFormat) -> str:
    text = _group_integer(int_digits, fmt)
    if frac_digits:
        text += fmt.decimal_separator + _group_fraction(frac_digits, fmt)
    return f"-{text}" if negative else text


def _split_scaled(scaled: int, decimal_places: int) -> tuple[str, str]:
    digits = str(abs(scaled)).rjust(decimal_places + 1, "0")
    if decimal_places == 0:
        return digits, ""
    return digits[:-decimal_places], digits[-decimal_places:]


# =============================================================================
# TO FIXED / TO SIGNIFICANT
# =============================================================================


def to_fixed(
    fraction: FractionLike,
    decimal_places: int,
    fmt: NumberFormat | None = None,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
) -> str:
    """
    Рендеринг дроби ровно с decimal_places знаками после разделителя.

    Args:
        fraction: Дробь (любой FractionLike)
        decimal_places: Количество знаков после разделителя (>= 0)
        fmt: Формат (default: без группировки, разделитель ".")
        rounding: Политика округления (default: ROUND_HALF_UP)

    Returns:
        Строковое представление

    Raises:
        ValueError: Если decimal_places не целое неотрицательное
        ZeroDivisionError: Если знаменатель равен нулю

    Examples:
        >>> to_fixed(Fraction(23_000_123, 1_000), 5)
        '23000.12300'
    """
    if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
        raise ValueError(f"{decimal_places!r} is not an integer.")
    if decimal_places < 0:
        raise ValueError(f"{decimal_places} is negative.")

    fmt = fmt or DEFAULT_NUMBER_FORMAT
    scaled = round_div(
        fraction.numerator * 10**decimal_places, fraction.denominator, rounding
    )
    int_digits, frac_digits = _split_scaled(scaled, decimal_places)
    return _render(scaled < 0, int_digits, frac_digits, fmt)


def _decimal_exponent(numerator: int, denominator: int) -> int:
    """floor(log10(numerator / denominator)) для положительных аргументов."""
    exponent = len(str(numerator)) - len(str(denominator))
    if exponent >= 0:
        below = numerator < denominator * 10**exponent
    else:
        below = numerator * 10**-exponent < denominator
    return exponent - 1 if below else exponent


def to_significant(
    fraction: FractionLike,
    significant_digits: int,
    fmt: NumberFormat | None = None,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
) -> str:
    """
    Рендеринг первых significant_digits значащих цифр дроби.

    Ведущие нули до первой значащей цифры не расходуют бюджет цифр.
    Хвостовые нули дробной части отбрасываются, отброшенные цифры целой
    части заменяются нулями.

    Args:
        fraction: Дробь (любой FractionLike)
        significant_digits: Количество значащих цифр (> 0)
        fmt: Формат (default: без группировки, разделитель ".")
        rounding: Политика округления (default: ROUND_HALF_UP)

    Raises:
        ValueError: Если significant_digits не целое положительное
        ZeroDivisionError: Если знаменатель равен нулю

    Examples:
        >>> to_significant(Fraction(23_000_123, 1_000), 6)
        '23000.1'
        >>> to_significant(Fraction(123_456_789), 6)
        '123457000'
    """
    if isinstance(significant_digits, bool) or not isinstance(significant_digits, int):
        raise ValueError(f"{significant_digits!r} is not an integer.")
    if significant_digits <= 0:
        raise ValueError(f"{significant_digits} is not positive.")

    fmt = fmt or DEFAULT_NUMBER_FORMAT
    numerator, denominator = fraction.numerator, fraction.denominator
    if denominator == 0:
        raise ZeroDivisionError("Division by zero")
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    if numerator == 0:
        return _render(False, "0", "", fmt)

    negative = numerator < 0
    magnitude = abs(numerator)
    decimal_places = significant_digits - 1 - _decimal_exponent(magnitude, denominator)

    if decimal_places >= 0:
        scaled = round_div(magnitude * 10**decimal_places, denominator, rounding)
        int_digits, frac_digits = _split_scaled(scaled, decimal_places)
        frac_digits = frac_digits.rstrip("0")
    else:
        scaled = round_div(magnitude, denominator * 10**-decimal_places, rounding)
        int_digits, frac_digits = str(scaled) + "0" * -decimal_places, ""

    return _render(negative, int_digits, frac_digits, fmt)


# =============================================================================
# ПОСТ-ОБРАБОТКА И КОНВЕРСИЯ
# =============================================================================


def strip_trailing_zeroes(num: str, decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR) -> str:
    """
    Удаление хвостовых нулей после десятичного разделителя.

    Некорректный вход (несколько разделителей, пустая целая часть)
    возвращается без изменений.

    Examples:
        >>> strip_trailing_zeroes("1.2300")
        '1.23'
        >>> strip_trailing_zeroes("5.000")
        '5'
    """
    head, *rest = num.split(decimal_separator)
    if len(rest) > 1 or not head:
        logger.warning("Invalid number passed to strip_trailing_zeroes: %r", num)
        return num
    if not rest or not rest[0]:
        return num

    tail = rest[0].rstrip("0")
    return f"{head}{decimal_separator}{tail}" if tail else head


def as_number(fraction: FractionLike) -> float:
    """
    Значение дроби как float (lossy).

    Returns:
        - +inf / -inf при нулевом знаменателе и положительном/отрицательном числителе
        - nan для 0/0
        - numerator / denominator, либо float(to_fixed(fraction, 10)),
          если прямое деление переполняет float
    """
    numerator, denominator = fraction.numerator, fraction.denominator
    if denominator == 0:
        if numerator > 0:
            return float("inf")
        if numerator < 0:
            return float("-inf")
        return float("nan")

    try:
        return numerator / denominator
    except OverflowError:
        logger.debug(
            "as_number overflow for %s/%s, falling back to to_fixed", numerator, denominator
        )
        return float(to_fixed(fraction, AS_NUMBER_FALLBACK_DECIMALS))
