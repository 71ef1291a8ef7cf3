"""
Decimal multiplier cache

make_decimal_multiplier(decimals) = 10^decimals.

Кэш — единственное разделяемое состояние процесса: append-only dict,
заполняемый лениво. Записи чистые и идемпотентны, повторное вычисление
при гонке даёт то же значение.
"""

import logging

logger = logging.getLogger(__name__)

_DECIMAL_MULTIPLIERS: dict[int, int] = {}


def make_decimal_multiplier(decimals: int) -> int:
    """
    Множитель для заданного количества знаков.

    Args:
        decimals: Количество знаков (>= 0)

    Returns:
        10 ** decimals

    Raises:
        ValueError: Если decimals не целое неотрицательное

    Examples:
        >>> make_decimal_multiplier(6)
        1000000
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValueError(f"decimals must be an integer, got {decimals!r}")
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    cached = _DECIMAL_MULTIPLIERS.get(decimals)
    if cached is not None:
        return cached

    logger.debug("Caching decimal multiplier for %d decimals", decimals)
    return _DECIMAL_MULTIPLIERS.setdefault(decimals, 10**decimals)
