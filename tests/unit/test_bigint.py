"""
Юнит-тесты для адаптера целых произвольной точности

Проверяет:
1. Приведение int / str / float / Decimal / __index__
2. Структурное распознавание legacy BN-объектов
3. Ошибки парсинга с описательным сообщением
"""

from decimal import Decimal

import pytest

from tokenmath.core.errors import BigintParseError
from tokenmath.core.math.bigint import BN_WORD_SIZE, is_bn, parse_bigintish


class LegacyBN:
    """BN-подобный объект: wordSize на уровне класса и список words."""

    wordSize = BN_WORD_SIZE

    def __init__(self, value: int):
        self._value = value
        self.words = [value & 0x3FFFFFF]

    def __str__(self) -> str:
        return str(self._value)


class NotBN:
    wordSize = 32

    def __init__(self):
        self.words = [1]

    def __str__(self) -> str:
        return "not-a-number"


class Indexable:
    def __index__(self) -> int:
        return 42


class TestParseBigintish:
    """Тесты parse_bigintish"""

    def test_int_passthrough(self) -> None:
        """int возвращается без изменений"""
        big = 10**80 + 7
        assert parse_bigintish(big) == big
        assert parse_bigintish(-5) == -5

    def test_decimal_string(self) -> None:
        """Десятичные строки, включая знак и пробелы"""
        assert parse_bigintish("1000") == 1000
        assert parse_bigintish("-42") == -42
        assert parse_bigintish("  17 ") == 17
        assert parse_bigintish("1_000_000") == 1_000_000

    def test_hex_string(self) -> None:
        """0x-строки парсятся как шестнадцатеричные"""
        assert parse_bigintish("0xff") == 255
        assert parse_bigintish("0xffffffffffffffff") == 2**64 - 1
        assert parse_bigintish("-0x10") == -16

    def test_integral_float(self) -> None:
        """Целочисленный float допустим"""
        assert parse_bigintish(10.0) == 10
        assert parse_bigintish(1e20) == 10**20

    def test_fractional_float_rejected(self) -> None:
        """Float с дробной частью отклоняется"""
        with pytest.raises(BigintParseError, match="not an integer"):
            parse_bigintish(1.5)

    def test_non_finite_float_rejected(self) -> None:
        with pytest.raises(BigintParseError):
            parse_bigintish(float("nan"))
        with pytest.raises(BigintParseError):
            parse_bigintish(float("inf"))

    def test_decimal(self) -> None:
        assert parse_bigintish(Decimal("12")) == 12
        with pytest.raises(BigintParseError):
            parse_bigintish(Decimal("12.5"))

    def test_index_protocol(self) -> None:
        assert parse_bigintish(Indexable()) == 42

    def test_legacy_bn(self) -> None:
        """BN-объект парсится через строковое представление"""
        assert parse_bigintish(LegacyBN(123456789)) == 123456789

    def test_unparsable_string(self) -> None:
        """Мусорная строка даёт BigintParseError с исходным значением"""
        with pytest.raises(BigintParseError, match="abc"):
            parse_bigintish("abc")

    def test_empty_string(self) -> None:
        with pytest.raises(BigintParseError):
            parse_bigintish("")

    def test_bool_rejected(self) -> None:
        with pytest.raises(BigintParseError):
            parse_bigintish(True)

    def test_none_rejected(self) -> None:
        with pytest.raises(BigintParseError):
            parse_bigintish(None)  # type: ignore[arg-type]

    def test_unknown_shape_falls_through_to_parser(self) -> None:
        """Неизвестная форма уходит в канонический парсер и падает там"""
        with pytest.raises(BigintParseError):
            parse_bigintish(NotBN())  # type: ignore[arg-type]

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_bigintish("1.2.3")


class TestIsBN:
    """Тесты структурного распознавания BN"""

    def test_recognizes_bn(self) -> None:
        assert is_bn(LegacyBN(1)) is True

    def test_wrong_word_size(self) -> None:
        assert is_bn(NotBN()) is False

    def test_words_must_be_list(self) -> None:
        bn = LegacyBN(1)
        bn.words = (1,)  # type: ignore[assignment]
        assert is_bn(bn) is False

    def test_none_and_primitives(self) -> None:
        assert is_bn(None) is False
        assert is_bn(5) is False
        assert is_bn("5") is False
