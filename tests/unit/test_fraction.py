"""
Юнит-тесты для движка Fraction

Проверяет:
1. quotient / remainder с усечением к нулю
2. Арифметику без сокращения дробей
3. Сравнения через перекрёстное умножение
4. as_fraction, is_zero, from_number
5. Парсинг операндов и цепочку ошибок
6. Сериализацию (to_json / from_object)
"""

import pytest
from jsonschema import ValidationError

from tokenmath.core.errors import FractionParseError
from tokenmath.core.math.fraction import Fraction, parse_fraction, trunc_div, trunc_rem


class TestQuotientRemainder:
    """Тесты целочисленного деления"""

    def test_quotient_floor_division(self) -> None:
        assert Fraction(8, 3).quotient == 2  # one below
        assert Fraction(12, 4).quotient == 3  # exact
        assert Fraction(16, 5).quotient == 3  # one above

    def test_quotient_truncates_toward_zero(self) -> None:
        """Отрицательные значения усекаются к нулю, а не к -inf"""
        assert Fraction(-8, 3).quotient == -2
        assert Fraction(8, -3).quotient == -2
        assert Fraction(-8, -3).quotient == 2

    def test_remainder(self) -> None:
        assert Fraction(8, 3).remainder == Fraction(2, 3)
        assert Fraction(12, 4).remainder == Fraction(0, 4)
        assert Fraction(16, 5).remainder == Fraction(1, 5)

    def test_remainder_sign_follows_numerator(self) -> None:
        assert Fraction(-8, 3).remainder == Fraction(-2, 3)

    def test_quotient_zero_denominator(self) -> None:
        with pytest.raises(ZeroDivisionError):
            _ = Fraction(1, 0).quotient

    def test_trunc_helpers(self) -> None:
        assert trunc_div(-7, 2) == -3
        assert trunc_rem(-7, 2) == -1
        assert trunc_div(7, 2) == 3
        assert trunc_rem(7, -2) == 1


class TestArithmetic:
    """Тесты арифметики"""

    def test_invert(self) -> None:
        inverted = Fraction(5, 10).invert()
        assert inverted.numerator == 10
        assert inverted.denominator == 5

    def test_invert_twice_is_value_equal(self) -> None:
        f = Fraction(3, 7)
        assert f.invert().invert().equal_to(f)

    def test_add_cross_multiplies(self) -> None:
        assert Fraction(1, 10).add(Fraction(4, 12)) == Fraction(52, 120)

    def test_add_same_denominator(self) -> None:
        assert Fraction(1, 5).add(Fraction(2, 5)) == Fraction(3, 5)

    def test_add_matches_cross_formula(self) -> None:
        """(a/b) + (c/d) == (a*d + c*b) / (b*d)"""
        for a, b, c, d in [(1, 2, 1, 3), (-5, 7, 3, 11), (10**30, 3, 1, 10**20)]:
            result = Fraction(a, b).add(Fraction(c, d))
            assert result.equal_to(Fraction(a * d + c * b, b * d))

    def test_subtract(self) -> None:
        assert Fraction(1, 10).subtract(Fraction(4, 12)) == Fraction(-28, 120)
        assert Fraction(3, 5).subtract(Fraction(2, 5)) == Fraction(1, 5)

    def test_multiply(self) -> None:
        assert Fraction(1, 10).multiply(Fraction(4, 12)) == Fraction(4, 120)
        assert Fraction(1, 3).multiply(Fraction(4, 12)) == Fraction(4, 36)
        assert Fraction(5, 12).multiply(Fraction(4, 12)) == Fraction(20, 144)

    def test_divide(self) -> None:
        assert Fraction(1, 10).divide(Fraction(4, 12)) == Fraction(12, 40)
        assert Fraction(1, 3).divide(Fraction(4, 12)) == Fraction(12, 12)
        assert Fraction(5, 12).divide(Fraction(4, 12)) == Fraction(60, 48)

    def test_operands_accept_bigintish(self) -> None:
        assert Fraction(1, 2).add(1) == Fraction(3, 2)
        assert Fraction(1, 2).multiply("4") == Fraction(4, 2)

    def test_operators_delegate(self) -> None:
        a, b = Fraction(1, 2), Fraction(1, 3)
        assert a + b == a.add(b)
        assert a - b == a.subtract(b)
        assert a * b == a.multiply(b)
        assert a / b == a.divide(b)

    def test_immutable(self) -> None:
        f = Fraction(1, 2)
        with pytest.raises(AttributeError):
            f.numerator = 5  # type: ignore[misc]

    def test_no_reduction(self) -> None:
        f = Fraction(50, 100)
        assert f.numerator == 50
        assert f.denominator == 100
        assert f != Fraction(1, 2)
        assert f.equal_to(Fraction(1, 2))


class TestComparisons:
    """Тесты сравнений"""

    def test_less_than(self) -> None:
        assert Fraction(1, 10).less_than(Fraction(4, 12)) is True
        assert Fraction(1, 3).less_than(Fraction(4, 12)) is False
        assert Fraction(5, 12).less_than(Fraction(4, 12)) is False

    def test_equal_to(self) -> None:
        assert Fraction(1, 10).equal_to(Fraction(4, 12)) is False
        assert Fraction(1, 3).equal_to(Fraction(4, 12)) is True
        assert Fraction(5, 12).equal_to(Fraction(4, 12)) is False

    def test_greater_than(self) -> None:
        assert Fraction(1, 10).greater_than(Fraction(4, 12)) is False
        assert Fraction(1, 3).greater_than(Fraction(4, 12)) is False
        assert Fraction(5, 12).greater_than(Fraction(4, 12)) is True

    def test_exactly_one_relation_holds(self) -> None:
        values = [Fraction(1, 10), Fraction(4, 12), Fraction(1, 3), Fraction(-2, 5), Fraction(0)]
        for a in values:
            for b in values:
                relations = [a.less_than(b), a.equal_to(b), a.greater_than(b)]
                assert relations.count(True) == 1

    def test_compare_to(self) -> None:
        assert Fraction(1, 3).compare_to(Fraction(2, 6)) == 0
        assert Fraction(1, 2).compare_to(Fraction(1, 3)) == 1
        assert Fraction(1, 3).compare_to(Fraction(1, 2)) == -1

    def test_large_magnitudes(self) -> None:
        big = 10**60
        assert Fraction(big + 1, big).greater_than(Fraction(1))
        assert Fraction(big - 1, big).less_than(Fraction(1))


class TestUtilities:
    """Тесты вспомогательных методов"""

    def test_as_fraction_distinct_instance(self) -> None:
        f = Fraction(1, 2)
        assert f.as_fraction == f
        assert f.as_fraction is not f

    def test_is_zero(self) -> None:
        assert Fraction(0, 5).is_zero() is True
        assert Fraction(1, 5).is_zero() is False

    def test_zero_over_zero_is_not_zero(self) -> None:
        """0/0 не считается нулём, а is_non_zero — его отрицание"""
        assert Fraction(0, 0).is_zero() is False
        assert Fraction(0, 0).is_non_zero() is True

    def test_zero_denominator_allowed(self) -> None:
        f = Fraction(1, 0)
        assert f.denominator == 0

    def test_constants(self) -> None:
        assert Fraction.ZERO == Fraction(0, 1)
        assert Fraction.ONE == Fraction(1, 1)

    def test_str(self) -> None:
        assert str(Fraction(3, 4)) == "3/4"


class TestFromNumber:
    """Тесты Fraction.from_number"""

    def test_default_precision(self) -> None:
        assert Fraction.from_number(10.0) == Fraction(10_0000000000, 1_0000000000)

    def test_truncates_at_precision(self) -> None:
        """10.001 при 2 знаках даёт 10.00 (floor, а не округление)"""
        assert Fraction.from_number(10.001, 2) == Fraction(10_00, 1_00)

    def test_negative_floors(self) -> None:
        assert Fraction.from_number(-1.005, 2) == Fraction(-101, 100)

    def test_rejects_nan(self) -> None:
        with pytest.raises(ValueError):
            Fraction.from_number(float("nan"))

    def test_rejects_negative_decimals(self) -> None:
        with pytest.raises(ValueError):
            Fraction.from_number(1.0, -1)

    def test_rejects_decimals_beyond_float_range(self) -> None:
        """10^decimals, не помещающийся во float, даёт ValueError, а не OverflowError"""
        with pytest.raises(ValueError, match="decimals too large"):
            Fraction.from_number(1.0, 400)

    def test_rejects_scaled_overflow(self) -> None:
        with pytest.raises(ValueError, match="overflows a float"):
            Fraction.from_number(1e300, 10)


class TestParseFraction:
    """Тесты парсинга операндов"""

    def test_same_instance_returned(self) -> None:
        f = Fraction(1, 2)
        assert parse_fraction(f) is f

    def test_fraction_like_object(self) -> None:
        class Ratio:
            numerator = 3
            denominator = 4

        assert parse_fraction(Ratio()) == Fraction(3, 4)

    def test_string(self) -> None:
        assert parse_fraction("12") == Fraction(12)

    def test_chained_error(self) -> None:
        """Ошибка парсинга оборачивается с исходным сообщением"""
        with pytest.raises(FractionParseError, match="Could not parse fraction") as exc_info:
            Fraction(1, 2).add("not a number")
        assert exc_info.value.__cause__ is not None
        assert "not a number" in str(exc_info.value)


class TestSerialization:
    """Тесты сериализации"""

    def test_to_json(self) -> None:
        assert Fraction(3, 7).to_json() == {
            "isFraction": True,
            "numeratorStr": "3",
            "denominatorStr": "7",
        }

    def test_denominator_str_reads_denominator(self) -> None:
        """
        denominator_str возвращает знаменатель.

        Исторически геттер возвращал числитель; поведение исправлено
        сознательно и этот тест фиксирует исправление.
        """
        f = Fraction(3, 7)
        assert f.numerator_str == "3"
        assert f.denominator_str == "7"

    def test_round_trip(self) -> None:
        f = Fraction(-10**40, 3)
        restored = Fraction.from_object(f.to_json())
        assert restored == f
        assert restored.to_json() == f.to_json()

    def test_from_object_returns_fraction_as_is(self) -> None:
        f = Fraction(1, 2)
        assert Fraction.from_object(f) is f

    def test_from_object_invalid_shape(self) -> None:
        with pytest.raises(ValidationError):
            Fraction.from_object({"isFraction": True, "numeratorStr": "1.5", "denominatorStr": "2"})
        with pytest.raises(ValidationError):
            Fraction.from_object({"numeratorStr": "1", "denominatorStr": "2"})
