"""Tests for weft.tui.layout.fraction.Fraction."""

from __future__ import annotations

import pytest

from weft.tui.layout import Fraction


class TestConstruction:
    def test_reduced_to_lowest_terms(self) -> None:
        f = Fraction(6, 8)
        assert f.numerator == 3
        assert f.denominator == 4

    def test_sign_folded_into_numerator(self) -> None:
        f = Fraction(3, -4)
        assert f.numerator == -3
        assert f.denominator == 4

    def test_negative_over_negative_is_positive(self) -> None:
        assert Fraction(-2, -4) == Fraction(1, 2)

    def test_zero_normalizes_denominator(self) -> None:
        f = Fraction(0, 7)
        assert f.numerator == 0
        assert f.denominator == 1
        assert f.is_zero()

    def test_zero_denominator_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Fraction(1, 0)

    def test_of_integer(self) -> None:
        assert Fraction.of(5) == Fraction(5, 1)

    def test_constants(self) -> None:
        assert Fraction.ZERO.is_zero()
        assert Fraction.ONE == Fraction(1, 1)
        assert Fraction.NEG_ONE == Fraction(-1, 1)


class TestArithmetic:
    def test_thirds_sum_exactly_to_one(self) -> None:
        third = Fraction.of(1, 3)
        assert third.add(third).add(third) == Fraction.of(1, 1)

    def test_subtract(self) -> None:
        assert Fraction(1, 2).subtract(Fraction(1, 3)) == Fraction(1, 6)

    def test_multiply(self) -> None:
        assert Fraction(2, 3).multiply(Fraction(3, 4)) == Fraction(1, 2)

    def test_divide(self) -> None:
        assert Fraction(1, 2).divide(Fraction(1, 4)) == Fraction(2, 1)

    def test_divide_by_zero_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Fraction(1, 2).divide(Fraction.ZERO)

    def test_reciprocal(self) -> None:
        assert Fraction(-2, 3).reciprocal() == Fraction(-3, 2)

    def test_reciprocal_of_zero_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Fraction.ZERO.reciprocal()

    def test_negate_and_abs(self) -> None:
        assert Fraction(1, 3).negate() == Fraction(-1, 3)
        assert Fraction(-1, 3).abs() == Fraction(1, 3)

    def test_operators_accept_ints(self) -> None:
        half = Fraction(1, 2)
        assert half * 100 == Fraction(50)
        assert 100 * half == Fraction(50)
        assert half + 1 == Fraction(3, 2)
        assert 1 - half == half
        assert 1 / half == Fraction(2)

    def test_operator_rejects_float(self) -> None:
        with pytest.raises(TypeError):
            Fraction(1, 2) + 0.5  # type: ignore[operator]

    def test_results_are_new_instances(self) -> None:
        a = Fraction(1, 4)
        a.add(Fraction(1, 4))
        assert a == Fraction(1, 4)


class TestConversion:
    def test_to_int_truncates_toward_zero(self) -> None:
        assert Fraction(7, 2).to_int() == 3
        assert Fraction(-7, 2).to_int() == -3
        assert Fraction(-7, 2).to_long() == -3

    def test_floor_rounds_down(self) -> None:
        assert Fraction(-7, 2).floor() == -4
        assert Fraction(7, 2).floor() == 3

    def test_builtin_conversions(self) -> None:
        assert int(Fraction(9, 4)) == 2
        assert float(Fraction(1, 4)) == 0.25
        assert not Fraction.ZERO
        assert Fraction(1, 9)

    def test_signum(self) -> None:
        assert Fraction(-1, 3).signum() == -1
        assert Fraction.ZERO.signum() == 0
        assert Fraction(2, 3).signum() == 1
        assert Fraction(2, 3).is_positive()
        assert Fraction(-2, 3).is_negative()

    def test_str_and_repr(self) -> None:
        assert str(Fraction(4, 2)) == "2"
        assert str(Fraction(1, 3)) == "1/3"
        assert repr(Fraction(1, 3)) == "Fraction(1, 3)"


class TestOrdering:
    def test_comparisons(self) -> None:
        assert Fraction(1, 3) < Fraction(1, 2)
        assert Fraction(1, 2) >= Fraction(2, 4)
        assert Fraction(3, 2) > 1

    def test_equal_fractions_hash_equal(self) -> None:
        assert hash(Fraction(2, 4)) == hash(Fraction(1, 2))
        assert len({Fraction(2, 4), Fraction(1, 2), Fraction(3, 6)}) == 1
