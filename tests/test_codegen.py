"""Tests for the scalar product routines."""

from decimal import Decimal
from fractions import Fraction

import pytest

from rtasks import multiply_vectors, vector_multiply_function


def test_int():
    f = vector_multiply_function(int)
    assert f([1, 2, 3], [4, 5, 6]) == 32
    assert f([1, 2, 3], [4, 5, 6]) == multiply_vectors([1, 2, 3], [4, 5, 6])


def test_default_is_int():
    assert vector_multiply_function()([2], [3]) == 6


def test_float():
    f = vector_multiply_function(float)
    assert f([0.5, 1.5], [2.0, 4.0]) == pytest.approx(7.0)


def test_decimal_keeps_type():
    f = vector_multiply_function(Decimal)
    result = f([Decimal("0.1"), Decimal("0.2")], [Decimal("3"), Decimal("1")])
    assert result == Decimal("0.5")
    assert isinstance(result, Decimal)


def test_fraction():
    f = vector_multiply_function(Fraction)
    assert f([Fraction(1, 3)], [Fraction(3, 4)]) == Fraction(1, 4)


def test_empty_vectors():
    assert vector_multiply_function(float)([], []) == 0.0


def test_length_mismatch():
    with pytest.raises(ValueError):
        vector_multiply_function(int)([1, 2], [1])


def test_function_name():
    assert vector_multiply_function(float).__name__ == "multiply_float"
