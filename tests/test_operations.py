"""Tests for the scalar operations and their two error conditions."""

import math

import pytest

from simplecalc import (
    CalculatorError,
    DivisionByZeroError,
    NegativeRadicandError,
    absolute,
    add,
    divide,
    is_even,
    multiply,
    power,
    sqrt,
    subtract,
)


# --- Add / subtract / multiply ---

@pytest.mark.parametrize("a, b, expected", [
    (2.5, 3.5, 6.0),
    (-2.5, -3.5, -6.0),
    (-2.5, 3.5, 1.0),
    (0, 5.5, 5.5),
    (0, 0, 0),
    (1e10, 1e10, 2e10),
])
def test_add(a, b, expected):
    assert add(a, b) == expected


@pytest.mark.parametrize("a, b, expected", [
    (5.0, 3.0, 2.0),
    (-5.0, -3.0, -2.0),
    (-5.0, 3.0, -8.0),
    (5.0, 0, 5.0),
    (0, 5.0, -5.0),
    (5.0, 5.0, 0),
])
def test_subtract(a, b, expected):
    assert subtract(a, b) == expected


@pytest.mark.parametrize("a, b, expected", [
    (2.5, 4.0, 10.0),
    (-2.5, -4.0, 10.0),
    (-2.5, 4.0, -10.0),
    (5.0, 0, 0),
    (5.0, 1, 5.0),
    (0.5, 0.5, 0.25),
])
def test_multiply(a, b, expected):
    assert multiply(a, b) == expected


# --- Divide ---

@pytest.mark.parametrize("a, b, expected", [
    (10.0, 2.0, 5.0),
    (-10.0, -2.0, 5.0),
    (-10.0, 2.0, -5.0),
    (5.0, 1.0, 5.0),
    (0, 5.0, 0),
    (1.0, 3.0, 0.3333333333333333),
])
def test_divide(a, b, expected):
    assert divide(a, b) == expected


@pytest.mark.parametrize("a", [5.0, 0.0, -3.0])
def test_divide_by_zero(a):
    with pytest.raises(DivisionByZeroError, match="division by zero is not allowed"):
        divide(a, 0)


def test_divide_by_negative_zero():
    with pytest.raises(DivisionByZeroError):
        divide(1.0, -0.0)


def test_division_error_is_also_builtin():
    """Callers that only know ZeroDivisionError still catch it."""
    with pytest.raises(ZeroDivisionError):
        divide(1.0, 0)
    with pytest.raises(CalculatorError):
        divide(1.0, 0)


# --- Power ---

@pytest.mark.parametrize("a, b, expected", [
    (2.0, 3.0, 8.0),
    (-2.0, 2.0, 4.0),
    (-2.0, 3.0, -8.0),
    (5.0, 0, 1.0),
    (5.0, 1.0, 5.0),
    (0, 3.0, 0),
    (4.0, 0.5, 2.0),
])
def test_power(a, b, expected):
    assert power(a, b) == pytest.approx(expected, abs=1e-10)


def test_power_zero_to_zero():
    assert power(0.0, 0.0) == 1.0


def test_power_special_values_do_not_raise():
    assert power(0.0, -1.0) == math.inf
    assert power(-0.0, -3.0) == -math.inf
    assert math.isnan(power(-8.0, 1 / 3))
    assert power(10.0, 400.0) == math.inf
    assert power(-10.0, 401.0) == -math.inf


# --- Sqrt ---

@pytest.mark.parametrize("a, expected", [
    (9.0, 3.0),
    (2.0, math.sqrt(2)),
    (0, 0),
    (0.25, 0.5),
    (100.0, 10.0),
])
def test_sqrt(a, expected):
    assert sqrt(a) == pytest.approx(expected, abs=1e-10)


def test_sqrt_negative():
    with pytest.raises(NegativeRadicandError) as exc:
        sqrt(-4.0)
    assert exc.value.radicand == -4.0
    assert exc.value.message == "square root of negative number is not allowed"
    assert isinstance(exc.value, ValueError)


def test_sqrt_negative_zero_is_allowed():
    assert sqrt(-0.0) == 0.0


# --- IsEven ---

@pytest.mark.parametrize("n, expected", [
    (4, True),
    (3, False),
    (-4, True),
    (-3, False),
    (0, True),
    (1000, True),
    (1001, False),
])
def test_is_even(n, expected):
    assert is_even(n) is expected


# --- Abs ---

@pytest.mark.parametrize("a, expected", [
    (5.5, 5.5),
    (-5.5, 5.5),
    (0, 0),
    (1e10, 1e10),
    (-1e10, 1e10),
])
def test_absolute(a, expected):
    assert absolute(a) == expected


def test_absolute_negative_zero_is_positive():
    result = absolute(-0.0)
    assert result == 0.0
    assert math.copysign(1.0, result) == 1.0
