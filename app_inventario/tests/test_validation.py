# -*- coding: utf-8 -*-
import math

import pytest

from app_inventario.exceptions import ValidationError
from app_inventario.services.validation import validate_adjustment, validate_create


def test_validate_create_trims_text():
    assert validate_create("  Laptop ", " Dell", 5) == ("Laptop", "Dell", 5)


def test_validate_create_accepts_integral_float():
    name, brand, stock = validate_create("Laptop", "Dell", 5.0)
    assert stock == 5
    assert isinstance(stock, int)


@pytest.mark.parametrize("name, brand", [
    ("", "Dell"),
    ("   ", "Dell"),
    ("Laptop", ""),
    ("Laptop", "\t"),
    (None, "Dell"),
    ("Laptop", 42),
])
def test_validate_create_rejects_blank_text(name, brand):
    with pytest.raises(ValidationError):
        validate_create(name, brand, 1)


@pytest.mark.parametrize("stock", [-1, -0.5, 2.5, "5", None, True, math.nan, math.inf])
def test_validate_create_rejects_bad_stock(stock):
    with pytest.raises(ValidationError):
        validate_create("Laptop", "Dell", stock)


def test_validate_create_allows_zero_stock():
    assert validate_create("Laptop", "Dell", 0)[2] == 0


@pytest.mark.parametrize("delta, expected", [(5, 5), (-3, -3), (0, 0), (-7.0, -7)])
def test_validate_adjustment_accepts_whole_numbers(delta, expected):
    assert validate_adjustment(delta) == expected


@pytest.mark.parametrize("delta", [math.nan, math.inf, -math.inf, "3", None, False, 1.5])
def test_validate_adjustment_rejects_non_finite_or_non_numbers(delta):
    with pytest.raises(ValidationError):
        validate_adjustment(delta)
