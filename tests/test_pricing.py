"""
Tests for price validation and latest-price derivation.
"""

from datetime import datetime
from types import SimpleNamespace

import pytest

from app.utils.pricing import (
    FuelType,
    INVALID_FUEL_TYPE_MESSAGE,
    INVALID_PRICE_MESSAGE,
    PRICE_RANGES,
    latest_by_fuel_type,
    parse_price,
    validate_price,
)


def test_every_fuel_type_has_a_range():
    assert set(PRICE_RANGES) == set(FuelType)
    assert FuelType.DIESEL.price_range == (4.00, 7.50)
    assert FuelType.ETHANOL.price_range.minimum == 2.50


def test_fuel_type_parse():
    assert FuelType.parse("diesel") is FuelType.DIESEL
    assert FuelType.parse(FuelType.ETHANOL) is FuelType.ETHANOL
    assert FuelType.parse("kerosene") is None
    assert FuelType.parse(None) is None
    assert FuelType.parse(["diesel"]) is None


@pytest.mark.parametrize("fuel_type", list(FuelType))
def test_bounds_are_inclusive(fuel_type):
    low, high = fuel_type.price_range
    assert validate_price(fuel_type.value, low) == []
    assert validate_price(fuel_type.value, high) == []


def test_diesel_below_range_is_rejected():
    errors = validate_price("diesel", 3.00)
    assert errors == ["Price for diesel must be between 4.00 and 7.50"]


def test_diesel_within_range_is_accepted():
    assert validate_price("diesel", 5.50) == []


def test_range_message_uses_two_decimals():
    errors = validate_price("regular_gasoline", 9)
    assert errors == ["Price for regular_gasoline must be between 4.50 and 8.00"]


@pytest.mark.parametrize("price", [None, 0, -1, "abc", "", True, float("nan"), float("inf")])
def test_invalid_price_skips_range_check(price):
    assert validate_price("diesel", price) == [INVALID_PRICE_MESSAGE]


def test_invalid_fuel_type():
    assert validate_price("kerosene", 5.0) == [INVALID_FUEL_TYPE_MESSAGE]


def test_all_violations_are_collected():
    assert validate_price("kerosene", -2) == [INVALID_PRICE_MESSAGE, INVALID_FUEL_TYPE_MESSAGE]


def test_numeric_strings_are_accepted():
    assert parse_price("5.49") == 5.49
    assert validate_price("ethanol", "3.10") == []


def _report(id, fuel_type, price, minute):
    return SimpleNamespace(
        id=id,
        fuel_type=fuel_type,
        price=price,
        reported_at=datetime(2026, 10, 19, 10, minute),
    )


def test_latest_by_fuel_type_picks_most_recent():
    reports = [
        _report(1, FuelType.ETHANOL, 3.00, 0),
        _report(2, FuelType.ETHANOL, 3.10, 5),
        _report(3, FuelType.DIESEL, 5.00, 2),
    ]

    latest = latest_by_fuel_type(reports)

    assert set(latest) == {FuelType.ETHANOL, FuelType.DIESEL}
    assert latest[FuelType.ETHANOL].price == 3.10
    assert latest[FuelType.ETHANOL].reported_at.minute == 5
    assert latest[FuelType.DIESEL].price == 5.00


def test_latest_by_fuel_type_ignores_input_order():
    reports = [
        _report(2, FuelType.ETHANOL, 3.10, 5),
        _report(1, FuelType.ETHANOL, 3.00, 0),
    ]
    assert latest_by_fuel_type(reports)[FuelType.ETHANOL].price == 3.10


def test_latest_by_fuel_type_tie_goes_to_later_insert():
    reports = [
        _report(7, FuelType.DIESEL, 5.20, 1),
        _report(4, FuelType.DIESEL, 5.10, 1),
    ]
    assert latest_by_fuel_type(reports)[FuelType.DIESEL].id == 7


def test_latest_by_fuel_type_empty():
    assert latest_by_fuel_type([]) == {}
