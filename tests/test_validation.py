"""
Tests for station field validation.
"""

from app.utils.validation import validate_station_fields


def test_valid_station():
    assert validate_station_fields("Posto Sé", "Praça da Sé, 100", -23.5505, -46.6333) == []


def test_name_and_address_are_trimmed_before_counting():
    errors = validate_station_fields("  ab  ", "   short    ", 0, 0)
    assert errors == [
        "Name must have at least 3 characters",
        "Address must have at least 10 characters",
    ]


def test_missing_fields():
    errors = validate_station_fields(None, None, None, None)
    assert errors == [
        "Name must have at least 3 characters",
        "Address must have at least 10 characters",
        "Latitude is required",
        "Longitude is required",
    ]


def test_coordinate_bounds():
    assert validate_station_fields("Posto", "Rua Augusta, 10", 90, -180) == []
    errors = validate_station_fields("Posto", "Rua Augusta, 10", 90.5, 181)
    assert errors == [
        "Latitude must be between -90 and 90",
        "Longitude must be between -180 and 180",
    ]
