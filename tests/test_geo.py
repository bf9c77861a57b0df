"""
Tests for great-circle distance and proximity filtering.
"""

import math
from types import SimpleNamespace

import pytest

from app.utils.geo import EARTH_RADIUS_KM, distance_km, distance_m, find_within


def _point(lat, lng, label=None):
    return SimpleNamespace(latitude=lat, longitude=lng, label=label)


def _north_of(lat, lng, meters):
    """Point `meters` due north of (lat, lng)."""
    return lat + math.degrees(meters / (EARTH_RADIUS_KM * 1000.0)), lng


def test_identical_points_are_zero_apart():
    """Coinciding points must not raise a math domain error."""
    for lat, lng in [(-23.5505, -46.6333), (0.0, 0.0), (89.9999, 179.9999), (45.123456789, 7.987654321)]:
        assert distance_km(lat, lng, lat, lng) == 0.0


def test_known_distance_sao_paulo_to_rio():
    """São Paulo (Sé) to Rio de Janeiro (Centro) is roughly 360 km."""
    d = distance_km(-23.5505, -46.6333, -22.9068, -43.1729)
    assert 355 < d < 365


def test_distance_is_symmetric():
    a = (-23.5614, -46.6559)
    b = (-23.5664, -46.6841)
    assert distance_km(*a, *b) == pytest.approx(distance_km(*b, *a))


def test_antipodal_points():
    """Half the circumference for opposite points (clamped at -1)."""
    assert distance_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_distance_m_is_km_times_1000():
    lat, lng = _north_of(-23.5505, -46.6333, 30)
    assert distance_m(-23.5505, -46.6333, lat, lng) == pytest.approx(30.0, abs=0.01)
    assert distance_m(-23.5505, -46.6333, lat, lng) == pytest.approx(
        distance_km(-23.5505, -46.6333, lat, lng) * 1000
    )


def test_find_within_filters_and_sorts():
    origin = (-23.5505, -46.6333)
    far = _point(*_north_of(*origin, 4000), "far")
    near = _point(*_north_of(*origin, 500), "near")
    outside = _point(*_north_of(*origin, 7000), "outside")
    middle = _point(*_north_of(*origin, 2000), "middle")

    matches = find_within(*origin, [far, near, outside, middle], 5)

    assert [m[0].label for m in matches] == ["near", "middle", "far"]
    distances = [m[1] for m in matches]
    assert distances == sorted(distances)
    assert distances[0] == pytest.approx(0.5, abs=1e-3)


def test_find_within_excludes_boundary():
    """A candidate exactly at the radius is not a match."""
    origin = (-23.5505, -46.6333)
    candidate = _point(*_north_of(*origin, 1000))
    radius = distance_km(*origin, candidate.latitude, candidate.longitude)

    assert find_within(*origin, [candidate], radius) == []
    assert len(find_within(*origin, [candidate], radius + 1e-9)) == 1


def test_find_within_includes_exact_location():
    origin = (-23.5505, -46.6333)
    matches = find_within(*origin, [_point(*origin)], 5)

    assert len(matches) == 1
    assert matches[0][1] == 0.0


def test_find_within_keeps_input_order_for_ties():
    origin = (0.0, 0.0)
    first = _point(0.0, 0.01, "east")
    second = _point(0.0, -0.01, "west")

    matches = find_within(*origin, [first, second], 5)
    assert [m[0].label for m in matches] == ["east", "west"]


def test_find_within_non_positive_radius_matches_nothing():
    origin = (-23.5505, -46.6333)
    assert find_within(*origin, [_point(*origin)], 0) == []
    assert find_within(*origin, [_point(*origin)], -1) == []


def test_find_within_large_radius():
    """Continental radii are allowed."""
    origin = (-23.5505, -46.6333)
    manaus = _point(-3.1190, -60.0217)
    assert len(find_within(*origin, [manaus], 5000)) == 1


def test_find_within_custom_coordinates():
    rows = [{"lat": 0.0, "lng": 0.001}]
    matches = find_within(0.0, 0.0, rows, 1, coordinates=lambda r: (r["lat"], r["lng"]))
    assert matches[0][0] is rows[0]


@pytest.mark.parametrize("lat, lng", [(-23.5505, -46.6333), (89.9999, 179.9999), (45.123456789, 7.987654321)])
def test_nearly_identical_points_stay_in_domain(lat, lng):
    """Rounding past +/-1 is clamped instead of raising ValueError."""
    d = distance_km(lat, lng, lat + 1e-13, lng - 1e-13)
    assert 0.0 <= d < 1e-3
