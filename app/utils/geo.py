"""
Great-circle distance and proximity search helpers.

Distances use the spherical law of cosines on a sphere of radius 6371 km:

    d = R * acos(cos(phi1) * cos(phi2) * cos(dlambda) + sin(phi1) * sin(phi2))

Floating-point rounding can push the cosine sum slightly outside [-1, 1]
(e.g. for nearly coinciding points), so it is clamped before acos.
"""

import math
from typing import Callable, Iterable, List, Tuple, TypeVar

T = TypeVar("T")

EARTH_RADIUS_KM = 6371.0
DEFAULT_SEARCH_RADIUS_KM = 5.0


def _clamp(value: float, lower: float = -1.0, upper: float = 1.0) -> float:
    return max(lower, min(upper, value))


def distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Calculate the great-circle distance between two points in kilometers.

    Args:
        lat1: Latitude of the first point (degrees)
        lng1: Longitude of the first point (degrees)
        lat2: Latitude of the second point (degrees)
        lng2: Longitude of the second point (degrees)

    Returns:
        Distance in kilometers (0.0 for identical points)
    """
    if lat1 == lat2 and lng1 == lng2:
        return 0.0

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_lambda = math.radians(lng2 - lng1)

    cos_angle = (
        math.cos(phi1) * math.cos(phi2) * math.cos(delta_lambda)
        + math.sin(phi1) * math.sin(phi2)
    )
    return EARTH_RADIUS_KM * math.acos(_clamp(cos_angle))


def distance_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in meters."""
    return distance_km(lat1, lng1, lat2, lng2) * 1000.0


def _coordinates(item) -> Tuple[float, float]:
    return item.latitude, item.longitude


def find_within(
    latitude: float,
    longitude: float,
    candidates: Iterable[T],
    radius_km: float,
    *,
    coordinates: Callable[[T], Tuple[float, float]] = _coordinates,
) -> List[Tuple[T, float]]:
    """
    Linear scan for candidates strictly closer than ``radius_km``.

    A candidate lying exactly on the boundary is excluded. Results are
    ordered nearest-first; equal distances keep their input order.

    Args:
        latitude: Query latitude (degrees)
        longitude: Query longitude (degrees)
        candidates: Objects exposing a location (``latitude``/``longitude``
            attributes by default)
        radius_km: Search radius in kilometers
        coordinates: Extracts ``(lat, lng)`` from a candidate

    Returns:
        List of ``(candidate, distance_km)`` tuples
    """
    matches = []
    for candidate in candidates:
        cand_lat, cand_lng = coordinates(candidate)
        distance = distance_km(latitude, longitude, cand_lat, cand_lng)
        if distance < radius_km:
            matches.append((candidate, distance))

    # list.sort is stable
    matches.sort(key=lambda match: match[1])
    return matches
