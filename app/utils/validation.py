"""
Station input validation.

Returns human-readable violations instead of raising so that every problem
with a request can be reported at once.
"""

from typing import Any, List, Optional

NAME_MIN_LENGTH = 3
ADDRESS_MIN_LENGTH = 10


def _trimmed_length(value: Optional[str]) -> int:
    if not isinstance(value, str):
        return 0
    return len(value.strip())


def _check_coordinate(label: str, value: Any, bound: float, errors: List[str]) -> None:
    if value is None:
        errors.append(f"{label} is required")
    elif not -bound <= value <= bound:
        errors.append(f"{label} must be between -{bound:g} and {bound:g}")


def validate_station_fields(
    name: Optional[str],
    address: Optional[str],
    latitude: Optional[float],
    longitude: Optional[float],
) -> List[str]:
    """
    Validate the user-editable fields of a station.

    Args:
        name: Station name (at least 3 characters once trimmed)
        address: Street address (at least 10 characters once trimmed)
        latitude: Latitude in degrees, within [-90, 90]
        longitude: Longitude in degrees, within [-180, 180]

    Returns:
        List of violations (empty when valid)
    """
    errors = []

    if _trimmed_length(name) < NAME_MIN_LENGTH:
        errors.append(f"Name must have at least {NAME_MIN_LENGTH} characters")
    if _trimmed_length(address) < ADDRESS_MIN_LENGTH:
        errors.append(f"Address must have at least {ADDRESS_MIN_LENGTH} characters")

    _check_coordinate("Latitude", latitude, 90, errors)
    _check_coordinate("Longitude", longitude, 180, errors)

    return errors
