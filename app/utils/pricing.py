"""
Fuel types, price validation and latest-price derivation.

Acceptable price ranges per fuel type (inclusive, in BRL):

    regular_gasoline  4.50 - 8.00
    premium_gasoline  4.80 - 8.50
    ethanol           2.50 - 6.00
    diesel            4.00 - 7.50
"""

import enum
import math
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, TypeVar

R = TypeVar("R")

INVALID_PRICE_MESSAGE = "Price must be a positive number"
INVALID_FUEL_TYPE_MESSAGE = "Invalid fuel type"


class PriceRange(NamedTuple):
    minimum: float
    maximum: float

    def includes(self, price: float) -> bool:
        return self.minimum <= price <= self.maximum


class FuelType(str, enum.Enum):
    """Closed set of fuel types a price can be reported for."""

    REGULAR_GASOLINE = "regular_gasoline"
    PREMIUM_GASOLINE = "premium_gasoline"
    ETHANOL = "ethanol"
    DIESEL = "diesel"

    @property
    def price_range(self) -> PriceRange:
        return PRICE_RANGES[self]

    @classmethod
    def parse(cls, value: Any) -> Optional["FuelType"]:
        """Return the matching member, or None for anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (TypeError, ValueError):
            return None


PRICE_RANGES: Dict[FuelType, PriceRange] = {
    FuelType.REGULAR_GASOLINE: PriceRange(4.50, 8.00),
    FuelType.PREMIUM_GASOLINE: PriceRange(4.80, 8.50),
    FuelType.ETHANOL: PriceRange(2.50, 6.00),
    FuelType.DIESEL: PriceRange(4.00, 7.50),
}


def parse_price(value: Any) -> Optional[float]:
    """
    Coerce a reported price to a positive float.

    Numbers and numeric strings are accepted. Returns None for missing,
    boolean, non-numeric, non-finite, zero or negative values.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(price) or price <= 0:
        return None
    return price


def validate_price(fuel_type: Any, price: Any) -> List[str]:
    """
    Validate a price report.

    All violations are collected, except that an invalid price skips the
    range check.

    Args:
        fuel_type: Raw fuel type value
        price: Raw price value

    Returns:
        List of human-readable violations (empty when valid)
    """
    errors = []
    fuel = FuelType.parse(fuel_type)
    amount = parse_price(price)

    if amount is None:
        errors.append(INVALID_PRICE_MESSAGE)
    elif fuel is not None and not fuel.price_range.includes(amount):
        low, high = fuel.price_range
        errors.append(
            f"Price for {fuel.value} must be between {low:.2f} and {high:.2f}"
        )

    if fuel is None:
        errors.append(INVALID_FUEL_TYPE_MESSAGE)

    return errors


def latest_by_fuel_type(reports: Iterable[R]) -> Dict[FuelType, R]:
    """
    Pick the most recent report for every fuel type.

    Reports are compared by ``reported_at``; on equal timestamps the one
    with the larger ``id`` (inserted later) wins. Fuel types without any
    report are absent from the result.
    """
    latest: Dict[FuelType, R] = {}
    for report in reports:
        current = latest.get(report.fuel_type)
        if current is None or (report.reported_at, report.id) > (current.reported_at, current.id):
            latest[report.fuel_type] = report
    return latest
