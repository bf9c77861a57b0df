"""
Price report schemas.

This module contains Pydantic schemas for price report requests and responses.
"""

from datetime import datetime
from typing import Any, List
from pydantic import Field

from app.schemas.base import BaseSchema, IDSchema
from app.utils.pricing import FuelType


class PriceReportCreate(BaseSchema):
    """
    Schema for reporting a fuel price.

    ``fuel_type`` and ``price`` are passed through unconverted and checked by
    app.utils.pricing.validate_price, which reports every violation.
    """
    station_id: int = Field(..., description="Station the price was seen at")
    fuel_type: Any = Field(None, description="One of the supported fuel types")
    price: Any = Field(None, description="Price in BRL")


class PriceReportResponse(IDSchema):
    """Stored price report."""
    station_id: int
    fuel_type: FuelType
    price: float
    reported_at: datetime


class LatestPriceResponse(BaseSchema):
    """Most recent price for one fuel type."""
    price: float
    reported_at: datetime


class FuelTypeResponse(BaseSchema):
    """Supported fuel type with its accepted price range."""
    fuel_type: FuelType
    min_price: float
    max_price: float


class ValidationErrorResponse(BaseSchema):
    """Body returned when a request breaks domain rules."""
    errors: List[str]
