# Pydantic schemas package

from app.schemas.base import BaseSchema, TimestampSchema, IDSchema
from app.schemas.station import (
    StationCreate, StationUpdate,
    StationResponse, NearbyStationResponse,
)
from app.schemas.price import (
    PriceReportCreate, PriceReportResponse,
    LatestPriceResponse, FuelTypeResponse,
    ValidationErrorResponse,
)

__all__ = [
    # Base schemas
    "BaseSchema", "TimestampSchema", "IDSchema",

    # Station schemas
    "StationCreate", "StationUpdate",
    "StationResponse", "NearbyStationResponse",

    # Price schemas
    "PriceReportCreate", "PriceReportResponse",
    "LatestPriceResponse", "FuelTypeResponse",
    "ValidationErrorResponse",
]
