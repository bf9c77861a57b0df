"""
Station schemas.

This module contains Pydantic schemas for station requests and responses.

Request fields are intentionally permissive: domain rules (name/address
length, coordinate bounds) are checked by app.utils.validation so that every
violation is reported in a single response.
"""

from typing import Optional
from pydantic import Field

from app.schemas.base import BaseSchema, TimestampSchema, IDSchema


class StationBase(BaseSchema):
    """Base fuel station schema."""
    name: Optional[str] = Field(None, description="Station name (at least 3 characters)")
    address: Optional[str] = Field(None, description="Street address (at least 10 characters)")
    latitude: Optional[float] = Field(None, description="Latitude in degrees (-90 to 90)")
    longitude: Optional[float] = Field(None, description="Longitude in degrees (-180 to 180)")


class StationCreate(StationBase):
    """Schema for creating a fuel station."""
    pass


class StationUpdate(StationBase):
    """Schema for replacing a fuel station's name, address and location."""
    pass


class StationResponse(IDSchema, TimestampSchema):
    """Fuel station as returned by the API."""
    name: str
    address: str
    latitude: float
    longitude: float


class NearbyStationResponse(StationResponse):
    """Fuel station annotated with its distance from the query point."""
    distance_km: float = Field(..., description="Great-circle distance in kilometers")
