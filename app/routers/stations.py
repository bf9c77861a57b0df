"""
Stations router.

This module contains endpoints for proximity search, station management and
the per-station price views.
"""

from typing import Dict, List, Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.rate_limit import limiter
from app.crud.price_report import price_report as price_report_crud
from app.crud.station import station as station_crud
from app.database import get_db
from app.schemas.price import LatestPriceResponse, PriceReportResponse, ValidationErrorResponse
from app.schemas.station import (
    NearbyStationResponse,
    StationCreate,
    StationResponse,
    StationUpdate,
)
from app.utils.geo import DEFAULT_SEARCH_RADIUS_KM
from app.utils.pricing import FuelType

router = APIRouter(
    prefix="/stations",
    tags=["Stations"],
    responses={
        404: {"description": "Station not found"}
    },
)


@router.get("", response_model=List[NearbyStationResponse])
@limiter.limit("100/minute")
async def search_stations(
    request: Request,
    lat: float = Query(..., ge=-90, le=90, description="Latitude of the search point"),
    lng: float = Query(..., ge=-180, le=180, description="Longitude of the search point"),
    radius: float = Query(DEFAULT_SEARCH_RADIUS_KM, description="Search radius in kilometers"),
    db: AsyncSession = Depends(get_db),
):
    """
    Find stations near a point, nearest first.

    Each station carries its great-circle distance in `distance_km`. The
    radius has no upper bound.

    Rate limit: 100 requests per minute
    """
    matches = await station_crud.search_nearby(
        db, latitude=lat, longitude=lng, radius_km=radius
    )
    return [
        NearbyStationResponse(
            **StationResponse.model_validate(station).model_dump(),
            distance_km=distance,
        )
        for station, distance in matches
    ]


@router.post(
    "",
    response_model=StationResponse,
    responses={400: {"model": ValidationErrorResponse}},
)
@limiter.limit("10/minute")  # Lower limit for write operations
async def create_station(
    request: Request,
    station: StationCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new fuel station.

    Rejected when another station already exists within 50 meters.

    Rate limit: 10 requests per minute (write operation)
    """
    return await station_crud.create(db, obj_in=station)


@router.get("/{station_id}", response_model=StationResponse)
@limiter.limit("100/minute")
async def get_station(
    request: Request,
    station_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Get a single fuel station.

    Rate limit: 100 requests per minute
    """
    return await station_crud.get_or_raise(db, id=station_id)


@router.put(
    "/{station_id}",
    response_model=StationResponse,
    responses={400: {"model": ValidationErrorResponse}},
)
@limiter.limit("10/minute")
async def update_station(
    request: Request,
    station_id: int,
    station_in: StationUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace a station's name, address and location.

    Rate limit: 10 requests per minute (write operation)
    """
    station = await station_crud.get_or_raise(db, id=station_id)
    return await station_crud.update(db, db_obj=station, obj_in=station_in)


@router.delete("/{station_id}", response_model=StationResponse)
@limiter.limit("10/minute")
async def delete_station(
    request: Request,
    station_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a station and its whole price history.

    Rate limit: 10 requests per minute (write operation)
    """
    return await station_crud.remove(db, id=station_id)


@router.get("/{station_id}/prices", response_model=List[PriceReportResponse])
@limiter.limit("100/minute")
async def list_prices(
    request: Request,
    station_id: int,
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, description="Return at most this many reports"),
    db: AsyncSession = Depends(get_db),
):
    """
    List every price reported for a station, newest first.

    Rate limit: 100 requests per minute
    """
    return await price_report_crud.get_for_station(
        db, station_id=station_id, skip=skip, limit=limit
    )


@router.get("/{station_id}/latest-prices", response_model=Dict[FuelType, LatestPriceResponse])
@limiter.limit("100/minute")
async def get_latest_prices(
    request: Request,
    station_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Get the most recent price for each fuel type reported at a station.

    Fuel types that were never reported are left out.

    Rate limit: 100 requests per minute
    """
    return await price_report_crud.get_latest_for_station(db, station_id=station_id)
