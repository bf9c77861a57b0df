"""
Prices router.

This module contains endpoints for reporting fuel prices.
"""

from typing import List
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.rate_limit import limiter
from app.crud.price_report import price_report as price_report_crud
from app.database import get_db
from app.schemas.price import (
    FuelTypeResponse,
    PriceReportCreate,
    PriceReportResponse,
    ValidationErrorResponse,
)
from app.utils.pricing import FuelType

router = APIRouter(
    prefix="/prices",
    tags=["Prices"],
)


@router.post(
    "",
    response_model=PriceReportResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"description": "Station not found"},
    },
)
@limiter.limit("60/minute")
async def report_price(
    request: Request,
    report: PriceReportCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Report the current price of a fuel at a station.

    The price must fall within the accepted range for its fuel type. A
    request with any violation is rejected as a whole.

    Rate limit: 60 requests per minute (write operation)
    """
    return await price_report_crud.report(db, obj_in=report)


@router.get("/fuel-types", response_model=List[FuelTypeResponse])
async def list_fuel_types():
    """List the supported fuel types and their accepted price ranges."""
    return [
        FuelTypeResponse(
            fuel_type=fuel_type,
            min_price=fuel_type.price_range.minimum,
            max_price=fuel_type.price_range.maximum,
        )
        for fuel_type in FuelType
    ]
