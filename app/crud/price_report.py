"""
Price report CRUD operations.

This module contains operations for the append-only price ledger. Reports
are only ever inserted; there is deliberately no update or delete here.
"""

from typing import Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import desc

from app.core.exceptions import ValidationFailed
from app.crud.base import CRUDBase
from app.crud.station import station as station_crud
from app.models.price_report import PriceReport
from app.schemas.price import PriceReportCreate
from app.utils.logging_config import get_logger
from app.utils.pricing import FuelType, latest_by_fuel_type, parse_price, validate_price

logger = get_logger(__name__)


class CRUDPriceReport(CRUDBase[PriceReport, PriceReportCreate, dict]):
    """
    CRUD operations for PriceReport model.
    """

    async def get_for_station(
        self,
        db: AsyncSession,
        *,
        station_id: int,
        skip: int = 0,
        limit: Optional[int] = None
    ) -> List[PriceReport]:
        """
        Get the price reports of a station (most recent first).

        Args:
            db: Database session
            station_id: Station ID
            skip: Number of records to skip
            limit: Maximum records to return (all when None)

        Returns:
            List of PriceReport instances

        Raises:
            StationNotFound: If the station does not exist
        """
        await station_crud.get_or_raise(db, id=station_id)

        query = (
            select(PriceReport)
            .where(PriceReport.station_id == station_id)
            .order_by(desc(PriceReport.reported_at), desc(PriceReport.id))
            .offset(skip)
        )
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return result.scalars().all()

    async def report(self, db: AsyncSession, *, obj_in: PriceReportCreate) -> PriceReport:
        """
        Validate and append a price report.

        Domain rules are checked before the station lookup; a request with
        any violation writes nothing.

        Raises:
            ValidationFailed: With every violation found
            StationNotFound: If the station does not exist
        """
        errors = validate_price(obj_in.fuel_type, obj_in.price)
        if errors:
            logger.info(f"Rejected price report for station {obj_in.station_id}: {errors}")
            raise ValidationFailed(errors)

        await station_crud.get_or_raise(db, id=obj_in.station_id)

        return await self.create(
            db,
            obj_in={
                "station_id": obj_in.station_id,
                "fuel_type": FuelType.parse(obj_in.fuel_type),
                "price": parse_price(obj_in.price),
            },
        )

    async def get_latest_for_station(
        self, db: AsyncSession, *, station_id: int
    ) -> Dict[FuelType, PriceReport]:
        """
        Get the most recent report per fuel type for a station.

        Derived from the full ledger on every call.

        Raises:
            StationNotFound: If the station does not exist
        """
        reports = await self.get_for_station(db, station_id=station_id)
        return latest_by_fuel_type(reports)


# Create instance of CRUD class
price_report = CRUDPriceReport(PriceReport)
