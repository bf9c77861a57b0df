"""
Station CRUD operations.

This module contains CRUD and proximity-search operations for fuel stations.
"""

from typing import List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.exceptions import StationNotFound, ValidationFailed
from app.crud.base import CRUDBase
from app.models.station import Station
from app.schemas.station import StationCreate, StationUpdate
from app.utils.geo import DEFAULT_SEARCH_RADIUS_KM, find_within
from app.utils.logging_config import get_logger
from app.utils.validation import validate_station_fields

logger = get_logger(__name__)

# Minimum spacing between two stations, enforced when a station is created
DUPLICATE_STATION_RADIUS_M = 50.0


def _cleaned_fields(obj_in: StationCreate) -> dict:
    return {
        "name": obj_in.name.strip(),
        "address": obj_in.address.strip(),
        "latitude": obj_in.latitude,
        "longitude": obj_in.longitude,
    }


class CRUDStation(CRUDBase[Station, StationCreate, StationUpdate]):
    """
    CRUD operations for Station model.
    """

    async def get_or_raise(self, db: AsyncSession, *, id: int) -> Station:
        """
        Get a station by ID.

        Raises:
            StationNotFound: If no station has this ID
        """
        station = await self.get(db, id=id)
        if station is None:
            raise StationNotFound(id)
        return station

    async def get_all(self, db: AsyncSession) -> List[Station]:
        """Load every station in insertion order."""
        result = await db.execute(select(Station).order_by(Station.id))
        return result.scalars().all()

    async def search_nearby(
        self,
        db: AsyncSession,
        *,
        latitude: float,
        longitude: float,
        radius_km: float = DEFAULT_SEARCH_RADIUS_KM,
    ) -> List[Tuple[Station, float]]:
        """
        Find stations strictly within ``radius_km`` of a point.

        Every stored station is scanned; no spatial index is used.

        Args:
            db: Database session
            latitude: Query latitude in degrees
            longitude: Query longitude in degrees
            radius_km: Search radius in kilometers

        Returns:
            List of (Station, distance_km) tuples, nearest first
        """
        stations = await self.get_all(db)
        return find_within(latitude, longitude, stations, radius_km)

    async def find_conflicting(
        self,
        db: AsyncSession,
        *,
        latitude: float,
        longitude: float,
        radius_m: float = DUPLICATE_STATION_RADIUS_M,
    ) -> Optional[Tuple[Station, float]]:
        """
        Find the nearest station closer than ``radius_m`` meters.

        Returns:
            (Station, distance_m) or None when the spot is free
        """
        matches = await self.search_nearby(
            db, latitude=latitude, longitude=longitude, radius_km=radius_m / 1000.0
        )
        if not matches:
            return None
        station, distance = matches[0]
        return station, distance * 1000.0

    async def create(self, db: AsyncSession, *, obj_in: StationCreate) -> Station:
        """
        Validate and insert a new station.

        Rejects the station when its fields are invalid or when another
        station already exists within 50 meters.

        Raises:
            ValidationFailed: With every violation found
        """
        errors = validate_station_fields(
            obj_in.name, obj_in.address, obj_in.latitude, obj_in.longitude
        )
        if errors:
            raise ValidationFailed(errors)

        conflict = await self.find_conflicting(
            db, latitude=obj_in.latitude, longitude=obj_in.longitude
        )
        if conflict:
            existing, distance = conflict
            logger.info(
                f"Rejected station '{obj_in.name.strip()}': {distance:.1f} m from station {existing.id}"
            )
            raise ValidationFailed([
                f"A station already exists within {DUPLICATE_STATION_RADIUS_M:.0f} meters: "
                f"'{existing.name}' (id {existing.id}, {distance:.1f} m away)"
            ])

        station = await super().create(db, obj_in=_cleaned_fields(obj_in))
        logger.info(f"Created station {station.id} '{station.name}'")
        return station

    async def update(
        self, db: AsyncSession, *, db_obj: Station, obj_in: StationUpdate
    ) -> Station:
        """
        Replace a station's name, address and location.

        The 50 meter spacing rule is not checked on update.

        Raises:
            ValidationFailed: With every violation found
        """
        errors = validate_station_fields(
            obj_in.name, obj_in.address, obj_in.latitude, obj_in.longitude
        )
        if errors:
            raise ValidationFailed(errors)

        return await super().update(db, db_obj=db_obj, obj_in=_cleaned_fields(obj_in))

    async def remove(self, db: AsyncSession, *, id: int) -> Station:
        """
        Delete a station together with its price reports.

        Both go away in the same transaction.

        Raises:
            StationNotFound: If no station has this ID
        """
        station = await super().remove(db, id=id)
        if station is None:
            raise StationNotFound(id)
        logger.info(f"Deleted station {id} and its price history")
        return station


# Create instance of CRUD class
station = CRUDStation(Station)
