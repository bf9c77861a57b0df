"""
Seed script for demo fuel stations.

This script populates the database with a handful of fuel stations around
central São Paulo and a first price report for each of them. Stations go
through the same validation as the API, so spots already taken (within
50 meters of an existing station) are skipped.

Run this script after running database migrations:
    python -m scripts.seed_stations
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from app.core.exceptions import ValidationFailed
from app.crud.price_report import price_report as price_report_crud
from app.crud.station import station as station_crud
from app.database import Database
from app.schemas.price import PriceReportCreate
from app.schemas.station import StationCreate
from app.utils.logging_config import setup_logging, get_logger

# Setup logging
setup_logging()
logger = get_logger(__name__)


DEMO_STATIONS = [
    {
        "name": "Posto Paulista",
        "address": "Avenida Paulista, 1500 - Bela Vista",
        "latitude": -23.5614,
        "longitude": -46.6559,
        "prices": {"regular_gasoline": 5.89, "ethanol": 3.79},
    },
    {
        "name": "Auto Posto Consolação",
        "address": "Rua da Consolação, 2200 - Consolação",
        "latitude": -23.5531,
        "longitude": -46.6602,
        "prices": {"regular_gasoline": 5.79, "premium_gasoline": 6.19},
    },
    {
        "name": "Posto Sé",
        "address": "Praça da Sé, 100 - Sé",
        "latitude": -23.5505,
        "longitude": -46.6333,
        "prices": {"diesel": 6.09, "ethanol": 3.69},
    },
    {
        "name": "Posto Liberdade",
        "address": "Rua Galvão Bueno, 400 - Liberdade",
        "latitude": -23.5587,
        "longitude": -46.6350,
        "prices": {"regular_gasoline": 5.95},
    },
    {
        "name": "Posto Pinheiros",
        "address": "Rua dos Pinheiros, 800 - Pinheiros",
        "latitude": -23.5664,
        "longitude": -46.6841,
        "prices": {"regular_gasoline": 5.99, "diesel": 6.15},
    },
]


async def seed_stations():
    """Seed the database with demo stations and their first prices."""
    database = Database(settings.SQLALCHEMY_DATABASE_URI)

    logger.info("=" * 60)
    logger.info("Starting demo station seeding process")
    logger.info("=" * 60)

    stations_created = 0
    prices_created = 0

    try:
        if settings.CREATE_TABLES_ON_STARTUP:
            await database.create_tables()

        async with database.session_factory() as session:
            for station_data in DEMO_STATIONS:
                try:
                    station = await station_crud.create(
                        session,
                        obj_in=StationCreate(
                            name=station_data["name"],
                            address=station_data["address"],
                            latitude=station_data["latitude"],
                            longitude=station_data["longitude"],
                        ),
                    )
                except ValidationFailed as e:
                    logger.info(f"Skipping {station_data['name']}: {'; '.join(e.errors)}")
                    continue

                stations_created += 1
                logger.info(f"✓ Created station: {station.name} (id {station.id})")

                for fuel_type, price in station_data["prices"].items():
                    await price_report_crud.report(
                        session,
                        obj_in=PriceReportCreate(
                            station_id=station.id, fuel_type=fuel_type, price=price
                        ),
                    )
                    prices_created += 1
                    logger.info(f"  ➜ Reported {fuel_type}: R$ {price:.2f}")

        logger.info("=" * 60)
        logger.info("✓ Seeding completed successfully!")
        logger.info(f"  Stations created: {stations_created}")
        logger.info(f"  Price reports created: {prices_created}")
        logger.info("=" * 60)
    finally:
        await database.dispose()


def main():
    """Main entry point for the seed script."""
    try:
        asyncio.run(seed_stations())
    except KeyboardInterrupt:
        logger.warning("Seeding interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"✗ Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
