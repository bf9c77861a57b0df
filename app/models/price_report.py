"""
Price report database model.

This module contains the PriceReport model, one crowd-sourced price
observation for a fuel type at a station. Reports are append-only: they are
never updated, and only removed together with their station.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Index, Integer, Numeric
from sqlalchemy.orm import relationship

from app.database import Base
from app.utils.pricing import FuelType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PriceReport(Base):
    """
    Crowd-sourced fuel price observation.

    ``reported_at`` is set by the application at insert time with
    microsecond resolution so reports from the same second still order
    correctly.
    """

    __tablename__ = "price_reports"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    station_id = Column(
        Integer,
        ForeignKey("stations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Reference to the fuel station"
    )
    fuel_type = Column(
        Enum(
            FuelType,
            name="fuel_type",
            native_enum=False,
            length=32,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
        comment="Fuel type the price refers to"
    )
    price = Column(
        Numeric(10, 3, asdecimal=False),
        nullable=False,
        comment="Reported price in BRL"
    )
    reported_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        index=True,
        comment="When the report was recorded"
    )

    station = relationship("Station", back_populates="price_reports")

    __table_args__ = (
        Index("idx_price_station_fuel_reported", "station_id", "fuel_type", "reported_at"),
    )

    def __repr__(self):
        return (
            f"<PriceReport(id={self.id}, station_id={self.station_id}, "
            f"fuel_type={self.fuel_type}, price={self.price})>"
        )
