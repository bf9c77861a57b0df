"""
Fuel station database model.

This module contains the Station model representing a fuel-selling location
at fixed coordinates.
"""

from sqlalchemy import Column, String, Float, Index
from sqlalchemy.orm import relationship

from app.models.base import BaseModel


class Station(BaseModel):
    """
    Fuel station information.

    A station owns its price ledger: deleting it deletes every price
    report recorded for it.
    """

    __tablename__ = "stations"

    name = Column(String(200), nullable=False, index=True, comment="Station name")
    address = Column(String(300), nullable=False, comment="Street address")
    latitude = Column(Float, nullable=False, comment="Latitude in degrees")
    longitude = Column(Float, nullable=False, comment="Longitude in degrees")

    # Relationships
    price_reports = relationship(
        "PriceReport",
        back_populates="station",
        cascade="all, delete-orphan",
        order_by="PriceReport.reported_at.desc()",
    )

    __table_args__ = (
        Index("idx_station_location", "latitude", "longitude"),
    )

    def __repr__(self):
        return f"<Station(id={self.id}, name='{self.name}')>"
