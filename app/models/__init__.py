# Database models package

from app.models.base import BaseModel
from app.models.station import Station
from app.models.price_report import PriceReport

__all__ = [
    "BaseModel",
    "Station",
    "PriceReport",
]

# Configure all mappers after all models are imported
# This resolves bidirectional relationships defined with string references
from sqlalchemy.orm import configure_mappers
configure_mappers()
