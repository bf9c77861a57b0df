# CRUD operations package

from app.crud.base import CRUDBase
from app.crud.station import CRUDStation, station
from app.crud.price_report import CRUDPriceReport, price_report

__all__ = [
    "CRUDBase",
    "CRUDStation", "station",
    "CRUDPriceReport", "price_report",
]
