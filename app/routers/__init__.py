# API routers package

from app.routers.stations import router as stations_router
from app.routers.prices import router as prices_router
from app.routers.status import router as status_router
