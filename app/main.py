"""
Main FastAPI application for the PostoAqui Fuel Price API.

This module contains the main FastAPI application instance, the storage
lifecycle, exception handlers and root endpoints.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.core.exceptions import StationNotFound, ValidationFailed
from app.core.rate_limit import limiter, DEFAULT_LIMIT
from app.database import Database
from app.routers.prices import router as prices_router
from app.routers.stations import router as stations_router
from app.routers.status import router as status_router
from app.utils.logging_config import setup_logging, get_logger

# Import all models to ensure SQLAlchemy relationships are properly configured
import app.models  # noqa: F401 - triggers import of all model classes

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Opens the storage handle on startup and disposes it on shutdown.

    Note: Database tables are managed through Alembic migrations.
    Run `alembic upgrade head` to create/update database tables, or set
    CREATE_TABLES_ON_STARTUP for local development.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("PostoAqui API - Application starting up")
    logger.info(f"Environment: {'Development' if settings.DEBUG else 'Production'}")
    logger.info(f"API Version: {settings.API_V1_STR}")
    logger.info(f"Database: {settings.SQLALCHEMY_DATABASE_URI.split('://')[0]}")
    logger.info("=" * 60)

    database = Database(settings.SQLALCHEMY_DATABASE_URI, echo=settings.DB_ECHO)
    if settings.CREATE_TABLES_ON_STARTUP:
        await database.create_tables()
        logger.info("Database tables created")
    else:
        logger.warning("Remember to run 'alembic upgrade head' to apply database migrations")
    app.state.db = database

    yield

    # Shutdown
    await database.dispose()
    logger.info("=" * 60)
    logger.info("PostoAqui API - Application shutting down")
    logger.info("=" * 60)


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Find nearby fuel stations and share current fuel prices",
    version="1.0.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(ValidationFailed)
async def validation_failed_handler(request: Request, exc: ValidationFailed):
    """Return every violated rule; nothing was written."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": exc.errors},
    )


@app.exception_handler(StationNotFound)
async def station_not_found_handler(request: Request, exc: StationNotFound):
    """Handle requests for unknown stations."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    """Log storage failures and answer with a generic error."""
    logger.error(
        f"Storage error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage unavailable, please try again later"},
    )


# Set up CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.get("/")
@limiter.limit(DEFAULT_LIMIT)
async def root(request: Request):
    """
    Root endpoint returning API information.
    """
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": "1.0.0",
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
@limiter.limit("60/minute")  # More generous limit for health checks
async def health_check(request: Request):
    """
    Health check endpoint.

    Rate limit: 60 requests per minute
    """
    return {"status": "healthy"}


# Include routers
app.include_router(stations_router, prefix=settings.API_V1_STR)
app.include_router(prices_router, prefix=settings.API_V1_STR)
app.include_router(status_router, prefix=settings.API_V1_STR)
