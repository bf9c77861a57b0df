"""
Status router.

This module contains endpoints for API status and health checks.
"""

from fastapi import APIRouter, Request

from app.core.rate_limit import limiter

router = APIRouter(
    prefix="/status",
    tags=["status"],
)


@router.get("", response_model=dict)
@limiter.limit("60/minute")
async def get_status(request: Request):
    """
    Get API status.

    Performs a round trip to the database and reports its clock.

    Rate limit: 60 requests per minute

    Returns:
        dict: Status information
    """
    database = request.app.state.db
    server_time = await database.server_time()
    return {
        "status": "ok",
        "database": database.dialect,
        "server_time": server_time.isoformat(),
    }
