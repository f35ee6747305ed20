"""
System API router.

Root endpoint and health check.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from api.middleware import get_request_id
from api.state import get_app_state
from skyplot import __version__

router = APIRouter(tags=["System"])


@router.get("/")
async def root():
    """
    API root endpoint.

    Returns basic API information and available endpoint categories.
    """
    return {
        "name": "SKYPLOT API",
        "version": __version__,
        "status": "operational",
        "docs": "/api/docs",
        "endpoints": {
            "health": "/api/health",
            "zones": "/api/zones/...",
            "polygons": "/api/polygons/...",
        }
    }


@router.get("/api/health")
async def health_check():
    """
    Health check for load balancers.

    Reports the number of loaded no-fly zones and saved polygons. An empty
    catalog is a valid configuration, so the status stays healthy.
    """
    components = get_app_state().health_check()

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "request_id": get_request_id(),
        **components,
    }
