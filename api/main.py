"""
FastAPI Backend for SKYPLOT.

Provides REST API endpoints for:
- No-fly zone catalog (GeoJSON for the map, ring checks)
- Drawn polygon estimates (area, price, no-fly overlap)
- Session polygon management (save, list, rename, delete)
- Gated dispatch to the drone service
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
import uvicorn

from api.config import settings
from api.middleware import setup_middleware
from api.rate_limit import limiter
from api.routers import polygons, system, zones
from api.state import get_app_state
from skyplot import __version__
from skyplot.config import settings as engine_settings

# JSON logs are self-contained
engine_settings.configure_logging(fmt='%(message)s')
logger = logging.getLogger(__name__)


# =============================================================================
# Application Factory
# =============================================================================

def create_app() -> FastAPI:
    """
    Application factory for SKYPLOT API.

    Creates and configures the FastAPI application with middleware,
    exception handlers and routers.

    Returns:
        FastAPI: Configured application instance
    """
    application = FastAPI(
        title="SKYPLOT API",
        description="""
## Drone Survey Polygon API

Estimate area and price for polygons drawn on the map, flag overlap with
no-fly zones, and dispatch clear polygons to the drone service.
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    setup_middleware(application, debug=settings.is_development or settings.debug)

    # CORS middleware - use configured origins only (NO WILDCARDS)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Add rate limiter to app state
    application.state.limiter = limiter

    @application.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        return JSONResponse(
            status_code=429,
            content={
                "error": "Rate limit exceeded",
                "detail": str(exc.detail),
                "retry_after": 60,
            },
            headers={"Retry-After": "60"},
        )

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=422, content={"detail": jsonable_errors(exc)})

    @application.on_event("startup")
    async def startup_event():
        """Load the no-fly catalog before the first request."""
        state = get_app_state()
        logger.info(f"Startup complete: {len(state.catalog)} no-fly zones loaded")

    application.include_router(system.router)
    application.include_router(zones.router)
    application.include_router(polygons.router)

    return application


def jsonable_errors(exc: RequestValidationError):
    """Validation errors without the raw input objects (ctx may hold exceptions)."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


# Create the application
app = create_app()


# ============================================================================
# Run Server
# ============================================================================

if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
        log_level=settings.log_level,
    )
