"""
SKYPLOT API Pydantic schemas.

Re-exports all schema classes:
    from api.schemas import Position, CreatePolygonRequest, ...
"""

# Common
from .common import Position, RingRequest  # noqa: F401

# Zones
from .zones import (  # noqa: F401
    ZoneSummary,
    ZoneListResponse,
    ZoneCheckRequest,
    ZoneCheckResponse,
)

# Polygons
from .polygons import (  # noqa: F401
    EstimatePolygonRequest,
    CreatePolygonRequest,
    RenamePolygonRequest,
    PolygonResponse,
    PolygonListResponse,
    DispatchResponse,
)
