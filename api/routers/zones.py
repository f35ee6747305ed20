"""
No-fly zones API router.

Read-only access to the no-fly catalog, plus a check of a drawn ring
against it.
"""

from fastapi import APIRouter, HTTPException

from api.schemas.zones import (
    ZoneCheckRequest, ZoneCheckResponse, ZoneListResponse, ZoneSummary,
)
from api.state import get_app_state
from skyplot.zones.intersection import find_intersecting_zone_objects

router = APIRouter(prefix="/api/zones", tags=["zones"])


@router.get("")
async def get_all_zones():
    """
    Get all no-fly zones.

    Returns GeoJSON FeatureCollection for map display.
    """
    return get_app_state().catalog.export_geojson()


@router.get("/list", response_model=ZoneListResponse)
async def list_zones():
    """Get zones as a simple list."""
    zones = [
        ZoneSummary(id=zone.id, name=zone.name, vertex_count=len(zone.ring))
        for zone in get_app_state().catalog
    ]
    return ZoneListResponse(zones=zones, count=len(zones))


@router.post("/check", response_model=ZoneCheckResponse)
async def check_ring(body: ZoneCheckRequest):
    """Check which no-fly zones a drawn ring overlaps."""
    matches = find_intersecting_zone_objects(body.to_ring(), get_app_state().catalog)

    return ZoneCheckResponse(
        intersecting_zones=[z.name for z in matches],
        intersecting_zone_ids=[z.id for z in matches],
        is_dispatch_blocked=len(matches) > 0,
    )


@router.get("/{zone_id}")
async def get_zone(zone_id: str):
    """Get a specific zone by ID."""
    zone = get_app_state().catalog.get_zone(zone_id)

    if zone is None:
        raise HTTPException(status_code=404, detail=f"Zone not found: {zone_id}")

    return zone.to_geojson()
