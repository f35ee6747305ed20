"""
Drawn polygons API router.

Estimate, save, list, rename, delete and dispatch polygons drawn on the
map. Saved polygons live in the session store for the lifetime of the
process.
"""

from typing import Callable, Optional

from fastapi import APIRouter, HTTPException, Query, Request

from api.rate_limit import limiter, get_rate_limit_string
from api.schemas.polygons import (
    CreatePolygonRequest,
    DispatchResponse,
    EstimatePolygonRequest,
    PolygonListResponse,
    PolygonResponse,
    RenamePolygonRequest,
)
from api.state import get_app_state
from skyplot.geometry import geodesic_area
from skyplot.polygons.dispatch import DispatchBlockedError, dispatch_polygon
from skyplot.polygons.record import PolygonRecord
from skyplot.zones.intersection import find_intersecting_zones

router = APIRouter(prefix="/api/polygons", tags=["polygons"])


def _record_factory(body: EstimatePolygonRequest) -> Callable[[int], PolygonRecord]:
    """
    Run the no-fly check for a drawn ring.

    Returns a callable that assembles the record given the number of
    polygons already saved.
    """
    state = get_app_state()
    ring = body.to_ring()
    area = body.area if body.area is not None else geodesic_area(ring)
    zones = find_intersecting_zones(ring, state.catalog)

    def build(saved_count: int) -> PolygonRecord:
        return state.builder.build(ring, area, zones, saved_count=saved_count)

    return build


def _get_or_404(polygon_id: str) -> PolygonRecord:
    record = get_app_state().store.get(polygon_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Polygon not found: {polygon_id}")
    return record


@router.post("/estimate", response_model=PolygonResponse)
@limiter.limit(get_rate_limit_string())
async def estimate_polygon(request: Request, body: EstimatePolygonRequest):
    """
    Estimate area, price and no-fly overlap for a drawn polygon.

    The result is a draft: nothing is saved.
    """
    build = _record_factory(body)
    return PolygonResponse.from_record(build(get_app_state().store.count()))


@router.post("", response_model=PolygonResponse, status_code=201)
@limiter.limit(get_rate_limit_string())
async def create_polygon(request: Request, body: CreatePolygonRequest):
    """Build a record for a drawn polygon and save it to the session."""
    build = _record_factory(body)

    def build_named(saved_count: int) -> PolygonRecord:
        record = build(saved_count)
        return record.with_name(body.name) if body.name else record

    record = get_app_state().store.save_new(build_named)
    return PolygonResponse.from_record(record)


@router.get("", response_model=PolygonListResponse)
async def list_polygons(
    search: Optional[str] = Query(None, description="Case-insensitive name filter"),
    sort_by: str = Query("date", description="date, area or price"),
):
    """List saved polygons, newest / largest / most expensive first."""
    try:
        records = get_app_state().store.list(search=search, sort_by=sort_by)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return PolygonListResponse(
        polygons=[PolygonResponse.from_record(r) for r in records],
        count=len(records),
    )


@router.get("/{polygon_id}", response_model=PolygonResponse)
async def get_polygon(polygon_id: str):
    """Get a saved polygon by ID."""
    return PolygonResponse.from_record(_get_or_404(polygon_id))


@router.patch("/{polygon_id}", response_model=PolygonResponse)
async def rename_polygon(polygon_id: str, body: RenamePolygonRequest):
    """Rename a saved polygon. The name is the only editable field."""
    record = get_app_state().store.rename(polygon_id, body.name)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Polygon not found: {polygon_id}")
    return PolygonResponse.from_record(record)


@router.delete("/{polygon_id}")
async def delete_polygon(polygon_id: str):
    """Delete a saved polygon."""
    if not get_app_state().store.delete(polygon_id):
        raise HTTPException(status_code=404, detail=f"Polygon not found: {polygon_id}")
    return {"status": "deleted", "polygon_id": polygon_id}


@router.post("/{polygon_id}/dispatch", response_model=DispatchResponse)
@limiter.limit(get_rate_limit_string())
async def dispatch_saved_polygon(request: Request, polygon_id: str):
    """
    Send a saved polygon to the drone service.

    Refused with 409 when the polygon overlaps any no-fly zone.
    """
    record = _get_or_404(polygon_id)
    state = get_app_state()

    try:
        receipt = dispatch_polygon(record, state.dispatcher)
    except DispatchBlockedError as e:
        raise HTTPException(
            status_code=409,
            detail={
                "error": "Polygon overlaps no-fly zones",
                "polygon_id": e.record_id,
                "intersecting_no_fly_zones": e.zones,
            },
        )

    return DispatchResponse.from_receipt(receipt)
