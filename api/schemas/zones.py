"""No-fly zone API schemas."""

from typing import List

from pydantic import BaseModel

from .common import RingRequest


class ZoneSummary(BaseModel):
    """No-fly zone list entry."""
    id: str
    name: str
    vertex_count: int


class ZoneListResponse(BaseModel):
    zones: List[ZoneSummary]
    count: int


class ZoneCheckRequest(RingRequest):
    """Drawn ring to check against the no-fly catalog."""


class ZoneCheckResponse(BaseModel):
    intersecting_zones: List[str]
    intersecting_zone_ids: List[str]
    is_dispatch_blocked: bool
