"""Drawn polygon API schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from skyplot.polygons.dispatch import DispatchReceipt
from skyplot.polygons.record import PolygonRecord

from .common import Position, RingRequest


class EstimatePolygonRequest(RingRequest):
    """
    Drawn polygon to estimate.

    area is the drawing surface's geodesic measurement in square meters;
    when omitted the server computes it.
    """
    area: Optional[float] = Field(None, ge=0, description="Area in square meters")


class CreatePolygonRequest(EstimatePolygonRequest):
    """Drawn polygon to save. name overrides the default 'Polygon <n>'."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)


class RenamePolygonRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class PolygonResponse(BaseModel):
    """A drawn polygon record."""
    id: str
    name: str
    coordinates: List[Position]
    area: float
    area_dunams: float
    estimated_price: float
    created_at: datetime
    intersecting_no_fly_zones: List[str]
    is_dispatch_blocked: bool

    @classmethod
    def from_record(cls, record: PolygonRecord) -> 'PolygonResponse':
        return cls(
            id=record.id,
            name=record.name,
            coordinates=[Position(lat=lat, lon=lon) for lat, lon in record.coordinates],
            area=record.area,
            area_dunams=record.area_dunams,
            estimated_price=record.estimated_price,
            created_at=record.created_at,
            intersecting_no_fly_zones=list(record.intersecting_no_fly_zones),
            is_dispatch_blocked=record.is_dispatch_blocked,
        )


class PolygonListResponse(BaseModel):
    polygons: List[PolygonResponse]
    count: int


class DispatchResponse(BaseModel):
    status: str
    polygon_id: str
    dispatched_at: datetime
    service: str

    @classmethod
    def from_receipt(cls, receipt: DispatchReceipt) -> 'DispatchResponse':
        return cls(
            status="dispatched",
            polygon_id=receipt.record_id,
            dispatched_at=receipt.dispatched_at,
            service=receipt.service,
        )
