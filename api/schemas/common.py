"""Common shared schemas used across multiple domains."""

from typing import List, Tuple

from pydantic import BaseModel, Field


class Position(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class RingRequest(BaseModel):
    """A drawn polygon ring: at least three (lat, lon) vertices, implicitly closed."""
    coordinates: List[Position] = Field(..., min_length=3)

    def to_ring(self) -> List[Tuple[float, float]]:
        return [(p.lat, p.lon) for p in self.coordinates]
