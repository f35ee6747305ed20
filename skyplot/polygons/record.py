"""
Polygon record builder.

Packages a drawn ring, its precomputed area and its no-fly overlap result
into the record the front end displays, stores and dispatches.

ID generation and the clock are injected so builds are reproducible in
tests. The overlap list is attached once, at build time, and never
recomputed.
"""

import itertools
import threading
import time
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable, Sequence, Tuple

from skyplot.config import DEFAULT_PRICE_PER_SQUARE_METER
from skyplot.geometry import Point, Ring, square_meters_to_dunams

IdSource = Callable[[], str]
Clock = Callable[[], datetime]


def uuid_id_source() -> str:
    """Random UUID4 hex identifier."""
    return uuid.uuid4().hex


def millisecond_id_source() -> str:
    """Epoch-milliseconds identifier. Two builds in the same millisecond collide."""
    return str(int(time.time() * 1000))


class CounterIdSource:
    """Deterministic sequential identifiers: '<prefix>1', '<prefix>2', ..."""

    def __init__(self, prefix: str = "", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            return f"{self.prefix}{next(self._counter)}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def estimate_price(area: float, price_per_square_meter: float) -> float:
    """Estimated survey price: area times the unit rate."""
    return area * price_per_square_meter


@dataclass(frozen=True)
class PolygonRecord:
    """A drawn polygon with its derived attributes."""
    id: str
    coordinates: Tuple[Point, ...]  # (lat, lon) ring
    area: float  # square meters
    estimated_price: float
    created_at: datetime
    name: str
    intersecting_no_fly_zones: Tuple[str, ...] = ()

    @property
    def area_dunams(self) -> float:
        return square_meters_to_dunams(self.area)

    @property
    def is_dispatch_blocked(self) -> bool:
        """True when the polygon overlaps any no-fly zone."""
        return len(self.intersecting_no_fly_zones) > 0

    def with_name(self, name: str) -> 'PolygonRecord':
        """Copy of this record with a new display name. Nothing else changes."""
        return replace(self, name=name)


class PolygonRecordBuilder:
    """
    Builds PolygonRecords.

    Args:
        price_per_square_meter: Unit rate for the price estimate
        id_source: Zero-argument callable returning a unique ID
        clock: Zero-argument callable returning the creation timestamp
        name_prefix: Default names are "<name_prefix> <saved_count + 1>"
    """

    def __init__(
        self,
        price_per_square_meter: float = DEFAULT_PRICE_PER_SQUARE_METER,
        id_source: IdSource = uuid_id_source,
        clock: Clock = utc_now,
        name_prefix: str = "Polygon",
    ):
        self.price_per_square_meter = price_per_square_meter
        self.id_source = id_source
        self.clock = clock
        self.name_prefix = name_prefix

    def default_name(self, saved_count: int) -> str:
        return f"{self.name_prefix} {saved_count + 1}"

    def build(
        self,
        coordinates: Ring,
        area: float,
        intersecting_zones: Sequence[str],
        saved_count: int = 0,
    ) -> PolygonRecord:
        """
        Assemble a record for a freshly drawn polygon.

        Area is taken as given (no validation); a zero-area ring yields a
        zero price.

        Args:
            coordinates: Drawn ring as (lat, lon) vertices
            area: Precomputed area in square meters
            intersecting_zones: Output of the zone intersection pipeline
            saved_count: Number of polygons already saved this session

        Returns:
            PolygonRecord
        """
        return PolygonRecord(
            id=self.id_source(),
            coordinates=tuple((lat, lon) for lat, lon in coordinates),
            area=area,
            estimated_price=estimate_price(area, self.price_per_square_meter),
            created_at=self.clock(),
            name=self.default_name(saved_count),
            intersecting_no_fly_zones=tuple(intersecting_zones),
        )
