"""
Dispatch gate for drone survey requests.

A polygon that overlaps any no-fly zone is refused before it reaches the
drone service. The service itself sits behind the DroneDispatcher
protocol.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, Sequence

from .record import PolygonRecord, utc_now

logger = logging.getLogger(__name__)


class DispatchBlockedError(Exception):
    """Raised when a polygon overlapping a no-fly zone is dispatched."""

    def __init__(self, record_id: str, zones: Sequence[str]):
        self.record_id = record_id
        self.zones = list(zones)
        super().__init__(
            f"Polygon {record_id} overlaps no-fly zone(s): {', '.join(self.zones)}"
        )


@dataclass(frozen=True)
class DispatchReceipt:
    """Acknowledgement from the drone service."""
    record_id: str
    dispatched_at: datetime
    service: str


class DroneDispatcher(Protocol):
    """Hands a polygon over to the drone service."""

    def send(self, record: PolygonRecord) -> DispatchReceipt:
        ...


class LoggingDispatcher:
    """Dispatcher that records the hand-off in the log only."""

    name = "log"

    def send(self, record: PolygonRecord) -> DispatchReceipt:
        logger.info(
            f"Dispatching polygon {record.id} ({record.name}): "
            f"{record.area:.0f} m2, estimated price {record.estimated_price:.2f}"
        )
        return DispatchReceipt(record_id=record.id, dispatched_at=utc_now(), service=self.name)


def dispatch_polygon(record: PolygonRecord, dispatcher: DroneDispatcher) -> DispatchReceipt:
    """
    Send a polygon to the drone service unless it overlaps a no-fly zone.

    Raises:
        DispatchBlockedError: The record's no-fly overlap list is non-empty
    """
    if record.is_dispatch_blocked:
        logger.warning(
            f"Dispatch refused for polygon {record.id}: "
            f"overlaps {', '.join(record.intersecting_no_fly_zones)}"
        )
        raise DispatchBlockedError(record.id, record.intersecting_no_fly_zones)

    return dispatcher.send(record)
