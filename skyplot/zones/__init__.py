"""Drawn-polygon checks against the no-fly catalog."""

from .intersection import (
    find_intersecting_zone_objects,
    find_intersecting_zones,
)

__all__ = [
    'find_intersecting_zone_objects',
    'find_intersecting_zones',
]
