"""
Zone intersection pipeline.

Runs a freshly drawn ring against every zone of the no-fly catalog and
reports which ones it overlaps, in catalog order. A non-empty result means
the polygon must not be dispatched.
"""

import logging
from typing import List

from skyplot.data.no_fly_zones import RestrictedZone, ZoneCatalog
from skyplot.geometry import Ring, polygons_overlap

logger = logging.getLogger(__name__)


def find_intersecting_zone_objects(ring: Ring, catalog: ZoneCatalog) -> List[RestrictedZone]:
    """Get all catalog zones that overlap the ring, in catalog order."""
    return [zone for zone in catalog if polygons_overlap(ring, zone.ring)]


def find_intersecting_zones(ring: Ring, catalog: ZoneCatalog) -> List[str]:
    """
    Names of the no-fly zones a drawn ring overlaps.

    Args:
        ring: Drawn polygon as (lat, lon) vertices
        catalog: No-fly zone catalog

    Returns:
        Zone names in catalog order; empty if none overlap
    """
    names = [zone.name for zone in find_intersecting_zone_objects(ring, catalog)]
    if names:
        logger.info(f"Drawn polygon overlaps {len(names)} no-fly zone(s): {', '.join(names)}")
    return names
