"""
Geodesic polygon area.

Spherical approximation used by the map drawing surface to report the
area of a freshly drawn polygon. The record builder treats the result as
an opaque input; the API only falls back to this when the client did not
send an area of its own.
"""

import numpy as np

from .primitives import Ring

# WGS84 equatorial radius (meters)
EARTH_RADIUS_M = 6378137.0

SQUARE_METERS_PER_DUNAM = 1000.0


def geodesic_area(ring: Ring) -> float:
    """
    Area of a (lat, lon) ring on the sphere, in square meters.

    Sums (lon2 - lon1) * (2 + sin(lat1) + sin(lat2)) over the closed ring
    and scales by R^2 / 2. Rings with fewer than 3 points have zero area.
    """
    if len(ring) < 3:
        return 0.0

    coords = np.radians(np.asarray(ring, dtype=float))
    lats = coords[:, 0]
    lons = coords[:, 1]
    next_lats = np.roll(lats, -1)
    next_lons = np.roll(lons, -1)

    total = np.sum((next_lons - lons) * (2.0 + np.sin(lats) + np.sin(next_lats)))
    return float(abs(total * EARTH_RADIUS_M * EARTH_RADIUS_M / 2.0))


def square_meters_to_dunams(area_m2: float) -> float:
    """Convert square meters to metric dunams."""
    return area_m2 / SQUARE_METERS_PER_DUNAM


def format_area_dunams(area_m2: float) -> str:
    """Human readable area, e.g. '12.35 dunam'."""
    return f"{square_meters_to_dunams(area_m2):.2f} dunam"
