"""
Planar geometry primitives for SKYPLOT.

Point-in-polygon and segment-crossing tests over plain (lat, lon) tuples.
Index 0 of a point is treated as x and index 1 as y, in the order the
drawing surface hands coordinates over.

Boundary behaviour is approximate:
- A point lying exactly on a ring edge may classify either way.
- Collinear or endpoint-touching segments are usually reported as not
  crossing, because a zero orientation folds into the clockwise side.

Results for rings that only touch a zone border are therefore unreliable.
"""

from typing import Sequence, Tuple

Point = Tuple[float, float]
Ring = Sequence[Point]


def point_in_polygon(point: Point, ring: Ring) -> bool:
    """
    Check if point is inside ring using ray casting (even-odd rule).

    Args:
        point: (x, y) point to test
        ring: Polygon vertices, implicitly closed

    Returns:
        True if point is inside the ring
    """
    x, y = point
    n = len(ring)
    inside = False

    j = n - 1
    for i in range(n):
        xi, yi = ring[i]
        xj, yj = ring[j]

        if ((yi > y) != (yj > y)) and \
           (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def orientation(a: Point, b: Point, c: Point) -> int:
    """Turn direction of a -> b -> c: 1 counter-clockwise, -1 clockwise, 0 collinear."""
    cross = (c[1] - a[1]) * (b[0] - a[0]) - (b[1] - a[1]) * (c[0] - a[0])
    if cross > 0:
        return 1
    elif cross < 0:
        return -1
    return 0


def _ccw(a: Point, b: Point, c: Point) -> bool:
    return orientation(a, b, c) > 0


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """
    Check if segment p1-p2 properly crosses segment p3-p4.

    Each segment's endpoints must lie on opposite turns of the other
    segment.
    """
    return (_ccw(p1, p3, p4) != _ccw(p2, p3, p4)
            and _ccw(p1, p2, p3) != _ccw(p1, p2, p4))
