"""
Polygon overlap detection.

Two rings overlap if a vertex of either lies inside the other, or if any
pair of their edges cross. Both rings are assumed simple (not
self-intersecting); this is not validated and malformed rings give
undefined results.

Cost is O(n*m) in the vertex counts, which is fine for a drawn polygon
against a small zone catalog.
"""

from typing import Iterator, Tuple

from .primitives import Point, Ring, point_in_polygon, segments_intersect


def ring_edges(ring: Ring) -> Iterator[Tuple[Point, Point]]:
    """Yield edges (ring[i], ring[i+1]) including the closing edge."""
    n = len(ring)
    for i in range(n):
        yield ring[i], ring[(i + 1) % n]


def polygons_overlap(poly1: Ring, poly2: Ring) -> bool:
    """
    Check if two rings overlap in any way.

    Checks run cheapest-first and stop at the first hit:
    1. a vertex of poly1 inside poly2
    2. a vertex of poly2 inside poly1
    3. an edge of poly1 crossing an edge of poly2

    Args:
        poly1, poly2: Rings of (lat, lon) vertices; order does not matter

    Returns:
        True if the rings overlap
    """
    for point in poly1:
        if point_in_polygon(point, poly2):
            return True

    for point in poly2:
        if point_in_polygon(point, poly1):
            return True

    edges2 = list(ring_edges(poly2))
    for a1, a2 in ring_edges(poly1):
        for b1, b2 in edges2:
            if segments_intersect(a1, a2, b1, b2):
                return True

    return False
