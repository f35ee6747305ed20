"""Planar geometry engine: point-in-polygon, segment crossing, polygon overlap."""

from .primitives import Point, Ring, point_in_polygon, orientation, segments_intersect
from .overlap import ring_edges, polygons_overlap
from .area import geodesic_area, square_meters_to_dunams, format_area_dunams

__all__ = [
    'Point',
    'Ring',
    'point_in_polygon',
    'orientation',
    'segments_intersect',
    'ring_edges',
    'polygons_overlap',
    'geodesic_area',
    'square_meters_to_dunams',
    'format_area_dunams',
]
