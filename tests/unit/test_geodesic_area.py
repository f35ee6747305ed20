"""
Unit tests for geodesic polygon area and dunam conversion.
"""

import math

import pytest

from skyplot.geometry.area import (
    EARTH_RADIUS_M,
    format_area_dunams,
    geodesic_area,
    square_meters_to_dunams,
)


def _equator_square(side_deg):
    return [(0.0, 0.0), (0.0, side_deg), (side_deg, side_deg), (side_deg, 0.0)]


class TestGeodesicArea:

    def test_small_square_at_equator(self):
        """A 0.009 degree square at the equator is roughly one square kilometer."""
        d = math.radians(0.009)
        expected = EARTH_RADIUS_M ** 2 * d * math.sin(d)

        area = geodesic_area(_equator_square(0.009))

        assert area == pytest.approx(expected, rel=1e-9)
        assert area == pytest.approx(1.0e6, rel=0.01)

    def test_orientation_independent(self):
        ring = _equator_square(0.01)
        assert geodesic_area(ring) == pytest.approx(geodesic_area(list(reversed(ring))))

    def test_closing_point_does_not_change_area(self):
        ring = [(32.0, 34.8), (32.0, 34.81), (32.01, 34.81), (32.01, 34.8)]
        assert geodesic_area(ring + [ring[0]]) == pytest.approx(geodesic_area(ring))

    def test_shrinks_with_latitude(self):
        """Same degree extent covers less ground further from the equator."""
        at_equator = geodesic_area(_equator_square(0.01))
        at_32n = geodesic_area([(32.0, 0.0), (32.0, 0.01), (32.01, 0.01), (32.01, 0.0)])
        assert at_32n < at_equator

    @pytest.mark.parametrize("ring", [[], [(0.0, 0.0)], [(0.0, 0.0), (1.0, 1.0)]])
    def test_degenerate_rings_have_zero_area(self, ring):
        assert geodesic_area(ring) == 0.0

    def test_collinear_ring_has_zero_area(self):
        assert geodesic_area([(0.0, 0.0), (0.0, 0.5), (0.0, 1.0)]) == pytest.approx(0.0)


class TestDunams:

    def test_conversion(self):
        assert square_meters_to_dunams(12350.0) == pytest.approx(12.35)

    def test_format(self):
        assert format_area_dunams(12350.0) == "12.35 dunam"
        assert format_area_dunams(0.0) == "0.00 dunam"
