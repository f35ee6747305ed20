"""
Unit tests for the polygon record builder.
"""

from datetime import datetime, timezone

import pytest

from skyplot.polygons.record import (
    CounterIdSource,
    PolygonRecordBuilder,
    estimate_price,
    millisecond_id_source,
    uuid_id_source,
)

FIXED_TIME = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)
RING = [(32.0, 34.8), (32.0, 34.81), (32.01, 34.81), (32.01, 34.8)]


@pytest.fixture
def builder():
    return PolygonRecordBuilder(
        price_per_square_meter=0.5,
        id_source=CounterIdSource(prefix="poly-"),
        clock=lambda: FIXED_TIME,
        name_prefix="Polygon",
    )


class TestIdSources:

    def test_counter_is_sequential(self):
        ids = CounterIdSource(prefix="p")
        assert [ids(), ids(), ids()] == ["p1", "p2", "p3"]

    def test_counter_start(self):
        ids = CounterIdSource(start=10)
        assert ids() == "10"

    def test_uuid_source_is_unique_hex(self):
        first, second = uuid_id_source(), uuid_id_source()
        assert first != second
        assert len(first) == 32
        int(first, 16)

    def test_millisecond_source_is_numeric(self):
        assert millisecond_id_source().isdigit()


class TestPolygonRecordBuilder:

    def test_price_is_area_times_rate(self, builder):
        record = builder.build(RING, 1234.5, [])
        assert record.estimated_price == 1234.5 * 0.5

    @pytest.mark.parametrize("area", [0.0, 1.0, 999.75, 1.0e6])
    def test_price_for_any_area(self, builder, area):
        assert builder.build(RING, area, []).estimated_price == estimate_price(area, 0.5)

    def test_zero_area_gives_zero_price(self, builder):
        record = builder.build(RING, 0.0, [])
        assert record.area == 0.0
        assert record.estimated_price == 0.0

    def test_injected_id_and_clock(self, builder):
        first = builder.build(RING, 10.0, [])
        second = builder.build(RING, 10.0, [])
        assert first.id == "poly-1"
        assert second.id == "poly-2"
        assert first.created_at == FIXED_TIME

    def test_default_name_from_saved_count(self, builder):
        assert builder.build(RING, 10.0, [], saved_count=0).name == "Polygon 1"
        assert builder.build(RING, 10.0, [], saved_count=3).name == "Polygon 4"

    def test_zone_list_unchanged(self, builder):
        zones = ["Zone C", "Zone A", "Zone B"]
        record = builder.build(RING, 10.0, zones)
        assert list(record.intersecting_no_fly_zones) == zones
        assert record.is_dispatch_blocked is True

    def test_no_zones_not_blocked(self, builder):
        record = builder.build(RING, 10.0, [])
        assert record.intersecting_no_fly_zones == ()
        assert record.is_dispatch_blocked is False

    def test_coordinates_copied(self, builder):
        ring = list(RING)
        record = builder.build(ring, 10.0, [])
        ring.append((0.0, 0.0))
        assert record.coordinates == tuple(RING)

    def test_area_dunams(self, builder):
        assert builder.build(RING, 2500.0, []).area_dunams == pytest.approx(2.5)

    def test_default_sources(self):
        record = PolygonRecordBuilder().build(RING, 100.0, [])
        assert len(record.id) == 32
        assert record.created_at.tzinfo is not None
        assert record.estimated_price == 50.0


class TestPolygonRecord:

    def test_with_name_changes_only_name(self, builder):
        record = builder.build(RING, 10.0, ["Zone A"])
        renamed = record.with_name("North field")

        assert renamed.name == "North field"
        assert renamed.id == record.id
        assert renamed.area == record.area
        assert renamed.estimated_price == record.estimated_price
        assert renamed.created_at == record.created_at
        assert renamed.intersecting_no_fly_zones == record.intersecting_no_fly_zones
        assert record.name == "Polygon 1"

    def test_record_is_frozen(self, builder):
        record = builder.build(RING, 10.0, [])
        with pytest.raises(AttributeError):
            record.area = 20.0
