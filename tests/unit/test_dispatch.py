"""
Unit tests for the no-fly dispatch gate.
"""

import logging
from datetime import datetime, timezone

import pytest

from skyplot.polygons.dispatch import (
    DispatchBlockedError,
    DispatchReceipt,
    LoggingDispatcher,
    dispatch_polygon,
)
from skyplot.polygons.record import PolygonRecord


class RecordingDispatcher:
    """Test double that remembers what it was asked to send."""

    def __init__(self):
        self.sent = []

    def send(self, record):
        self.sent.append(record)
        return DispatchReceipt(
            record_id=record.id,
            dispatched_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            service="recording",
        )


def _record(zones=()):
    return PolygonRecord(
        id="p1",
        coordinates=((0.0, 0.0), (0.0, 1.0), (1.0, 1.0)),
        area=100.0,
        estimated_price=50.0,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        name="Polygon 1",
        intersecting_no_fly_zones=tuple(zones),
    )


class TestDispatchPolygon:

    def test_clear_polygon_is_sent(self):
        dispatcher = RecordingDispatcher()
        receipt = dispatch_polygon(_record(), dispatcher)

        assert receipt.record_id == "p1"
        assert receipt.service == "recording"
        assert [r.id for r in dispatcher.sent] == ["p1"]

    def test_overlapping_polygon_is_refused(self):
        dispatcher = RecordingDispatcher()

        with pytest.raises(DispatchBlockedError) as exc_info:
            dispatch_polygon(_record(zones=["Ben Gurion Airport", "Tel Nof Air Base"]), dispatcher)

        assert exc_info.value.record_id == "p1"
        assert exc_info.value.zones == ["Ben Gurion Airport", "Tel Nof Air Base"]
        assert "Ben Gurion Airport" in str(exc_info.value)
        assert dispatcher.sent == []

    def test_refusal_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="skyplot.polygons.dispatch"):
            with pytest.raises(DispatchBlockedError):
                dispatch_polygon(_record(zones=["Zone A"]), RecordingDispatcher())
        assert "Dispatch refused for polygon p1" in caplog.text


class TestLoggingDispatcher:

    def test_send_returns_receipt(self, caplog):
        with caplog.at_level(logging.INFO, logger="skyplot.polygons.dispatch"):
            receipt = LoggingDispatcher().send(_record())

        assert receipt.record_id == "p1"
        assert receipt.service == "log"
        assert receipt.dispatched_at.tzinfo is not None
        assert "Dispatching polygon p1" in caplog.text
