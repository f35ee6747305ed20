"""
Unit tests for engine settings.
"""

import logging

from skyplot.config import DEFAULT_PRICE_PER_SQUARE_METER, Settings


class TestSettings:

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PRICE_PER_SQUARE_METER", "1.25")
        monkeypatch.setenv("POLYGON_NAME_PREFIX", "Field")
        monkeypatch.setenv("NO_FLY_ZONES_PATH", "/tmp/zones.json")

        settings = Settings()

        assert settings.price_per_square_meter == 1.25
        assert settings.polygon_name_prefix == "Field"
        assert settings.no_fly_zones_path == "/tmp/zones.json"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PRICE_PER_SQUARE_METER", raising=False)
        monkeypatch.delenv("NO_FLY_ZONES_PATH", raising=False)

        settings = Settings()

        assert settings.price_per_square_meter == DEFAULT_PRICE_PER_SQUARE_METER
        assert settings.no_fly_zones_path is None

    def test_unparseable_price_uses_default(self, monkeypatch):
        monkeypatch.setenv("PRICE_PER_SQUARE_METER", "cheap")
        assert Settings().price_per_square_meter == DEFAULT_PRICE_PER_SQUARE_METER

    def test_negative_price_is_reset(self, monkeypatch, caplog):
        monkeypatch.setenv("PRICE_PER_SQUARE_METER", "-2")
        with caplog.at_level(logging.WARNING):
            settings = Settings()
        assert settings.price_per_square_meter == DEFAULT_PRICE_PER_SQUARE_METER
        assert "negative" in caplog.text

    def test_configure_logging_applies_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        root = logging.getLogger()
        previous = root.level
        try:
            level = Settings().configure_logging()
            assert level == logging.WARNING
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)

    def test_configure_logging_unknown_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        root = logging.getLogger()
        previous = root.level
        try:
            assert Settings().configure_logging(fmt="%(message)s") == logging.INFO
            assert root.level == logging.INFO
        finally:
            root.setLevel(previous)
