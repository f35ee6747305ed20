"""
Shared pytest fixtures for SKYPLOT tests.

Environment defaults are set before any api.* import so the cached API
settings and the rate limiter pick them up.
"""

import os

import pytest
from fastapi.testclient import TestClient

# ---------------------------------------------------------------------------
# Section 1: Environment setup (before ANY api.* imports)
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("PRICE_PER_SQUARE_METER", "0.5")
os.environ.setdefault("POLYGON_NAME_PREFIX", "Polygon")
os.environ.pop("NO_FLY_ZONES_PATH", None)

from skyplot.data.no_fly_zones import RestrictedZone, ZoneCatalog  # noqa: E402


# ---------------------------------------------------------------------------
# Section 2: Geometry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def unit_square():
    return [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.fixture
def far_square():
    return [(5.0, 5.0), (6.0, 5.0), (6.0, 6.0), (5.0, 6.0)]


@pytest.fixture
def test_catalog():
    """Three square zones along the diagonal, far from any real airspace."""
    return ZoneCatalog([
        RestrictedZone(
            id="zone_a",
            name="Zone A",
            ring=((0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)),
        ),
        RestrictedZone(
            id="zone_b",
            name="Zone B",
            ring=((10.0, 10.0), (12.0, 10.0), (12.0, 12.0), (10.0, 12.0)),
        ),
        RestrictedZone(
            id="zone_c",
            name="Zone C",
            ring=((3.0, 0.0), (5.0, 0.0), (5.0, 2.0), (3.0, 2.0)),
        ),
    ])


# ---------------------------------------------------------------------------
# Section 3: API client fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def client():
    """TestClient over a fresh application state (bundled catalog, empty store)."""
    from api.main import app
    from api.state import ApplicationState

    ApplicationState.reset()
    with TestClient(app) as test_client:
        yield test_client
    ApplicationState.reset()
