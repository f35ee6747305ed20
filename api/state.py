"""
Shared state for SKYPLOT API.

One ApplicationState per process holds the no-fly catalog (loaded once,
read-only), the record builder, the session polygon store and the drone
dispatcher. Routers get it through get_app_state().
"""
import threading
import logging
from typing import Optional, Dict, Any
from datetime import datetime, timezone

from skyplot.config import settings as engine_settings
from skyplot.data.no_fly_zones import ZoneCatalog, load_zone_catalog
from skyplot.polygons.dispatch import DroneDispatcher, LoggingDispatcher
from skyplot.polygons.record import PolygonRecordBuilder
from skyplot.polygons.store import SessionPolygonStore

logger = logging.getLogger(__name__)


class ApplicationState:
    """
    Singleton application state manager.

    Use get_app_state() to access the singleton instance. The catalog is
    never mutated after load; the store does its own locking.
    """

    _instance: Optional['ApplicationState'] = None
    _lock: threading.Lock = threading.Lock()

    def __new__(cls):
        """Ensure singleton pattern."""
        if cls._instance is None:
            with cls._lock:
                # Double-check locking
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize application state (only once)."""
        if self._initialized:
            return

        self._initialized = True
        self._catalog: ZoneCatalog = load_zone_catalog(engine_settings.no_fly_zones_path)
        self._builder = PolygonRecordBuilder(
            price_per_square_meter=engine_settings.price_per_square_meter,
            name_prefix=engine_settings.polygon_name_prefix,
        )
        self._store = SessionPolygonStore()
        self._dispatcher: DroneDispatcher = LoggingDispatcher()
        self._startup_time = datetime.now(timezone.utc)

        logger.info("Application state initialized")

    @property
    def catalog(self) -> ZoneCatalog:
        """No-fly zone catalog (read-only)."""
        return self._catalog

    @property
    def builder(self) -> PolygonRecordBuilder:
        return self._builder

    @property
    def store(self) -> SessionPolygonStore:
        return self._store

    @property
    def dispatcher(self) -> DroneDispatcher:
        return self._dispatcher

    def configure(
        self,
        catalog: Optional[ZoneCatalog] = None,
        builder: Optional[PolygonRecordBuilder] = None,
        dispatcher: Optional[DroneDispatcher] = None,
    ):
        """
        Swap collaborators at startup or in tests.

        Replacing the catalog does not touch records already built.
        """
        with self._lock:
            if catalog is not None:
                self._catalog = catalog
            if builder is not None:
                self._builder = builder
            if dispatcher is not None:
                self._dispatcher = dispatcher

    @property
    def uptime_seconds(self) -> float:
        """Get application uptime in seconds."""
        return (datetime.now(timezone.utc) - self._startup_time).total_seconds()

    def health_check(self) -> Dict[str, Any]:
        """Health status of each component."""
        return {
            'zones_loaded': len(self._catalog),
            'polygons_saved': self._store.count(),
            'uptime_seconds': self.uptime_seconds,
        }

    @classmethod
    def reset(cls):
        """Drop the singleton so the next access rebuilds it (tests)."""
        with cls._lock:
            cls._instance = None


def get_app_state() -> ApplicationState:
    """
    Get the application state singleton.

    Returns:
        ApplicationState: The singleton application state instance
    """
    return ApplicationState()
