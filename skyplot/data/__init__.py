"""Reference data: the bundled no-fly zone catalog."""

from .no_fly_zones import (
    BUNDLED_CATALOG_PATH,
    RestrictedZone,
    ZoneCatalog,
    load_zone_catalog,
)

__all__ = [
    'BUNDLED_CATALOG_PATH',
    'RestrictedZone',
    'ZoneCatalog',
    'load_zone_catalog',
]
