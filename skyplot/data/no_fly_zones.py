"""
No-fly zone catalog for SKYPLOT.

Restricted airspace is shipped as a GeoJSON FeatureCollection (bundled
noflyzones.json, or a file named by NO_FLY_ZONES_PATH). The catalog is
loaded once at startup and passed explicitly to the zone intersection
pipeline; nothing mutates it afterwards.

GeoJSON stores positions as [lon, lat]. Everything past this module works
in (lat, lon), so rings are swapped on load and swapped back on export.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from skyplot.geometry import Point

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).parent / "noflyzones.json"


@dataclass(frozen=True)
class RestrictedZone:
    """A named no-fly polygon."""
    id: str
    name: str
    # Outer ring as (lat, lon) vertices, without a duplicated closing point
    ring: Tuple[Point, ...]

    def to_geojson(self) -> Dict:
        """Convert to GeoJSON Feature."""
        # GeoJSON uses [lon, lat] order and an explicitly closed ring
        coords = [[lon, lat] for lat, lon in self.ring]
        if coords and coords[0] != coords[-1]:
            coords.append(coords[0])

        return {
            "type": "Feature",
            "id": self.id,
            "properties": {"name": self.name},
            "geometry": {
                "type": "Polygon",
                "coordinates": [coords],
            },
        }

    @classmethod
    def from_geojson(cls, feature: Dict, index: int = 0) -> Optional['RestrictedZone']:
        """
        Create a zone from a GeoJSON Polygon Feature.

        Only the outer ring is used; holes are ignored. Returns None for
        features that are not usable polygons.
        """
        props = feature.get("properties") or {}
        geom = feature.get("geometry") or {}
        zone_id = str(feature.get("id") or f"zone_{index}")

        if geom.get("type") != "Polygon":
            logger.warning(f"Skipping no-fly feature {zone_id}: unsupported geometry {geom.get('type')}")
            return None

        coords_raw = geom.get("coordinates") or [[]]
        # Convert from [lon, lat] to (lat, lon)
        ring = [(float(lat), float(lon)) for lon, lat, *_ in coords_raw[0]]
        if len(ring) > 1 and ring[0] == ring[-1]:
            ring.pop()

        if len(ring) < 3:
            logger.warning(f"Skipping no-fly feature {zone_id}: ring has {len(ring)} distinct points")
            return None

        return cls(
            id=zone_id,
            name=props.get("name") or "Unnamed zone",
            ring=tuple(ring),
        )


class ZoneCatalog:
    """
    Immutable, ordered collection of restricted zones.

    Iteration follows the order of the source FeatureCollection, which is
    also the order in which overlap reports list zone names.
    """

    def __init__(self, zones: Union[List[RestrictedZone], Tuple[RestrictedZone, ...]] = ()):
        self._zones: Tuple[RestrictedZone, ...] = tuple(zones)

    def __iter__(self) -> Iterator[RestrictedZone]:
        return iter(self._zones)

    def __len__(self) -> int:
        return len(self._zones)

    def __repr__(self) -> str:
        return f"ZoneCatalog({len(self._zones)} zones)"

    @property
    def zones(self) -> Tuple[RestrictedZone, ...]:
        return self._zones

    def get_zone(self, zone_id: str) -> Optional[RestrictedZone]:
        """Get a zone by ID."""
        for zone in self._zones:
            if zone.id == zone_id:
                return zone
        return None

    def export_geojson(self) -> Dict:
        """Export all zones as GeoJSON FeatureCollection."""
        return {
            "type": "FeatureCollection",
            "features": [zone.to_geojson() for zone in self._zones],
        }

    @classmethod
    def from_geojson(cls, geojson: Dict) -> 'ZoneCatalog':
        """Build a catalog from a GeoJSON FeatureCollection."""
        if geojson.get("type") != "FeatureCollection":
            raise ValueError("Expected GeoJSON FeatureCollection")

        zones = []
        for index, feature in enumerate(geojson.get("features", [])):
            zone = RestrictedZone.from_geojson(feature, index=index)
            if zone is not None:
                zones.append(zone)

        return cls(zones)


def load_zone_catalog(filepath: Optional[Union[str, Path]] = None) -> ZoneCatalog:
    """
    Load the no-fly zone catalog from a GeoJSON file.

    Args:
        filepath: GeoJSON FeatureCollection; the bundled catalog when None

    Returns:
        ZoneCatalog in file order
    """
    path = Path(filepath) if filepath else BUNDLED_CATALOG_PATH

    with open(path, 'r', encoding='utf-8') as f:
        geojson = json.load(f)

    catalog = ZoneCatalog.from_geojson(geojson)
    logger.info(f"Loaded {len(catalog)} no-fly zones from {path.name}")
    return catalog
