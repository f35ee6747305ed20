"""
Session polygon store.

Holds the polygons saved during the running session. Nothing is written
to disk; the store lives as long as the process.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional

from .record import PolygonRecord

logger = logging.getLogger(__name__)

# Sort keys for list(); all orderings are descending
SORT_KEYS: Dict[str, Callable[[PolygonRecord], object]] = {
    "date": lambda record: record.created_at,
    "area": lambda record: record.area,
    "price": lambda record: record.estimated_price,
}


class SessionPolygonStore:
    """
    Thread-safe in-memory store of saved polygon records.

    Records keep their insertion order. Only the display name of a stored
    record can change after it is saved.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._records: Dict[str, PolygonRecord] = {}

    def save(self, record: PolygonRecord) -> PolygonRecord:
        """Add a record, replacing any record with the same ID."""
        with self._lock:
            self._records[record.id] = record
        logger.info(f"Saved polygon {record.id} ({record.name})")
        return record

    def save_new(self, build: Callable[[int], PolygonRecord]) -> PolygonRecord:
        """
        Build and add a record in one step.

        build receives the number of records already saved. The count and
        the insert happen under the store lock, so concurrent saves never
        see the same count.
        """
        with self._lock:
            return self.save(build(len(self._records)))

    def get(self, record_id: str) -> Optional[PolygonRecord]:
        """Get a record by ID."""
        with self._lock:
            return self._records.get(record_id)

    def rename(self, record_id: str, name: str) -> Optional[PolygonRecord]:
        """Change a record's display name. Returns the updated record, or None if missing."""
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return None
            updated = record.with_name(name)
            self._records[record_id] = updated
            return updated

    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns True if removed."""
        with self._lock:
            if record_id in self._records:
                del self._records[record_id]
                logger.info(f"Deleted polygon {record_id}")
                return True
            return False

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self):
        with self._lock:
            self._records.clear()

    def list(self, search: Optional[str] = None, sort_by: str = "date") -> List[PolygonRecord]:
        """
        List saved records.

        Args:
            search: Case-insensitive substring filter on the name
            sort_by: "date" (newest first), "area" or "price" (largest first)

        Raises:
            ValueError: Unknown sort key
        """
        if sort_by not in SORT_KEYS:
            raise ValueError(f"Invalid sort_by '{sort_by}'. Valid values: {list(SORT_KEYS)}")

        with self._lock:
            records = list(self._records.values())

        if search:
            term = search.lower()
            records = [r for r in records if term in r.name.lower()]

        return sorted(records, key=SORT_KEYS[sort_by], reverse=True)
