"""Drawn polygon records, session storage and dispatch."""

from .record import (
    PolygonRecord,
    PolygonRecordBuilder,
    CounterIdSource,
    uuid_id_source,
    millisecond_id_source,
    estimate_price,
)
from .store import SessionPolygonStore, SORT_KEYS
from .dispatch import (
    DispatchBlockedError,
    DispatchReceipt,
    DroneDispatcher,
    LoggingDispatcher,
    dispatch_polygon,
)

__all__ = [
    'PolygonRecord',
    'PolygonRecordBuilder',
    'CounterIdSource',
    'uuid_id_source',
    'millisecond_id_source',
    'estimate_price',
    'SessionPolygonStore',
    'SORT_KEYS',
    'DispatchBlockedError',
    'DispatchReceipt',
    'DroneDispatcher',
    'LoggingDispatcher',
    'dispatch_polygon',
]
