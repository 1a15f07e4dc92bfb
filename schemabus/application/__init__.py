"""
Application Layer - Publishing pipeline services and ports.

    - ports: the EventTransport interface adapters implement
    - services: SizeGuard and the batch partitioner
"""

from .ports import EventTransport, TransportEntryResult
from .services import (
    DEFAULT_MAX_BATCH_SIZE,
    DEFAULT_MAX_ENTRY_BYTES,
    Batches,
    SizeGuard,
    partition,
)

__all__ = [
    "EventTransport",
    "TransportEntryResult",
    "Batches",
    "partition",
    "SizeGuard",
    "DEFAULT_MAX_BATCH_SIZE",
    "DEFAULT_MAX_ENTRY_BYTES",
]
