"""Application services used by the Bus publishing pipeline."""

from .batcher import DEFAULT_MAX_BATCH_SIZE, Batches, partition
from .size_guard import DEFAULT_MAX_ENTRY_BYTES, SizeGuard

__all__ = [
    "Batches",
    "partition",
    "DEFAULT_MAX_BATCH_SIZE",
    "SizeGuard",
    "DEFAULT_MAX_ENTRY_BYTES",
]
