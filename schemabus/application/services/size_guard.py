"""SizeGuard - enforces the transport's per-entry size ceiling."""

import logging

from ...domain.envelope import Envelope
from ...domain.exceptions import PayloadTooLargeError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRY_BYTES = 10 * 1024


class SizeGuard:
    """
    Checks envelopes against a maximum serialized entry size.

    Example:
        guard = SizeGuard(max_entry_bytes=10 * 1024)
        guard.check(envelope)  # raises PayloadTooLargeError when oversized
    """

    def __init__(self, max_entry_bytes: int = DEFAULT_MAX_ENTRY_BYTES) -> None:
        if max_entry_bytes < 1:
            raise ValueError("max_entry_bytes must be positive")
        self.max_entry_bytes = max_entry_bytes

    def check(self, envelope: Envelope) -> None:
        size = envelope.size
        if size > self.max_entry_bytes:
            logger.debug(
                f"Entry {envelope.detail_type} is {size} bytes, limit {self.max_entry_bytes}"
            )
            raise PayloadTooLargeError(size, self.max_entry_bytes, envelope.detail_type)

    def fits(self, envelope: Envelope) -> bool:
        return envelope.size <= self.max_entry_bytes
