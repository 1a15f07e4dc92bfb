"""
Ports - Interfaces for external systems.

Ports define how the application layer interacts with the outside world.
They are implemented by adapters in the adapters layer.
"""

from .transport import EventTransport, TransportEntryResult

__all__ = [
    "EventTransport",
    "TransportEntryResult",
]
