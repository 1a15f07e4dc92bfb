"""
schemabus - Typed, batched publishing to an event bus.

Quick Start:
    from schemabus import Bus, EventDefinition
    from schemabus.adapters.outbound.eventbridge import EventBridgeTransport

    bus = Bus("orders", EventBridgeTransport(region_name="eu-west-1"))

    order_created = EventDefinition(
        name="OrderCreated",
        bus=bus,
        source="shop.orders",
        schema={
            "type": "object",
            "properties": {"order_id": {"type": "string"}},
            "required": ["order_id"],
            "additionalProperties": False,
        },
    )

    order_created.publish({"order_id": "o-1"})

    result = bus.put([order_created.create({"order_id": f"o-{i}"}) for i in range(25)])
    if not result.ok:
        ...

Schemas can also come from pydantic models, see schemabus.domain.schema.
"""

__version__ = "1.0.0"

from .application.ports import EventTransport, TransportEntryResult
from .application.services import (
    DEFAULT_MAX_BATCH_SIZE,
    DEFAULT_MAX_ENTRY_BYTES,
    SizeGuard,
    partition,
)
from .bus import Bus
from .domain import (
    EntryOutcome,
    Envelope,
    OutcomeKind,
    PayloadTooLargeError,
    PublishError,
    PublishResult,
    SchemaBusError,
    SchemaDefinitionError,
    SchemaValidator,
    SchemaViolation,
    TransportDispatchError,
    TransportItemRejection,
    ValidationError,
    validate,
)
from .event import EventDefinition

__all__ = [
    # Simple API
    "Bus",
    "EventDefinition",
    "Envelope",
    "PublishResult",
    "EntryOutcome",
    "OutcomeKind",
    # Pipeline pieces
    "SchemaValidator",
    "validate",
    "SizeGuard",
    "partition",
    "DEFAULT_MAX_BATCH_SIZE",
    "DEFAULT_MAX_ENTRY_BYTES",
    # Transport port
    "EventTransport",
    "TransportEntryResult",
    # Errors
    "SchemaBusError",
    "SchemaViolation",
    "ValidationError",
    "SchemaDefinitionError",
    "PayloadTooLargeError",
    "TransportDispatchError",
    "TransportItemRejection",
    "PublishError",
]
