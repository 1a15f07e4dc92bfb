"""Test data builders for creating domain objects."""

from datetime import datetime
from typing import Any

from ..bus import Bus
from ..domain.envelope import Envelope
from ..event import EventDefinition
from .fakes import FakeTransport

ORDER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "order_id": {"type": "string"},
        "amount": {"type": "number"},
        "items": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["order_id", "amount"],
    "additionalProperties": False,
}


class EnvelopeBuilder:
    """
    Builder for creating Envelopes in tests without going through a schema.

    Example:
        envelope = (EnvelopeBuilder()
            .with_detail({"order_id": "o-1"})
            .with_padding(20_000)
            .build())
    """

    def __init__(self) -> None:
        self._source = "test.source"
        self._detail_type = "TestEvent"
        self._detail: Any = {"id": "test-1"}
        self._event_bus_name = "test-bus"
        self._resources: tuple[str, ...] = ()
        self._time: datetime | None = None

    def with_source(self, source: str) -> "EnvelopeBuilder":
        self._source = source
        return self

    def with_detail_type(self, detail_type: str) -> "EnvelopeBuilder":
        self._detail_type = detail_type
        return self

    def with_detail(self, detail: Any) -> "EnvelopeBuilder":
        self._detail = detail
        return self

    def with_padding(self, size: int) -> "EnvelopeBuilder":
        """Add a string field of `size` characters to the detail."""
        self._detail = {**self._detail, "padding": "x" * size}
        return self

    def with_bus_name(self, name: str) -> "EnvelopeBuilder":
        self._event_bus_name = name
        return self

    def with_resources(self, *resources: str) -> "EnvelopeBuilder":
        self._resources = resources
        return self

    def with_time(self, time: datetime) -> "EnvelopeBuilder":
        self._time = time
        return self

    def build(self) -> Envelope:
        return Envelope(
            source=self._source,
            detail_type=self._detail_type,
            detail=self._detail,
            event_bus_name=self._event_bus_name,
            resources=self._resources,
            time=self._time,
        )

    @classmethod
    def many(cls, count: int, detail_type: str = "TestEvent") -> list[Envelope]:
        """Build `count` small envelopes with distinct details."""
        return [
            cls().with_detail_type(detail_type).with_detail({"id": f"test-{i}"}).build()
            for i in range(count)
        ]


class EventDefinitionBuilder:
    """
    Builder for EventDefinitions attached to a fake-backed bus.

    Example:
        definition = (EventDefinitionBuilder()
            .with_name("OrderCreated")
            .with_schema(ORDER_SCHEMA)
            .build())
    """

    def __init__(self) -> None:
        self._name = "OrderCreated"
        self._source = "shop.orders"
        self._schema: Any = ORDER_SCHEMA
        self._bus: Bus | None = None

    def with_name(self, name: str) -> "EventDefinitionBuilder":
        self._name = name
        return self

    def with_source(self, source: str) -> "EventDefinitionBuilder":
        self._source = source
        return self

    def with_schema(self, schema: Any) -> "EventDefinitionBuilder":
        self._schema = schema
        return self

    def on_bus(self, bus: Bus) -> "EventDefinitionBuilder":
        self._bus = bus
        return self

    def build(self) -> EventDefinition:
        bus = self._bus or Bus("test-bus", FakeTransport())
        return EventDefinition(name=self._name, bus=bus, schema=self._schema, source=self._source)

    @classmethod
    def order_created(cls, bus: Bus | None = None) -> EventDefinition:
        builder = cls()
        if bus is not None:
            builder.on_bus(bus)
        return builder.build()
