"""
EventDefinition - a named event type bound to a bus.

Example:
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

    envelope = order_created.create({"order_id": "o-1"})
    result = order_created.publish({"order_id": "o-2"})
    order_created.pattern  # {"source": ["shop.orders"], "detail-type": ["OrderCreated"]}
"""

import copy
import logging
from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any

from .domain.envelope import Envelope
from .domain.exceptions import SchemaViolation, ValidationError
from .domain.results import PublishResult
from .domain.schema import SchemaValidator

if TYPE_CHECKING:
    from .bus import Bus

logger = logging.getLogger(__name__)


class EventDefinition:
    """
    One named event type: its payload schema, source tag and bus.

    The bus is a back-reference only; definitions never manage its lifetime.
    The schema is copied and compiled at construction and cannot be changed
    afterwards.

    Args:
        name: Event name, used as the entry's DetailType
        bus: Bus the events are published to
        schema: JSON Schema dict or pydantic model describing the payload
        source: Source tag attached to every entry
    """

    def __init__(self, name: str, bus: "Bus", schema: Any, source: str) -> None:
        if not name:
            raise ValueError("Event name cannot be empty")
        if not source:
            raise ValueError("Event source cannot be empty")
        self._name = name
        self._bus = bus
        self._source = source
        self._validator = SchemaValidator(schema, name=name)
        self._pattern = {"source": [source], "detail-type": [name]}

    @property
    def name(self) -> str:
        return self._name

    @property
    def bus(self) -> "Bus":
        return self._bus

    @property
    def source(self) -> str:
        return self._source

    @property
    def schema(self) -> dict[str, Any]:
        return self._validator.schema

    @property
    def pattern(self) -> dict[str, list[str]]:
        """Rule pattern matching this event, for infrastructure tooling."""
        return copy.deepcopy(self._pattern)

    def __repr__(self) -> str:
        return f"EventDefinition(name={self._name!r}, source={self._source!r}, bus={self._bus.name!r})"

    def validate(self, payload: Any) -> Any:
        """Validate a payload; returns it unchanged or raises ValidationError."""
        return self._validator.validate(_as_plain(payload))

    def create(
        self,
        payload: Any,
        *,
        resources: Sequence[str] | None = None,
        time: datetime | None = None,
    ) -> Envelope:
        """
        Validate payload and build its envelope.

        The envelope holds its own copy of the validated detail, so later
        changes to payload do not reach the transport.

        Args:
            payload: Event detail (dict or pydantic model instance)
            resources: Optional resource ARNs
            time: Optional event time

        Raises:
            ValidationError: If payload does not satisfy the schema or
                cannot be serialized as strict JSON
        """
        detail = copy.deepcopy(self.validate(payload))
        try:
            return Envelope(
                source=self._source,
                detail_type=self._name,
                detail=detail,
                event_bus_name=self._bus.name,
                resources=tuple(resources or ()),
                time=time,
            )
        except ValueError as e:
            # schema-valid but not strict JSON, e.g. NaN or Infinity
            raise ValidationError(
                [SchemaViolation(path="$", message=str(e), validator="json")],
                event_name=self._name,
            ) from e

    def publish(self, payload: Any, **kwargs: Any) -> PublishResult:
        """
        Validate, build and put a single event.

        Raises:
            ValidationError: Before any transport call when payload is invalid
        """
        envelope = self.create(payload, **kwargs)
        return self._bus.put([envelope])

    async def publish_async(self, payload: Any, **kwargs: Any) -> PublishResult:
        envelope = self.create(payload, **kwargs)
        return await self._bus.put_async([envelope])


def _as_plain(payload: Any) -> Any:
    # pydantic instances are validated in their JSON form
    if hasattr(payload, "model_dump"):
        return payload.model_dump(mode="json")
    return payload
