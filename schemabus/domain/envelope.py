"""Envelope - the wire form of one event instance."""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# EventBridge counts a set Time field as a fixed 14 bytes.
TIME_FIELD_BYTES = 14


def serialize_detail(detail: Any) -> str:
    """Serialize a payload to the compact JSON string used as Detail."""
    return json.dumps(
        detail, separators=(",", ":"), ensure_ascii=False, allow_nan=False, default=str
    )


@dataclass(frozen=True)
class Envelope:
    """
    A validated event ready for dispatch.

    Envelopes are immutable. Build them through EventDefinition.create so the
    detail is guaranteed to satisfy the event schema.

    Attributes:
        source: Source tag of the owning event definition
        detail_type: Name of the owning event definition
        detail: The validated payload
        event_bus_name: Name of the bus the event is published to
        resources: Optional resource ARNs the event concerns
        time: Optional event timestamp
    """

    source: str
    detail_type: str
    detail: Any
    event_bus_name: str
    resources: tuple[str, ...] = field(default_factory=tuple)
    time: datetime | None = None
    _serialized: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.source:
            raise ValueError("source cannot be empty")
        if not self.detail_type:
            raise ValueError("detail_type cannot be empty")
        if isinstance(self.resources, list):
            object.__setattr__(self, "resources", tuple(self.resources))
        # Detail is fixed at construction; raises ValueError for non-finite numbers
        object.__setattr__(self, "_serialized", serialize_detail(self.detail))

    @property
    def serialized_detail(self) -> str:
        return self._serialized

    def to_entry(self, event_bus_name: str | None = None) -> dict[str, Any]:
        """Build the PutEvents request entry for this envelope."""
        entry: dict[str, Any] = {
            "Source": self.source,
            "DetailType": self.detail_type,
            "Detail": self.serialized_detail,
            "EventBusName": event_bus_name or self.event_bus_name,
        }
        if self.resources:
            entry["Resources"] = list(self.resources)
        if self.time is not None:
            entry["Time"] = self.time
        return entry

    @property
    def size(self) -> int:
        """Entry size in bytes, computed the way EventBridge does."""
        size = TIME_FIELD_BYTES if self.time is not None else 0
        size += len(self.source.encode("utf-8"))
        size += len(self.detail_type.encode("utf-8"))
        size += len(self.serialized_detail.encode("utf-8"))
        for resource in self.resources:
            size += len(resource.encode("utf-8"))
        return size
