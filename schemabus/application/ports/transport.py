"""EventTransport port - interface for sending entries to an event bus."""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportEntryResult:
    """
    Result for one entry of a transport batch call.

    An entry without an error_code counts as delivered.
    """

    event_id: str | None = None
    error_code: str | None = None
    error_message: str | None = None

    @property
    def is_success(self) -> bool:
        return self.error_code is None

    @classmethod
    def success(cls, event_id: str) -> "TransportEntryResult":
        return cls(event_id=event_id)

    @classmethod
    def failure(cls, error_code: str, error_message: str | None = None) -> "TransportEntryResult":
        return cls(error_code=error_code, error_message=error_message)

    @classmethod
    def from_response_entry(cls, entry: dict[str, Any]) -> "TransportEntryResult":
        """Create from one element of a PutEvents response's Entries list."""
        if entry.get("ErrorCode"):
            return cls.failure(entry["ErrorCode"], entry.get("ErrorMessage"))
        return cls(event_id=entry.get("EventId"))


@runtime_checkable
class EventTransport(Protocol):
    """
    Port for delivering entries to an event bus.

    Implementations:
        - EventBridgeTransport: AWS EventBridge via boto3
        - FakeTransport: For testing

    Contract:
        - `entries` is non-empty and no longer than the transport's batch ceiling
        - The returned list corresponds positionally to `entries`
        - A failure of the call as a whole raises TransportDispatchError
    """

    def send(self, entries: list[dict[str, Any]]) -> list[TransportEntryResult]:
        """
        Send one batch of entries.

        Args:
            entries: PutEvents request entries

        Returns:
            One result per entry, in the same order
        """
        ...
