"""Per-entry outcomes and the aggregate publish result."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .envelope import Envelope
from .exceptions import (
    PayloadTooLargeError,
    PublishError,
    SchemaBusError,
    TransportDispatchError,
    TransportItemRejection,
)


class OutcomeKind(Enum):
    """What happened to one submitted envelope."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class EntryOutcome:
    """
    Outcome for one envelope, keyed by its submission index.

    Attributes:
        index: Position of the envelope in the submitted sequence
        envelope: The submitted envelope
        kind: Outcome category
        event_id: Identifier assigned by the transport when accepted
        error_code: Failure code (transport code, or a local category)
        error_message: Human-readable failure reason
        error: The exception describing the failure, if any
    """

    index: int
    envelope: Envelope
    kind: OutcomeKind
    event_id: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    error: SchemaBusError | None = field(default=None, compare=False, repr=False)

    @property
    def is_accepted(self) -> bool:
        return self.kind is OutcomeKind.ACCEPTED

    @classmethod
    def accepted(cls, index: int, envelope: Envelope, event_id: str | None) -> "EntryOutcome":
        return cls(index=index, envelope=envelope, kind=OutcomeKind.ACCEPTED, event_id=event_id)

    @classmethod
    def rejected(
        cls, index: int, envelope: Envelope, error_code: str | None, error_message: str | None
    ) -> "EntryOutcome":
        return cls(
            index=index,
            envelope=envelope,
            kind=OutcomeKind.REJECTED,
            error_code=error_code,
            error_message=error_message,
            error=TransportItemRejection(error_code, error_message, index),
        )

    @classmethod
    def too_large(
        cls, index: int, envelope: Envelope, error: PayloadTooLargeError
    ) -> "EntryOutcome":
        return cls(
            index=index,
            envelope=envelope,
            kind=OutcomeKind.PAYLOAD_TOO_LARGE,
            error_code="PayloadTooLarge",
            error_message=error.message,
            error=error,
        )

    @classmethod
    def transport_error(
        cls, index: int, envelope: Envelope, error: TransportDispatchError
    ) -> "EntryOutcome":
        return cls(
            index=index,
            envelope=envelope,
            kind=OutcomeKind.TRANSPORT_ERROR,
            error_code=error.error_code or "TransportError",
            error_message=error.message,
            error=error,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "kind": self.kind.value,
            "detail_type": self.envelope.detail_type,
            "event_id": self.event_id,
            "error_code": self.error_code,
            "error_message": self.error_message,
        }


@dataclass
class PublishResult:
    """
    Aggregate outcome of a publish call.

    Holds exactly one EntryOutcome per submitted envelope, ordered by
    submission index. A put that returns without raising may still contain
    failures; inspect `failed` or call `raise_for_failures()`.
    """

    outcomes: list[EntryOutcome] = field(default_factory=list)
    batch_count: int = 0

    def __post_init__(self) -> None:
        self.outcomes = sorted(self.outcomes, key=lambda o: o.index)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[EntryOutcome]:
        return iter(self.outcomes)

    def __getitem__(self, index: int) -> EntryOutcome:
        return self.outcomes[index]

    @property
    def accepted(self) -> list[EntryOutcome]:
        return [o for o in self.outcomes if o.is_accepted]

    @property
    def failed(self) -> list[EntryOutcome]:
        return [o for o in self.outcomes if not o.is_accepted]

    @property
    def failed_entry_count(self) -> int:
        return len(self.failed)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def event_ids(self) -> list[str | None]:
        return [o.event_id for o in self.outcomes]

    def of_kind(self, kind: OutcomeKind) -> list[EntryOutcome]:
        return [o for o in self.outcomes if o.kind is kind]

    def raise_for_failures(self) -> "PublishResult":
        """Raise PublishError if any entry was not delivered."""
        if not self.ok:
            raise PublishError(self)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "failed_entry_count": self.failed_entry_count,
            "batch_count": self.batch_count,
            "entries": [o.to_dict() for o in self.outcomes],
        }
