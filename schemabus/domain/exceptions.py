"""Domain-specific exceptions."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .results import PublishResult


class SchemaBusError(Exception):
    """Base exception for all schemabus errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


@dataclass(frozen=True)
class SchemaViolation:
    """A single constraint a payload failed to satisfy."""

    path: str
    message: str
    validator: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class ValidationError(SchemaBusError):
    """Raised when a payload does not satisfy its event schema."""

    def __init__(self, violations: list[SchemaViolation], event_name: str | None = None):
        prefix = f"Invalid payload for event '{event_name}'" if event_name else "Invalid payload"
        lines = "; ".join(str(v) for v in violations)
        super().__init__(
            f"{prefix}: {lines}",
            details={"event_name": event_name, "violations": [str(v) for v in violations]},
        )
        self.violations = list(violations)
        self.event_name = event_name


class SchemaDefinitionError(SchemaBusError):
    """Raised when an event schema is itself not a valid JSON Schema."""


class PayloadTooLargeError(SchemaBusError):
    """Raised when a serialized entry exceeds the transport's size ceiling."""

    def __init__(self, size: int, limit: int, detail_type: str | None = None):
        super().__init__(
            f"Entry of {size} bytes exceeds the {limit} byte limit",
            details={"size": size, "limit": limit, "detail_type": detail_type},
        )
        self.size = size
        self.limit = limit
        self.detail_type = detail_type


class TransportDispatchError(SchemaBusError):
    """Raised when a whole batch call to the transport fails."""

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message, details={"error_code": error_code})
        self.error_code = error_code


class TransportItemRejection(SchemaBusError):
    """An individual entry rejected by the transport."""

    def __init__(self, error_code: str | None, error_message: str | None, index: int | None = None):
        super().__init__(
            f"Entry {index} rejected: {error_code}: {error_message}",
            details={"error_code": error_code, "error_message": error_message, "index": index},
        )
        self.error_code = error_code
        self.error_message = error_message
        self.index = index


class PublishError(SchemaBusError):
    """Raised on request when a publish call did not deliver every entry."""

    def __init__(self, result: "PublishResult"):
        failed = result.failed
        super().__init__(
            f"{len(failed)} of {len(result)} entries were not delivered",
            details={"failed_indexes": [o.index for o in failed]},
        )
        self.result = result

    @property
    def failures(self) -> list[Any]:
        return self.result.failed
