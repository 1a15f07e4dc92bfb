"""
Domain Layer - Event schemas, envelopes and outcomes.

This layer has no dependency on any transport:
    - schema: payload validation against JSON Schema
    - envelope: the immutable wire form of one event
    - results: per-entry outcomes and the aggregate PublishResult
    - exceptions: the error taxonomy
"""

from .envelope import Envelope, serialize_detail
from .exceptions import (
    PayloadTooLargeError,
    PublishError,
    SchemaBusError,
    SchemaDefinitionError,
    SchemaViolation,
    TransportDispatchError,
    TransportItemRejection,
    ValidationError,
)
from .results import EntryOutcome, OutcomeKind, PublishResult
from .schema import SchemaValidator, normalize_schema, validate

__all__ = [
    "Envelope",
    "serialize_detail",
    "EntryOutcome",
    "OutcomeKind",
    "PublishResult",
    "SchemaValidator",
    "normalize_schema",
    "validate",
    "SchemaBusError",
    "SchemaViolation",
    "ValidationError",
    "SchemaDefinitionError",
    "PayloadTooLargeError",
    "TransportDispatchError",
    "TransportItemRejection",
    "PublishError",
]
