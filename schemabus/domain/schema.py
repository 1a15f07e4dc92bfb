"""
Payload schemas and their validation.

Event payloads are described with JSON Schema. A schema can be written by
hand as a dict, or derived from a pydantic model so the Python type and the
schema share a single source of truth:

1. Dict schema:

   schema = {
       "type": "object",
       "properties": {
           "order_id": {"type": "string"},
           "amount": {"type": "number"},
       },
       "required": ["order_id"],
       "additionalProperties": False,
   }

2. Pydantic model:

   from pydantic import BaseModel, ConfigDict

   class OrderCreated(BaseModel):
       model_config = ConfigDict(extra="forbid")
       order_id: str
       amount: float | None = None

   validator = SchemaValidator(OrderCreated)

Validation reports every violated constraint, not only the first one.
"""

import copy
from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for

from .exceptions import SchemaDefinitionError, SchemaViolation, ValidationError


def normalize_schema(schema: Any) -> dict[str, Any]:
    """
    Normalize a schema to a JSON Schema dict.

    Accepts:
    - Dict (or any mapping): deep-copied
    - Pydantic model class: converted via model_json_schema()
    - Pydantic model instance: converted via its class' model_json_schema()

    Args:
        schema: A mapping, Pydantic model class, or Pydantic model instance

    Returns:
        JSON Schema as a dict

    Raises:
        TypeError: If schema is not a supported type
    """
    if isinstance(schema, Mapping):
        return copy.deepcopy(dict(schema))

    if isinstance(schema, type) and hasattr(schema, "model_json_schema"):
        return dict(schema.model_json_schema())

    if hasattr(schema.__class__, "model_json_schema"):
        return dict(schema.__class__.model_json_schema())

    raise TypeError(
        f"schema must be a dict or Pydantic model, got {type(schema).__name__}. "
        f"Examples:\n"
        f"  Event(schema={{'type': 'object', ...}})\n"
        f"  Event(schema=MyPydanticModel)"
    )


class SchemaValidator:
    """
    Validates candidate payloads against one compiled schema.

    The schema is checked once at construction; an invalid schema raises
    SchemaDefinitionError so mistakes surface at wiring time rather than on
    the first publish.

    Example:
        validator = SchemaValidator({"type": "object", "required": ["id"]})
        validator.validate({"id": "abc"})   # returns the payload
        validator.validate({})              # raises ValidationError
    """

    def __init__(self, schema: Any, name: str | None = None) -> None:
        self._schema = normalize_schema(schema)
        self._name = name
        cls = validator_for(self._schema, default=Draft202012Validator)
        try:
            cls.check_schema(self._schema)
        except SchemaError as e:
            raise SchemaDefinitionError(
                f"Invalid schema{f' for {name}' if name else ''}: {e.message}",
                details={"path": "/".join(str(p) for p in e.path)},
            ) from e
        self._validator = cls(self._schema)

    @property
    def schema(self) -> dict[str, Any]:
        """A copy of the compiled schema."""
        return copy.deepcopy(self._schema)

    def iter_violations(self, payload: Any) -> list[SchemaViolation]:
        """Return every violation for payload, ordered by location."""
        errors = sorted(self._validator.iter_errors(payload), key=lambda e: (e.json_path, e.message))
        return [
            SchemaViolation(path=e.json_path, message=e.message, validator=str(e.validator))
            for e in errors
        ]

    def is_valid(self, payload: Any) -> bool:
        return self._validator.is_valid(payload)

    def validate(self, payload: Any) -> Any:
        """
        Validate payload against the schema.

        Returns:
            The payload itself, unchanged

        Raises:
            ValidationError: Listing every violated constraint
        """
        violations = self.iter_violations(payload)
        if violations:
            raise ValidationError(violations, event_name=self._name)
        return payload


def validate(schema: Any, payload: Any) -> Any:
    """Validate payload against schema in one call."""
    return SchemaValidator(schema).validate(payload)
