"""Entity Validation — checks a merged entity against its pydantic "valid state" model.

Invariants:
    - validate() never raises; it returns every violation pydantic reports
    - Violation.field is the wire (camelCase) name clients sent, not the attribute
    - The entity is only read (from_attributes), never modified

Design Decisions:
    - Validation runs on the entity after the payload is merged onto it, so a PUT
      that sends one field is checked against the full resulting record
    - Shape errors (wrong JSON types) are caught earlier by the payload models;
      the record models here own content rules (non-blank, max length)
"""

from dataclasses import dataclass

from pydantic import BaseModel, ValidationError

from library_api.core.errors import EntityValidationError


@dataclass(frozen=True)
class Violation:
    """A single failed constraint on one field."""
    field: str
    message: str
    type: str = "value_error"


def _wire_field(schema: type[BaseModel], loc: tuple) -> str:
    """Dotted wire name for an error location; attribute lookups report the
    python name, so the first segment is mapped back to its alias."""
    if not loc:
        return ""
    head, *rest = loc
    field = schema.model_fields.get(head) if isinstance(head, str) else None
    if field is not None and field.alias:
        head = field.alias
    return ".".join(str(part) for part in (head, *rest))


def validate(entity: object, schema: type[BaseModel]) -> list[Violation]:
    """Validate entity attributes against schema. Empty list means valid."""
    try:
        schema.model_validate(entity, from_attributes=True)
    except ValidationError as e:
        return [
            Violation(
                field=_wire_field(schema, err["loc"]),
                message=err["msg"],
                type=err["type"],
            )
            for err in e.errors()
        ]
    return []


def ensure_valid(entity: object, schema: type[BaseModel]) -> None:
    """Raise EntityValidationError carrying all violations, if any."""
    violations = validate(entity, schema)
    if violations:
        raise EntityValidationError(violations)
