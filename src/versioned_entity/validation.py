"""Validator protocol and the pydantic-backed implementation."""

from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import TypeAdapter, ValidationError


@dataclass(frozen=True)
class Accepted:
    """The value passed validation; ``value`` is the validated output."""

    value: Any
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Rejected:
    """The value failed validation."""

    error: ValidationError
    ok: ClassVar[bool] = False

    @property
    def issues(self) -> list[dict[str, Any]]:
        """Structured detail: one dict per failure with loc, msg and type."""
        return list(self.error.errors(include_url=False))


ValidationOutcome = Accepted | Rejected


@runtime_checkable
class Validator(Protocol):
    """Minimal contract the migration engine needs from a validation library."""

    def validate(self, data: object) -> ValidationOutcome:
        """Validate data, returning Accepted or Rejected. Must not raise for bad data."""
        ...


class SchemaValidator:
    """Validates data against any type pydantic understands."""

    def __init__(self, schema: Any):
        """Build the type adapter once; it is reused for every call."""
        self.schema = schema
        self.adapter: TypeAdapter[Any] = TypeAdapter(schema)

    def validate(self, data: object) -> ValidationOutcome:
        """Run pydantic validation and convert a ValidationError into Rejected."""
        try:
            return Accepted(self.adapter.validate_python(data))
        except ValidationError as e:
            return Rejected(e)

    def __repr__(self) -> str:
        name = getattr(self.schema, "__name__", repr(self.schema))
        return f"SchemaValidator({name})"


def as_validator(schema: Any) -> Validator:
    """Return schema unchanged if it already is a Validator, else wrap it for pydantic."""
    if isinstance(schema, Validator) and not isinstance(schema, type):
        return schema
    return SchemaValidator(schema)
