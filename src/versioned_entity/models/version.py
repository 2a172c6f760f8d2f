"""Version definition models.

A version is either the initial shape of an entity, which has nothing to
upgrade from, or an upgradeable shape that knows how to build itself from the
version immediately before it.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from versioned_entity.validation import SchemaValidator, ValidationOutcome, Validator, as_validator


@dataclass(frozen=True)
class InitialVersion:
    """The first version of an entity. Carries no upgrade function."""

    validator: Validator
    initial: ClassVar[bool] = True

    @property
    def schema(self) -> Any:
        """The pydantic schema behind the validator, or the validator itself."""
        return _schema_of(self.validator)

    def validate(self, data: object) -> ValidationOutcome:
        """Validate data against this version's shape."""
        return self.validator.validate(data)


@dataclass(frozen=True)
class UpgradeableVersion:
    """A later version of an entity with an upgrade from the previous version."""

    validator: Validator
    up: Callable[[Any], Any]
    initial: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if not callable(self.up):
            raise TypeError(f"Upgradeable version needs a callable 'up', got {self.up!r}")

    @property
    def schema(self) -> Any:
        """The pydantic schema behind the validator, or the validator itself."""
        return _schema_of(self.validator)

    def validate(self, data: object) -> ValidationOutcome:
        """Validate data against this version's shape."""
        return self.validator.validate(data)


VersionDefinition = InitialVersion | UpgradeableVersion


def _schema_of(validator: Validator) -> Any:
    if isinstance(validator, SchemaValidator):
        return validator.schema
    return validator


def define_version(
    schema: Any,
    *,
    initial: bool,
    up: Callable[[Any], Any] | None = None,
) -> VersionDefinition:
    """Define one version of an entity.

    Args:
        schema: A pydantic-validatable type (model, TypedDict, Annotated, ...)
            or an object implementing the Validator protocol.
        initial: Whether this is the entity's first version.
        up: Upgrade from the previous version's validated value. Required
            unless ``initial`` is True, forbidden when it is.

    Raises:
        ValueError: If ``up`` is given for an initial version or missing
            for a non-initial one.
    """
    validator = as_validator(schema)
    if initial:
        if up is not None:
            raise ValueError("An initial version cannot have an 'up' function")
        return InitialVersion(validator)
    if up is None:
        raise ValueError("A non-initial version requires an 'up' function")
    return UpgradeableVersion(validator, up)
