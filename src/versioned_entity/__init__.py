"""Versioned entities: validate data at the version it claims and migrate it to the latest."""

from versioned_entity.entity import VersionedEntity, create_versioned_entity
from versioned_entity.exceptions import (
    EntityInvariantError,
    EntityParseError,
    VersionedEntityError,
)
from versioned_entity.models.result import (
    GivenVersionValidationFailed,
    IntermediateMarkedInitial,
    InvalidVersion,
    NoIntermediateFound,
    ParseErr,
    ParseError,
    ParseErrorType,
    ParseOk,
    ParseResult,
    VersionCheckFailed,
)
from versioned_entity.models.version import (
    InitialVersion,
    UpgradeableVersion,
    VersionDefinition,
    define_version,
)
from versioned_entity.reference import EntityReference, entity_reference
from versioned_entity.registry import VersionRegistry
from versioned_entity.resolver import Resolver, field_resolver
from versioned_entity.validation import Accepted, Rejected, SchemaValidator, Validator

__all__ = [
    "Accepted",
    "EntityInvariantError",
    "EntityParseError",
    "EntityReference",
    "GivenVersionValidationFailed",
    "InitialVersion",
    "IntermediateMarkedInitial",
    "InvalidVersion",
    "NoIntermediateFound",
    "ParseErr",
    "ParseError",
    "ParseErrorType",
    "ParseOk",
    "ParseResult",
    "Rejected",
    "Resolver",
    "SchemaValidator",
    "UpgradeableVersion",
    "Validator",
    "VersionCheckFailed",
    "VersionDefinition",
    "VersionRegistry",
    "VersionedEntity",
    "VersionedEntityError",
    "create_versioned_entity",
    "define_version",
    "entity_reference",
    "field_resolver",
]
