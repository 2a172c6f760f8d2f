"""Exception hierarchy.

Parse failures are returned as data by ``safe_parse``; these exceptions are
only raised by ``parse``/``unwrap`` and by the entity reference adapter.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from versioned_entity.models.result import ParseError


class VersionedEntityError(Exception):
    """Base class for all versioned entity errors."""


class EntityParseError(VersionedEntityError, ValueError):
    """Raised when data could not be parsed and migrated to the latest version."""

    def __init__(self, error: "ParseError", entity_name: str | None = None):
        from versioned_entity.formatters import format_parse_error

        self.error = error
        self.entity_name = entity_name
        super().__init__(format_parse_error(error, entity_name))


class EntityInvariantError(VersionedEntityError, RuntimeError):
    """Membership check passed but parse-and-migrate failed.

    This points at a broken entity definition, not at bad input, and is
    never reported as an ordinary validation error. ``error`` is the
    ParseError, or the exception an upgrade function raised.
    """

    def __init__(self, entity: Any, error: "ParseError | Exception"):
        from versioned_entity.formatters import format_parse_error

        self.entity = entity
        self.error = error
        if isinstance(error, Exception):
            detail = f"An upgrade raised {type(error).__name__}: {error}"
        else:
            detail = format_parse_error(error, getattr(entity, "name", None))
        super().__init__(
            "Invalid entity definition: is_valid() accepted the value but safe_parse() "
            f"failed. {detail}"
        )
