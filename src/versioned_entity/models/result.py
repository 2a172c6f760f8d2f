"""Parse result models: success, or one of five error kinds."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar, NoReturn

from pydantic import ValidationError

from versioned_entity.exceptions import EntityParseError
from versioned_entity.models.version import VersionDefinition


class ParseErrorType(StrEnum):
    """Why parse-and-migrate failed."""

    VER_CHECK_FAIL = "VER_CHECK_FAIL"
    INVALID_VER = "INVALID_VER"
    GIVEN_VER_VALIDATION_FAIL = "GIVEN_VER_VALIDATION_FAIL"
    BUG_NO_INTERMEDIATE_FOUND = "BUG_NO_INTERMEDIATE_FOUND"
    BUG_INTERMEDIATE_MARKED_INITIAL = "BUG_INTERMEDIATE_MARKED_INITIAL"


@dataclass(frozen=True)
class VersionCheckFailed:
    """The resolver could not determine a version. The data is probably not this entity."""

    type: ClassVar[ParseErrorType] = ParseErrorType.VER_CHECK_FAIL
    is_definition_bug: ClassVar[bool] = False


@dataclass(frozen=True)
class InvalidVersion:
    """The resolved version is not defined in the entity's registry."""

    version: Any
    type: ClassVar[ParseErrorType] = ParseErrorType.INVALID_VER
    is_definition_bug: ClassVar[bool] = False


@dataclass(frozen=True)
class GivenVersionValidationFailed:
    """The data claims a known version but does not match that version's shape."""

    version: int
    version_def: VersionDefinition
    error: ValidationError
    type: ClassVar[ParseErrorType] = ParseErrorType.GIVEN_VER_VALIDATION_FAIL
    is_definition_bug: ClassVar[bool] = False

    @property
    def issues(self) -> list[dict[str, Any]]:
        """Field paths and reasons from the validation error."""
        return list(self.error.errors(include_url=False))


@dataclass(frozen=True)
class NoIntermediateFound:
    """The registry has a gap between the data's version and the latest.

    Example: latest is 3 and only versions 1 and 3 are defined. Data at
    version 1 cannot be migrated because there is no step 1 -> 2.
    """

    missing_ver: int
    type: ClassVar[ParseErrorType] = ParseErrorType.BUG_NO_INTERMEDIATE_FOUND
    is_definition_bug: ClassVar[bool] = True


@dataclass(frozen=True)
class IntermediateMarkedInitial:
    """A version between the data's version and the latest is marked initial."""

    ver: int
    type: ClassVar[ParseErrorType] = ParseErrorType.BUG_INTERMEDIATE_MARKED_INITIAL
    is_definition_bug: ClassVar[bool] = True


ParseError = (
    VersionCheckFailed
    | InvalidVersion
    | GivenVersionValidationFailed
    | NoIntermediateFound
    | IntermediateMarkedInitial
)


@dataclass(frozen=True)
class ParseOk:
    """Parsing succeeded; ``value`` is shaped as the latest version."""

    value: Any
    ok: ClassVar[bool] = True

    def unwrap(self) -> Any:
        """Return the migrated value."""
        return self.value


@dataclass(frozen=True)
class ParseErr:
    """Parsing failed with one of the five error kinds."""

    error: ParseError
    ok: ClassVar[bool] = False

    def unwrap(self) -> NoReturn:
        """Raise EntityParseError for this failure."""
        raise EntityParseError(self.error)


ParseResult = ParseOk | ParseErr
