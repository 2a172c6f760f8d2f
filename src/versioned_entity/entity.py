"""Versioned entity facade."""

import logging
from collections.abc import Mapping
from typing import Any

from versioned_entity.config import is_debug_validation, is_strict_registry
from versioned_entity.engine import migrate
from versioned_entity.exceptions import EntityParseError
from versioned_entity.models.result import ParseErr, ParseResult
from versioned_entity.models.version import VersionDefinition
from versioned_entity.registry import VersionRegistry
from versioned_entity.resolver import Resolver
from versioned_entity.validation import Accepted

logger = logging.getLogger(__name__)


class VersionedEntity:
    """An entity whose shape has changed over several versions.

    Instances hold only immutable state and can be shared across threads.
    """

    def __init__(
        self,
        registry: VersionRegistry,
        resolver: Resolver,
        *,
        name: str | None = None,
        debug_validation: bool | None = None,
    ):
        """Bind a registry and a resolver.

        Args:
            registry: The entity's version definitions.
            resolver: Maps raw input to its version number, or None.
            name: Optional label used in error messages and logs.
            debug_validation: Re-check every upgrade result against its
                target version and log mismatches. Defaults to
                VE_DEBUG_VALIDATION.
        """
        self._registry = registry
        self._resolver = resolver
        self._name = name
        if debug_validation is None:
            debug_validation = is_debug_validation()
        self._debug_validation = debug_validation

    @property
    def registry(self) -> VersionRegistry:
        return self._registry

    @property
    def latest_version(self) -> int:
        return self._registry.latest_version

    @property
    def name(self) -> str | None:
        return self._name

    def is_valid(self, data: object) -> bool:
        """Return whether data is a valid instance of any version of the entity."""
        version = self._resolver(data)
        if version is None:
            return False
        definition = self._registry.get(version)
        if definition is None:
            return False
        return isinstance(definition.validate(data), Accepted)

    def is_latest(self, data: object) -> bool:
        """Return whether data is valid against the latest version, ignoring the resolver."""
        return isinstance(self._registry.latest.validate(data), Accepted)

    def safe_parse(self, data: object) -> ParseResult:
        """Parse data and migrate it to the latest version, returning errors as data."""
        return migrate(
            self._registry,
            self._resolver,
            data,
            debug_validation=self._debug_validation,
        )

    def parse(self, data: object) -> Any:
        """Parse and migrate data, returning the latest-version value.

        Raises:
            EntityParseError: If safe_parse would have returned an error.
        """
        result = self.safe_parse(data)
        if isinstance(result, ParseErr):
            raise EntityParseError(result.error, self._name)
        return result.value

    def __repr__(self) -> str:
        label = f"{self._name!r}, " if self._name else ""
        return f"VersionedEntity({label}versions={self._registry.versions}, latest={self.latest_version})"


def create_versioned_entity(
    *,
    version_map: Mapping[int, VersionDefinition],
    latest_version: int,
    get_version: Resolver,
    name: str | None = None,
    debug_validation: bool | None = None,
) -> VersionedEntity:
    """Create a versioned entity from its version definitions.

    Registry defects (gaps, intermediate versions marked initial) are logged.
    With VE_STRICT_REGISTRY set they are rejected instead.

    Raises:
        ValueError: If the registry is malformed, or has defects in strict mode.
    """
    registry = VersionRegistry(version_map, latest_version)

    defects = registry.find_defects()
    if defects:
        label = name or "entity"
        if is_strict_registry():
            raise ValueError(f"Invalid {label} definition: {'; '.join(defects)}")
        for defect in defects:
            logger.warning("%s definition: %s", label, defect)

    return VersionedEntity(registry, get_version, name=name, debug_validation=debug_validation)
