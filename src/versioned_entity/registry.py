"""Registry of an entity's version definitions."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from versioned_entity.models.version import InitialVersion, UpgradeableVersion, VersionDefinition


def _is_version_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def as_version_number(value: object) -> int | None:
    """Return value as an int version number, or None if it cannot be one.

    Integral floats such as 2.0 (what JSON decoders often produce) count as
    their int. Bools, fractional floats and non-numbers do not.
    """
    if _is_version_number(value):
        return value  # type: ignore[return-value]
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


class VersionRegistry:
    """Immutable mapping of version number to definition, plus the latest version.

    The mapping may be sparse. Gaps are legal here and are only reported
    when a migration walks into them.
    """

    def __init__(self, versions: Mapping[int, VersionDefinition], latest_version: int):
        """Copy the mapping and check the keys and the latest version.

        Raises:
            ValueError: If a key is not a positive int, a value is not a
                version definition, or latest_version is not a key.
        """
        for number, definition in versions.items():
            if not _is_version_number(number) or number < 1:
                raise ValueError(f"Version numbers must be positive ints, got {number!r}")
            if not isinstance(definition, InitialVersion | UpgradeableVersion):
                raise ValueError(
                    f"Version {number} must be a version definition, got {type(definition).__name__}"
                )
        if not _is_version_number(latest_version) or latest_version not in versions:
            raise ValueError(f"Latest version {latest_version!r} is not defined")

        self._versions: Mapping[int, VersionDefinition] = MappingProxyType(dict(versions))
        self._latest_version = latest_version

    @property
    def latest_version(self) -> int:
        """The version every migration ends at."""
        return self._latest_version

    @property
    def latest(self) -> VersionDefinition:
        """Definition of the latest version."""
        return self._versions[self._latest_version]

    @property
    def versions(self) -> list[int]:
        """Defined version numbers, ascending."""
        return sorted(self._versions)

    def get(self, version: object) -> VersionDefinition | None:
        """Look up a definition. Anything that is not a version number misses."""
        number = as_version_number(version)
        if number is None:
            return None
        return self._versions.get(number)

    def find_defects(self) -> list[str]:
        """Report definition problems that would break migrations.

        Migration detects these on its own; this is for authors who want to
        check an entity up front.
        """
        defects: list[str] = []
        first = min(self._versions)

        for number in range(first, self._latest_version + 1):
            definition = self._versions.get(number)
            if definition is None:
                defects.append(f"version {number} is missing")
            elif number > first and isinstance(definition, InitialVersion):
                defects.append(f"intermediate version {number} is marked initial")

        for number in self._versions:
            if number > self._latest_version:
                defects.append(f"version {number} is newer than latest {self._latest_version}")

        return defects

    def __contains__(self, version: object) -> bool:
        return self.get(version) is not None

    def __iter__(self) -> Iterator[int]:
        return iter(self.versions)

    def __len__(self) -> int:
        return len(self._versions)

    def __repr__(self) -> str:
        return f"VersionRegistry(versions={self.versions}, latest_version={self._latest_version})"
