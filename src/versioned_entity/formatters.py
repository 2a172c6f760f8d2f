"""Compact human-readable rendering of parse errors."""

from typing import Any

from versioned_entity.models.result import (
    GivenVersionValidationFailed,
    IntermediateMarkedInitial,
    InvalidVersion,
    NoIntermediateFound,
    ParseError,
    VersionCheckFailed,
)


def format_issue(issue: dict[str, Any]) -> str:
    """Format: variables.0.value: Input should be a valid string."""
    loc = ".".join(str(part) for part in issue.get("loc", ()))
    msg = issue.get("msg", "invalid")
    return f"{loc}: {msg}" if loc else msg


def format_parse_error(error: ParseError, entity_name: str | None = None) -> str:
    """One-line summary of a parse error, followed by indented issues if any."""
    prefix = f"[{error.type}]"
    if entity_name:
        prefix = f"{prefix} {entity_name}:"

    if isinstance(error, VersionCheckFailed):
        return f"{prefix} could not determine the version of the data"
    if isinstance(error, InvalidVersion):
        return f"{prefix} version {error.version!r} is not defined"
    if isinstance(error, GivenVersionValidationFailed):
        lines = [f"{prefix} data does not match version {error.version}"]
        lines.extend(f"  {format_issue(issue)}" for issue in error.issues)
        return "\n".join(lines)
    if isinstance(error, NoIntermediateFound):
        return f"{prefix} no definition for intermediate version {error.missing_ver}"
    if isinstance(error, IntermediateMarkedInitial):
        return f"{prefix} intermediate version {error.ver} is marked initial"
    raise TypeError(f"Unknown parse error: {error!r}")
