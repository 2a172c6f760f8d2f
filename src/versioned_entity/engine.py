"""Migration engine: validate data at its claimed version, then upgrade to latest."""

import logging

from versioned_entity.models.result import (
    GivenVersionValidationFailed,
    IntermediateMarkedInitial,
    InvalidVersion,
    NoIntermediateFound,
    ParseErr,
    ParseOk,
    ParseResult,
    VersionCheckFailed,
)
from versioned_entity.models.version import InitialVersion
from versioned_entity.registry import VersionRegistry, as_version_number
from versioned_entity.resolver import Resolver
from versioned_entity.validation import Rejected

logger = logging.getLogger(__name__)


def migrate(
    registry: VersionRegistry,
    resolver: Resolver,
    data: object,
    *,
    debug_validation: bool = False,
) -> ParseResult:
    """Parse data at the version the resolver reports and migrate it to the latest.

    Every failure is returned as a ParseErr; nothing here raises for bad data
    or a broken registry. Exceptions from upgrade functions propagate.

    With ``debug_validation`` each upgraded payload is also checked against
    its target version and mismatches are logged. The result is unaffected.
    """
    version = resolver(data)
    if version is None:
        return ParseErr(VersionCheckFailed())

    number = as_version_number(version)
    definition = registry.get(number)
    if number is None or definition is None:
        return ParseErr(InvalidVersion(version))
    version = number

    outcome = definition.validate(data)
    if isinstance(outcome, Rejected):
        return ParseErr(GivenVersionValidationFailed(version, definition, outcome.error))

    payload = outcome.value
    for current in range(version + 1, registry.latest_version + 1):
        step = registry.get(current)
        if step is None:
            logger.warning("Cannot migrate v%d data: version %d is not defined", version, current)
            return ParseErr(NoIntermediateFound(current))
        if isinstance(step, InitialVersion):
            logger.warning(
                "Cannot migrate v%d data: intermediate version %d is marked initial",
                version,
                current,
            )
            return ParseErr(IntermediateMarkedInitial(current))

        logger.debug("Upgrading v%d -> v%d", current - 1, current)
        payload = step.up(payload)

        if debug_validation:
            check = step.validate(payload)
            if isinstance(check, Rejected):
                logger.warning(
                    "Upgrade to v%d produced data that does not match v%d: %s",
                    current,
                    current,
                    check.error,
                )

    return ParseOk(payload)
