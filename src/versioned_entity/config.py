"""Environment-variable-based configuration."""

import os


def is_debug_validation() -> bool:
    """Return True if VE_DEBUG_VALIDATION is set to TRUE."""
    return os.environ.get("VE_DEBUG_VALIDATION", "").upper() == "TRUE"


def is_strict_registry() -> bool:
    """Return True if VE_STRICT_REGISTRY is set to TRUE."""
    return os.environ.get("VE_STRICT_REGISTRY", "").upper() == "TRUE"
