"""
Centralized exception hierarchy for toolchainlocator.

Lookup misses are never exceptions: a component that cannot be found, a
toolchain whose compiler cannot be launched, or version output that cannot
be recognized all surface as ``None``. The exceptions below cover
programming and configuration errors only.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class ToolchainLocatorError(Exception):
    """Base exception for all toolchainlocator errors."""

    pass


# ============================================================================
# Version Exceptions
# ============================================================================


class InvalidVersionError(ToolchainLocatorError, ValueError):
    """Raised when a string is not a valid semantic version."""

    def __init__(self, version_string: str):
        self.version_string = version_string
        super().__init__(f"Invalid semantic version: {version_string!r}")


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(ToolchainLocatorError):
    """Configuration parsing or validation error."""

    pass
