"""
Toolchain lookup module for toolchainlocator.

This module provides functionality for:
- Semantic version and (version, build date) ranking keys
- Parsing compiler version output
- Scanning installed toolchains for a component
- Selecting the best installed copy
"""

from toolchainlocator.core.exceptions import InvalidVersionError
from toolchainlocator.toolchain.version import Version, VersionKey
from toolchainlocator.toolchain.version_parser import (
    DEFAULT_VERSION_PATTERN,
    VersionParser,
)
from toolchainlocator.toolchain.probe import CandidateProbe
from toolchainlocator.toolchain.scanner import Candidate, ToolchainScanner
from toolchainlocator.toolchain.selector import rank_candidates, select_best
from toolchainlocator.toolchain.locator import (
    ComponentLocator,
    find_installed_component,
)

__all__ = [
    # Versions
    "Version",
    "VersionKey",
    "InvalidVersionError",
    # Parsing
    "VersionParser",
    "DEFAULT_VERSION_PATTERN",
    # Probing and scanning
    "CandidateProbe",
    "Candidate",
    "ToolchainScanner",
    # Selection
    "rank_candidates",
    "select_best",
    # Lookup
    "ComponentLocator",
    "find_installed_component",
]
