"""
Core functionality for toolchainlocator.

This package contains the foundational modules that other components depend on.
"""

from .directory import (
    get_rustup_home,
    get_toolchains_root,
)

from .platform import (
    get_os_name,
    executable_name,
    requires_executable_suffix,
    clear_platform_cache,
)

from .exceptions import (
    ToolchainLocatorError,
    InvalidVersionError,
    ConfigError,
)

__all__ = [
    # Directory
    "get_rustup_home",
    "get_toolchains_root",
    # Platform
    "get_os_name",
    "executable_name",
    "requires_executable_suffix",
    "clear_platform_cache",
    # Exceptions
    "ToolchainLocatorError",
    "InvalidVersionError",
    "ConfigError",
]
