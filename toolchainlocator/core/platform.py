"""
Platform naming conventions for toolchain executables.

Toolchain layouts are identical across platforms except for the executable
file extension. Both the component lookup and the compiler path derivation
go through :func:`executable_name` so the suffix rule lives in one place.

Usage:
    from toolchainlocator.core.platform import get_os_name, executable_name

    name = executable_name("rustc", get_os_name())
    # 'rustc' on Linux/macOS, 'rustc.exe' on Windows
"""

import functools
import platform
from typing import Optional

WINDOWS_EXECUTABLE_SUFFIX = ".exe"


@functools.lru_cache(maxsize=1)
def get_os_name() -> str:
    """
    Detect the current operating system.

    This function is cached - it only runs detection once per process.

    Returns:
        Normalized OS name: 'windows', 'macos', 'linux', or the lowercased
        ``platform.system()`` value for anything else
    """
    system = platform.system().lower()

    if system == "windows":
        return "windows"
    elif system == "darwin":
        return "macos"
    elif system == "linux":
        return "linux"
    return system


def requires_executable_suffix(os_name: str) -> bool:
    """Return True if executables on ``os_name`` carry a file extension."""
    return os_name == "windows"


def executable_name(base_name: str, os_name: Optional[str] = None) -> str:
    """
    Get the on-disk file name of an executable.

    Args:
        base_name: Executable name without extension (e.g., 'rustc')
        os_name: Target OS name; defaults to the current OS

    Returns:
        File name with the platform's executable suffix appended when needed

    Example:
        >>> executable_name("cargo-clippy", "windows")
        'cargo-clippy.exe'
        >>> executable_name("cargo-clippy", "linux")
        'cargo-clippy'
    """
    if os_name is None:
        os_name = get_os_name()

    if requires_executable_suffix(os_name) and not base_name.lower().endswith(
        WINDOWS_EXECUTABLE_SUFFIX
    ):
        return base_name + WINDOWS_EXECUTABLE_SUFFIX
    return base_name


def clear_platform_cache():
    """
    Clear the OS detection cache.

    Useful for testing or if platform changes (unlikely in practice).
    """
    get_os_name.cache_clear()
