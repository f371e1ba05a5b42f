"""
toolchainlocator - find the newest installed copy of a toolchain component.

Example:
    >>> from toolchainlocator import find_installed_component
    >>> find_installed_component("rustfmt")
    PosixPath('/home/user/.rustup/toolchains/stable-x86_64-unknown-linux-gnu/bin/rustfmt')
"""

__version__ = "0.1.0"

from toolchainlocator.toolchain.locator import (
    ComponentLocator,
    find_installed_component,
)

__all__ = [
    "__version__",
    "ComponentLocator",
    "find_installed_component",
]
