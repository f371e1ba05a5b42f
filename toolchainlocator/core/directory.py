"""
Installation root resolution for toolchainlocator.

Toolchains managed by rustup live side by side under a single directory:

    $RUSTUP_HOME/ (default ~/.rustup or %USERPROFILE%\\.rustup):
        - toolchains/
            - stable-x86_64-unknown-linux-gnu/bin/{rustc, cargo, ...}
            - nightly-2019-04-23-x86_64-unknown-linux-gnu/bin/...

The lookup core accepts any root path; this module only supplies the
default one.
"""

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

RUSTUP_HOME_ENV = "RUSTUP_HOME"
DEFAULT_RUSTUP_DIR_NAME = ".rustup"
TOOLCHAINS_DIR_NAME = "toolchains"


def get_rustup_home() -> Optional[Path]:
    """
    Get the rustup home directory.

    Returns:
        ``$RUSTUP_HOME`` if set and non-empty, otherwise ``~/.rustup``.
        None if the home directory cannot be determined.

    Example:
        >>> get_rustup_home()
        PosixPath('/home/user/.rustup')  # on Linux, RUSTUP_HOME unset
    """
    custom_home = os.environ.get(RUSTUP_HOME_ENV)
    if custom_home:
        return Path(custom_home)

    try:
        home = Path.home()
    except RuntimeError as e:
        logger.debug(f"Cannot determine home directory: {e}")
        return None

    return home / DEFAULT_RUSTUP_DIR_NAME


def get_toolchains_root(rustup_home: Optional[Path] = None) -> Optional[Path]:
    """
    Get the directory holding all installed toolchains.

    Args:
        rustup_home: rustup home directory; resolved with
            :func:`get_rustup_home` when omitted

    Returns:
        Path to ``<rustup_home>/toolchains`` or None if no home is known
    """
    if rustup_home is None:
        rustup_home = get_rustup_home()
        if rustup_home is None:
            return None

    return Path(rustup_home) / TOOLCHAINS_DIR_NAME
