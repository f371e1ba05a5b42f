"""
Component lookup across installed toolchains.

Ties the pieces together:
- ToolchainScanner finds every copy of the component
- CandidateProbe asks each copy's compiler for its version
- VersionParser turns the compiler output into a VersionKey
- select_best picks the copy with the highest (version, build date)
"""

import logging
from pathlib import Path
from typing import Optional

from ..config.parser import LocatorConfig
from .probe import CandidateProbe
from .scanner import ToolchainScanner
from .selector import select_best
from .version_parser import VersionParser

logger = logging.getLogger(__name__)


class ComponentLocator:
    """
    Finds the newest installed copy of a toolchain component.

    Example:
        >>> locator = ComponentLocator()
        >>> locator.find("cargo-clippy")
        PosixPath('/home/user/.rustup/toolchains/stable-x86_64-unknown-linux-gnu/bin/cargo-clippy')
    """

    def __init__(
        self,
        config: Optional[LocatorConfig] = None,
        platform_os: Optional[str] = None,
    ):
        """
        Initialize locator.

        Args:
            config: Lookup configuration; defaults to :class:`LocatorConfig`
            platform_os: OS whose executable naming applies; defaults to the
                current OS
        """
        self.config = config if config is not None else LocatorConfig()

        parser = VersionParser(self.config.version_pattern)
        probe = CandidateProbe(
            parser=parser,
            version_flag=self.config.version_flag,
            timeout=self.config.probe_timeout,
        )
        self.scanner = ToolchainScanner(
            probe=probe,
            compiler_name=self.config.compiler,
            platform_os=platform_os,
        )

    def find(self, component_name: str, root: Optional[Path] = None) -> Optional[Path]:
        """
        Find the best installed copy of a component.

        Args:
            component_name: Component executable name without extension
            root: Installation root; resolved from the configuration when
                omitted

        Returns:
            Path of the component in the best toolchain, or None if it is
            not installed anywhere

        Raises:
            ValueError: If ``component_name`` is empty
        """
        if not component_name or not component_name.strip():
            raise ValueError("Component name must not be empty")

        if root is None:
            root = self.config.resolve_root()
            if root is None:
                logger.info("No toolchain installation root could be determined")
                return None

        candidates = self.scanner.scan(Path(root), component_name)
        best = select_best(candidates)

        if best is None:
            logger.info(f"{component_name} not found under {root}")
        else:
            logger.info(f"Selected {component_name} at {best}")
        return best


def find_installed_component(
    name: str,
    root: Optional[Path] = None,
    config: Optional[LocatorConfig] = None,
) -> Optional[Path]:
    """
    Find the newest installed copy of a toolchain component.

    Searches every toolchain under the installation root and returns the
    component belonging to the toolchain whose compiler reports the highest
    version, using the compiler build date to order equal versions.

    Args:
        name: Component executable name without extension (e.g., 'rustfmt')
        root: Installation root; defaults to ``$RUSTUP_HOME/toolchains``
        config: Lookup configuration

    Returns:
        Path to the component, or None if it is not installed anywhere

    Example:
        >>> find_installed_component("clippy-driver")
        PosixPath('/home/user/.rustup/toolchains/nightly-x86_64-unknown-linux-gnu/bin/clippy-driver')
    """
    return ComponentLocator(config).find(name, root)
