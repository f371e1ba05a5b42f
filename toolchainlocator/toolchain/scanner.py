"""
toolchainlocator/toolchain/scanner.py

Installed toolchain scanning - finds every copy of a component under the
installation root.

Expected layout (depth three below the root):

    <root>/
        stable-x86_64-unknown-linux-gnu/
            bin/
                rustc
                cargo-clippy
        nightly-x86_64-unknown-linux-gnu/
            bin/
                rustc
                cargo-clippy
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

from ..core.platform import executable_name, get_os_name
from .probe import CandidateProbe
from .version import VersionKey

logger = logging.getLogger(__name__)

BIN_DIR_NAME = "bin"
DEFAULT_COMPILER_NAME = "rustc"


@dataclass(frozen=True)
class Candidate:
    """
    An installed copy of the requested component.

    Attributes:
        path: Path to the component executable
        version_key: Version of the toolchain it belongs to, or None if the
            toolchain's compiler gave no usable answer
        compiler_path: Co-located compiler that was asked for the version
    """

    path: Path
    version_key: Optional[VersionKey] = None
    compiler_path: Optional[Path] = None

    @property
    def toolchain_name(self) -> str:
        """Name of the toolchain directory (the parent of ``bin``)."""
        return self.path.parent.parent.name

    def __str__(self) -> str:
        """String representation."""
        version = self.version_key if self.version_key is not None else "unknown"
        return f"{self.toolchain_name} {version} at {self.path}"


class ToolchainScanner:
    """
    Walk the installation root and collect Candidates for a component.

    The walk never goes deeper than ``root/<toolchain>/bin/<file>``. Entries
    that cannot be read are skipped, so a partial scan over stale or
    half-removed installations still returns what it could find.
    """

    MAX_DEPTH = 3

    def __init__(
        self,
        probe: Optional[CandidateProbe] = None,
        compiler_name: str = DEFAULT_COMPILER_NAME,
        platform_os: Optional[str] = None,
    ):
        """
        Initialize scanner.

        Args:
            probe: Probe used to version each toolchain
            compiler_name: Compiler whose version identifies a toolchain
            platform_os: OS whose executable naming applies; defaults to the
                current OS
        """
        self.probe = probe if probe is not None else CandidateProbe()
        self.compiler_name = compiler_name
        self.platform_os = platform_os if platform_os is not None else get_os_name()

    def scan(self, root: Path, component_name: str) -> List[Candidate]:
        """
        Find all installed copies of a component.

        Args:
            root: Installation root holding one directory per toolchain
            component_name: Component executable name without extension

        Returns:
            Candidates in directory enumeration order (empty if the root is
            missing or holds no match)
        """
        root = Path(root)
        file_name = executable_name(component_name, self.platform_os)
        compiler_file_name = executable_name(self.compiler_name, self.platform_os)

        candidates = []
        for path in self._find_components(root, file_name):
            compiler_path = path.parent / compiler_file_name
            version_key = self.probe.probe(compiler_path)
            candidate = Candidate(
                path=path, version_key=version_key, compiler_path=compiler_path
            )
            logger.debug(f"Found candidate {candidate}")
            candidates.append(candidate)

        logger.debug(f"Found {len(candidates)} candidates for {file_name} in {root}")
        return candidates

    def _find_components(self, root: Path, file_name: str) -> Iterator[Path]:
        """
        Yield files named ``file_name`` whose parent directory is ``bin``.

        Args:
            root: Directory to walk
            file_name: Exact file name to match

        Yields:
            Paths of matching files
        """
        for entry in self._walk(root, depth=1):
            if entry.name != file_name or entry.parent.name != BIN_DIR_NAME:
                continue
            try:
                if not entry.is_file():
                    continue
            except OSError as e:
                logger.debug(f"Skipping unreadable entry {entry}: {e}")
                continue
            yield entry

    def _walk(self, directory: Path, depth: int) -> Iterator[Path]:
        """
        Yield entries of ``directory`` and its subdirectories.

        Args:
            directory: Directory to list
            depth: Depth of the entries of ``directory`` below the root

        Yields:
            Entry paths down to :attr:`MAX_DEPTH`
        """
        try:
            entries = list(directory.iterdir())
        except OSError as e:
            logger.debug(f"Cannot list {directory}: {e}")
            return

        for entry in entries:
            yield entry

            if depth >= self.MAX_DEPTH:
                continue

            try:
                is_dir = entry.is_dir()
            except OSError as e:
                logger.debug(f"Skipping unreadable entry {entry}: {e}")
                continue

            if is_dir:
                yield from self._walk(entry, depth + 1)
