"""
Run a toolchain's compiler to learn which version the toolchain is.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from .version import VersionKey
from .version_parser import VersionParser

logger = logging.getLogger(__name__)

DEFAULT_VERSION_FLAG = "-V"


class CandidateProbe:
    """
    Invoke a compiler with a version flag and parse what it prints.

    Only standard output is consumed; the exit code and standard error are
    ignored. A compiler that cannot be started yields None rather than an
    error so that one broken installation does not stop the lookup.
    """

    def __init__(
        self,
        parser: Optional[VersionParser] = None,
        version_flag: str = DEFAULT_VERSION_FLAG,
        timeout: Optional[float] = None,
    ):
        """
        Initialize probe.

        Args:
            parser: Parser for the compiler output
            version_flag: Flag that makes the compiler print its version
            timeout: Seconds to wait for the compiler, or None to wait
                indefinitely
        """
        self.parser = parser if parser is not None else VersionParser()
        self.version_flag = version_flag
        self.timeout = timeout

    def probe(self, compiler_path: Path) -> Optional[VersionKey]:
        """
        Determine the version of a compiler.

        Args:
            compiler_path: Path to compiler executable

        Returns:
            Parsed VersionKey, or None if the compiler could not be run or
            printed nothing recognizable
        """
        try:
            result = subprocess.run(
                [str(compiler_path), self.version_flag],
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"Timeout running {compiler_path} {self.version_flag}")
            return None
        except (OSError, ValueError) as e:
            logger.debug(f"Failed to run {compiler_path}: {e}")
            return None

        if result.returncode != 0:
            logger.debug(
                f"{compiler_path} {self.version_flag} returned {result.returncode}"
            )

        version_key = self.parser.parse(result.stdout)
        logger.debug(f"Probed {compiler_path}: {version_key}")
        return version_key
