"""
Parse compiler version output into a :class:`VersionKey`.

Compilers report their version on a single line such as:
- Stable: "rustc 1.32.0 (9fda7c223 2019-01-16)"
- Nightly: "rustc 1.36.0-nightly (e938c2b9a 2019-04-23)"
- Local build: "rustc 1.35.0-dev"
"""

import logging
import re
from typing import Optional, Union

from .version import VersionKey

logger = logging.getLogger(__name__)

# <tool> <version> [(<commit> <YYYY-MM-DD>)]
DEFAULT_VERSION_PATTERN = (
    r"^\S+[ \t]+(\d+(?:\.\d+)+\S*)"
    r"(?:[ \t]+\(\S+[ \t]+(\d{4}-\d{2}-\d{2})\))?"
)


class VersionParser:
    """
    Extract a VersionKey from raw ``--version`` style output.

    The parser owns its compiled pattern. Group 1 of the pattern captures
    the version token and the optional group 2 captures the build date.

    Example:
        >>> parser = VersionParser()
        >>> key = parser.parse(b"rustc 1.32.0 (9fda7c223 2019-01-16)\\n")
        >>> str(key)
        '1.32.0 (2019-01-16)'
    """

    def __init__(self, pattern: Union[str, re.Pattern, None] = None):
        """
        Initialize parser.

        Args:
            pattern: Regular expression with the version in group 1 and an
                optional date in group 2. Defaults to
                :data:`DEFAULT_VERSION_PATTERN`.

        Raises:
            ValueError: If the pattern defines no capture group
        """
        if pattern is None:
            pattern = DEFAULT_VERSION_PATTERN
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.MULTILINE)
        if pattern.groups < 1:
            raise ValueError(
                f"Version pattern must capture the version in group 1: "
                f"{pattern.pattern!r}"
            )
        self.pattern = pattern

    def parse(self, raw: Union[bytes, str]) -> Optional[VersionKey]:
        """
        Parse version output.

        Args:
            raw: Standard output of the compiler, as bytes or text

        Returns:
            - None if the output does not look like version output at all
            - VersionKey with ``semantic_version`` None if the version token
              is not a valid semantic version (the date is kept)
            - VersionKey with both fields populated otherwise
        """
        text = self._decode(raw)

        match = self.pattern.search(text)
        if not match:
            logger.debug(f"No version information in output: {text[:200]!r}")
            return None

        version_token = match.group(1)
        build_date = ""
        if self.pattern.groups >= 2:
            build_date = match.group(2) or ""

        # Group 1 may not participate in the match for custom patterns.
        key = VersionKey.from_strings(version_token, build_date)
        if key.semantic_version is None:
            logger.debug(
                f"No semantic version in {version_token!r}; "
                f"keeping build date {build_date!r}"
            )
        return key

    @staticmethod
    def _decode(raw: Union[bytes, str]) -> str:
        if isinstance(raw, str):
            return raw
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Version output is not valid UTF-8")
            return ""
