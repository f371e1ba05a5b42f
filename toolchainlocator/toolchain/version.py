"""
Version values used to rank installed toolchains.

:class:`Version` implements Semantic Versioning 2.0.0 precedence, including
pre-release identifiers ('-nightly', '-beta.1', '-dev'). :class:`VersionKey`
pairs a version with the build date reported by the compiler so that
installations sharing a version (e.g. several nightlies) are ordered by date.
"""

import functools
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..core.exceptions import InvalidVersionError

_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_ID = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_ID = r"[0-9a-zA-Z-]+"


@functools.total_ordering
class Version:
    """
    Semantic version parser and comparator.

    Supports the full ``major.minor.patch[-prerelease][+build]`` grammar.
    Build metadata is kept for display but never affects comparison, so two
    versions differing only in build metadata are equal.

    Example:
        >>> Version.parse("1.36.0-nightly") < Version.parse("1.36.0")
        True
        >>> Version.parse("1.0.0-beta.2") < Version.parse("1.0.0-beta.11")
        True
    """

    _PATTERN = re.compile(
        rf"^(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
        rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
        rf"(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?$",
        re.ASCII,
    )

    def __init__(
        self,
        major: int,
        minor: int,
        patch: int,
        prerelease: Tuple[str, ...] = (),
        build: Tuple[str, ...] = (),
    ):
        self.major = major
        self.minor = minor
        self.patch = patch
        self.prerelease = tuple(prerelease)
        self.build = tuple(build)

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """
        Parse a semantic version string.

        Args:
            version_string: Version such as "1.32.0" or "1.35.0-dev"

        Returns:
            Parsed Version

        Raises:
            InvalidVersionError: If the string is not a valid semantic version
        """
        match = cls._PATTERN.fullmatch(version_string)
        if not match:
            raise InvalidVersionError(version_string)

        prerelease = match.group("prerelease")
        build = match.group("build")
        return cls(
            int(match.group("major")),
            int(match.group("minor")),
            int(match.group("patch")),
            tuple(prerelease.split(".")) if prerelease else (),
            tuple(build.split(".")) if build else (),
        )

    def _precedence_key(self) -> tuple:
        # A release sorts above any of its pre-releases; within pre-releases,
        # numeric identifiers sort below alphanumeric ones.
        prerelease_key = tuple(
            (0, int(ident), "") if ident.isdigit() else (1, 0, ident)
            for ident in self.prerelease
        )
        return (
            self.major,
            self.minor,
            self.patch,
            0 if self.prerelease else 1,
            prerelease_key,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence_key() == other._precedence_key()

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence_key() < other._precedence_key()

    def __hash__(self) -> int:
        return hash(self._precedence_key())

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text

    def __repr__(self) -> str:
        return f"Version('{self}')"


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class VersionKey:
    """
    Comparable (semantic version, build date) pair.

    Attributes:
        semantic_version: Parsed compiler version, or None when the compiler
            reported something that is not a semantic version
        build_date: Build date in ``YYYY-MM-DD`` form, empty if not reported

    Ordering: an absent version sorts below any present version; equal
    versions are ordered by build date, where ISO-8601 dates compare
    chronologically as strings and the empty date sorts first.
    """

    semantic_version: Optional[Version]
    build_date: str = ""

    def _sort_key(self) -> tuple:
        if self.semantic_version is None:
            return (0, (), self.build_date)
        return (1, self.semantic_version._precedence_key(), self.build_date)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionKey):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: "VersionKey") -> bool:
        if not isinstance(other, VersionKey):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __str__(self) -> str:
        version = (
            str(self.semantic_version) if self.semantic_version is not None else "?"
        )
        if self.build_date:
            return f"{version} ({self.build_date})"
        return version

    @classmethod
    def from_strings(
        cls, version: Union[str, Version, None], build_date: str = ""
    ) -> "VersionKey":
        """
        Build a key from a version string, tolerating invalid versions.

        Args:
            version: Version string, Version, or None
            build_date: Build date string

        Returns:
            VersionKey with ``semantic_version`` None if ``version`` is not
            a valid semantic version
        """
        if isinstance(version, str):
            try:
                version = Version.parse(version)
            except InvalidVersionError:
                version = None
        return cls(version, build_date or "")
