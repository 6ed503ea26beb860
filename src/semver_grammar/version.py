# SPDX-License-Identifier: MIT
"""The parsed semantic version value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .compare import before, equals


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed semantic version.

    Instances are produced by :func:`semver_grammar.parse_version`. Equality
    and ordering follow SemVer precedence, so build metadata is ignored by
    ``==``, ``<`` and ``hash()`` alike.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional dot-separated pre-release identifiers (e.g., "alpha.1")
        build: Optional dot-separated build metadata (e.g., "build.123", "001")
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string, see :func:`semver_grammar.parse_version`."""
        from .parser import parse_version

        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build is not None:
            version += f"+{self.build}"
        return version

    def equals(self, other: Version) -> bool:
        """Return True if both versions have the same precedence fields."""
        return equals(self, other)

    def before(self, other: Version) -> bool:
        """Return True if this version has lower precedence than ``other``."""
        return before(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return equals(self, other)

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return before(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return before(other, self)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return before(self, other) or equals(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return before(other, self) or equals(self, other)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        if self.prerelease is None:
            return ()
        return tuple(self.prerelease.split("."))

    @property
    def build_identifiers(self) -> tuple[str, ...]:
        if self.build is None:
            return ()
        return tuple(self.build.split("."))
