# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing semantic version strings."""

from __future__ import annotations

from typing import Optional


class ParseError(Exception):
    """Raised when a string is not a valid semantic version.

    Attributes:
        version: The raw input that failed to parse
        position: Zero-based offset of the first offending character
        reason: The grammar violation, without position or section
        section: Part of the version being parsed ("major", "minor",
            "patch", "pre-release", "build") or None for whole-input errors
    """

    def __init__(
        self,
        version: str,
        position: int,
        reason: str,
        section: Optional[str] = None,
    ):
        self.version = version
        self.position = position
        self.reason = reason
        self.section = section
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """Return the full human-readable diagnostic."""
        if self.section:
            return f"invalid {self.section}: {self.reason} (at position {self.position})"
        return f"{self.reason} (at position {self.position})"

    def pointer(self) -> str:
        """Return the input with a caret under the offending position.

        Examples:
            >>> print(ParseError("1.00.0", 3, "leading zero is not allowed", "minor").pointer())
            1.00.0
               ^
        """
        return f"{self.version}\n{' ' * self.position}^"

    def __repr__(self) -> str:
        return (
            f"ParseError(version={self.version!r}, position={self.position}, "
            f"reason={self.reason!r}, section={self.section!r})"
        )
