# SPDX-License-Identifier: MIT
"""Recursive-descent parser for Semantic Versioning 2.0.0 strings.

The parser walks the input left to right with a single cursor and at most
one character of lookahead. It never backtracks, so the first violation it
meets is reported with the exact offset where scanning stopped.

Grammar (abridged from https://semver.org/#backusnaur-form-grammar-for-valid-semver-versions)::

    <valid semver>   ::= <version core> ["-" <pre-release>] ["+" <build>]
    <version core>   ::= <numeric identifier> "." <numeric identifier> "." <numeric identifier>
    <pre-release>    ::= <identifier> | <identifier> "." <pre-release>
    <build>          ::= <identifier> | <identifier> "." <build>
    <numeric identifier> ::= "0" | <positive digit> <digit>*
    <identifier>     ::= (<letter> | <digit> | "-")+

Pre-release and build identifiers are accepted as any non-empty run of
letters, digits and hyphens. Whether an identifier is numeric only matters
when comparing, see :mod:`semver_grammar.compare`.
"""

from __future__ import annotations

import string
from typing import Optional

from .errors import ParseError
from .version import Version

DIGITS = frozenset(string.digits)
POSITIVE_DIGITS = frozenset("123456789")
LETTERS = frozenset(string.ascii_letters)
IDENTIFIER_CHARACTERS = DIGITS | LETTERS | {"-"}

SECTION_CORE = "version core"
SECTION_PRERELEASE = "pre-release"
SECTION_BUILD = "build"


def _describe(char: Optional[str]) -> str:
    return "end of input" if char is None else repr(char)


class Parser:
    """Single-use scanner over one version string.

    Attributes:
        text: The input being parsed
        pos: Offset of the next unconsumed character
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def parse(self) -> Version:
        """Parse the whole input as a semantic version.

        Raises:
            ParseError: On the first grammar violation
        """
        major, minor, patch = self._parse_version_core()

        prerelease: Optional[str] = None
        if self._consume("-"):
            prerelease = self._parse_identifiers(SECTION_PRERELEASE)

        build: Optional[str] = None
        if self._consume("+"):
            build = self._parse_identifiers(SECTION_BUILD)

        if self.pos < len(self.text):
            raise self._error(f"unexpected trailing characters: {self.text[self.pos:]!r}")

        return Version(major=major, minor=minor, patch=patch, prerelease=prerelease, build=build)

    # Rules

    def _parse_version_core(self) -> tuple[int, int, int]:
        major = self._parse_numeric_identifier("major")
        if not self._consume("."):
            raise self._error("missing dot separator after major", SECTION_CORE)

        minor = self._parse_numeric_identifier("minor")
        if not self._consume("."):
            raise self._error("missing dot separator after minor", SECTION_CORE)

        patch = self._parse_numeric_identifier("patch")
        return major, minor, patch

    def _parse_numeric_identifier(self, section: str) -> int:
        if self._consume("0"):
            if self._peek() in DIGITS:
                raise self._error("leading zero is not allowed", section)
            return 0

        char = self._peek()
        if char is None:
            raise self._error("unexpected end of input", section)
        if char not in POSITIVE_DIGITS:
            raise self._error(f"expected positive digit, got {char!r}", section)

        start = self.pos
        self.pos += 1
        while self._peek() in DIGITS:
            self.pos += 1
        return int(self.text[start : self.pos])

    def _parse_identifiers(self, section: str) -> str:
        """Parse one or more dot-separated identifiers and return them joined."""
        start = self.pos
        self._parse_identifier(section)
        while self._consume("."):
            self._parse_identifier(section)
        return self.text[start : self.pos]

    def _parse_identifier(self, section: str) -> None:
        start = self.pos
        while self._peek() in IDENTIFIER_CHARACTERS:
            self.pos += 1
        if self.pos == start:
            raise self._error(
                f"expected alphanumeric identifier, got {_describe(self._peek())}", section
            )

    # Cursor helpers

    def _peek(self) -> Optional[str]:
        """Return the current character, or None at end of input."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def _consume(self, char: str) -> bool:
        if self._peek() == char:
            self.pos += 1
            return True
        return False

    def _error(self, reason: str, section: Optional[str] = None) -> ParseError:
        return ParseError(self.text, self.pos, reason, section)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string of the form MAJOR.MINOR.PATCH[-prerelease][+build].
            Surrounding whitespace is not stripped.

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("1.0.0-alpha.1+001")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1', build='001')

        >>> parse_version("1.00.0")
        Traceback (most recent call last):
            ...
        semver_grammar.errors.ParseError: invalid minor: leading zero is not allowed (at position 3)
    """
    if not isinstance(version_string, str):
        raise ParseError(
            str(version_string), 0, f"version must be a string, got {type(version_string).__name__}"
        )
    return Parser(version_string).parse()


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    try:
        parse_version(version_string)
    except ParseError:
        return False
    return True
