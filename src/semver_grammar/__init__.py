# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison.

This package validates version strings against the SemVer 2.0.0 grammar
with a hand-written parser that reports the exact offset of any error, and
orders parsed versions by SemVer precedence.

Example:
    >>> from semver_grammar import parse_version, before, ParseError
    >>> 
    >>> version = parse_version("1.0.0-alpha.1+001")
    >>> version.prerelease
    'alpha.1'
    >>> str(version)
    '1.0.0-alpha.1+001'
    >>> 
    >>> before("1.0.0-beta.2", "1.0.0-beta.11")
    True
    >>> 
    >>> try:
    ...     parse_version("1.0.")
    ... except ParseError as e:
    ...     print(e.position, e.reason)
    4 unexpected end of input
"""

__version__ = "0.1.0"

from .errors import ParseError
from .version import Version
from .parser import (
    Parser,
    parse_version,
    is_valid_semver,
)
from .compare import (
    compare_identifiers,
    compare_prerelease,
    compare_versions,
    equals,
    before,
)

__all__ = [
    # Version parsing
    "Version",
    "Parser",
    "parse_version",
    "is_valid_semver",
    "ParseError",
    # Version comparison
    "compare_identifiers",
    "compare_prerelease",
    "compare_versions",
    "equals",
    "before",
]
