# SPDX-License-Identifier: MIT
"""Version precedence following the SemVer 2.0.0 specification.

Precedence is decided by major, minor and patch compared numerically, then
by the pre-release identifiers compared one by one:

- identifiers made only of digits compare numerically
- numeric identifiers have lower precedence than alphanumeric ones
- other identifiers compare lexically in ASCII order
- a larger set of identifiers wins if all preceding ones are equal
- a version without a pre-release beats one with a pre-release

Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .version import Version

_CORE_FIELDS = ("major", "minor", "patch")


def _cmp(a, b) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _is_numeric(identifier: str) -> bool:
    return bool(identifier) and all(char in string.digits for char in identifier)


def _coerce(version: Union[str, "Version"]) -> "Version":
    if isinstance(version, str):
        from .parser import parse_version

        return parse_version(version)
    return version


def compare_identifiers(a: str, b: str) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1 if a < b
        0 if a == b
        1 if a > b

    Examples:
        >>> compare_identifiers("2", "11")
        -1
        >>> compare_identifiers("11", "alpha")
        -1
        >>> compare_identifiers("beta", "alpha")
        1
    """
    a_numeric = _is_numeric(a)
    b_numeric = _is_numeric(b)

    if a_numeric and b_numeric:
        return _cmp(int(a), int(b))
    if a_numeric:
        return -1
    if b_numeric:
        return 1
    return _cmp(a, b)


def compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).

    Examples:
        >>> compare_prerelease("rc.2", "rc.11")
        -1
        >>> compare_prerelease(None, "alpha")
        1
    """
    if pre1 is None and pre2 is None:
        return 0
    if pre1 is None:
        return 1
    if pre2 is None:
        return -1

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        result = compare_identifiers(p1, p2)
        if result != 0:
            return result

    # All compared parts equal - the shorter list sorts first
    return _cmp(len(parts1), len(parts2))


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have equal precedence
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0", "1.0.0-rc.1")
        1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in _CORE_FIELDS:
        result = _cmp(getattr(v1, attr), getattr(v2, attr))
        if result != 0:
            return result

    return compare_prerelease(v1.prerelease, v2.prerelease)


def equals(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    """Return True if both versions agree on major, minor, patch and pre-release.

    Pre-release strings are compared as written, so "1.0.0-1" and
    "1.0.0-01" are not equal even though neither precedes the other.
    Build metadata is ignored.
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)
    return (
        v1.major == v2.major
        and v1.minor == v2.minor
        and v1.patch == v2.patch
        and v1.prerelease == v2.prerelease
    )


def before(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    """Return True if version1 has strictly lower precedence than version2.

    Examples:
        >>> before("1.0.0-alpha", "1.0.0")
        True
        >>> before("1.0.0+build1", "1.0.0+build2")
        False
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in _CORE_FIELDS:
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return val1 < val2

    return compare_prerelease(v1.prerelease, v2.prerelease) < 0
