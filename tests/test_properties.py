# SPDX-License-Identifier: MIT
"""Property-based tests for parsing and precedence."""

from __future__ import annotations

import string

from hypothesis import given, settings, strategies as st

from semver_grammar import ParseError, before, equals, is_valid_semver, parse_version

numeric_identifiers = st.integers(min_value=0, max_value=10**12).map(str)

alphanumeric_identifiers = st.text(
    alphabet=string.ascii_letters + string.digits + "-", min_size=1, max_size=12
)


@st.composite
def dotted(draw, identifiers, max_parts=4):
    parts = draw(st.lists(identifiers, min_size=1, max_size=max_parts))
    return ".".join(parts)


@st.composite
def valid_versions(draw) -> str:
    """Generate a valid semantic version string."""
    major, minor, patch = draw(st.tuples(numeric_identifiers, numeric_identifiers, numeric_identifiers))
    text = f"{major}.{minor}.{patch}"
    prerelease = draw(st.one_of(st.none(), dotted(alphanumeric_identifiers)))
    if prerelease is not None:
        text += f"-{prerelease}"
    build = draw(st.one_of(st.none(), dotted(alphanumeric_identifiers)))
    if build is not None:
        text += f"+{build}"
    return text


class TestRoundTripProperties:
    """Property: valid versions render back to an equal version."""

    @given(text=valid_versions())
    @settings(max_examples=200)
    def test_valid_versions_parse(self, text):
        assert is_valid_semver(text)

    @given(text=valid_versions())
    @settings(max_examples=200)
    def test_str_reparses_to_equal_version(self, text):
        version = parse_version(text)
        reparsed = parse_version(str(version))
        assert reparsed == version
        assert reparsed.build == version.build

    @given(text=valid_versions())
    @settings(max_examples=100)
    def test_str_is_identity_for_parsed_input(self, text):
        assert str(parse_version(text)) == text


class TestDiagnosticProperties:
    """Property: errors land on the exact offending offset."""

    @given(
        field=st.integers(min_value=0, max_value=2),
        digits=st.text(alphabet=string.digits, min_size=1, max_size=6),
    )
    @settings(max_examples=100)
    def test_leading_zero_position(self, field, digits):
        fields = ["1", "2", "3"]
        fields[field] = "0" + digits
        text = ".".join(fields)
        offset = sum(len(f) + 1 for f in fields[:field]) + 1

        try:
            parse_version(text)
        except ParseError as e:
            assert e.reason == "leading zero is not allowed"
            assert e.section == ("major", "minor", "patch")[field]
            assert e.position == offset
        else:
            raise AssertionError(f"{text!r} should not parse")

    @given(text=valid_versions(), data=st.data())
    @settings(max_examples=100)
    def test_truncation_inside_core_reports_end_of_input(self, text, data):
        core = text.split("-", 1)[0].split("+", 1)[0]
        cuts = [0] + [i + 1 for i, char in enumerate(core) if char == "."]
        truncated = text[: data.draw(st.sampled_from(cuts))]

        try:
            parse_version(truncated)
        except ParseError as e:
            assert e.reason == "unexpected end of input"
            assert e.position == len(truncated)
        else:
            raise AssertionError(f"{truncated!r} should not parse")


class TestPrecedenceProperties:
    """Property: equals and before form a consistent ordering."""

    @given(text=valid_versions())
    @settings(max_examples=100)
    def test_equals_reflexive(self, text):
        assert equals(text, text)
        assert not before(text, text)

    @given(a=valid_versions(), b=valid_versions())
    @settings(max_examples=200)
    def test_before_is_asymmetric(self, a, b):
        assert not (before(a, b) and before(b, a))

    @given(a=valid_versions(), b=valid_versions())
    @settings(max_examples=200)
    def test_equals_is_symmetric(self, a, b):
        assert equals(a, b) == equals(b, a)

    @given(text=valid_versions(), build=dotted(alphanumeric_identifiers))
    @settings(max_examples=100)
    def test_build_never_affects_precedence(self, text, build):
        base = text.split("+", 1)[0]
        other = f"{base}+{build}"
        assert equals(base, other)
        assert not before(base, other)
        assert not before(other, base)

    @given(a=valid_versions(), b=valid_versions(), c=valid_versions())
    @settings(max_examples=200)
    def test_before_is_transitive(self, a, b, c):
        if before(a, b) and before(b, c):
            assert before(a, c)

    @given(
        major=st.integers(min_value=0, max_value=1000),
        minor=st.integers(min_value=0, max_value=1000),
        patch=st.integers(min_value=0, max_value=1000),
        other=st.tuples(
            st.integers(min_value=0, max_value=1000),
            st.integers(min_value=0, max_value=1000),
            st.integers(min_value=0, max_value=1000),
        ),
    )
    @settings(max_examples=200)
    def test_core_order_matches_tuple_order(self, major, minor, patch, other):
        a = f"{major}.{minor}.{patch}"
        b = "{}.{}.{}".format(*other)
        assert before(a, b) == ((major, minor, patch) < other)
