#!/usr/bin/env python3
"""Unit tests for SemanticVersion"""

import itertools

import pytest

from autoupdate.updater.errors import FormatError
from autoupdate.updater.version import SemanticVersion, compare_versions, parse_version


class TestParse:
    """Test version string parsing"""

    @pytest.mark.parametrize("text,parts", [
        ("1", (1,)),
        ("1.2", (1, 2)),
        ("1.2.3", (1, 2, 3)),
        ("1.2.3.4", (1, 2, 3, 4)),
        ("0.0", (0, 0)),
        ("10.20", (10, 20)),
    ])
    def test_parse_valid(self, text, parts):
        """Test 1 to 4 components are accepted"""
        assert SemanticVersion.parse(text).parts == parts

    @pytest.mark.parametrize("text", [
        "", "1.", ".1", "1..2", "a", "1.b", "1.2.3.4.5", "-1", "1.-2", "1.2-beta", "v1.0", "1.²",
        " 1.2", "1.2 ", "1. 2", "1.2\n",
    ])
    def test_parse_invalid(self, text):
        """Test malformed strings raise FormatError"""
        with pytest.raises(FormatError):
            SemanticVersion.parse(text)

    def test_parse_oversized_component(self):
        """Test a component too long to convert raises FormatError, not a bare ValueError"""
        with pytest.raises(FormatError):
            SemanticVersion.parse("1." + "9" * 5000)

    def test_parse_non_string(self):
        """Test non-string input raises FormatError"""
        with pytest.raises(FormatError):
            SemanticVersion.parse(None)
        with pytest.raises(FormatError):
            SemanticVersion.parse(12)

    def test_format_error_is_value_error(self):
        """FormatError can be caught as ValueError"""
        with pytest.raises(ValueError):
            SemanticVersion.parse("x.y")

    def test_components(self):
        """Test named component accessors"""
        version = SemanticVersion.parse("1.0.3")
        assert version.major == 1
        assert version.minor == 0
        assert version.build == 3
        assert version.revision is None


class TestConstruct:
    """Test explicit construction"""

    def test_renders_only_supplied_components(self):
        assert SemanticVersion(1, 2).to_string() == "1.2"
        assert str(SemanticVersion(1, 0, 3, 2)) == "1.0.3.2"
        assert str(SemanticVersion(7)) == "7"

    def test_negative_component_rejected(self):
        with pytest.raises(FormatError):
            SemanticVersion(1, -1)

    def test_gap_rejected(self):
        with pytest.raises(FormatError):
            SemanticVersion(1, None, 3)
        with pytest.raises(FormatError):
            SemanticVersion(None)

    def test_non_integer_rejected(self):
        with pytest.raises(FormatError):
            SemanticVersion(1, "2")
        with pytest.raises(FormatError):
            SemanticVersion(True)

    @pytest.mark.parametrize("text", ["3", "1.2", "1.2.0", "0.0.0.0", "10.20.30.40"])
    def test_round_trip_keeps_shape(self, text):
        """Rendering then parsing gives back an equal version with the same components"""
        version = SemanticVersion.parse(text)
        again = SemanticVersion.parse(version.to_string())
        assert again.equals(version)
        assert again.parts == version.parts
        assert again.to_string() == text


class TestCompare:
    """Test ordering rules"""

    def test_missing_component_sorts_first(self):
        """Test 1.2 < 1.2.0 < 1.2.0.1 < 1.3"""
        ordered = [SemanticVersion.parse(v) for v in ["1.2", "1.2.0", "1.2.0.1", "1.3"]]
        for lower, higher in zip(ordered, ordered[1:]):
            assert SemanticVersion.compare(lower, higher) == -1
            assert SemanticVersion.compare(higher, lower) == 1

    def test_equal(self):
        a = SemanticVersion.parse("1.2.3")
        b = SemanticVersion(1, 2, 3)
        assert SemanticVersion.compare(a, b) == 0
        assert a.equals(b)
        assert a is not b

    def test_different_shape_not_equal(self):
        assert not SemanticVersion.parse("1.2").equals(SemanticVersion.parse("1.2.0"))

    def test_numeric_not_lexical(self):
        assert SemanticVersion.parse("1.10").compare_to(SemanticVersion.parse("1.9")) == 1

    def test_total_order(self):
        """Test antisymmetry and transitivity over a mixed set"""
        versions = [SemanticVersion.parse(v) for v in
                    ["0", "1", "1.0", "1.0.0", "1.0.0.0", "1.0.3.2", "1.1", "1.1.5", "2", "0.9.9.9"]]
        for a, b in itertools.product(versions, repeat=2):
            assert SemanticVersion.compare(a, b) == -SemanticVersion.compare(b, a)
        for a, b, c in itertools.product(versions, repeat=3):
            if SemanticVersion.compare(a, b) <= 0 and SemanticVersion.compare(b, c) <= 0:
                assert SemanticVersion.compare(a, c) <= 0

    def test_operators_follow_compare(self):
        low, high = SemanticVersion.parse("1.1"), SemanticVersion.parse("1.1.5")
        assert low < high
        assert high > low
        assert low <= SemanticVersion(1, 1)
        assert high >= low
        assert low != high
        assert max([high, low]) is high

    def test_hash_consistent_with_equality(self):
        assert hash(SemanticVersion.parse("1.2")) == hash(SemanticVersion(1, 2))
        assert len({SemanticVersion(1, 2), SemanticVersion.parse("1.2")}) == 1


class TestStringHelpers:
    """Test the string-based helper functions"""

    def test_parse_version(self):
        assert parse_version("0.2.0") == (0, 2, 0)
        assert parse_version("1.1") == (1, 1)

    def test_compare_versions(self):
        assert compare_versions("0.2.0", "0.3.0") == -1
        assert compare_versions("0.3.0", "0.2.0") == 1
        assert compare_versions("0.2.0", "0.2.0") == 0
        assert compare_versions("1.2", "1.2.0") == -1

    def test_compare_versions_invalid(self):
        with pytest.raises(FormatError):
            compare_versions("1.0", "latest")
