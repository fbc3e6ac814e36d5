"""Unit tests for version string comparison.

Each case pins one comparison rule so a regression points straight at the rule
that changed.
"""

from __future__ import annotations

import pytest

from app_inventory.versions import compare_version, parse_version, remove_trailing_zeros


@pytest.mark.parametrize(
    ("lower", "higher"),
    [
        ("1.0.0", "2.0.0"),
        ("1.0.0", "1.1.0"),
        ("1.0.0", "1.0.1"),
        ("1.0.0", "1.0.0.1"),
        ("1.1.1", "1.2.0"),
        ("1.0", "1.0.1"),
        ("1.9", "1.10"),
    ],
)
def test_numeric_segments_compare_by_value(lower: str, higher: str) -> None:
    """Numeric segments should order by integer value, not by text."""
    assert compare_version(lower, higher) == -1
    assert compare_version(higher, lower) == 1


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ("1.0.002", "1.0.2"),
        ("1.0.0", "1..0"),
        ("a.01.b", "a.1.b"),
        ("1.0.1", "1.0.1.0"),
        ("1.0.0", "1.0"),
        ("1.0", "1"),
        ("0", "00.00.00"),
    ],
)
def test_equivalent_spellings_compare_equal(a: str, b: str) -> None:
    """Leading zeros, empty segments and trailing zeros should not matter."""
    assert compare_version(a, b) == 0
    assert compare_version(b, a) == 0


def test_strict_length_match_orders_shorter_version_first() -> None:
    """With strict length matching an explicit trailing zero makes a version greater."""
    assert compare_version("1.0.0", "1.0.0.0", True) == -1
    assert compare_version("1.0.0", "1.0", True) == 1
    assert compare_version("1.0.0", "1.0.0.0", False) == 0


def test_non_numeric_segments_fall_back_to_text() -> None:
    """Non-numeric segments should compare as case-insensitive text."""
    assert compare_version("1.0.0", "1.0.a") == -1
    assert compare_version("1.0.beta", "1.0.ALPHA") == 1
    assert compare_version("build-x", "build-y") == -1


def test_letter_case_only_breaks_otherwise_equal_versions() -> None:
    """Case differences are a last-resort tie-break behind every other segment."""
    assert compare_version("1.0.a", "1.0.A") == 1
    assert compare_version("1.0.A.2", "1.0.a.1") == 1


@pytest.mark.parametrize(
    ("lower", "higher"),
    [
        ("0.0.0-foo", "0.0.0"),
        ("1.2.3-4", "1.2.3"),
        ("1.0.0-rc.1", "1.0.0"),
        ("1.2.3-a.b.c.5.d.100", "1.2.3-a.b.c.10.d.5"),
        ("3.0.0-bar+foo", "3.0.0-foo+bar"),
        ("2.9.9", "3.0.0+foo"),
    ],
)
def test_semver_prerelease_ordering(lower: str, higher: str) -> None:
    """Pre-releases order below their release and compare segment by segment."""
    assert compare_version(lower, higher) == -1
    assert compare_version(higher, lower) == 1


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ("3.0.0+foo", "3.0.0"),
        ("3.0.0+foo", "3.0.0+bar"),
        ("3.0.0+foo-bar", "3.0.0+bar-foo"),
        ("1.0.0+x", "1.0.0+y"),
    ],
)
def test_build_metadata_is_ignored(a: str, b: str) -> None:
    """Anything after `+` should never influence ordering."""
    assert compare_version(a, b) == 0


@pytest.mark.parametrize("version", ["", "1.0.0", "1..0", "weird version!", "1.0-rc-1+b", "-", "+"])
def test_every_version_equals_itself(version: str) -> None:
    """Comparison should be reflexive for arbitrary, even malformed, input."""
    assert compare_version(version, version) == 0
    assert compare_version(version, version, True) == 0


def test_parse_version_splits_release_prerelease_and_drops_build() -> None:
    """The first `+` ends the version and the first `-` starts the pre-release."""
    parsed = parse_version("1.2.0-rc-1.x+build-7", strip_trailing_zeros=False)
    assert parsed.release == ("1", "2", "0")
    assert parsed.prerelease == ("rc", "1", "x")

    assert parse_version("2.0.0").release == ("2",)
    assert parse_version("2.0.0").prerelease is None


@pytest.mark.parametrize(
    ("version", "expected"),
    [
        ("asdf.0.00.000", "asdf"),
        ("asdf.100", "asdf.100"),
        ("asdf.100.", "asdf.100"),
        ("1.0.0", "1"),
        ("0.0", ""),
    ],
)
def test_remove_trailing_zeros(version: str, expected: str) -> None:
    """Trailing zero-valued or empty dot-segments should be stripped."""
    assert remove_trailing_zeros(version) == expected


def test_integer_segments_rank_below_text_segments() -> None:
    """Mixed numeric/text pairs rank the integer first, keeping the order transitive."""
    assert compare_version("1.0.0", "1.0.a") == -1
    assert compare_version("10", "1a") == -1
    assert compare_version("2", "1a") == -1
    assert compare_version("2", "10") == -1


def test_very_long_numeric_segments_compare_without_error() -> None:
    """Digit runs far beyond any integer conversion limit still compare by value."""
    huge = "1" + "0" * 5000
    assert compare_version(huge, huge + "1") == -1
    assert compare_version("0" * 6000 + "7", "7") == 0
    assert remove_trailing_zeros("1." + "0" * 5000) == "1"
