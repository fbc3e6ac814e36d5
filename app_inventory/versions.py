"""Version comparison that tolerates both semver and ad-hoc dotted versions.

Versions are never rejected. Anything that is not a plain non-negative integer
segment is compared as text and ranks above every integer segment. Missing
segments count as ``"0"``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import zip_longest

_NUMERIC_SEGMENT_RE = re.compile(r"[0-9]+")
_SEGMENT_DELIMITER_RE = re.compile(r"[.\-]")


@dataclass(frozen=True, slots=True)
class ParsedVersion:
    """A version string split into release and optional pre-release segments."""

    release: tuple[str, ...]
    prerelease: tuple[str, ...] | None


def _is_numeric(segment: str) -> bool:
    return _NUMERIC_SEGMENT_RE.fullmatch(segment) is not None


def _is_zero(segment: str) -> bool:
    return segment.strip("0") == ""


def remove_trailing_zeros(version: str) -> str:
    """Strip trailing zero-valued dot-segments from a version string.

    Empty segments count as zero, so ``"1.0.0"`` becomes ``"1"``, ``"0.0"``
    becomes ``""`` and ``"asdf.100."`` becomes ``"asdf.100"``.
    """

    segments = version.split(".")
    while segments and _is_zero(segments[-1]):
        segments.pop()
    return ".".join(segments)


def _split_segments(part: str) -> tuple[str, ...]:
    """Split on every ``.`` and ``-``; empty segments become ``"0"``."""

    return tuple(segment or "0" for segment in _SEGMENT_DELIMITER_RE.split(part))


def parse_version(version: str, *, strip_trailing_zeros: bool = True) -> ParsedVersion:
    """Split a version into comparable release and pre-release segments.

    Build metadata (from the first ``+``) is dropped. The pre-release part
    starts after the first ``-`` of what remains.
    """

    core, _, _build = version.partition("+")
    release, dash, prerelease = core.partition("-")
    if strip_trailing_zeros:
        release = remove_trailing_zeros(release)
    return ParsedVersion(
        release=_split_segments(release),
        prerelease=_split_segments(prerelease) if dash else None,
    )


def _segment_key(segment: str, *, case_sensitive: bool) -> tuple[int, int, str]:
    """Rank a segment: integers by value (without int conversion), then text.

    Every integer sorts below every text segment so mixed comparisons stay
    transitive.
    """

    if _is_numeric(segment):
        digits = segment.lstrip("0")
        return (0, len(digits), digits)
    return (1, 0, segment if case_sensitive else segment.casefold())


def _compare_segment(a: str, b: str, *, case_sensitive: bool) -> int:
    left = _segment_key(a, case_sensitive=case_sensitive)
    right = _segment_key(b, case_sensitive=case_sensitive)
    return (left > right) - (left < right)


def _compare_segments(a: Sequence[str], b: Sequence[str], *, case_sensitive: bool) -> int:
    for left, right in zip_longest(a, b, fillvalue="0"):
        result = _compare_segment(left, right, case_sensitive=case_sensitive)
        if result:
            return result
    return 0


def _compare_parsed(a: ParsedVersion, b: ParsedVersion, *, case_sensitive: bool) -> int:
    """Compare release segments, then pre-release segments."""

    result = _compare_segments(a.release, b.release, case_sensitive=case_sensitive)
    if result:
        return result
    if a.prerelease is None or b.prerelease is None:
        # A release outranks every pre-release of the same version.
        return (a.prerelease is None) - (b.prerelease is None)
    return _compare_segments(a.prerelease, b.prerelease, case_sensitive=case_sensitive)


def _compare_lengths(a: ParsedVersion, b: ParsedVersion) -> int:
    result = (len(a.release) > len(b.release)) - (len(a.release) < len(b.release))
    if result:
        return result
    prerelease_a = len(a.prerelease or ())
    prerelease_b = len(b.prerelease or ())
    return (prerelease_a > prerelease_b) - (prerelease_a < prerelease_b)


def compare_version(a: str, b: str, strict_length_match: bool = False) -> int:
    """Compare two version strings, returning -1, 0 or 1.

    Trailing zero segments are ignored unless ``strict_length_match`` is set,
    in which case ``"1.0.0"`` orders below ``"1.0.0.0"``. Segments that differ
    only by letter case are ordered only after every other signal ties, so
    ``"1.0.a"`` sorts above ``"1.0.A"``.
    """

    parsed_a = parse_version(a, strip_trailing_zeros=not strict_length_match)
    parsed_b = parse_version(b, strip_trailing_zeros=not strict_length_match)

    result = _compare_parsed(parsed_a, parsed_b, case_sensitive=False)
    if result == 0 and strict_length_match:
        result = _compare_lengths(parsed_a, parsed_b)
    if result == 0:
        result = _compare_parsed(parsed_a, parsed_b, case_sensitive=True)
    return result
