"""Ordering and matching rules for application records."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from .models import ApplicationRecord
from .versions import compare_version


def _compare_text(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_name(a: str, b: str) -> int:
    """Compare application names case-insensitively."""

    return _compare_text(a.casefold(), b.casefold())


def compare_publisher(a: str, b: str, treat_empty_as_lowest: bool = False) -> int:
    """Compare publishers case-insensitively.

    An empty publisher is unknown. By default it acts as a wildcard and compares
    equal to anything. With ``treat_empty_as_lowest`` it sorts strictly below
    every non-empty publisher instead.
    """

    if not a or not b:
        if not treat_empty_as_lowest:
            return 0
        return bool(a) - bool(b)
    return _compare_text(a.casefold(), b.casefold())


def record_order(a: ApplicationRecord, b: ApplicationRecord) -> int:
    """Total order over records: name, publisher, version, then raw version text.

    The raw version comparison keeps equivalent spellings such as ``"2.0"`` and
    ``"2.0.0"`` in a reproducible relative order.
    """

    return (
        compare_name(a.name, b.name)
        or compare_publisher(a.publisher, b.publisher, treat_empty_as_lowest=True)
        or compare_version(a.version, b.version)
        or _compare_text(a.version, b.version)
    )


def is_match(a: ApplicationRecord, b: ApplicationRecord) -> bool:
    """Return whether two records describe the same application for merging."""

    return (
        compare_name(a.name, b.name) == 0
        and compare_publisher(a.publisher, b.publisher) == 0
        and compare_version(a.version, b.version) == 0
    )


record_sort_key = cmp_to_key(record_order)


def sort_records(records: Iterable[ApplicationRecord] | None) -> list[ApplicationRecord]:
    """Return a new list of records in canonical order; ``None`` counts as empty."""

    if records is None:
        return []
    return sorted(records, key=record_sort_key)
