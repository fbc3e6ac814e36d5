"""Merge-join of two application inventories collected by different sources."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import fields

from .models import ApplicationRecord
from .ordering import is_match, record_order, sort_records

log = logging.getLogger(__name__)


def coalesce_records(first: ApplicationRecord, second: ApplicationRecord) -> ApplicationRecord:
    """Combine two matching records field by field; ``first`` wins when non-empty.

    ``name`` is always taken from ``first``. The ``attributes`` mapping is
    coalesced key by key with the same rule.
    """

    values: dict[str, str] = {}
    for record_field in fields(ApplicationRecord):
        if record_field.name == "attributes":
            continue
        value = getattr(first, record_field.name)
        values[record_field.name] = value or getattr(second, record_field.name)
    values["name"] = first.name

    attributes = dict(second.attributes)
    attributes.update((key, value) for key, value in first.attributes.items() if value)
    return ApplicationRecord(**values, attributes=attributes)


def merge_lists(
    primary: Iterable[ApplicationRecord] | None,
    secondary: Iterable[ApplicationRecord] | None,
) -> list[ApplicationRecord]:
    """Merge two inventories into one sorted list, collapsing matching records.

    Both inputs are sorted independently, then walked once in step. When the
    current records of both sides match, one coalesced record is emitted and
    both sides advance. Otherwise the record that sorts first is emitted as is.
    A record is never reconsidered once it has been emitted, so collapsing is
    positional rather than a global group-by.
    """

    left = sort_records(primary)
    right = sort_records(secondary)

    merged: list[ApplicationRecord] = []
    collapsed = 0
    i = j = 0
    while i < len(left) and j < len(right):
        a, b = left[i], right[j]
        if is_match(a, b):
            merged.append(coalesce_records(a, b))
            collapsed += 1
            i += 1
            j += 1
        elif record_order(a, b) <= 0:
            merged.append(a)
            i += 1
        else:
            merged.append(b)
            j += 1

    merged.extend(left[i:])
    merged.extend(right[j:])

    log.debug(
        "Merged %d primary and %d secondary records into %d (%d collapsed)",
        len(left),
        len(right),
        len(merged),
        collapsed,
    )
    return merged
