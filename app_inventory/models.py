"""Core typed models shared by the comparator, merge and parser modules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class DataIssue:
    """Structured data-quality issue emitted while parsing a snapshot."""

    code: str
    message: str
    field: str | None = None
    source_row: int | None = None


@dataclass(frozen=True, slots=True)
class ApplicationRecord:
    """One installed-application entry as reported by a single collector.

    ``name`` and ``version`` identify the application. An empty ``publisher``
    means the collector did not know it. Every other field is descriptive and
    only takes part in reconciliation.
    """

    name: str
    version: str
    publisher: str = ""
    application_type: str = ""
    architecture: str = ""
    url: str = ""
    summary: str = ""
    package_id: str = ""
    release: str = ""
    epoch: str = ""
    installed_time: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Read-only copy so the record stays immutable.
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))


@dataclass(slots=True)
class ParseResult:
    """Parsed output for one snapshot file."""

    file_path: Path
    schema_name: str
    records: list[ApplicationRecord]
    issues: list[DataIssue] = field(default_factory=list)

    @property
    def total_records(self) -> int:
        """Return the number of records that survived parsing."""

        return len(self.records)
