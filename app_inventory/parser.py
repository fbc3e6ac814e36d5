"""Schema-aware CSV parser for application inventory snapshots."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, replace
from pathlib import Path

from .models import ApplicationRecord, DataIssue, ParseResult
from .normalize import normalize_text, parse_install_date

log = logging.getLogger(__name__)

_IDENTITY_FIELDS = ("name", "version")


@dataclass(frozen=True, slots=True)
class SchemaDefinition:
    """Defines how a collector's export columns map to record fields."""

    name: str
    fields: frozenset[str]
    column_map: dict[str, str]


_SCHEMAS = (
    SchemaDefinition(
        name="package_manager_v1",
        fields=frozenset(
            {"name", "publisher", "version", "release", "epoch", "architecture", "url", "summary", "install_time"}
        ),
        column_map={
            "name": "name",
            "publisher": "publisher",
            "version": "version",
            "release": "release",
            "epoch": "epoch",
            "architecture": "architecture",
            "url": "url",
            "summary": "summary",
            "installed_time": "install_time",
        },
    ),
    SchemaDefinition(
        name="scanner_v1",
        fields=frozenset({"application", "vendor", "app_version", "app_type", "arch", "package_id", "install_date"}),
        column_map={
            "name": "application",
            "publisher": "vendor",
            "version": "app_version",
            "application_type": "app_type",
            "architecture": "arch",
            "package_id": "package_id",
            "installed_time": "install_date",
        },
    ),
)


def _normalize_header(header: str | None) -> str:
    """Normalize header names so schema matching is resilient to formatting."""

    if header is None:
        return ""
    return header.strip().lower()


def detect_schema(headers: list[str] | None) -> SchemaDefinition:
    """Return the matching schema definition for a header row.

    Matching is exact by normalized header set so an export from an unknown
    collector fails fast instead of being mis-mapped.
    """

    if not headers:
        raise ValueError("CSV file has no header row")

    normalized_fields = frozenset(_normalize_header(header) for header in headers if header is not None)
    for schema in _SCHEMAS:
        if normalized_fields == schema.fields:
            return schema

    sorted_fields = ", ".join(sorted(normalized_fields))
    raise ValueError(f"Unrecognized CSV schema fields: {sorted_fields}")


def _is_blank_row(raw_row: dict[str | None, str | None], headers: list[str]) -> bool:
    """Return True when all declared columns in a row are empty."""

    for header in headers:
        value = raw_row.get(header)
        if value is None:
            continue
        if value.strip() != "":
            return False
    return True


def _to_record(
    *,
    raw_row: dict[str, str | None],
    line_number: int,
    schema: SchemaDefinition,
) -> tuple[ApplicationRecord | None, list[DataIssue]]:
    """Convert one raw CSV row into a record, or ``None`` when identity is missing."""

    values: dict[str, str] = {}
    issues: list[DataIssue] = []

    for record_field, column in schema.column_map.items():
        raw_value = raw_row.get(column)
        if record_field == "installed_time":
            value, field_issues = parse_install_date(raw_value, field=record_field)
        else:
            value, field_issues = normalize_text(
                raw_value,
                field=record_field,
                required=record_field in _IDENTITY_FIELDS,
            )
        values[record_field] = value
        issues.extend(replace(issue, source_row=line_number) for issue in field_issues)

    missing = [record_field for record_field in _IDENTITY_FIELDS if not values[record_field]]
    if missing:
        issues.append(
            DataIssue(
                code="missing_identity",
                message=f"Row {line_number} lacks {', '.join(missing)} and was skipped",
                source_row=line_number,
            )
        )
        return None, issues

    return ApplicationRecord(**values), issues


def parse_snapshot(csv_path: str | Path) -> ParseResult:
    """Parse one inventory snapshot CSV into records and data-quality issues."""

    path = Path(csv_path)
    issues: list[DataIssue] = []
    records: list[ApplicationRecord] = []

    with path.open("r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        headers = reader.fieldnames or []
        schema = detect_schema(headers)
        # Map real (possibly untidy) header names onto the schema's normalized names.
        header_lookup = {_normalize_header(header): header for header in headers}

        for line_number, raw_row in enumerate(reader, start=2):
            if None in raw_row:
                # DictReader uses `None` for extra unnamed columns.
                issues.append(
                    DataIssue(
                        code="row_has_extra_columns",
                        message=f"Row {line_number} has more columns than the header",
                        source_row=line_number,
                    )
                )

            if _is_blank_row(raw_row, headers):
                issues.append(
                    DataIssue(
                        code="blank_row_skipped",
                        message=f"Row {line_number} is blank and was skipped",
                        source_row=line_number,
                    )
                )
                continue

            normalized_row = {column: raw_row.get(header_lookup[column]) for column in schema.fields}
            record, row_issues = _to_record(raw_row=normalized_row, line_number=line_number, schema=schema)
            issues.extend(row_issues)
            if record is not None:
                records.append(record)

    log.info("Parsed %d records from %s (%s, %d issues)", len(records), path, schema.name, len(issues))
    return ParseResult(file_path=path, schema_name=schema.name, records=records, issues=issues)


def parse_both_snapshots(primary_path: str | Path, secondary_path: str | Path) -> tuple[ParseResult, ParseResult]:
    """Parse the primary and secondary snapshots."""

    return parse_snapshot(primary_path), parse_snapshot(secondary_path)
