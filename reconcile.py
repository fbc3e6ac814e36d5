"""Command-line runner for application inventory reconciliation.

This script parses a primary and a secondary inventory snapshot, merges them
with the primary's values taking precedence, and writes a structured JSON
report under `output/` by default.
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import fields
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from app_inventory import merge_lists, parse_both_snapshots
from app_inventory.logging import configure_logging
from app_inventory.models import ApplicationRecord, DataIssue

log = logging.getLogger(__name__)

DEFAULT_PRIMARY = Path("data/package_manager.csv")
DEFAULT_SECONDARY = Path("data/scanner.csv")
DEFAULT_OUTPUT = Path("output/application_inventory.json")

MERGE_RULE = (
    "Records from both snapshots that share name, version and publisher (an empty publisher "
    "matches any) are combined; the primary snapshot's non-empty values win and empty fields "
    "are filled from the secondary snapshot."
)


def _issue_to_dict(issue: DataIssue) -> dict[str, str | int | None]:
    """Serialize a `DataIssue` into a JSON-friendly dictionary."""

    return {
        "code": issue.code,
        "field": issue.field,
        "message": issue.message,
        "source_row": issue.source_row,
    }


def _record_to_dict(record: ApplicationRecord) -> dict[str, Any]:
    """Serialize a record, leaving out empty fields."""

    values = {record_field.name: getattr(record, record_field.name) for record_field in fields(record)}
    values["attributes"] = dict(record.attributes)
    return {key: value for key, value in values.items() if value}


def build_report(*, primary_path: Path, secondary_path: Path) -> dict[str, Any]:
    """Build a complete reconciliation report payload."""

    primary, secondary = parse_both_snapshots(primary_path, secondary_path)
    merged = merge_lists(primary.records, secondary.records)
    input_count = primary.total_records + secondary.total_records

    return {
        "metadata": {
            "generated_at_utc": datetime.now(timezone.utc).isoformat(),
            "primary_path": str(primary_path),
            "primary_schema": primary.schema_name,
            "secondary_path": str(secondary_path),
            "secondary_schema": secondary.schema_name,
            "merge_rule": MERGE_RULE,
        },
        "summary": {
            "primary_record_count": primary.total_records,
            "secondary_record_count": secondary.total_records,
            "merged_record_count": len(merged),
            "collapsed_record_count": input_count - len(merged),
        },
        "applications": [_record_to_dict(record) for record in merged],
        "data_quality_issues": {
            "primary": [_issue_to_dict(issue) for issue in primary.issues],
            "secondary": [_issue_to_dict(issue) for issue in secondary.issues],
        },
    }


def write_report(report: dict[str, Any], *, output_path: Path) -> None:
    """Write report JSON to disk."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def _parse_args() -> argparse.Namespace:
    """Parse CLI arguments for report generation."""

    parser = argparse.ArgumentParser(description="Merge two application inventory snapshots into one JSON report.")
    parser.add_argument("--primary", type=Path, default=DEFAULT_PRIMARY, help="Snapshot whose values win conflicts")
    parser.add_argument("--secondary", type=Path, default=DEFAULT_SECONDARY, help="Snapshot used to fill gaps")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="Output JSON path")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging verbosity",
    )
    return parser.parse_args()


def main() -> int:
    """Entrypoint for command-line execution."""

    args = _parse_args()
    configure_logging(level=args.log_level)
    try:
        report = build_report(primary_path=args.primary, secondary_path=args.secondary)
    except ValueError:
        log.exception("Could not parse inventory snapshots")
        return 1
    write_report(report, output_path=args.output)
    log.info("Wrote reconciliation report: %s", args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
