"""Public API for application inventory ordering and reconciliation."""

from .merge import coalesce_records, merge_lists
from .models import ApplicationRecord, DataIssue, ParseResult
from .ordering import compare_name, compare_publisher, is_match, record_order, record_sort_key, sort_records
from .parser import detect_schema, parse_both_snapshots, parse_snapshot
from .versions import compare_version, remove_trailing_zeros

__all__ = [
    "ApplicationRecord",
    "DataIssue",
    "ParseResult",
    "coalesce_records",
    "compare_name",
    "compare_publisher",
    "compare_version",
    "detect_schema",
    "is_match",
    "merge_lists",
    "parse_both_snapshots",
    "parse_snapshot",
    "record_order",
    "record_sort_key",
    "remove_trailing_zeros",
    "sort_records",
]
