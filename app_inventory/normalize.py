"""Field-level normalization helpers used by snapshot parsing."""

from __future__ import annotations

from datetime import datetime

from .models import DataIssue

_ISO_DATE_FORMAT = "%Y-%m-%d"
_ACCEPTED_DATE_FORMATS = (_ISO_DATE_FORMAT, "%Y%m%d", "%m/%d/%Y")


def normalize_text(value: str | None, *, field: str, required: bool = False) -> tuple[str, list[DataIssue]]:
    """Trim text and collapse missing values to ``""``.

    Records use the empty string for "unknown", so nothing is ever ``None``
    afterwards. Missing values are only reported for ``required`` fields.
    """

    if value is None or value.strip() == "":
        if required:
            return "", [DataIssue(code="missing_value", message=f"{field} is missing", field=field)]
        return "", []

    stripped = value.strip()
    issues: list[DataIssue] = []
    if stripped != value:
        issues.append(
            DataIssue(
                code="whitespace_trimmed",
                message=f"{field} had leading/trailing whitespace",
                field=field,
            )
        )
    return stripped, issues


def parse_install_date(value: str | None, *, field: str = "installed_time") -> tuple[str, list[DataIssue]]:
    """Parse an install date into ISO ``YYYY-MM-DD`` text.

    ISO dates pass through. ``YYYYMMDD`` (registry style) and ``MM/DD/YYYY``
    are accepted but flagged.
    """

    cleaned, issues = normalize_text(value, field=field)
    if cleaned == "":
        return "", issues

    for fmt in _ACCEPTED_DATE_FORMATS:
        try:
            parsed = datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue
        if fmt != _ISO_DATE_FORMAT:
            issues.append(
                DataIssue(
                    code="non_iso_date_format",
                    message=f"Date is not ISO-8601 format: {cleaned}",
                    field=field,
                )
            )
        return parsed.isoformat(), issues

    issues.append(
        DataIssue(
            code="invalid_date",
            message=f"Unable to parse date: {cleaned}",
            field=field,
        )
    )
    return "", issues
