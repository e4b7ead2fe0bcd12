from __future__ import annotations

from datetime import date
from typing import Any

from intern_tracker.core.internship import VALID_STATUSES
from intern_tracker.validation.errors import ValidationError, ValidationIssue


def _blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _identity(entry: dict) -> tuple[str, str]:
    return (
        " ".join(entry["company_name"].split()).casefold(),
        " ".join(entry["role"].split()).casefold(),
    )


def validate_internship_book_dict(obj: Any) -> None:
    """
    Validate the raw JSON dict BEFORE building Internship objects.
    Collects every problem and raises them together as one ValidationError.
    """
    issues: list[ValidationIssue] = []

    if not isinstance(obj, dict):
        raise ValidationError([ValidationIssue("BOOK_TYPE", "Internship book must be a JSON object.")])

    entries = obj.get("internships", [])
    if entries is None:
        entries = []

    if not isinstance(entries, list):
        raise ValidationError([ValidationIssue("BOOK_INTERNSHIPS_TYPE", "internships must be a list.")])

    seen: dict[tuple[str, str], int] = {}
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            issues.append(ValidationIssue("ENTRY_TYPE", f"internships[{i}] must be an object.", index=i))
            continue

        company_ok = not _blank(entry.get("company_name"))
        role_ok = not _blank(entry.get("role"))
        if not company_ok:
            issues.append(ValidationIssue("ENTRY_COMPANY", f"internships[{i}].company_name missing.", index=i))
        if not role_ok:
            issues.append(ValidationIssue("ENTRY_ROLE", f"internships[{i}].role missing.", index=i))

        if entry.get("status") not in VALID_STATUSES:
            issues.append(ValidationIssue(
                "ENTRY_STATUS",
                f"internships[{i}].status must be one of {', '.join(VALID_STATUSES)}.",
                index=i,
            ))

        raw_date = entry.get("date")
        try:
            date.fromisoformat(raw_date)
        except (TypeError, ValueError):
            issues.append(ValidationIssue(
                "ENTRY_DATE", f"internships[{i}].date must be an ISO date (YYYY-MM-DD).", index=i
            ))

        comment = entry.get("comment")
        if comment is not None and not isinstance(comment, str):
            issues.append(ValidationIssue("ENTRY_COMMENT", f"internships[{i}].comment must be a string.", index=i))

        if company_ok and role_ok:
            key = _identity(entry)
            if key in seen:
                issues.append(ValidationIssue(
                    "ENTRY_DUPLICATE",
                    f"internships[{i}] duplicates internships[{seen[key]}].",
                    index=i,
                ))
            else:
                seen[key] = i

    if issues:
        raise ValidationError(issues)
