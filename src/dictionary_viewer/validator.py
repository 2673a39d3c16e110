"""Validation rules for session source data.

Rules work on raw, already-parsed records (the mappings read from a JSON or
YAML session file) so that malformed data can be reported before any
:class:`~dictionary_viewer.models.Entry` is built.

Rule IDs:

- ``VAL-ENT-001`` ERROR: record is not a mapping
- ``VAL-ENT-002`` ERROR: missing or blank ``word``
- ``VAL-ENT-003`` ERROR: missing or blank ``definition``
- ``VAL-ENT-004`` ERROR: field present with a non-string value
- ``VAL-ENT-005`` WARNING: ``example`` present but blank
- ``VAL-ENT-006`` WARNING: same word twice in one session
- ``VAL-SES-001`` WARNING: session has no entries
- ``VAL-SES-002`` WARNING: same word in more than one session
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping, Sequence
from typing import Any

from dictionary_viewer.models import ValidationResult, ValidationSeverity

ENTRY_FIELDS = ("word", "definition", "example")
REQUIRED_FIELDS = ("word", "definition")


def validate_records(
    session: int | str | None,
    records: Sequence[Any],
) -> list[ValidationResult]:
    """Run the per-session rules over the raw records of one session."""
    results: list[ValidationResult] = []
    if len(records) == 0:
        results.append(_result(
            "VAL-SES-001", ValidationSeverity.WARNING, session, None,
            "Session has no entries",
        ))
        return results

    seen: dict[str, int] = {}
    for index, record in enumerate(records):
        record_results = _validate_record(session, index, record)
        results.extend(record_results)
        if any(r.severity == ValidationSeverity.ERROR for r in record_results):
            continue

        word = record["word"]
        if word in seen:
            results.append(_result(
                "VAL-ENT-006", ValidationSeverity.WARNING, session, index,
                f"Duplicate word {word!r} (first at record #{seen[word] + 1})",
                {"word": word, "first_index": seen[word]},
            ))
        else:
            seen[word] = index
    return results


def validate_sessions(
    sessions: Mapping[int | str, Sequence[Any]],
) -> list[ValidationResult]:
    """Run every rule over a set of sessions, including cross-session rules."""
    results: list[ValidationResult] = []
    for session, records in sessions.items():
        results.extend(validate_records(session, records))
    results.extend(_val_ses_002(sessions))
    return results


def has_errors(results: Sequence[ValidationResult]) -> bool:
    """Return True if any result is an ERROR."""
    return any(r.severity == ValidationSeverity.ERROR for r in results)


def _validate_record(
    session: int | str | None, index: int, record: Any
) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    if not isinstance(record, Mapping):
        results.append(_result(
            "VAL-ENT-001", ValidationSeverity.ERROR, session, index,
            f"Record must be a mapping, got {type(record).__name__}",
        ))
        return results

    for field in ENTRY_FIELDS:
        value = record.get(field)
        if value is not None and not isinstance(value, str):
            results.append(_result(
                "VAL-ENT-004", ValidationSeverity.ERROR, session, index,
                f"Field {field!r} must be a string, "
                f"got {type(value).__name__}",
                {"field": field},
            ))

    for field, rule_id in (("word", "VAL-ENT-002"), ("definition", "VAL-ENT-003")):
        value = record.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            results.append(_result(
                rule_id, ValidationSeverity.ERROR, session, index,
                f"Missing required field {field!r}",
                {"field": field},
            ))

    example = record.get("example")
    if isinstance(example, str) and not example.strip():
        results.append(_result(
            "VAL-ENT-005", ValidationSeverity.WARNING, session, index,
            "Field 'example' is blank and will be ignored",
            {"field": "example"},
        ))
    return results


def _val_ses_002(
    sessions: Mapping[int | str, Sequence[Any]],
) -> list[ValidationResult]:
    """Words that appear in more than one session."""
    owners: dict[str, list[int | str]] = defaultdict(list)
    for session, records in sessions.items():
        words = {
            r["word"] for r in records
            if isinstance(r, Mapping) and isinstance(r.get("word"), str)
        }
        for word in words:
            owners[word].append(session)

    results: list[ValidationResult] = []
    for word, found_in in owners.items():
        if len(found_in) > 1:
            results.append(_result(
                "VAL-SES-002", ValidationSeverity.WARNING, found_in[0], None,
                f"Word {word!r} appears in sessions "
                f"{', '.join(str(s) for s in found_in)}",
                {"word": word, "sessions": list(found_in)},
            ))
    return results


def _result(
    rule_id: str,
    severity: ValidationSeverity,
    session: int | str | None,
    index: int | None,
    message: str,
    details: dict[str, Any] | None = None,
) -> ValidationResult:
    return ValidationResult(
        rule_id=rule_id,
        severity=severity.value,
        session=session,
        index=index,
        message=message,
        details=details,
    )
