"""Load session sources (JSON or YAML) into validated sessions.

A session source is one file holding either a list of entry records::

    [
      {"word": "amor", "definition": "love"},
      {"word": "bellum", "definition": "war", "example": "bellum gerere"}
    ]

or a mapping that declares the session explicitly::

    session: 2
    name: Second session
    entries:
      - word: bellum
        definition: war

When a source does not declare its number, it is derived from the file name
(``session3.json`` is session 3). That is the only place a number is ever
parsed out of a name: everything downstream receives an explicit
``{number: Session}`` mapping.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import IO, Any

import yaml

from dictionary_viewer.exceptions import (
    DataImportError,
    DuplicateSessionError,
    ValidationError,
)
from dictionary_viewer.models import (
    Entry,
    Session,
    ValidationResult,
    ValidationSeverity,
)
from dictionary_viewer.validator import (
    ENTRY_FIELDS,
    has_errors,
    validate_records,
    validate_sessions,
)

logger = logging.getLogger(__name__)

SOURCE_SUFFIXES = (".json", ".yaml", ".yml")

_SESSION_NAME_RE = re.compile(r"^session[-_ ]?(\d+)$", re.IGNORECASE)


def default_data_dir() -> Path:
    """Directory of the session sources shipped with the package."""
    return Path(__file__).resolve().parent / "data" / "sessions"


def session_number_from_name(name: str) -> int:
    """Derive a session number from a source name like ``session3``.

    Raises:
        ValidationError: If the name does not follow the convention or the
            number is not positive.
    """
    m = _SESSION_NAME_RE.match(name)
    if m is None:
        raise ValidationError(
            f"Cannot derive a session number from {name!r}; "
            "name the source 'session<N>' or declare 'session' in it",
            session=name,
        )
    return _check_number(int(m.group(1)), name)


# ---------------------------------------------------------------------------
# Raw file reading
# ---------------------------------------------------------------------------


def load_raw(path: str | Path) -> Any:
    """Read a session source and return the parsed, unvalidated content.

    Raises:
        FileNotFoundError: If the file does not exist.
        DataImportError: If the file is not UTF-8, is not valid JSON/YAML,
            or has an unsupported suffix.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Session source not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SOURCE_SUFFIXES:
        raise DataImportError(
            f"Unsupported session source {path.name!r}; "
            f"expected one of {', '.join(SOURCE_SUFFIXES)}"
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                data = _parse_json(f, path)
            else:
                data = _parse_yaml(f, path)
    except UnicodeDecodeError as e:
        raise DataImportError(f"{path} is not valid UTF-8: {e}") from e

    if data is None:
        raise DataImportError(f"Empty session source: {path}")
    return data


def _parse_json(f: IO[str], path: Path) -> Any:
    try:
        return json.load(f)
    except json.JSONDecodeError as e:
        raise DataImportError(
            f"Invalid JSON in {path} (line {e.lineno}): {e.msg}"
        ) from e


def _parse_yaml(f: IO[str], path: Path) -> Any:
    try:
        return yaml.safe_load(f)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_info = f" (line {mark.line + 1})" if mark else ""
        raise DataImportError(
            f"Invalid YAML in {path}{line_info}: {e}"
        ) from e


def _split_source(
    data: Any, source: str
) -> tuple[int | None, str | None, Sequence[Any]]:
    """Return (declared number, declared name, records) of a parsed source."""
    if isinstance(data, list):
        return None, None, data
    if not isinstance(data, Mapping):
        raise DataImportError(
            f"Session source {source} must be a list or a mapping, "
            f"got {type(data).__name__}"
        )

    records = data.get("entries")
    if not isinstance(records, list):
        raise DataImportError(
            f"Session source {source} must have an 'entries' list"
        )

    number = data.get("session")
    if number is not None and (isinstance(number, bool) or not isinstance(number, int)):
        raise ValidationError(
            f"Field 'session' in {source} must be an integer", session=source,
        )

    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise ValidationError(
            f"Field 'name' in {source} must be a string", session=source,
        )
    return number, name, records


def _check_number(number: int, source: str) -> int:
    if number < 1:
        raise ValidationError(
            f"Session number must be positive, got {number} ({source})",
            session=source,
        )
    return number


def _resolve_number(
    path: Path, declared: int | None, requested: int | None
) -> int:
    if requested is not None and declared is not None and requested != declared:
        raise ValidationError(
            f"{path.name} declares session {declared}, "
            f"but was loaded as session {requested}",
            session=declared,
        )
    if requested is not None:
        return _check_number(requested, path.name)
    if declared is not None:
        return _check_number(declared, path.name)
    return session_number_from_name(path.stem)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_entries(records: Sequence[Any], session: int | str) -> tuple[Entry, ...]:
    """Build entries from raw records, failing on the first invalid record.

    Blank examples become ``None``. Unknown keys are ignored.

    Raises:
        ValidationError: If any record breaks an ERROR rule.
    """
    results = validate_records(session, records)
    for r in results:
        if r.severity == ValidationSeverity.ERROR:
            raise ValidationError(
                f"Session {session}, record #{(r.index or 0) + 1}: {r.message}",
                session=session,
                index=r.index,
            )
        logger.warning("Session %s: %s", session, r.message)

    entries = []
    for record in records:
        extra = set(record) - set(ENTRY_FIELDS)
        if extra:
            logger.debug(
                "Session %s: ignoring keys %s on %r",
                session, sorted(map(str, extra)), record["word"],
            )
        example = record.get("example")
        entries.append(Entry(
            word=record["word"],
            definition=record["definition"],
            example=example if example and example.strip() else None,
        ))
    return tuple(entries)


def parse_session(
    data: Any,
    *,
    number: int | None = None,
    name: str | None = None,
    source: str | None = None,
) -> Session:
    """Build a session from already-parsed source content.

    *data* is a list of records or a mapping with ``entries`` (and
    optionally ``session``/``name``). *number* is required unless the
    mapping declares one.
    """
    label = source or "<data>"
    declared, declared_name, records = _split_source(data, label)
    if number is not None and declared is not None and number != declared:
        raise ValidationError(
            f"{label} declares session {declared}, but was loaded as {number}",
            session=declared,
        )
    resolved = number if number is not None else declared
    if resolved is None:
        raise ValidationError(f"No session number for {label}", session=label)
    resolved = _check_number(resolved, label)
    return Session(
        number=resolved,
        name=name or declared_name or f"session{resolved}",
        entries=parse_entries(records, resolved),
        source=source,
    )


# ---------------------------------------------------------------------------
# Public loading entry points
# ---------------------------------------------------------------------------


def load_session_file(path: str | Path, number: int | None = None) -> Session:
    """Load one session source file.

    Args:
        path: JSON or YAML file.
        number: Session number; defaults to the number declared in the file,
            then to the one derived from the file name.
    """
    path = Path(path)
    data = load_raw(path)
    declared, declared_name, records = _split_source(data, path.name)
    resolved = _resolve_number(path, declared, number)
    session = Session(
        number=resolved,
        name=declared_name or path.stem,
        entries=parse_entries(records, resolved),
        source=str(path),
    )
    logger.info(
        "Loaded session %d (%s): %d entries",
        session.number, session.name, len(session.entries),
    )
    return session


def build_session_map(sessions: Iterable[Session]) -> dict[int, Session]:
    """Index sessions by number, ordered by ascending number.

    Raises:
        DuplicateSessionError: If two sessions share a number.
    """
    by_number: dict[int, Session] = {}
    for session in sessions:
        existing = by_number.get(session.number)
        if existing is not None:
            raise DuplicateSessionError(
                f"Session {session.number} is defined twice: "
                f"{existing.source or existing.name} and "
                f"{session.source or session.name}"
            )
        by_number[session.number] = session
    return {n: by_number[n] for n in sorted(by_number)}


def load_sessions(paths: Iterable[str | Path]) -> dict[int, Session]:
    """Load several session sources into a ``{number: Session}`` mapping."""
    return build_session_map(load_session_file(p) for p in paths)


def find_session_sources(directory: str | Path) -> list[Path]:
    """List the session source files in *directory*, sorted by name.

    Raises:
        FileNotFoundError: If *directory* does not exist.
        DataImportError: If it holds no session sources.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Session directory not found: {directory}")
    paths = sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in SOURCE_SUFFIXES
    )
    if not paths:
        raise DataImportError(f"No session sources in {directory}")
    return paths


def load_session_directory(directory: str | Path) -> dict[int, Session]:
    """Load every JSON/YAML session source in *directory*."""
    return load_sessions(find_session_sources(directory))


def check_sources(paths: Iterable[str | Path]) -> list[ValidationResult]:
    """Validate session sources without loading them.

    Read and naming failures are reported as ``VAL-SRC-*`` results instead
    of being raised, so every problem in every file is listed at once.
    """
    results: list[ValidationResult] = []
    records_by_session: dict[int | str, Sequence[Any]] = {}
    sources_by_number: dict[int, Path] = {}

    for path in map(Path, paths):
        try:
            data = load_raw(path)
            declared, _, records = _split_source(data, path.name)
            number = _resolve_number(path, declared, None)
        except (FileNotFoundError, DataImportError, ValidationError) as e:
            results.append(ValidationResult(
                rule_id="VAL-SRC-001",
                severity=ValidationSeverity.ERROR.value,
                session=path.name,
                index=None,
                message=str(e),
                details={"source": str(path)},
            ))
            continue

        if number in sources_by_number:
            results.append(ValidationResult(
                rule_id="VAL-SRC-002",
                severity=ValidationSeverity.ERROR.value,
                session=number,
                index=None,
                message=(
                    f"Session {number} is defined twice: "
                    f"{sources_by_number[number].name} and {path.name}"
                ),
                details={"source": str(path)},
            ))
            continue
        sources_by_number[number] = path
        records_by_session[number] = records

    results.extend(validate_sessions(records_by_session))
    if has_errors(results):
        logger.debug(
            "Source check found %d error(s)",
            sum(1 for r in results if r.severity == ValidationSeverity.ERROR),
        )
    return results
