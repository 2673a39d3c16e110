"""Domain model dataclasses and enums for dictionary-viewer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ValidationSeverity(str, Enum):
    """Severity level for validation results."""

    ERROR = "ERROR"
    WARNING = "WARNING"


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Entry:
    """A dictionary entry (headword, definition, optional usage example)."""

    word: str
    definition: str
    example: str | None = None

    def fields(self) -> Iterator[str]:
        """Yield the searchable texts of this entry."""
        yield self.word
        yield self.definition
        if self.example:
            yield self.example


@dataclass(frozen=True, slots=True)
class Session:
    """A numbered partition of entries, loaded from one source."""

    number: int
    name: str
    entries: tuple[Entry, ...]
    source: str | None = None


@dataclass(frozen=True, slots=True)
class SessionInfo:
    """Summary of a session for listing."""

    number: int
    name: str
    entry_count: int


@dataclass(frozen=True, slots=True)
class HighlightFragment:
    """A piece of text, tagged as matching the query or not."""

    text: str
    is_match: bool


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """A single validation finding (error or warning)."""

    rule_id: str
    severity: str
    session: int | str | None
    index: int | None
    message: str
    details: dict[str, Any] | None
