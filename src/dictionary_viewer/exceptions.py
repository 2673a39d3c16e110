"""Custom exception hierarchy for dictionary-viewer."""

from __future__ import annotations


class DictionaryViewerError(Exception):
    """Base exception for all dictionary-viewer errors."""


class ValidationError(DictionaryViewerError):
    """Invalid source data (missing word, blank definition, bad session number)."""

    def __init__(
        self,
        message: str,
        session: int | str | None = None,
        index: int | None = None,
    ) -> None:
        self.session = session
        self.index = index
        super().__init__(message)


class DataImportError(DictionaryViewerError):
    """Failed to read session sources (malformed JSON/YAML, empty directory)."""


class DuplicateSessionError(DictionaryViewerError):
    """Two session sources declare the same session number."""
