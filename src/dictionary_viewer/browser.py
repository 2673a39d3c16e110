"""View state for browsing the dictionary: query, selected session, results."""

from __future__ import annotations

from dataclasses import dataclass

from dictionary_viewer.models import Entry, HighlightFragment, SessionInfo
from dictionary_viewer.search import highlight, search_dictionary, search_session
from dictionary_viewer.store import EntryStore


@dataclass(frozen=True, slots=True)
class HighlightedEntry:
    """An entry with each field split into highlight fragments."""

    entry: Entry
    word: list[HighlightFragment]
    definition: list[HighlightFragment]
    example: list[HighlightFragment] | None


class DictionaryBrowser:
    """Keeps the current query and session filter and the matching entries.

    With no query the results are the selected session's entries, or every
    entry when no session is selected. Selecting the session that is
    already selected clears the selection.
    """

    def __init__(self, store: EntryStore) -> None:
        self._store = store
        self.query = ""
        self.selected_session: int | None = None
        self.results: list[Entry] = store.get_all_entries()

    @property
    def store(self) -> EntryStore:
        return self._store

    @property
    def available_sessions(self) -> list[SessionInfo]:
        return self._store.get_available_sessions()

    @property
    def total_entries(self) -> int:
        return self._store.get_total_entry_count()

    @property
    def result_count(self) -> int:
        return len(self.results)

    def set_query(self, query: str) -> list[Entry]:
        """Update the query and recompute the results."""
        self.query = query
        return self._refresh()

    def select_session(self, session_number: int | None) -> list[Entry]:
        """Select a session (or ``None`` for all); reselecting toggles off."""
        if session_number is not None and session_number == self.selected_session:
            session_number = None
        self.selected_session = session_number
        return self._refresh()

    def _refresh(self) -> list[Entry]:
        store = self._store
        blank = not self.query.strip()
        if self.selected_session is None:
            self.results = (
                store.get_all_entries() if blank
                else search_dictionary(store, self.query)
            )
        else:
            self.results = search_session(store, self.selected_session, self.query)
        return self.results

    def summary(self) -> str:
        """Result count line, e.g. ``"3 entries found"``."""
        n = self.result_count
        return f"{n} {'entry' if n == 1 else 'entries'} found"

    def highlighted(self, entry: Entry) -> HighlightedEntry:
        """Split each field of *entry* around the current query."""
        return HighlightedEntry(
            entry=entry,
            word=highlight(entry.word, self.query),
            definition=highlight(entry.definition, self.query),
            example=(
                highlight(entry.example, self.query) if entry.example else None
            ),
        )
