"""EntryStore: cached, sorted views over the loaded sessions."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path

from dictionary_viewer import loader as _loader
from dictionary_viewer.collation import sort_entries
from dictionary_viewer.models import Entry, Session, SessionInfo

logger = logging.getLogger(__name__)


class EntryStore:
    """Read-only entry store with two memoized views.

    The store owns a ``{number: Session}`` mapping and lazily builds the
    combined, word-sorted entry list and the per-session sorted lists. Both
    are kept until :meth:`clear_cache` is called. Returned lists are the
    cached objects themselves; callers must not mutate them.
    """

    def __init__(self, sessions: Mapping[int, Session]) -> None:
        for number, session in sessions.items():
            if number != session.number:
                raise ValueError(
                    f"Session keyed as {number} has number {session.number}"
                )
        self._sessions: dict[int, Session] = dict(sessions)
        self._all_entries: list[Entry] | None = None
        self._session_data: dict[int, list[Entry]] | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_sessions(cls, sessions: Iterable[Session]) -> EntryStore:
        """Create a store from session objects (numbers must be unique)."""
        return cls(_loader.build_session_map(sessions))

    @classmethod
    def from_directory(cls, directory: str | Path | None = None) -> EntryStore:
        """Create a store from the session sources in *directory*.

        Defaults to the sample sessions shipped with the package.
        """
        if directory is None:
            directory = _loader.default_data_dir()
        return cls(_loader.load_session_directory(directory))

    @property
    def sessions(self) -> Mapping[int, Session]:
        return self._sessions

    # ------------------------------------------------------------------
    # Memoized views
    # ------------------------------------------------------------------

    def load_all_entries(self) -> list[Entry]:
        """All entries of all sessions, sorted by word (built once)."""
        cached = self._all_entries
        if cached is not None:
            return cached
        with self._lock:
            if self._all_entries is None:
                combined: list[Entry] = []
                for session in self._sessions.values():
                    combined.extend(session.entries)
                self._all_entries = sort_entries(combined)
                logger.debug(
                    "Built combined entry list: %d entries from %d sessions",
                    len(self._all_entries), len(self._sessions),
                )
            return self._all_entries

    def load_session_data(self) -> dict[int, list[Entry]]:
        """Sorted entries of each session, keyed by number (built once)."""
        cached = self._session_data
        if cached is not None:
            return cached
        with self._lock:
            if self._session_data is None:
                self._session_data = {
                    number: sort_entries(session.entries)
                    for number, session in self._sessions.items()
                }
                logger.debug(
                    "Built per-session entry lists for %d sessions",
                    len(self._session_data),
                )
            return self._session_data

    def clear_cache(self) -> None:
        """Drop both cached views; the next access rebuilds them."""
        with self._lock:
            self._all_entries = None
            self._session_data = None
        logger.debug("Dictionary cache cleared")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all_entries(self) -> list[Entry]:
        return self.load_all_entries()

    def get_session_entries(self, session_number: int) -> list[Entry]:
        """Sorted entries of one session, or ``[]`` if there is no such session."""
        return self.load_session_data().get(session_number, [])

    def get_available_sessions(self) -> list[SessionInfo]:
        """Number, name and entry count of every session."""
        data = self.load_session_data()
        return [
            SessionInfo(
                number=number,
                name=self._sessions[number].name,
                entry_count=len(entries),
            )
            for number, entries in data.items()
        ]

    def get_total_entry_count(self) -> int:
        return len(self.load_all_entries())
