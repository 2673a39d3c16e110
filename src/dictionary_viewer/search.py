"""Substring search over entries and match highlighting."""

from __future__ import annotations

from collections.abc import Iterable

from dictionary_viewer.models import Entry, HighlightFragment
from dictionary_viewer.store import EntryStore


def normalize_query(query: str) -> str:
    """Trim and lowercase a query."""
    return query.strip().lower()


def entry_matches(entry: Entry, needle: str) -> bool:
    """True if *needle* (already normalized) occurs in word, definition or example."""
    return any(needle in text.lower() for text in entry.fields())


def filter_entries(entries: Iterable[Entry], query: str) -> list[Entry]:
    """Entries matching *query*, in input order."""
    needle = normalize_query(query)
    return [e for e in entries if entry_matches(e, needle)]


def search_dictionary(store: EntryStore, query: str) -> list[Entry]:
    """Search all sessions. A blank query returns no results."""
    if not query.strip():
        return []
    return filter_entries(store.load_all_entries(), query)


def search_session(store: EntryStore, session_number: int, query: str) -> list[Entry]:
    """Search one session. A blank query returns the whole session."""
    entries = store.get_session_entries(session_number)
    if not query.strip():
        return entries
    return filter_entries(entries, query)


def highlight(text: str, query: str) -> list[HighlightFragment]:
    """Split *text* into fragments marking case-insensitive occurrences of *query*.

    The query is matched literally and occurrences don't overlap. Matched
    fragments keep the casing of *text*, and joining all fragments gives
    back *text* unchanged. A blank query yields a single non-matching
    fragment.
    """
    if not query.strip():
        return [HighlightFragment(text, False)]

    needle = query.lower()
    size = len(query)
    fragments: list[HighlightFragment] = []
    start = 0
    i = 0
    while i + size <= len(text):
        if text[i:i + size].lower() == needle:
            if i > start:
                fragments.append(HighlightFragment(text[start:i], False))
            fragments.append(HighlightFragment(text[i:i + size], True))
            i += size
            start = i
        else:
            i += 1
    if start < len(text) or not fragments:
        fragments.append(HighlightFragment(text[start:], False))
    return fragments
