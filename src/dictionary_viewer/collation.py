"""Locale-aware ordering of headwords.

Words are compared the way a dictionary reader expects rather than by code
point: case and diacritics are ignored first, so ``"Amor"``, ``"amor"`` and
``"āmor"`` all sort next to each other and before ``"bellum"``. Remaining
ties are broken by accents (unaccented first) and then by case (lowercase
first), which follows the default Unicode collation for Latin script.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from dictionary_viewer.models import Entry


def _strip_marks(s: str) -> str:
    nfd = unicodedata.normalize("NFD", s)
    return "".join(c for c in nfd if unicodedata.category(c) != "Mn")


def collation_key(word: str) -> tuple[str, str, str]:
    """Return a sort key for *word* (primary, secondary, tertiary level)."""
    primary = _strip_marks(word).casefold()
    secondary = unicodedata.normalize("NFD", word).casefold()
    # swapcase puts lowercase ahead of uppercase under code point order
    tertiary = unicodedata.normalize("NFD", word).swapcase()
    return primary, secondary, tertiary


def compare_words(a: str, b: str) -> int:
    """Three-way comparison of two words: negative, zero or positive."""
    ka, kb = collation_key(a), collation_key(b)
    return (ka > kb) - (ka < kb)


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Return a new list of *entries* sorted by word.

    The sort is stable: entries with the same word keep their input order.
    """
    return sorted(entries, key=lambda e: collation_key(e.word))
