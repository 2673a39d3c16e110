"""Shared test fixtures for dictionary-viewer."""

import json

import pytest

from dictionary_viewer import Entry, EntryStore, Session


AMOR = Entry("amor", "love")
BELLUM = Entry("bellum", "war", "bellum gerere")


@pytest.fixture
def store():
    """Two-session store: session 1 = [amor], session 2 = [bellum]."""
    return EntryStore.from_sessions([
        Session(1, "session1", (AMOR,)),
        Session(2, "session2", (BELLUM,)),
    ])


@pytest.fixture
def latin_store():
    """Three sessions with unsorted entries and mixed case."""
    return EntryStore.from_sessions([
        Session(1, "session1", (
            Entry("templum", "a consecrated space", "templum capere"),
            Entry("Augur", "a priest who reads the birds"),
            Entry("amnis", "a river", "amnis Tiberinus"),
        )),
        Session(2, "session2", (
            Entry("lustrum", "a purification every five years"),
            Entry("bellum", "war", "bellum gerere"),
        )),
        Session(3, "session3", (
            Entry("Quirites", "the Roman citizens"),
            Entry("flamen", "a priest of one god", "flamen Dialis"),
            Entry("comitium", "the place of assembly"),
        )),
    ])


@pytest.fixture
def session_dir(tmp_path):
    """Directory with two valid JSON session files."""
    (tmp_path / "session1.json").write_text(json.dumps([
        {"word": "amor", "definition": "love"},
    ]), encoding="utf-8")
    (tmp_path / "session2.json").write_text(json.dumps([
        {"word": "bellum", "definition": "war", "example": "bellum gerere"},
    ]), encoding="utf-8")
    return tmp_path
