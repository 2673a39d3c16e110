"""Tests for the browsing view state."""

from dictionary_viewer import DictionaryBrowser, HighlightFragment


class TestDictionaryBrowser:
    """Query and session selection state."""

    def test_initial_state(self, latin_store):
        browser = DictionaryBrowser(latin_store)
        assert browser.query == ""
        assert browser.selected_session is None
        assert browser.results == latin_store.get_all_entries()
        assert browser.total_entries == 8
        assert [s.number for s in browser.available_sessions] == [1, 2, 3]

    def test_query_all_sessions(self, latin_store):
        browser = DictionaryBrowser(latin_store)
        words = [e.word for e in browser.set_query("priest")]
        assert words == ["Augur", "flamen"]

    def test_clearing_query_shows_everything(self, latin_store):
        browser = DictionaryBrowser(latin_store)
        browser.set_query("priest")
        assert browser.set_query("  ") == latin_store.get_all_entries()

    def test_select_session(self, latin_store):
        browser = DictionaryBrowser(latin_store)
        assert browser.select_session(2) == latin_store.get_session_entries(2)
        assert browser.selected_session == 2

    def test_query_within_session(self, latin_store):
        browser = DictionaryBrowser(latin_store)
        browser.select_session(3)
        assert [e.word for e in browser.set_query("priest")] == ["flamen"]

    def test_reselect_toggles_off(self, latin_store):
        """Selecting the current session again goes back to all sessions."""
        browser = DictionaryBrowser(latin_store)
        browser.set_query("priest")
        browser.select_session(3)
        browser.select_session(3)
        assert browser.selected_session is None
        assert [e.word for e in browser.results] == ["Augur", "flamen"]

    def test_select_none(self, latin_store):
        browser = DictionaryBrowser(latin_store)
        browser.select_session(1)
        browser.select_session(None)
        assert browser.results == latin_store.get_all_entries()

    def test_summary(self, store):
        """Singular and plural counts."""
        browser = DictionaryBrowser(store)
        assert browser.summary() == "2 entries found"
        browser.set_query("bel")
        assert browser.summary() == "1 entry found"
        browser.set_query("pax")
        assert browser.summary() == "0 entries found"

    def test_highlighted(self, store):
        browser = DictionaryBrowser(store)
        browser.set_query("ger")
        (entry,) = browser.results
        h = browser.highlighted(entry)
        assert h.word == [HighlightFragment("bellum", False)]
        assert h.example == [
            HighlightFragment("bellum ", False),
            HighlightFragment("ger", True),
            HighlightFragment("ere", False),
        ]

    def test_highlighted_without_example(self, store):
        browser = DictionaryBrowser(store)
        h = browser.highlighted(store.get_session_entries(1)[0])
        assert h.example is None
