"""Tests for the source validation rules."""

from dictionary_viewer import ValidationSeverity
from dictionary_viewer.validator import has_errors, validate_records, validate_sessions


def _rules(results):
    return [r.rule_id for r in results]


class TestEntryRules:
    """Per-record rules."""

    def test_valid_records(self):
        results = validate_records(1, [
            {"word": "amor", "definition": "love"},
            {"word": "bellum", "definition": "war", "example": "bellum gerere"},
        ])
        assert results == []

    def test_not_a_mapping(self):
        results = validate_records(1, ["amor"])
        assert _rules(results) == ["VAL-ENT-001"]
        assert results[0].index == 0
        assert has_errors(results)

    def test_missing_word(self):
        assert _rules(validate_records(1, [{"definition": "love"}])) == ["VAL-ENT-002"]

    def test_blank_definition(self):
        results = validate_records(1, [{"word": "amor", "definition": " "}])
        assert _rules(results) == ["VAL-ENT-003"]
        assert results[0].details == {"field": "definition"}

    def test_non_string_field(self):
        results = validate_records(1, [{"word": 12, "definition": "twelve"}])
        assert _rules(results) == ["VAL-ENT-004"]

    def test_blank_example_is_warning(self):
        """A blank example is only a warning."""
        results = validate_records(1, [{"word": "amor", "definition": "love", "example": ""}])
        assert _rules(results) == ["VAL-ENT-005"]
        assert results[0].severity == ValidationSeverity.WARNING
        assert not has_errors(results)

    def test_duplicate_within_session(self):
        """The second occurrence is flagged."""
        results = validate_records(2, [
            {"word": "pax", "definition": "peace"},
            {"word": "pax", "definition": "treaty"},
        ])
        assert _rules(results) == ["VAL-ENT-006"]
        assert results[0].index == 1
        assert results[0].details["first_index"] == 0


class TestSessionRules:
    """Session and cross-session rules."""

    def test_empty_session(self):
        results = validate_records(3, [])
        assert _rules(results) == ["VAL-SES-001"]
        assert results[0].session == 3

    def test_word_in_several_sessions(self):
        """Words shared across sessions are warnings, not errors."""
        results = validate_sessions({
            1: [{"word": "pax", "definition": "peace"}],
            2: [{"word": "bellum", "definition": "war"}],
            3: [{"word": "pax", "definition": "treaty"}],
        })
        assert _rules(results) == ["VAL-SES-002"]
        assert results[0].details == {"word": "pax", "sessions": [1, 3]}
        assert not has_errors(results)
