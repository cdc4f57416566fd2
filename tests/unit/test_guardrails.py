"""Unit tests for search query validation."""

from src.security.guardrails import EMPTY_QUERY_MESSAGE, validate_query


class TestValidateQuery:
    def test_valid_query(self):
        ok, reason = validate_query("python tutorial")
        assert ok is True
        assert reason is None

    def test_empty_query(self):
        ok, reason = validate_query("")
        assert ok is False
        assert reason == EMPTY_QUERY_MESSAGE

    def test_whitespace_only(self):
        ok, reason = validate_query("   \t\n ")
        assert ok is False
        assert reason == EMPTY_QUERY_MESSAGE

    def test_long_query_is_valid(self):
        ok, reason = validate_query("python " * 80)
        assert ok is True
        assert reason is None
