"""Tests for identifier validation."""

from simplecache.repositories import escape_string, validate_identifier


class TestEscape:
    def test_plain_unchanged(self):
        assert escape_string("cache_table") == "cache_table"

    def test_quotes(self):
        assert escape_string("a'b\"c") == "a\\'b\\\"c"

    def test_control_chars(self):
        assert escape_string("a\nb\x00") == "a\\nb\\0"

    def test_backslash(self):
        assert escape_string("a\\b") == "a\\\\b"


class TestValidate:
    def test_valid(self, conn):
        assert validate_identifier("cache", conn)
        assert validate_identifier("my cache; --", conn)

    def test_empty(self, conn):
        assert not validate_identifier("", conn)

    def test_injection(self, conn):
        assert not validate_identifier("foo'; DROP TABLE cache; --", conn)

    def test_double_quote(self, conn):
        assert not validate_identifier('foo"; DROP TABLE cache; --', conn)

    def test_no_connection(self):
        assert not validate_identifier("cache", None)
