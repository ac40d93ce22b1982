"""
Tests for the lexical primitives - quoted data and line continuations.
"""

import pytest

from curl_decoder.decoder.lexer import (
    parse_double_quoted,
    parse_line_continuation,
    parse_quoted_data,
    parse_single_quoted,
    skip_line_continuation,
)
from curl_decoder.exceptions import MalformedQuotedDataError, ParseFailure


class TestQuotedData:
    """Test single- and double-quoted argument parsing."""

    def test_double_and_single_quotes_yield_same_content(self):
        assert parse_quoted_data('"abc"') == ("", "abc")
        assert parse_quoted_data("'abc'") == ("", "abc")

    def test_surrounding_whitespace_is_consumed(self):
        assert parse_quoted_data('  "a b"   -v') == ("-v", "a b")

    def test_unclosed_quote_fails(self):
        with pytest.raises(MalformedQuotedDataError):
            parse_quoted_data('"abc')
        with pytest.raises(MalformedQuotedDataError):
            parse_quoted_data("'abc")

    def test_unquoted_text_fails_without_malformed_error(self):
        with pytest.raises(ParseFailure) as exc_info:
            parse_quoted_data("abc")
        assert not isinstance(exc_info.value, MalformedQuotedDataError)
        assert exc_info.value.remaining == "abc"

    def test_unclosed_double_quote_is_not_reread_as_single_quoted(self):
        with pytest.raises(MalformedQuotedDataError):
            parse_quoted_data("\"abc 'x'")

    def test_other_quote_kind_is_plain_content(self):
        assert parse_quoted_data("'say \"hi\"'") == ("", 'say "hi"')
        assert parse_quoted_data('"it\'s"') == ("", "it's")

    def test_backslash_is_literal(self):
        rest, content = parse_quoted_data('"a\\nb\\"')
        assert content == "a\\nb\\"
        assert rest == ""

    def test_empty_quotes(self):
        assert parse_quoted_data('""') == ("", "")

    def test_specific_quote_parsers_reject_the_other_style(self):
        with pytest.raises(ParseFailure):
            parse_double_quoted("'abc'")
        with pytest.raises(ParseFailure):
            parse_single_quoted('"abc"')

    def test_content_may_span_lines(self):
        assert parse_single_quoted("'{\n  \"a\": 1\n}'") == ("", '{\n  "a": 1\n}')


class TestLineContinuation:
    """Test backslash line-continuation recognition."""

    def test_continuation_with_newline(self):
        assert parse_line_continuation(" \\\n  -X") == ("-X", " \\\n  ")

    def test_continuation_without_newline(self):
        assert parse_line_continuation("\\ -v") == ("-v", "\\ ")

    def test_windows_line_ending(self):
        rest, _ = parse_line_continuation(" \\\r\n-H")
        assert rest == "-H"

    def test_missing_backslash_fails(self):
        with pytest.raises(ParseFailure):
            parse_line_continuation("  -v")

    def test_skip_is_optional(self):
        assert skip_line_continuation("-v") == "-v"
        assert skip_line_continuation("  \\\n-v") == "-v"
