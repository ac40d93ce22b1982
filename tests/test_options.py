"""
Tests for the option parser and entry types.
"""

import pytest

from curl_decoder.decoder.entries import (
    DataEntry,
    EntryKind,
    FlagEntry,
    HeaderEntry,
    MethodEntry,
    OptionEntry,
)
from curl_decoder.decoder.options import (
    parse_any_option,
    parse_data,
    parse_datas,
    parse_flag,
    parse_flags,
    parse_header,
    parse_headers,
    parse_method,
    parse_methods,
    parse_options,
)
from curl_decoder.exceptions import MalformedQuotedDataError, ParseFailure


class TestEntries:
    """Test entry construction and invariants."""

    def test_canonical_flags(self):
        assert MethodEntry("GET").raw_flag == "-X"
        assert HeaderEntry("A: b").raw_flag == "-H"
        assert DataEntry("a=b").raw_flag == "-d"
        assert DataEntry("a=b", raw_flag="--data").raw_flag == "-d"

    def test_wrong_tag_rejected(self):
        with pytest.raises(ValueError):
            MethodEntry("GET", raw_flag="-H")

    def test_empty_values_rejected(self):
        with pytest.raises(ValueError):
            MethodEntry("")
        with pytest.raises(ValueError):
            FlagEntry("")

    def test_from_tag(self):
        assert OptionEntry.from_tag("-X", "POST") == MethodEntry("POST")
        assert OptionEntry.from_tag("--data", "x") == DataEntry("x")
        assert OptionEntry.from_tag("-H", "") is None
        with pytest.raises(ValueError):
            OptionEntry.from_tag("-Z", "x")

    def test_kinds(self):
        assert MethodEntry("GET").kind is EntryKind.METHOD
        assert FlagEntry("-v").kind is EntryKind.FLAG
        assert EntryKind.from_name("Header") is EntryKind.HEADER
        with pytest.raises(ValueError):
            EntryKind.from_name("cookie")

    def test_base_option_entry_is_abstract(self):
        with pytest.raises(TypeError):
            OptionEntry("x")

    def test_entries_of_different_kinds_are_not_equal(self):
        assert MethodEntry("x") != HeaderEntry("x")

    def test_header_split(self):
        assert HeaderEntry("Accept:  */*").split() == ("Accept", "*/*")
        assert HeaderEntry("Authorization: Bearer a:b").split() == ("Authorization", "Bearer a:b")
        assert HeaderEntry("X-Empty").split() == ("X-Empty", "")

    def test_to_dict(self):
        assert DataEntry("a=b").to_dict() == {"kind": "data", "flag": "-d", "value": "a=b"}
        assert FlagEntry("-v").to_dict() == {"kind": "flag", "flag": "-v"}


class TestSingleOptions:
    """Test each option kind on its own."""

    def test_method(self):
        assert parse_method(" -X 'GET' rest") == ("rest", MethodEntry("GET"))

    def test_header(self):
        assert parse_header(' -H "X: 1"') == ("", HeaderEntry("X: 1"))

    def test_data_short_and_long(self):
        assert parse_data(" -d 'a=b'") == ("", DataEntry("a=b"))
        rest, entry = parse_data(" --data 'a=b'")
        assert entry == DataEntry("a=b")
        assert entry.raw_flag == "-d"

    def test_tag_requires_whitespace(self):
        with pytest.raises(ParseFailure):
            parse_method(" -X'GET'")

    def test_value_must_be_quoted(self):
        with pytest.raises(ParseFailure):
            parse_method(" -X GET")

    def test_empty_value_rejected(self):
        with pytest.raises(ParseFailure):
            parse_method(' -X ""')

    def test_unclosed_value(self):
        with pytest.raises(MalformedQuotedDataError):
            parse_header(' -H "abc')

    def test_wrong_tag(self):
        with pytest.raises(ParseFailure):
            parse_header(" -X 'GET'")

    def test_continuation_before_option(self):
        assert parse_method(" \\\n  -X 'PUT'") == ("", MethodEntry("PUT"))


class TestFlags:
    """Test valueless flags and flag/value disambiguation."""

    def test_short_and_long_flags(self):
        assert parse_flag(" -v") == ("", FlagEntry("-v"))
        assert parse_flag(" --insecure -v") == ("-v", FlagEntry("--insecure"))

    def test_hyphenated_long_flag(self):
        assert parse_flag(" --location-trusted") == ("", FlagEntry("--location-trusted"))

    def test_flag_never_absorbs_quoted_value(self):
        with pytest.raises(ParseFailure):
            parse_flag(' -H "X: 1"')
        with pytest.raises(ParseFailure):
            parse_flag(" --user 'a:b'")

    def test_alternation_prefers_header(self):
        assert parse_any_option(' -H "X: 1"') == ("", HeaderEntry("X: 1"))

    def test_flag_must_end_at_whitespace(self):
        with pytest.raises(ParseFailure):
            parse_flag(" -v'x'")

    def test_flag_may_end_at_line_continuation(self):
        assert parse_flag(" -v\\\n  -H 'A: b'") == ("\\\n  -H 'A: b'", FlagEntry("-v"))
        assert parse_options(" -v\\\n  -H 'A: b'") == ("", [FlagEntry("-v"), HeaderEntry("A: b")])

    def test_quoted_value_on_next_line_is_not_absorbed(self):
        with pytest.raises(ParseFailure):
            parse_flag(" --user \\\n  'a:b'")

    def test_not_a_flag(self):
        with pytest.raises(ParseFailure):
            parse_flag(" verbose")


class TestRepetition:
    """Test plural forms and the full alternation."""

    def test_plural_forms(self):
        assert parse_headers(" -H 'a: 1' -H 'b: 2' -X 'GET'") == (
            "-X 'GET'", [HeaderEntry("a: 1"), HeaderEntry("b: 2")]
        )
        assert parse_methods(" -X 'GET' -X 'POST'") == ("", [MethodEntry("GET"), MethodEntry("POST")])
        assert parse_datas(" -d 'a' --data 'b'") == ("", [DataEntry("a"), DataEntry("b")])
        assert parse_flags(" -v -s -k") == ("", [FlagEntry("-v"), FlagEntry("-s"), FlagEntry("-k")])

    def test_zero_matches(self):
        assert parse_headers(" -X 'GET'") == (" -X 'GET'", [])

    def test_mixed_options_in_source_order(self):
        text = " -v -H 'A: b' --data 'x=1' -X 'PATCH' --compressed"
        assert parse_options(text) == ("", [
            FlagEntry("-v"),
            HeaderEntry("A: b"),
            DataEntry("x=1"),
            MethodEntry("PATCH"),
            FlagEntry("--compressed"),
        ])

    def test_continuations_between_options(self):
        text = " \\\n  -X 'GET' \\\n  -H 'A: b' \\\n  -v"
        assert parse_options(text) == ("", [MethodEntry("GET"), HeaderEntry("A: b"), FlagEntry("-v")])

    def test_stall_returns_remaining_text(self):
        rest, entries = parse_options(" -v oops -H 'a: b'")
        assert entries == [FlagEntry("-v")]
        assert rest == "oops -H 'a: b'"

    def test_empty_value_stalls(self):
        rest, entries = parse_options(" -H 'a: b' -X \"\" -v")
        assert entries == [HeaderEntry("a: b")]
        assert rest == "-X \"\" -v"
