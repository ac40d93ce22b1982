"""
Option Parser

Recognizes the four option families of a curl command line:

  -X 'METHOD'            method
  -H 'Name: value'       header
  -d 'body' / --data     data (canonicalized to -d)
  -v, --insecure, ...    flag (no value)

Each option may be preceded by a line continuation (`` \\`` at the end of a
line). Options are tried as an ordered alternation - method, header, data,
flag - and the first one that matches wins.
"""

import re
from typing import Callable, List, Tuple, Type, TypeVar

from ..exceptions import ParseFailure
from .entries import (
    DataEntry,
    FlagEntry,
    HeaderEntry,
    MethodEntry,
    OptionEntry,
    ParsedEntry,
)
from .lexer import DOUBLE_QUOTE, SINGLE_QUOTE, parse_quoted_data, skip_line_continuation, skip_whitespace

T = TypeVar('T')

# "-", any one character, then alphanumerics; hyphen-joined words are part
# of the identifier (--location-trusted)
_FLAG = re.compile(r'''-[^\s'"][A-Za-z0-9]*(?:-[A-Za-z0-9]+)*''')


def _option_start(text: str) -> str:
    return skip_whitespace(skip_line_continuation(text))


def parse_option(text: str, entry_type: Type[OptionEntry]) -> Tuple[str, OptionEntry]:
    """
    Parse one valued option of the given type.

    Grammar: [line continuation] whitespace TAG whitespace+ QUOTED

    Args:
        text: Unparsed input
        entry_type: MethodEntry, HeaderEntry or DataEntry

    Returns:
        (rest, entry) tuple

    Raises:
        ParseFailure: if no tag matches, the tag is not followed by
            whitespace, the value is not quoted, or the value is empty
    """
    body = _option_start(text)

    # Longest tag first so --data is never read as a shorter tag
    for tag in sorted(entry_type.tags, key=len, reverse=True):
        if body.startswith(tag):
            break
    else:
        raise ParseFailure(f"Expected one of {entry_type.tags}", text)

    after_tag = body[len(tag):]
    if not after_tag[:1].isspace():
        raise ParseFailure(f"Expected whitespace after {tag}", text)

    rest, value = parse_quoted_data(after_tag)
    entry = OptionEntry.from_tag(tag, value)
    if entry is None:
        raise ParseFailure(f"Empty value for {tag}", text)
    return rest, entry


def parse_method(text: str) -> Tuple[str, MethodEntry]:
    return parse_option(text, MethodEntry)


def parse_header(text: str) -> Tuple[str, HeaderEntry]:
    return parse_option(text, HeaderEntry)


def parse_data(text: str) -> Tuple[str, DataEntry]:
    return parse_option(text, DataEntry)


def parse_flag(text: str) -> Tuple[str, FlagEntry]:
    """
    Parse a valueless flag such as ``-v`` or ``--insecure``.

    A flag never absorbs a value: when the token is followed by quoted data
    the match is rejected, so ``-H 'X: 1'`` can only be read as a header.
    """
    body = _option_start(text)
    match = _FLAG.match(body)
    if not match:
        raise ParseFailure("Expected a flag", text)

    identifier = match.group(0)
    after = body[match.end():]
    if after and not after[0].isspace() and skip_line_continuation(after) == after:
        raise ParseFailure(f"Unexpected text after flag {identifier}", text)

    # Look past a line continuation so a value on the next line is still seen
    following = skip_whitespace(skip_line_continuation(after))
    if following.startswith((DOUBLE_QUOTE, SINGLE_QUOTE)):
        raise ParseFailure(f"Flag {identifier} followed by a quoted value", text)
    return skip_whitespace(after), FlagEntry(identifier)


OPTION_PARSERS: Tuple[Callable[[str], Tuple[str, ParsedEntry]], ...] = (
    parse_method,
    parse_header,
    parse_data,
    parse_flag,
)


def parse_any_option(text: str) -> Tuple[str, ParsedEntry]:
    """Try each option parser in order; the first success wins."""
    for parser in OPTION_PARSERS:
        try:
            return parser(text)
        except ParseFailure:
            continue
    raise ParseFailure("No option matches", text)


def parse_many(text: str, parser: Callable[[str], Tuple[str, T]]) -> Tuple[str, List[T]]:
    """
    Apply a parser zero or more times.

    Stops at the first failure (or at a match that consumed nothing) and
    returns the text from that position unchanged.
    """
    results = []
    while text:
        try:
            rest, result = parser(text)
        except ParseFailure:
            break
        if rest == text:
            break
        results.append(result)
        text = rest
    return text, results


def parse_methods(text: str) -> Tuple[str, List[MethodEntry]]:
    return parse_many(text, parse_method)


def parse_headers(text: str) -> Tuple[str, List[HeaderEntry]]:
    return parse_many(text, parse_header)


def parse_datas(text: str) -> Tuple[str, List[DataEntry]]:
    return parse_many(text, parse_data)


def parse_flags(text: str) -> Tuple[str, List[FlagEntry]]:
    return parse_many(text, parse_flag)


def parse_options(text: str) -> Tuple[str, List[ParsedEntry]]:
    """Parse options in source order until none of them matches."""
    return parse_many(text, parse_any_option)
