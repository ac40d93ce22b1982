"""
Lexical Primitives

Quoted-string and line-continuation recognizers shared by the option and
command parsers.

Every primitive takes the unparsed text and returns a ``(rest, value)``
tuple, or raises ``ParseFailure`` when it cannot match at the start of the
text. Backslashes inside quotes are literal data, never escapes.
"""

import re
from typing import Tuple

from ..exceptions import MalformedQuotedDataError, ParseFailure

DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"

_LEADING_WS = re.compile(r'\s*')
_LINE_CONTINUATION = re.compile(r'\s*\\\s*')


def skip_whitespace(text: str) -> str:
    """Drop leading whitespace (spaces, tabs, newlines)."""
    return text[_LEADING_WS.match(text).end():]


def _parse_quoted(text: str, quote: str) -> Tuple[str, str]:
    body = skip_whitespace(text)
    if not body.startswith(quote):
        raise ParseFailure(f"Expected opening {quote}", text)

    end = body.find(quote, 1)
    if end == -1:
        raise MalformedQuotedDataError(f"Unclosed {quote} quote", text)

    content = body[1:end]
    rest = skip_whitespace(body[end + 1:])
    return rest, content


def parse_double_quoted(text: str) -> Tuple[str, str]:
    """Parse ``"..."`` with surrounding whitespace."""
    return _parse_quoted(text, DOUBLE_QUOTE)


def parse_single_quoted(text: str) -> Tuple[str, str]:
    """Parse ``'...'`` with surrounding whitespace."""
    return _parse_quoted(text, SINGLE_QUOTE)


def parse_quoted_data(text: str) -> Tuple[str, str]:
    """
    Parse a quoted argument in either quoting style.

    Double quotes are tried first; single quotes only when the text does
    not open with a double quote. An unclosed double quote is reported as
    such and is never re-read as single-quoted data.

    Returns:
        (rest, content) tuple

    Raises:
        MalformedQuotedDataError: if the opening quote is never closed
        ParseFailure: if the text does not start with a quote
    """
    try:
        return parse_double_quoted(text)
    except MalformedQuotedDataError:
        raise
    except ParseFailure:
        return parse_single_quoted(text)


def parse_line_continuation(text: str) -> Tuple[str, str]:
    """
    Parse a line-continuation marker: optional whitespace, a single
    backslash, optional whitespace. A trailing newline is not required.

    Returns:
        (rest, matched_text) tuple
    """
    match = _LINE_CONTINUATION.match(text)
    if not match:
        raise ParseFailure("Expected line continuation", text)
    return text[match.end():], match.group(0)


def skip_line_continuation(text: str) -> str:
    """Consume a line continuation if present, otherwise return text as-is."""
    try:
        rest, _ = parse_line_continuation(text)
    except ParseFailure:
        return text
    return rest
