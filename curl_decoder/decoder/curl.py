"""
Curl Command Parser

Parses a curl command line into an ordered list of entries: the target URL
first, followed by method, header, data and flag options in source order.

Handles single and double quoting, line continuations and any option order.
"""

import logging
from typing import List, Tuple

from ..exceptions import (
    MissingUrlError,
    NotACurlCommandError,
    ParseFailure,
    UnparsedInputError,
)
from .entries import ParsedEntry, UrlEntry
from .lexer import parse_quoted_data, skip_line_continuation
from .options import parse_options
from .url import parse_url

logger = logging.getLogger(__name__)

CURL_CMD = "curl"


def is_curl_command(command: str) -> bool:
    """Check whether the input starts with `curl` (case-insensitive)."""
    return command.lstrip().lower().startswith(CURL_CMD)


def strip_command_header(command: str) -> str:
    """
    Remove the leading `curl` token from an already left-trimmed string.

    Callers must check is_curl_command() first.
    """
    return command[len(CURL_CMD):]


def parse_url_entry(text: str) -> Tuple[str, UrlEntry]:
    """Extract the first quoted token and decompose it as the target URL."""
    rest, raw_url = parse_quoted_data(skip_line_continuation(text))
    return rest, UrlEntry(parse_url(raw_url))


class CurlParser:
    """Parser for curl commands

    Args:
        strict: Raise UnparsedInputError when options stop before the end
            of the input. By default the unparsed tail is dropped with a
            warning and the entries parsed so far are returned.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def parse(self, command: str) -> List[ParsedEntry]:
        """
        Parse a curl command string into its entries.

        Args:
            command: The full curl command as a string

        Returns:
            List of entries, URL first, then options in source order

        Raises:
            NotACurlCommandError: if the input does not start with `curl`
            MissingUrlError: if no quoted URL follows the `curl` token
            UnparsedInputError: in strict mode, if trailing text is left
        """
        entries, _ = self.parse_with_remainder(command)
        return entries

    def parse_with_remainder(self, command: str) -> Tuple[List[ParsedEntry], str]:
        """Like parse(), also returning the text no option parser matched."""
        if not is_curl_command(command):
            raise NotACurlCommandError("Not a curl command")

        body = strip_command_header(command.lstrip())

        try:
            rest, url_entry = parse_url_entry(body)
        except ParseFailure as e:
            raise MissingUrlError(f"No target URL found: {e}") from e

        logger.debug("Parsed URL: %s", url_entry.url.to_url())

        rest, options = parse_options(rest)
        entries: List[ParsedEntry] = [url_entry]
        entries.extend(options)

        remainder = skip_line_continuation(rest).strip()
        if remainder:
            if self.strict:
                raise UnparsedInputError(
                    f"Could not parse options starting at: {remainder!r}",
                    remainder=remainder,
                    entries=entries,
                )
            logger.warning("Ignoring unparsed input: %r", remainder)

        return entries, remainder


def parse_curl_command(command: str, strict: bool = False) -> List[ParsedEntry]:
    """Convenience function to parse a curl command."""
    parser = CurlParser(strict=strict)
    return parser.parse(command)
