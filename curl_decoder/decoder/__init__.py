"""
Decoder module for parsing curl commands.

- lexer.py: Quoted strings and line continuations
- url.py: Decomposes a URL into schema, credentials, host, path, queries, fragment
- options.py: Method, header, data and flag options
- curl.py: Recognizes a curl command and parses it into entries
- request.py: Folds entries into a single request view
"""

from .entries import (
    EntryKind,
    OptionEntry,
    MethodEntry,
    HeaderEntry,
    DataEntry,
    FlagEntry,
    UrlEntry,
    ParsedEntry,
)
from .url import Schema, Authority, QueryParam, ParsedUrl, parse_url
from .lexer import parse_quoted_data, parse_double_quoted, parse_single_quoted, parse_line_continuation
from .options import parse_any_option, parse_options
from .curl import CurlParser, is_curl_command, strip_command_header, parse_curl_command
from .request import CurlRequestDecoder, DecodedRequest, build_request, decode_curl, filter_entries
