"""
Curl Decoder

Parses a textual curl invocation into a typed, ordered list of entries:
the target URL followed by its method, header, data and flag options.

Quick start (library usage):
    from curl_decoder import parse_curl_command

    for entry in parse_curl_command("curl 'https://example.com' -H 'Accept: */*'"):
        print(entry)

Or fold the entries into a single request view:
    from curl_decoder import decode_curl

    request = decode_curl("curl 'https://example.com/api' -d 'a=b'")
    print(request.method, request.url.host, request.body)
"""

from .decoder import (
    CurlParser,
    CurlRequestDecoder,
    DecodedRequest,
    EntryKind,
    ParsedUrl,
    Schema,
    decode_curl,
    filter_entries,
    is_curl_command,
    parse_curl_command,
    parse_url,
)
from .exceptions import (
    CurlDecoderError,
    MalformedQuotedDataError,
    MissingUrlError,
    NotACurlCommandError,
    UnparsedInputError,
    UrlParseError,
)

__version__ = "0.1.0"
__all__ = [
    "CurlParser",
    "CurlRequestDecoder",
    "DecodedRequest",
    "EntryKind",
    "ParsedUrl",
    "Schema",
    "decode_curl",
    "filter_entries",
    "is_curl_command",
    "parse_curl_command",
    "parse_url",
    "CurlDecoderError",
    "MalformedQuotedDataError",
    "MissingUrlError",
    "NotACurlCommandError",
    "UnparsedInputError",
    "UrlParseError",
    "app",
]


def __getattr__(name):
    """Lazy import for the HTTP API.

    The FastAPI app pulls in fastapi, pydantic and starlette. Deferring it
    keeps `import curl_decoder` cheap for users who only parse commands.
    """
    if name == "app":
        from .server import app
        return app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
