"""
URL Parser

Decomposes a URL string into its components with a strict left-to-right
pipeline. Each stage consumes a prefix and hands the rest to the next one:

  schema "://"  [username ":" password "@"]  host  ["/" path]  ["?" queries]  ["#" fragment]

Only the host is mandatory. A missing scheme falls back to HTTPS, missing
credentials, path, queries and fragment simply come back empty. There is no
percent-decoding and no scheme-specific validation.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..exceptions import UrlParseError

logger = logging.getLogger(__name__)

SCHEME_SEPARATOR = '://'

_SCHEMA_TOKEN = re.compile(r'[^:/?#@\s]+(?=://)')
_AUTHORITY = re.compile(r'([^:@/?#]+):([^@/?#]+)@')
_HOST = re.compile(r'[^/?#]*')
_PATH = re.compile(r'[^?#]*')
_QUERY_PAIR = re.compile(r'([A-Za-z0-9\-._~%+]+)(?:=([A-Za-z0-9\-._~%+]*))?')


class Schema(Enum):
    """URL schemes recognized by the parser"""
    HTTP = 'http'
    HTTPS = 'https'
    FTP = 'ftp'
    SFTP = 'sftp'
    TFTP = 'tftp'
    TELNET = 'telnet'
    LDAP = 'ldap'
    WS = 'ws'
    WSS = 'wss'
    UNKNOWN = 'unknown'

    @classmethod
    def from_token(cls, token: str) -> 'Schema':
        lowered = token.strip().lower()
        for schema in cls:
            if schema is not cls.UNKNOWN and schema.value == lowered:
                return schema
        return cls.UNKNOWN


@dataclass(frozen=True)
class Authority:
    """Credentials given as ``username:password@`` before the host"""
    username: str
    password: str

    def to_dict(self) -> Dict:
        return {'username': self.username, 'password': self.password}


@dataclass(frozen=True)
class QueryParam:
    """A single ``key=value`` query pair"""
    key: str
    value: str = ""

    def __post_init__(self):
        if not self.key:
            raise ValueError("Query parameter key must not be empty")

    def to_dict(self) -> Dict:
        return {'key': self.key, 'value': self.value}


@dataclass(frozen=True)
class ParsedUrl:
    """Represents a decomposed URL"""
    host: str
    schema: Schema = Schema.HTTPS
    raw_schema: str = ""
    authority: Optional[Authority] = None
    path: str = ""
    queries: Tuple[QueryParam, ...] = field(default_factory=tuple)
    fragment: Optional[str] = None

    def __post_init__(self):
        if not self.host:
            raise ValueError("Host must not be empty")
        if '/' in self.host:
            raise ValueError(f"Host must not contain '/': {self.host!r}")
        if '?' in self.path:
            raise ValueError(f"Path must not contain '?': {self.path!r}")
        # Accept any iterable of pairs but always store an immutable tuple
        object.__setattr__(self, 'queries', tuple(self.queries))

    def query_dict(self) -> Dict[str, List[str]]:
        """Group query values by key, keeping appearance order."""
        grouped: Dict[str, List[str]] = {}
        for param in self.queries:
            grouped.setdefault(param.key, []).append(param.value)
        return grouped

    def to_url(self) -> str:
        """Rebuild a URL string from the parsed components."""
        scheme = self.raw_schema
        if not scheme and self.schema is not Schema.UNKNOWN:
            scheme = self.schema.value

        url = f"{scheme}{SCHEME_SEPARATOR}" if scheme else ""
        if self.authority:
            url += f"{self.authority.username}:{self.authority.password}@"
        url += self.host
        if self.path:
            url += f"/{self.path}"
        if self.queries:
            url += '?' + '&'.join(f"{q.key}={q.value}" for q in self.queries)
        if self.fragment is not None:
            url += f"#{self.fragment}"
        return url

    def to_dict(self) -> Dict:
        return {
            'schema': self.schema.name,
            'raw_schema': self.raw_schema,
            'authority': self.authority.to_dict() if self.authority else None,
            'host': self.host,
            'path': self.path,
            'queries': [q.to_dict() for q in self.queries],
            'fragment': self.fragment,
        }


def parse_schema(text: str) -> Tuple[str, Tuple[Schema, str]]:
    """Parse the scheme token in front of ``://`` (separator not consumed)."""
    match = _SCHEMA_TOKEN.match(text)
    if not match:
        raise UrlParseError("No scheme token found", text)
    token = match.group(0)
    return text[match.end():], (Schema.from_token(token), token)


def parse_scheme_separator(text: str) -> Tuple[str, str]:
    if not text.startswith(SCHEME_SEPARATOR):
        raise UrlParseError(f"Expected '{SCHEME_SEPARATOR}'", text)
    return text[len(SCHEME_SEPARATOR):], SCHEME_SEPARATOR


def parse_authority(text: str) -> Tuple[str, Optional[Authority]]:
    """Parse optional ``username:password@``; consumes nothing when absent."""
    match = _AUTHORITY.match(text)
    if not match:
        return text, None
    return text[match.end():], Authority(match.group(1), match.group(2))


def parse_host(text: str) -> Tuple[str, str]:
    match = _HOST.match(text)
    host = match.group(0)
    if not host:
        raise UrlParseError("Missing host", text)
    return text[match.end():], host


def parse_path(text: str) -> Tuple[str, str]:
    """Parse the path after an optional leading ``/``, up to ``?`` or ``#``."""
    if text.startswith('/'):
        text = text[1:]
    match = _PATH.match(text)
    return text[match.end():], match.group(0)


def parse_queries(text: str) -> Tuple[str, Tuple[QueryParam, ...]]:
    """
    Parse ``?key=value&key2=value2`` up to the fragment delimiter.

    Pairs keep their order of appearance and duplicate keys are kept as
    separate pairs. The first pair that does not fit the URL-safe character
    set ends query parsing and the rest of the query section is dropped.
    """
    if not text.startswith('?'):
        return text, ()

    section, sep, fragment_part = text[1:].partition('#')
    rest = sep + fragment_part

    queries = []
    for segment in section.split('&'):
        if not segment:
            continue
        match = _QUERY_PAIR.fullmatch(segment)
        if not match:
            logger.debug("Stopped query parsing at %r", segment)
            break
        queries.append(QueryParam(match.group(1), match.group(2) or ""))

    return rest, tuple(queries)


def parse_fragment(text: str) -> Tuple[str, Optional[str]]:
    if not text.startswith('#'):
        return text, None
    return "", text[1:]


def parse_url(url: str) -> ParsedUrl:
    """
    Decompose a URL string.

    Args:
        url: Raw URL, already extracted from its quotes

    Returns:
        ParsedUrl with all components

    Raises:
        UrlParseError: if the URL is empty, contains whitespace, or has no host
    """
    text = url.strip()
    if not text:
        raise UrlParseError("Empty URL", url)
    if re.search(r'\s', text):
        raise UrlParseError(f"URL contains whitespace: {text!r}", url)

    try:
        rest, (schema, raw_schema) = parse_schema(text)
        rest, _ = parse_scheme_separator(rest)
    except UrlParseError:
        logger.debug("No scheme in %r, defaulting to %s", text, Schema.HTTPS.name)
        rest, schema, raw_schema = text, Schema.HTTPS, ""

    rest, authority = parse_authority(rest)
    rest, host = parse_host(rest)
    rest, path = parse_path(rest)
    rest, queries = parse_queries(rest)
    rest, fragment = parse_fragment(rest)

    return ParsedUrl(
        host=host,
        schema=schema,
        raw_schema=raw_schema,
        authority=authority,
        path=path,
        queries=queries,
        fragment=fragment,
    )
