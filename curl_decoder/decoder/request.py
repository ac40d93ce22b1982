"""
Curl Request Decoder

Folds the parsed entries of a curl command into a single request view
(method, URL, headers, body, flags) for tools that replay or convert it.
"""

import json
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .curl import CurlParser
from .entries import (
    DataEntry,
    EntryKind,
    FlagEntry,
    HeaderEntry,
    MethodEntry,
    ParsedEntry,
    UrlEntry,
)
from .url import ParsedUrl


def filter_entries(entries: Iterable[ParsedEntry], part: Union[str, EntryKind]) -> List[ParsedEntry]:
    """Keep only the entries of one kind (method, header, data, flag, url)."""
    kind = EntryKind.from_name(part)
    return [entry for entry in entries if entry.kind is kind]


@dataclass
class DecodedRequest:
    """Complete decoded curl request"""
    url: ParsedUrl
    method: str = "GET"
    headers: List[Tuple[str, str]] = field(default_factory=list)
    data: List[str] = field(default_factory=list)
    flags: List[str] = field(default_factory=list)
    remainder: str = ""

    @property
    def body(self) -> Optional[str]:
        """Data values joined the way curl joins repeated -d options."""
        if not self.data:
            return None
        return '&'.join(self.data)

    def header_dict(self) -> Dict[str, str]:
        """Headers keyed by lowercased name; later duplicates win."""
        return {name.lower(): value for name, value in self.headers}

    def to_dict(self) -> Dict:
        """Convert to dictionary"""
        return {
            'url': self.url.to_url(),
            'url_parts': self.url.to_dict(),
            'method': self.method,
            'headers': [{'name': name, 'value': value} for name, value in self.headers],
            'data': self.data,
            'body': self.body,
            'flags': self.flags,
            'remainder': self.remainder,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string"""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def build_request(entries: Iterable[ParsedEntry], remainder: str = "") -> DecodedRequest:
    """
    Fold parsed entries into a DecodedRequest.

    The last -X wins; without one the method is POST when data is present
    and GET otherwise.
    """
    url = None
    method = None
    headers = []
    data = []
    flags = []

    for entry in entries:
        if isinstance(entry, UrlEntry):
            if url is None:
                url = entry.url
        elif isinstance(entry, MethodEntry):
            method = entry.value
        elif isinstance(entry, HeaderEntry):
            headers.append(entry.split())
        elif isinstance(entry, DataEntry):
            data.append(entry.value)
        elif isinstance(entry, FlagEntry):
            flags.append(entry.identifier)

    if url is None:
        raise ValueError("Entries contain no URL")

    if method is None:
        method = "POST" if data else "GET"

    return DecodedRequest(
        url=url,
        method=method,
        headers=headers,
        data=data,
        flags=flags,
        remainder=remainder,
    )


class CurlRequestDecoder:
    """Decoder from curl command to DecodedRequest"""

    def __init__(self, strict: bool = False):
        self.curl_parser = CurlParser(strict=strict)

    def decode_curl(self, curl_command: str) -> DecodedRequest:
        """
        Decode a complete curl command.

        Args:
            curl_command: Full curl command string

        Returns:
            DecodedRequest with all parsed components
        """
        entries, remainder = self.curl_parser.parse_with_remainder(curl_command)
        return build_request(entries, remainder)


def decode_curl(curl_command: str, strict: bool = False) -> DecodedRequest:
    """
    Convenience function to decode a curl command.

    Args:
        curl_command: Full curl command string
        strict: Reject commands with unparsed trailing text

    Returns:
        DecodedRequest with all parsed components
    """
    decoder = CurlRequestDecoder(strict=strict)
    return decoder.decode_curl(curl_command)
