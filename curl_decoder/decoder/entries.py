"""
Parsed entry types

One entry per structured unit of a curl command: the target URL, or a
method, header, data or flag option. All entries are immutable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple, Type, Union

from .url import ParsedUrl


class EntryKind(Enum):
    """Kinds of parsed entries"""
    METHOD = 'method'
    HEADER = 'header'
    DATA = 'data'
    FLAG = 'flag'
    URL = 'url'

    @classmethod
    def from_name(cls, name: Union[str, 'EntryKind']) -> 'EntryKind':
        if isinstance(name, cls):
            return name
        lowered = str(name).strip().lower()
        for kind in cls:
            if kind.value == lowered:
                return kind
        raise ValueError(f"Unknown entry kind: {name}")


@dataclass(frozen=True)
class OptionEntry:
    """An option carrying a quoted value, e.g. ``-H 'Accept: */*'``"""
    value: str
    raw_flag: str = ""

    kind: ClassVar[EntryKind]
    tags: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self):
        if not self.tags:
            raise TypeError("OptionEntry is abstract; use MethodEntry, HeaderEntry or DataEntry")
        if not self.value:
            raise ValueError(f"{type(self).__name__} value must not be empty")
        if self.raw_flag and self.raw_flag not in self.tags:
            raise ValueError(f"{self.raw_flag!r} is not a {self.kind.value} tag")
        # Canonical identifier is always the first tag (--data -> -d)
        object.__setattr__(self, 'raw_flag', self.tags[0])

    @classmethod
    def from_tag(cls, tag: str, value: str) -> Optional['OptionEntry']:
        """
        Build the entry for an option tag.

        Returns None for an empty value, so empty arguments are never
        represented.
        """
        if not value:
            return None
        for entry_type in OPTION_TYPES:
            if tag in entry_type.tags:
                return entry_type(value=value)
        raise ValueError(f"Unknown option tag: {tag}")

    def to_dict(self) -> Dict:
        return {'kind': self.kind.value, 'flag': self.raw_flag, 'value': self.value}


@dataclass(frozen=True)
class MethodEntry(OptionEntry):
    kind: ClassVar[EntryKind] = EntryKind.METHOD
    tags: ClassVar[Tuple[str, ...]] = ('-X',)


@dataclass(frozen=True)
class HeaderEntry(OptionEntry):
    kind: ClassVar[EntryKind] = EntryKind.HEADER
    tags: ClassVar[Tuple[str, ...]] = ('-H',)

    def split(self) -> Tuple[str, str]:
        """Split into (name, value) on the first colon. No validation."""
        name, _, value = self.value.partition(':')
        return name.strip(), value.strip()


@dataclass(frozen=True)
class DataEntry(OptionEntry):
    kind: ClassVar[EntryKind] = EntryKind.DATA
    tags: ClassVar[Tuple[str, ...]] = ('-d', '--data')


@dataclass(frozen=True)
class FlagEntry:
    """A valueless option such as ``-v`` or ``--insecure``"""
    identifier: str

    kind: ClassVar[EntryKind] = EntryKind.FLAG

    def __post_init__(self):
        if not self.identifier:
            raise ValueError("Flag identifier must not be empty")

    def to_dict(self) -> Dict:
        return {'kind': self.kind.value, 'flag': self.identifier}


@dataclass(frozen=True)
class UrlEntry:
    """The target URL of the command"""
    url: ParsedUrl

    kind: ClassVar[EntryKind] = EntryKind.URL

    def to_dict(self) -> Dict:
        return {'kind': self.kind.value, 'url': self.url.to_dict()}


OPTION_TYPES: Tuple[Type[OptionEntry], ...] = (MethodEntry, HeaderEntry, DataEntry)

ParsedEntry = Union[MethodEntry, HeaderEntry, DataEntry, FlagEntry, UrlEntry]
