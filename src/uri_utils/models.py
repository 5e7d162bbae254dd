"""
Result types shared by the parser, normalizer and extractor.

A parsed authority carries exactly one host variant. The variants are
separate frozen classes joined in the ``Host`` union, so a result can never
hold, say, both an IPv4 and an IPv6 address.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union


@dataclass(frozen=True)
class NamedHost:
    """A registered name, percent-decoded."""

    kind: ClassVar[str] = "named"

    name: str

    @property
    def text(self) -> str:
        return self.name


@dataclass(frozen=True)
class IPv4Host:
    """An IPv4 literal as 4 network-order octets."""

    kind: ClassVar[str] = "ipv4"

    address: bytes

    @property
    def text(self) -> str:
        return ".".join(str(octet) for octet in self.address)


@dataclass(frozen=True)
class IPv6Host:
    """An IPv6 literal as 16 network-order octets plus the text between the brackets."""

    kind: ClassVar[str] = "ipv6"

    address: bytes
    literal: str

    @property
    def text(self) -> str:
        return self.literal


@dataclass(frozen=True)
class IPFutureHost:
    """A bracketed "vX.*" literal, kept verbatim."""

    kind: ClassVar[str] = "ipfuture"

    literal: str

    @property
    def text(self) -> str:
        return self.literal


Host = Union[NamedHost, IPv4Host, IPv6Host, IPFutureHost]


@dataclass(frozen=True)
class RawURI:
    """
    Undecoded URI components as matched by the grammar scanner.

    Attributes:
        scheme: Scheme without the trailing ":" (None for a relative reference)
        user_info: Text before "@" in the authority
        host: Host text, brackets included (None when there is no authority)
        port: Port digits after ":" (may be empty)
        path: Full path, leading "/" included
        query: Text after "?" (None when there is no "?")
        fragment: Text after "#" (None when there is no "#")
    """

    scheme: Optional[str]
    user_info: Optional[str]
    host: Optional[str]
    port: Optional[str]
    path: str
    query: Optional[str]
    fragment: Optional[str]

    @property
    def has_authority(self) -> bool:
        return self.host is not None


@dataclass(frozen=True)
class ParsedURI:
    """
    A single parsed URI. Instances are immutable and hashable.

    Attributes:
        scheme: Scheme, if present
        user_info: Decoded userinfo, if present
        host: Host variant, or None if the URI has no authority
        port_text: Port digits exactly as written (not an integer)
        path: Decoded path segments
        absolute_path: True iff the path began with "/"
        query: Raw query string
        fragment: Decoded fragment
        query_pairs: Decoded (key, value) pairs in order, when requested
    """

    scheme: Optional[str]
    user_info: Optional[str]
    host: Optional[Host]
    port_text: Optional[str]
    path: tuple[str, ...]
    absolute_path: bool
    query: Optional[str]
    fragment: Optional[str]
    query_pairs: Optional[tuple[tuple[str, str], ...]] = None

    @property
    def host_text(self) -> Optional[str]:
        return self.host.text if self.host is not None else None

    @property
    def host_type(self) -> Optional[str]:
        return self.host.kind if self.host is not None else None

    @property
    def ipv4(self) -> Optional[bytes]:
        return self.host.address if isinstance(self.host, IPv4Host) else None

    @property
    def ipv6(self) -> Optional[bytes]:
        return self.host.address if isinstance(self.host, IPv6Host) else None

    @property
    def ip_future(self) -> Optional[str]:
        return self.host.literal if isinstance(self.host, IPFutureHost) else None

    @property
    def keys(self) -> Optional[tuple[str, ...]]:
        if self.query_pairs is None:
            return None
        return tuple(key for key, _ in self.query_pairs)

    @property
    def values(self) -> Optional[tuple[str, ...]]:
        if self.query_pairs is None:
            return None
        return tuple(value for _, value in self.query_pairs)


@dataclass(frozen=True)
class ExtractionResult:
    """
    URIs found in a text, as index-aligned parallel lists.

    Entry i of every list describes the i'th URI found. Absent components
    and unused host variants are empty strings (or empty bytes), never None,
    so all lists always have the same length.
    """

    FIELDS: ClassVar[tuple[str, ...]] = (
        "scheme",
        "user_info",
        "host_text",
        "ipv4",
        "ipv6",
        "ip_future",
        "port_text",
        "path",
        "query",
        "fragment",
        "absolute_path",
        "uri",
    )

    scheme: list[str] = field(default_factory=list)
    user_info: list[str] = field(default_factory=list)
    host_text: list[str] = field(default_factory=list)
    ipv4: list[bytes] = field(default_factory=list)
    ipv6: list[bytes] = field(default_factory=list)
    ip_future: list[str] = field(default_factory=list)
    port_text: list[str] = field(default_factory=list)
    path: list[str] = field(default_factory=list)
    query: list[str] = field(default_factory=list)
    fragment: list[str] = field(default_factory=list)
    absolute_path: list[bool] = field(default_factory=list)
    uri: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.uri)

    def entries(self) -> list[dict]:
        """Return one dict per located URI (row view of the columns)."""
        columns = [getattr(self, name) for name in self.FIELDS]
        return [dict(zip(self.FIELDS, row)) for row in zip(*columns)]
