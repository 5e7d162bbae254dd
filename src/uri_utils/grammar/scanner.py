"""
Grammar scanner.

Matches a candidate string against the RFC 3986 URI / relative-ref grammar,
classifies the host literal, and decodes components into a ParsedURI.
"""

import re
from typing import Optional

from uri_utils.exceptions import InvalidURI
from uri_utils.models import ParsedURI, RawURI

from .hosts import IPV6ADDRESS, IPVFUTURE, parse_host
from .percent import percent_decode

# pct-encoded = "%" HEXDIG HEXDIG
_PCT_ENCODED = r"%[0-9A-Fa-f]{2}"

# pchar = unreserved / pct-encoded / sub-delims / ":" / "@"
_PCHAR = r"(?:[A-Za-z0-9\-._~!$&'()*+,;=:@]|" + _PCT_ENCODED + ")"

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME = r"(?P<scheme>[A-Za-z][A-Za-z0-9+\-.]*)"

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
_USERINFO = r"(?P<userinfo>(?:[A-Za-z0-9\-._~!$&'()*+,;=:]|" + _PCT_ENCODED + ")*)"

# IP-literal = "[" ( IPv6address / IPvFuture ) "]"
# Only the character set is checked here; parse_host validates the content.
_IP_LITERAL = r"\[[A-Za-z0-9\-._~!$&'()*+,;=:%]*\]"

# reg-name = *( unreserved / pct-encoded / sub-delims )
_REG_NAME = r"(?:[A-Za-z0-9\-._~!$&'()*+,;=]|" + _PCT_ENCODED + ")*"

# host = IP-literal / IPv4address / reg-name
_HOST = rf"(?P<host>{_IP_LITERAL}|{_REG_NAME})"

# port = *DIGIT
_PORT = r"(?P<port>[0-9]*)"

# authority = [ userinfo "@" ] host [ ":" port ]
_AUTHORITY = rf"(?:{_USERINFO}@)?{_HOST}(?::{_PORT})?"

# segment = *pchar / segment-nz = 1*pchar
_SEGMENT = rf"{_PCHAR}*"
_SEGMENT_NZ = rf"{_PCHAR}+"

# segment-nz-nc = 1*( unreserved / pct-encoded / sub-delims / "@" )
_SEGMENT_NZ_NC = r"(?:[A-Za-z0-9\-._~!$&'()*+,;=@]|" + _PCT_ENCODED + ")+"

_PATH_ABEMPTY = rf"(?P<path_abempty>(?:/{_SEGMENT})*)"
_PATH_ABSOLUTE = rf"(?P<path_absolute>/(?:{_SEGMENT_NZ}(?:/{_SEGMENT})*)?)"
_PATH_ROOTLESS = rf"(?P<path_rootless>{_SEGMENT_NZ}(?:/{_SEGMENT})*)"
_PATH_NOSCHEME = rf"(?P<path_noscheme>{_SEGMENT_NZ_NC}(?:/{_SEGMENT})*)"
_PATH_EMPTY = r"(?P<path_empty>)"

# query = *( pchar / "/" / "?" ), fragment likewise
_QUERY = rf"(?P<query>(?:{_PCHAR}|[/?])*)"
_FRAGMENT = rf"(?P<fragment>(?:{_PCHAR}|[/?])*)"

# URI = scheme ":" hier-part [ "?" query ] [ "#" fragment ]
_URI_PAT = re.compile(
    rf"{_SCHEME}:(?://{_AUTHORITY}{_PATH_ABEMPTY}|{_PATH_ABSOLUTE}|{_PATH_ROOTLESS}|{_PATH_EMPTY})"
    rf"(?:\?{_QUERY})?(?:#{_FRAGMENT})?"
)
_URI_PATH_KINDS = ("path_abempty", "path_absolute", "path_rootless", "path_empty")

# relative-ref = relative-part [ "?" query ] [ "#" fragment ]
_RELATIVE_REF_PAT = re.compile(
    rf"(?://{_AUTHORITY}{_PATH_ABEMPTY}|{_PATH_ABSOLUTE}|{_PATH_NOSCHEME}|{_PATH_EMPTY})"
    rf"(?:\?{_QUERY})?(?:#{_FRAGMENT})?"
)
_RELATIVE_REF_PATH_KINDS = ("path_abempty", "path_absolute", "path_noscheme", "path_empty")

# The "scheme://..." prefix of text that is itself a valid URI. Each part
# only takes the characters its own production allows (digits after the port
# ":", nothing but ":", "/", "?" or "#" after "]"), and IP literals are
# checked in full, so a measured span always passes scan().
_CANDIDATE_PAT = re.compile(
    r"[A-Za-z][A-Za-z0-9+\-.]*://"
    r"(?:(?:[A-Za-z0-9\-._~!$&'()*+,;=:]|" + _PCT_ENCODED + ")*@)?"
    rf"(?:\[(?:{IPV6ADDRESS}|{IPVFUTURE})\]|{_REG_NAME})"
    r"(?::[0-9]*)?"
    rf"(?:/{_SEGMENT})*"
    rf"(?:\?(?:{_PCHAR}|[/?])*)?"
    rf"(?:#(?:{_PCHAR}|[/?])*)?"
)


def scan(text: str, require_scheme: bool = False) -> RawURI:
    """
    Match text against the URI grammar.

    Args:
        text: Candidate URI
        require_scheme: Reject relative references (used for extraction candidates)

    Returns:
        RawURI with undecoded components

    Raises:
        InvalidURI: If text is empty, does not match the grammar, or has a
            malformed host literal
    """
    if not text:
        raise InvalidURI(text, "empty input")

    match = _URI_PAT.fullmatch(text)
    path_kinds = _URI_PATH_KINDS
    if match is None and not require_scheme:
        match = _RELATIVE_REF_PAT.fullmatch(text)
        path_kinds = _RELATIVE_REF_PATH_KINDS
    if match is None:
        raise InvalidURI(text, "does not match the URI grammar")

    groups = match.groupdict()
    host = groups["host"]
    if host is not None:
        parse_host(host)

    return RawURI(
        scheme=groups.get("scheme"),
        user_info=groups["userinfo"],
        host=host,
        port=groups["port"],
        path=next(groups[kind] for kind in path_kinds if groups[kind] is not None),
        query=groups["query"],
        fragment=groups["fragment"],
    )


def measure_candidate(text: str, start: int) -> int:
    """
    Return the end offset of the grammar-legal span beginning at start.

    The span stops at whitespace or at the first character that cannot
    continue the current production, so "http://a.com:8080, then" ends
    after "8080". A span longer than the "scheme://" prefix is always a
    valid URI. Returns start when no "scheme://" prefix is present there.
    """
    match = _CANDIDATE_PAT.match(text, start)
    if match is None:
        return start
    return match.end()


def split_path(raw_path: str) -> tuple[list[str], bool]:
    """
    Split a raw path into segments.

    A single leading "/" marks the path absolute and does not produce an
    empty first segment; empty segments elsewhere are kept.

    e.g. split_path("/a//b/") == (["a", "", "b", ""], True)
    """
    absolute = raw_path.startswith("/")
    rest = raw_path[1:] if absolute else raw_path
    if not rest:
        return [], absolute
    return rest.split("/"), absolute


def _decode_optional(value: Optional[str], component: str) -> Optional[str]:
    if value is None:
        return None
    return percent_decode(value, component)


def decode_uri(
    raw: RawURI, query_pairs: Optional[list[tuple[str, str]]] = None
) -> ParsedURI:
    """
    Decode a RawURI into a ParsedURI.

    The query is carried over raw; userinfo, reg-name host, path segments and
    fragment are percent-decoded.
    """
    segments, absolute = split_path(raw.path)

    return ParsedURI(
        scheme=raw.scheme,
        user_info=_decode_optional(raw.user_info, "userinfo"),
        host=parse_host(raw.host) if raw.host is not None else None,
        port_text=raw.port,
        path=tuple(percent_decode(segment, "path segment") for segment in segments),
        absolute_path=absolute,
        query=raw.query,
        fragment=_decode_optional(raw.fragment, "fragment"),
        query_pairs=tuple(query_pairs) if query_pairs is not None else None,
    )
