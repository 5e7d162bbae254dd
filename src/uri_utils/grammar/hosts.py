"""
Host literal classification.

Splits a raw authority host into a registered name, an IPv4 address, an IPv6
address or an IPvFuture literal.
"""

import ipaddress
import re

from uri_utils.exceptions import InvalidURI
from uri_utils.models import Host, IPFutureHost, IPv4Host, IPv6Host, NamedHost

from .percent import percent_decode

# Each of these ABNF rules is from RFC 3986.

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
_HEXDIG = r"[0-9A-Fa-f]"

# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
_DEC_OCTET = r"(?:[0-9]|[1-9][0-9]|1[0-9]{2}|2[0-4][0-9]|25[0-5])"

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
_IPV4ADDRESS = rf"{_DEC_OCTET}\.{_DEC_OCTET}\.{_DEC_OCTET}\.{_DEC_OCTET}"

# h16 = 1*4HEXDIG
_H16 = rf"(?:{_HEXDIG}{{1,4}})"

# ls32 = ( h16 ":" h16 ) / IPv4address
_LS32 = rf"(?:{_H16}:{_H16}|{_IPV4ADDRESS})"

# IPv6address =                            6( h16 ":" ) ls32
#             /                       "::" 5( h16 ":" ) ls32
#             / [               h16 ] "::" 4( h16 ":" ) ls32
#             / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#             / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#             / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#             / [ *4( h16 ":" ) h16 ] "::"              ls32
#             / [ *5( h16 ":" ) h16 ] "::"              h16
#             / [ *6( h16 ":" ) h16 ] "::"
IPV6ADDRESS = (
    "(?:"
    + "|".join(
        (
            rf"(?:{_H16}:){{6}}{_LS32}",
            rf"::(?:{_H16}:){{5}}{_LS32}",
            rf"(?:{_H16})?::(?:{_H16}:){{4}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,1}}{_H16})?::(?:{_H16}:){{3}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,2}}{_H16})?::(?:{_H16}:){{2}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,3}}{_H16})?::{_H16}:{_LS32}",
            rf"(?:(?:{_H16}:){{0,4}}{_H16})?::{_LS32}",
            rf"(?:(?:{_H16}:){{0,5}}{_H16})?::{_H16}",
            rf"(?:(?:{_H16}:){{0,6}}{_H16})?::",
        )
    )
    + ")"
)

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
IPVFUTURE = rf"[vV]{_HEXDIG}+\.[A-Za-z0-9\-._~!$&'()*+,;=:]+"

_IPV4_PAT = re.compile(_IPV4ADDRESS)
_IPV6_PAT = re.compile(IPV6ADDRESS)
_IPVFUTURE_PAT = re.compile(IPVFUTURE)


def parse_host(raw_host: str) -> Host:
    """
    Classify a raw (undecoded) host into one of the host variants.

    Args:
        raw_host: Host text as it appears in the authority, brackets included

    Returns:
        The matching host variant

    Raises:
        InvalidURI: If a bracketed literal is malformed or a reg-name does not decode
    """
    if raw_host.startswith("["):
        if not raw_host.endswith("]") or len(raw_host) < 2:
            raise InvalidURI(raw_host, "unterminated IP literal")
        literal = raw_host[1:-1]

        if literal[:1] in ("v", "V"):
            if not _IPVFUTURE_PAT.fullmatch(literal):
                raise InvalidURI(raw_host, "malformed IPvFuture literal")
            return IPFutureHost(literal=literal)

        if not _IPV6_PAT.fullmatch(literal):
            raise InvalidURI(raw_host, "malformed IPv6 literal")
        try:
            address = ipaddress.IPv6Address(literal)
        except ValueError as e:
            raise InvalidURI(raw_host, f"malformed IPv6 literal: {e}") from e
        return IPv6Host(address=address.packed, literal=literal)

    if _IPV4_PAT.fullmatch(raw_host):
        return IPv4Host(address=bytes(int(octet) for octet in raw_host.split(".")))

    return NamedHost(name=percent_decode(raw_host, "host"))
