"""
Percent-encoding helpers.

Every "%" must start a "%XX" triplet. Decoded octets are read as UTF-8;
octets that are not valid UTF-8 (Latin-1 data, say) become U+FFFD rather
than failing the whole URI.
"""

import re
from urllib.parse import unquote_to_bytes

from uri_utils.exceptions import InvalidURI

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
)

_PCT_TRIPLET = re.compile(r"%([0-9A-Fa-f]{2})")
_MALFORMED_PCT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def percent_decode(text: str, component: str = "component") -> str:
    """
    Decode %XX escapes in a URI component.

    Args:
        text: Raw (still encoded) component text
        component: Component name used in error messages

    Returns:
        Decoded string, with U+FFFD for each octet sequence that is not UTF-8

    Raises:
        InvalidURI: On a malformed triplet
    """
    if "%" not in text:
        return text

    if _MALFORMED_PCT.search(text):
        raise InvalidURI(text, f"malformed percent-encoding in {component}")

    return unquote_to_bytes(text).decode("utf-8", errors="replace")


def _canonical_triplet(match: re.Match[str]) -> str:
    char = chr(int(match.group(1), 16))
    if char in UNRESERVED_CHARS:
        return char
    return match.group(0).upper()


def normalize_percent_encoding(text: str) -> str:
    """
    Canonicalize percent-encoding.

    Triplets encoding an unreserved character become that character; the hex
    digits of every other triplet are uppercased. The result is stable under
    repeated application.

    e.g. normalize_percent_encoding("%7ehello%2fx") == "~hello%2Fx"
    """
    if "%" not in text:
        return text
    return _PCT_TRIPLET.sub(_canonical_triplet, text)
