"""
URI parsing, normalization and in-text URI extraction.
"""

from uri_utils.core import extract_uri, parse_domain, parse_uri
from uri_utils.exceptions import InvalidURI
from uri_utils.models import (
    ExtractionResult,
    Host,
    IPFutureHost,
    IPv4Host,
    IPv6Host,
    NamedHost,
    ParsedURI,
    RawURI,
)
from uri_utils.usage import usage

__version__ = "0.1.0"

__all__ = [
    "parse_uri",
    "extract_uri",
    "parse_domain",
    "usage",
    "InvalidURI",
    "ExtractionResult",
    "Host",
    "IPFutureHost",
    "IPv4Host",
    "IPv6Host",
    "NamedHost",
    "ParsedURI",
    "RawURI",
]
