"""
URI grammar scanning.

Handles percent-encoding, host literal classification and component matching.
"""

from .hosts import parse_host
from .percent import UNRESERVED_CHARS, normalize_percent_encoding, percent_decode
from .scanner import decode_uri, measure_candidate, scan, split_path

__all__ = [
    "UNRESERVED_CHARS",
    "normalize_percent_encoding",
    "percent_decode",
    "parse_host",
    "scan",
    "measure_candidate",
    "split_path",
    "decode_uri",
]
