"""
Public entry points: parse_uri, extract_uri and parse_domain.

All three are pure functions of their arguments.
"""

from typing import Optional

from uri_utils.domain import parse_domain
from uri_utils.extraction import URIExtractor
from uri_utils.grammar import decode_uri, scan
from uri_utils.models import ExtractionResult, ParsedURI
from uri_utils.normalization import URINormalizer, decompose_query


def parse_uri(
    uri: str,
    normalize: bool = False,
    parse_query: bool = False,
    *,
    normalizer: Optional[URINormalizer] = None,
) -> ParsedURI:
    """
    Parse a URI into its components.

    Args:
        uri: URI (or relative reference) in text form
        normalize: Return normalized components
        parse_query: Decompose the query into key/value pairs
        normalizer: Normalizer to use (creates new if None)

    Returns:
        ParsedURI

    Raises:
        InvalidURI: If uri is empty or malformed
    """
    raw = scan(uri)

    # Pairs always come from the query as written.
    query_pairs = decompose_query(raw.query, parse_query)

    if normalize:
        raw = (normalizer or URINormalizer()).normalize(raw)

    return decode_uri(raw, query_pairs=query_pairs)


def extract_uri(text: str, normalize: bool = False) -> ExtractionResult:
    """
    Extract all URIs embedded in text.

    Never raises for string input; returns empty lists when nothing is found.
    """
    return URIExtractor().extract(text, normalize=normalize)


__all__ = ["parse_uri", "extract_uri", "parse_domain"]
