"""
Query string decomposition.
"""

from typing import Optional

from uri_utils.grammar.percent import percent_decode


def decompose_query(
    query: Optional[str], decompose: bool = True
) -> Optional[list[tuple[str, str]]]:
    """
    Split a raw query string into decoded (key, value) pairs.

    Fragments are separated on "&" and split at the first "=". A fragment
    without "=" yields an empty value. Order and duplicate keys are kept.

    Args:
        query: Raw query string (None if the URI has no query)
        decompose: When False, no pairs are produced

    Returns:
        List of pairs, or None when decomposition is off or query is None

    Raises:
        InvalidURI: If a key or value does not percent-decode
    """
    if not decompose or query is None:
        return None

    pairs = []
    for fragment in query.split("&"):
        key, _, value = fragment.partition("=")
        pairs.append(
            (percent_decode(key, "query key"), percent_decode(value, "query value"))
        )

    return pairs
