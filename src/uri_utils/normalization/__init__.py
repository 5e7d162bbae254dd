"""
URI normalization utilities.

Handles component canonicalization and query decomposition.
"""

from .normalizer import URINormalizer
from .query import decompose_query

__all__ = [
    "URINormalizer",
    "decompose_query",
]
