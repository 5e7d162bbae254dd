"""
Extraction of URIs embedded in free text.
"""

from .extractor import ExtractorState, URIExtractor

__all__ = [
    "ExtractorState",
    "URIExtractor",
]
