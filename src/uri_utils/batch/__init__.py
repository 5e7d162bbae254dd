"""
Batch processing over Polars DataFrames.
"""

from .processor import EXTRACT_SCHEMA, PARSE_SCHEMA, URIBatchProcessor

__all__ = [
    "URIBatchProcessor",
    "PARSE_SCHEMA",
    "EXTRACT_SCHEMA",
]
