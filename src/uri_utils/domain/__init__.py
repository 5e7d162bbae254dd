"""
Domain name utilities.

Handles label splitting and eTLD+1 extraction.
"""

from .splitter import DomainSplitter, get_domain_splitter, parse_domain

__all__ = [
    "DomainSplitter",
    "get_domain_splitter",
    "parse_domain",
]
