"""
API serving layer.

Exposes parsing, extraction, domain splitting and help text over HTTP.
"""

from uri_utils.api.models import (
    DomainResponse,
    ExtractionResponse,
    ExtractRequest,
    ParsedURIResponse,
    UsageResponse,
)
from uri_utils.api.server import app

__all__ = [
    "DomainResponse",
    "ExtractionResponse",
    "ExtractRequest",
    "ParsedURIResponse",
    "UsageResponse",
    "app",
]
