"""
In-text URI extraction.

Scans free text for "scheme://" prefixes from an allow-list and emits every
grammar-valid URI found as one aligned entry of an ExtractionResult.
"""

import logging
import re
from enum import Enum
from typing import Iterable, Optional

from uri_utils.config import get_config
from uri_utils.exceptions import InvalidURI
from uri_utils.grammar.hosts import parse_host
from uri_utils.grammar.percent import percent_decode
from uri_utils.grammar.scanner import measure_candidate, scan, split_path
from uri_utils.models import (
    ExtractionResult,
    IPFutureHost,
    IPv4Host,
    IPv6Host,
    NamedHost,
    RawURI,
)
from uri_utils.normalization import URINormalizer

logger = logging.getLogger(__name__)


class ExtractorState(Enum):
    """States of the extraction loop."""

    SCANNING = "scanning"
    IN_URI = "in_uri"
    EMIT = "emit"


class URIExtractor:
    """
    Extract URIs embedded in text.

    Matches never overlap. A candidate that fails validation is dropped
    silently and scanning resumes one character after where it started.

    Usage:
        extractor = URIExtractor()
        result = extractor.extract("See http://example.com/ and https://[::1]/ now")
        print(result.uri)  # ['http://example.com/', 'https://[::1]/']
    """

    def __init__(
        self,
        schemes: Optional[Iterable[str]] = None,
        normalizer: Optional[URINormalizer] = None,
    ):
        """
        Initialize extractor.

        Args:
            schemes: Scheme allow-list (defaults to config.parser.extract_schemes)
            normalizer: Normalizer used when extract(normalize=True)
        """
        config = get_config().parser
        self.schemes = tuple(
            dict.fromkeys(
                scheme.lower()
                for scheme in (schemes if schemes is not None else config.extract_schemes)
                if scheme
            )
        )
        self.normalizer = normalizer or URINormalizer()

        # Longest first so "https" wins over "http"; the lookbehind keeps
        # "xhttp://" from matching as "http://" while "end.http://" still matches.
        alternation = "|".join(
            re.escape(scheme) for scheme in sorted(self.schemes, key=len, reverse=True)
        )
        self._scheme_pattern = (
            re.compile(rf"(?<![A-Za-z0-9+\-])(?:{alternation})://", re.IGNORECASE)
            if self.schemes
            else None
        )

    def extract(self, text: str, normalize: bool = False) -> ExtractionResult:
        """
        Find all URIs in text.

        Args:
            text: Free text to scan
            normalize: Normalize every field except the verbatim "uri" entry

        Returns:
            ExtractionResult with one aligned entry per URI found
        """
        result = ExtractionResult()
        if self._scheme_pattern is None or not text:
            return result

        state = ExtractorState.SCANNING
        pos = 0
        start = prefix_end = end = 0

        while True:
            if state is ExtractorState.SCANNING:
                match = self._scheme_pattern.search(text, pos)
                if match is None:
                    break
                start, prefix_end = match.start(), match.end()
                state = ExtractorState.IN_URI

            elif state is ExtractorState.IN_URI:
                end = measure_candidate(text, start)
                if end <= prefix_end:
                    # Nothing after "scheme://": a partial match, not a URI.
                    pos = start + 1
                    state = ExtractorState.SCANNING
                else:
                    state = ExtractorState.EMIT

            elif state is ExtractorState.EMIT:
                candidate = text[start:end]
                try:
                    self._append(result, candidate, normalize)
                except InvalidURI as e:
                    logger.debug(
                        "Discarding candidate at offset %d: %s", start, e.reason
                    )
                    pos = start + 1
                else:
                    pos = end
                state = ExtractorState.SCANNING

        return result

    def _append(self, result: ExtractionResult, candidate: str, normalize: bool) -> None:
        """Validate candidate and append one entry to every column."""
        raw = scan(candidate, require_scheme=True)
        if normalize:
            raw = self.normalizer.normalize(raw)

        entry = self._build_entry(raw)
        entry["uri"] = candidate

        for name in ExtractionResult.FIELDS:
            getattr(result, name).append(entry[name])

    def _build_entry(self, raw: RawURI) -> dict:
        """Flatten a RawURI into column values, "" for absent parts."""
        host = parse_host(raw.host) if raw.host is not None else None
        segments, absolute = split_path(raw.path)

        return {
            "scheme": raw.scheme or "",
            "user_info": percent_decode(raw.user_info, "userinfo") if raw.user_info else "",
            "host_text": host.name if isinstance(host, NamedHost) else "",
            "ipv4": host.address if isinstance(host, IPv4Host) else b"",
            "ipv6": host.address if isinstance(host, IPv6Host) else b"",
            "ip_future": host.literal if isinstance(host, IPFutureHost) else "",
            "port_text": raw.port or "",
            "path": "/".join(segments),
            "query": raw.query or "",
            "fragment": percent_decode(raw.fragment, "fragment") if raw.fragment else "",
            "absolute_path": absolute,
        }
