"""
URI normalization.

Applies syntax-based normalization to raw components:
- Lowercase scheme and registered-name host
- Decode percent-encoded unreserved characters, uppercase remaining triplets
- Optionally drop a port equal to the scheme's default

The query is carried over as written, and dot-segments ("." and "..") are
left in the path untouched.
"""

import dataclasses
from typing import Optional

from uri_utils.config import get_config
from uri_utils.grammar.percent import normalize_percent_encoding
from uri_utils.models import RawURI


class URINormalizer:
    """
    Normalization engine for RawURI values.

    Every rule is idempotent, so normalizing an already normalized URI is a
    no-op.

    Usage:
        normalizer = URINormalizer()
        raw = normalizer.normalize(scan("HTTP://Example.COM/%7ehome"))
        print(raw.scheme, raw.host, raw.path)  # http example.com /~home
    """

    def __init__(
        self,
        default_ports: Optional[dict[str, str]] = None,
        strip_default_port: Optional[bool] = None,
    ):
        """
        Initialize normalizer.

        Args:
            default_ports: Scheme -> default port digits (defaults to config)
            strip_default_port: Drop default ports (defaults to config)
        """
        config = get_config().parser
        self.default_ports = {
            scheme.lower(): port
            for scheme, port in (
                default_ports if default_ports is not None else config.default_ports
            ).items()
        }
        self.strip_default_port = (
            strip_default_port
            if strip_default_port is not None
            else config.strip_default_port
        )

    def normalize(self, raw: RawURI) -> RawURI:
        """
        Normalize a RawURI.

        Args:
            raw: Components as returned by the grammar scanner

        Returns:
            A new RawURI with normalized components
        """
        scheme = self._normalize_scheme(raw.scheme)

        return dataclasses.replace(
            raw,
            scheme=scheme,
            user_info=self._normalize_encoding(raw.user_info),
            host=self._normalize_host(raw.host),
            port=self._normalize_port(raw.port, scheme),
            path=normalize_percent_encoding(raw.path),
            query=raw.query,
            fragment=self._normalize_encoding(raw.fragment),
        )

    def _normalize_scheme(self, scheme: Optional[str]) -> Optional[str]:
        if scheme is None:
            return None
        return scheme.lower()

    def _normalize_host(self, host: Optional[str]) -> Optional[str]:
        """
        Lowercase a registered name.

        Unreserved triplets are decoded before lowercasing so that "%41"
        ends up as "a", then the hex digits of the remaining triplets are
        uppercased again. IP literals are left as written.
        """
        if host is None or host.startswith("["):
            return host
        return normalize_percent_encoding(normalize_percent_encoding(host).lower())

    def _normalize_port(self, port: Optional[str], scheme: Optional[str]) -> Optional[str]:
        """Drop the port when it equals the scheme default (digit-for-digit)."""
        if port is None or not self.strip_default_port or scheme is None:
            return port

        if port == self.default_ports.get(scheme):
            return None

        return port

    def _normalize_encoding(self, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return normalize_percent_encoding(value)
