"""
Domain name splitting.

parse_domain is a strict split on "." with no validation. DomainSplitter adds
eTLD+1 and public-suffix lookups via the Public Suffix List.
"""

from functools import lru_cache
from typing import Optional

from publicsuffixlist import PublicSuffixList


def parse_domain(domain: str) -> list[str]:
    """
    Split a hierarchical domain name into its labels.

    Empty labels from leading, trailing or repeated dots are kept, and the
    empty string yields [""].

    e.g. parse_domain("www.example.com") == ["www", "example", "com"]
    """
    return domain.split(".")


class DomainSplitter:
    """
    Domain label splitting plus Public Suffix List lookups.

    Usage:
        splitter = DomainSplitter()
        splitter.labels("www.example.co.uk")             # ['www', 'example', 'co', 'uk']
        splitter.registered_domain("www.example.co.uk")  # 'example.co.uk'
        splitter.public_suffix("www.example.co.uk")      # 'co.uk'
    """

    def __init__(self, psl: Optional[PublicSuffixList] = None):
        """Initialize splitter with a Public Suffix List."""
        self.psl = psl or PublicSuffixList()

    def labels(self, domain: str) -> list[str]:
        return parse_domain(domain)

    def registered_domain(self, domain: str) -> Optional[str]:
        """
        Extract eTLD+1 (effective top-level domain + 1 label).

        Returns:
            eTLD+1 domain, or None when the name is itself a public suffix,
            has empty labels, or is not a dotted name
        """
        if not self._is_lookup_candidate(domain):
            return None
        return self.psl.privatesuffix(domain.lower())

    def public_suffix(self, domain: str) -> Optional[str]:
        """Return the public suffix of domain, or None if it has none."""
        if not self._is_lookup_candidate(domain):
            return None
        return self.psl.publicsuffix(domain.lower())

    def _is_lookup_candidate(self, domain: str) -> bool:
        return bool(domain) and all(parse_domain(domain))


@lru_cache(maxsize=1)
def get_domain_splitter() -> DomainSplitter:
    """Shared splitter; loading the suffix list is comparatively slow."""
    return DomainSplitter()
