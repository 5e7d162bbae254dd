"""Unit tests for domain splitting."""

import pytest

from uri_utils import parse_domain
from uri_utils.domain import DomainSplitter, get_domain_splitter


class TestParseDomain:
    """Test suite for parse_domain."""

    @pytest.mark.parametrize(
        "domain, labels",
        [
            ("www.example.com", ["www", "example", "com"]),
            ("localhost", ["localhost"]),
            ("", [""]),
            ("a..b", ["a", "", "b"]),
            ("example.com.", ["example", "com", ""]),
            (".", ["", ""]),
            ("Ex ample.c_m", ["Ex ample", "c_m"]),
        ],
    )
    def test_split(self, domain, labels):
        """Test a plain split on '.' with no validation."""
        assert parse_domain(domain) == labels


class TestDomainSplitter:
    """Test suite for DomainSplitter."""

    @pytest.fixture
    def splitter(self):
        """Shared splitter (loading the suffix list is slow)."""
        return get_domain_splitter()

    def test_shared_instance(self):
        """Test get_domain_splitter caches its splitter."""
        assert get_domain_splitter() is get_domain_splitter()
        assert isinstance(get_domain_splitter(), DomainSplitter)

    def test_labels(self, splitter):
        """Test labels matches parse_domain."""
        assert splitter.labels("www.example.co.uk") == ["www", "example", "co", "uk"]

    def test_registered_domain(self, splitter):
        """Test eTLD+1 extraction."""
        assert splitter.registered_domain("www.example.com") == "example.com"
        assert splitter.registered_domain("www.example.co.uk") == "example.co.uk"
        assert splitter.registered_domain("WWW.Example.COM") == "example.com"

    def test_public_suffix(self, splitter):
        """Test public suffix lookup."""
        assert splitter.public_suffix("www.example.co.uk") == "co.uk"
        assert splitter.public_suffix("example.com") == "com"

    def test_suffix_only(self, splitter):
        """Test a bare public suffix has no registered domain."""
        assert splitter.registered_domain("co.uk") is None

    @pytest.mark.parametrize("domain", ["", "a..example.com", "example.com."])
    def test_empty_labels(self, splitter, domain):
        """Test names with empty labels are not looked up."""
        assert splitter.registered_domain(domain) is None
        assert splitter.public_suffix(domain) is None
