"""Unit tests for URI normalization."""

import pytest

from uri_utils.grammar import scan
from uri_utils.normalization import URINormalizer


class TestURINormalizer:
    """Test suite for URINormalizer."""

    @pytest.fixture
    def normalizer(self):
        """Create a URINormalizer instance with config defaults."""
        return URINormalizer()

    @pytest.fixture
    def stripping_normalizer(self):
        """Create a URINormalizer that drops default ports."""
        return URINormalizer(strip_default_port=True)

    def test_basic_normalization(self, normalizer):
        """Test every rule on one URI."""
        raw = normalizer.normalize(
            scan("HTTP://User@Example.COM:80/%7ea/%2fb?q=%7e#F%2f")
        )

        assert raw.scheme == "http"
        assert raw.user_info == "User"
        assert raw.host == "example.com"
        assert raw.port == "80"
        assert raw.path == "/~a/%2Fb"
        assert raw.query == "q=%7e"
        assert raw.fragment == "F%2F"

    def test_query_left_as_written(self, normalizer):
        """Test the query keeps its original percent-encoding."""
        raw = normalizer.normalize(scan("http://a.com/?x=%7e&y=%2f"))

        assert raw.query == "x=%7e&y=%2f"

    def test_host_escapes(self, normalizer):
        """Test unreserved escapes in the host are decoded before lowercasing."""
        assert normalizer.normalize(scan("http://%41.COM/")).host == "a.com"
        assert normalizer.normalize(scan("http://a%2fb/")).host == "a%2Fb"

    def test_ip_literal_unchanged(self, normalizer):
        """Test bracketed literals are left as written."""
        raw = normalizer.normalize(scan("http://[FE80::1]/"))
        assert raw.host == "[FE80::1]"

    def test_port_kept_by_default(self, normalizer):
        """Test default ports survive unless stripping is enabled."""
        assert normalizer.normalize(scan("http://a.com:80/")).port == "80"

    @pytest.mark.parametrize(
        "uri, port",
        [
            ("http://a.com:80/", None),
            ("https://a.com:443/", None),
            ("HTTP://a.com:80/", None),
            ("http://a.com:080/", "080"),
            ("http://a.com:8080/", "8080"),
            ("https://a.com:80/", "80"),
            ("http://a.com:/", ""),
            ("foo://a.com:80/", "80"),
        ],
    )
    def test_default_port_removal(self, stripping_normalizer, uri, port):
        """Test only a digit-for-digit default port is dropped."""
        assert stripping_normalizer.normalize(scan(uri)).port == port

    def test_custom_default_ports(self):
        """Test the default port table can be overridden."""
        normalizer = URINormalizer(default_ports={"FOO": "1234"}, strip_default_port=True)

        assert normalizer.normalize(scan("foo://a.com:1234/")).port is None
        assert normalizer.normalize(scan("http://a.com:80/")).port == "80"

    def test_dot_segments_kept(self, normalizer):
        """Test dot-segments are not resolved."""
        raw = normalizer.normalize(scan("http://a.com/a/../b/./c"))
        assert raw.path == "/a/../b/./c"

    def test_relative_reference(self, normalizer):
        """Test a reference without scheme or host."""
        raw = normalizer.normalize(scan("/a%7e"))

        assert raw.scheme is None
        assert raw.host is None
        assert raw.path == "/a~"

    @pytest.mark.parametrize(
        "uri",
        [
            "HTTP://User@Example.COM:80/%7ea/%2fb?q=%7e#F%2f",
            "https://[::1]:443/x%2f%7E",
            "mailto:Someone%40Example.com",
            "http://%C3%A9.EXAMPLE/",
        ],
    )
    def test_idempotent(self, stripping_normalizer, uri):
        """Test normalizing twice equals normalizing once."""
        once = stripping_normalizer.normalize(scan(uri))
        assert stripping_normalizer.normalize(once) == once

    def test_config_enables_stripping(self, monkeypatch):
        """Test strip_default_port defaults come from the environment."""
        monkeypatch.setenv("URI_STRIP_DEFAULT_PORT", "true")

        normalizer = URINormalizer()

        assert normalizer.strip_default_port is True
        assert normalizer.normalize(scan("http://a.com:80/")).port is None
