"""Unit tests for help text."""

import pytest

from uri_utils import usage
from uri_utils.usage import FUNCTIONS, USAGE_OPTION


class TestUsage:
    """Test suite for usage."""

    def test_functions(self):
        """Test every public entry point has help text."""
        assert FUNCTIONS == ("parse_uri", "extract_uri", "parse_domain")

    @pytest.mark.parametrize("function", FUNCTIONS)
    def test_summary(self, function):
        """Test the summary names the function and points at the full text."""
        text = usage(function)

        assert text.lstrip().startswith(f"{function}:")
        assert "For full usage instructions" in text
        assert "Synopsis" not in text

    @pytest.mark.parametrize("function", FUNCTIONS)
    def test_full(self, function):
        """Test the full text has synopsis, usage and example sections."""
        text = usage(function, USAGE_OPTION)

        assert "Synopsis" in text
        assert "Usage" in text
        assert "Example" in text

    def test_unknown_option_gives_summary(self):
        """Test options other than 'usage' fall back to the summary."""
        assert usage("parse_domain", "other") == usage("parse_domain")

    def test_unknown_function(self):
        """Test an unknown entry point raises KeyError."""
        with pytest.raises(KeyError):
            usage("parse_url")
