"""Unit tests for query decomposition."""

import pytest

from uri_utils.exceptions import InvalidURI
from uri_utils.normalization import decompose_query


class TestDecomposeQuery:
    """Test suite for decompose_query."""

    def test_pairs_in_order(self):
        """Test pairs keep their order."""
        assert decompose_query("who=I&whom=me") == [("who", "I"), ("whom", "me")]

    def test_duplicates_retained(self):
        """Test duplicate keys are kept."""
        assert decompose_query("a=1&a=2") == [("a", "1"), ("a", "2")]

    def test_key_without_value(self):
        """Test a fragment without '=' gets an empty value."""
        assert decompose_query("flag&x=1") == [("flag", ""), ("x", "1")]

    def test_split_on_first_equals(self):
        """Test only the first '=' separates key from value."""
        assert decompose_query("a=b=c") == [("a", "b=c")]

    def test_empty_query(self):
        """Test an empty query gives one empty pair."""
        assert decompose_query("") == [("", "")]

    def test_empty_fragments_kept(self):
        """Test empty fragments between '&' are kept."""
        assert decompose_query("a=1&&b=2") == [("a", "1"), ("", ""), ("b", "2")]

    def test_percent_decoded(self):
        """Test keys and values are percent-decoded."""
        assert decompose_query("k%20=v%26") == [("k ", "v&")]

    def test_plus_is_literal(self):
        """Test '+' is not turned into a space."""
        assert decompose_query("a+b=c+d") == [("a+b", "c+d")]

    def test_no_query(self):
        """Test an absent query gives None."""
        assert decompose_query(None) is None

    def test_disabled(self):
        """Test decompose=False gives None."""
        assert decompose_query("a=1", decompose=False) is None

    def test_malformed_escape(self):
        """Test a bad escape is rejected."""
        with pytest.raises(InvalidURI):
            decompose_query("a=%zz")
