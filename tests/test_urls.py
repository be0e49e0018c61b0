"""Tests for page URL normalization."""

import pytest

from src.adpopcorn.utils.urls import ParsedUrl, parse_url


class TestParseUrl:
    """Test suite for parse_url."""

    def test_empty_url(self):
        """Test that an empty URL yields empty parts."""
        assert parse_url("") == ParsedUrl("", "", "")

    def test_root_path_added(self):
        """Test that a URL without a path gains a root path."""
        parsed = parse_url("https://example.com")

        assert parsed.href == "https://example.com/"
        assert parsed.protocol == "https"
        assert parsed.hostname == "example.com"

    def test_scheme_and_host_lowercased(self):
        """Test that scheme and host are normalized to lowercase."""
        parsed = parse_url("HTTPS://WWW.Example.COM/Path")

        assert parsed.href == "https://www.example.com/Path"
        assert parsed.hostname == "www.example.com"

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("http://example.com:80/a", "http://example.com/a"),
            ("https://example.com:443/a", "https://example.com/a"),
            ("https://example.com:8443/a", "https://example.com:8443/a"),
        ],
    )
    def test_default_port_dropped(self, url, expected):
        """Test that only the scheme's default port is dropped."""
        assert parse_url(url).href == expected

    def test_decodes_then_reencodes(self):
        """Test that encoded text is decoded and unsafe characters re-encoded."""
        parsed = parse_url("https://example.com/a%20b/%EC%95%88?q=%ED%95%9C")

        assert parsed.href == "https://example.com/a%20b/%EC%95%88?q=%ED%95%9C"

    def test_encoded_url_decoded(self):
        """Test that a fully encoded URL is parsed after decoding."""
        parsed = parse_url("https%3A%2F%2Fexample.com%2Fpage")

        assert parsed.href == "https://example.com/page"
        assert parsed.protocol == "https"

    def test_fragment_preserved(self):
        """Test that fragments survive with spaces encoded."""
        assert parse_url("https://example.com/p#top section").href == (
            "https://example.com/p#top%20section"
        )

    def test_userinfo_preserved(self):
        """Test that credentials stay in the href."""
        assert parse_url("https://user:pw@example.com/").href == "https://user:pw@example.com/"

    def test_invalid_port_ignored(self):
        """Test that an out-of-range port is dropped."""
        assert parse_url("https://example.com:99999/").href == "https://example.com/"

    def test_unsplittable_url(self):
        """Test that a malformed host yields the decoded text only."""
        assert parse_url("http://[::1") == ParsedUrl("http://[::1", "", "")
