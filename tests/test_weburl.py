"""Tests for the WebUrl type."""

import pytest

from linkcleaner.utils.weburl import UrlParseError, WebUrl


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("https://www.amazon.de", "https://www.amazon.de/"),
        ("HTTPS://WWW.Amazon.DE/Path", "https://www.amazon.de/Path"),
        ("https://www.amazon.de:443/dp/1", "https://www.amazon.de/dp/1"),
        ("http://www.amazon.de:80/dp/1", "http://www.amazon.de/dp/1"),
        ("https://www.amazon.de:8443/dp/1", "https://www.amazon.de:8443/dp/1"),
        ("http:www.amazon.de/dp/1", "http://www.amazon.de/dp/1"),
        ("  https://www.amazon.de/dp/1  ", "https://www.amazon.de/dp/1"),
        ("https://bücher.de/", "https://xn--bcher-kva.de/"),
        ("https://a.de/foo bar", "https://a.de/foo%20bar"),
        ("https://a.de/foo%20bar", "https://a.de/foo%20bar"),
        ("https://www.amazon.de/a/./b/../c", "https://www.amazon.de/a/c"),
        ("https://www.amazon.de\\Book\\dp\\1", "https://www.amazon.de/Book/dp/1"),
    ],
)
def test_parse_normalises(text: str, expected: str) -> None:
    """Test scheme/host lowercasing, default ports, IDNA and encoding."""
    assert str(WebUrl.parse(text)) == expected


def test_parse_keeps_query_and_fragment() -> None:
    """Test that query and fragment survive verbatim."""
    text = "https://www.amazon.de/x?keywords=rust+for%2Caps&sr=8-1#top"
    url = WebUrl.parse(text)
    assert url.query == "keywords=rust+for%2Caps&sr=8-1"
    assert url.fragment == "top"
    assert str(url) == text


def test_parse_keeps_empty_query_and_fragment() -> None:
    """Test that a bare '?' or '#' is kept apart from an absent one."""
    assert str(WebUrl.parse("https://www.amazon.de/x?")) == "https://www.amazon.de/x?"
    assert str(WebUrl.parse("https://www.amazon.de/x#")) == "https://www.amazon.de/x#"

    url = WebUrl.parse("https://www.amazon.de/x")
    assert url.query is None
    assert url.fragment is None


def test_question_mark_in_fragment_is_not_a_query() -> None:
    """Test that '?' after '#' belongs to the fragment."""
    url = WebUrl.parse("https://www.amazon.de/x#a?b")
    assert url.query is None
    assert url.fragment == "a?b"


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("www.amazon.de/dp/1", "relative URL without a base"),
        ("https://", "empty host"),
        ("http:", "empty host"),
        ("https://www.amazon.de:abc/", "invalid port number"),
        ("https://www.ama zon.de/", "invalid domain character"),
        ("https://[::1/", "IPv6"),
    ],
)
def test_parse_rejects_malformed(text: str, message: str) -> None:
    """Test that malformed URLs raise UrlParseError with a diagnostic."""
    with pytest.raises(UrlParseError, match=message):
        WebUrl.parse(text)


def test_parse_error_is_value_error() -> None:
    """Test that UrlParseError can be caught as ValueError."""
    with pytest.raises(ValueError):
        WebUrl.parse("https://")


def test_path_segments() -> None:
    """Test splitting the path into segments."""
    url = WebUrl.parse("https://www.amazon.de/-/en/dp/1718501854")
    assert url.path_segments() == ["-", "en", "dp", "1718501854"]
    assert WebUrl.parse("https://www.amazon.de").path_segments() == [""]
    assert WebUrl.parse("https://www.amazon.de/dp/").path_segments() == ["dp", ""]


def test_opaque_url_cannot_be_base() -> None:
    """Test that URLs without a path hierarchy have no segments."""
    url = WebUrl.parse("mailto:someone@example.com")
    assert url.cannot_be_base
    assert url.path_segments() is None
    assert str(url) == "mailto:someone@example.com"


def test_non_special_hierarchical_url() -> None:
    """Test that a non-web scheme with an authority still has segments."""
    url = WebUrl.parse("httpx://host/a/b")
    assert not url.cannot_be_base
    assert url.path_segments() == ["a", "b"]


def test_setters() -> None:
    """Test replacing path, query and fragment."""
    url = WebUrl.parse("https://www.amazon.de/-/en/x/dp/1?a=1#f")
    url.set_path("x/dp/1")
    url.set_query(None)
    url.set_fragment(None)
    assert str(url) == "https://www.amazon.de/x/dp/1"

    url.set_query("q=1")
    url.set_fragment("")
    assert str(url) == "https://www.amazon.de/x/dp/1?q=1#"


def test_equality() -> None:
    """Test that URLs compare by serialisation."""
    assert WebUrl.parse("https://WWW.amazon.de") == WebUrl.parse("https://www.amazon.de/")
    assert len({WebUrl.parse("https://a.de"), WebUrl.parse("https://a.de/")}) == 1


def test_query_and_fragment_keep_whatwg_safe_characters() -> None:
    """Test that characters WHATWG leaves alone in query and fragment are not escaped."""
    url = WebUrl.parse("https://www.amazon.de/s?k=a|b&rh=n[1]^{2}#{x}|[y]")
    assert url.query == "k=a|b&rh=n[1]^{2}"
    assert url.fragment == "{x}|[y]"


def test_query_and_fragment_escape_whatwg_sets() -> None:
    """Test that spaces, quotes and angle brackets are escaped."""
    url = WebUrl.parse("https://www.amazon.de/s?k=a b\"<'>#x y`")
    assert url.query == "k=a%20b%22%3C%27%3E"
    assert url.fragment == "x%20y%60"


def test_backslash_in_query_is_kept() -> None:
    """Test that only backslashes before the query become slashes."""
    url = WebUrl.parse("https://www.amazon.de\\x?a=\\b")
    assert url.path == "/x"
    assert url.query == "a=\\b"


def test_dot_segments_removed_before_splitting() -> None:
    """Test that '.' and '..' never reach the path segments."""
    url = WebUrl.parse("https://www.amazon.de/Book/x/../dp/./1")
    assert url.path_segments() == ["Book", "dp", "1"]
