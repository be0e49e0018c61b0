"""
Page URL normalization.

Referers are decoded and re-serialized the way a browser resolves an
anchor's href: lowercase scheme and host, default ports dropped, a root
path for empty paths, and unsafe characters percent-encoded.
"""

from typing import NamedTuple
from urllib.parse import quote, unquote, urlsplit, urlunsplit

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}

_PATH_SAFE = "/:@!$&'()*+,;=%-._~"
_QUERY_SAFE = "/?:@!$&()*+,;=%-._~"
_FRAGMENT_SAFE = "/?:@!$&'()*+,;=%-._~#[]{}|\\^"


class ParsedUrl(NamedTuple):
    """Normalized URL and the parts the adapter reads."""

    href: str
    protocol: str
    hostname: str


def parse_url(url: str) -> ParsedUrl:
    """
    Decode and normalize a page URL.

    Args:
        url: Raw URL, possibly percent-encoded

    Returns:
        ParsedUrl with the normalized href, the scheme without its colon
        and the lowercase hostname; all empty for an empty URL, and only
        the decoded href for a URL that cannot be split
    """
    if not url:
        return ParsedUrl("", "", "")

    decoded = unquote(url)
    try:
        parts = urlsplit(decoded)
    except ValueError:
        return ParsedUrl(decoded, "", "")

    scheme = parts.scheme.lower()
    hostname = parts.hostname or ""

    try:
        port = parts.port
    except ValueError:
        port = None

    netloc = hostname
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        netloc = f"{hostname}:{port}"
    if parts.username is not None:
        userinfo = parts.username
        if parts.password is not None:
            userinfo = f"{userinfo}:{parts.password}"
        netloc = f"{userinfo}@{netloc}"

    path = parts.path
    if netloc and not path:
        path = "/"

    href = urlunsplit((
        scheme,
        netloc,
        quote(path, safe=_PATH_SAFE),
        quote(parts.query, safe=_QUERY_SAFE),
        quote(parts.fragment, safe=_FRAGMENT_SAFE),
    ))
    return ParsedUrl(href, scheme, hostname)
