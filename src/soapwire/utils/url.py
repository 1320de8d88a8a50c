"""URL utility functions."""

from __future__ import annotations

from typing import NamedTuple, Optional
from urllib.parse import urlparse


class UrlParts(NamedTuple):
    scheme: str
    host: str
    port: Optional[int]
    path: str


def split_url(url: str) -> UrlParts:
    """Split a URL into the pieces needed to address a request.

    Examples:
        http://h:8080/p?q=1#top -> ("http", "h", 8080, "/p?q=1#top")
        https://example.com -> ("https", "example.com", None, "/")

    Args:
        url: Absolute URL

    Returns:
        UrlParts with the path carrying query and fragment

    Raises:
        ValueError: If the port is not a valid number
    """
    parsed = urlparse(url)
    path = parsed.path or "/"
    if parsed.query:
        path += "?" + parsed.query
    if parsed.fragment:
        path += "#" + parsed.fragment
    return UrlParts(
        scheme=parsed.scheme.lower(),
        host=parsed.hostname or "",
        port=parsed.port,
        path=path,
    )


def host_header(host: str, port: Optional[int]) -> str:
    """Build a Host header value; the port is only added when explicit."""
    if ":" in host:
        host = f"[{host}]"
    if port is None:
        return host
    return f"{host}:{port}"
