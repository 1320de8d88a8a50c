"""Utility functions for soapwire."""

from .url import UrlParts, split_url, host_header
from .headers import (
    find_header_key,
    get_header,
    set_header,
    merge_headers,
    parse_header_line,
)
from .formatting import truncate_text, describe_size

__all__ = [
    "UrlParts",
    "split_url",
    "host_header",
    "find_header_key",
    "get_header",
    "set_header",
    "merge_headers",
    "parse_header_line",
    "truncate_text",
    "describe_size",
]
