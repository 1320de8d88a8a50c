"""HTTP header helpers.

Header mappings keep the key case they were given; lookups and overrides
compare names case-insensitively.
"""

from __future__ import annotations

from typing import Mapping, Optional


def find_header_key(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Return the key actually used for ``name`` in headers, or None."""
    lower = name.lower()
    for key in headers:
        if key.lower() == lower:
            return key
    return None


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    key = find_header_key(headers, name)
    if key is None:
        return None
    return headers[key]


def set_header(headers: dict[str, str], name: str, value: str) -> None:
    """Set a header, replacing any existing key that differs only in case."""
    existing = find_header_key(headers, name)
    if existing is not None and existing != name:
        del headers[existing]
    headers[name] = value


def merge_headers(
    headers: dict[str, str], extra: Optional[Mapping[str, str]]
) -> dict[str, str]:
    """Apply extra headers over headers in place and return it."""
    for name, value in (extra or {}).items():
        set_header(headers, name, str(value))
    return headers


def parse_header_line(line: str) -> tuple[str, str]:
    """Parse a ``Name: value`` string.

    Raises:
        ValueError: If the line has no colon or an empty name
    """
    name, sep, value = line.partition(":")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"Invalid header (expected 'Name: value'): {line!r}")
    return name, value.strip()
