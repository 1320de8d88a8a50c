"""Text formatting utility functions."""

from __future__ import annotations

from typing import Optional, Union


def truncate_text(text: str, max_length: int = 60, suffix: str = "...") -> str:
    """Truncate text to specified length with suffix.

    Args:
        text: Text to truncate
        max_length: Maximum length including suffix
        suffix: Suffix to append if truncated

    Returns:
        Truncated text with suffix, or original if short enough
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix


def describe_size(data: Optional[Union[str, bytes]]) -> str:
    """Human readable size of an attachment payload ("-" when missing)."""
    if data is None:
        return "-"
    size = len(data.encode("utf-8")) if isinstance(data, str) else len(data)
    if size < 1024:
        return f"{size} B"
    return f"{size / 1024:.1f} KB"
