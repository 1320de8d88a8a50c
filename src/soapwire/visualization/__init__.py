"""Visualization helpers for soapwire."""

from .console import (
    status_style,
    format_request_line,
    headers_table,
    attachments_table,
    print_response,
)

__all__ = [
    "status_style",
    "format_request_line",
    "headers_table",
    "attachments_table",
    "print_response",
]
