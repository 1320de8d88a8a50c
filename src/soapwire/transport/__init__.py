"""SOAP HTTP transport."""

from .models import (
    Attachment,
    OutboundRequest,
    RawResponse,
    SoapResponse,
)
from .request_builder import DEFAULT_HEADERS, RequestBuilder, build_request
from .envelope import extract_envelope
from .attachments import parse_attachments
from .executor import HttpExecutor, HttpxExecutor
from .http_client import SoapHttpClient

__all__ = [
    "Attachment",
    "OutboundRequest",
    "RawResponse",
    "SoapResponse",
    "DEFAULT_HEADERS",
    "RequestBuilder",
    "build_request",
    "extract_envelope",
    "parse_attachments",
    "HttpExecutor",
    "HttpxExecutor",
    "SoapHttpClient",
]
