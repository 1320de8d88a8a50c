"""Data models for the SOAP HTTP transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..utils.headers import get_header

Payload = Union[str, bytes]


@dataclass
class OutboundRequest:
    """Fully specified outbound HTTP request description."""

    method: str  # GET or POST
    url: str
    secure: bool
    host: str
    port: Optional[int]
    path: str  # path + query + fragment
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[Payload] = None
    options: dict[str, Any] = field(default_factory=dict)
    payload: Optional[Payload] = None

    @property
    def keep_alive(self) -> bool:
        return get_header(self.headers, "Connection") == "keep-alive"

    @property
    def deferred_body(self) -> Optional[Payload]:
        """Payload written after dispatch, or None when it rides in ``body``."""
        if self.keep_alive:
            return None
        return self.payload or None


@dataclass
class RawResponse:
    """Response as handed back by an HTTP executor."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: Payload = ""
    url: str = ""
    elapsed_ms: float = 0.0


@dataclass
class Attachment:
    """An MTOM binary part referenced from the envelope via xop:Include."""

    content_id: str
    mime: Optional[str] = None
    data: Optional[str] = None


@dataclass
class SoapResponse:
    """Processed response: extracted envelope plus its attachments."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: Payload = ""
    attachments: dict[str, Attachment] = field(default_factory=dict)
    url: str = ""
    elapsed_ms: float = 0.0
