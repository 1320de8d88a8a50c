"""HTTP executors: the part of the transport that touches the network."""

from __future__ import annotations

import time
from typing import Iterator, Optional, Protocol

import httpx

from .models import OutboundRequest, Payload, RawResponse

DEFAULT_TIMEOUT = 30.0
DEFAULT_ENCODING = "utf-8"


class HttpExecutor(Protocol):
    """Performs one HTTP exchange for an OutboundRequest.

    ``deferred_body`` is written after the request head has been
    dispatched. Transport failures are raised as ``httpx.HTTPError``.
    """

    def execute(
        self,
        request: OutboundRequest,
        deferred_body: Optional[Payload] = None,
    ) -> RawResponse:
        ...


def _encode(payload: Payload) -> bytes:
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return payload


def _stream(payload: Payload) -> Iterator[bytes]:
    # httpx sends the headers before pulling from the iterator
    yield _encode(payload)


class HttpxExecutor:
    """Default executor backed by httpx.

    A fresh ``httpx.Client`` is opened per exchange, so concurrent calls
    share no connection state. Designed to be mockable for testing.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        proxy: Optional[str] = None,
    ) -> None:
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._proxy = proxy

    def execute(
        self,
        request: OutboundRequest,
        deferred_body: Optional[Payload] = None,
    ) -> RawResponse:
        """Send the request and return the raw response.

        Options read from ``request.options``:
            follow_redirects: follow 3xx responses (default True)
            timeout: per-request timeout in seconds
            encoding: text encoding of the body; None returns bytes

        Raises:
            httpx.HTTPError: On connection/timeout/protocol errors
        """
        options = request.options
        if request.body is not None:
            content = _encode(request.body)
        elif deferred_body is not None:
            content = _stream(deferred_body)
        else:
            content = None

        start = time.monotonic()

        with httpx.Client(
            timeout=options.get("timeout", self._timeout),
            verify=self._verify_ssl,
            proxy=self._proxy,
            follow_redirects=options.get("follow_redirects", True),
        ) as client:
            response = client.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                content=content,
            )

        elapsed = (time.monotonic() - start) * 1000  # ms

        encoding = options.get("encoding", DEFAULT_ENCODING)
        if encoding is None:
            body: Payload = response.content
        else:
            body = response.content.decode(encoding, errors="replace")

        return RawResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=body,
            url=str(response.url),
            elapsed_ms=elapsed,
        )
