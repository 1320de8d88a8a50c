"""SOAP HTTP client: request building, dispatch and response extraction."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from .attachments import parse_attachments
from .envelope import extract_envelope
from .executor import HttpExecutor, HttpxExecutor
from .models import OutboundRequest, Payload, RawResponse, SoapResponse
from .request_builder import RequestBuilder

logger = logging.getLogger(__name__)

Callback = Callable[
    [Optional[BaseException], Optional[SoapResponse], Optional[Payload]], None
]


class SoapHttpClient:
    """Transport for SOAP calls.

    Each call performs exactly one exchange through the executor. Nothing
    is retried, and no state is shared between calls besides the
    read-only default headers held by the builder.
    """

    def __init__(
        self,
        executor: Optional[HttpExecutor] = None,
        builder: Optional[RequestBuilder] = None,
    ) -> None:
        self._executor = executor if executor is not None else HttpxExecutor()
        self._builder = builder if builder is not None else RequestBuilder()

    def build_request(
        self,
        url: str,
        payload: Optional[Payload] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
        extra_options: Optional[Mapping[str, Any]] = None,
    ) -> OutboundRequest:
        return self._builder.build(url, payload, extra_headers, extra_options)

    def handle_response(self, raw: RawResponse) -> SoapResponse:
        """Extract attachments and the envelope from a raw response.

        Bytes bodies pass through untouched with an empty attachment map.
        """
        body = raw.body
        attachments = {}
        if isinstance(body, str):
            logger.debug("Http response body: %r", body)
            attachments = parse_attachments(raw.headers, body)
            body = extract_envelope(body)

        return SoapResponse(
            status_code=raw.status_code,
            headers=raw.headers,
            body=body,
            attachments=attachments,
            url=raw.url,
            elapsed_ms=raw.elapsed_ms,
        )

    def request(
        self,
        url: str,
        payload: Optional[Payload] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
        extra_options: Optional[Mapping[str, Any]] = None,
    ) -> SoapResponse:
        """Send a request and return the processed response.

        Raises:
            Exception: Whatever the executor raises (httpx.HTTPError for httpx), unchanged
            ValueError: If the URL cannot be parsed
        """
        outbound = self.build_request(url, payload, extra_headers, extra_options)
        return self.dispatch(outbound)

    def dispatch(self, outbound: OutboundRequest) -> SoapResponse:
        """Execute an already built request and process the response."""
        raw = self._executor.execute(outbound, outbound.deferred_body)
        return self.handle_response(raw)

    def send(
        self,
        url: str,
        payload: Optional[Payload],
        on_complete: Callback,
        extra_headers: Optional[Mapping[str, str]] = None,
        extra_options: Optional[Mapping[str, Any]] = None,
    ) -> OutboundRequest:
        """Send a request and report the outcome to on_complete.

        on_complete is called exactly once, with ``(error, None, None)`` when
        the executor raises or ``(None, response, body)`` on success.

        Returns:
            The request description that was dispatched
        """
        outbound = self.build_request(url, payload, extra_headers, extra_options)
        try:
            raw = self._executor.execute(outbound, outbound.deferred_body)
        except Exception as e:
            on_complete(e, None, None)
            return outbound

        response = self.handle_response(raw)
        on_complete(None, response, response.body)
        return outbound
