"""Outbound request construction."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .. import __version__
from ..utils.headers import get_header, merge_headers
from ..utils.url import host_header, split_url
from .models import OutboundRequest, Payload

logger = logging.getLogger(__name__)

USER_AGENT = f"soapwire/{__version__}"
ACCEPT = "text/html,application/xhtml+xml,application/xml,text/xml;q=0.9,*/*;q=0.8"

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType({
    "User-Agent": USER_AGENT,
    "Accept": ACCEPT,
    "Accept-Encoding": "none",
    "Accept-Charset": "utf-8",
    "Connection": "close",
})

DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType({
    "follow_redirects": True,
})

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class RequestBuilder:
    """Turns a URL and payload into an OutboundRequest.

    Pure data transformation: no network I/O happens here. The default
    header and option sets are injected once and never mutated.
    """

    def __init__(
        self,
        default_headers: Optional[Mapping[str, str]] = None,
        default_options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._default_headers = MappingProxyType(
            dict(DEFAULT_HEADERS if default_headers is None else default_headers)
        )
        self._default_options = MappingProxyType(
            dict(DEFAULT_OPTIONS if default_options is None else default_options)
        )

    def build(
        self,
        url: str,
        payload: Optional[Payload] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
        extra_options: Optional[Mapping[str, Any]] = None,
    ) -> OutboundRequest:
        """Build the request description.

        Args:
            url: Target URL
            payload: Request body; a non-empty payload makes this a POST
            extra_headers: Headers applied over the defaults
            extra_options: Executor options applied over the defaults

        Returns:
            OutboundRequest ready for an executor

        Raises:
            ValueError: If the URL cannot be parsed (e.g. invalid port)
        """
        parts = split_url(url)
        method = "POST" if payload else "GET"

        headers = dict(self._default_headers)
        headers["Host"] = host_header(parts.host, parts.port)

        if isinstance(payload, str):
            headers["Content-Length"] = str(len(payload.encode("utf-8")))
            headers["Content-Type"] = FORM_CONTENT_TYPE

        merge_headers(headers, extra_headers)

        options = dict(self._default_options)
        options.update(extra_options or {})

        request = OutboundRequest(
            method=method,
            url=url,
            secure=parts.scheme == "https",
            host=parts.host,
            port=parts.port,
            path=parts.path,
            headers=headers,
            options=options,
            payload=payload,
        )
        # Keep-alive executors may delay writing the body, so it travels
        # with the description instead of being written after dispatch.
        if get_header(headers, "Connection") == "keep-alive":
            request.body = payload

        logger.debug("Http request: %s %s headers=%s options=%s",
                     method, url, headers, options)
        return request


def build_request(
    url: str,
    payload: Optional[Payload] = None,
    extra_headers: Optional[Mapping[str, str]] = None,
    extra_options: Optional[Mapping[str, Any]] = None,
) -> OutboundRequest:
    """Build a request with the process-wide default headers."""
    return _DEFAULT_BUILDER.build(url, payload, extra_headers, extra_options)


_DEFAULT_BUILDER = RequestBuilder()
