"""Tests for outbound request construction."""

import pytest

from soapwire import __version__
from soapwire.transport.request_builder import (
    DEFAULT_HEADERS,
    FORM_CONTENT_TYPE,
    RequestBuilder,
    build_request,
)


class TestMethodSelection:
    """GET without payload, POST with one."""

    @pytest.mark.parametrize("payload", [None, ""])
    def test_no_payload_is_get(self, payload):
        request = build_request("http://h:8080/p", payload)
        assert request.method == "GET"

    @pytest.mark.parametrize("payload", ["<x/>", b"\x00\x01"])
    def test_payload_is_post(self, payload):
        request = build_request("http://h/p", payload)
        assert request.method == "POST"


class TestUrlHandling:
    def test_host_with_explicit_port(self):
        request = build_request("http://h:8080/p")
        assert request.headers["Host"] == "h:8080"
        assert request.port == 8080

    def test_host_without_port(self):
        request = build_request("https://example.com/service")
        assert request.headers["Host"] == "example.com"
        assert request.port is None

    def test_ipv6_host_keeps_brackets(self):
        request = build_request("http://[::1]:8080/ws")
        assert request.headers["Host"] == "[::1]:8080"
        assert request.port == 8080

    def test_secure_flag(self):
        assert build_request("https://example.com/").secure is True
        assert build_request("http://example.com/").secure is False

    def test_path_keeps_query_and_fragment(self):
        request = build_request("http://h/svc/ws?wsdl=1#frag")
        assert request.path == "/svc/ws?wsdl=1#frag"

    def test_empty_path_defaults_to_root(self):
        assert build_request("http://h").path == "/"

    def test_invalid_port_propagates(self):
        with pytest.raises(ValueError):
            build_request("http://h:notaport/")


class TestDefaultHeaders:
    def test_defaults_present(self):
        headers = build_request("http://h/").headers
        assert headers["User-Agent"] == f"soapwire/{__version__}"
        assert headers["Accept-Encoding"] == "none"
        assert headers["Accept-Charset"] == "utf-8"
        assert headers["Connection"] == "close"
        assert "application/xml" in headers["Accept"]

    def test_text_payload_sets_length_and_type(self):
        payload = "café"  # 5 bytes in UTF-8
        headers = build_request("http://h/", payload).headers
        assert headers["Content-Length"] == "5"
        assert headers["Content-Type"] == FORM_CONTENT_TYPE

    def test_bytes_payload_sets_no_length(self):
        headers = build_request("http://h/", b"raw").headers
        assert "Content-Length" not in headers
        assert "Content-Type" not in headers

    def test_defaults_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_HEADERS["Connection"] = "keep-alive"

    def test_builds_do_not_share_headers(self):
        first = build_request("http://a/")
        first.headers["X-Test"] = "1"
        assert "X-Test" not in build_request("http://b/").headers


class TestExtraHeaders:
    def test_extra_header_overrides_default(self):
        request = build_request(
            "http://h/", "<x/>", {"Content-Type": "text/xml; charset=utf-8"}
        )
        assert request.headers["Content-Type"] == "text/xml; charset=utf-8"

    def test_override_is_case_insensitive(self):
        request = build_request("http://h/", None, {"connection": "upgrade"})
        assert request.headers["connection"] == "upgrade"
        assert "Connection" not in request.headers

    def test_keep_alive_puts_payload_in_body(self):
        request = build_request("http://h/", "<x/>", {"Connection": "keep-alive"})
        assert request.headers["Connection"] == "keep-alive"
        assert request.body == "<x/>"
        assert request.deferred_body is None

    def test_close_defers_payload(self):
        request = build_request("http://h/", "<x/>")
        assert request.body is None
        assert request.deferred_body == "<x/>"


class TestOptions:
    def test_redirects_followed_by_default(self):
        assert build_request("http://h/").options["follow_redirects"] is True

    def test_extra_options_override(self):
        request = build_request(
            "http://h/", None, None, {"follow_redirects": False, "timeout": 5}
        )
        assert request.options == {"follow_redirects": False, "timeout": 5}


class TestInjectedDefaults:
    def test_custom_default_headers(self):
        builder = RequestBuilder(default_headers={"User-Agent": "custom/1.0"})
        headers = builder.build("http://h/").headers
        assert headers["User-Agent"] == "custom/1.0"
        assert headers["Host"] == "h"
        assert "Accept" not in headers

    def test_custom_default_options(self):
        builder = RequestBuilder(default_options={"follow_redirects": False})
        assert builder.build("http://h/").options["follow_redirects"] is False
