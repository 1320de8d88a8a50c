"""Call command - send a SOAP request and show the extracted response."""

from __future__ import annotations

import sys

import click
import httpx
from rich.console import Console

from ..config import load_config
from ..errors import ConfigError
from ..utils.headers import parse_header_line
from ..visualization.console import format_request_line, headers_table, print_response

console = Console()


@click.command()
@click.argument("url")
@click.option("--data", "-d", "data_file", type=click.File("r", encoding="utf-8"),
              default=None, help="Request body file ('-' for stdin)")
@click.option("--header", "-H", "header_lines", multiple=True,
              help="Extra header 'Name: value' (repeatable)")
@click.option("--keep-alive", is_flag=True, help="Send Connection: keep-alive")
@click.option("--no-redirects", is_flag=True, help="Don't follow redirects")
@click.option("--timeout", "-t", type=float, default=None, help="Timeout in seconds")
@click.option("--raw", is_flag=True, help="Keep the body as bytes (skip extraction)")
@click.option("--show-headers", is_flag=True, help="Show request and response headers")
@click.option("--config", "-c", "config_path", default=None, help="Config file path")
def call(url, data_file, header_lines, keep_alive, no_redirects, timeout, raw,
         show_headers, config_path):
    """Send a request to URL and print the SOAP envelope and attachments.

    \b
    Examples:
      soapwire call http://localhost:8080/ws -d request.xml \\
          -H "Content-Type: text/xml; charset=utf-8" -H "SOAPAction: urn:Get"
    """
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    try:
        extra_headers = dict(parse_header_line(line) for line in header_lines)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    if keep_alive:
        extra_headers["Connection"] = "keep-alive"

    extra_options = {}
    if no_redirects:
        extra_options["follow_redirects"] = False
    if timeout is not None:
        extra_options["timeout"] = timeout
    if raw:
        extra_options["encoding"] = None

    payload = data_file.read() if data_file else None

    client = cfg.create_client()
    try:
        outbound = client.build_request(
            url, payload, cfg.call_headers(extra_headers), extra_options
        )
    except ValueError as e:
        console.print(f"[red]Invalid URL:[/red] {e}")
        sys.exit(1)

    console.print(format_request_line(outbound))
    if show_headers:
        console.print(headers_table(outbound.headers, "Request headers"))

    try:
        response = client.dispatch(outbound)
    except httpx.HTTPError as e:
        console.print(f"[red]Request failed:[/red] {e}")
        sys.exit(1)

    print_response(console, response, show_headers=show_headers)
