"""Rich console formatting for SOAP responses."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from ..transport.envelope import has_envelope
from ..transport.models import Attachment, OutboundRequest, SoapResponse
from ..utils.formatting import describe_size, truncate_text


def status_style(status_code: int) -> str:
    if status_code < 300:
        return "green"
    if status_code < 400:
        return "yellow"
    return "red"


def format_request_line(request: OutboundRequest) -> Text:
    text = Text()
    text.append(f"{request.method} ", style="bold magenta")
    text.append(request.url, style="white")
    if request.deferred_body is not None:
        text.append("  (body written after dispatch)", style="dim")
    return text


def headers_table(headers: dict[str, str], title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Header", style="cyan", no_wrap=True)
    table.add_column("Value")
    for name, value in headers.items():
        table.add_row(name, value)
    return table


def attachments_table(attachments: dict[str, Attachment]) -> Table:
    table = Table(title="Attachments", show_header=True, header_style="bold cyan")
    table.add_column("Content-Id", style="cyan")
    table.add_column("MIME")
    table.add_column("Size", justify="right")
    table.add_column("Data")
    for cid, attachment in attachments.items():
        if attachment.data is None:
            preview = Text("not found", style="red")
        else:
            preview = Text(truncate_text(attachment.data, 40), style="dim")
        table.add_row(
            cid,
            attachment.mime or "-",
            describe_size(attachment.data),
            preview,
        )
    return table


def print_response(
    console: Console,
    response: SoapResponse,
    show_headers: bool = False,
) -> None:
    """Render a processed response: status, envelope and attachments."""
    style = status_style(response.status_code)
    console.print(
        f"[{style}]HTTP {response.status_code}[/{style}] "
        f"[dim]{response.url} ({response.elapsed_ms:.0f} ms)[/dim]"
    )

    if show_headers:
        console.print(headers_table(response.headers, "Response headers"))

    body = response.body
    if isinstance(body, bytes):
        console.print(f"[dim]Binary body ({describe_size(body)})[/dim]")
    elif has_envelope(body):
        console.print(Panel(Syntax(body, "xml", word_wrap=True), title="Envelope"))
    else:
        console.print("[yellow]No SOAP envelope found; showing raw body[/yellow]")
        console.print(body, markup=False)

    if response.attachments:
        console.print(attachments_table(response.attachments))
