"""Extract command - run response extraction on a saved body."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from ..transport import RawResponse, SoapHttpClient
from ..visualization.console import print_response

console = Console()


def attachment_filename(content_id: str) -> Optional[str]:
    """File name for an attachment, or None when the id cannot name a file."""
    name = content_id.replace("/", "_").replace("\\", "_")
    if name in ("", ".", ".."):
        return None
    return name


@click.command()
@click.argument("body_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--content-type", "-t", default="text/xml",
              help="Content-Type header of the saved response")
@click.option("--save-dir", type=click.Path(file_okay=False), default=None,
              help="Write attachment data to this directory")
def extract(body_file, content_type, save_dir):
    """Extract the SOAP envelope and MTOM attachments from a saved response.

    Pass the response's Content-Type so the multipart boundary can be found.
    """
    with open(body_file, "r", encoding="utf-8", errors="replace", newline="") as f:
        body = f.read()

    raw = RawResponse(
        status_code=200,
        headers={"Content-Type": content_type},
        body=body,
        url=str(Path(body_file).resolve()),
    )
    response = SoapHttpClient().handle_response(raw)
    print_response(console, response)

    if save_dir and response.attachments:
        target = Path(save_dir)
        target.mkdir(parents=True, exist_ok=True)
        for cid, attachment in response.attachments.items():
            if attachment.data is None:
                continue
            name = attachment_filename(cid)
            if name is None:
                console.print(f"[yellow]Skipped:[/yellow] unusable content id {cid!r}")
                continue
            out = target / name
            out.write_text(attachment.data, encoding="utf-8")
            console.print(f"[green]Saved:[/green] {out}")
