"""soapwire CLI entry point."""

import logging

import click
from rich.logging import RichHandler

from . import __version__
from .commands import call, extract


@click.group()
@click.version_option(__version__, prog_name="soapwire")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and raw responses")
def main(verbose):
    """soapwire - SOAP HTTP transport with MTOM attachment extraction."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


main.add_command(call)
main.add_command(extract)


if __name__ == "__main__":
    main()
