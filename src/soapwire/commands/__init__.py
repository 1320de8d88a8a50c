"""CLI commands for soapwire."""

from .call import call
from .extract import extract

__all__ = [
    "call",
    "extract",
]
