"""Exceptions raised by soapwire.

Transport failures are not wrapped: they surface as the executor's own
``httpx.HTTPError``.
"""


class SoapwireError(Exception):
    """Base class for soapwire errors."""


class ConfigError(SoapwireError):
    """Configuration file is missing, unreadable or invalid."""
