"""soapwire - HTTP transport for SOAP clients with MTOM attachment support."""

__version__ = "0.1.0"

from .transport import Attachment, SoapHttpClient, SoapResponse  # noqa: E402

__all__ = ["__version__", "Attachment", "SoapHttpClient", "SoapResponse"]
