"""HTTP/1.1 request parsing, header handling and response writing, with TCP and UDP tools."""

__version__ = "0.1.0"
__all__ = ["headers", "request", "response", "tcplistener", "udpsender"]