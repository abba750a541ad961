"""src/redirectdemo/exceptions.py

Errors raised by redirectdemo clients.

Everything derives from ``RedirectDemoError``. A redirect that the client's
policy declines is a normal response, never an exception.
"""

# pylint: disable=redefined-builtin

from typing import Optional

__all__ = [
    "RedirectDemoError",
    "RequestError",
    "NetworkError",
    "TlsError",
    "TimeoutError",
    "ConnectTimeout",
    "ReadTimeout",
    "WriteTimeout",
    "ProtocolError",
    "InvalidResponseError",
    "ResponseParseError",
    "RedirectError",
    "RedirectLoopError",
    "TooManyRedirects",
]


class RedirectDemoError(Exception):
    """Root of the redirectdemo error tree."""


class RequestError(RedirectDemoError):
    """A request could not be completed."""


# Transport


class NetworkError(RequestError):
    """Connecting, writing or reading failed; the socket error is the ``__cause__``."""


class TlsError(NetworkError):
    """TLS handshake or certificate verification failed."""


class TimeoutError(RequestError):
    """A socket operation ran past its configured ``Timeout``."""

    def __init__(self, message: str = "Operation timed out"):
        super().__init__(message)


class ConnectTimeout(TimeoutError):
    """No connection within ``Timeout.connect``."""


class ReadTimeout(TimeoutError):
    """No response bytes within ``Timeout.read``."""


class WriteTimeout(TimeoutError):
    """The request could not be written within ``Timeout.read``."""


# Wire format


class ProtocolError(RequestError):
    """The peer's bytes are not a usable HTTP/1.1 response."""


class InvalidResponseError(ProtocolError):
    """Malformed status line or head, or a body that fails to decode."""


class ResponseParseError(ProtocolError):
    """Raised by ``Response`` when a buffered reply cannot be parsed."""


# Redirect following


class RedirectError(RequestError):
    """A followed redirect chain could not reach a terminal response.

    Attributes:
        url: URL the chain stopped at, if known.
    """

    def __init__(self, message: str, *, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class RedirectLoopError(RedirectError):
    """A hop targeted a URL already requested in the same chain."""


class TooManyRedirects(RedirectError):
    """The chain needed more hops than the client's ``max_redirects``."""
