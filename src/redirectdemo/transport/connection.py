"""src/redirectdemo/transport/connection.py

TCP and TLS connection management module.

A Connection is opened for a single request and closed once the response
has been read; nothing is pooled or reused.
"""

import logging
import socket
import ssl
from typing import Any, Optional, Union

from redirectdemo.exceptions import ConnectTimeout, NetworkError, TlsError
from redirectdemo.utils.timing import Timeout

__all__ = ["Connection"]

logger = logging.getLogger(__name__)


class Connection:
    """
    Manages TCP and TLS connection creation and lifecycle.

    Attributes:
        host: The target hostname or IP address.
        port: The target port number.
        use_ssl: Whether to use TLS encryption.
        timeout: Connection timeout configuration.
        sock: The underlying socket object.
    """

    __slots__ = ("host", "port", "use_ssl", "timeout", "sock")

    def __init__(
        self,
        host: str,
        port: int,
        use_ssl: bool = False,
        timeout: Union[float, Timeout, None] = None,
    ) -> None:
        self.host = host
        self.port = port
        self.use_ssl = use_ssl
        self.timeout = Timeout.coerce(timeout)
        self.sock: Optional[socket.socket] = None

    def open(self) -> socket.socket:
        """
        Open TCP connection with optional TLS encryption.

        Raises:
            ConnectTimeout: If connecting or the TLS handshake times out.
            TlsError: If TLS negotiation or verification fails.
            NetworkError: For any other socket-level failure.
        """
        try:
            raw_sock = socket.create_connection(
                (self.host, self.port), timeout=self.timeout.connect_timeout
            )
            if self.use_ssl:
                context = ssl.create_default_context()
                try:
                    self.sock = context.wrap_socket(raw_sock, server_hostname=self.host)
                except (socket.timeout, ssl.SSLError):
                    raw_sock.close()
                    raise
            else:
                self.sock = raw_sock

            # After connection is established, switch timeout to 'read_timeout'
            self.sock.settimeout(self.timeout.read_timeout)
            logger.debug("Connected to %s:%d (tls=%s)", self.host, self.port, self.use_ssl)
            return self.sock

        except socket.timeout as e:
            raise ConnectTimeout(
                f"Timeout connecting to {self.host}:{self.port}"
            ) from e

        except ssl.SSLError as e:
            raise TlsError(f"TLS Verification Error: {e}") from e

        except OSError as e:
            raise NetworkError(
                f"Connection error to {self.host}:{self.port} - {e}"
            ) from e

    def close(self) -> None:
        """
        Close the connection if it is open.
        """
        if self.sock:
            try:
                self.sock.close()
            except OSError:
                pass
            self.sock = None

    def __enter__(self) -> "Connection":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        self.close()
