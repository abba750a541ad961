"""src/redirectdemo/http/body.py

HTTP body reading and decoding.
"""

import socket
from typing import List, Optional

from redirectdemo.exceptions import NetworkError, ProtocolError, ReadTimeout

__all__ = ["read_until_close", "decode_chunked", "DEFAULT_MAX_RESPONSE_SIZE"]

DEFAULT_MAX_RESPONSE_SIZE = 10 * 1024 * 1024


def read_until_close(
    sock: socket.socket,
    chunk_size: int = 4096,
    max_size: Optional[int] = DEFAULT_MAX_RESPONSE_SIZE,
) -> bytes:
    """
    Read from ``sock`` until the peer closes the connection.

    Requests are always sent with ``Connection: close``, so EOF marks the
    end of the response.

    Args:
        sock: Connected socket.
        chunk_size: Bytes requested per ``recv`` call.
        max_size: Largest accepted response (head and body), or None for no cap.

    Raises:
        ProtocolError: If the response grows past ``max_size``.
        ReadTimeout: If a ``recv`` exceeds the socket timeout.
        NetworkError: For any other socket failure.
    """
    chunks: List[bytes] = []
    received = 0
    try:
        while True:
            chunk = sock.recv(chunk_size)
            if not chunk:
                break
            received += len(chunk)
            if max_size is not None and received > max_size:
                raise ProtocolError(f"Response exceeds maximum size of {max_size} bytes")
            chunks.append(chunk)
    except socket.timeout as exc:
        raise ReadTimeout(f"Read timed out: {exc}") from exc
    except OSError as exc:
        raise NetworkError(f"Network error during read: {exc}") from exc
    return b"".join(chunks)


def decode_chunked(data: bytes) -> bytes:
    """
    Decode a fully buffered chunked transfer-encoded body.

    Trailers after the terminating zero-size chunk are ignored.
    """
    body = b""
    pos = 0
    while True:
        line_end = data.find(b"\r\n", pos)
        if line_end == -1:
            raise ProtocolError("Truncated chunked body: missing chunk header")

        size_field = data[pos:line_end].split(b";")[0].strip()
        try:
            size = int(size_field, 16)
        except ValueError as exc:
            raise ProtocolError(f"Invalid chunk size: {size_field!r}") from exc

        if size == 0:
            return body

        start = line_end + 2
        end = start + size
        if len(data) < end + 2:
            raise ProtocolError("Truncated chunked body: chunk shorter than declared")

        body += data[start:end]
        pos = end + 2
