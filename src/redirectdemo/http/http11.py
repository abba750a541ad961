"""src/redirectdemo/http/http11.py

HTTP/1.1 response head parser.
"""

from typing import Dict, List, Tuple

from redirectdemo.exceptions import InvalidResponseError, ProtocolError

__all__ = ["HttpParser", "DEFAULT_MAX_HEADER_SIZE"]

DEFAULT_MAX_HEADER_SIZE = 8192


class HttpParser:
    """
    HTTP/1.1 response parser.

    Handles:
    - Status line parsing.
    - Header parsing, keeping every value of repeated headers.
    - Header size limit.
    """

    def __init__(self, max_header_size: int = DEFAULT_MAX_HEADER_SIZE):
        self.max_header_size = max_header_size

    def parse_response(
        self, data: bytes
    ) -> Tuple[int, str, Dict[str, List[str]], bytes]:
        """
        Parse a full raw HTTP response.

        Returns:
            Tuple of (status_code, status_line, headers, remaining_body)

        Raises:
            ProtocolError: If headers are too large or cannot be decoded.
            InvalidResponseError: If the head is incomplete or the status line is invalid.
        """
        if len(data) > self.max_header_size:
            # +4 for the delimiter itself
            if b"\r\n\r\n" not in data[: self.max_header_size + 4]:
                raise ProtocolError(
                    f"Headers exceed maximum size of {self.max_header_size} bytes"
                )

        parts = data.split(b"\r\n\r\n", 1)
        if len(parts) < 2:
            raise InvalidResponseError(
                "Incomplete response: headers delimiter not found"
            )

        header_bytes, body_bytes = parts

        try:
            header_text = header_bytes.decode("iso-8859-1")
        except UnicodeDecodeError as e:  # pragma: no cover
            raise ProtocolError(f"Header decoding failed: {e}") from e

        lines = header_text.split("\r\n")
        status_line = lines[0]
        status_code = self._parse_status_line(status_line)
        headers = self._parse_headers(lines[1:])

        return status_code, status_line, headers, body_bytes

    @staticmethod
    def _parse_status_line(status_line: str) -> int:
        # HTTP/1.1 302 Found
        proto, _, rest = status_line.partition(" ")
        if not proto.startswith("HTTP/"):
            raise InvalidResponseError(f"Invalid status line: {status_line}")
        code = rest.split(" ", 1)[0]
        try:
            return int(code)
        except ValueError as exc:
            raise InvalidResponseError(f"Invalid status line: {status_line}") from exc

    @staticmethod
    def _parse_headers(lines: List[str]) -> Dict[str, List[str]]:
        """
        Parse header lines into a dictionary of Title-Case names.
        Lines without a colon are skipped.
        """
        headers: Dict[str, List[str]] = {}

        for line in lines:
            if not line or ":" not in line:
                continue

            key, value = line.split(":", 1)
            normalized_key = "-".join(
                [part.capitalize() for part in key.strip().split("-")]
            )
            headers.setdefault(normalized_key, []).append(value.strip())

        return headers
