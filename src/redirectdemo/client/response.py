"""src/redirectdemo/client/response.py

HTTP Response handling module.

This module parses a fully buffered HTTP/1.1 response into status line,
headers and decoded body.
"""

import json as std_json
from typing import Any, Dict, List, Optional, cast

from redirectdemo.exceptions import (
    InvalidResponseError,
    ProtocolError,
    ResponseParseError,
)
from redirectdemo.http.body import decode_chunked
from redirectdemo.http.headers import Headers
from redirectdemo.http.http11 import DEFAULT_MAX_HEADER_SIZE, HttpParser

__all__ = ["ResponseParseError", "Response"]


class Response:
    """
    Represents a parsed HTTP response.

    Attributes:
        raw: Original raw response bytes.
        status_line: HTTP status line (e.g., "HTTP/1.1 302 Found").
        status_code: HTTP status code as integer.
        headers: Case-insensitive response headers (names in Title-Case).
        body: Response body as bytes, de-chunked if needed.
        url: URL this response was received from (set by the sender).
        history: Redirect responses that led here, oldest first.
    """

    __slots__ = (
        "raw",
        "status_line",
        "status_code",
        "headers",
        "body",
        "url",
        "history",
        "_limits",
    )

    def __init__(
        self,
        raw_response: bytes,
        url: Optional[str] = None,
        limits: Optional[Dict[str, int]] = None,
    ) -> None:
        """
        Initialize Response by parsing raw HTTP response bytes.

        Args:
            raw_response: Full raw response as read from the socket.
            url: URL the response was received from.
            limits: Parser limits (max_header_size).
        """
        self.raw: bytes = raw_response
        self.status_line: str = ""
        self.status_code: int = 0
        self.headers: Headers = Headers()
        self.body: bytes = b""
        self.url: Optional[str] = url
        self.history: List["Response"] = []
        self._limits = limits or {}

        self._parse_response()

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"

    @property
    def is_redirect(self) -> bool:
        """True for a 3xx response that names a ``Location``."""
        return 300 <= self.status_code < 400 and "Location" in self.headers

    def _parse_response(self) -> None:
        try:
            max_header_size = self._limits.get("max_header_size", DEFAULT_MAX_HEADER_SIZE)
            parser = HttpParser(max_header_size=max_header_size)
            status_code, status_line, headers_dict, body_buffer = parser.parse_response(
                self.raw
            )

            self.status_code = status_code
            self.status_line = status_line
            self.headers = Headers(cast(Dict[str, Any], headers_dict))

            transfer_encoding = cast(str, self.headers.get("Transfer-Encoding", ""))
            if "chunked" in transfer_encoding.lower():
                self.body = decode_chunked(body_buffer)
            else:
                self.body = self._trim_to_content_length(body_buffer)

        except (ProtocolError, InvalidResponseError) as e:
            raise ResponseParseError(f"Error parsing response: {e}") from e
        except (TypeError, ValueError) as e:
            raise ResponseParseError(f"Unexpected error parsing response: {e}") from e

    def _trim_to_content_length(self, body: bytes) -> bytes:
        content_length = self.headers.get("Content-Length")
        if content_length is None:
            return body
        try:
            length = int(content_length)
        except ValueError:
            return body
        if length < 0:
            return body
        return body[:length]

    def text(self, encoding: Optional[str] = None) -> str:
        """
        Return decoded text.

        The charset of ``Content-Type`` is used when ``encoding`` is not
        given, falling back to UTF-8.
        """
        if encoding is None:
            content_type = cast(str, self.headers.get("Content-Type", ""))
            if "charset=" in content_type:
                encoding = content_type.split("charset=")[-1].split(";")[0].strip()
            else:
                encoding = "utf-8"

        return self.body.decode(encoding, errors="replace")

    def json(self) -> Any:
        """
        Returns JSON-decoded body.
        """
        try:
            return std_json.loads(self.text())
        except (std_json.JSONDecodeError, TypeError, ValueError) as exc:
            raise InvalidResponseError("Failed to decode JSON response") from exc
