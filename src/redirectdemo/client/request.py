"""src/redirectdemo/client/request.py

HTTP request builder and sender.

``Request.send`` drives a small per-request state machine: issue the
request, and on a 3xx carrying ``Location`` either re-issue it against the
new target (when the redirect policy allows the hop) or hand the redirect
response back to the caller untouched.
"""

# pylint: disable=too-many-arguments

import logging
import socket
import urllib.parse
from typing import Dict, List, Optional, Union

from redirectdemo.client.policy import REDIRECT_STATUSES, RedirectPolicy
from redirectdemo.client.response import Response
from redirectdemo.exceptions import (
    NetworkError,
    RedirectLoopError,
    RequestError,
    TooManyRedirects,
    WriteTimeout,
)
from redirectdemo.http.body import DEFAULT_MAX_RESPONSE_SIZE, read_until_close
from redirectdemo.transport.connection import Connection
from redirectdemo.utils.timing import Timeout
from redirectdemo.version import __version__

__all__ = ["Request", "DEFAULT_MAX_REDIRECTS"]

logger = logging.getLogger(__name__)

DEFAULT_MAX_REDIRECTS = 5
USER_AGENT = f"redirectdemo/{__version__}"


def _strip_content_headers(headers: Dict[str, str]) -> Dict[str, str]:
    return {k: v for k, v in headers.items() if not k.lower().startswith("content-")}


class Request:
    """
    HTTP request builder and sender.
    """

    @staticmethod
    def build_request(
        method: str,
        path: str,
        host: str,
        headers: Dict[str, str],
    ) -> bytes:
        """
        Builds the raw HTTP request bytes.

        Raises:
            ValueError: If a header name or value would inject CR, LF or NUL.
        """
        request_line = f"{method} {path} HTTP/1.1\r\n"
        default_headers = {
            "Host": host,
            "Connection": "close",
            "User-Agent": USER_AGENT,
        }

        final_headers = {**default_headers, **headers}

        headers_str = ""
        for k, v in final_headers.items():
            if "\r" in k or "\n" in k or "\r" in v or "\n" in v:
                raise ValueError(f"Invalid character in header {k}: {v!r}")
            if "\x00" in k or "\x00" in v:
                raise ValueError(f"Null byte in header {k}: {v!r}")
            headers_str += f"{k}: {v}\r\n"

        return (request_line + headers_str + "\r\n").encode("utf-8")

    @classmethod
    def send(
        cls,
        method: str,
        url: str,
        *,
        redirect_policy: RedirectPolicy,
        headers: Optional[Dict[str, str]] = None,
        timeout: Union[float, Timeout, None] = 5,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        limits: Optional[Dict[str, int]] = None,
    ) -> Response:
        """
        Send an HTTP request, following redirects as ``redirect_policy`` allows.

        Args:
            method: HTTP method.
            url: Absolute request URL.
            redirect_policy: Policy deciding whether each hop is followed.
            headers: Request headers.
            timeout: Seconds, or a Timeout, applied to every hop.
            max_redirects: Maximum number of hops to follow.
            limits: Size limits (max_header_size, max_response_size).

        Returns:
            The terminal response. Its ``history`` lists followed redirects.

        Raises:
            TooManyRedirects: If more than ``max_redirects`` hops are needed.
            RedirectLoopError: If a hop targets a URL already requested.
        """
        history: List[Response] = []
        visited_urls = {url}
        current_url = url
        current_method = method
        current_headers = dict(headers or {})
        timeout_obj = Timeout.coerce(timeout)

        for _ in range(max_redirects + 1):
            response = cls._perform_request(
                current_method,
                current_url,
                current_headers,
                timeout_obj,
                limits=limits,
            )

            if (
                response.status_code not in REDIRECT_STATUSES
                or "Location" not in response.headers
            ):
                response.history = list(history)
                return response

            target_url = urllib.parse.urljoin(current_url, response.headers["Location"])
            if not redirect_policy.allows(current_url, target_url):
                logger.debug(
                    "Not following %d from %s to %s (policy=%s)",
                    response.status_code,
                    current_url,
                    target_url,
                    redirect_policy.name,
                )
                response.history = list(history)
                return response

            if target_url in visited_urls:
                raise RedirectLoopError(
                    f"Redirect cycle detected: {target_url}", url=target_url
                )
            visited_urls.add(target_url)

            logger.debug(
                "Following %d from %s to %s", response.status_code, current_url, target_url
            )
            response.history = list(history)
            history.append(response)

            status = response.status_code
            if status == 303 or (status in (301, 302) and current_method != "HEAD"):
                current_method = "GET"
                current_headers = _strip_content_headers(current_headers)

            if (
                urllib.parse.urlparse(target_url).netloc
                != urllib.parse.urlparse(current_url).netloc
            ):
                current_headers = {
                    k: v
                    for k, v in current_headers.items()
                    if k.lower() != "authorization"
                }

            current_url = target_url

        raise TooManyRedirects(f"Exceeded {max_redirects} redirects.", url=current_url)

    @classmethod
    def _perform_request(
        cls,
        method: str,
        url: str,
        headers: Dict[str, str],
        timeout: Timeout,
        limits: Optional[Dict[str, int]] = None,
    ) -> Response:
        """Perform a single request/response exchange on a fresh connection."""
        parsed = urllib.parse.urlparse(url)
        scheme = parsed.scheme
        host = parsed.hostname
        if scheme not in ("http", "https") or not host:
            raise RequestError(f"Invalid URL: {url}")

        port = parsed.port or (443 if scheme == "https" else 80)
        path = parsed.path or "/"
        if parsed.query:
            path += f"?{parsed.query}"

        host_header = host if parsed.port is None else f"{host}:{parsed.port}"
        request_bytes = cls.build_request(method, path, host_header, headers)

        logger.debug("%s %s", method, url)
        with Connection(host, port, use_ssl=(scheme == "https"), timeout=timeout) as conn:
            sock = conn.sock
            if not sock:
                raise NetworkError("Failed to open connection")

            try:
                sock.sendall(request_bytes)
            except socket.timeout as exc:
                raise WriteTimeout(f"Write timed out: {exc}") from exc
            except OSError as exc:
                raise NetworkError(f"Network error during write: {exc}") from exc

            max_size = (limits or {}).get("max_response_size", DEFAULT_MAX_RESPONSE_SIZE)
            response_data = read_until_close(sock, max_size=max_size)

        if not response_data:
            raise NetworkError("Server closed connection without response")

        return Response(response_data, url=url, limits=limits)

    @classmethod
    def get(
        cls,
        url: str,
        *,
        redirect_policy: RedirectPolicy,
        headers: Optional[Dict[str, str]] = None,
        timeout: Union[float, Timeout, None] = 5,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        limits: Optional[Dict[str, int]] = None,
    ) -> Response:
        """Send a GET request."""
        return cls.send(
            "GET",
            url,
            redirect_policy=redirect_policy,
            headers=headers,
            timeout=timeout,
            max_redirects=max_redirects,
            limits=limits,
        )
