"""src/redirectdemo/client/session.py

HTTP client session bound to one redirect policy.

The redirect policy is a required keyword argument: there is no
construction path that picks a policy implicitly.
"""

import urllib.parse
from typing import Any, Dict, Optional, Union

from redirectdemo.client.policy import RedirectPolicy
from redirectdemo.client.request import DEFAULT_MAX_REDIRECTS, Request
from redirectdemo.client.response import Response
from redirectdemo.utils.timing import Timeout

__all__ = ["Session"]


class Session:
    """
    HTTP client holding per-client configuration.

    Attributes:
        headers: Persistent headers for all requests.
        base_url: Base URL prefix for relative URLs.
        default_timeout: Default timeout for requests.
        max_redirects: Maximum hops followed per request.
        limits: Size limits (max_header_size, max_response_size).
    """

    __slots__ = (
        "_redirect_policy",
        "headers",
        "base_url",
        "default_timeout",
        "max_redirects",
        "limits",
        "_closed",
    )

    def __init__(
        self,
        *,
        redirect_policy: Union[RedirectPolicy, str],
        base_url: Optional[str] = None,
        default_timeout: Union[float, Timeout, None] = 5,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        limits: Optional[Dict[str, int]] = None,
    ) -> None:
        """
        Initialize a new HTTP client.

        Args:
            redirect_policy: Policy applied to every request (required).
            base_url: Base URL prefix for relative URLs.
            default_timeout: Default timeout in seconds for all requests.
            max_redirects: Maximum hops followed per request.
            limits: Size limits (max_header_size, max_response_size).

        Raises:
            ValueError: If ``redirect_policy`` names no policy or
                ``max_redirects`` is negative.
        """
        if max_redirects < 0:
            raise ValueError("max_redirects must be >= 0")

        self._redirect_policy = RedirectPolicy.parse(redirect_policy)
        self.headers: Dict[str, str] = {}
        self.base_url = base_url
        self.default_timeout = default_timeout
        self.max_redirects = max_redirects
        self.limits = limits
        self._closed = False

    def __repr__(self) -> str:
        return (
            f"Session(redirect_policy={self._redirect_policy.name}, "
            f"base_url={self.base_url!r})"
        )

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def redirect_policy(self) -> RedirectPolicy:
        """Policy fixed at construction time."""
        return self._redirect_policy

    @property
    def closed(self) -> bool:
        return self._closed

    def _resolve_url(self, url: str) -> str:
        """
        Resolve URL against base_url if the URL is relative.
        """
        if self.base_url and not urllib.parse.urlparse(url).scheme:
            return urllib.parse.urljoin(self.base_url, url)
        return url

    def _request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Union[float, Timeout, None] = None,
    ) -> Response:
        if self._closed:
            raise RuntimeError("Cannot send a request through a closed Session")

        effective_timeout = timeout if timeout is not None else self.default_timeout
        merged_headers = {**self.headers, **(headers or {})}

        return Request.send(
            method,
            self._resolve_url(url),
            redirect_policy=self._redirect_policy,
            headers=merged_headers,
            timeout=effective_timeout,
            max_redirects=self.max_redirects,
            limits=self.limits,
        )

    def get(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: Union[float, Timeout, None] = None,
    ) -> Response:
        """Send a GET request."""
        return self._request("GET", url, headers=headers, timeout=timeout)

    def head(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: Union[float, Timeout, None] = None,
    ) -> Response:
        """Send a HEAD request."""
        return self._request("HEAD", url, headers=headers, timeout=timeout)

    def close(self) -> None:
        """
        Mark the session closed. Connections are per request, so there is
        nothing left open to release.
        """
        self._closed = True
