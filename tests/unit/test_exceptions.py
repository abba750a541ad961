"""tests/unit/test_exceptions.py"""

import pytest

from redirectdemo.client.response import Response
from redirectdemo.client.response import ResponseParseError as ReexportedParseError
from redirectdemo.exceptions import (
    ConnectTimeout,
    InvalidResponseError,
    NetworkError,
    ProtocolError,
    ReadTimeout,
    RedirectDemoError,
    RedirectError,
    RedirectLoopError,
    RequestError,
    ResponseParseError,
    TimeoutError,
    TlsError,
    TooManyRedirects,
    WriteTimeout,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of redirectdemo exceptions."""
    assert issubclass(RequestError, RedirectDemoError)
    assert issubclass(NetworkError, RequestError)
    assert issubclass(TimeoutError, RequestError)
    assert issubclass(ProtocolError, RequestError)
    assert issubclass(ConnectTimeout, TimeoutError)
    assert issubclass(ReadTimeout, TimeoutError)
    assert issubclass(WriteTimeout, TimeoutError)
    assert issubclass(TlsError, NetworkError)
    assert issubclass(InvalidResponseError, ProtocolError)
    assert issubclass(ResponseParseError, ProtocolError)
    assert issubclass(RedirectError, RequestError)
    assert issubclass(RedirectLoopError, RedirectError)
    assert issubclass(TooManyRedirects, RedirectError)


def test_response_parse_error_under_root():
    assert ReexportedParseError is ResponseParseError
    with pytest.raises(RedirectDemoError):
        Response(b"Not an HTTP response")


def test_timeout_error_default_message():
    with pytest.raises(TimeoutError) as exc_info:
        raise TimeoutError()
    assert "Operation timed out" in str(exc_info.value)


def test_timeout_error_custom_message():
    with pytest.raises(ConnectTimeout, match="slow host"):
        raise ConnectTimeout("slow host")


class TestRedirectError:
    def test_url_attribute(self):
        exc = TooManyRedirects("Exceeded 5 redirects.", url="http://h/5")
        assert exc.url == "http://h/5"
        assert str(exc) == "Exceeded 5 redirects."

    def test_url_defaults_to_none(self):
        assert RedirectLoopError("cycle").url is None
