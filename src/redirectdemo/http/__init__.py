"""src/redirectdemo/http/__init__.py

HTTP/1.1 wire helpers: header mapping, response head parser and body decoding.
"""

from .body import DEFAULT_MAX_RESPONSE_SIZE, decode_chunked, read_until_close
from .headers import Headers
from .http11 import HttpParser

__all__ = [
    "DEFAULT_MAX_RESPONSE_SIZE",
    "Headers",
    "HttpParser",
    "decode_chunked",
    "read_until_close",
]
