"""src/redirectdemo/server.py

Demo HTTP server with one redirecting and one terminal endpoint.

    GET /hello  -> 200 "hello, world"
    GET /jump   -> 302 Location: /hello

HEAD gets the same status and headers with no body.
"""

import logging
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Optional

__all__ = ["RedirectRequestHandler", "DemoServer", "HELLO_BODY", "HELLO_PATH", "JUMP_PATH"]

logger = logging.getLogger(__name__)

HELLO_PATH = "/hello"
JUMP_PATH = "/jump"
HELLO_BODY = "hello, world"


class RedirectRequestHandler(BaseHTTPRequestHandler):
    """Serves ``/hello`` and ``/jump``; everything else is 404."""

    server_version = "redirectdemo"

    def log_message(self, format: str, *args: Any) -> None:  # pylint: disable=redefined-builtin
        logger.debug("%s - %s", self.address_string(), format % args)

    def do_GET(self) -> None:  # pylint: disable=invalid-name
        self._respond(send_body=True)

    def do_HEAD(self) -> None:  # pylint: disable=invalid-name
        self._respond(send_body=False)

    def _respond(self, send_body: bool) -> None:
        """Route the request; HEAD gets the GET status and headers without a body."""
        path = self.path.split("?", 1)[0]

        if path == HELLO_PATH:
            self._send_body(200, HELLO_BODY.encode("utf-8"), send_body)
        elif path == JUMP_PATH:
            self._send_jump()
        else:
            self._send_body(404, b"Not Found", send_body)

    def _send_jump(self) -> None:
        self.send_response(302)
        self.send_header("Location", HELLO_PATH)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def _send_body(self, status: int, body: bytes, send_body: bool) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "text/plain;charset=UTF-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if send_body:
            self.wfile.write(body)


class DemoServer:
    """
    Runs the demo endpoints on a background thread.

    ``port=0`` binds an ephemeral port; read it back from ``port`` or
    ``base_url`` once started.
    """

    def __init__(self, host: str = "localhost", port: int = 0) -> None:
        self.host = host
        self._requested_port = port
        self._httpd: Optional[ThreadingHTTPServer] = None
        self._thread: Optional[threading.Thread] = None

    def __enter__(self) -> "DemoServer":
        self.start()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.stop()

    @property
    def running(self) -> bool:
        return self._httpd is not None

    @property
    def port(self) -> int:
        if self._httpd is None:
            raise RuntimeError("DemoServer is not running")
        return self._httpd.server_address[1]

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def start(self) -> None:
        if self._httpd is not None:
            raise RuntimeError("DemoServer is already running")

        httpd = ThreadingHTTPServer((self.host, self._requested_port), RedirectRequestHandler)
        httpd.daemon_threads = True
        self._httpd = httpd
        self._thread = threading.Thread(
            target=httpd.serve_forever, name="redirectdemo-server", daemon=True
        )
        self._thread.start()
        logger.info("Demo server listening on %s", self.base_url)

    def stop(self) -> None:
        if self._httpd is None:
            return

        self._httpd.shutdown()
        self._httpd.server_close()
        if self._thread is not None:
            self._thread.join()
        logger.info("Demo server on %s:%d stopped", self.host, self._httpd.server_address[1])
        self._httpd = None
        self._thread = None
