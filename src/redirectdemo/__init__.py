"""src/redirectdemo/__init__.py

redirectdemo - HTTP clients with an explicit redirect policy, and a server to show it.

Two clients sending the same GET to an endpoint that answers 302 Found
behave differently depending on the redirect policy each was built with.
Every client takes its policy as a required argument.

Example:
    Start the demo server and compare policies::

        from redirectdemo import DemoServer, RedirectPolicy, Session

        with DemoServer() as server:
            with Session(redirect_policy=RedirectPolicy.NEVER,
                         base_url=server.base_url) as client:
                response = client.get("/jump")
                print(response.status_code, response.headers["Location"])  # 302 /hello

            with Session(redirect_policy=RedirectPolicy.ALWAYS,
                         base_url=server.base_url) as client:
                print(client.get("/jump").text())  # hello, world
"""

import logging

from redirectdemo.client.config import ClientSet, build_clients
from redirectdemo.client.policy import RedirectPolicy
from redirectdemo.client.request import Request
from redirectdemo.client.response import Response
from redirectdemo.client.session import Session
from redirectdemo.server import DemoServer
from redirectdemo.utils.timing import Timeout
from redirectdemo.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ClientSet",
    "DemoServer",
    "RedirectPolicy",
    "Request",
    "Response",
    "Session",
    "Timeout",
    "build_clients",
    "__version__",
]
