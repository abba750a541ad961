"""src/redirectdemo/client/__init__.py"""

from .config import ClientSet, build_clients
from .policy import RedirectPolicy
from .request import Request
from .response import Response
from .session import Session

__all__ = [
    "ClientSet",
    "RedirectPolicy",
    "Request",
    "Response",
    "Session",
    "build_clients",
]
