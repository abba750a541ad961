"""src/redirectdemo/transport/__init__.py

Transport layer: one TCP (optionally TLS) connection per request.
"""

from .connection import Connection

__all__ = ["Connection"]
