"""src/redirectdemo/utils/__init__.py"""

from .timing import Timeout

__all__ = ["Timeout"]
