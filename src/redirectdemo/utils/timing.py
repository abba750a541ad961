"""src/redirectdemo/utils/timing.py

Timeouts configuration.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Timeout:
    """
    Timeout configuration.

    Attributes:
        connect: Maximum time to wait for connection establishment (socket connect).
        read: Maximum time to wait for data to be received (socket recv).
        total: Fallback used where connect or read is unset.
    """

    connect: Optional[float] = None
    read: Optional[float] = None
    total: Optional[float] = None

    @classmethod
    def from_float(cls, timeout: Optional[float]) -> "Timeout":
        """Create a Timeout instance from a single float (total timeout fallback)."""
        if timeout is None:
            return cls()
        return cls(connect=timeout, read=timeout, total=timeout)

    @classmethod
    def coerce(cls, timeout: Union[float, "Timeout", None]) -> "Timeout":
        """Return ``timeout`` unchanged if it is a Timeout, else wrap it."""
        if isinstance(timeout, Timeout):
            return timeout
        return cls.from_float(timeout)

    @property
    def connect_timeout(self) -> Optional[float]:
        return self.connect if self.connect is not None else self.total

    @property
    def read_timeout(self) -> Optional[float]:
        return self.read if self.read is not None else self.total
