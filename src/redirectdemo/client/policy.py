"""src/redirectdemo/client/policy.py

Redirect policies a client is bound to at construction time.
"""

import enum
import urllib.parse
from typing import Union

__all__ = ["RedirectPolicy", "REDIRECT_STATUSES"]

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


class RedirectPolicy(enum.Enum):
    """
    Whether a client re-requests the ``Location`` of a 3xx response.

    Members:
        NEVER: Never follow; the redirect response is returned to the caller.
        NORMAL: Follow, except from an ``https`` URL to an ``http`` one.
        ALWAYS: Always follow.
    """

    NEVER = "never"
    NORMAL = "normal"
    ALWAYS = "always"

    @classmethod
    def parse(cls, value: Union["RedirectPolicy", str]) -> "RedirectPolicy":
        """
        Resolve a policy from a member or its case-insensitive name.

        Raises:
            ValueError: If ``value`` names no policy.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown redirect policy {value!r} (expected one of: {choices})")

    def allows(self, from_url: str, to_url: str) -> bool:
        """Return True if a hop from ``from_url`` to ``to_url`` is followed."""
        if self is RedirectPolicy.NEVER:
            return False
        if self is RedirectPolicy.ALWAYS:
            return True

        from_scheme = urllib.parse.urlparse(from_url).scheme.lower()
        to_scheme = urllib.parse.urlparse(to_url).scheme.lower()
        return not (from_scheme == "https" and to_scheme == "http")
