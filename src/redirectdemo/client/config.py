"""src/redirectdemo/client/config.py

The set of pre-configured clients exercised against the demo server.
"""

from dataclasses import dataclass, fields
from typing import Iterator, Tuple, Union

from redirectdemo.client.policy import RedirectPolicy
from redirectdemo.client.session import Session
from redirectdemo.utils.timing import Timeout

__all__ = ["ClientSet", "build_clients"]


@dataclass(frozen=True)
class ClientSet:
    """
    Independent clients, each bound to one redirect policy.

    Attributes:
        following: Follows redirects unless they downgrade https to http.
        always_redirecting: Follows every redirect.
        never_redirecting: Returns redirect responses to the caller.
    """

    following: Session
    always_redirecting: Session
    never_redirecting: Session

    def __iter__(self) -> Iterator[Tuple[str, Session]]:
        for field in fields(self):
            yield field.name, getattr(self, field.name)

    def by_policy(self, policy: Union[RedirectPolicy, str]) -> Session:
        """
        Return the first client bound to ``policy``.

        Raises:
            LookupError: If no client in the set uses it.
        """
        wanted = RedirectPolicy.parse(policy)
        for _, session in self:
            if session.redirect_policy is wanted:
                return session
        raise LookupError(f"No client configured with policy {wanted.name}")

    def close(self) -> None:
        for _, session in self:
            session.close()


def build_clients(
    base_url: str, *, default_timeout: Union[float, Timeout, None] = 5
) -> ClientSet:
    """Build one client per redirect policy, all rooted at ``base_url``."""
    return ClientSet(
        following=Session(
            redirect_policy=RedirectPolicy.NORMAL,
            base_url=base_url,
            default_timeout=default_timeout,
        ),
        always_redirecting=Session(
            redirect_policy=RedirectPolicy.ALWAYS,
            base_url=base_url,
            default_timeout=default_timeout,
        ),
        never_redirecting=Session(
            redirect_policy=RedirectPolicy.NEVER,
            base_url=base_url,
            default_timeout=default_timeout,
        ),
    )
