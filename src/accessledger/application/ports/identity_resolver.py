"""Identity resolver port - opaque token to user id."""

from typing import Protocol


class IdentityResolver(Protocol):
    """Port for resolving a bearer token to a user id."""

    def identify(self, token: str) -> str | None: ...
