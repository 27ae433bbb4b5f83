"""In-memory token provider - issues and resolves opaque bearer tokens."""

import base64


class InMemoryTokenProvider:
    """Issues one token per user and maps tokens back to user ids.

    Tokens are not signed and never expire.
    """

    def __init__(self) -> None:
        self._tokens: dict[str, str] = {}

    def authenticate(self, user_id: str) -> str:
        """Issue token for user and remember it."""
        token = base64.b64encode(f"{user_id}-token".encode("utf-8")).decode("ascii")
        self._tokens[token] = user_id
        return token

    def identify(self, token: str) -> str | None:
        """Return user id for token, or None if unknown."""
        return self._tokens.get(token) or None
