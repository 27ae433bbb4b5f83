"""Auth middleware - resolves bearer token to a user or leaves the request anonymous."""

from dataclasses import dataclass

import falcon.asgi

from accessledger.application.ports import IdentityResolver


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str


class AuthMiddleware:
    """Middleware that resolves the bearer token and sets req.context.user."""

    def __init__(self, identity_resolver: IdentityResolver) -> None:
        self._identity_resolver = identity_resolver

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract token and user from Authorization header."""
        req.context.token = None
        req.context.user = None
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer "):
            token = auth[7:]
            req.context.token = token
            user_id = self._identity_resolver.identify(token)
            if user_id:
                req.context.user = RequestUser(user_id=user_id)
