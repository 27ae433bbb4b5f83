"""Token API resources."""

import falcon.asgi

from accessledger.infrastructure.auth.token_provider import InMemoryTokenProvider


class TokensResource:
    """POST /v1/tokens - issue bearer token for a user id."""

    def __init__(self, token_provider: InMemoryTokenProvider) -> None:
        self._token_provider = token_provider

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Issue token."""
        try:
            body = await req.get_media()
            user_id = body["user_id"]
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        if not isinstance(user_id, str) or not user_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "user_id must be a non-empty string"}
            return

        resp.media = {"token": self._token_provider.authenticate(user_id)}
        resp.status = falcon.HTTP_201
