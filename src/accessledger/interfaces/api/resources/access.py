"""Access check API resource."""

import falcon.asgi

from accessledger.application.ports import AccessChecker


class AccessCheckResource:
    """GET /v1/access?user_id=&entity_id= - allow/deny decision."""

    def __init__(self, access_checker: AccessChecker) -> None:
        self._access_checker = access_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Check whether user may access entity."""
        user_id = req.get_param("user_id")
        entity_id = req.get_param("entity_id")
        if not user_id or not entity_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "user_id and entity_id query parameters required"}
            return

        resp.media = {
            "user_id": user_id,
            "entity_id": entity_id,
            "allowed": self._access_checker.check(user_id, entity_id),
        }
        resp.status = falcon.HTTP_200
