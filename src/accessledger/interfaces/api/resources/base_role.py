"""Base access role API resource."""

import falcon.asgi

from accessledger.application.use_cases.permission.base_access_role import (
    SetBaseAccessRoleUseCase,
)
from accessledger.domain.exceptions import PermissionDenied
from accessledger.infrastructure.permission.access_engine import LedgerAccessEngine


class BaseRoleResource:
    """GET/PUT/DELETE /v1/base-role - read, set and clear the base access role."""

    def __init__(
        self,
        engine: LedgerAccessEngine,
        set_base_access_role: SetBaseAccessRoleUseCase,
    ) -> None:
        self._engine = engine
        self._set = set_base_access_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Current base access role, or null."""
        resp.media = {"role": self._engine.base_access_role}
        resp.status = falcon.HTTP_200

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Set base access role."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            role = body["role"]
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        if not isinstance(role, str) or not role:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "role must be a non-empty string"}
            return

        try:
            await self._set.execute(user.user_id, role)
            resp.media = {"role": self._engine.base_access_role}
            resp.status = falcon.HTTP_200
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Clear base access role."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._set.execute(user.user_id, None)
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
