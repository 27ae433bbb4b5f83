"""Entity access role API resources."""

import falcon.asgi

from accessledger.application.ports import AccessLedger
from accessledger.application.use_cases.permission.assign_permission import (
    AssignPermissionUseCase,
)
from accessledger.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)
from accessledger.domain.exceptions import PermissionDenied


class EntityRolesResource:
    """GET/POST /v1/entities/{entity_id}/roles - list and set entity access roles."""

    def __init__(
        self,
        access_ledger: AccessLedger,
        assign_permission: AssignPermissionUseCase,
    ) -> None:
        self._ledger = access_ledger
        self._assign = assign_permission

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entity_id: str,
    ) -> None:
        """List active access roles for entity. Empty means open."""
        resp.media = {
            "entity_id": entity_id,
            "roles": self._ledger.get_active_entity_access_roles(entity_id),
        }
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entity_id: str,
    ) -> None:
        """Set access role (or literal user id) on entity."""
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
            roles = await self._assign.execute(user.user_id, entity_id, role)
            resp.media = {"entity_id": entity_id, "roles": roles}
            resp.status = falcon.HTTP_201
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}


class EntityRoleResource:
    """DELETE /v1/entities/{entity_id}/roles/{role} - remove entity access role."""

    def __init__(self, revoke_permission: RevokePermissionUseCase) -> None:
        self._revoke = revoke_permission

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entity_id: str,
        role: str,
    ) -> None:
        """Remove access role from entity."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._revoke.execute(user.user_id, entity_id, role)
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
