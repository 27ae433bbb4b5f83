"""User role API resources."""

import falcon.asgi

from accessledger.application.ports import AccessLedger
from accessledger.application.use_cases.role.grant_role import GrantRoleUseCase
from accessledger.application.use_cases.role.remove_role import RemoveRoleUseCase
from accessledger.application.use_cases.role.revoke_role import RevokeRoleUseCase
from accessledger.domain.exceptions import PermissionDenied
from accessledger.domain.value_objects import RemoveUserGrants


class UserRolesResource:
    """GET/POST /v1/users/{user_id}/roles - list and grant user roles."""

    def __init__(self, access_ledger: AccessLedger, grant_role: GrantRoleUseCase) -> None:
        self._ledger = access_ledger
        self._grant = grant_role

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """List active roles for user."""
        resp.media = {"user_id": user_id, "roles": self._ledger.get_active_user_roles(user_id)}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """Grant role to user."""
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
            roles = await self._grant.execute(user.user_id, user_id, role)
            resp.media = {"user_id": user_id, "roles": roles}
            resp.status = falcon.HTTP_201
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}


class UserRoleResource:
    """DELETE /v1/users/{user_id}/roles/{role} - revoke role from user."""

    def __init__(self, revoke_role: RevokeRoleUseCase) -> None:
        self._revoke = revoke_role

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        role: str,
    ) -> None:
        """Revoke role from user."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._revoke.execute(user.user_id, user_id, role)
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}


class UserGrantsResource:
    """DELETE /v1/users/{user_id}/grants - revoke every registered role of a user."""

    def __init__(self, remove_role: RemoveRoleUseCase) -> None:
        self._remove = remove_role

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """Sweep registered roles for user."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._remove.execute(user.user_id, RemoveUserGrants(user_id))
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
