"""Role registry API resources."""

import falcon.asgi

from accessledger.application.use_cases.role.create_role import CreateRoleUseCase
from accessledger.application.use_cases.role.remove_role import RemoveRoleUseCase
from accessledger.domain.entities import RoleRegistry
from accessledger.domain.exceptions import PermissionDenied, ValidationError
from accessledger.domain.value_objects import RemoveRole


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(self, registry: RoleRegistry, create_role: CreateRoleUseCase) -> None:
        self._registry = registry
        self._create = create_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List registered roles."""
        resp.media = {
            "items": [{"name": name, "key": key} for name, key in self._registry.items()]
        }
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create or overwrite a role."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            name = body["name"]
            key = body["key"]
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        if not all(isinstance(v, str) and v for v in (name, key)):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "name and key must be non-empty strings"}
            return

        try:
            await self._create.execute(user.user_id, name, key)
            resp.media = {"name": name, "key": key}
            resp.status = falcon.HTTP_201
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}


class RoleResource:
    """DELETE /v1/roles/{name} - remove role and revoke it everywhere."""

    def __init__(self, remove_role: RemoveRoleUseCase) -> None:
        self._remove = remove_role

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        name: str,
    ) -> None:
        """Remove role by name. Unknown names are a no-op."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._remove.execute(user.user_id, RemoveRole(name))
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
