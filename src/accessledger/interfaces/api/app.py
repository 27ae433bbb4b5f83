"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from accessledger.application.ports.repositories import DocumentRepository
from accessledger.application.use_cases.document.fetch_document import FetchDocumentUseCase
from accessledger.application.use_cases.permission.assign_permission import (
    AssignPermissionUseCase,
)
from accessledger.application.use_cases.permission.base_access_role import (
    SetBaseAccessRoleUseCase,
)
from accessledger.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)
from accessledger.application.use_cases.role.create_role import CreateRoleUseCase
from accessledger.application.use_cases.role.grant_role import GrantRoleUseCase
from accessledger.application.use_cases.role.remove_role import RemoveRoleUseCase
from accessledger.application.use_cases.role.revoke_role import RevokeRoleUseCase
from accessledger.infrastructure.auth.token_provider import InMemoryTokenProvider
from accessledger.infrastructure.permission.access_engine import LedgerAccessEngine
from accessledger.interfaces.api.middleware.auth import AuthMiddleware
from accessledger.interfaces.api.resources.access import AccessCheckResource
from accessledger.interfaces.api.resources.base_role import BaseRoleResource
from accessledger.interfaces.api.resources.documents import DocumentResource
from accessledger.interfaces.api.resources.entities import (
    EntityRoleResource,
    EntityRolesResource,
)
from accessledger.interfaces.api.resources.health import HealthResource
from accessledger.interfaces.api.resources.roles import RoleResource, RolesResource
from accessledger.interfaces.api.resources.tokens import TokensResource
from accessledger.interfaces.api.resources.users import (
    UserGrantsResource,
    UserRoleResource,
    UserRolesResource,
)

logger = logging.getLogger(__name__)


async def _log_exception(req, resp, ex, params):
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    engine: LedgerAccessEngine,
    token_provider: InMemoryTokenProvider,
    document_repository: DocumentRepository,
    admin_role: str,
) -> App:
    """Create Falcon ASGI app with use cases and routes wired to engine."""
    fetch_document = FetchDocumentUseCase(
        identity_resolver=token_provider,
        access_checker=engine,
        document_repository=document_repository,
    )
    create_role = CreateRoleUseCase(engine, admin_role)
    remove_role = RemoveRoleUseCase(engine, admin_role)
    grant_role = GrantRoleUseCase(engine, admin_role)
    revoke_role = RevokeRoleUseCase(engine, admin_role)
    assign_permission = AssignPermissionUseCase(engine, admin_role)
    revoke_permission = RevokePermissionUseCase(engine, admin_role)
    set_base_access_role = SetBaseAccessRoleUseCase(engine, admin_role)

    health_resource = HealthResource(engine)

    app = falcon.asgi.App(middleware=[AuthMiddleware(token_provider)])
    app.add_error_handler(Exception, _log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/tokens", TokensResource(token_provider))
    app.add_route("/v1/documents/{document_id}", DocumentResource(fetch_document))
    app.add_route("/v1/access", AccessCheckResource(engine))
    app.add_route("/v1/roles", RolesResource(engine.registry, create_role))
    app.add_route("/v1/roles/{name}", RoleResource(remove_role))
    app.add_route("/v1/users/{user_id}/roles", UserRolesResource(engine, grant_role))
    app.add_route("/v1/users/{user_id}/roles/{role}", UserRoleResource(revoke_role))
    app.add_route("/v1/users/{user_id}/grants", UserGrantsResource(remove_role))
    app.add_route(
        "/v1/entities/{entity_id}/roles",
        EntityRolesResource(engine, assign_permission),
    )
    app.add_route(
        "/v1/entities/{entity_id}/roles/{role}",
        EntityRoleResource(revoke_permission),
    )
    app.add_route("/v1/base-role", BaseRoleResource(engine, set_base_access_role))
    return app
