"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from accessledger import __version__
from accessledger.config import Settings, get_settings
from accessledger.domain.entities import RoleRegistry
from accessledger.infrastructure.auth.token_provider import InMemoryTokenProvider
from accessledger.infrastructure.permission.access_engine import LedgerAccessEngine
from accessledger.infrastructure.persistence.memory.document_repository import (
    InMemoryDocumentRepository,
)
from accessledger.interfaces.api.app import create_app

logger = logging.getLogger(__name__)


def create_accessledger_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    engine = LedgerAccessEngine(
        registry=RoleRegistry(settings.default_roles),
        base_access_role=settings.base_access_role,
    )
    for user_id in settings.bootstrap_admins:
        engine.grant_role(user_id, settings.admin_role)
    return create_app(
        engine=engine,
        token_provider=InMemoryTokenProvider(),
        document_repository=InMemoryDocumentRepository(),
        admin_role=settings.admin_role,
    )


def main() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("accessledger v%s (%s)", __version__, settings.environment)
    uvicorn.run(
        create_accessledger_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
