"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from accessledger.interfaces.api.app import create_app

ADMIN_ROLE = "admin"


@pytest.fixture
def app(admin_engine, token_provider, document_repository):
    """Falcon ASGI app over an engine where 'root' is the only admin."""
    return create_app(
        engine=admin_engine,
        token_provider=token_provider,
        document_repository=document_repository,
        admin_role=ADMIN_ROLE,
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def auth_headers(token_provider):
    """Build Authorization headers for a user id."""

    def _headers(user_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_provider.authenticate(user_id)}"}

    return _headers


@pytest.fixture
def admin_headers(auth_headers) -> dict[str, str]:
    return auth_headers("root")
