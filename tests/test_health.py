"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from accessledger.infrastructure.permission.access_engine import LedgerAccessEngine
from accessledger.interfaces.api.resources.health import HealthResource


@pytest.fixture
def client(engine: LedgerAccessEngine) -> TestClient:
    """Test client with only the health endpoints mounted."""
    app = App()
    health = HealthResource(engine)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


def test_liveness(client: TestClient) -> None:
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json == {"status": "ok"}


def test_readiness_on_fresh_engine(client: TestClient) -> None:
    """Fresh engine: default roles registered, both ledgers empty."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json == {
        "status": "ready",
        "roles": 3,
        "user_events": 0,
        "entity_events": 0,
    }


def test_readiness_counts_ledger_events(client: TestClient, engine: LedgerAccessEngine) -> None:
    engine.grant_role("alice", "editor")
    engine.revoke_role("alice", "editor")
    engine.set_entity_access_role("doc1", "bob")

    result = client.simulate_get("/v1/health/ready")
    assert result.json["user_events"] == 2
    assert result.json["entity_events"] == 1
