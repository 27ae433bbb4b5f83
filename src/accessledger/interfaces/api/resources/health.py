"""Health check endpoints."""

import falcon.asgi

from accessledger.infrastructure.permission.access_engine import LedgerAccessEngine


class HealthResource:
    """Liveness, plus readiness of the ledger engine behind the API."""

    def __init__(self, engine: LedgerAccessEngine) -> None:
        self._engine = engine

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - engine is wired and its ledgers can be read.

        Reports the registry and ledger sizes.
        """
        resp.media = {
            "status": "ready",
            "roles": len(self._engine.registry),
            "user_events": len(self._engine.user_ledger),
            "entity_events": len(self._engine.entity_ledger),
        }
        resp.status = falcon.HTTP_200
