"""Revoke permission use case."""

from accessledger.application.ports import AccessLedger
from accessledger.application.use_cases.admin_guard import ensure_admin


class RevokePermissionUseCase:
    """Remove an access role from an entity."""

    def __init__(self, access_ledger: AccessLedger, admin_role: str) -> None:
        self._ledger = access_ledger
        self._admin_role = admin_role

    async def execute(self, actor_id: str, entity_id: str, role: str) -> None:
        """Remove entity access role. Actor must have admin access."""
        ensure_admin(self._ledger, actor_id, self._admin_role)
        self._ledger.remove_entity_access_role(entity_id, role)
