"""Remove role use case."""

from accessledger.application.ports import AccessLedger
from accessledger.application.use_cases.admin_guard import ensure_admin
from accessledger.domain.value_objects import RemovalTarget


class RemoveRoleUseCase:
    """Drop a registered role, or sweep a user's registered roles."""

    def __init__(self, access_ledger: AccessLedger, admin_role: str) -> None:
        self._ledger = access_ledger
        self._admin_role = admin_role

    async def execute(self, actor_id: str, target: RemovalTarget) -> None:
        """Apply removal cascade for target. Actor must have admin access."""
        ensure_admin(self._ledger, actor_id, self._admin_role)
        self._ledger.remove_role(target)
