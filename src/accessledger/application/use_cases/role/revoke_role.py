"""Revoke role use case."""

from accessledger.application.ports import AccessLedger
from accessledger.application.use_cases.admin_guard import ensure_admin


class RevokeRoleUseCase:
    """Revoke role from user."""

    def __init__(self, access_ledger: AccessLedger, admin_role: str) -> None:
        self._ledger = access_ledger
        self._admin_role = admin_role

    async def execute(self, actor_id: str, user_id: str, role: str) -> None:
        """Revoke role from user. Actor must have admin access."""
        ensure_admin(self._ledger, actor_id, self._admin_role)
        self._ledger.revoke_role(user_id, role)
