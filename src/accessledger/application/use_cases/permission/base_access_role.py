"""Base access role use case."""

from accessledger.application.ports import AccessLedger
from accessledger.application.use_cases.admin_guard import ensure_admin


class SetBaseAccessRoleUseCase:
    """Set or clear the role every access decision requires."""

    def __init__(self, access_ledger: AccessLedger, admin_role: str) -> None:
        self._ledger = access_ledger
        self._admin_role = admin_role

    async def execute(self, actor_id: str, role: str | None) -> None:
        """Set base access role, or clear it when role is None."""
        ensure_admin(self._ledger, actor_id, self._admin_role)
        if role:
            self._ledger.set_base_access_role(role)
        else:
            self._ledger.remove_base_access_role()
