"""Create role use case."""

from accessledger.application.ports import AccessLedger
from accessledger.application.use_cases.admin_guard import ensure_admin
from accessledger.domain.exceptions import ValidationError


class CreateRoleUseCase:
    """Register a role name against a role key."""

    def __init__(self, access_ledger: AccessLedger, admin_role: str) -> None:
        self._ledger = access_ledger
        self._admin_role = admin_role

    async def execute(self, actor_id: str, name: str, key: str) -> None:
        """Create or overwrite role. Actor must have admin access."""
        ensure_admin(self._ledger, actor_id, self._admin_role)
        if not name or not key:
            raise ValidationError("Role name and key are required")
        self._ledger.create_role(name, key)
