"""Assign permission use case."""

from accessledger.application.ports import AccessLedger
from accessledger.application.use_cases.admin_guard import ensure_admin


class AssignPermissionUseCase:
    """Allow a role, or a single user by id, to access an entity."""

    def __init__(self, access_ledger: AccessLedger, admin_role: str) -> None:
        self._ledger = access_ledger
        self._admin_role = admin_role

    async def execute(self, actor_id: str, entity_id: str, role_or_user_id: str) -> list[str]:
        """Set entity access role and return the entity's active access roles."""
        ensure_admin(self._ledger, actor_id, self._admin_role)
        self._ledger.set_entity_access_role(entity_id, role_or_user_id)
        return self._ledger.get_active_entity_access_roles(entity_id)
