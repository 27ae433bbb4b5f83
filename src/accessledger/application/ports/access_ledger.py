"""Access ledger port - role grants, entity access roles and the registry."""

from typing import Protocol

from accessledger.domain.value_objects import RemovalTarget


class AccessLedger(Protocol):
    """Port for administering the role ledger behind an AccessChecker."""

    def check(self, user_id: str, entity_id: str) -> bool: ...

    def grant_role(self, user_id: str, role: str) -> None: ...

    def revoke_role(self, user_id: str, role: str) -> None: ...

    def set_entity_access_role(self, entity_id: str, role_or_user_id: str) -> None: ...

    def remove_entity_access_role(self, entity_id: str, role: str) -> None: ...

    def set_base_access_role(self, role: str) -> None: ...

    def remove_base_access_role(self) -> None: ...

    def create_role(self, name: str, key: str) -> None: ...

    def remove_role(self, target: RemovalTarget) -> None: ...

    def get_active_user_roles(self, user_id: str) -> list[str]: ...

    def get_active_entity_access_roles(self, entity_id: str) -> list[str]: ...
