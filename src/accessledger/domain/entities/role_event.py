"""Ledger events for user roles and entity access roles."""

from dataclasses import dataclass

from accessledger.domain.value_objects import GrantStatus


@dataclass(frozen=True)
class RoleEvent:
    """User role assertion - user holds (or no longer holds) role."""

    user_id: str
    role: str
    status: GrantStatus

    @property
    def subject(self) -> str:
        return self.user_id


@dataclass(frozen=True)
class EntityAccessEvent:
    """Entity access assertion - role (or literal user id) may access entity."""

    entity_id: str
    role: str
    status: GrantStatus

    @property
    def subject(self) -> str:
        return self.entity_id
