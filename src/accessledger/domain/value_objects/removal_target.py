"""Removal targets - what a role removal should sweep."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RemoveRole:
    """Drop a registered role by name and cascade revocations for its key."""

    name: str


@dataclass(frozen=True)
class RemoveUserGrants:
    """Revoke every registered role a user holds and strip registered roles from entities."""

    user_id: str


RemovalTarget = RemoveRole | RemoveUserGrants
