"""Domain value objects."""

from accessledger.domain.value_objects.grant_status import GrantStatus
from accessledger.domain.value_objects.removal_target import (
    RemovalTarget,
    RemoveRole,
    RemoveUserGrants,
)

__all__ = [
    "GrantStatus",
    "RemovalTarget",
    "RemoveRole",
    "RemoveUserGrants",
]
