"""Grant status recorded on ledger events."""

from enum import StrEnum


class GrantStatus(StrEnum):
    """Whether an event asserts or withdraws a role."""

    ACTIVE = "active"
    INACTIVE = "inactive"
