"""Domain entities."""

from accessledger.domain.entities.document import Document
from accessledger.domain.entities.event_log import EventLog, LedgerEvent
from accessledger.domain.entities.role_event import EntityAccessEvent, RoleEvent
from accessledger.domain.entities.role_registry import DEFAULT_ROLES, RoleRegistry

__all__ = [
    "DEFAULT_ROLES",
    "Document",
    "EntityAccessEvent",
    "EventLog",
    "LedgerEvent",
    "RoleEvent",
    "RoleRegistry",
]
