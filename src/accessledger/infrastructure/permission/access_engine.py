"""Ledger access engine - role ledgers, registry and access decisions."""

import logging
import threading
from collections.abc import Iterable

from accessledger.domain.entities import EntityAccessEvent, EventLog, RoleEvent, RoleRegistry
from accessledger.domain.value_objects import (
    GrantStatus,
    RemovalTarget,
    RemoveRole,
    RemoveUserGrants,
)

logger = logging.getLogger(__name__)


class LedgerAccessEngine:
    """Decides access from two append-only role ledgers.

    The user ledger records which roles each user holds, the entity ledger
    records which roles (or literal user ids) may access each entity. Current
    role sets are projections of the ledgers; nothing is ever deleted from
    them. An optional base access role is required of every user on top of
    the entity roles.

    All operations run under a single re-entrant lock, so a removal cascade
    reads and appends against one consistent snapshot.
    """

    def __init__(
        self,
        user_role_events: Iterable[RoleEvent] = (),
        entity_access_events: Iterable[EntityAccessEvent] = (),
        registry: RoleRegistry | None = None,
        base_access_role: str | None = None,
    ) -> None:
        self._user_ledger: EventLog[RoleEvent] = EventLog(user_role_events)
        self._entity_ledger: EventLog[EntityAccessEvent] = EventLog(entity_access_events)
        self._registry = registry if registry is not None else RoleRegistry()
        self._base_access_role = base_access_role
        self._lock = threading.RLock()

    @property
    def user_ledger(self) -> EventLog[RoleEvent]:
        return self._user_ledger

    @property
    def entity_ledger(self) -> EventLog[EntityAccessEvent]:
        return self._entity_ledger

    @property
    def registry(self) -> RoleRegistry:
        return self._registry

    # --- Base access role ---

    @property
    def base_access_role(self) -> str | None:
        return self._base_access_role

    def set_base_access_role(self, role: str) -> None:
        """Require role of every user on every access check."""
        with self._lock:
            self._base_access_role = role

    def remove_base_access_role(self) -> None:
        with self._lock:
            self._base_access_role = None

    # --- User roles ---

    def grant_role(self, user_id: str, role: str) -> None:
        """Append an active event for (user_id, role)."""
        with self._lock:
            self._user_ledger.append(RoleEvent(user_id, role, GrantStatus.ACTIVE))
        logger.debug("Granted role %r to user %r", role, user_id)

    def revoke_role(self, user_id: str, role: str) -> None:
        """Append an inactive event for (user_id, role), held or not."""
        with self._lock:
            self._user_ledger.append(RoleEvent(user_id, role, GrantStatus.INACTIVE))
        logger.debug("Revoked role %r from user %r", role, user_id)

    # --- Entity access roles ---

    def set_entity_access_role(self, entity_id: str, role_or_user_id: str) -> None:
        """Allow holders of a role, or one user by literal id, to access entity."""
        with self._lock:
            self._entity_ledger.append(
                EntityAccessEvent(entity_id, role_or_user_id, GrantStatus.ACTIVE)
            )
        logger.debug("Set access role %r on entity %r", role_or_user_id, entity_id)

    def remove_entity_access_role(self, entity_id: str, role: str) -> None:
        with self._lock:
            self._entity_ledger.append(EntityAccessEvent(entity_id, role, GrantStatus.INACTIVE))
        logger.debug("Removed access role %r from entity %r", role, entity_id)

    # --- Registry ---

    def create_role(self, name: str, key: str) -> None:
        with self._lock:
            self._registry.create(name, key)
        logger.info("Created role %r with key %r", name, key)

    def resolve_removal_target(self, name_or_user_id: str) -> RemovalTarget:
        """Read a bare string as a role name if it maps to a non-empty key, otherwise as a user id."""
        with self._lock:
            if self._registry.get(name_or_user_id):
                return RemoveRole(name_or_user_id)
            return RemoveUserGrants(name_or_user_id)

    def remove_role(self, target: RemovalTarget) -> None:
        """Apply the revocation cascade for target.

        RemoveRole drops the registry entry, then revokes its key from every
        user and entity on which it is active; a name that is unregistered or
        maps to an empty key is left alone. RemoveUserGrants revokes every
        registered key the user holds, then strips every registered key from
        every entity. Entity grants made to the literal user id are left in
        place. Nothing is appended where nothing is active.
        """
        with self._lock:
            before = len(self._user_ledger) + len(self._entity_ledger)
            if isinstance(target, RemoveRole):
                self._remove_registered_role(target.name)
            elif isinstance(target, RemoveUserGrants):
                self._remove_user_grants(target.user_id)
            else:
                raise TypeError(f"Unsupported removal target: {target!r}")
            appended = len(self._user_ledger) + len(self._entity_ledger) - before
        logger.info("Removal %r appended %d revocation events", target, appended)

    def _remove_registered_role(self, name: str) -> None:
        role = self._registry.get(name)
        if not role:
            return
        self._registry.remove(name)

        for user_id in self._user_ledger.subjects():
            if role in self._user_ledger.active_roles(user_id):
                self.revoke_role(user_id, role)

        for entity_id in self._entity_ledger.subjects():
            if role in self._entity_ledger.active_roles(entity_id):
                self.remove_entity_access_role(entity_id, role)

    def _remove_user_grants(self, user_id: str) -> None:
        registered = self._registry.keys()

        active = self._user_ledger.active_roles(user_id)
        for role in registered:
            if role in active:
                self.revoke_role(user_id, role)

        for entity_id in self._entity_ledger.subjects():
            entity_roles = self._entity_ledger.active_roles(entity_id)
            for role in registered:
                if role in entity_roles:
                    self.remove_entity_access_role(entity_id, role)

    # --- Queries ---

    def get_active_user_roles(self, user_id: str) -> list[str]:
        """Roles currently active for user, in order of first grant."""
        with self._lock:
            return self._user_ledger.active_roles(user_id)

    def get_active_entity_access_roles(self, entity_id: str) -> list[str]:
        """Roles (or literal user ids) currently allowed on entity."""
        with self._lock:
            return self._entity_ledger.active_roles(entity_id)

    def check_access(self, user_id: str, entity_id: str) -> bool:
        """Decide whether user may access entity.

        A user always counts as holding their own id as a role. The base
        access role, when set, must be among the user's roles. An entity with
        no active access roles is open to everyone else; otherwise user and
        entity must share at least one role.
        """
        with self._lock:
            user_roles = set(self._user_ledger.active_roles(user_id))
            user_roles.add(user_id)

            if self._base_access_role and self._base_access_role not in user_roles:
                return False

            entity_roles = self._entity_ledger.active_roles(entity_id)
            if not entity_roles:
                return True

            return any(role in user_roles for role in entity_roles)

    def check(self, user_id: str, entity_id: str) -> bool:
        return self.check_access(user_id, entity_id)
