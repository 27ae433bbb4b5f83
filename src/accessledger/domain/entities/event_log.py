"""Append-only event log with latest-status projection."""

from collections.abc import Iterable, Iterator
from typing import Generic, Protocol, TypeVar

from accessledger.domain.value_objects import GrantStatus


class LedgerEvent(Protocol):
    """Event shape the log can fold: subject, role and status."""

    @property
    def subject(self) -> str: ...

    @property
    def role(self) -> str: ...

    @property
    def status(self) -> GrantStatus: ...


E = TypeVar("E", bound=LedgerEvent)


class EventLog(Generic[E]):
    """Ordered, append-only sequence of role events.

    Events are never mutated or removed. The current state of a subject is
    the fold of its events in insertion order, where a later event for the
    same role overrides an earlier one.
    """

    def __init__(self, events: Iterable[E] = ()) -> None:
        self._events: list[E] = list(events)

    def append(self, event: E) -> None:
        """Append event to the end of the log."""
        self._events.append(event)

    def subjects(self) -> list[str]:
        """Distinct subjects in order of first appearance."""
        return list(dict.fromkeys(e.subject for e in self._events))

    def latest_statuses(self, subject: str) -> dict[str, GrantStatus]:
        """Fold events for subject into role -> last recorded status.

        Roles keep the position of their first appearance.
        """
        statuses: dict[str, GrantStatus] = {}
        for event in self._events:
            if event.subject == subject:
                statuses[event.role] = event.status
        return statuses

    def active_roles(self, subject: str) -> list[str]:
        """Roles whose latest status for subject is active."""
        return [
            role
            for role, status in self.latest_statuses(subject).items()
            if status == GrantStatus.ACTIVE
        ]

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)
