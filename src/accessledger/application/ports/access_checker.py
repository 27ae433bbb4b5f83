"""Access checker port - allow/deny decisions."""

from typing import Protocol


class AccessChecker(Protocol):
    """Port for deciding whether a user may act on an entity."""

    def check(self, user_id: str, entity_id: str) -> bool: ...
