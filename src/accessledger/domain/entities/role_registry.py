"""Role registry - role name to role key."""

from collections.abc import Mapping

DEFAULT_ROLES: dict[str, str] = {"Admin": "admin", "Editor": "editor", "Guest": "guest"}


class RoleRegistry:
    """Named roles known to an engine.

    Ledger events reference role keys, not names. Removing a name from the
    registry leaves existing ledger events untouched.
    """

    def __init__(self, roles: Mapping[str, str] | None = None) -> None:
        self._roles: dict[str, str] = dict(DEFAULT_ROLES if roles is None else roles)

    def create(self, name: str, key: str) -> None:
        """Insert or overwrite name -> key."""
        self._roles[name] = key

    def remove(self, name: str) -> str | None:
        """Delete name and return its key, or None if not registered."""
        return self._roles.pop(name, None)

    def get(self, name: str) -> str | None:
        return self._roles.get(name)

    def keys(self) -> list[str]:
        """Distinct role keys in registration order."""
        return list(dict.fromkeys(self._roles.values()))

    def items(self) -> list[tuple[str, str]]:
        return list(self._roles.items())

    def __contains__(self, name: object) -> bool:
        return name in self._roles

    def __len__(self) -> int:
        return len(self._roles)
