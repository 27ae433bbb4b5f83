"""Unit tests for the role registry."""

from accessledger.domain.entities import DEFAULT_ROLES, RoleRegistry


def test_default_roles() -> None:
    registry = RoleRegistry()
    assert registry.items() == list(DEFAULT_ROLES.items())
    assert registry.keys() == ["admin", "editor", "guest"]


def test_registries_are_independent() -> None:
    first = RoleRegistry()
    second = RoleRegistry()
    first.create("TestRole", "test")
    assert "TestRole" in first
    assert "TestRole" not in second


def test_create_overwrites_existing_name() -> None:
    registry = RoleRegistry({})
    registry.create("Writer", "w1")
    registry.create("Writer", "w2")
    assert registry.get("Writer") == "w2"
    assert len(registry) == 1


def test_remove_returns_key_or_none() -> None:
    registry = RoleRegistry({"Writer": "w"})
    assert registry.remove("Writer") == "w"
    assert registry.remove("Writer") is None
    assert registry.get("Writer") is None


def test_keys_are_distinct() -> None:
    registry = RoleRegistry({"A": "shared", "B": "shared", "C": "other"})
    assert registry.keys() == ["shared", "other"]
