"""Pytest fixtures for accessledger tests."""

from __future__ import annotations

import pytest

from accessledger.domain.entities import Document, RoleRegistry
from accessledger.infrastructure.auth.token_provider import InMemoryTokenProvider
from accessledger.infrastructure.permission.access_engine import LedgerAccessEngine
from accessledger.infrastructure.persistence.memory.document_repository import (
    InMemoryDocumentRepository,
)

ADMIN_ROLE = "admin"


@pytest.fixture
def registry() -> RoleRegistry:
    """Fresh registry with the default Admin/Editor/Guest roles."""
    return RoleRegistry()


@pytest.fixture
def engine(registry: RoleRegistry) -> LedgerAccessEngine:
    """Engine with empty ledgers and its own registry."""
    return LedgerAccessEngine(registry=registry)


@pytest.fixture
def admin_engine(engine: LedgerAccessEngine) -> LedgerAccessEngine:
    """Engine where only 'root' holds the admin role."""
    engine.grant_role("root", ADMIN_ROLE)
    return engine


@pytest.fixture
def token_provider() -> InMemoryTokenProvider:
    return InMemoryTokenProvider()


@pytest.fixture
def document_repository() -> InMemoryDocumentRepository:
    """Repository seeded with doc1..doc5."""
    return InMemoryDocumentRepository()


@pytest.fixture
def secret_document() -> Document:
    return Document(id="secret", text="classified")


@pytest.fixture
def mock_access_checker():
    """MagicMock for AccessChecker - allows by default."""
    from unittest.mock import MagicMock

    mock = MagicMock()
    mock.check.return_value = True
    return mock


@pytest.fixture
def mock_identity_resolver():
    """MagicMock for IdentityResolver - resolves every token to 'user-1'."""
    from unittest.mock import MagicMock

    mock = MagicMock()
    mock.identify.return_value = "user-1"
    return mock
