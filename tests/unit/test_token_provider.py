"""Unit tests for in-memory collaborators: tokens and documents."""

import pytest

from accessledger.domain.entities import Document
from accessledger.infrastructure.auth.token_provider import InMemoryTokenProvider
from accessledger.infrastructure.persistence.memory.document_repository import (
    InMemoryDocumentRepository,
)


def test_authenticate_then_identify(token_provider: InMemoryTokenProvider) -> None:
    token = token_provider.authenticate("testUser")

    assert isinstance(token, str)
    assert len(token) > 0
    assert token_provider.identify(token) == "testUser"


def test_identify_invalid_token(token_provider: InMemoryTokenProvider) -> None:
    assert token_provider.identify("invalidToken") is None


def test_tokens_are_per_provider() -> None:
    token = InMemoryTokenProvider().authenticate("testUser")
    assert InMemoryTokenProvider().identify(token) is None


@pytest.mark.asyncio
async def test_seeded_documents(document_repository: InMemoryDocumentRepository) -> None:
    doc = await document_repository.get_by_id("doc1")
    assert doc == Document(id="doc1", text="Doc 1 text")
    assert await document_repository.get_by_id("doc5") is not None


@pytest.mark.asyncio
async def test_missing_document(document_repository: InMemoryDocumentRepository) -> None:
    assert await document_repository.get_by_id("nonExistentDoc") is None


@pytest.mark.asyncio
async def test_custom_documents(secret_document: Document) -> None:
    repo = InMemoryDocumentRepository([secret_document])
    assert await repo.get_by_id("secret") == secret_document
    assert await repo.get_by_id("doc1") is None
