"""In-memory document repository."""

from collections.abc import Iterable

from accessledger.domain.entities import Document

SEED_DOCUMENTS: tuple[Document, ...] = tuple(
    Document(id=f"doc{i}", text=f"Doc {i} text") for i in range(1, 6)
)


class InMemoryDocumentRepository:
    """Document repository backed by a dict."""

    def __init__(self, documents: Iterable[Document] = SEED_DOCUMENTS) -> None:
        self._by_id: dict[str, Document] = {d.id: d for d in documents}

    async def get_by_id(self, document_id: str) -> Document | None:
        """Get document by id."""
        return self._by_id.get(document_id)
