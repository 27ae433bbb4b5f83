"""Document repository port."""

from typing import Protocol

from accessledger.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document lookup."""

    async def get_by_id(self, document_id: str) -> Document | None: ...
