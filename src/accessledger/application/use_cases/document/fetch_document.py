"""Fetch document use case."""

import logging

from accessledger.application.dto.document_dto import DocumentOutput
from accessledger.application.ports import AccessChecker, IdentityResolver
from accessledger.application.ports.repositories import DocumentRepository
from accessledger.domain.exceptions import NotFound, PermissionDenied, Unauthenticated

logger = logging.getLogger(__name__)


class FetchDocumentUseCase:
    """Identify the caller, check access, then load the document."""

    def __init__(
        self,
        identity_resolver: IdentityResolver,
        access_checker: AccessChecker,
        document_repository: DocumentRepository,
    ) -> None:
        self._identity_resolver = identity_resolver
        self._access_checker = access_checker
        self._documents = document_repository

    async def execute(self, token: str | None, document_id: str) -> DocumentOutput:
        """Fetch document by id for the token holder.

        Identification runs first, then the access check, then the lookup.
        """
        user_id = self._identity_resolver.identify(token) if token else None
        if not user_id:
            raise Unauthenticated(
                f"User ID is required to access Document '{document_id}'"
            )

        if not self._access_checker.check(user_id, document_id):
            logger.info("User %r denied access to document %r", user_id, document_id)
            raise PermissionDenied(
                f"User '{user_id}' does not have access to Document '{document_id}'"
            )

        document = await self._documents.get_by_id(document_id)
        if not document:
            raise NotFound("Document", document_id)

        return DocumentOutput(id=document.id, text=document.text, user_id=user_id)
