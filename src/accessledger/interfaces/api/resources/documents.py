"""Document API resources."""

import falcon.asgi

from accessledger.application.use_cases.document.fetch_document import FetchDocumentUseCase
from accessledger.domain.exceptions import NotFound, PermissionDenied, Unauthenticated


class DocumentResource:
    """GET /v1/documents/{id} - fetch document for the bearer of the token."""

    def __init__(self, fetch_document: FetchDocumentUseCase) -> None:
        self._fetch_document = fetch_document

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Get document by id."""
        token = getattr(req.context, "token", None)
        try:
            result = await self._fetch_document.execute(token, document_id)
            resp.media = {
                "id": result.id,
                "text": result.text,
                "user_id": result.user_id,
            }
            resp.status = falcon.HTTP_200
        except Unauthenticated as e:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized", "detail": str(e)}
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied", "detail": str(e)}
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found", "detail": str(e)}
