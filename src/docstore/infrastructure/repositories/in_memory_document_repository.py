"""Repository implementation keeping documents in a process-local mapping."""
from __future__ import annotations

import logging
import uuid

from docstore.domain.models.document import Author, Document, SearchRequest
from docstore.domain.repositories.document_repository import (
    DocumentRepository,
    InvalidDocumentError,
)
from docstore.domain.services.document_filters import matches_request

logger = logging.getLogger(__name__)


class InMemoryDocumentRepository(DocumentRepository):
    """Store documents in a dictionary owned by the repository instance.

    The repository is not synchronized. Wrap it in
    ``LockedDocumentRepository`` when it is shared between threads.
    """

    def __init__(self) -> None:
        """Initialize the repository with an empty mapping."""

        self._documents: dict[str, Document] = {}

    def __len__(self) -> int:
        """Return the number of stored documents."""

        return len(self._documents)

    def save(self, document: Document) -> Document:
        """Upsert a copy of ``document`` generating an id when missing.

        The stored author takes its id from the incoming author's name. A
        document without an author fails with ``AttributeError``.
        """

        if document is None:
            raise InvalidDocumentError("Document cannot be None")

        document_id = document.id
        if not document_id:
            document_id = str(uuid.uuid4())
            logger.debug("Generated id %s for new document", document_id)

        saved = Document(
            id=document_id,
            title=document.title,
            content=document.content,
            author=Author(id=document.author.name, name=document.author.name),
            created=document.created,
        )

        replaced = document_id in self._documents
        self._documents[document_id] = saved
        logger.debug(
            "%s document %s", "Replaced" if replaced else "Inserted", document_id
        )
        return saved

    def search(self, request: SearchRequest | None) -> list[Document]:
        """Scan the stored documents returning those matching ``request``."""

        if request is None:
            return []

        results = [
            document
            for document in self._documents.values()
            if matches_request(document, request)
        ]
        logger.debug(
            "Search matched %d of %d documents", len(results), len(self._documents)
        )
        return results

    def find_by_id(self, document_id: str) -> Document | None:
        """Return the stored document for ``document_id`` or ``None``."""

        document = self._documents.get(document_id)
        if document is None:
            logger.debug("Document %s not found", document_id)
        return document
