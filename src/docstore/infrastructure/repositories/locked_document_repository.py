"""Repository decorator serializing access to another repository."""
from __future__ import annotations

import threading

from docstore.domain.models.document import Document, SearchRequest
from docstore.domain.repositories.document_repository import DocumentRepository


class LockedDocumentRepository(DocumentRepository):
    """Guard every operation of a wrapped repository with one re-entrant lock."""

    def __init__(self, repository: DocumentRepository) -> None:
        """Initialize the decorator with the repository it protects."""

        self._repository = repository
        self._lock = threading.RLock()

    @property
    def wrapped(self) -> DocumentRepository:
        """Return the repository receiving the delegated calls."""

        return self._repository

    def save(self, document: Document) -> Document:
        """Save ``document`` while holding the lock."""

        with self._lock:
            return self._repository.save(document)

    def search(self, request: SearchRequest | None) -> list[Document]:
        """Search the wrapped repository while holding the lock."""

        with self._lock:
            return self._repository.search(request)

    def find_by_id(self, document_id: str) -> Document | None:
        """Look up ``document_id`` while holding the lock."""

        with self._lock:
            return self._repository.find_by_id(document_id)
