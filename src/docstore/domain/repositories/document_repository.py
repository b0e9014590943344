"""Repository interface for storing and querying documents."""
from __future__ import annotations

from abc import ABC, abstractmethod

from docstore.domain.models.document import Document, SearchRequest


class InvalidDocumentError(ValueError):
    """Signal that a repository received an unusable document argument."""


class DocumentRepository(ABC):
    """Defines the behavior of a repository that stores documents by id."""

    @abstractmethod
    def save(self, document: Document) -> Document:
        """Insert or replace ``document`` returning the stored value.

        A document without an id receives a freshly generated one. Raises
        ``InvalidDocumentError`` when ``document`` is ``None``.
        """

    @abstractmethod
    def search(self, request: SearchRequest | None) -> list[Document]:
        """Return the documents matching every criterion of ``request``."""

    @abstractmethod
    def find_by_id(self, document_id: str) -> Document | None:
        """Return the document stored under ``document_id`` if present."""
