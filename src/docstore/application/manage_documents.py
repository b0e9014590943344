"""Use cases for storing, searching and retrieving documents."""
from __future__ import annotations

from docstore.domain.models.document import Document, SearchRequest
from docstore.domain.repositories.document_repository import DocumentRepository


class DocumentNotFoundError(Exception):
    """Signal that a requested document does not exist."""


class SaveDocumentUseCase:
    """Persist a document into the repository."""

    def __init__(self, repository: DocumentRepository) -> None:
        """Initialize the use case with the repository dependency."""

        self._repository = repository

    def execute(self, document: Document) -> Document:
        """Upsert ``document`` and return the stored value."""

        return self._repository.save(document)


class SearchDocumentsUseCase:
    """Filter stored documents using a search request."""

    def __init__(self, repository: DocumentRepository) -> None:
        """Initialize the use case with the repository dependency."""

        self._repository = repository

    def execute(self, request: SearchRequest | None) -> list[Document]:
        """Return the documents matching ``request``."""

        return self._repository.search(request)


class FindDocumentUseCase:
    """Look up a stored document by its id."""

    def __init__(self, repository: DocumentRepository) -> None:
        """Initialize the use case with the repository dependency."""

        self._repository = repository

    def execute(self, document_id: str) -> Document | None:
        """Return the requested document or ``None`` when absent."""

        return self._repository.find_by_id(document_id)


class RetrieveDocumentUseCase:
    """Retrieve a stored document, treating a missing id as an error."""

    def __init__(self, repository: DocumentRepository) -> None:
        """Initialize the use case with the repository dependency."""

        self._repository = repository

    def execute(self, document_id: str) -> Document:
        """Return the requested document or raise ``DocumentNotFoundError``."""

        document = self._repository.find_by_id(document_id)
        if document is None:
            raise DocumentNotFoundError(f"Document {document_id!r} does not exist.")
        return document
