"""Entry point wiring a document repository and its use cases from settings."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from docstore.application.manage_documents import (
    FindDocumentUseCase,
    RetrieveDocumentUseCase,
    SaveDocumentUseCase,
    SearchDocumentsUseCase,
)
from docstore.config.logging_config import configure_logging
from docstore.config.settings import Settings, get_settings
from docstore.domain.repositories.document_repository import DocumentRepository
from docstore.infrastructure.repositories.in_memory_document_repository import (
    InMemoryDocumentRepository,
)
from docstore.infrastructure.repositories.locked_document_repository import (
    LockedDocumentRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentManager:
    """Group the document use cases sharing a single repository."""

    repository: DocumentRepository
    save: SaveDocumentUseCase
    search: SearchDocumentsUseCase
    find: FindDocumentUseCase
    retrieve: RetrieveDocumentUseCase


def create_document_repository(
    repository: DocumentRepository | None = None,
    settings: Settings | None = None,
) -> DocumentRepository:
    """Create and configure the document repository used by callers."""

    settings = settings if settings is not None else get_settings()
    configure_logging(settings)

    document_repository = (
        repository if repository is not None else InMemoryDocumentRepository()
    )
    if settings.thread_safe:
        document_repository = LockedDocumentRepository(document_repository)

    logger.debug(
        "Created %s (thread_safe=%s)",
        type(document_repository).__name__,
        settings.thread_safe,
    )
    return document_repository


def create_document_manager(
    repository: DocumentRepository | None = None,
    settings: Settings | None = None,
) -> DocumentManager:
    """Build the document use cases on top of a configured repository."""

    document_repository = create_document_repository(repository, settings)
    return DocumentManager(
        repository=document_repository,
        save=SaveDocumentUseCase(document_repository),
        search=SearchDocumentsUseCase(document_repository),
        find=FindDocumentUseCase(document_repository),
        retrieve=RetrieveDocumentUseCase(document_repository),
    )


__all__ = ["DocumentManager", "create_document_manager", "create_document_repository"]
