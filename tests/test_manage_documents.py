"""Tests for the document management use cases."""
from __future__ import annotations

import pytest

from docstore.application.manage_documents import (
    DocumentNotFoundError,
    FindDocumentUseCase,
    RetrieveDocumentUseCase,
    SaveDocumentUseCase,
    SearchDocumentsUseCase,
)
from docstore.domain.models.document import Author, Document, SearchRequest
from docstore.infrastructure.repositories.in_memory_document_repository import (
    InMemoryDocumentRepository,
)


def test_save_and_find_use_cases_share_repository() -> None:
    """A document saved through one use case is visible to the others."""

    repository = InMemoryDocumentRepository()
    saved = SaveDocumentUseCase(repository).execute(
        Document(title="Notes", content="Meeting notes", author=Author(name="Lin"))
    )

    assert FindDocumentUseCase(repository).execute(saved.id) == saved
    assert SearchDocumentsUseCase(repository).execute(
        SearchRequest(contains_contents=["Meeting"])
    ) == [saved]


def test_find_use_case_returns_none_for_unknown_id(
    repository: InMemoryDocumentRepository,
) -> None:
    """Unknown ids are reported as ``None``."""

    assert FindDocumentUseCase(repository).execute("missing") is None


def test_retrieve_use_case_returns_document(
    repository: InMemoryDocumentRepository,
) -> None:
    """Known ids are returned unchanged."""

    document = RetrieveDocumentUseCase(repository).execute("2")

    assert document.title == "Doc2"


def test_retrieve_use_case_raises_for_unknown_id(
    repository: InMemoryDocumentRepository,
) -> None:
    """Unknown ids raise ``DocumentNotFoundError``."""

    with pytest.raises(DocumentNotFoundError, match="'missing'"):
        RetrieveDocumentUseCase(repository).execute("missing")


def test_search_use_case_returns_empty_list_for_none(
    repository: InMemoryDocumentRepository,
) -> None:
    """A missing request is passed through and yields no results."""

    assert SearchDocumentsUseCase(repository).execute(None) == []
