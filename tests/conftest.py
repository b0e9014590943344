"""Test configuration ensuring the ``docstore`` package is importable."""
from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    """Add the project's ``src`` directory to ``sys.path`` when missing."""

    project_root = Path(__file__).resolve().parents[1]
    src_path = project_root / "src"
    src_path_str = str(src_path)
    if src_path_str not in sys.path:
        sys.path.insert(0, src_path_str)


_ensure_src_on_path()

from docstore.domain.models.document import Author, Document  # noqa: E402
from docstore.infrastructure.repositories.in_memory_document_repository import (  # noqa: E402
    InMemoryDocumentRepository,
)


@pytest.fixture
def reference_time() -> datetime:
    """Return the instant the sample documents are created relative to."""

    return datetime(2025, 3, 11, tzinfo=timezone.utc)


@pytest.fixture
def repository(reference_time: datetime) -> InMemoryDocumentRepository:
    """Return a repository preloaded with four sample documents."""

    repository = InMemoryDocumentRepository()
    for number, author_id, seconds_before in (
        (1, "Author1", 3600),
        (2, "Author2", 3600),
        (3, "Author1", 7200),
        (4, "Author4", 5600),
    ):
        repository.save(
            Document(
                id=str(number),
                title=f"Doc{number}",
                content=f"Content{number}",
                author=Author(id=author_id, name=author_id),
                created=reference_time - timedelta(seconds=seconds_before),
            )
        )
    return repository
