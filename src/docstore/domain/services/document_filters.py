"""Predicates deciding whether a document satisfies a search request."""
from __future__ import annotations

from datetime import datetime
from typing import Sequence

from docstore.domain.models.document import Document, SearchRequest


def matches_title(document: Document, prefixes: Sequence[str] | None) -> bool:
    """Return ``True`` when the title starts with any of ``prefixes``."""

    if not prefixes:
        return True
    return any(document.title.startswith(prefix) for prefix in prefixes)


def matches_content(document: Document, fragments: Sequence[str] | None) -> bool:
    """Return ``True`` when the content contains any of ``fragments``."""

    if not fragments:
        return True
    return any(fragment in document.content for fragment in fragments)


def matches_author_id(document: Document, author_ids: Sequence[str] | None) -> bool:
    """Return ``True`` when the author id equals one of ``author_ids``."""

    if not author_ids:
        return True
    return any(document.author.id == author_id for author_id in author_ids)


def matches_created_date(
    document: Document,
    created_from: datetime | None,
    created_to: datetime | None,
) -> bool:
    """Return ``True`` when ``created`` lies inside the inclusive range."""

    created = document.created
    if created_from is not None and created < created_from:
        return False
    if created_to is not None and created > created_to:
        return False
    return True


def matches_request(document: Document, request: SearchRequest) -> bool:
    """Return ``True`` when ``document`` satisfies every criterion in ``request``."""

    return (
        matches_title(document, request.title_prefixes)
        and matches_content(document, request.contains_contents)
        and matches_author_id(document, request.author_ids)
        and matches_created_date(document, request.created_from, request.created_to)
    )
