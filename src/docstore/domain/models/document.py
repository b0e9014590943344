"""Domain models for stored documents and search criteria."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping, Sequence


def _require_string(data: Mapping[str, Any], key: str, label: str) -> str | None:
    """Return ``data[key]`` when it is a string or absent, raising otherwise."""

    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValueError(f"{label} must be a string.")


def _parse_timestamp(value: Any, label: str) -> datetime | None:
    """Convert an ISO-8601 string into a ``datetime`` instance."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"{label} must be an ISO-8601 string.")
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError(f"{label} must be an ISO-8601 string.") from None


def _format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_string_list(value: Any, label: str) -> tuple[str, ...] | None:
    """Return a tuple of strings built from ``value`` or ``None`` when absent."""

    if value is None:
        return None
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ValueError(f"{label} must be provided as a list of strings.")
    items = tuple(value)
    if not all(isinstance(item, str) for item in items):
        raise ValueError(f"{label} must be provided as a list of strings.")
    return items


@dataclass(frozen=True)
class Author:
    """Represents the creator of a document."""

    id: str | None = None
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the author."""

        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Author":
        """Create an author instance from its serialized representation."""

        if not isinstance(data, Mapping):
            raise ValueError("Author data must be a mapping.")
        return cls(
            id=_require_string(data, "id", "Author id"),
            name=_require_string(data, "name", "Author name"),
        )


@dataclass(frozen=True)
class Document:
    """Represents a document kept by the store."""

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the document."""

        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "author": self.author.to_dict() if self.author is not None else None,
            "created": _format_timestamp(self.created),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Document":
        """Create a document from its serialized representation."""

        if not isinstance(data, Mapping):
            raise ValueError("Document data must be a mapping.")

        raw_author = data.get("author")
        author = Author.from_dict(raw_author) if raw_author is not None else None

        return cls(
            id=_require_string(data, "id", "Document id"),
            title=_require_string(data, "title", "Document title"),
            content=_require_string(data, "content", "Document content"),
            author=author,
            created=_parse_timestamp(data.get("created"), "Document created"),
        )


@dataclass(frozen=True)
class SearchRequest:
    """Criteria used to filter stored documents.

    Every field is optional. An absent or empty field does not constrain the
    search; values inside a single list are alternatives while the different
    fields must all match.
    """

    title_prefixes: Sequence[str] | None = None
    contains_contents: Sequence[str] | None = None
    author_ids: Sequence[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the request."""

        def _listed(values: Sequence[str] | None) -> list[str] | None:
            return list(values) if values is not None else None

        return {
            "titlePrefixes": _listed(self.title_prefixes),
            "containsContents": _listed(self.contains_contents),
            "authorIds": _listed(self.author_ids),
            "createdFrom": _format_timestamp(self.created_from),
            "createdTo": _format_timestamp(self.created_to),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchRequest":
        """Create a search request from its serialized representation."""

        if not isinstance(data, Mapping):
            raise ValueError("Search request data must be a mapping.")

        return cls(
            title_prefixes=_parse_string_list(data.get("titlePrefixes"), "Title prefixes"),
            contains_contents=_parse_string_list(
                data.get("containsContents"), "Content fragments"
            ),
            author_ids=_parse_string_list(data.get("authorIds"), "Author ids"),
            created_from=_parse_timestamp(data.get("createdFrom"), "Created from"),
            created_to=_parse_timestamp(data.get("createdTo"), "Created to"),
        )
