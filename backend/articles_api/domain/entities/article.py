"""Domain entities — pure Python business objects, no framework dependencies."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

# Client-writable fields. Everything else in a payload is dropped.
ARTICLE_FIELDS: tuple[str, ...] = ("title", "content")


def project_article_fields(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Build a payload from recognised keys only.

    ``id``, ``createdAt``, ``updatedAt`` and any unknown keys are never
    taken from the caller.
    """
    return {name: payload[name] for name in ARTICLE_FIELDS if name in payload}


def is_blank(value: str) -> bool:
    """True when the text has no non-whitespace character."""
    return not value.strip()


@dataclass
class Article:
    """Core domain entity representing a titled piece of content."""

    title: str
    content: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, title: str | None = None, content: str | None = None) -> None:
        """Update article fields and refresh the updated_at timestamp."""
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
        self.updated_at = datetime.now(timezone.utc)

    def invalid_fields(self) -> list[str]:
        """Names of required text fields that are blank."""
        return [name for name in ARTICLE_FIELDS if is_blank(getattr(self, name))]
