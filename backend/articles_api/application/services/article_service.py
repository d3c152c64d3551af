"""Application service (use case) for Article operations."""

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.schemas import ArticleCreate, ArticleUpdate
from articles_api.domain.entities import Article, project_article_fields
from articles_api.domain.exceptions import ArticleValidationError, EntityNotFoundError

logger = logging.getLogger(__name__)

# Upper bound of the integer primary key column.
_MAX_ARTICLE_ID = 2**31 - 1


def parse_article_id(raw: int | str) -> int | None:
    """Turn a path identifier into a primary key, or None if it cannot be one."""
    if isinstance(raw, int):
        value = raw
    else:
        if not raw.isascii() or not raw.isdigit():
            return None
        value = int(raw)
    if value < 1 or value > _MAX_ARTICLE_ID:
        return None
    return value


def _offending_fields(exc: ValidationError) -> list[str]:
    return sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})


def _require_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ArticleValidationError(["body"], "must be a JSON object")
    return payload


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Payloads arrive as decoded JSON and must be objects; only ``title`` and
    ``content`` are ever read from them. Invalid input raises
    ``ArticleValidationError`` before anything is written, and unknown ids
    raise ``EntityNotFoundError``.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int | str) -> Article:
        key = parse_article_id(article_id)
        article = await self._repository.get_by_id(key) if key is not None else None
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def create_article(self, payload: Any) -> Article:
        payload = _require_mapping(payload)
        try:
            data = ArticleCreate.model_validate(project_article_fields(payload))
        except ValidationError as exc:
            fields = _offending_fields(exc)
            logger.info("Rejected article create: invalid %s", fields)
            raise ArticleValidationError(fields) from exc

        article = await self._repository.create(
            Article(title=data.title, content=data.content)
        )
        logger.info("Created article %s", article.id)
        return article

    async def update_article(
        self, article_id: int | str, payload: Any
    ) -> Article:
        existing = await self.get_article(article_id)
        payload = _require_mapping(payload)

        try:
            data = ArticleUpdate.model_validate(project_article_fields(payload))
        except ValidationError as exc:
            fields = _offending_fields(exc)
            logger.info("Rejected update of article %s: invalid %s", existing.id, fields)
            raise ArticleValidationError(fields) from exc

        # Merge into a copy so a rejected update never touches the loaded record.
        merged = dataclasses.replace(existing)
        merged.update(**data.model_dump(exclude_unset=True))
        invalid = merged.invalid_fields()
        if invalid:
            raise ArticleValidationError(invalid)

        article = await self._repository.update(merged)
        logger.info("Updated article %s", article.id)
        return article
