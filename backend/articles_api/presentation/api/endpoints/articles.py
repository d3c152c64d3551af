"""Article endpoints: list, fetch, create and update.

Validation failures on create/update answer 500 rather than a 4xx, and
so do bodies that are not JSON objects. That mapping is part of the
public contract.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from articles_api.application.schemas import ArticleResponse, ArticleWriteResponse
from articles_api.application.services import ArticleService
from articles_api.domain.entities import Article
from articles_api.domain.exceptions import ArticleValidationError, EntityNotFoundError
from articles_api.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"description": "No article with this id"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "description": "Invalid title/content, or a storage failure"
    },
}


def _to_response(article: Article) -> ArticleResponse:
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article in creation order."""
    articles = await service.list_articles()
    return [_to_response(a) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse, responses=_ERROR_RESPONSES)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(article)


@router.post("", response_model=ArticleWriteResponse, responses=_ERROR_RESPONSES)
async def create_article(
    payload: Any = Body(None, examples=[{"title": "Hello", "content": "World"}]),
    service: ArticleService = Depends(get_article_service),
) -> ArticleWriteResponse:
    """Create a new article from ``title`` and ``content``; other keys are ignored."""
    try:
        article = await service.create_article({} if payload is None else payload)
    except ArticleValidationError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return ArticleWriteResponse(message="Created successfully", article=_to_response(article))


@router.put("/{article_id}", response_model=ArticleWriteResponse, responses=_ERROR_RESPONSES)
async def update_article(
    article_id: str,
    payload: Any = Body(None, examples=[{"title": "New title"}]),
    service: ArticleService = Depends(get_article_service),
) -> ArticleWriteResponse:
    """Update some or all of an article's fields. Omitted fields keep their value."""
    try:
        article = await service.update_article(article_id, {} if payload is None else payload)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ArticleValidationError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return ArticleWriteResponse(message="Updated successfully", article=_to_response(article))
