"""Unit tests for the Article entity helpers and response schemas."""

from datetime import datetime, timezone

from articles_api.application.schemas import ArticleResponse, ArticleWriteResponse
from articles_api.domain.entities import Article, project_article_fields


def test_project_article_fields_keeps_only_known_keys():
    payload = {"title": "T", "content": "C", "id": 5, "createdAt": "x", "extra": True}
    assert project_article_fields(payload) == {"title": "T", "content": "C"}


def test_project_article_fields_does_not_invent_missing_keys():
    assert project_article_fields({"title": "T"}) == {"title": "T"}


def test_invalid_fields_flags_blank_text():
    article = Article(title=" \t", content="ok")
    assert article.invalid_fields() == ["title"]


def test_update_refreshes_timestamp_and_skips_none():
    article = Article(title="T", content="C")
    before = article.updated_at

    article.update(content="D")

    assert article.title == "T"
    assert article.content == "D"
    assert article.updated_at >= before


def test_response_uses_camel_case_timestamps():
    stamp = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    article = Article(id=3, title="T", content="C", created_at=stamp, updated_at=stamp)

    envelope = ArticleWriteResponse(
        message="Created successfully",
        article=ArticleResponse.model_validate(article, from_attributes=True),
    )
    dumped = envelope.model_dump(mode="json", by_alias=True)

    assert dumped["article"] == {
        "id": 3,
        "title": "T",
        "content": "C",
        "createdAt": "2026-01-02T03:04:05Z",
        "updatedAt": "2026-01-02T03:04:05Z",
    }
