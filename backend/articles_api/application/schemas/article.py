"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from articles_api.domain.entities import is_blank


def _require_text(value: str | None) -> str:
    if value is None or is_blank(value):
        raise ValueError("must be a non-empty string")
    return value


class ArticleCreate(BaseModel):
    """Schema for creating a new article — both fields required."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., examples=["Getting Started"])
    content: str = Field(..., examples=["This is an article body."])

    @field_validator("title", "content")
    @classmethod
    def text_must_not_be_blank(cls, value: str | None) -> str:
        return _require_text(value)


class ArticleUpdate(BaseModel):
    """Schema for a partial update.

    Omitted fields stay unset and are left alone; a field that is present
    must still be non-empty text (``null`` is rejected too).
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    content: str | None = None

    @field_validator("title", "content")
    @classmethod
    def text_must_not_be_blank(cls, value: str | None) -> str:
        return _require_text(value)


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    content: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class ArticleWriteResponse(BaseModel):
    """Envelope returned by create and update."""

    message: str
    article: ArticleResponse
