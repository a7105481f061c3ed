"""Article and comment schemas."""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inkwell.models.states import ArticleStatus

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class ArticleRecord(BaseModel):
    """Validated snapshot of a stored article."""

    id: int
    slug: str | None
    title: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
    excerpt: str | None = None
    image_url: str | None = None
    author_id: str = Field(..., min_length=1)
    author_name: str
    status: ArticleStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @field_validator("slug")
    @classmethod
    def _slug_is_url_safe(cls, value: str | None) -> str | None:
        if value is not None and not SLUG_PATTERN.match(value):
            raise ValueError(f"slug {value!r} is not URL-safe")
        return value


class CommentRecord(BaseModel):
    """Validated snapshot of a stored comment."""

    id: int
    article_id: int
    body: str = Field(..., min_length=1)
    author_id: str = Field(..., min_length=1)
    author_name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ArticleCreate(BaseModel):
    """Schema for submitting a new article.

    Length limits are checked by the access layer so the error texts stay
    consistent with the other write paths.
    """

    title: str
    body: str
    excerpt: str | None = None
    image_url: str | None = None


class ArticleUpdate(BaseModel):
    """Partial update of an article's editable fields."""

    title: str | None = None
    body: str | None = None
    excerpt: str | None = None
    image_url: str | None = None


class CommentCreate(BaseModel):
    body: str
