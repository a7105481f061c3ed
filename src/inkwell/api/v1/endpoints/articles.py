# src/inkwell/api/v1/endpoints/articles.py
"""Article and comment endpoints for the Inkwell API."""

from __future__ import annotations

from fastapi import APIRouter, Query, Response, status

from inkwell.api.v1.dependencies import (
    AccessDep,
    CurrentUserDep,
    OptionalUserDep,
    unwrap,
    unwrap_read,
)
from inkwell.schemas.article import (
    ArticleCreate,
    ArticleRecord,
    ArticleUpdate,
    CommentCreate,
    CommentRecord,
)

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get("/", response_model=list[ArticleRecord])
async def list_articles(
    response: Response,
    access: AccessDep,
    page: int = Query(1, ge=1, description="1-based page of the public feed"),
) -> list[ArticleRecord]:
    """Get one page of approved articles, newest first."""
    return unwrap_read(access.list_approved_articles(page), response)


@router.get("/search", response_model=list[ArticleRecord])
async def search_articles(
    response: Response,
    access: AccessDep,
    q: str = Query("", max_length=100, description="Case-insensitive search term"),
) -> list[ArticleRecord]:
    return unwrap_read(access.search_articles(q), response)


@router.get("/by-author/{author_id}", response_model=list[ArticleRecord])
async def list_author_articles(
    author_id: str,
    response: Response,
    access: AccessDep,
    viewer: OptionalUserDep,
) -> list[ArticleRecord]:
    """Get an author's articles; unpublished ones only for the author and admins."""
    return unwrap_read(access.list_author_articles(author_id, viewer), response)


@router.get("/{slug}", response_model=ArticleRecord)
async def get_article(
    slug: str,
    response: Response,
    access: AccessDep,
    viewer: OptionalUserDep,
) -> ArticleRecord:
    """Get an article by slug, or by numeric id for records without one."""
    return unwrap_read(access.get_article_by_slug(slug, viewer), response)


@router.post("/", response_model=ArticleRecord, status_code=status.HTTP_201_CREATED)
async def create_article(
    payload: ArticleCreate,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> ArticleRecord:
    """Submit an article. Writers' submissions wait for an admin's approval."""
    return unwrap(access.create_article(payload, current_user))


@router.patch("/{article_id}", response_model=ArticleRecord)
async def update_article(
    article_id: int,
    payload: ArticleUpdate,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> ArticleRecord:
    return unwrap(access.update_article(article_id, payload, current_user))


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: int,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> None:
    unwrap(access.delete_article(article_id, current_user))


@router.get("/{article_id}/comments", response_model=list[CommentRecord])
async def list_comments(
    article_id: int,
    response: Response,
    access: AccessDep,
) -> list[CommentRecord]:
    """Get an article's comments in the order they were written."""
    return unwrap_read(access.list_comments(article_id), response)


@router.post(
    "/{article_id}/comments",
    response_model=CommentRecord,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment(
    article_id: int,
    payload: CommentCreate,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> CommentRecord:
    return unwrap(access.post_comment(article_id, payload.body, current_user))
