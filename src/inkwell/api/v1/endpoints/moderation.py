# src/inkwell/api/v1/endpoints/moderation.py
"""Admin moderation endpoints for the Inkwell API."""

from __future__ import annotations

from fastapi import APIRouter, Query

from inkwell.api.v1.dependencies import AccessDep, CurrentUserDep, unwrap
from inkwell.models.states import ReportStatus
from inkwell.schemas.article import ArticleRecord
from inkwell.schemas.chat import ReportRecord
from inkwell.schemas.common import DashboardStats, DecisionRequest

router = APIRouter(prefix="/moderation", tags=["moderation"])


@router.get("/articles/pending", response_model=list[ArticleRecord])
async def get_pending_articles(
    access: AccessDep,
    current_user: CurrentUserDep,
) -> list[ArticleRecord]:
    """Get articles waiting for review, newest first."""
    return unwrap(access.list_pending_articles(current_user))


@router.post("/articles/{article_id}/decision", response_model=ArticleRecord)
async def moderate_article(
    article_id: int,
    payload: DecisionRequest,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> ArticleRecord:
    """Approve or reject a pending article.

    Decisions are final: a second decision on the same article answers 409.
    """
    return unwrap(access.moderate_article(article_id, payload.decision, current_user))


@router.get("/reports", response_model=list[ReportRecord])
async def get_reports(
    access: AccessDep,
    current_user: CurrentUserDep,
    status_filter: ReportStatus | None = Query(None, alias="status"),
) -> list[ReportRecord]:
    return unwrap(access.list_reports(current_user, status_filter))


@router.post("/reports/{report_id}/resolve", response_model=ReportRecord)
async def resolve_report(
    report_id: int,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> ReportRecord:
    return unwrap(access.resolve_report(report_id, current_user))


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    access: AccessDep,
    current_user: CurrentUserDep,
) -> DashboardStats:
    """Counts shown on the admin dashboard."""
    return unwrap(access.dashboard_stats(current_user))
