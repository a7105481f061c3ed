"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class Decision(StrEnum):
    """Outcome chosen by an admin reviewing a pending record."""

    APPROVE = "approve"
    REJECT = "reject"


class DecisionRequest(BaseModel):
    decision: Decision = Field(..., description="approve or reject")


class DashboardStats(BaseModel):
    """Aggregate counts shown on the admin dashboard."""

    users: int
    banned_users: int
    articles_pending: int
    articles_approved: int
    articles_rejected: int
    reports_pending: int
    applications_pending: int
