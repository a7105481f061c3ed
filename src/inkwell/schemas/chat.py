"""Chat message and report schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from inkwell.models.states import ReportStatus


class ChatMessageRecord(BaseModel):
    """Validated snapshot of a chat message."""

    id: int
    body: str = Field(..., min_length=1)
    author_id: str = Field(..., min_length=1)
    author_name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ReportRecord(BaseModel):
    """Validated snapshot of an abuse report."""

    id: int
    message_id: int
    message_content: str
    reported_user_id: str
    reported_user_name: str
    reported_user_email: str | None = None
    reporter_id: str
    reporter_name: str
    reason: str = Field(..., min_length=1)
    status: ReportStatus
    resolved_by: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ChatMessageCreate(BaseModel):
    body: str


class ReportCreate(BaseModel):
    reason: str
