"""Writer application schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from inkwell.models.states import ApplicationStatus


class WriterApplicationRecord(BaseModel):
    """Validated snapshot of a writer application."""

    id: int
    applicant_id: str
    applicant_name: str
    applicant_email: str
    motivation: str
    experience: str
    topics: str
    status: ApplicationStatus
    decided_by: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)


class WriterApplicationCreate(BaseModel):
    """Free-text answers submitted by an applicant."""

    motivation: str
    experience: str
    topics: str
