# src/inkwell/api/v1/endpoints/applications.py
"""Writer application endpoints for the Inkwell API."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from inkwell.api.v1.dependencies import AccessDep, CurrentUserDep, unwrap
from inkwell.models.states import ApplicationStatus
from inkwell.schemas.application import WriterApplicationCreate, WriterApplicationRecord
from inkwell.schemas.common import DecisionRequest

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("/", response_model=WriterApplicationRecord, status_code=status.HTTP_201_CREATED)
async def submit_application(
    payload: WriterApplicationCreate,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> WriterApplicationRecord:
    """Ask to become a writer. Only one application may be pending at a time."""
    return unwrap(access.submit_writer_application(payload, current_user))


@router.get("/", response_model=list[WriterApplicationRecord])
async def list_applications(
    access: AccessDep,
    current_user: CurrentUserDep,
    status_filter: ApplicationStatus | None = Query(None, alias="status"),
) -> list[WriterApplicationRecord]:
    return unwrap(access.list_writer_applications(current_user, status_filter))


@router.post("/{application_id}/decision", response_model=WriterApplicationRecord)
async def decide_application(
    application_id: int,
    payload: DecisionRequest,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> WriterApplicationRecord:
    """Approve or reject an application; approval makes the applicant a writer."""
    return unwrap(
        access.decide_writer_application(application_id, payload.decision, current_user)
    )
