# src/inkwell/api/v1/endpoints/users.py
"""User profile and administration endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from inkwell.api.v1.dependencies import AccessDep, CurrentUserDep, unwrap
from inkwell.schemas.user import RoleUpdate, StatusUpdate, UserProfileRecord

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=list[UserProfileRecord])
async def list_users(access: AccessDep, current_user: CurrentUserDep) -> list[UserProfileRecord]:
    return unwrap(access.list_users(current_user))


@router.get("/{uid}", response_model=UserProfileRecord)
async def get_user(uid: str, access: AccessDep) -> UserProfileRecord:
    return unwrap(access.get_profile(uid))


@router.patch("/{uid}/status", response_model=UserProfileRecord)
async def update_user_status(
    uid: str,
    payload: StatusUpdate,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> UserProfileRecord:
    """Ban or unban a user. Banned users keep reading but cannot post."""
    return unwrap(access.set_user_status(uid, payload.status, current_user))


@router.patch("/{uid}/role", response_model=UserProfileRecord)
async def update_user_role(
    uid: str,
    payload: RoleUpdate,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> UserProfileRecord:
    return unwrap(access.set_user_role(uid, payload.role, current_user))
