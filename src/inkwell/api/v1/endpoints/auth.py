# src/inkwell/api/v1/endpoints/auth.py
"""Authentication endpoints for the Inkwell API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from inkwell.api.v1.dependencies import (
    CurrentUserDep,
    IdentityDep,
    TokenDep,
    http_error,
)
from inkwell.core.errors import AccessError
from inkwell.schemas.user import (
    AuthResponse,
    AuthUser,
    SignInRequest,
    SignUpRequest,
    VerificationConfirm,
)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/sign-up",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def sign_up(payload: SignUpRequest, identity: IdentityDep) -> AuthResponse:
    """Create an account and start a session.

    A verification link is issued straight away; until it is confirmed the
    account can read but not post.
    """
    try:
        token, user = identity.sign_up(payload.email, payload.password, payload.display_name)
    except AccessError as err:
        raise http_error(err) from err
    return AuthResponse(access_token=token, user=user)


@router.post("/sign-in", response_model=AuthResponse)
async def sign_in(payload: SignInRequest, identity: IdentityDep) -> AuthResponse:
    try:
        token, user = identity.sign_in(payload.email, payload.password)
    except AccessError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=err.message,
        ) from err
    return AuthResponse(access_token=token, user=user)


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(token: TokenDep, identity: IdentityDep) -> None:
    """Revoke the bearer token used for this request."""
    try:
        identity.sign_out(token)
    except AccessError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err


@router.get("/me", response_model=AuthUser)
async def read_current_user(current_user: CurrentUserDep) -> AuthUser:
    return current_user


@router.post("/verification", status_code=status.HTTP_202_ACCEPTED)
async def resend_verification(
    current_user: CurrentUserDep,
    identity: IdentityDep,
) -> dict[str, str]:
    """Issue a new verification link for the signed-in account."""
    if current_user.email_verified:
        return {"status": "already_verified"}
    try:
        identity.send_verification_email(current_user.uid)
    except AccessError as err:
        raise http_error(err) from err
    return {"status": "sent"}


@router.post("/verification/confirm", response_model=AuthUser)
async def confirm_verification(payload: VerificationConfirm, identity: IdentityDep) -> AuthUser:
    try:
        return identity.confirm_email(payload.token)
    except AccessError as err:
        raise http_error(err) from err
