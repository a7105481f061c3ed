"""User, profile and authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from inkwell.models.states import UserRole, UserStatus


class UserProfileRecord(BaseModel):
    """Validated snapshot of a user profile."""

    uid: str = Field(..., min_length=1)
    email: str
    display_name: str
    role: UserRole
    status: UserStatus
    photo_url: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_banned(self) -> bool:
        return self.status == UserStatus.BANNED


class AuthUser(BaseModel):
    """The identity provider's view of a signed-in user."""

    uid: str
    email: str
    display_name: str
    email_verified: bool

    model_config = ConfigDict(frozen=True)


class SignUpRequest(BaseModel):
    email: EmailStr
    password: str
    display_name: str = Field(..., min_length=1, max_length=100)


class SignInRequest(BaseModel):
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    """Bearer token plus the user it was issued for."""

    access_token: str
    token_type: str = "bearer"
    user: AuthUser


class VerificationConfirm(BaseModel):
    token: str = Field(..., min_length=1)


class StatusUpdate(BaseModel):
    status: UserStatus


class RoleUpdate(BaseModel):
    role: UserRole
