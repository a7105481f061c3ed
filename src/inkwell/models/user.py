# src/inkwell/models/user.py
"""SQLAlchemy models for accounts and public user profiles."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkwell.db.session import Base
from inkwell.db.time import utcnow
from inkwell.models.states import UserRole, UserStatus


class UserAccount(Base):
    """Credentials and verification state owned by the identity provider."""

    __tablename__ = "user_account"

    uid: Mapped[str] = mapped_column(String(32), primary_key=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    email_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    # Outstanding verification link token; cleared once used.
    verification_token: Mapped[str | None] = mapped_column(String(64), nullable=True, unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    profile: Mapped[UserProfile] = relationship(
        "UserProfile",
        back_populates="account",
        cascade="all, delete-orphan",
        uselist=False,
    )


class UserProfile(Base):
    """Public profile with the role and standing used for authorization.

    Role and status are independent: a banned admin keeps the admin role.
    """

    __tablename__ = "user_profile"

    uid: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("user_account.uid", ondelete="CASCADE"),
        primary_key=True,
    )
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    display_name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default=UserRole.USER)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default=UserStatus.ACTIVE)
    photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    account: Mapped[UserAccount] = relationship("UserAccount", back_populates="profile")
