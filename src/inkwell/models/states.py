"""Status and role values persisted on records."""

from enum import StrEnum


class ArticleStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class UserRole(StrEnum):
    USER = "user"
    WRITER = "writer"
    ADMIN = "admin"


class UserStatus(StrEnum):
    ACTIVE = "active"
    BANNED = "banned"


class ReportStatus(StrEnum):
    PENDING = "pending"
    RESOLVED = "resolved"


class ApplicationStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
