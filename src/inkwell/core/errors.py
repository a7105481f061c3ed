"""Error taxonomy shared by the access layer, the store and the HTTP surface."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Categories a failed operation is reported under."""

    VALIDATION = "validation"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    STORE = "store"
    ALREADY_RESOLVED = "already_resolved"


class ErrorMessages:
    """Human-readable messages surfaced to users."""

    # Authentication
    AUTH_INVALID_EMAIL = "Please enter a valid email address"
    AUTH_WEAK_PASSWORD = "Password must be at least 8 characters long"
    AUTH_EMAIL_IN_USE = "This email is already in use"
    AUTH_WRONG_PASSWORD = "Incorrect email or password"
    AUTH_SIGNED_OUT = "Your session has ended. Please sign in again"
    AUTH_REQUIRED = "Please sign in to continue"
    AUTH_EMAIL_UNVERIFIED = "Please verify your email address first"
    AUTH_INVALID_VERIFICATION = "This verification link is invalid"
    ACCOUNT_BANNED = "Your account has been restricted"

    # Articles
    POST_NOT_FOUND = "The requested post could not be found"
    POST_TITLE_REQUIRED = "Post title is required"
    POST_CONTENT_REQUIRED = "Post content is required"
    POST_REJECTED_LOCKED = "Rejected posts can no longer be edited"

    # Comments
    COMMENT_EMPTY = "Comment cannot be empty"

    # Chat
    MESSAGE_EMPTY = "Message cannot be empty"
    MESSAGE_NOT_FOUND = "The requested message could not be found"

    # Reports
    REPORT_REASON_REQUIRED = "Please explain why you're reporting this message"
    REPORT_DUPLICATE = "You have already reported this message"
    REPORT_NOT_FOUND = "The requested report could not be found"
    REPORT_ALREADY_RESOLVED = "This report has already been resolved"

    # Writer applications
    APPLICATION_FIELDS_REQUIRED = "Please fill in all fields"
    APPLICATION_ALREADY_WRITER = "You already have writing privileges"
    APPLICATION_PENDING = "You already have a pending application"
    APPLICATION_NOT_FOUND = "The requested application could not be found"
    APPLICATION_ALREADY_DECIDED = "This application has already been reviewed"

    # Moderation
    ARTICLE_ALREADY_MODERATED = "This post has already been reviewed"
    USER_NOT_FOUND = "The requested user could not be found"

    # Images
    IMAGE_INVALID_URL = "Please enter a valid image URL"
    IMAGE_LOAD_FAILED = "Failed to load image. Please check the URL"

    # Permissions
    PERMISSION_DENIED = "You do not have permission to perform this action"

    # Generic
    SERVER_ERROR = "Server error. Please try again later"
    VALIDATION_ERROR = "Please check your input and try again"
    RATE_LIMIT_EXCEEDED = "Too many requests. Please wait a moment"

    @staticmethod
    def required_field(field: str) -> str:
        return f"{field} is required"

    @staticmethod
    def invalid_format(field: str) -> str:
        return f"Invalid {field.lower()} format"

    @staticmethod
    def too_long(field: str, limit: int) -> str:
        return f"{field} must be less than {limit} characters"


class AccessError(Exception):
    """Base class for failures reported by the access layer."""

    kind: ErrorKind = ErrorKind.STORE
    default_message: str = ErrorMessages.SERVER_ERROR

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AccessError):
    """Caller input failed a local constraint; nothing reached the store."""

    kind = ErrorKind.VALIDATION
    default_message = ErrorMessages.VALIDATION_ERROR


class AuthError(AccessError):
    """Credentials rejected, email unverified, account banned or role too low."""

    kind = ErrorKind.AUTH
    default_message = ErrorMessages.PERMISSION_DENIED


class NotFoundError(AccessError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


class RateLimitedError(AccessError):
    kind = ErrorKind.RATE_LIMITED
    default_message = ErrorMessages.RATE_LIMIT_EXCEEDED


class StoreError(AccessError):
    """The document store failed (connection, constraint, malformed row)."""

    kind = ErrorKind.STORE
    default_message = ErrorMessages.SERVER_ERROR


class AlreadyResolvedError(AccessError):
    """The record is already in a terminal moderation state."""

    kind = ErrorKind.ALREADY_RESOLVED
    default_message = ErrorMessages.REPORT_ALREADY_RESOLVED
