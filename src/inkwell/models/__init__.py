# src/inkwell/models/__init__.py
"""SQLAlchemy models for the Inkwell application."""

from .application import WriterApplication
from .article import Article, Comment
from .chat import ChatMessage, Report
from .states import ApplicationStatus, ArticleStatus, ReportStatus, UserRole, UserStatus
from .user import UserAccount, UserProfile

__all__ = [
    "Article", "Comment",
    "ChatMessage", "Report",
    "WriterApplication",
    "UserAccount", "UserProfile",
    "ApplicationStatus", "ArticleStatus", "ReportStatus", "UserRole", "UserStatus",
]
