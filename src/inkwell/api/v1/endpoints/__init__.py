# src/inkwell/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .applications import router as applications_router
from .articles import router as articles_router
from .auth import router as auth_router
from .chat import router as chat_router
from .moderation import router as moderation_router
from .system import router as system_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "articles_router",
    "chat_router",
    "applications_router",
    "moderation_router",
    "system_router",
    "users_router",
]
