# src/inkwell/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    applications_router,
    articles_router,
    auth_router,
    chat_router,
    moderation_router,
    system_router,
    users_router,
)

__all__ = [
    "auth_router",
    "articles_router",
    "chat_router",
    "applications_router",
    "moderation_router",
    "system_router",
    "users_router",
]
