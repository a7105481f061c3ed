# src/inkwell/services/__init__.py
"""Business logic services for the Inkwell application."""

from .access import AccessLayer
from .cache import QueryCache
from .identity import IdentityProvider
from .rate_limiter import RateLimiter
from .store import DocumentStore
from .subscriptions import Subscription

__all__ = [
    "AccessLayer",
    "DocumentStore",
    "IdentityProvider",
    "QueryCache",
    "RateLimiter",
    "Subscription",
]
