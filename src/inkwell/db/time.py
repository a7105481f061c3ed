# src/inkwell/db/time.py
"""Time utilities for database models and clock injection."""

import time
from collections.abc import Callable
from datetime import UTC, datetime

# Seconds since the epoch; swapped for a fake in tests.
Clock = Callable[[], float]


def system_clock() -> float:
    """Return the current wall-clock time in seconds."""
    return time.time()


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)
