"""In-memory query cache with a fixed time-to-live."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from inkwell.db.time import Clock, system_clock


@dataclass
class _Entry:
    value: Any
    stored_at: float


class QueryCache:
    """Read-through cache keyed by logical query name.

    Expired entries are left in place and simply reported as absent by
    :meth:`get`; they disappear on the next ``set`` or invalidation. There is
    no size bound. One instance is shared by everything in the process.
    """

    def __init__(self, ttl_seconds: float, clock: Clock = system_clock) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _Entry] = {}

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if missing or older than the TTL."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at < self.ttl_seconds:
            return entry.value
        return None

    def peek(self, key: str) -> Any | None:
        """Return the last stored value regardless of age."""
        entry = self._entries.get(key)
        return entry.value if entry is not None else None

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = _Entry(value=value, stored_at=self._clock())

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def invalidate_by_prefix(self, prefix: str) -> int:
        """Drop every key equal to or starting with ``prefix``; return the count."""
        doomed = [key for key in self._entries if key.startswith(prefix)]
        for key in doomed:
            del self._entries[key]
        return len(doomed)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
