"""Process-wide wiring of the store, cache, limiter and services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from functools import lru_cache

from sqlalchemy.orm import Session, sessionmaker

from inkwell.core.settings import Settings, settings
from inkwell.db.time import Clock, system_clock
from inkwell.services.access import AccessLayer
from inkwell.services.cache import QueryCache
from inkwell.services.identity import IdentityProvider
from inkwell.services.images import ImageProbe
from inkwell.services.rate_limiter import RateLimiter
from inkwell.services.store import DocumentStore


@dataclass
class Services:
    """Everything a request handler needs, built once per process."""

    store: DocumentStore
    cache: QueryCache
    limiter: RateLimiter
    access: AccessLayer
    identity: IdentityProvider
    image_probe: ImageProbe | None = None

    def close(self) -> None:
        if self.image_probe is not None:
            self.image_probe.close()


def build_services(
    session_factory: sessionmaker[Session],
    config: Settings,
    clock: Clock = system_clock,
) -> Services:
    """Construct the shared cache and limiter and hand them to the access layer."""
    store = DocumentStore(session_factory, now=lambda: datetime.fromtimestamp(clock(), UTC))
    cache = QueryCache(config.cache_ttl_seconds, clock)
    limiter = RateLimiter(config.rate_limit_requests, config.rate_limit_window_seconds, clock)
    probe = (
        ImageProbe(timeout=config.image_url_probe_timeout_seconds)
        if config.image_url_probe_enabled
        else None
    )
    access = AccessLayer(store, cache, limiter, config, clock=clock, image_probe=probe)
    identity = IdentityProvider(store, config)
    return Services(
        store=store,
        cache=cache,
        limiter=limiter,
        access=access,
        identity=identity,
        image_probe=probe,
    )


@lru_cache(maxsize=1)
def get_services() -> Services:
    """Return the services shared by every request in this process."""
    from inkwell.db.session import SessionLocal

    return build_services(SessionLocal, settings)
