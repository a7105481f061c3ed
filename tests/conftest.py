# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from dataclasses import dataclass
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("PYTEST_RUNNING", "true")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from inkwell.core.settings import Settings
from inkwell.db.session import Base
from inkwell.main import app as fastapi_app
from inkwell.models.states import UserRole, UserStatus
from inkwell.schemas.user import AuthUser
from inkwell.services.access import AccessLayer
from inkwell.services.container import Services, build_services, get_services
from inkwell.services.identity import IdentityProvider
from inkwell.services.store import DocumentStore

TEST_DB_URL = "sqlite://"
ADMIN_EMAIL = "admin@example.com"
PASSWORD = "correct-horse-battery"

_USER_COUNTER = count(1)


class FakeClock:
    """Controllable clock returning epoch seconds."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class Account:
    """A signed-up test user with a live bearer token."""

    user: AuthUser
    token: str

    @property
    def uid(self) -> str:
        return self.user.uid

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> Iterator[sessionmaker[Session]]:
    factory = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    try:
        yield factory
    finally:
        # Ensure each test sees a clean database even though the store commits.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def test_settings() -> Settings:
    """Settings with the production defaults and a fixed admin email."""
    return Settings(
        secret_key="test-secret-key-not-for-production",
        admin_email=ADMIN_EMAIL,
    )


@pytest.fixture()
def services(
    session_factory: sessionmaker[Session],
    test_settings: Settings,
    clock: FakeClock,
) -> Iterator[Services]:
    built = build_services(session_factory, test_settings, clock)
    try:
        yield built
    finally:
        built.close()


@pytest.fixture()
def store(services: Services) -> DocumentStore:
    return services.store


@pytest.fixture()
def access(services: Services) -> AccessLayer:
    return services.access


@pytest.fixture()
def identity(services: Services) -> IdentityProvider:
    return services.identity


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_services_dependency(app: FastAPI, services: Services) -> Iterator[None]:
    app.dependency_overrides[get_services] = lambda: services
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_services, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_account(
    identity: IdentityProvider,
    store: DocumentStore,
    clock: FakeClock,
) -> Callable[..., Account]:
    """Return a factory that signs up a user with the given role and standing."""

    def _make(
        role: UserRole = UserRole.USER,
        *,
        verified: bool = True,
        status: UserStatus = UserStatus.ACTIVE,
        display_name: str | None = None,
        email: str | None = None,
    ) -> Account:
        n = next(_USER_COUNTER)
        email = email or f"user{n}@example.com"
        token, user = identity.sign_up(email, PASSWORD, display_name or f"User {n}")
        if verified:
            user = identity.confirm_email(identity.send_verification_email(user.uid))
        if role != UserRole.USER or status != UserStatus.ACTIVE:
            store.update_profile(user.uid, role=role, status=status)
        clock.advance(1)
        return Account(user=user, token=token)

    return _make


@pytest.fixture()
def admin(make_account: Callable[..., Account]) -> Account:
    return make_account(UserRole.ADMIN, display_name="Admin")


@pytest.fixture()
def writer(make_account: Callable[..., Account]) -> Account:
    return make_account(UserRole.WRITER, display_name="Writer")


@pytest.fixture()
def reader(make_account: Callable[..., Account]) -> Account:
    return make_account(display_name="Reader")
