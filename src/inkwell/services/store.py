"""Document store backed by SQLAlchemy.

Every read returns validated record snapshots rather than ORM rows, every
write commits immediately, and collections support live subscriptions that
receive a fresh snapshot after each committed write.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from inkwell.core.errors import StoreError
from inkwell.db.time import utcnow
from inkwell.models import (
    Article,
    ChatMessage,
    Comment,
    Report,
    UserAccount,
    UserProfile,
    WriterApplication,
)
from inkwell.models.states import UserRole, UserStatus
from inkwell.schemas.application import WriterApplicationRecord
from inkwell.schemas.article import ArticleRecord, CommentRecord
from inkwell.schemas.chat import ChatMessageRecord, ReportRecord
from inkwell.schemas.user import AuthUser, UserProfileRecord
from inkwell.services.subscriptions import Subscription

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

ARTICLES = "article"
COMMENTS = "comment"
CHAT = "chat_message"
REPORTS = "report"
APPLICATIONS = "writer_application"
PROFILES = "user_profile"


@dataclass(frozen=True)
class Credentials:
    """Password material the identity provider checks at sign-in."""

    uid: str
    email: str
    password_hash: str


@dataclass
class _Listener:
    query: Callable[[], Any]
    callback: Callable[[Any], None]


def _to_record(record_cls: type[R], row: Any) -> R:
    try:
        return record_cls.model_validate(row)
    except pydantic.ValidationError as err:
        logger.error("Malformed %s row: %s", record_cls.__name__, err)
        raise StoreError() from err


class DocumentStore:
    """Collection-style CRUD over a SQLAlchemy session factory."""

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        now: Callable[[], datetime] = utcnow,
    ) -> None:
        self._session_factory = session_factory
        self._now = now
        self._listeners: dict[str, list[tuple[Subscription, _Listener]]] = defaultdict(list)

    # --- Sessions and subscriptions --------------------------------------------------
    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as err:
            session.rollback()
            logger.error("Document store call failed: %s", err, exc_info=True)
            raise StoreError() from err
        finally:
            session.close()

    @contextmanager
    def _write(self, *collections: str) -> Iterator[Session]:
        with self._session() as session:
            yield session
        for collection in collections:
            self._publish(collection)

    def subscribe(
        self,
        collection: str,
        query: Callable[[], Any],
        callback: Callable[[Any], None],
    ) -> Subscription:
        """Deliver ``query()`` to ``callback`` now and after every write to ``collection``."""
        listener = _Listener(query=query, callback=callback)

        def cancel(sub: Subscription) -> None:
            entries = self._listeners[collection]
            self._listeners[collection] = [entry for entry in entries if entry[0] is not sub]

        subscription = Subscription(cancel)
        self._listeners[collection].append((subscription, listener))
        callback(query())
        return subscription

    def listener_count(self, collection: str) -> int:
        return len(self._listeners[collection])

    def _publish(self, collection: str) -> None:
        for subscription, listener in list(self._listeners[collection]):
            if not subscription.active:
                continue
            try:
                snapshot = listener.query()
                listener.callback(snapshot)
            except Exception:
                # A failing listener does not stop delivery to the others.
                logger.exception("Live listener on %s failed", collection)

    # --- Generic helpers --------------------------------------------------------------
    def _add(self, collection: str, model: type[Any], record_cls: type[R], **fields: Any) -> R:
        fields.setdefault("created_at", self._now())
        with self._write(collection) as session:
            row = model(**fields)
            session.add(row)
            session.flush()
            record = _to_record(record_cls, row)
        return record

    def _get(self, model: type[Any], record_cls: type[R], key: Any) -> R | None:
        with self._session() as session:
            row = session.get(model, key)
            return _to_record(record_cls, row) if row is not None else None

    def _update(
        self,
        collection: str,
        model: type[Any],
        record_cls: type[R],
        key: Any,
        **changes: Any,
    ) -> R | None:
        with self._write(collection) as session:
            row = session.get(model, key)
            if row is None:
                return None
            for name, value in changes.items():
                setattr(row, name, value)
            session.flush()
            record = _to_record(record_cls, row)
        return record

    def _list(self, record_cls: type[R], stmt: Any) -> list[R]:
        with self._session() as session:
            return [_to_record(record_cls, row) for row in session.scalars(stmt)]

    def _count(self, stmt: Any) -> int:
        with self._session() as session:
            return int(session.scalar(stmt) or 0)

    # --- Accounts and profiles ----------------------------------------------------------
    def email_exists(self, email: str) -> bool:
        stmt = select(func.count()).select_from(UserAccount).where(UserAccount.email == email)
        return self._count(stmt) > 0

    def add_account(
        self,
        *,
        uid: str,
        email: str,
        password_hash: str,
        display_name: str,
        role: UserRole,
    ) -> UserProfileRecord:
        """Create credentials and the matching profile in one write."""
        now = self._now()
        with self._write(PROFILES) as session:
            account = UserAccount(
                uid=uid,
                email=email,
                password_hash=password_hash,
                email_verified=False,
                created_at=now,
            )
            account.profile = UserProfile(
                uid=uid,
                email=email,
                display_name=display_name,
                role=role,
                status=UserStatus.ACTIVE,
                created_at=now,
            )
            session.add(account)
            session.flush()
            record = _to_record(UserProfileRecord, account.profile)
        return record

    def get_credentials(self, email: str) -> Credentials | None:
        with self._session() as session:
            account = session.scalars(
                select(UserAccount).where(UserAccount.email == email)
            ).first()
            if account is None:
                return None
            return Credentials(
                uid=account.uid,
                email=account.email,
                password_hash=account.password_hash,
            )

    def get_auth_user(self, uid: str) -> AuthUser | None:
        with self._session() as session:
            account = session.get(UserAccount, uid)
            if account is None or account.profile is None:
                return None
            return AuthUser(
                uid=account.uid,
                email=account.email,
                display_name=account.profile.display_name,
                email_verified=account.email_verified,
            )

    def set_verification_token(self, uid: str, token: str) -> bool:
        with self._session() as session:
            account = session.get(UserAccount, uid)
            if account is None:
                return False
            account.verification_token = token
            return True

    def confirm_verification(self, token: str) -> str | None:
        """Mark the account holding ``token`` verified and return its uid."""
        with self._session() as session:
            account = session.scalars(
                select(UserAccount).where(UserAccount.verification_token == token)
            ).first()
            if account is None:
                return None
            account.email_verified = True
            account.verification_token = None
            return account.uid

    def get_profile(self, uid: str) -> UserProfileRecord | None:
        return self._get(UserProfile, UserProfileRecord, uid)

    def list_profiles(self) -> list[UserProfileRecord]:
        stmt = select(UserProfile).order_by(UserProfile.created_at.desc(), UserProfile.uid)
        return self._list(UserProfileRecord, stmt)

    def update_profile(self, uid: str, **changes: Any) -> UserProfileRecord | None:
        return self._update(PROFILES, UserProfile, UserProfileRecord, uid, **changes)

    def count_profiles(self, status: UserStatus | None = None) -> int:
        stmt = select(func.count()).select_from(UserProfile)
        if status is not None:
            stmt = stmt.where(UserProfile.status == status)
        return self._count(stmt)

    # --- Articles -----------------------------------------------------------------------
    def add_article(self, **fields: Any) -> ArticleRecord:
        return self._add(ARTICLES, Article, ArticleRecord, **fields)

    def get_article(self, article_id: int) -> ArticleRecord | None:
        return self._get(Article, ArticleRecord, article_id)

    def find_article_by_slug(self, slug: str) -> ArticleRecord | None:
        stmt = select(Article).where(Article.slug == slug).limit(1)
        found = self._list(ArticleRecord, stmt)
        return found[0] if found else None

    def slug_exists(self, slug: str) -> bool:
        stmt = select(func.count()).select_from(Article).where(Article.slug == slug)
        return self._count(stmt) > 0

    def list_articles(
        self,
        *,
        status: str | None = None,
        author_id: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[ArticleRecord]:
        """Return articles newest first, optionally filtered."""
        stmt = select(Article)
        if status is not None:
            stmt = stmt.where(Article.status == status)
        if author_id is not None:
            stmt = stmt.where(Article.author_id == author_id)
        stmt = stmt.order_by(Article.created_at.desc(), Article.id.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return self._list(ArticleRecord, stmt)

    def list_unslugged_articles(self) -> list[ArticleRecord]:
        stmt = select(Article).where(Article.slug.is_(None)).order_by(Article.id)
        return self._list(ArticleRecord, stmt)

    def update_article(self, article_id: int, **changes: Any) -> ArticleRecord | None:
        return self._update(ARTICLES, Article, ArticleRecord, article_id, **changes)

    def delete_article(self, article_id: int) -> bool:
        """Delete an article together with its comments."""
        with self._write(ARTICLES, COMMENTS) as session:
            row = session.get(Article, article_id)
            if row is None:
                return False
            session.delete(row)
        return True

    def count_articles(self, status: str | None = None) -> int:
        stmt = select(func.count()).select_from(Article)
        if status is not None:
            stmt = stmt.where(Article.status == status)
        return self._count(stmt)

    # --- Comments -----------------------------------------------------------------------
    def add_comment(self, **fields: Any) -> CommentRecord:
        return self._add(COMMENTS, Comment, CommentRecord, **fields)

    def list_comments(self, article_id: int) -> list[CommentRecord]:
        stmt = (
            select(Comment)
            .where(Comment.article_id == article_id)
            .order_by(Comment.created_at, Comment.id)
        )
        return self._list(CommentRecord, stmt)

    # --- Chat ---------------------------------------------------------------------------
    def add_chat_message(self, **fields: Any) -> ChatMessageRecord:
        return self._add(CHAT, ChatMessage, ChatMessageRecord, **fields)

    def get_chat_message(self, message_id: int) -> ChatMessageRecord | None:
        return self._get(ChatMessage, ChatMessageRecord, message_id)

    def list_chat_messages(self, limit: int) -> list[ChatMessageRecord]:
        """Return the latest ``limit`` messages (newest first)."""
        stmt = (
            select(ChatMessage)
            .order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc())
            .limit(limit)
        )
        return self._list(ChatMessageRecord, stmt)

    def delete_chat_message(self, message_id: int) -> bool:
        with self._write(CHAT) as session:
            row = session.get(ChatMessage, message_id)
            if row is None:
                return False
            session.delete(row)
        return True

    # --- Reports ------------------------------------------------------------------------
    def add_report(self, **fields: Any) -> ReportRecord:
        return self._add(REPORTS, Report, ReportRecord, **fields)

    def get_report(self, report_id: int) -> ReportRecord | None:
        return self._get(Report, ReportRecord, report_id)

    def find_report(self, message_id: int, reporter_id: str) -> ReportRecord | None:
        stmt = select(Report).where(
            Report.message_id == message_id,
            Report.reporter_id == reporter_id,
        )
        found = self._list(ReportRecord, stmt.limit(1))
        return found[0] if found else None

    def list_reports(self, status: str | None = None) -> list[ReportRecord]:
        stmt = select(Report)
        if status is not None:
            stmt = stmt.where(Report.status == status)
        return self._list(ReportRecord, stmt.order_by(Report.created_at.desc(), Report.id.desc()))

    def update_report(self, report_id: int, **changes: Any) -> ReportRecord | None:
        return self._update(REPORTS, Report, ReportRecord, report_id, **changes)

    def count_reports(self, status: str | None = None) -> int:
        stmt = select(func.count()).select_from(Report)
        if status is not None:
            stmt = stmt.where(Report.status == status)
        return self._count(stmt)

    # --- Writer applications ------------------------------------------------------------
    def add_application(self, **fields: Any) -> WriterApplicationRecord:
        return self._add(APPLICATIONS, WriterApplication, WriterApplicationRecord, **fields)

    def get_application(self, application_id: int) -> WriterApplicationRecord | None:
        return self._get(WriterApplication, WriterApplicationRecord, application_id)

    def list_applications(
        self,
        *,
        status: str | None = None,
        applicant_id: str | None = None,
    ) -> list[WriterApplicationRecord]:
        stmt = select(WriterApplication)
        if status is not None:
            stmt = stmt.where(WriterApplication.status == status)
        if applicant_id is not None:
            stmt = stmt.where(WriterApplication.applicant_id == applicant_id)
        stmt = stmt.order_by(WriterApplication.created_at.desc(), WriterApplication.id.desc())
        return self._list(WriterApplicationRecord, stmt)

    def decide_application(
        self,
        application_id: int,
        *,
        status: str,
        decided_by: str,
        promote_to: UserRole | None = None,
    ) -> WriterApplicationRecord | None:
        """Record a decision and, when given, apply the role promotion atomically."""
        with self._write(APPLICATIONS, PROFILES) as session:
            application = session.get(WriterApplication, application_id)
            if application is None:
                return None
            application.status = status
            application.decided_by = decided_by
            if promote_to is not None:
                profile = session.get(UserProfile, application.applicant_id)
                if profile is not None:
                    profile.role = promote_to
            session.flush()
            record = _to_record(WriterApplicationRecord, application)
        return record

    def count_applications(self, status: str | None = None) -> int:
        stmt = select(func.count()).select_from(WriterApplication)
        if status is not None:
            stmt = stmt.where(WriterApplication.status == status)
        return self._count(stmt)


def sort_by_creation(records: Sequence[R]) -> list[R]:
    """Order snapshots by creation time; delivery order is not trusted."""
    return sorted(records, key=lambda record: (record.created_at, record.id))  # type: ignore[attr-defined]
