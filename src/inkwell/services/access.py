"""Access layer: the single entry point presentation code uses for data.

Every operation consults the shared rate limiter and query cache, applies the
moderation rules, and returns an explicit :class:`~inkwell.core.results.Ok`
or :class:`~inkwell.core.results.Failure`. Nothing is retried; a failed
store call fails the user's action.
"""
from __future__ import annotations

import html
import logging
from collections.abc import Callable
from typing import Any

import bleach

from inkwell.core.errors import (
    AlreadyResolvedError,
    AuthError,
    ErrorMessages,
    NotFoundError,
    RateLimitedError,
    ValidationError,
)
from inkwell.core.results import Ok, Result, returns_result
from inkwell.core.settings import Settings
from inkwell.db.time import Clock, system_clock
from inkwell.models.states import (
    ApplicationStatus,
    ArticleStatus,
    ReportStatus,
    UserRole,
    UserStatus,
)
from inkwell.schemas.application import WriterApplicationCreate, WriterApplicationRecord
from inkwell.schemas.article import ArticleCreate, ArticleRecord, ArticleUpdate, CommentRecord
from inkwell.schemas.chat import ChatMessageRecord, ReportRecord
from inkwell.schemas.common import DashboardStats, Decision
from inkwell.schemas.user import AuthUser, UserProfileRecord
from inkwell.services.cache import QueryCache
from inkwell.services.images import looks_like_image_url
from inkwell.services.moderation import (
    APPLICATION_MACHINE,
    ARTICLE_MACHINE,
    REPORT_MACHINE,
    USER_STATUS_MACHINE,
    IllegalTransition,
    RoleChange,
    can_author,
    check_role_change,
    initial_article_status,
    status_action,
)
from inkwell.services.rate_limiter import RateLimiter
from inkwell.services.slugs import assign_slug
from inkwell.services.store import CHAT, COMMENTS, DocumentStore, sort_by_creation
from inkwell.services.subscriptions import Subscription

logger = logging.getLogger(__name__)

HOME_FEED_PREFIX = "home-posts"
EXPLORE_KEY = "explore-posts"


def home_feed_key(page: int) -> str:
    return f"{HOME_FEED_PREFIX}-{page}"


def article_key(slug_or_id: str | int) -> str:
    return f"post-{slug_or_id}"


def comments_key(article_id: int) -> str:
    return f"comments-{article_id}"


def author_key(author_id: str) -> str:
    return f"author-posts-{author_id}"


def sanitize_comment(body: str, max_length: int) -> str:
    """Strip markup and stray angle brackets, trim, then cap the length.

    Text between a bare ``<`` and a later ``>`` is kept; only the bracket
    characters themselves are dropped.
    """
    text = html.unescape(bleach.clean(body, tags=[], strip=True))
    text = text.replace("<", "").replace(">", "")
    return text.strip()[:max_length].strip()


class AccessLayer:
    """Facade over the document store.

    The cache and the limiter are shared by every caller in the process and
    are passed in so tests can give each case its own instances and clock.
    """

    def __init__(
        self,
        store: DocumentStore,
        cache: QueryCache,
        limiter: RateLimiter,
        settings: Settings,
        clock: Clock = system_clock,
        image_probe: Callable[[str], bool] | None = None,
    ) -> None:
        self._store = store
        self._cache = cache
        self._limiter = limiter
        self._settings = settings
        self._clock = clock
        self._image_probe = image_probe

    # --- Shared plumbing ----------------------------------------------------------------
    def _acquire(self) -> None:
        if not self._limiter.try_acquire():
            logger.warning("Rate limit reached; refusing store call")
            raise RateLimitedError()

    def _read_through(self, key: str, loader: Callable[[], Any]) -> Ok[Any]:
        """Serve ``key`` from cache or the store.

        When the limiter refuses the call, a fresh cached value is still served
        as is. Failing that, the last value ever cached under ``key`` is
        returned marked stale, or ``RateLimitedError`` is raised.
        """
        allowed = self._limiter.try_acquire()
        cached = self._cache.get(key)
        if cached is not None:
            return Ok(cached)
        if not allowed:
            fallback = self._cache.peek(key)
            logger.warning("Rate limit reached for %s; stale fallback=%s", key, fallback is not None)
            if fallback is not None:
                return Ok(fallback, stale=True)
            raise RateLimitedError()
        value = loader()
        self._cache.set(key, value)
        return Ok(value)

    def _profile(self, user: AuthUser) -> UserProfileRecord:
        profile = self._store.get_profile(user.uid)
        if profile is None:
            raise AuthError(ErrorMessages.AUTH_REQUIRED)
        return profile

    def _require_poster(self, user: AuthUser, *, verified: bool = True) -> UserProfileRecord:
        """Return the caller's profile if they may write content.

        Standing is checked here rather than through the role, so a banned
        admin is blocked like anyone else.
        """
        if verified and not user.email_verified:
            raise AuthError(ErrorMessages.AUTH_EMAIL_UNVERIFIED)
        profile = self._profile(user)
        if profile.status == UserStatus.BANNED:
            raise AuthError(ErrorMessages.ACCOUNT_BANNED)
        return profile

    def _require_admin(self, user: AuthUser) -> UserProfileRecord:
        profile = self._profile(user)
        if profile.role != UserRole.ADMIN:
            raise AuthError(ErrorMessages.PERMISSION_DENIED)
        return profile

    def _is_admin(self, user: AuthUser | None) -> bool:
        if user is None:
            return False
        profile = self._store.get_profile(user.uid)
        return profile is not None and profile.role == UserRole.ADMIN

    def _can_see(self, article: ArticleRecord, viewer: AuthUser | None) -> bool:
        if article.status == ArticleStatus.APPROVED:
            return True
        if viewer is not None and viewer.uid == article.author_id:
            return True
        return self._is_admin(viewer)

    def _invalidate_article(self, article: ArticleRecord) -> None:
        self._cache.invalidate_by_prefix(HOME_FEED_PREFIX)
        self._cache.invalidate(EXPLORE_KEY)
        self._cache.invalidate(author_key(article.author_id))
        self._cache.invalidate(article_key(article.id))
        if article.slug:
            self._cache.invalidate(article_key(article.slug))

    def _clean_title(self, title: str) -> str:
        title = title.strip()
        if not title:
            raise ValidationError(ErrorMessages.POST_TITLE_REQUIRED)
        limit = self._settings.title_max_length
        if len(title) > limit:
            raise ValidationError(ErrorMessages.too_long("Title", limit))
        return title

    @staticmethod
    def _clean_body(body: str) -> str:
        body = body.strip()
        if not body:
            raise ValidationError(ErrorMessages.POST_CONTENT_REQUIRED)
        return body

    def _clean_excerpt(self, excerpt: str | None) -> str | None:
        excerpt = (excerpt or "").strip()
        if not excerpt:
            return None
        limit = self._settings.excerpt_max_length
        if len(excerpt) > limit:
            raise ValidationError(ErrorMessages.too_long("Excerpt", limit))
        return excerpt

    def _clean_image_url(self, image_url: str | None) -> str | None:
        image_url = (image_url or "").strip()
        if not image_url:
            return None
        if not looks_like_image_url(image_url):
            raise ValidationError(ErrorMessages.IMAGE_INVALID_URL)
        if self._image_probe is not None and not self._image_probe(image_url):
            raise ValidationError(ErrorMessages.IMAGE_LOAD_FAILED)
        return image_url

    def _get_article(self, article_id: int) -> ArticleRecord:
        article = self._store.get_article(article_id)
        if article is None:
            raise NotFoundError(ErrorMessages.POST_NOT_FOUND)
        return article

    # --- Articles -----------------------------------------------------------------------
    @returns_result
    def list_approved_articles(self, page: int = 1) -> Result[list[ArticleRecord]]:
        """Return one page of the public feed, newest first."""
        if page < 1:
            raise ValidationError(ErrorMessages.invalid_format("Page"))
        size = self._settings.feed_page_size

        def load() -> tuple[ArticleRecord, ...]:
            rows = self._store.list_articles(
                status=ArticleStatus.APPROVED,
                limit=size,
                offset=(page - 1) * size,
            )
            return tuple(rows)

        found = self._read_through(home_feed_key(page), load)
        visible = [a for a in found.value if a.status == ArticleStatus.APPROVED]
        return Ok(visible, stale=found.stale)

    @returns_result
    def search_articles(self, term: str = "") -> Result[list[ArticleRecord]]:
        """Filter the latest approved articles by a case-insensitive term."""

        def load() -> tuple[ArticleRecord, ...]:
            rows = self._store.list_articles(
                status=ArticleStatus.APPROVED,
                limit=self._settings.explore_limit,
            )
            return tuple(rows)

        found = self._read_through(EXPLORE_KEY, load)
        needle = term.strip().lower()
        matches = [
            article
            for article in found.value
            if article.status == ArticleStatus.APPROVED
            and (
                not needle
                or needle in article.title.lower()
                or needle in (article.excerpt or "").lower()
                or needle in article.body.lower()
            )
        ]
        return Ok(matches, stale=found.stale)

    @returns_result
    def get_article_by_slug(
        self,
        slug: str,
        viewer: AuthUser | None = None,
    ) -> Result[ArticleRecord]:
        """Look an article up by slug, falling back to its raw identifier.

        Unpublished articles are reported as missing to everyone but their
        author and admins.
        """

        def load() -> ArticleRecord:
            article = self._store.find_article_by_slug(slug)
            if article is None and slug.isdigit():
                # Records created before slugs existed are addressed by id.
                article = self._store.get_article(int(slug))
            if article is None:
                raise NotFoundError(ErrorMessages.POST_NOT_FOUND)
            return article

        found = self._read_through(article_key(slug), load)
        if not self._can_see(found.value, viewer):
            raise NotFoundError(ErrorMessages.POST_NOT_FOUND)
        return found

    @returns_result
    def list_author_articles(
        self,
        author_id: str,
        viewer: AuthUser | None = None,
    ) -> Result[list[ArticleRecord]]:
        """Return an author's articles; only they and admins see unpublished ones."""
        found = self._read_through(
            author_key(author_id),
            lambda: tuple(self._store.list_articles(author_id=author_id)),
        )
        articles = list(found.value)
        owner = viewer is not None and viewer.uid == author_id
        if not owner and not self._is_admin(viewer):
            articles = [a for a in articles if a.status == ArticleStatus.APPROVED]
        return Ok(articles, stale=found.stale)

    @returns_result
    def create_article(self, data: ArticleCreate, author: AuthUser) -> Result[ArticleRecord]:
        """Validate, slug and persist a new article.

        Admin submissions are published immediately; writer submissions wait
        in the moderation queue.
        """
        profile = self._require_poster(author)
        if not can_author(profile.role):
            raise AuthError(ErrorMessages.PERMISSION_DENIED)
        title = self._clean_title(data.title)
        body = self._clean_body(data.body)
        excerpt = self._clean_excerpt(data.excerpt)
        image_url = self._clean_image_url(data.image_url)

        self._acquire()
        slug = assign_slug(title, self._store.slug_exists, self._clock)
        article = self._store.add_article(
            slug=slug,
            title=title,
            body=body,
            excerpt=excerpt,
            image_url=image_url,
            author_id=author.uid,
            author_name=profile.display_name,
            status=initial_article_status(profile.role),
        )
        self._invalidate_article(article)
        logger.info("Article %s (%s) created by %s as %s", article.id, slug, author.uid, article.status)
        return Ok(article)

    @returns_result
    def update_article(
        self,
        article_id: int,
        data: ArticleUpdate,
        actor: AuthUser,
    ) -> Result[ArticleRecord]:
        """Edit an article's text fields. The slug never changes."""
        profile = self._require_poster(actor)
        article = self._get_article(article_id)
        if article.author_id != actor.uid and profile.role != UserRole.ADMIN:
            raise AuthError(ErrorMessages.PERMISSION_DENIED)
        if article.status == ArticleStatus.REJECTED:
            raise ValidationError(ErrorMessages.POST_REJECTED_LOCKED)

        requested = data.model_dump(exclude_unset=True)
        changes: dict[str, Any] = {}
        if requested.get("title") is not None:
            changes["title"] = self._clean_title(requested["title"])
        if requested.get("body") is not None:
            changes["body"] = self._clean_body(requested["body"])
        if "excerpt" in requested:
            changes["excerpt"] = self._clean_excerpt(requested["excerpt"])
        if "image_url" in requested:
            changes["image_url"] = self._clean_image_url(requested["image_url"])
        if not changes:
            return Ok(article)

        self._acquire()
        updated = self._store.update_article(article_id, **changes)
        if updated is None:
            raise NotFoundError(ErrorMessages.POST_NOT_FOUND)
        self._invalidate_article(updated)
        logger.info("Article %s edited by %s", article_id, actor.uid)
        return Ok(updated)

    @returns_result
    def delete_article(self, article_id: int, actor: AuthUser) -> Result[None]:
        article = self._get_article(article_id)
        if article.author_id != actor.uid and not self._is_admin(actor):
            raise AuthError(ErrorMessages.PERMISSION_DENIED)
        self._acquire()
        if not self._store.delete_article(article_id):
            raise NotFoundError(ErrorMessages.POST_NOT_FOUND)
        self._invalidate_article(article)
        self._cache.invalidate(comments_key(article_id))
        logger.info("Article %s deleted by %s", article_id, actor.uid)
        return Ok(None)

    # --- Comments -----------------------------------------------------------------------
    @returns_result
    def list_comments(self, article_id: int) -> Result[list[CommentRecord]]:
        def load() -> tuple[CommentRecord, ...]:
            self._get_article(article_id)
            return tuple(sort_by_creation(self._store.list_comments(article_id)))

        found = self._read_through(comments_key(article_id), load)
        return Ok(list(found.value), stale=found.stale)

    @returns_result
    def post_comment(self, article_id: int, body: str, author: AuthUser) -> Result[CommentRecord]:
        profile = self._require_poster(author)
        text = sanitize_comment(body, self._settings.comment_max_length)
        if not text:
            raise ValidationError(ErrorMessages.COMMENT_EMPTY)
        self._acquire()
        article = self._get_article(article_id)
        comment = self._store.add_comment(
            article_id=article.id,
            body=text,
            author_id=author.uid,
            author_name=profile.display_name,
        )
        self._cache.invalidate(comments_key(article.id))
        self._cache.invalidate(article_key(article.id))
        if article.slug:
            self._cache.invalidate(article_key(article.slug))
        return Ok(comment)

    @returns_result
    def subscribe_comments(
        self,
        article_id: int,
        listener: Callable[[list[CommentRecord]], None],
    ) -> Result[Subscription]:
        """Push the article's comments, oldest first, on every change."""
        self._acquire()
        self._get_article(article_id)
        subscription = self._store.subscribe(
            COMMENTS,
            lambda: sort_by_creation(self._store.list_comments(article_id)),
            listener,
        )
        return Ok(subscription)

    # --- Chat ---------------------------------------------------------------------------
    def _chat_snapshot(self) -> list[ChatMessageRecord]:
        return sort_by_creation(self._store.list_chat_messages(self._settings.chat_history_limit))

    @returns_result
    def list_chat_messages(self) -> Result[list[ChatMessageRecord]]:
        """Return the most recent chat history, oldest first."""
        self._acquire()
        return Ok(self._chat_snapshot())

    @returns_result
    def post_chat_message(self, body: str, author: AuthUser) -> Result[ChatMessageRecord]:
        profile = self._require_poster(author)
        text = body.strip()[: self._settings.chat_message_max_length].strip()
        if not text:
            raise ValidationError(ErrorMessages.MESSAGE_EMPTY)
        self._acquire()
        message = self._store.add_chat_message(
            body=text,
            author_id=author.uid,
            author_name=profile.display_name,
        )
        return Ok(message)

    @returns_result
    def delete_chat_message(self, message_id: int, admin: AuthUser) -> Result[None]:
        self._require_admin(admin)
        self._acquire()
        if not self._store.delete_chat_message(message_id):
            raise NotFoundError(ErrorMessages.MESSAGE_NOT_FOUND)
        logger.info("Chat message %s deleted by %s", message_id, admin.uid)
        return Ok(None)

    @returns_result
    def subscribe_chat(
        self,
        viewer: AuthUser,
        listener: Callable[[list[ChatMessageRecord]], None],
    ) -> Result[Subscription]:
        """Push the chat history to ``listener`` now and after every change.

        The chat room is only open to verified accounts.
        """
        if not viewer.email_verified:
            raise AuthError(ErrorMessages.AUTH_EMAIL_UNVERIFIED)
        self._acquire()
        return Ok(self._store.subscribe(CHAT, self._chat_snapshot, listener))

    # --- Reports ------------------------------------------------------------------------
    @returns_result
    def submit_report(
        self,
        message_id: int,
        reason: str,
        reporter: AuthUser,
    ) -> Result[ReportRecord]:
        """File a report against a chat message, snapshotting its content."""
        profile = self._require_poster(reporter)
        reason = reason.strip()
        if not reason:
            raise ValidationError(ErrorMessages.REPORT_REASON_REQUIRED)
        self._acquire()
        message = self._store.get_chat_message(message_id)
        if message is None:
            raise NotFoundError(ErrorMessages.MESSAGE_NOT_FOUND)
        if self._store.find_report(message_id, reporter.uid) is not None:
            raise ValidationError(ErrorMessages.REPORT_DUPLICATE)
        reported = self._store.get_profile(message.author_id)
        report = self._store.add_report(
            message_id=message.id,
            message_content=message.body,
            reported_user_id=message.author_id,
            reported_user_name=message.author_name,
            reported_user_email=reported.email if reported else None,
            reporter_id=reporter.uid,
            reporter_name=profile.display_name,
            reason=reason,
            status=ReportStatus.PENDING,
        )
        logger.info("Report %s filed against message %s", report.id, message_id)
        return Ok(report)

    @returns_result
    def resolve_report(self, report_id: int, admin: AuthUser) -> Result[ReportRecord]:
        """Close a pending report.

        The reported user is left alone; banning is a separate admin action.
        """
        self._require_admin(admin)
        report = self._store.get_report(report_id)
        if report is None:
            raise NotFoundError(ErrorMessages.REPORT_NOT_FOUND)
        try:
            resolved = REPORT_MACHINE.apply(report.status, "resolve")
        except IllegalTransition as err:
            raise AlreadyResolvedError(ErrorMessages.REPORT_ALREADY_RESOLVED) from err
        self._acquire()
        updated = self._store.update_report(report_id, status=resolved, resolved_by=admin.uid)
        if updated is None:
            raise NotFoundError(ErrorMessages.REPORT_NOT_FOUND)
        logger.info("Report %s resolved by %s", report_id, admin.uid)
        return Ok(updated)

    @returns_result
    def list_reports(
        self,
        admin: AuthUser,
        status: ReportStatus | None = None,
    ) -> Result[list[ReportRecord]]:
        self._require_admin(admin)
        self._acquire()
        return Ok(self._store.list_reports(status))

    # --- Writer applications ------------------------------------------------------------
    @returns_result
    def submit_writer_application(
        self,
        data: WriterApplicationCreate,
        applicant: AuthUser,
    ) -> Result[WriterApplicationRecord]:
        profile = self._require_poster(applicant, verified=False)
        if profile.role != UserRole.USER:
            raise ValidationError(ErrorMessages.APPLICATION_ALREADY_WRITER)
        motivation = data.motivation.strip()
        experience = data.experience.strip()
        topics = data.topics.strip()
        if not (motivation and experience and topics):
            raise ValidationError(ErrorMessages.APPLICATION_FIELDS_REQUIRED)
        self._acquire()
        pending = self._store.list_applications(
            status=ApplicationStatus.PENDING,
            applicant_id=applicant.uid,
        )
        if pending:
            raise ValidationError(ErrorMessages.APPLICATION_PENDING)
        application = self._store.add_application(
            applicant_id=applicant.uid,
            applicant_name=profile.display_name,
            applicant_email=profile.email,
            motivation=motivation,
            experience=experience,
            topics=topics,
            status=ApplicationStatus.PENDING,
        )
        logger.info("Writer application %s submitted by %s", application.id, applicant.uid)
        return Ok(application)

    @returns_result
    def decide_writer_application(
        self,
        application_id: int,
        decision: Decision,
        admin: AuthUser,
    ) -> Result[WriterApplicationRecord]:
        """Approve or reject a pending application.

        Approval promotes the applicant from user to writer in the same write.
        """
        self._require_admin(admin)
        application = self._store.get_application(application_id)
        if application is None:
            raise NotFoundError(ErrorMessages.APPLICATION_NOT_FOUND)
        try:
            new_status = APPLICATION_MACHINE.apply(application.status, decision.value)
        except IllegalTransition as err:
            raise AlreadyResolvedError(ErrorMessages.APPLICATION_ALREADY_DECIDED) from err

        promote_to: UserRole | None = None
        if new_status == ApplicationStatus.APPROVED:
            applicant = self._store.get_profile(application.applicant_id)
            if applicant is not None and applicant.role == UserRole.USER:
                promote_to = check_role_change(applicant.role, UserRole.WRITER, RoleChange.APPLICATION)

        self._acquire()
        updated = self._store.decide_application(
            application_id,
            status=new_status,
            decided_by=admin.uid,
            promote_to=promote_to,
        )
        if updated is None:
            raise NotFoundError(ErrorMessages.APPLICATION_NOT_FOUND)
        logger.info("Writer application %s %s by %s", application_id, new_status, admin.uid)
        return Ok(updated)

    @returns_result
    def list_writer_applications(
        self,
        admin: AuthUser,
        status: ApplicationStatus | None = None,
    ) -> Result[list[WriterApplicationRecord]]:
        self._require_admin(admin)
        self._acquire()
        return Ok(self._store.list_applications(status=status))

    # --- Article moderation -------------------------------------------------------------
    @returns_result
    def moderate_article(
        self,
        article_id: int,
        decision: Decision,
        admin: AuthUser,
    ) -> Result[ArticleRecord]:
        """Approve or reject a pending article.

        Two admins deciding the same article at once are not detected; the
        store keeps whichever write lands last.
        """
        self._require_admin(admin)
        article = self._get_article(article_id)
        try:
            new_status = ARTICLE_MACHINE.apply(article.status, decision.value)
        except IllegalTransition as err:
            raise AlreadyResolvedError(ErrorMessages.ARTICLE_ALREADY_MODERATED) from err
        self._acquire()
        updated = self._store.update_article(article_id, status=new_status)
        if updated is None:
            raise NotFoundError(ErrorMessages.POST_NOT_FOUND)
        self._invalidate_article(updated)
        logger.info("Article %s %s by %s", article_id, new_status, admin.uid)
        return Ok(updated)

    @returns_result
    def list_pending_articles(self, admin: AuthUser) -> Result[list[ArticleRecord]]:
        self._require_admin(admin)
        self._acquire()
        return Ok(self._store.list_articles(status=ArticleStatus.PENDING))

    # --- Users --------------------------------------------------------------------------
    @returns_result
    def get_profile(self, uid: str) -> Result[UserProfileRecord]:
        self._acquire()
        profile = self._store.get_profile(uid)
        if profile is None:
            raise NotFoundError(ErrorMessages.USER_NOT_FOUND)
        return Ok(profile)

    @returns_result
    def list_users(self, admin: AuthUser) -> Result[list[UserProfileRecord]]:
        self._require_admin(admin)
        self._acquire()
        return Ok(self._store.list_profiles())

    @returns_result
    def set_user_status(
        self,
        uid: str,
        status: UserStatus,
        admin: AuthUser,
    ) -> Result[UserProfileRecord]:
        """Ban or unban a user. Setting the current status again is a no-op."""
        self._require_admin(admin)
        target = self._store.get_profile(uid)
        if target is None:
            raise NotFoundError(ErrorMessages.USER_NOT_FOUND)
        if target.status == status:
            return Ok(target)
        new_status = USER_STATUS_MACHINE.apply(target.status, status_action(status))
        self._acquire()
        updated = self._store.update_profile(uid, status=new_status)
        if updated is None:
            raise NotFoundError(ErrorMessages.USER_NOT_FOUND)
        logger.info("User %s set to %s by %s", uid, new_status, admin.uid)
        return Ok(updated)

    @returns_result
    def set_user_role(self, uid: str, role: UserRole, admin: AuthUser) -> Result[UserProfileRecord]:
        self._require_admin(admin)
        target = self._store.get_profile(uid)
        if target is None:
            raise NotFoundError(ErrorMessages.USER_NOT_FOUND)
        new_role = check_role_change(target.role, role, RoleChange.ADMIN_EDIT)
        self._acquire()
        updated = self._store.update_profile(uid, role=new_role)
        if updated is None:
            raise NotFoundError(ErrorMessages.USER_NOT_FOUND)
        logger.info("User %s given role %s by %s", uid, new_role, admin.uid)
        return Ok(updated)

    @returns_result
    def dashboard_stats(self, admin: AuthUser) -> Result[DashboardStats]:
        self._require_admin(admin)
        self._acquire()
        store = self._store
        return Ok(
            DashboardStats(
                users=store.count_profiles(),
                banned_users=store.count_profiles(UserStatus.BANNED),
                articles_pending=store.count_articles(ArticleStatus.PENDING),
                articles_approved=store.count_articles(ArticleStatus.APPROVED),
                articles_rejected=store.count_articles(ArticleStatus.REJECTED),
                reports_pending=store.count_reports(ReportStatus.PENDING),
                applications_pending=store.count_applications(ApplicationStatus.PENDING),
            )
        )
