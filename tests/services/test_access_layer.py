# tests/services/test_access_layer.py
"""Behavioural tests for the access layer facade."""

from __future__ import annotations

from typing import Any

import pytest

from inkwell.core.errors import ErrorKind, ErrorMessages, StoreError
from inkwell.core.results import Failure, Ok
from inkwell.models.states import (
    ApplicationStatus,
    ArticleStatus,
    ReportStatus,
    UserRole,
    UserStatus,
)
from inkwell.schemas.application import WriterApplicationCreate
from inkwell.schemas.article import ArticleCreate, ArticleUpdate
from inkwell.schemas.common import Decision
from inkwell.services.access import AccessLayer, article_key, comments_key, home_feed_key
from inkwell.services.cache import QueryCache
from inkwell.services.rate_limiter import RateLimiter
from inkwell.services.store import CHAT, COMMENTS


def ok(result: Any) -> Any:
    assert isinstance(result, Ok), result
    return result.value


def failed(result: Any, kind: ErrorKind) -> Failure:
    assert isinstance(result, Failure), result
    assert result.kind == kind, result
    return result


def new_article(title: str = "Hello World", **overrides: Any) -> ArticleCreate:
    fields = {"title": title, "body": "Some *markdown* body.", "excerpt": "A short teaser"}
    fields.update(overrides)
    return ArticleCreate(**fields)


APPLICATION = WriterApplicationCreate(
    motivation="I love writing",
    experience="Five years of blogging",
    topics="Python, gardening",
)


# --- End-to-end scenarios -------------------------------------------------------------


def test_article_lifecycle_from_submission_to_feed(access: AccessLayer, writer, admin) -> None:
    article = ok(access.create_article(new_article("Hello World"), writer.user))
    assert article.status == ArticleStatus.PENDING
    assert article.slug == "hello-world"
    assert ok(access.list_approved_articles()) == []

    ok(access.moderate_article(article.id, Decision.APPROVE, admin.user))

    feed = ok(access.list_approved_articles())
    assert [(a.slug, a.status) for a in feed] == [("hello-world", ArticleStatus.APPROVED)]


def test_banned_user_cannot_chat(access: AccessLayer, store, make_account) -> None:
    banned = make_account(UserRole.WRITER, status=UserStatus.BANNED)

    result = access.post_chat_message("hello?", banned.user)

    assert failed(result, ErrorKind.AUTH).message == ErrorMessages.ACCOUNT_BANNED
    assert store.list_chat_messages(50) == []


def test_approved_application_promotes_applicant(access: AccessLayer, store, reader, admin) -> None:
    application = ok(access.submit_writer_application(APPLICATION, reader.user))
    assert application.status == ApplicationStatus.PENDING

    decided = ok(access.decide_writer_application(application.id, Decision.APPROVE, admin.user))

    assert decided.status == ApplicationStatus.APPROVED
    assert decided.decided_by == admin.uid
    assert store.get_profile(reader.uid).role == UserRole.WRITER
    assert store.get_application(application.id).status == ApplicationStatus.APPROVED


def test_rejected_application_keeps_role(access: AccessLayer, store, reader, admin) -> None:
    application = ok(access.submit_writer_application(APPLICATION, reader.user))
    ok(access.decide_writer_application(application.id, Decision.REJECT, admin.user))

    assert store.get_profile(reader.uid).role == UserRole.USER
    again = access.decide_writer_application(application.id, Decision.APPROVE, admin.user)
    failed(again, ErrorKind.ALREADY_RESOLVED)
    assert store.get_profile(reader.uid).role == UserRole.USER


# --- Visibility --------------------------------------------------------------------------


def test_feed_only_contains_approved_articles(access: AccessLayer, make_account, admin, clock) -> None:
    writers = [make_account(UserRole.WRITER) for _ in range(3)]
    expected = set()
    for index in range(9):
        author = writers[index % 3]
        article = ok(access.create_article(new_article(f"Article {index}"), author.user))
        clock.advance(1)
        if index % 3 == 0:
            ok(access.moderate_article(article.id, Decision.APPROVE, admin.user))
            expected.add(article.id)
        elif index % 3 == 1:
            ok(access.moderate_article(article.id, Decision.REJECT, admin.user))
    published = ok(access.create_article(new_article("By the admin"), admin.user))
    expected.add(published.id)

    feed = ok(access.list_approved_articles())

    assert {a.id for a in feed} == expected
    assert all(a.status == ArticleStatus.APPROVED for a in feed)
    assert feed[0].id == published.id


def test_feed_is_paged_newest_first(access: AccessLayer, admin, clock, test_settings) -> None:
    test_settings.feed_page_size = 2
    ids = []
    for index in range(5):
        ids.append(ok(access.create_article(new_article(f"Post {index}"), admin.user)).id)
        clock.advance(1)

    pages = [[a.id for a in ok(access.list_approved_articles(page))] for page in (1, 2, 3)]

    assert pages == [ids[4:2:-1], ids[2:0:-1], ids[:1]]
    failed(access.list_approved_articles(0), ErrorKind.VALIDATION)


def test_unpublished_article_is_hidden_from_strangers(access: AccessLayer, writer, reader, admin) -> None:
    article = ok(access.create_article(new_article("Draft"), writer.user))

    failed(access.get_article_by_slug("draft"), ErrorKind.NOT_FOUND)
    failed(access.get_article_by_slug("draft", reader.user), ErrorKind.NOT_FOUND)
    assert ok(access.get_article_by_slug("draft", writer.user)).id == article.id
    assert ok(access.get_article_by_slug("draft", admin.user)).id == article.id


def test_author_listing_hides_unpublished_from_others(access: AccessLayer, writer, reader, admin) -> None:
    pending = ok(access.create_article(new_article("Pending one"), writer.user))
    approved = ok(access.create_article(new_article("Approved one"), writer.user))
    ok(access.moderate_article(approved.id, Decision.APPROVE, admin.user))

    own = {a.id for a in ok(access.list_author_articles(writer.uid, writer.user))}
    public = {a.id for a in ok(access.list_author_articles(writer.uid, reader.user))}

    assert own == {pending.id, approved.id}
    assert public == {approved.id}


def test_legacy_article_is_found_by_raw_identifier(access: AccessLayer, store, writer) -> None:
    legacy = store.add_article(
        slug=None,
        title="Before slugs",
        body="Old content",
        author_id=writer.uid,
        author_name="Writer",
        status=ArticleStatus.APPROVED,
    )

    assert ok(access.get_article_by_slug(str(legacy.id))).title == "Before slugs"
    failed(access.get_article_by_slug("no-such-slug"), ErrorKind.NOT_FOUND)


def test_search_matches_title_excerpt_and_body(access: AccessLayer, admin) -> None:
    ok(access.create_article(new_article("Growing Tomatoes", excerpt="Garden tips"), admin.user))
    ok(access.create_article(new_article("Python tricks", body="Use GARDEN variables"), admin.user))
    ok(access.create_article(new_article("Unrelated"), admin.user))

    assert {a.title for a in ok(access.search_articles("garden"))} == {
        "Growing Tomatoes",
        "Python tricks",
    }
    assert len(ok(access.search_articles(""))) == 3


# --- Writing articles ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"title": "   "}, ErrorMessages.POST_TITLE_REQUIRED),
        ({"title": "x" * 101}, ErrorMessages.too_long("Title", 100)),
        ({"body": ""}, ErrorMessages.POST_CONTENT_REQUIRED),
        ({"excerpt": "e" * 161}, ErrorMessages.too_long("Excerpt", 160)),
        ({"image_url": "ftp://example.com/cat.png"}, ErrorMessages.IMAGE_INVALID_URL),
        ({"image_url": "https://example.com/cat.txt"}, ErrorMessages.IMAGE_INVALID_URL),
    ],
)
def test_create_article_validation(access: AccessLayer, store, writer, overrides, message) -> None:
    result = access.create_article(new_article(**overrides), writer.user)

    assert failed(result, ErrorKind.VALIDATION).message == message
    assert store.count_articles() == 0


def test_title_at_limit_and_image_url_are_accepted(access: AccessLayer, writer) -> None:
    article = ok(
        access.create_article(
            new_article("t" * 100, image_url="https://cdn.example.com/cover.JPG?w=800"),
            writer.user,
        )
    )
    assert article.image_url == "https://cdn.example.com/cover.JPG?w=800"


def test_readers_and_unverified_writers_cannot_publish(access: AccessLayer, reader, make_account) -> None:
    failed(access.create_article(new_article(), reader.user), ErrorKind.AUTH)
    unverified = make_account(UserRole.WRITER, verified=False)
    result = access.create_article(new_article(), unverified.user)
    assert failed(result, ErrorKind.AUTH).message == ErrorMessages.AUTH_EMAIL_UNVERIFIED


def test_same_title_twice_gets_distinct_slugs(access: AccessLayer, admin, clock) -> None:
    first = ok(access.create_article(new_article("Same Title"), admin.user))
    second = ok(access.create_article(new_article("same title!"), admin.user))

    assert first.slug == "same-title"
    assert second.slug == f"same-title-{int(clock() * 1000)}"


def test_image_probe_failure_rejects_article(
    services, test_settings, clock, writer
) -> None:
    layer = AccessLayer(
        services.store,
        QueryCache(60, clock),
        RateLimiter(100, 300, clock),
        test_settings,
        clock=clock,
        image_probe=lambda url: False,
    )
    result = layer.create_article(new_article(image_url="https://example.com/a.png"), writer.user)
    assert failed(result, ErrorKind.VALIDATION).message == ErrorMessages.IMAGE_LOAD_FAILED


def test_edit_keeps_slug_and_refreshes_cached_detail(access: AccessLayer, writer, admin) -> None:
    article = ok(access.create_article(new_article("Original"), writer.user))
    ok(access.moderate_article(article.id, Decision.APPROVE, admin.user))
    assert ok(access.get_article_by_slug("original")).title == "Original"

    updated = ok(access.update_article(article.id, ArticleUpdate(title="Renamed"), writer.user))

    assert updated.slug == "original"
    assert ok(access.get_article_by_slug("original")).title == "Renamed"
    assert ok(access.list_approved_articles())[0].title == "Renamed"


def test_rejected_article_cannot_be_edited(access: AccessLayer, writer, admin) -> None:
    article = ok(access.create_article(new_article(), writer.user))
    ok(access.moderate_article(article.id, Decision.REJECT, admin.user))

    result = access.update_article(article.id, ArticleUpdate(body="Second try"), writer.user)

    assert failed(result, ErrorKind.VALIDATION).message == ErrorMessages.POST_REJECTED_LOCKED


def test_only_author_or_admin_may_edit_or_delete(access: AccessLayer, writer, make_account, admin) -> None:
    other = make_account(UserRole.WRITER)
    article = ok(access.create_article(new_article(), writer.user))

    failed(access.update_article(article.id, ArticleUpdate(title="Mine now"), other.user), ErrorKind.AUTH)
    failed(access.delete_article(article.id, other.user), ErrorKind.AUTH)
    ok(access.update_article(article.id, ArticleUpdate(excerpt=None), admin.user))
    ok(access.delete_article(article.id, admin.user))
    failed(access.delete_article(article.id, admin.user), ErrorKind.NOT_FOUND)


def test_deleting_article_removes_its_comments(access: AccessLayer, store, admin, reader) -> None:
    article = ok(access.create_article(new_article(), admin.user))
    ok(access.post_comment(article.id, "First!", reader.user))

    ok(access.delete_article(article.id, admin.user))

    assert store.list_comments(article.id) == []
    failed(access.list_comments(article.id), ErrorKind.NOT_FOUND)


# --- Comments ---------------------------------------------------------------------------


def test_comment_is_sanitized_and_capped(access: AccessLayer, admin, reader) -> None:
    article = ok(access.create_article(new_article(), admin.user))

    tagged = ok(access.post_comment(article.id, "  <b>Nice</b> post >_< ", reader.user))
    long = ok(access.post_comment(article.id, "a" * 1500, reader.user))

    assert tagged.body == "Nice post _"
    assert len(long.body) == 1000
    failed(access.post_comment(article.id, "<p></p>  ", reader.user), ErrorKind.VALIDATION)


def test_comment_keeps_text_between_bare_brackets(access: AccessLayer, admin, reader) -> None:
    article = ok(access.create_article(new_article(), admin.user))

    comment = ok(access.post_comment(article.id, "1 < 2 and 3 > 2 is true & fun", reader.user))

    assert "2 and 3" in comment.body
    assert "<" not in comment.body and ">" not in comment.body
    assert comment.body.endswith("is true & fun")


def test_article_detail_and_comment_list_do_not_share_cache_entries(
    access: AccessLayer, admin, reader
) -> None:
    first = ok(access.create_article(new_article(), admin.user))
    clash = ok(access.create_article(new_article(f"{first.id} comments"), admin.user))
    assert clash.slug == f"{first.id}-comments"
    ok(access.post_comment(first.id, "Hello", reader.user))

    assert [c.body for c in ok(access.list_comments(first.id))] == ["Hello"]
    detail = ok(access.get_article_by_slug(clash.slug))

    assert detail.id == clash.id
    assert detail.title == f"{first.id} comments"
    assert comments_key(first.id) != article_key(clash.slug)


def test_new_comment_invalidates_cached_list(access: AccessLayer, cache_of, admin, reader) -> None:
    article = ok(access.create_article(new_article(), admin.user))
    assert ok(access.list_comments(article.id)) == []
    assert comments_key(article.id) in cache_of(access)

    ok(access.post_comment(article.id, "Hello", reader.user))

    assert [c.body for c in ok(access.list_comments(article.id))] == ["Hello"]


def test_comment_requires_verified_active_author(access: AccessLayer, admin, make_account) -> None:
    article = ok(access.create_article(new_article(), admin.user))
    unverified = make_account(verified=False)
    banned = make_account(status=UserStatus.BANNED)

    failed(access.post_comment(article.id, "hi", unverified.user), ErrorKind.AUTH)
    failed(access.post_comment(article.id, "hi", banned.user), ErrorKind.AUTH)
    failed(access.post_comment(9999, "hi", admin.user), ErrorKind.NOT_FOUND)


# --- Caching and rate limiting ---------------------------------------------------------


@pytest.fixture()
def cache_of():
    return lambda layer: layer._cache


@pytest.fixture()
def tight_layer(services, test_settings, clock) -> AccessLayer:
    """Access layer sharing the store but with a one-call budget."""
    return AccessLayer(
        services.store,
        QueryCache(ttl_seconds=10, clock=clock),
        RateLimiter(limit=1, window_seconds=300, clock=clock),
        test_settings,
        clock=clock,
    )


def test_rate_limited_read_falls_back_to_stale_cache(tight_layer: AccessLayer, access, admin, clock) -> None:
    ok(access.create_article(new_article("Cached"), admin.user))
    fresh = tight_layer.list_approved_articles()
    assert isinstance(fresh, Ok) and not fresh.stale

    clock.advance(60)
    stale = tight_layer.list_approved_articles()

    assert isinstance(stale, Ok)
    assert stale.stale is True
    assert [a.title for a in stale.value] == ["Cached"]


def test_rate_limited_read_without_cache_fails(tight_layer: AccessLayer) -> None:
    ok(tight_layer.list_approved_articles(1))
    result = tight_layer.list_approved_articles(2)
    assert failed(result, ErrorKind.RATE_LIMITED).message == ErrorMessages.RATE_LIMIT_EXCEEDED


def test_rate_limited_read_of_fresh_entry_is_not_stale(tight_layer: AccessLayer, access, admin, clock) -> None:
    ok(access.create_article(new_article("Fresh"), admin.user))
    ok(tight_layer.list_approved_articles())

    clock.advance(5)
    again = tight_layer.list_approved_articles()

    assert isinstance(again, Ok)
    assert again.stale is False
    assert [a.title for a in again.value] == ["Fresh"]


def test_rate_limited_write_is_not_attempted(tight_layer: AccessLayer, store, admin) -> None:
    ok(tight_layer.list_chat_messages())
    failed(tight_layer.create_article(new_article(), admin.user), ErrorKind.RATE_LIMITED)
    assert store.count_articles() == 0


def test_cached_feed_is_served_until_invalidated(access: AccessLayer, store, admin) -> None:
    ok(access.list_approved_articles())
    store.add_article(
        slug="sneaky",
        title="Written behind the cache",
        body="b",
        author_id=admin.uid,
        author_name="Admin",
        status=ArticleStatus.APPROVED,
    )
    assert ok(access.list_approved_articles()) == []

    ok(access.create_article(new_article("Through the layer"), admin.user))

    assert len(ok(access.list_approved_articles())) == 2


def test_store_failure_is_reported_without_retry(access: AccessLayer, store, monkeypatch) -> None:
    calls = []

    def broken(**kwargs: Any) -> Any:
        calls.append(kwargs)
        raise StoreError()

    monkeypatch.setattr(store, "list_articles", broken)

    result = access.list_approved_articles()

    assert failed(result, ErrorKind.STORE).message == ErrorMessages.SERVER_ERROR
    assert len(calls) == 1
    assert home_feed_key(1) not in access._cache


# --- Chat, subscriptions and reports ---------------------------------------------------


def test_chat_subscription_delivers_ordered_snapshots(access: AccessLayer, store, reader, writer, clock) -> None:
    snapshots: list[list[str]] = []

    with ok(access.subscribe_chat(reader.user, lambda msgs: snapshots.append([m.body for m in msgs]))):
        assert store.listener_count(CHAT) == 1
        ok(access.post_chat_message("first", reader.user))
        clock.advance(1)
        ok(access.post_chat_message("  second  ", writer.user))

    ok(access.post_chat_message("after teardown", reader.user))

    assert snapshots == [[], ["first"], ["first", "second"]]
    assert store.listener_count(CHAT) == 0


def test_chat_message_is_capped(access: AccessLayer, reader) -> None:
    message = ok(access.post_chat_message("z" * 600, reader.user))
    assert len(message.body) == 500
    failed(access.post_chat_message("   ", reader.user), ErrorKind.VALIDATION)


def test_unverified_user_cannot_join_chat(access: AccessLayer, make_account) -> None:
    unverified = make_account(verified=False)
    failed(access.subscribe_chat(unverified.user, lambda msgs: None), ErrorKind.AUTH)


def test_comment_subscription_follows_one_article(access: AccessLayer, store, admin, reader) -> None:
    first = ok(access.create_article(new_article("One"), admin.user))
    second = ok(access.create_article(new_article("Two"), admin.user))
    seen: list[list[str]] = []

    subscription = ok(access.subscribe_comments(first.id, lambda cs: seen.append([c.body for c in cs])))
    ok(access.post_comment(first.id, "on one", reader.user))
    ok(access.post_comment(second.id, "on two", reader.user))
    subscription.unsubscribe()
    subscription.unsubscribe()

    assert seen[0] == []
    assert seen[-1] == ["on one"]
    assert store.listener_count(COMMENTS) == 0


def test_report_snapshots_message_and_resolves_once(access: AccessLayer, store, reader, writer, admin) -> None:
    message = ok(access.post_chat_message("rude words", writer.user))

    report = ok(access.submit_report(message.id, "  Offensive  ", reader.user))
    assert report.message_content == "rude words"
    assert report.reported_user_id == writer.uid
    assert report.reported_user_email == writer.user.email
    assert report.reason == "Offensive"
    assert report.status == ReportStatus.PENDING

    resolved = ok(access.resolve_report(report.id, admin.user))
    assert resolved.status == ReportStatus.RESOLVED

    second = access.resolve_report(report.id, admin.user)
    assert failed(second, ErrorKind.ALREADY_RESOLVED).message == ErrorMessages.REPORT_ALREADY_RESOLVED
    assert store.get_report(report.id).status == ReportStatus.RESOLVED
    assert store.get_report(report.id).resolved_by == admin.uid
    # Resolving never touches the reported account.
    assert store.get_profile(writer.uid).status == UserStatus.ACTIVE


def test_report_rules(access: AccessLayer, reader, writer) -> None:
    message = ok(access.post_chat_message("hmm", writer.user))

    failed(access.submit_report(message.id, "   ", reader.user), ErrorKind.VALIDATION)
    failed(access.submit_report(424242, "spam", reader.user), ErrorKind.NOT_FOUND)
    ok(access.submit_report(message.id, "spam", reader.user))
    duplicate = access.submit_report(message.id, "spam again", reader.user)
    assert failed(duplicate, ErrorKind.VALIDATION).message == ErrorMessages.REPORT_DUPLICATE


def test_admin_deletes_chat_message(access: AccessLayer, reader, admin) -> None:
    message = ok(access.post_chat_message("oops", reader.user))
    failed(access.delete_chat_message(message.id, reader.user), ErrorKind.AUTH)
    ok(access.delete_chat_message(message.id, admin.user))
    assert ok(access.list_chat_messages()) == []


# --- Moderation and administration -----------------------------------------------------


def test_second_moderation_decision_is_refused(access: AccessLayer, store, make_account, writer) -> None:
    """Sequential conflicting decisions are caught by the state machine.

    Truly concurrent decisions are not detected: both admins read ``pending``
    and the store keeps whichever write lands last.
    """
    first_admin = make_account(UserRole.ADMIN)
    second_admin = make_account(UserRole.ADMIN)
    article = ok(access.create_article(new_article(), writer.user))

    ok(access.moderate_article(article.id, Decision.APPROVE, first_admin.user))
    result = access.moderate_article(article.id, Decision.REJECT, second_admin.user)

    failed(result, ErrorKind.ALREADY_RESOLVED)
    assert store.get_article(article.id).status == ArticleStatus.APPROVED


def test_pending_queue_and_admin_only_operations(access: AccessLayer, writer, reader, admin) -> None:
    article = ok(access.create_article(new_article(), writer.user))

    assert [a.id for a in ok(access.list_pending_articles(admin.user))] == [article.id]
    for result in (
        access.list_pending_articles(writer.user),
        access.moderate_article(article.id, Decision.APPROVE, writer.user),
        access.list_reports(reader.user),
        access.list_writer_applications(reader.user),
        access.list_users(writer.user),
        access.dashboard_stats(reader.user),
    ):
        assert failed(result, ErrorKind.AUTH).message == ErrorMessages.PERMISSION_DENIED


def test_banned_admin_keeps_moderating_but_cannot_post(access: AccessLayer, store, admin, writer) -> None:
    article = ok(access.create_article(new_article(), writer.user))
    store.update_profile(admin.uid, status=UserStatus.BANNED)

    failed(access.post_chat_message("hi", admin.user), ErrorKind.AUTH)
    ok(access.moderate_article(article.id, Decision.APPROVE, admin.user))


def test_application_rules(access: AccessLayer, reader, writer, admin) -> None:
    blank = WriterApplicationCreate(motivation="  ", experience="x", topics="y")
    failed(access.submit_writer_application(blank, reader.user), ErrorKind.VALIDATION)
    failed(access.submit_writer_application(APPLICATION, writer.user), ErrorKind.VALIDATION)

    ok(access.submit_writer_application(APPLICATION, reader.user))
    again = access.submit_writer_application(APPLICATION, reader.user)
    assert failed(again, ErrorKind.VALIDATION).message == ErrorMessages.APPLICATION_PENDING

    pending = ok(access.list_writer_applications(admin.user, ApplicationStatus.PENDING))
    assert [a.applicant_id for a in pending] == [reader.uid]
    failed(access.decide_writer_application(999, Decision.APPROVE, admin.user), ErrorKind.NOT_FOUND)


def test_ban_unban_and_role_edits(access: AccessLayer, store, reader, admin) -> None:
    banned = ok(access.set_user_status(reader.uid, UserStatus.BANNED, admin.user))
    assert banned.status == UserStatus.BANNED
    assert ok(access.set_user_status(reader.uid, UserStatus.BANNED, admin.user)).is_banned
    failed(access.post_chat_message("let me in", reader.user), ErrorKind.AUTH)

    ok(access.set_user_status(reader.uid, UserStatus.ACTIVE, admin.user))
    ok(access.post_chat_message("back again", reader.user))

    promoted = ok(access.set_user_role(reader.uid, UserRole.ADMIN, admin.user))
    assert promoted.is_admin
    failed(access.set_user_role("missing", UserRole.WRITER, admin.user), ErrorKind.NOT_FOUND)
    failed(access.get_profile("missing"), ErrorKind.NOT_FOUND)


def test_dashboard_stats(access: AccessLayer, store, writer, reader, admin) -> None:
    pending = ok(access.create_article(new_article("One"), writer.user))
    rejected = ok(access.create_article(new_article("Two"), writer.user))
    ok(access.moderate_article(rejected.id, Decision.REJECT, admin.user))
    ok(access.create_article(new_article("Three"), admin.user))
    message = ok(access.post_chat_message("hey", writer.user))
    ok(access.submit_report(message.id, "spam", reader.user))
    ok(access.submit_writer_application(APPLICATION, reader.user))
    store.update_profile(writer.uid, status=UserStatus.BANNED)

    stats = ok(access.dashboard_stats(admin.user))

    assert stats.users == 3
    assert stats.banned_users == 1
    assert stats.articles_pending == 1
    assert stats.articles_approved == 1
    assert stats.articles_rejected == 1
    assert stats.reports_pending == 1
    assert stats.applications_pending == 1
    assert pending.status == ArticleStatus.PENDING
