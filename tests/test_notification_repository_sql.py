from datetime import timedelta

import pytest
from sqlmodel import select

from blog_api.application.services.notification_feed_service import NotificationFeedService
from blog_api.db.models import NotificationRead
from blog_api.infrastructure.persistence.sqlalchemy.repositories.notification_repository_sql import SqlNotificationRepository


def test_events_are_limited_to_window(engine, session, blog, add_comment, add_like):
    now = blog["now"]
    add_comment(1, 1, "user-1", "recent", now - timedelta(days=1))
    add_comment(2, 2, "user-1", "ancient", now - timedelta(days=45))
    add_like(1, 3, "user-1", now - timedelta(hours=2))
    add_like(2, 1, "admin-1", now - timedelta(days=40))

    repo = SqlNotificationRepository(engine)
    since = now - timedelta(days=30)
    comments = repo.list_comment_events(since)
    likes = repo.list_like_events(since)

    assert [c.id for c in comments] == [1]
    assert comments[0].article_title == "Python tips"
    assert comments[0].username == "reader"
    assert comments[0].content == "recent"
    assert [(l.id, l.post_id) for l in likes] == [(1, 3)]
    assert likes[0].profile_pic == "https://img/reader.png"


def test_mark_read_is_idempotent(engine, session, blog):
    repo = SqlNotificationRepository(engine)
    assert repo.mark_read("admin-1", "comment", "comment-1") is True
    assert repo.mark_read("admin-1", "comment", "comment-1") is False

    rows = session.exec(select(NotificationRead)).all()
    assert len(rows) == 1
    assert rows[0].notification_type == "comment"


def test_read_ids_are_per_user(engine, blog):
    repo = SqlNotificationRepository(engine)
    repo.mark_read("admin-1", "comment", "comment-1")
    repo.mark_read("user-1", "like", "like-2-5")
    assert repo.list_read_ids("admin-1") == {"comment-1"}
    assert repo.list_read_ids("nobody") == set()


@pytest.mark.asyncio
async def test_feed_over_sql_store(engine, blog, add_comment, add_like):
    now = blog["now"]
    add_comment(1, 1, "user-1", "first", now - timedelta(hours=3))
    add_comment(2, 3, "user-1", "second", now - timedelta(hours=1))
    add_like(1, 2, "user-1", now - timedelta(hours=2))

    svc = NotificationFeedService(repo=SqlNotificationRepository(engine), now=lambda: now)
    feed = await svc.fetch_unread("admin-1")
    assert feed.total_notifications == 3
    assert [n.id for n in feed.notifications] == ["comment-2", "like-2-1", "comment-1"]

    svc.mark_read("admin-1", "like-2-1")
    svc.mark_read("admin-1", "like-2-1")
    feed = await svc.fetch_unread("admin-1")
    assert [n.id for n in feed.notifications] == ["comment-2", "comment-1"]
    assert feed.total_notifications == 2


def test_event_timestamps_are_utc(engine, blog, add_comment):
    add_comment(1, 1, "user-1", "recent", blog["now"] - timedelta(hours=1))
    comments = SqlNotificationRepository(engine).list_comment_events(blog["now"] - timedelta(days=30))
    assert comments[0].created_at.utcoffset() == timedelta(0)
    assert comments[0].created_at == blog["now"] - timedelta(hours=1)
