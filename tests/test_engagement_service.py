import pytest

from blog_api.application.services.engagement_service import EngagementService
from blog_api.db.models import Post
from blog_api.exceptions import ConflictError, NotFoundError, ValidationError
from blog_api.infrastructure.persistence.sqlalchemy.repositories.comment_repository_sql import SqlCommentRepository
from blog_api.infrastructure.persistence.sqlalchemy.repositories.like_repository_sql import SqlLikeRepository
from blog_api.infrastructure.persistence.sqlalchemy.repositories.post_repository_sql import SqlPostRepository


@pytest.fixture
def engagement(session, blog):
    return EngagementService(
        post_repo=SqlPostRepository(session),
        comment_repo=SqlCommentRepository(session),
        like_repo=SqlLikeRepository(session),
    )


def test_comment_on_post(engagement):
    created = engagement.add_comment(1, "user-1", "  Great read  ")
    assert created.comment_text == "Great read"
    assert created.username == "reader"
    assert [c.id for c in engagement.list_comments(1)] == [created.id]


def test_comment_requires_text(engagement):
    with pytest.raises(ValidationError):
        engagement.add_comment(1, "user-1", " ")


def test_comment_on_missing_post(engagement):
    with pytest.raises(NotFoundError):
        engagement.add_comment(404, "user-1", "hello")


def test_like_counts_once_per_user(engagement, session):
    assert engagement.like(2, "user-1") == 1
    assert engagement.like(2, "admin-1") == 2
    with pytest.raises(ConflictError):
        engagement.like(2, "user-1")
    session.expire_all()
    assert session.get(Post, 2).likes_count == 2


def test_unlike(engagement, session):
    engagement.like(3, "user-1")
    engagement.unlike(3, "user-1")
    session.expire_all()
    assert session.get(Post, 3).likes_count == 0
    with pytest.raises(NotFoundError):
        engagement.unlike(3, "user-1")


class StaleLikeCheck(SqlLikeRepository):
    """Reports no like even when one exists, as a concurrent request would."""

    def has_liked(self, post_id, user_id):
        return False


def test_concurrent_duplicate_like_is_a_conflict(session, blog):
    engagement = EngagementService(
        post_repo=SqlPostRepository(session),
        comment_repo=SqlCommentRepository(session),
        like_repo=StaleLikeCheck(session),
    )
    engagement.like(1, "user-1")
    with pytest.raises(ConflictError) as exc:
        engagement.like(1, "user-1")
    assert exc.value.detail == "You have already liked this post"
    session.expire_all()
    assert session.get(Post, 1).likes_count == 1
