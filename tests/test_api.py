from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from blog_api.application.ports.identity_provider import Identity
from blog_api.application.ports.notification_repo import CommentEventDto
from blog_api.application.ports.post_repo import PostDto
from blog_api.application.ports.user_repo import UserDto
from blog_api.application.services.notification_feed_service import NotificationFeedService
from blog_api.application.services.post_search_service import PostSearchService
from blog_api.application.services.user_service import UserService
from blog_api.dependencies import (
    get_identity_provider,
    get_notification_feed_service,
    get_post_search_service,
    get_user_service,
)
from blog_api.main import app


class StaticPosts:
    def __init__(self, n):
        self.posts = [
            PostDto(id=i, image=None, category="Tech", title=f"T{i}", description="d",
                    date=datetime(2024, 1, i), content="c", status="publish", likes_count=0)
            for i in range(1, n + 1)
        ]

    def search(self, category, keyword, limit, offset):
        return self.posts[offset:offset + limit]

    def count(self, category, keyword):
        return len(self.posts)


class StaticIdentity:
    def resolve(self, token):
        return Identity(id=token, email=None)


class StaticUsers:
    def get_by_id(self, user_id):
        role = "admin" if user_id == "admin-1" else "user"
        return UserDto(id=user_id, username=user_id, name=None, role=role, profile_pic=None, bio=None)


class OneComment:
    def list_comment_events(self, since):
        return [CommentEventDto(id=3, post_id=1, article_title="T1", username="reader",
                                profile_pic=None, content="hi", created_at=datetime.now(timezone.utc))]

    def list_like_events(self, since):
        return []

    def list_read_ids(self, user_id):
        return set()

    def mark_read(self, user_id, notification_type, notification_id):
        return True


@pytest.fixture
def client():
    app.dependency_overrides[get_post_search_service] = lambda: PostSearchService(repo=StaticPosts(13))
    app.dependency_overrides[get_identity_provider] = lambda: StaticIdentity()
    app.dependency_overrides[get_user_service] = lambda: UserService(user_repo=StaticUsers())
    app.dependency_overrides[get_notification_feed_service] = lambda: NotificationFeedService(repo=OneComment())
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_first_page_omits_previous_page(client):
    res = client.get("/posts", params={"limit": 6})
    assert res.status_code == 200
    body = res.json()
    assert body["totalItems"] == 13
    assert body["totalPages"] == 3
    assert body["nextPage"] == 2
    assert "previousPage" not in body
    assert body["items"][0]["image"] is None


def test_middle_page_shape(client):
    body = client.get("/posts", params={"page": 2, "limit": 6}).json()
    assert (body["currentPage"], body["previousPage"], body["nextPage"]) == (2, 1, 3)


def test_notifications_require_token(client):
    res = client.get("/auth/notifications")
    assert res.status_code == 401
    assert res.json()["success"] is False


def test_notifications_require_admin(client):
    res = client.get("/auth/notifications", headers={"Authorization": "Bearer user-9"})
    assert res.status_code == 403


def test_notification_feed_for_admin(client):
    res = client.get("/auth/notifications", headers={"Authorization": "Bearer admin-1"})
    assert res.status_code == 200
    body = res.json()
    assert body["totalNotifications"] == 1
    assert body["limit"] == 10
    item = body["notifications"][0]
    assert item["id"] == "comment-3"
    assert item["content"] == "hi"
    assert item["isRead"] is False


def test_mark_read_requires_id(client):
    res = client.post("/auth/notifications/read", json={}, headers={"Authorization": "Bearer admin-1"})
    assert res.status_code == 400
    assert res.json()["error"] == "Notification ID is required"


def test_notification_timestamp_carries_utc(client):
    body = client.get("/auth/notifications", headers={"Authorization": "Bearer admin-1"}).json()
    stamp = body["notifications"][0]["timestamp"]
    assert datetime.fromisoformat(stamp.replace("Z", "+00:00")).utcoffset() is not None


def test_error_envelope_is_documented():
    schema = app.openapi()
    assert "ErrorResponse" in schema["components"]["schemas"]
    responses = schema["paths"]["/posts"]["get"]["responses"]
    assert responses["500"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
