import pytest

from blog_api.application.ports.post_repo import PostInput
from blog_api.application.services.post_service import PostService
from blog_api.exceptions import NotFoundError, StoreError, ValidationError


class FakePostRepo:
    def __init__(self):
        self.rows = {}
        self._id = 1

    def get_by_id(self, post_id):
        return self.rows.get(post_id)

    def create(self, data):
        post_id = self._id
        self.rows[post_id] = data
        self._id += 1
        return post_id

    def update(self, post_id, data, date):
        if post_id not in self.rows:
            return False
        self.rows[post_id] = data
        return True

    def delete(self, post_id):
        return self.rows.pop(post_id, None) is not None


class ExplodingRepo(FakePostRepo):
    def create(self, data):
        raise RuntimeError("duplicate key value violates unique constraint")


def valid_input(**overrides):
    fields = dict(title="Hello", image=None, category_id=1, description="d", content="c", status_id=1)
    fields.update(overrides)
    return PostInput(**fields)


def test_create_then_delete():
    svc = PostService(repo=FakePostRepo())
    post_id = svc.create(valid_input())
    assert post_id == 1
    svc.delete(post_id)
    with pytest.raises(NotFoundError) as exc:
        svc.delete(post_id)
    assert exc.value.detail == "Server could not find a requested post to delete"


def test_blank_fields_rejected():
    svc = PostService(repo=FakePostRepo())
    with pytest.raises(ValidationError):
        svc.create(valid_input(title="   "))


def test_get_missing_post():
    with pytest.raises(NotFoundError) as exc:
        PostService(repo=FakePostRepo()).get(99)
    assert exc.value.status_code == 404


def test_update_missing_post():
    with pytest.raises(NotFoundError):
        PostService(repo=FakePostRepo()).update(5, valid_input())


def test_store_detail_not_leaked():
    with pytest.raises(StoreError) as exc:
        PostService(repo=ExplodingRepo()).create(valid_input())
    assert exc.value.detail == "Server could not create post because database connection"
