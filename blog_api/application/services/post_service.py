from dataclasses import dataclass

from ..ports.post_repo import PostRepository, PostDto, PostInput
from ...exceptions import NotFoundError, ValidationError, store_boundary
from ...utils import utcnow


@dataclass
class PostService:
    repo: PostRepository

    def _validate(self, data: PostInput) -> None:
        for field_name in ("title", "description", "content"):
            value = getattr(data, field_name)
            if value is None or not str(value).strip():
                raise ValidationError(f"{field_name.capitalize()} is required")

    def create(self, data: PostInput) -> int:
        self._validate(data)
        with store_boundary("Server could not create post because database connection"):
            return self.repo.create(data)

    def get(self, post_id: int) -> PostDto:
        with store_boundary("Server could not read post because database connection"):
            post = self.repo.get_by_id(post_id)
        if not post:
            raise NotFoundError("Server could not find a requested post")
        return post

    def update(self, post_id: int, data: PostInput) -> None:
        self._validate(data)
        with store_boundary("Server could not update post because database connection"):
            updated = self.repo.update(post_id, data, utcnow())
        if not updated:
            raise NotFoundError("Server could not find a requested post to update")

    def delete(self, post_id: int) -> None:
        with store_boundary("Server could not delete post because database connection"):
            deleted = self.repo.delete(post_id)
        if not deleted:
            raise NotFoundError("Server could not find a requested post to delete")
