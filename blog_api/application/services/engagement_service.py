from dataclasses import dataclass
from typing import List, Optional

from ..ports.comment_repo import CommentRepository, CommentDto
from ..ports.like_repo import LikeRepository
from ..ports.post_repo import PostRepository
from ...exceptions import ConflictError, NotFoundError, ValidationError, store_boundary


@dataclass
class EngagementService:
    """Comments and likes: the event sources behind the admin notification feed."""

    post_repo: PostRepository
    comment_repo: CommentRepository
    like_repo: LikeRepository

    def _require_post(self, post_id: int) -> None:
        if not self.post_repo.exists(post_id):
            raise NotFoundError("Server could not find a requested post")

    def list_comments(self, post_id: int) -> List[CommentDto]:
        with store_boundary("Failed to fetch comments"):
            self._require_post(post_id)
            return self.comment_repo.list_for_post(post_id)

    def add_comment(self, post_id: int, user_id: str, comment_text: Optional[str]) -> CommentDto:
        if not comment_text or not comment_text.strip():
            raise ValidationError("Comment text is required")
        with store_boundary("Failed to create comment"):
            self._require_post(post_id)
            return self.comment_repo.create(post_id, user_id, comment_text.strip())

    def like(self, post_id: int, user_id: str) -> int:
        with store_boundary("Failed to like post"):
            self._require_post(post_id)
            if self.like_repo.has_liked(post_id, user_id):
                raise ConflictError("You have already liked this post")
            count = self.like_repo.add(post_id, user_id)
            if count is None:
                raise ConflictError("You have already liked this post")
            return count

    def unlike(self, post_id: int, user_id: str) -> None:
        with store_boundary("Failed to unlike post"):
            self._require_post(post_id)
            removed = self.like_repo.remove(post_id, user_id)
        if not removed:
            raise NotFoundError("Like not found")
