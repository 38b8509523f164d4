from typing import Optional, Protocol


class LikeRepository(Protocol):
    def has_liked(self, post_id: int, user_id: str) -> bool:
        ...

    def add(self, post_id: int, user_id: str) -> Optional[int]:
        """Record the like and return the post's new like count, or None if it already exists."""
        ...

    def remove(self, post_id: int, user_id: str) -> bool:
        ...
