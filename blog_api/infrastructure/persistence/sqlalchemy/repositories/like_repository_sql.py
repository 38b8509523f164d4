from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import Post, PostLike
from .....application.ports.like_repo import LikeRepository


class SqlLikeRepository(LikeRepository):
    def __init__(self, session: Session):
        self.session = session

    def _find(self, post_id: int, user_id: str):
        return self.session.exec(
            select(PostLike)
            .where(PostLike.post_id == post_id)
            .where(PostLike.user_id == user_id)
        ).first()

    def has_liked(self, post_id: int, user_id: str) -> bool:
        return self._find(post_id, user_id) is not None

    def add(self, post_id: int, user_id: str) -> Optional[int]:
        self.session.add(PostLike(post_id=post_id, user_id=user_id))
        try:
            self.session.flush()
        except IntegrityError:
            # Lost a race with an identical like
            self.session.rollback()
            return None
        # Counter is bumped in SQL so concurrent likes do not overwrite each other
        self.session.execute(
            update(Post).where(Post.id == post_id).values(likes_count=Post.likes_count + 1)
        )
        self.session.commit()
        return self.session.exec(select(Post.likes_count).where(Post.id == post_id)).one()

    def remove(self, post_id: int, user_id: str) -> bool:
        like = self._find(post_id, user_id)
        if not like:
            return False
        self.session.delete(like)
        self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .where(Post.likes_count > 0)
            .values(likes_count=Post.likes_count - 1)
        )
        self.session.commit()
        return True
