from datetime import datetime
from typing import List, Set

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from .....db.models import Comment, NotificationRead, Post, PostLike, User
from .....utils import utcnow
from .....application.ports.notification_repo import (
    CommentEventDto,
    LikeEventDto,
    NotificationRepository,
)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlNotificationRepository(NotificationRepository):
    """Reads for the notification feed.

    Holds the engine rather than a session: the feed issues its reads
    concurrently and every call opens its own session.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def list_comment_events(self, since: datetime) -> List[CommentEventDto]:
        stmt = (
            select(
                Comment.id,
                Comment.post_id,
                Post.title,
                User.username,
                User.profile_pic,
                Comment.comment_text,
                Comment.created_at,
            )
            .select_from(Comment)
            .join(User, Comment.user_id == User.id)
            .join(Post, Comment.post_id == Post.id)
            .where(Comment.created_at >= since)
            .order_by(Comment.created_at.desc())
        )
        with Session(self.engine) as session:
            rows = session.exec(stmt).all()
        return [
            CommentEventDto(
                id=r.id,
                post_id=r.post_id,
                article_title=r.title,
                username=r.username,
                profile_pic=r.profile_pic,
                content=r.comment_text,
                created_at=r.created_at,
            )
            for r in rows
        ]

    def list_like_events(self, since: datetime) -> List[LikeEventDto]:
        stmt = (
            select(
                PostLike.id,
                PostLike.post_id,
                Post.title,
                User.username,
                User.profile_pic,
                PostLike.created_at,
            )
            .select_from(PostLike)
            .join(User, PostLike.user_id == User.id)
            .join(Post, PostLike.post_id == Post.id)
            .where(PostLike.created_at >= since)
            .order_by(PostLike.created_at.desc())
        )
        with Session(self.engine) as session:
            rows = session.exec(stmt).all()
        return [
            LikeEventDto(
                id=r.id,
                post_id=r.post_id,
                article_title=r.title,
                username=r.username,
                profile_pic=r.profile_pic,
                created_at=r.created_at,
            )
            for r in rows
        ]

    def list_read_ids(self, user_id: str) -> Set[str]:
        with Session(self.engine) as session:
            rows = session.exec(
                select(NotificationRead.notification_id).where(NotificationRead.user_id == user_id)
            ).all()
        return set(rows)

    def mark_read(self, user_id: str, notification_type: str, notification_id: str) -> bool:
        values = {
            "user_id": user_id,
            "notification_type": notification_type,
            "notification_id": notification_id,
            "created_at": utcnow(),
        }
        with Session(self.engine) as session:
            insert = _UPSERT_DIALECTS.get(self.engine.dialect.name)
            if insert is None:
                # No native upsert: check first, the unique constraint still guards races
                existing = session.exec(
                    select(NotificationRead)
                    .where(NotificationRead.user_id == user_id)
                    .where(NotificationRead.notification_id == notification_id)
                ).first()
                if existing:
                    return False
                session.add(NotificationRead(**values))
                session.commit()
                return True
            stmt = (
                insert(NotificationRead.__table__)
                .values(**values)
                .on_conflict_do_nothing(index_elements=["user_id", "notification_id"])
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount == 1
