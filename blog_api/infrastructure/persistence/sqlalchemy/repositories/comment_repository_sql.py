from typing import List
from sqlmodel import Session, select

from .....db.models import Comment, User
from .....application.ports.comment_repo import CommentDto, CommentRepository


class SqlCommentRepository(CommentRepository):
    def __init__(self, session: Session):
        self.session = session

    def list_for_post(self, post_id: int) -> List[CommentDto]:
        rows = self.session.exec(
            select(Comment, User)
            .join(User, Comment.user_id == User.id)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        ).all()
        return [
            CommentDto(
                id=c.id,
                post_id=c.post_id,
                user_id=c.user_id,
                username=u.username,
                profile_pic=u.profile_pic,
                comment_text=c.comment_text,
                created_at=c.created_at,
            )
            for c, u in rows
        ]

    def create(self, post_id: int, user_id: str, comment_text: str) -> CommentDto:
        comment = Comment(post_id=post_id, user_id=user_id, comment_text=comment_text)
        self.session.add(comment)
        self.session.commit()
        self.session.refresh(comment)
        user = self.session.get(User, user_id)
        return CommentDto(
            id=comment.id,
            post_id=comment.post_id,
            user_id=comment.user_id,
            username=user.username if user else None,
            profile_pic=user.profile_pic if user else None,
            comment_text=comment.comment_text,
            created_at=comment.created_at,
        )
