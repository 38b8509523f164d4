from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from .....db.models import Category, Post, Status
from .....application.ports.post_repo import PostDto, PostInput, PostRepository
from ..filters import build_post_filter


class SqlPostRepository(PostRepository):
    def __init__(self, session: Session):
        self.session = session

    def _joined(self, stmt):
        return (
            stmt.select_from(Post)
            .join(Category, Post.category_id == Category.id)
            .join(Status, Post.status_id == Status.id)
        )

    def _filtered(self, stmt, category: Optional[str], keyword: Optional[str]):
        predicate = build_post_filter(category, keyword)
        if predicate is not None:
            stmt = stmt.where(predicate)
        return stmt

    def _listing(self):
        return self._joined(select(
            Post.id,
            Post.image,
            Category.name.label("category"),
            Post.title,
            Post.description,
            Post.date,
            Post.content,
            Status.status,
            Post.likes_count,
        ))

    def _row_to_dto(self, row) -> PostDto:
        return PostDto(
            id=row.id,
            image=row.image,
            category=row.category,
            title=row.title,
            description=row.description,
            date=row.date,
            content=row.content,
            status=row.status,
            likes_count=row.likes_count or 0,
        )

    def search(self, category: Optional[str], keyword: Optional[str], limit: int, offset: int) -> List[PostDto]:
        stmt = (
            self._filtered(self._listing(), category, keyword)
            .order_by(Post.date.desc(), Post.id.asc())
            .limit(limit)
            .offset(offset)
        )
        return [self._row_to_dto(r) for r in self.session.exec(stmt).all()]

    def count(self, category: Optional[str], keyword: Optional[str]) -> int:
        stmt = self._filtered(self._joined(select(func.count(Post.id))), category, keyword)
        return int(self.session.exec(stmt).one())

    def get_by_id(self, post_id: int) -> Optional[PostDto]:
        row = self.session.exec(self._listing().where(Post.id == post_id)).first()
        return self._row_to_dto(row) if row else None

    def exists(self, post_id: int) -> bool:
        return self.session.get(Post, post_id) is not None

    def create(self, data: PostInput) -> int:
        post = Post(
            title=data.title,
            image=data.image,
            category_id=data.category_id,
            description=data.description,
            content=data.content,
            status_id=data.status_id,
        )
        self.session.add(post)
        self.session.commit()
        self.session.refresh(post)
        return post.id

    def update(self, post_id: int, data: PostInput, date: datetime) -> bool:
        post = self.session.get(Post, post_id)
        if not post:
            return False
        post.title = data.title
        post.image = data.image
        post.category_id = data.category_id
        post.description = data.description
        post.content = data.content
        post.status_id = data.status_id
        post.date = date
        self.session.add(post)
        self.session.commit()
        return True

    def delete(self, post_id: int) -> bool:
        post = self.session.get(Post, post_id)
        if not post:
            return False
        self.session.delete(post)
        self.session.commit()
        return True
