# blog_api/db/models/blog/comment.py
from typing import Optional
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime

from ...types import UTCDateTime
from ....utils import utcnow

class Comment(SQLModel, table=True):
    __tablename__ = "comments"
    id: Optional[int] = Field(default=None, primary_key=True)
    post_id: int = Field(foreign_key="posts.id", index=True)
    user_id: str = Field(foreign_key="users.id")
    comment_text: str
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, index=True)

    # Relationships
    post: Optional["Post"] = Relationship(back_populates="comments")
    user: Optional["User"] = Relationship(back_populates="comments")
