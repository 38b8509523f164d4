# blog_api/db/models/blog/post.py
from typing import Optional, List
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime

from ...types import UTCDateTime
from ....utils import utcnow

class Post(SQLModel, table=True):
    __tablename__ = "posts"
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    image: Optional[str] = Field(default=None)
    category_id: int = Field(foreign_key="categories.id", index=True)
    description: str
    content: str
    status_id: int = Field(foreign_key="statuses.id")
    date: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, index=True)
    likes_count: int = Field(default=0)

    # Relationships
    category: Optional["Category"] = Relationship(back_populates="posts")
    comments: List["Comment"] = Relationship(
        back_populates="post", sa_relationship_kwargs={"cascade": "all, delete-orphan"}
    )
    likes: List["PostLike"] = Relationship(sa_relationship_kwargs={"cascade": "all, delete-orphan"})
