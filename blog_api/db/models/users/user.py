# blog_api/db/models/users/user.py
from typing import Optional, List
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime

from ...types import UTCDateTime
from ....utils import utcnow

class User(SQLModel, table=True):
    __tablename__ = "users"
    # Same id as the identity provider's user
    id: str = Field(primary_key=True, max_length=36)
    username: str = Field(max_length=100, unique=True, index=True)
    name: Optional[str] = Field(max_length=100, default=None)
    role: str = Field(default="user", max_length=20)
    profile_pic: Optional[str] = Field(max_length=255, default=None)
    bio: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    # Relationships
    comments: List["Comment"] = Relationship(back_populates="user")
