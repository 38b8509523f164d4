# blog_api/schemas/posts/post.py
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

class PostBase(BaseModel):
    title: str = Field(..., min_length=1)
    image: Optional[str] = Field(None, description="Public URL of the cover image")
    category_id: int
    description: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    status_id: int

class PostCreate(PostBase):
    pass

class PostUpdate(PostBase):
    pass

class PostResponse(BaseModel):
    id: int
    image: Optional[str] = None
    category: str
    title: str
    description: str
    date: datetime
    content: str
    status: str
    likes_count: int

class PostDetailResponse(BaseModel):
    data: PostResponse

class PostListResponse(BaseModel):
    items: List[PostResponse]
    totalItems: int
    totalPages: int
    currentPage: int
    limit: int
    # Only present when the neighbouring page exists
    nextPage: Optional[int] = None
    previousPage: Optional[int] = None
