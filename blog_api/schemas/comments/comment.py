# blog_api/schemas/comments/comment.py
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

class CommentCreate(BaseModel):
    comment_text: Optional[str] = None

class CommentResponse(BaseModel):
    id: int
    post_id: int
    user_id: str
    username: Optional[str] = None
    profile_pic: Optional[str] = None
    comment_text: str
    created_at: datetime

class CommentListResponse(BaseModel):
    comments: List[CommentResponse]

class LikeResponse(BaseModel):
    message: str
    likes_count: int
