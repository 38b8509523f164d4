from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol


@dataclass
class CommentDto:
    id: int
    post_id: int
    user_id: str
    username: Optional[str]
    profile_pic: Optional[str]
    comment_text: str
    created_at: datetime


class CommentRepository(Protocol):
    def list_for_post(self, post_id: int) -> List[CommentDto]:
        ...

    def create(self, post_id: int, user_id: str, comment_text: str) -> CommentDto:
        ...
