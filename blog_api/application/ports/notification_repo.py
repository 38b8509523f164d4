from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol, Set


@dataclass
class CommentEventDto:
    id: int
    post_id: int
    article_title: str
    username: Optional[str]
    profile_pic: Optional[str]
    content: str
    created_at: datetime


@dataclass
class LikeEventDto:
    id: int
    post_id: int
    article_title: str
    username: Optional[str]
    profile_pic: Optional[str]
    created_at: datetime


class NotificationRepository(Protocol):
    def list_comment_events(self, since: datetime) -> List[CommentEventDto]:
        ...

    def list_like_events(self, since: datetime) -> List[LikeEventDto]:
        ...

    def list_read_ids(self, user_id: str) -> Set[str]:
        ...

    def mark_read(self, user_id: str, notification_type: str, notification_id: str) -> bool:
        """Insert the marker; False when it already existed."""
        ...
