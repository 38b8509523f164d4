import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, List, Optional

from ..notification_ids import (
    COMMENT,
    LIKE,
    comment_notification_id,
    like_notification_id,
    notification_kind,
)
from ..pagination import normalize_page, page_offset, total_pages
from ..ports.notification_repo import NotificationRepository
from ...exceptions import ValidationError, store_boundary
from ...utils import utcnow

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch notifications"


@dataclass
class NotificationView:
    id: str
    type: str
    user_name: Optional[str]
    user_avatar: Optional[str]
    article_title: str
    timestamp: datetime
    post_id: int
    is_read: bool = False
    content: Optional[str] = None


@dataclass
class NotificationFeed:
    notifications: List[NotificationView]
    total_notifications: int
    total_pages: int
    current_page: int
    limit: int


@dataclass
class NotificationFeedService:
    """Unread admin feed built from recent comments and likes.

    Entries are recomputed on every call. Read state lives only in the
    per-user markers, keyed by the ids from ``notification_ids``.
    """

    repo: NotificationRepository
    page_size: int = 10
    window_days: int = 30
    now: Callable[[], datetime] = utcnow

    async def fetch_unread(self, user_id: str, page: Any = None) -> NotificationFeed:
        safe_page = normalize_page(page)
        since = self.now() - timedelta(days=self.window_days)

        # Independent reads; each runs in its own worker thread and session
        with store_boundary(FETCH_FAILED):
            comments, likes, read_ids = await asyncio.gather(
                asyncio.to_thread(self.repo.list_comment_events, since),
                asyncio.to_thread(self.repo.list_like_events, since),
                asyncio.to_thread(self.repo.list_read_ids, user_id),
            )

        views: List[NotificationView] = []
        for c in comments:
            views.append(NotificationView(
                id=comment_notification_id(c.id),
                type=COMMENT,
                user_name=c.username,
                user_avatar=c.profile_pic,
                article_title=c.article_title,
                content=c.content,
                timestamp=c.created_at,
                post_id=c.post_id,
            ))
        for like in likes:
            views.append(NotificationView(
                id=like_notification_id(like.post_id, like.id),
                type=LIKE,
                user_name=like.username,
                user_avatar=like.profile_pic,
                article_title=like.article_title,
                timestamp=like.created_at,
                post_id=like.post_id,
            ))

        # Newest first; equal timestamps fall back to id order
        views.sort(key=lambda v: v.id)
        views.sort(key=lambda v: v.timestamp, reverse=True)

        for view in views:
            view.is_read = view.id in read_ids
        unread = [v for v in views if not v.is_read]

        total = len(unread)
        offset = page_offset(safe_page, self.page_size)
        logger.debug(f"Feed for {user_id}: {len(views)} events, {total} unread")
        return NotificationFeed(
            notifications=unread[offset:offset + self.page_size],
            total_notifications=total,
            total_pages=total_pages(total, self.page_size),
            current_page=safe_page,
            limit=self.page_size,
        )

    def mark_read(self, user_id: str, notification_id: Optional[str]) -> bool:
        if not notification_id:
            raise ValidationError("Notification ID is required")
        kind = notification_kind(notification_id)
        if kind is None:
            raise ValidationError("Invalid notification ID")
        with store_boundary("Failed to mark notification as read"):
            inserted = self.repo.mark_read(user_id, kind, notification_id)
        if not inserted:
            logger.info(f"Notification {notification_id} already marked read for {user_id}")
        return inserted
