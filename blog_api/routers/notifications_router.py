from typing import Optional
from fastapi import APIRouter, Depends, Query
import logging

from ..application.ports.identity_provider import Identity
from ..application.services.notification_feed_service import (
    NotificationFeedService,
    NotificationView,
)
from ..dependencies import get_notification_feed_service, require_admin
from ..schemas.common.common import MessageResponse
from ..schemas.notifications.notification import (
    MarkReadRequest,
    NotificationItem,
    NotificationListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth/notifications", tags=["Notifications"])


def _to_item(v: NotificationView) -> NotificationItem:
    fields = {
        "id": v.id,
        "type": v.type,
        "userName": v.user_name,
        "userAvatar": v.user_avatar,
        "articleTitle": v.article_title,
        "timestamp": v.timestamp,
        "postId": v.post_id,
        "isRead": v.is_read,
    }
    # Like entries carry no content key at all
    if v.content is not None:
        fields["content"] = v.content
    return NotificationItem(**fields)


@router.get("", response_model=NotificationListResponse, response_model_exclude_unset=True)
async def get_notifications(
    page: Optional[str] = Query(None),
    admin: Identity = Depends(require_admin),
    feed: NotificationFeedService = Depends(get_notification_feed_service),
):
    result = await feed.fetch_unread(admin.id, page)
    return NotificationListResponse(
        notifications=[_to_item(v) for v in result.notifications],
        totalNotifications=result.total_notifications,
        totalPages=result.total_pages,
        currentPage=result.current_page,
        limit=result.limit,
    )


@router.post("/read", response_model=MessageResponse)
def mark_notification_read(
    body: MarkReadRequest,
    admin: Identity = Depends(require_admin),
    feed: NotificationFeedService = Depends(get_notification_feed_service),
):
    feed.mark_read(admin.id, body.notificationId)
    return MessageResponse(message="Notification marked as read")
