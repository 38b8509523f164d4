# blog_api/schemas/notifications/notification.py
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

class NotificationItem(BaseModel):
    id: str
    type: str  # 'comment' | 'like'
    userName: Optional[str] = None
    userAvatar: Optional[str] = None
    articleTitle: str
    content: Optional[str] = None  # comments only
    timestamp: datetime
    postId: int
    isRead: bool

class NotificationListResponse(BaseModel):
    notifications: List[NotificationItem]
    totalNotifications: int
    totalPages: int
    currentPage: int
    limit: int

class MarkReadRequest(BaseModel):
    notificationId: Optional[str] = None
