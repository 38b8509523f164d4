# blog_api/db/models/notifications/notification_read.py
from typing import Optional
from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field
from datetime import datetime

from ...types import UTCDateTime
from ....utils import utcnow

class NotificationRead(SQLModel, table=True):
    """Per-user acknowledgement of a feed entry."""

    __tablename__ = "notification_reads"
    __table_args__ = (
        UniqueConstraint("user_id", "notification_id", name="ux_notification_reads_user_notification"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    notification_type: str = Field(max_length=20)
    notification_id: str = Field(max_length=191)
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
