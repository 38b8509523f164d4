# Models package (re-export feature modules for stable imports)
from .users.user import User
from .blog.category import Category
from .blog.status import Status
from .blog.post import Post
from .blog.comment import Comment
from .blog.like import PostLike
from .notifications.notification_read import NotificationRead

__all__ = [
    "User",
    "Category",
    "Status",
    "Post",
    "Comment",
    "PostLike",
    "NotificationRead",
]
