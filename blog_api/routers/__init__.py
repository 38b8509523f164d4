# Routers package
from . import posts_router
from . import engagement_router
from . import categories_router
from . import notifications_router
from . import users_router

__all__ = [
    "posts_router",
    "engagement_router",
    "categories_router",
    "notifications_router",
    "users_router",
]
