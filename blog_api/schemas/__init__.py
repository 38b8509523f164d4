# Schemas package (re-export feature modules for stable imports)
from .posts.post import *
from .categories.category import *
from .comments.comment import *
from .notifications.notification import *
from .users.user import *
from .common.common import *
