import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.engine import Engine
from sqlmodel import Session

from .application.ports.identity_provider import Identity, IdentityProvider
from .application.services.category_service import CategoryService
from .application.services.engagement_service import EngagementService
from .application.services.notification_feed_service import NotificationFeedService
from .application.services.post_search_service import PostSearchService
from .application.services.post_service import PostService
from .application.services.user_service import UserService
from .config import settings
from .database import get_engine, get_session
from .exceptions import AuthError
from .infrastructure.identity.jwt_identity_provider import JwtIdentityProvider
from .infrastructure.persistence.sqlalchemy.repositories.category_repository_sql import SqlCategoryRepository
from .infrastructure.persistence.sqlalchemy.repositories.comment_repository_sql import SqlCommentRepository
from .infrastructure.persistence.sqlalchemy.repositories.like_repository_sql import SqlLikeRepository
from .infrastructure.persistence.sqlalchemy.repositories.notification_repository_sql import SqlNotificationRepository
from .infrastructure.persistence.sqlalchemy.repositories.post_repository_sql import SqlPostRepository
from .infrastructure.persistence.sqlalchemy.repositories.user_repository_sql import SqlUserRepository

logger = logging.getLogger(__name__)

# Auth scheme
oauth2_scheme = HTTPBearer(auto_error=False)


def get_identity_provider() -> IdentityProvider:
    return JwtIdentityProvider()


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(oauth2_scheme),
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Identity:
    token = credentials.credentials if credentials else None
    if not token:
        raise AuthError("Unauthorized: Token missing")
    return provider.resolve(token)


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(user_repo=SqlUserRepository(session), admin_role=settings.ADMIN_ROLE)


def require_admin(
    identity: Identity = Depends(get_current_identity),
    users: UserService = Depends(get_user_service),
) -> Identity:
    users.require_admin(identity.id)
    return identity


def get_post_search_service(session: Session = Depends(get_session)) -> PostSearchService:
    return PostSearchService(
        repo=SqlPostRepository(session),
        default_limit=settings.POSTS_DEFAULT_LIMIT,
        max_limit=settings.POSTS_MAX_LIMIT,
    )


def get_post_service(session: Session = Depends(get_session)) -> PostService:
    return PostService(repo=SqlPostRepository(session))


def get_category_service(session: Session = Depends(get_session)) -> CategoryService:
    return CategoryService(repo=SqlCategoryRepository(session))


def get_engagement_service(session: Session = Depends(get_session)) -> EngagementService:
    return EngagementService(
        post_repo=SqlPostRepository(session),
        comment_repo=SqlCommentRepository(session),
        like_repo=SqlLikeRepository(session),
    )


def get_notification_feed_service(engine: Engine = Depends(get_engine)) -> NotificationFeedService:
    return NotificationFeedService(
        repo=SqlNotificationRepository(engine),
        page_size=settings.NOTIFICATIONS_PAGE_SIZE,
        window_days=settings.NOTIFICATIONS_WINDOW_DAYS,
    )
