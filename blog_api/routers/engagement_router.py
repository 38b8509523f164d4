from fastapi import APIRouter, Depends

from ..application.ports.comment_repo import CommentDto
from ..application.ports.identity_provider import Identity
from ..application.services.engagement_service import EngagementService
from ..dependencies import get_current_identity, get_engagement_service
from ..schemas.comments.comment import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    LikeResponse,
)
from ..schemas.common.common import MessageResponse

router = APIRouter(prefix="/posts", tags=["Comments & Likes"])


def _to_response(c: CommentDto) -> CommentResponse:
    return CommentResponse(
        id=c.id,
        post_id=c.post_id,
        user_id=c.user_id,
        username=c.username,
        profile_pic=c.profile_pic,
        comment_text=c.comment_text,
        created_at=c.created_at,
    )


@router.get("/{post_id}/comments", response_model=CommentListResponse)
def list_comments(post_id: int, engagement: EngagementService = Depends(get_engagement_service)):
    return CommentListResponse(comments=[_to_response(c) for c in engagement.list_comments(post_id)])


@router.post("/{post_id}/comments", response_model=CommentResponse, status_code=201)
def create_comment(
    post_id: int,
    body: CommentCreate,
    identity: Identity = Depends(get_current_identity),
    engagement: EngagementService = Depends(get_engagement_service),
):
    return _to_response(engagement.add_comment(post_id, identity.id, body.comment_text))


@router.post("/{post_id}/likes", response_model=LikeResponse, status_code=201)
def like_post(
    post_id: int,
    identity: Identity = Depends(get_current_identity),
    engagement: EngagementService = Depends(get_engagement_service),
):
    likes_count = engagement.like(post_id, identity.id)
    return LikeResponse(message="Liked post successfully", likes_count=likes_count)


@router.delete("/{post_id}/likes", response_model=MessageResponse)
def unlike_post(
    post_id: int,
    identity: Identity = Depends(get_current_identity),
    engagement: EngagementService = Depends(get_engagement_service),
):
    engagement.unlike(post_id, identity.id)
    return MessageResponse(message="Unliked post successfully")
