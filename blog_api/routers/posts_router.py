from typing import Optional
from fastapi import APIRouter, Depends, Query
import logging

from ..application.ports.identity_provider import Identity
from ..application.ports.post_repo import PostDto, PostInput
from ..application.services.post_search_service import PostSearchService
from ..application.services.post_service import PostService
from ..dependencies import get_post_search_service, get_post_service, require_admin
from ..schemas.common.common import MessageResponse
from ..schemas.posts.post import (
    PostCreate,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
    PostUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["Posts"])


def _to_response(p: PostDto) -> PostResponse:
    return PostResponse(
        id=p.id,
        image=p.image,
        category=p.category,
        title=p.title,
        description=p.description,
        date=p.date,
        content=p.content,
        status=p.status,
        likes_count=p.likes_count,
    )


def _to_input(body: PostCreate) -> PostInput:
    return PostInput(
        title=body.title,
        image=body.image,
        category_id=body.category_id,
        description=body.description,
        content=body.content,
        status_id=body.status_id,
    )


@router.post("", response_model=MessageResponse, status_code=201)
def create_post(
    body: PostCreate,
    admin: Identity = Depends(require_admin),
    posts: PostService = Depends(get_post_service),
):
    post_id = posts.create(_to_input(body))
    logger.info(f"Post {post_id} created by {admin.id}")
    return MessageResponse(message="Created post successfully")


# page/limit arrive as raw strings; the service normalizes anything unusable
@router.get("", response_model=PostListResponse, response_model_exclude_unset=True)
def list_posts(
    category: Optional[str] = Query(None),
    keyword: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    search: PostSearchService = Depends(get_post_search_service),
):
    result = search.search(category=category, keyword=keyword, page=page, limit=limit)
    body = {
        "items": [_to_response(p) for p in result.items],
        "totalItems": result.total_items,
        "totalPages": result.total_pages,
        "currentPage": result.current_page,
        "limit": result.limit,
    }
    if result.next_page is not None:
        body["nextPage"] = result.next_page
    if result.previous_page is not None:
        body["previousPage"] = result.previous_page
    return PostListResponse(**body)


@router.get("/{post_id}", response_model=PostDetailResponse)
def get_post(post_id: int, posts: PostService = Depends(get_post_service)):
    return PostDetailResponse(data=_to_response(posts.get(post_id)))


@router.put("/{post_id}", response_model=MessageResponse)
def update_post(
    post_id: int,
    body: PostUpdate,
    admin: Identity = Depends(require_admin),
    posts: PostService = Depends(get_post_service),
):
    posts.update(post_id, _to_input(body))
    return MessageResponse(message="Updated post successfully")


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: int,
    admin: Identity = Depends(require_admin),
    posts: PostService = Depends(get_post_service),
):
    posts.delete(post_id)
    logger.info(f"Post {post_id} deleted by {admin.id}")
    return MessageResponse(message="Deleted post successfully")
