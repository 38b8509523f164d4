from dataclasses import dataclass
from typing import Any, List, Optional
import logging

from ..ports.post_repo import PostRepository, PostDto
from ..pagination import normalize_limit, normalize_page, page_offset, total_pages
from ...exceptions import store_boundary

logger = logging.getLogger(__name__)

READ_FAILED = "Server could not read post because database connection"


@dataclass
class PostPage:
    items: List[PostDto]
    total_items: int
    total_pages: int
    current_page: int
    limit: int
    next_page: Optional[int] = None
    previous_page: Optional[int] = None


@dataclass
class PostSearchService:
    """Filtered, newest-first post listing with a matching total count."""

    repo: PostRepository
    default_limit: int = 6
    max_limit: int = 100

    def search(self, category: Optional[str] = None, keyword: Optional[str] = None,
               page: Any = None, limit: Any = None) -> PostPage:
        # Empty strings behave exactly like omitted filters
        category = category or None
        keyword = keyword or None
        safe_page = normalize_page(page)
        safe_limit = normalize_limit(limit, self.default_limit, self.max_limit)
        offset = page_offset(safe_page, safe_limit)

        with store_boundary(READ_FAILED):
            total = self.repo.count(category, keyword)
            # Pages past the end are empty; skip the listing so huge offsets never reach the store
            items = self.repo.search(category, keyword, safe_limit, offset) if offset < total else []

        logger.debug(f"Post search category={category!r} keyword={keyword!r} page={safe_page} total={total}")

        result = PostPage(
            items=items,
            total_items=total,
            total_pages=total_pages(total, safe_limit),
            current_page=safe_page,
            limit=safe_limit,
        )
        if offset + safe_limit < total:
            result.next_page = safe_page + 1
        if offset > 0:
            result.previous_page = safe_page - 1
        return result
