from typing import Optional

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from ....db.models import Category, Post

LIKE_ESCAPE = "\\"


def _contains(value: str) -> str:
    """Substring pattern with LIKE wildcards in the user input taken literally."""
    for char in (LIKE_ESCAPE, "%", "_"):
        value = value.replace(char, LIKE_ESCAPE + char)
    return f"%{value}%"


def build_post_filter(category: Optional[str], keyword: Optional[str]) -> Optional[ColumnElement]:
    """WHERE clause for the post listing and its count.

    The category restricts the keyword search rather than widening it. Both
    values travel as bound parameters. Returns None when no filter applies.
    """
    clauses = []
    if category:
        clauses.append(Category.name.ilike(_contains(category), escape=LIKE_ESCAPE))
    if keyword:
        pattern = _contains(keyword)
        clauses.append(or_(
            Post.title.ilike(pattern, escape=LIKE_ESCAPE),
            Post.description.ilike(pattern, escape=LIKE_ESCAPE),
            Post.content.ilike(pattern, escape=LIKE_ESCAPE),
        ))
    if not clauses:
        return None
    return and_(*clauses)
