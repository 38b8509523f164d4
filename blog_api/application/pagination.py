import math
from typing import Any, Optional


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def normalize_page(page: Any) -> int:
    """Missing, non-numeric and non-positive pages all mean the first page."""
    number = _to_int(page)
    if not number or number < 1:
        return 1
    return number


def normalize_limit(limit: Any, default: int, maximum: int) -> int:
    number = _to_int(limit)
    if not number:
        number = default
    return max(1, min(maximum, number))


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)
