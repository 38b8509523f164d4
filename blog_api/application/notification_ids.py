"""Identity rules for feed entries.

Both the feed builder and read-marker creation go through this module, so a
marker always carries exactly the id the feed produced.
"""
from typing import Optional

COMMENT = "comment"
LIKE = "like"
KINDS = (COMMENT, LIKE)


def comment_notification_id(comment_id: int) -> str:
    return f"{COMMENT}-{comment_id}"


def like_notification_id(post_id: int, like_id: int) -> str:
    return f"{LIKE}-{post_id}-{like_id}"


def notification_kind(notification_id: str) -> Optional[str]:
    """Return the kind encoded in ``notification_id`` or None if it is not one of ours."""
    if not notification_id:
        return None
    parts = notification_id.split("-")
    kind = parts[0]
    if kind == COMMENT and len(parts) == 2 and parts[1].isdigit():
        return kind
    if kind == LIKE and len(parts) == 3 and parts[1].isdigit() and parts[2].isdigit():
        return kind
    return None
