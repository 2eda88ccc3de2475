"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Optional

import logfire

from feed.domain.model.comment import Comment
from feed.domain.value import CommentId, PostId

# Keep spans and logs local during tests
logfire.configure(send_to_logfire=False, console=False)

_BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_comment(
    comment_id: str,
    parent_id: Optional[str] = None,
    post_id: str = "p1",
    text: Optional[str] = None,
    offset: int = 0,
) -> Comment:
    """Helper to build stored comments for tree and aggregator tests.

    Args:
        comment_id: Comment ID
        parent_id: Optional parent comment ID
        post_id: Post ID
        text: Text content (defaults to "comment <id>")
        offset: Seconds added to a fixed base time

    Returns:
        Comment value
    """
    return Comment(
        id=CommentId(comment_id),
        post_id=PostId(post_id),
        parent_id=CommentId(parent_id) if parent_id else None,
        text=text if text is not None else f"comment {comment_id}",
        created_at=_BASE_TIME + timedelta(seconds=offset),
    )
