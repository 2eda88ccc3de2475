"""Domain value objects for the feed."""

from feed.domain.value.identifiers import CommentId, PostId

__all__ = [
    "CommentId",
    "PostId",
]
