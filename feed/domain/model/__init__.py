"""Domain model entities for the feed."""

from feed.domain.model.comment import Comment, CommentDraft, CommentNode
from feed.domain.model.gif import Gif
from feed.domain.model.post import Post, PostDraft

__all__ = [
    "Comment",
    "CommentDraft",
    "CommentNode",
    "Gif",
    "Post",
    "PostDraft",
]
