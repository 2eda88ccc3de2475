"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import build_comment_tree, count_nodes, walk
from .gif_service import GifService
from .post_service import PostService

__all__ = [
    "CommentService",
    "GifService",
    "PostService",
    "Service",
    "build_comment_tree",
    "count_nodes",
    "walk",
]
